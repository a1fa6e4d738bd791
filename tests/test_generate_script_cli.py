import io

from scripts import generate_script
from script_relay.relay.errors import ExhaustionError, UpstreamError


class _StubRelay:
    def __init__(self, result):
        self.result = result
        self.prompts = []

    def __call__(self, config):
        return self

    def generate(self, prompt):
        self.prompts.append(prompt)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def test_prints_script_from_args(monkeypatch, capsys):
    relay = _StubRelay('FADE IN:')
    monkeypatch.setattr(generate_script, 'GenerationRelay', relay)

    assert generate_script.main(['a', 'heist', 'movie']) == 0

    assert relay.prompts == ['a heist movie']
    assert capsys.readouterr().out == 'FADE IN:\n'


def test_reads_prompt_from_stdin(monkeypatch, capsys):
    relay = _StubRelay('ok')
    monkeypatch.setattr(generate_script, 'GenerationRelay', relay)
    monkeypatch.setattr('sys.stdin', io.StringIO('from stdin\n'))

    assert generate_script.main([]) == 0
    assert relay.prompts == ['from stdin']


def test_relay_failure_exits_nonzero(monkeypatch, capsys):
    relay = _StubRelay(ExhaustionError(UpstreamError('quota exceeded')))
    monkeypatch.setattr(generate_script, 'GenerationRelay', relay)

    assert generate_script.main(['prompt']) == 1
    assert 'ERROR: Could not generate script. quota exceeded' in capsys.readouterr().err


def test_no_prompt_exits_nonzero(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO(''))

    assert generate_script.main([]) == 1
    assert 'no prompt given' in capsys.readouterr().err
