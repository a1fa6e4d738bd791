import pytest

from script_relay.config import RelayConfig
from script_relay.relay.errors import UpstreamError

TEST_MODELS = ('model-a', 'model-b', 'model-c')


class FakeUpstream:
    """
    Stands in for gemini_client.generate_content.

    Each call pops the next outcome: a str is returned, an exception is
    raised. Calls beyond the scripted outcomes fail with UpstreamError.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def __call__(self, base_url, model, api_key, prompt, timeout=60):
        self.calls.append({'model': model, 'api_key': api_key, 'prompt': prompt, 'timeout': timeout})
        if not self.outcomes:
            raise UpstreamError('unscripted call', model=model)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def models_called(self):
        return [c['model'] for c in self.calls]


@pytest.fixture
def relay_config():
    return RelayConfig(
        api_key='server-key',
        models=TEST_MODELS,
        base_url='https://upstream.test/v1beta',
        timeout=5,
    )


@pytest.fixture
def no_key_config(relay_config):
    return RelayConfig(api_key=None, models=relay_config.models, base_url=relay_config.base_url)


@pytest.fixture
def make_upstream():
    return FakeUpstream
