"""
Generation relay core logic. Framework-agnostic, called by main.py.

Tries each configured model in order and returns the first generated
text. Per-model failures are logged and swallowed; only the last one's
message reaches the caller, and only if every model fails.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Iterator

from script_relay.config import RelayConfig
from script_relay.metrics import upstream_attempts, relay_requests
from script_relay.relay.errors import ConfigurationError, ExhaustionError, UpstreamError
from script_relay.relay.gemini_client import generate_content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attempt:
    model: str
    text: str | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GenerationRelay:
    def __init__(self, config: RelayConfig, generate_fn: Callable[..., str] = generate_content):
        self.config = config
        self.generate_fn = generate_fn

    def attempts(self, prompt: str) -> Iterator[Attempt]:
        """
        Yield one Attempt per model, in order, stopping after the first success.
        Nothing is called until the iterator is consumed.
        """
        for model in self.config.models:
            try:
                text = self.generate_fn(
                    self.config.base_url,
                    model,
                    self.config.api_key,
                    prompt,
                    timeout=self.config.timeout,
                )
                if not text:
                    raise UpstreamError('Empty response', model=model)
            except Exception as e:
                upstream_attempts.labels(model=model, outcome='error').inc()
                logger.warning(f"Model {model} failed: {e}")
                yield Attempt(model=model, error=e)
                continue

            upstream_attempts.labels(model=model, outcome='success').inc()
            logger.info(f"Model {model} succeeded ({len(text)} chars)")
            yield Attempt(model=model, text=text)
            return

    def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Raises:
            ConfigurationError: no API key; no upstream is contacted
            ExhaustionError: every model failed; carries the last error
        """
        if not self.config.key_is_set:
            relay_requests.labels(outcome='config_error').inc()
            logger.error('GEMINI_API_KEY is not set, refusing to call upstream')
            raise ConfigurationError()

        last_error = None
        for attempt in self.attempts(prompt):
            if attempt.ok:
                relay_requests.labels(outcome='success').inc()
                return attempt.text
            last_error = attempt.error

        relay_requests.labels(outcome='exhausted').inc()
        logger.error(f"All {len(self.config.models)} models failed, last error: {last_error}")
        raise ExhaustionError(last_error)
