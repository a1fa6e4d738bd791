import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

# Server
PORT = int(os.getenv('PORT', 3000))

# LLM: Gemini (generativelanguage.googleapis.com)
GEMINI_API_KEY = os.getenv('GEMINI_API_KEY')
GEMINI_BASE_URL = os.getenv('GEMINI_BASE_URL', 'https://generativelanguage.googleapis.com/v1beta')

# Models to try, in order. First success wins.
DEFAULT_MODELS = (
    'gemini-1.5-flash',
    'gemini-1.5-flash-8b',
    'gemini-1.5-pro',
)
GEMINI_MODELS = os.getenv('GEMINI_MODELS', ','.join(DEFAULT_MODELS))

# Seconds per upstream call
UPSTREAM_TIMEOUT = float(os.getenv('UPSTREAM_TIMEOUT', 60))

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


def parse_models(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated model list, dropping blanks and repeats but keeping order."""
    if not raw:
        return DEFAULT_MODELS
    models = tuple(dict.fromkeys(m.strip() for m in raw.split(',') if m.strip()))
    return models or DEFAULT_MODELS


@dataclass(frozen=True)
class RelayConfig:
    api_key: str | None
    models: tuple[str, ...] = DEFAULT_MODELS
    base_url: str = 'https://generativelanguage.googleapis.com/v1beta'
    timeout: float = 60
    port: int = 3000

    @classmethod
    def from_env(cls) -> 'RelayConfig':
        """Snapshot the module settings. Built once at process start."""
        return cls(
            api_key=GEMINI_API_KEY or None,
            models=parse_models(GEMINI_MODELS),
            base_url=GEMINI_BASE_URL.rstrip('/'),
            timeout=UPSTREAM_TIMEOUT,
            port=PORT,
        )

    @property
    def key_is_set(self) -> bool:
        return bool(self.api_key)
