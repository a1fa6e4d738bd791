"""
Relay error taxonomy.

Only ConfigurationError and ExhaustionError ever reach the HTTP layer;
UpstreamError is per-candidate and recovered inside the fallback loop.
"""


class RelayError(Exception):
    pass


class ConfigurationError(RelayError):
    def __init__(self, message: str = 'API key not configured on server'):
        super().__init__(message)


class UpstreamError(RelayError):
    def __init__(self, message: str, model: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.model = model
        self.status_code = status_code


class ExhaustionError(RelayError):
    def __init__(self, last_error: Exception | None = None):
        self.last_error = last_error
        detail = str(last_error) if last_error is not None else ''
        super().__init__(f"Could not generate script. {detail}".strip())
