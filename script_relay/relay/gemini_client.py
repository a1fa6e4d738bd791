"""
Gemini generateContent client. One call, one model.
"""
import logging
import time
from urllib.parse import quote, quote_plus

import requests

from script_relay.metrics import upstream_latency
from script_relay.relay.errors import UpstreamError

logger = logging.getLogger(__name__)

# Fixed for every request; not configurable per call.
GENERATION_CONFIG = {
    'temperature': 0.7,
    'topK': 40,
    'topP': 0.95,
    'maxOutputTokens': 2048,
}


def build_payload(prompt: str) -> dict:
    return {
        'contents': [{
            'parts': [{'text': prompt}],
        }],
        'generationConfig': dict(GENERATION_CONFIG),
    }


def _redact(message: str, api_key: str | None) -> str:
    # requests puts the full URL (key included, urlencoded) into connection error messages
    if not api_key:
        return message
    for form in (api_key, quote_plus(api_key), quote(api_key, safe='')):
        message = message.replace(form, '***')
    return message


def extract_error_message(data) -> str | None:
    """Pull error.message out of a Gemini error body, if there is one."""
    if not isinstance(data, dict):
        return None
    error = data.get('error')
    if isinstance(error, dict) and error.get('message'):
        return str(error['message'])
    return None


def extract_text(data) -> str | None:
    """Return candidates[0].content.parts[0].text, or None if the shape doesn't match."""
    try:
        text = data['candidates'][0]['content']['parts'][0]['text']
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


def generate_content(base_url: str, model: str, api_key: str, prompt: str, timeout: float = 60) -> str:
    """
    Call generateContent on a single model and return the generated text.

    Every failure is raised as UpstreamError: transport errors, non-2xx
    status, unparseable bodies, and 2xx responses without text.
    """
    url = f"{base_url}/models/{model}:generateContent"

    start = time.time()
    try:
        resp = requests.post(
            url,
            params={'key': api_key},
            json=build_payload(prompt),
            headers={'Content-Type': 'application/json'},
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise UpstreamError(_redact(str(e), api_key), model=model) from e
    finally:
        upstream_latency.labels(model=model).observe(time.time() - start)

    try:
        data = resp.json()
    except (ValueError, RecursionError):
        data = None

    if not resp.ok:
        message = extract_error_message(data) or f"Error {resp.status_code}"
        raise UpstreamError(message, model=model, status_code=resp.status_code)

    if data is None:
        raise UpstreamError(
            f"Malformed response body (status {resp.status_code})",
            model=model,
            status_code=resp.status_code,
        )

    text = extract_text(data)
    if not text:
        raise UpstreamError('Empty response', model=model, status_code=resp.status_code)

    logger.debug(f"Gemini {model} response: {len(text)} chars")
    return text
