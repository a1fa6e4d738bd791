"""
Script relay service, FastAPI app.
Runs on port 3000 (PORT).

Start with:
    uvicorn script_relay.relay.main:app --port 3000 --reload
or:
    script-relay
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from prometheus_client import make_asgi_app

from script_relay import config
from script_relay.config import RelayConfig
from script_relay.relay.errors import ConfigurationError, ExhaustionError
from script_relay.relay.relay import GenerationRelay

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    relay_config = RelayConfig.from_env()
    app.state.relay = GenerationRelay(relay_config)
    logger.info(
        f"Relay ready: models={', '.join(relay_config.models)}, "
        f"api key {'set' if relay_config.key_is_set else 'NOT set'}"
    )
    yield


app = FastAPI(title='Script Relay', version='0.1.0', lifespan=lifespan)

# Any origin may call the relay; the key never leaves the server
app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_methods=['*'],
    allow_headers=['*'],
)

# Expose /metrics endpoint for Prometheus scraping
app.mount('/metrics', make_asgi_app())


# --- Request / Response models ---

class GenerateScriptRequest(BaseModel):
    prompt: str
    # Accepted so existing frontends keep working, never used.
    # The server's own GEMINI_API_KEY is the only key sent upstream.
    apiKey: str | None = None


class GenerateScriptResponse(BaseModel):
    script: str


class ErrorResponse(BaseModel):
    error: str


# --- Dependencies ---

def get_relay(request: Request) -> GenerationRelay:
    relay = getattr(request.app.state, 'relay', None)
    if relay is None:
        relay = GenerationRelay(RelayConfig.from_env())
        request.app.state.relay = relay
    return relay


# --- Routes ---

@app.get('/health')
def health():
    return {'status': 'ok', 'service': 'script-relay'}


@app.post(
    '/api/generate-script',
    response_model=GenerateScriptResponse,
    responses={500: {'model': ErrorResponse}},
)
def generate_script(req: GenerateScriptRequest, relay: GenerationRelay = Depends(get_relay)):
    """
    Generate a script from a prompt, trying each configured model in order.

    - 200: {"script": ...}
    - 500: {"error": ...} when the API key is missing on the server, or every model failed
    """
    try:
        return GenerateScriptResponse(script=relay.generate(req.prompt))

    except (ConfigurationError, ExhaustionError) as e:
        return JSONResponse(status_code=500, content={'error': str(e)})

    except Exception:
        logger.exception('Unexpected error generating script')
        return JSONResponse(status_code=500, content={'error': 'Internal server error'})


def run():
    port = RelayConfig.from_env().port
    logger.info(f"Server running at http://localhost:{port}")
    uvicorn.run(app, host='0.0.0.0', port=port, log_level=config.LOG_LEVEL.lower())


if __name__ == '__main__':
    run()
