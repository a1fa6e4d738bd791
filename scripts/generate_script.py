"""
Generate a script from the command line, using the same relay the API uses.
Handy for checking GEMINI_API_KEY and the model list without a browser.

Usage:
    python -m scripts.generate_script "Write a 30 second ad for a bakery"
    echo "Write a 30 second ad for a bakery" | python -m scripts.generate_script

Reads GEMINI_API_KEY / GEMINI_MODELS from .env like the server does.
"""
import logging
import sys

from script_relay import config
from script_relay.config import RelayConfig
from script_relay.relay.errors import RelayError
from script_relay.relay.relay import GenerationRelay


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=config.LOG_LEVEL)

    prompt = ' '.join(argv).strip() or sys.stdin.read().strip()
    if not prompt:
        print("ERROR: no prompt given", file=sys.stderr)
        return 1

    relay_config = RelayConfig.from_env()
    print(f"Trying models: {', '.join(relay_config.models)}", file=sys.stderr)

    try:
        script = GenerationRelay(relay_config).generate(prompt)
    except RelayError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(script)
    return 0


if __name__ == "__main__":
    sys.exit(main())
