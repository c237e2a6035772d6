# serve.py
"""
Start the relay on the fixed port.

Usage example:
    python serve.py            # CORS-aware relay
    python serve.py --no-cors  # plain relay, GET only
"""

import argparse
import logging

import uvicorn

from gp_relay.config import RelaySettings
from gp_relay.main import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Relay the CelesTrak Starlink GP feed")
    parser.add_argument(
        "--no-cors",
        action="store_true",
        help="serve the plain relay without CORS headers or preflight handling",
    )
    args = parser.parse_args()

    settings = RelaySettings(cors=not args.no_cors)
    app = create_app(settings)

    logger.info(
        "Relaying %s on %s:%s (cors=%s)",
        settings.upstream_url,
        settings.host,
        settings.port,
        settings.cors,
    )
    # uvicorn logs a bind failure and exits with status 1
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
