# gp_relay/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from gp_relay.api.gp import cors_method_not_allowed, cors_router
from gp_relay.api.gp import router as gp_router
from gp_relay.config import RelaySettings
from gp_relay.upstream.client import UpstreamFetcher

logger = logging.getLogger(__name__)


def create_app(settings: Optional[RelaySettings] = None) -> FastAPI:
    settings = settings or RelaySettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One shared client per running app, opened and closed with it
        app.state.fetcher = UpstreamFetcher(settings.upstream_url)
        try:
            yield
        finally:
            app.state.fetcher.close()

    app = FastAPI(
        title="Starlink GP Relay",
        version="0.1.0",
        lifespan=lifespan,
    )

    if settings.cors:
        app.include_router(cors_router)
        app.add_exception_handler(405, cors_method_not_allowed)
    else:
        app.include_router(gp_router)

    logger.debug("Relay app built (cors=%s, upstream=%s)", settings.cors, settings.upstream_url)
    return app


app = create_app()
