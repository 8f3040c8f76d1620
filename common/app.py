from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
import logging
from typing import Any

from fastapi import FastAPI

from common.exporter import Exporter
from common.fetcher import UpstreamFetcher
from common.router import router as exporter_router

logger = logging.getLogger(__name__)


def create_app(
    title: str,
    exporter: Exporter[Any],
    landing_page: str,
    fetcher: UpstreamFetcher | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        if fetcher is not None:
            await fetcher.start()
        logger.info('Exporter started', extra={'namespace': exporter.namespace})
        try:
            yield
        finally:
            logger.info('Shutting down...')
            if fetcher is not None:
                await fetcher.stop()
            logger.info('Shutdown complete')

    app = FastAPI(
        title=title, lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None
    )
    app.state.exporter = exporter
    app.state.landing_page = landing_page
    app.include_router(exporter_router)
    return app
