import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST

from common.exporter import Exporter

logger = logging.getLogger(__name__)
router = APIRouter()


def get_exporter(request: Request) -> Exporter[Any]:
    return request.app.state.exporter


@router.get('/', response_class=HTMLResponse)
async def landing_page(request: Request) -> HTMLResponse:
    return HTMLResponse(request.app.state.landing_page)


@router.get('/metrics')
async def metrics(
    exporter: Annotated[Exporter[Any], Depends(get_exporter)],
) -> Response:
    result, payload = await exporter.scrape()
    if not result.ok:
        logger.warning(
            'Scrape failed, answering 503',
            extra={'namespace': exporter.namespace, 'error': result.error},
        )
        return PlainTextResponse(
            f'collect cycle failed: {result.error}\n', status_code=503
        )
    return Response(content=payload, media_type=CONTENT_TYPE_LATEST)


@router.get('/health')
async def health_check() -> dict[str, str]:
    logger.debug('Health check...')
    return {'status': 'ok'}
