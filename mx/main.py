from collections.abc import Sequence
import logging

from common.app import create_app
from common.fetcher import UpstreamFetcher
from common.log_config_loader import setup_logging
from common.server import parse_args, serve
from mx.config import settings
from mx.service import LANDING_PAGE, TITLE, build_exporter

setup_logging(
    service_name=settings.SERVICE_NAME,
    level=settings.LOG_LEVEL,
    log_format=settings.LOG_FORMAT,
    version=settings.SERVICE_VERSION,
)

logger = logging.getLogger(__name__)

fetcher = UpstreamFetcher(
    url=settings.UPSTREAM_URL,
    user_agent=settings.USER_AGENT,
    timeout=settings.UPSTREAM_TIMEOUT,
)
exporter = build_exporter(settings, fetcher)
app = create_app(TITLE, exporter, LANDING_PAGE, fetcher=fetcher)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(TITLE, settings.LISTEN_ADDRESS, argv)
    logger.info(
        'Starting exporter',
        extra={
            'listen_address': args.listen_address,
            'upstream': settings.UPSTREAM_URL,
        },
    )
    serve('mx.main:app', args.listen_address)


if __name__ == '__main__':
    main()
