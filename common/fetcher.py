import logging
from typing import Protocol

import aiohttp

from common.errors import UpstreamFetchError

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    async def fetch(self) -> bytes: ...


class UpstreamFetcher:
    def __init__(
        self,
        url: str,
        user_agent: str,
        timeout: float | None = None,
    ) -> None:
        self.url = url
        self.user_agent = user_agent
        self.timeout = timeout

        self._session: aiohttp.ClientSession | None = None

    async def start(self) -> None:
        if self._session is not None:
            logger.debug('Upstream session already initialized')
            return

        logger.info(
            'Initializing upstream session',
            extra={'url': self.url, 'timeout': self.timeout},
        )
        self._session = aiohttp.ClientSession(
            headers={'User-Agent': self.user_agent},
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        )

    async def stop(self) -> None:
        if self._session:
            logger.info('Closing upstream session')
            await self._session.close()
            self._session = None

    async def fetch(self) -> bytes:
        if self._session is None:
            raise RuntimeError('Upstream fetcher not started')

        try:
            async with self._session.get(self.url) as response:
                if response.status >= 400:
                    logger.warning(
                        'Upstream answered with an error status',
                        extra={'url': self.url, 'status': response.status},
                    )
                body = await response.read()
        except (aiohttp.ClientError, TimeoutError) as e:
            raise UpstreamFetchError(self.url, str(e) or type(e).__name__) from e

        logger.debug(
            'Fetched upstream payload', extra={'url': self.url, 'bytes': len(body)}
        )
        return body
