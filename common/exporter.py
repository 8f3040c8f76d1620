"""Scrape-driven collect cycle shared by the exporters.

Each scrape of ``/metrics`` runs fetch -> parse -> publish against the
exporter's own ``CollectorRegistry`` and serializes that registry, all while
holding one ``asyncio.Lock``. Failures never escape as exceptions: they come
back as a failed ``CollectResult`` so the caller can fail just that scrape.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
import logging
from typing import Any, Generic, TypeVar

import orjson
from prometheus_client import CollectorRegistry, Gauge, generate_latest
from pydantic import ValidationError

from common.config import InvalidRecordPolicy, StaleSeriesPolicy
from common.errors import CollectError, InvalidRecordError, UpstreamDecodeError
from common.fetcher import Fetcher
from common.schemas import UpstreamRecord

logger = logging.getLogger(__name__)


RecordT = TypeVar('RecordT', bound=UpstreamRecord)


@dataclass(frozen=True)
class GaugeFamily:
    """One exported gauge, fed from the record measurement named ``field``."""

    field: str
    name: str
    documentation: str


@dataclass(frozen=True)
class CollectResult:
    ok: bool
    published: int = 0
    skipped: int = 0
    error: str | None = None


def decode_records(body: bytes) -> list[Any]:
    try:
        data = orjson.loads(body)
    except orjson.JSONDecodeError as e:
        raise UpstreamDecodeError(f'Upstream body is not valid JSON: {e}') from e
    if not isinstance(data, list):
        raise UpstreamDecodeError(
            f'Expected JSON array from upstream, got {type(data).__name__}'
        )
    return data


def _describe_validation_error(error: ValidationError) -> str:
    return '; '.join(
        f"{'.'.join(str(loc) for loc in err['loc']) or '<record>'}: {err['msg']}"
        for err in error.errors()
    )


class Exporter(Generic[RecordT]):
    def __init__(
        self,
        namespace: str,
        label_names: Sequence[str],
        families: Sequence[GaugeFamily],
        record_model: type[RecordT],
        fetcher: Fetcher,
        stale_series_policy: StaleSeriesPolicy = StaleSeriesPolicy.RETAIN,
        invalid_record_policy: InvalidRecordPolicy = InvalidRecordPolicy.FAIL,
        registry: CollectorRegistry | None = None,
    ) -> None:
        self.namespace = namespace
        self.label_names = tuple(label_names)
        self.record_model = record_model
        self.fetcher = fetcher
        self.stale_series_policy = stale_series_policy
        self.invalid_record_policy = invalid_record_policy
        self.registry = registry if registry is not None else CollectorRegistry()

        self._gauges: dict[str, Gauge] = {
            family.field: Gauge(
                family.name,
                family.documentation,
                self.label_names,
                namespace=namespace,
                registry=self.registry,
            )
            for family in families
        }
        self._lock = asyncio.Lock()

    def parse(self, body: bytes) -> tuple[list[RecordT], int]:
        """Validate every upstream element, returning records and a skip count."""
        records: list[RecordT] = []
        skipped = 0
        for index, item in enumerate(decode_records(body)):
            try:
                records.append(self.record_model.model_validate(item))
            except ValidationError as e:
                reason = _describe_validation_error(e)
                if self.invalid_record_policy is InvalidRecordPolicy.FAIL:
                    raise InvalidRecordError(index, reason) from e
                skipped += 1
                logger.warning(
                    'Skipping invalid upstream record',
                    extra={
                        'namespace': self.namespace,
                        'index': index,
                        'error': reason,
                    },
                )
        return records, skipped

    def publish(self, records: Sequence[UpstreamRecord]) -> None:
        if self.stale_series_policy is StaleSeriesPolicy.PRUNE:
            for gauge in self._gauges.values():
                gauge.clear()

        for record in records:
            labels = record.label_values()
            values = record.measurements()
            for field, gauge in self._gauges.items():
                gauge.labels(*labels).set(values[field])

    async def _collect(self) -> CollectResult:
        try:
            body = await self.fetcher.fetch()
            records, skipped = self.parse(body)
        except CollectError as e:
            logger.warning(
                'Collect cycle failed',
                extra={'namespace': self.namespace, 'error': str(e)},
            )
            return CollectResult(ok=False, error=str(e))

        self.publish(records)
        logger.debug(
            'Collect cycle finished',
            extra={
                'namespace': self.namespace,
                'published': len(records),
                'skipped': skipped,
            },
        )
        return CollectResult(ok=True, published=len(records), skipped=skipped)

    async def collect(self) -> CollectResult:
        async with self._lock:
            return await self._collect()

    async def scrape(self) -> tuple[CollectResult, bytes]:
        async with self._lock:
            result = await self._collect()
            return result, generate_latest(self.registry)
