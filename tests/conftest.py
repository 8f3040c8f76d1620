"""Shared test fixtures for all test modules."""

import asyncio
from collections.abc import Callable
from typing import Any

import httpx
import orjson
from prometheus_client.parser import text_string_to_metric_families
import pytest

from common.exporter import Exporter
from jhp import config as jhp_config
from jhp import service as jhp_service
from jhp.schemas import JhuLocation
from mx import config as mx_config
from mx import service as mx_service
from mx.schemas import MexicoCase


class StubFetcher:
    """Fetcher double returning (or raising) whatever ``payload`` holds."""

    def __init__(self, payload: Any = None, delay: float = 0.0) -> None:
        self.payload: Any = [] if payload is None else payload
        self.delay = delay
        self.calls = 0
        self.events: list[str] = []

    async def fetch(self) -> bytes:
        self.calls += 1
        self.events.append('fetch_start')
        if self.delay:
            await asyncio.sleep(self.delay)
        self.events.append('fetch_end')
        if isinstance(self.payload, Exception):
            raise self.payload
        if isinstance(self.payload, bytes):
            return self.payload
        return orjson.dumps(self.payload)


@pytest.fixture
def stub_fetcher() -> StubFetcher:
    return StubFetcher()


@pytest.fixture
def jhu_location() -> Callable[..., dict[str, Any]]:
    """Factory for one upstream element of the Johns Hopkins feed."""

    def _location(
        country: str = 'X',
        province: str = '',
        city: str = '',
        confirmed: Any = '10',
        deaths: Any = '2',
        latitude: Any = '1.0',
        longitude: Any = '2.0',
    ) -> dict[str, Any]:
        return {
            'country': country,
            'province': province,
            'city': city,
            'updatedAt': '',
            'stats': {'confirmed': confirmed, 'deaths': deaths, 'recovered': 0},
            'coordinates': {'latitude': latitude, 'longitude': longitude},
        }

    return _location


@pytest.fixture
def mexico_case() -> Callable[..., dict[str, Any]]:
    """Factory for one upstream element of the Mexican case report."""

    def _case(
        case_id: Any = 1,
        state: str = 'Ciudad de México',
        sex: str = 'M',
        age: Any = 35,
        symptoms: str = '22/02/2020',
        arrived_from: str = 'Italia',
        entry: str = '22/02/2020',
    ) -> dict[str, Any]:
        return {
            'n0_caso': case_id,
            'estado': state,
            'sexo': sex,
            'edad': age,
            'fecha_de_inicio_de_sintomas': symptoms,
            'identificacion_de_covid_19_por_rt_pcrsecuencia_de_dna': 'Confirmado',
            'procedencia': arrived_from,
            'fecha_del_llegada_a_mexico': entry,
        }

    return _case


@pytest.fixture
def make_jhp_exporter(
    stub_fetcher: StubFetcher,
) -> Callable[..., Exporter[JhuLocation]]:
    def _make(**overrides: Any) -> Exporter[JhuLocation]:
        settings = jhp_config.Settings(**overrides)
        return jhp_service.build_exporter(settings, stub_fetcher)

    return _make


@pytest.fixture
def jhp_exporter(make_jhp_exporter) -> Exporter[JhuLocation]:
    return make_jhp_exporter()


@pytest.fixture
def mx_exporter(stub_fetcher: StubFetcher) -> Exporter[MexicoCase]:
    return mx_service.build_exporter(mx_config.Settings(), stub_fetcher)


@pytest.fixture
def exposition_samples() -> Callable[[bytes | str, str], dict[tuple, float]]:
    """Parse exposition text into ``{sorted label items: value}`` for one family."""

    def _samples(payload: bytes | str, family: str) -> dict[tuple, float]:
        text = payload.decode('utf-8') if isinstance(payload, bytes) else payload
        return {
            tuple(sorted(sample.labels.items())): sample.value
            for metric in text_string_to_metric_families(text)
            if metric.name == family
            for sample in metric.samples
        }

    return _samples


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Usage:
        async def test_something(asgi_test_client):
            async with asgi_test_client(app) as client:
                response = await client.get('/metrics')
    """

    def _get_client(app):
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url='http://test'
        )

    return _get_client
