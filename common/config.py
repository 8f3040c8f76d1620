from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class StaleSeriesPolicy(str, Enum):
    RETAIN = 'retain'
    PRUNE = 'prune'


class InvalidRecordPolicy(str, Enum):
    FAIL = 'fail'
    SKIP = 'skip'


class ExporterSettings(BaseSettings):
    model_config = SettingsConfigDict(
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8',
        frozen=True,
        env_parse_none_str='none',
    )

    LISTEN_ADDRESS: str
    UPSTREAM_URL: str
    USER_AGENT: str
    UPSTREAM_TIMEOUT: float | None = 30.0

    STALE_SERIES_POLICY: StaleSeriesPolicy = StaleSeriesPolicy.RETAIN
    INVALID_RECORD_POLICY: InvalidRecordPolicy = InvalidRecordPolicy.FAIL

    SERVICE_NAME: str
    SERVICE_VERSION: str = '0.1.0'
    LOG_LEVEL: str = 'INFO'
    LOG_FORMAT: str = 'text'
