from pydantic_settings import SettingsConfigDict

from common.config import ExporterSettings


class Settings(ExporterSettings):
    model_config = SettingsConfigDict(env_prefix='JHP_')

    LISTEN_ADDRESS: str = ':9679'
    UPSTREAM_URL: str = 'https://corona.lmao.ninja/jhucsse'
    USER_AGENT: str = 'Covid19 stats prometheus exporter'

    SERVICE_NAME: str = 'covid19-jhp-exporter'


settings = Settings()
