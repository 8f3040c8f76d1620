from pydantic_settings import SettingsConfigDict

from common.config import ExporterSettings


class Settings(ExporterSettings):
    model_config = SettingsConfigDict(env_prefix='MX_')

    LISTEN_ADDRESS: str = ':9677'
    UPSTREAM_URL: str = 'https://bridge.buddyweb.fr/api/covd19mx/latest'
    USER_AGENT: str = 'Covid19MX stats prometheus exporter'

    SERVICE_NAME: str = 'covid19-mx-exporter'


settings = Settings()
