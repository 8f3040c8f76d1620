from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from common.schemas import UpstreamRecord, blank_if_none


class Stats(BaseModel):
    model_config = ConfigDict(extra='ignore', frozen=True)

    confirmed: float
    deaths: float
    recovered: float | str | None = None


class Coordinates(BaseModel):
    model_config = ConfigDict(extra='ignore', frozen=True, coerce_numbers_to_str=True)

    latitude: str = ''
    longitude: str = ''

    @field_validator('latitude', 'longitude', mode='before')
    @classmethod
    def normalize_missing(cls, value: Any) -> Any:
        return blank_if_none(value)


class JhuLocation(UpstreamRecord):
    """One location of the Johns Hopkins CSSE feed."""

    country: str = ''
    province: str = ''
    city: str = ''
    updated_at: str = Field(default='', alias='updatedAt')
    stats: Stats
    coordinates: Coordinates = Field(default_factory=Coordinates)

    @field_validator('country', 'province', 'city', 'updated_at', mode='before')
    @classmethod
    def normalize_missing(cls, value: Any) -> Any:
        return blank_if_none(value)

    @field_validator('coordinates', mode='before')
    @classmethod
    def normalize_missing_coordinates(cls, value: Any) -> Any:
        return {} if value is None else value

    def label_values(self) -> tuple[str, ...]:
        return (
            self.country,
            self.province,
            self.city,
            self.coordinates.latitude,
            self.coordinates.longitude,
        )

    def measurements(self) -> dict[str, float]:
        return {'confirmed': self.stats.confirmed, 'deaths': self.stats.deaths}
