from typing import Any

from pydantic import BaseModel, ConfigDict


def blank_if_none(value: Any) -> Any:
    return '' if value is None else value


class UpstreamRecord(BaseModel):
    """One element of an upstream JSON array.

    Subclasses declare the label fields (verbatim strings) and measurement
    fields (floats) of their feed and say how they map onto gauge labels.
    """

    model_config = ConfigDict(
        extra='ignore',
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    def label_values(self) -> tuple[str, ...]:
        raise NotImplementedError

    def measurements(self) -> dict[str, float]:
        raise NotImplementedError
