from typing import Any

from pydantic import Field, field_validator

from common.schemas import UpstreamRecord, blank_if_none


class MexicoCase(UpstreamRecord):
    """One confirmed case of the Mexican daily report."""

    case_id: float = Field(alias='n0_caso')
    state: str = Field(default='', alias='estado')
    sex: str = Field(default='', alias='sexo')
    age: float = Field(alias='edad')
    date_symptoms_started: str = Field(default='', alias='fecha_de_inicio_de_sintomas')
    rt_pcr_identification: str = Field(
        default='', alias='identificacion_de_covid_19_por_rt_pcrsecuencia_de_dna'
    )
    arrived_from: str = Field(default='', alias='procedencia')
    entry_to_mx_date: str = Field(default='', alias='fecha_del_llegada_a_mexico')

    @field_validator(
        'state',
        'sex',
        'date_symptoms_started',
        'rt_pcr_identification',
        'arrived_from',
        'entry_to_mx_date',
        mode='before',
    )
    @classmethod
    def normalize_missing(cls, value: Any) -> Any:
        return blank_if_none(value)

    def label_values(self) -> tuple[str, ...]:
        return (
            self.state,
            self.sex,
            self.date_symptoms_started,
            self.arrived_from,
            self.entry_to_mx_date,
        )

    def measurements(self) -> dict[str, float]:
        return {'case_id': self.case_id, 'age': self.age}
