"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Normaliza registros heterogéneos (JSON de terceros) a una estructura común.

Nota:
- Estos modelos describen *qué* es un censo, no *cómo* se obtienen los datos.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping

from pydantic import BaseModel, Field, computed_field, field_serializer, field_validator, model_validator
from pydantic.config import ConfigDict

MIN_YEAR = 1900
MAX_YEAR = 2000


class PersonRecord(BaseModel):
    """Registro crudo de una persona, antes de validar.

    Por qué todos los campos son opcionales:
    - La ausencia y el tipo incorrecto deben poder representarse; el builder
      del censo decide qué error corresponde a cada caso.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    name: str | None = Field(
        default=None,
        description="Nombre de la persona (texto no vacío para ser válido).",
    )
    birth_year: int | None = Field(
        default=None,
        alias="birthYear",
        description="Año de nacimiento.",
    )
    death_year: int | None = Field(
        default=None,
        alias="deathYear",
        description="Año de defunción.",
    )

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_absent(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("birth_year", "death_year", mode="before")
    @classmethod
    def _year_or_absent(cls, value: Any) -> int | None:
        # bool es subclase de int: JSON `true` no es un año.
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    @classmethod
    def from_raw(cls, raw: Any) -> PersonRecord:
        """Construye un registro desde un elemento JSON arbitrario."""

        if not isinstance(raw, dict):
            return cls()
        return cls.model_validate(raw)


class ValidatedPerson(BaseModel):
    """Persona que superó todas las reglas de validación."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    birth_year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR)
    death_year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR)

    @model_validator(mode="after")
    def _ordered(self) -> ValidatedPerson:
        if self.death_year < self.birth_year:
            raise ValueError("death_year must not be earlier than birth_year")
        return self

    def years_alive(self) -> range:
        return range(self.birth_year, self.death_year + 1)


class Census(BaseModel):
    """Mapa año -> nombres vivos ese año (orden de inserción = orden de entrada).

    Invariante: cada año presente tiene al menos un nombre y está dentro de
    [MIN_YEAR, MAX_YEAR]. Un año sin ocupación simplemente no aparece.
    `years` es un mapping de solo lectura: el censo no cambia tras validarse.
    """

    model_config = ConfigDict(frozen=True)

    years: Mapping[int, tuple[str, ...]] = Field(default_factory=dict, validate_default=True)

    @field_validator("years")
    @classmethod
    def _check_years(cls, value: Mapping[int, tuple[str, ...]]) -> Mapping[int, tuple[str, ...]]:
        for year, names in value.items():
            if not MIN_YEAR <= year <= MAX_YEAR:
                raise ValueError(f"year {year} outside [{MIN_YEAR}, {MAX_YEAR}]")
            if not names:
                raise ValueError(f"year {year} has zero occupancy")
        return MappingProxyType(dict(sorted(value.items())))

    @field_serializer("years")
    def _dump_years(self, value: Mapping[int, tuple[str, ...]]) -> dict[int, tuple[str, ...]]:
        return dict(value)

    @property
    def is_empty(self) -> bool:
        return not self.years

    def occupancy(self, year: int) -> int:
        return len(self.years.get(year, ()))

    def names(self, year: int) -> tuple[str, ...]:
        return self.years.get(year, ())

    def items(self) -> Iterator[tuple[int, tuple[str, ...]]]:
        """Itera (año, nombres) en orden ascendente de año."""

        return iter(self.years.items())


class LiveliestYear(BaseModel):
    """Un año con ocupación máxima y los nombres vivos en él."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR)
    names: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.names)


class PeakReport(BaseModel):
    """Resultado del cálculo de pico: conteo máximo y años empatados.

    `entries` está ordenado ascendentemente por año.
    """

    model_config = ConfigDict(frozen=True)

    max_count: int = Field(default=0, ge=0)
    entries: tuple[LiveliestYear, ...] = Field(default_factory=tuple)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def liveliest_years(self) -> list[int]:
        return [entry.year for entry in self.entries]
