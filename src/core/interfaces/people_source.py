"""Contrato de las fuentes de personas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que la fuente (archivo local, URL, memoria en tests) sea
  intercambiable sin acoplar el Core a una implementación concreta.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import PersonRecord


@runtime_checkable
class PeopleSource(Protocol):
    """Contrato mínimo para un proveedor de registros.

    Reglas de diseño:
    - `load` es síncrono: el cálculo es un batch de una sola pasada.
    - Errores de acceso o de formato se levantan como excepciones de
      `core.domain.errors`, nunca como una lista vacía.
    """

    @property
    def description(self) -> str:
        """Texto legible que identifica la fuente (ruta o URL)."""

        ...

    def load(self) -> list[PersonRecord]:
        """Lee la fuente y devuelve los registros en orden de entrada."""

        ...
