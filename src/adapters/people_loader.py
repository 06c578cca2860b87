"""Carga de personas desde JSON (archivo local o URL).

Formato esperado: una lista de objetos
`{"name": str, "birthYear": int, "deathYear": int}`.

Errores:
- Fuente inexistente/ilegible o HTTP fallido -> `SourceUnavailableError`.
- JSON inválido o raíz que no es lista -> `MalformedSourceError`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import MalformedSourceError, SourceUnavailableError
from core.domain.models import PersonRecord
from core.interfaces.people_source import PeopleSource

logger = logging.getLogger(__name__)


def parse_people(text: str, *, source: str) -> list[PersonRecord]:
    """Convierte texto JSON en registros crudos (sin validar reglas de negocio)."""

    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedSourceError(source, str(exc)) from exc

    if not isinstance(data, list):
        raise MalformedSourceError(source, f"expected a JSON list, got {type(data).__name__}")

    return [PersonRecord.from_raw(item) for item in data]


class FilePeopleSource(PeopleSource):
    """Lee un archivo JSON local (UTF-8)."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def description(self) -> str:
        return str(self._path)

    def load(self) -> list[PersonRecord]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedSourceError(self.description, str(exc)) from exc
        except OSError as exc:
            raise SourceUnavailableError(self.description, str(exc)) from exc

        records = parse_people(raw, source=self.description)
        logger.debug("Loaded %d record(s) from %s", len(records), self.description)
        return records


class HttpPeopleSource(PeopleSource):
    """Descarga un JSON remoto con httpx."""

    def __init__(
        self,
        url: str,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def description(self) -> str:
        return self._url

    def load(self) -> list[PersonRecord]:
        try:
            with build_client(self._settings, transport=self._transport) as client:
                resp = client.get(self._url)
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise SourceUnavailableError(self._url, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise SourceUnavailableError(self._url, str(exc)) from exc

        records = parse_people(resp.text, source=self._url)
        logger.debug("Fetched %d record(s) from %s", len(records), self._url)
        return records


def source_for(source: str, settings: AppSettings | None = None) -> PeopleSource:
    """Elige la implementación según el esquema (`http(s)://` o ruta)."""

    if source.lower().startswith(("http://", "https://")):
        return HttpPeopleSource(source, settings)
    return FilePeopleSource(Path(source))


def load_people(source: str, settings: AppSettings | None = None) -> list[PersonRecord]:
    return source_for(source, settings).load()
