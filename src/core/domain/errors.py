"""Error taxonomy for census building and its collaborators.

Per-record problems are values (`RecordIssue`) so that a validation pass can
report one or many of them; the exceptions below wrap those values for
callers that prefer raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from core.domain.models import MAX_YEAR, MIN_YEAR


class IssueKind(str, Enum):
    """Per-record validation failure kinds, in check order."""

    MISSING_NAME = "missing_name"
    EMPTY_NAME = "empty_name"
    MISSING_YEARS = "missing_years"
    BIRTH_YEAR_OUT_OF_RANGE = "birth_year_out_of_range"
    DEATH_YEAR_OUT_OF_RANGE = "death_year_out_of_range"
    DEATH_BEFORE_BIRTH = "death_before_birth"


@dataclass(frozen=True)
class RecordIssue:
    """A single failed check on one input record."""

    kind: IssueKind
    # Posición 0-based en la lista; el mensaje numera desde 1.
    index: int
    name: str | None = None
    field: str | None = None
    value: Any = None

    @property
    def message(self) -> str:
        who = f"Person #{self.index + 1}"
        if self.name:
            who = f"{who} ({self.name})"

        if self.kind is IssueKind.MISSING_NAME:
            return f"{who} is missing a name."
        if self.kind is IssueKind.EMPTY_NAME:
            return f"{who} has an empty name."
        if self.kind is IssueKind.MISSING_YEARS:
            return f"{who} is missing {self.field}."
        if self.kind is IssueKind.BIRTH_YEAR_OUT_OF_RANGE:
            return f"{who} has birth year ({self.value}) out of valid range [{MIN_YEAR} - {MAX_YEAR}]."
        if self.kind is IssueKind.DEATH_YEAR_OUT_OF_RANGE:
            return f"{who} has death year ({self.value}) out of valid range [{MIN_YEAR} - {MAX_YEAR}]."
        return f"{who} died before being born ({self.value})."


class LiveliestError(Exception):
    """Base class for every error raised by this project."""


class SourceUnavailableError(LiveliestError):
    """The input source is missing or cannot be read."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Input {source} does not exist, or cannot be accessed at this time: {reason}")
        self.source = source
        self.reason = reason


class MalformedSourceError(LiveliestError):
    """The input source could be read but is not a JSON list of people."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Error parsing JSON input {source}: {reason}")
        self.source = source
        self.reason = reason


class EmptyInputError(LiveliestError):
    """Zero records were supplied."""

    def __init__(self) -> None:
        super().__init__("The input JSON was empty.")


class CensusValidationError(LiveliestError):
    """One or more records failed validation; no census was produced."""

    def __init__(self, issues: list[RecordIssue]) -> None:
        self.issues = list(issues)
        first = self.issues[0].message if self.issues else "validation failed"
        extra = len(self.issues) - 1
        suffix = f" (+{extra} more)" if extra > 0 else ""
        super().__init__(f"{first}{suffix}")
