"""Census building and peak finding.

The pipeline is a one-way flow: raw records -> validated census -> peak
report. Every step returns a discriminated outcome instead of overloading an
empty collection as an error signal, so callers (CLI, tests, other
entry-points) can tell "no input" apart from "invalid input" without
inspecting the census.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence, Union

from core.domain.errors import (
    CensusValidationError,
    EmptyInputError,
    IssueKind,
    RecordIssue,
)
from core.domain.models import (
    MAX_YEAR,
    MIN_YEAR,
    Census,
    LiveliestYear,
    PeakReport,
    PersonRecord,
    ValidatedPerson,
)
from core.domain.policy import ValidationPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CensusBuilt:
    """Every record was valid; `census` may be empty only for empty input."""

    census: Census

    def unwrap(self) -> Census:
        return self.census


@dataclass(frozen=True)
class ValidationFailed:
    """At least one record was invalid; no census was produced."""

    issues: tuple[RecordIssue, ...] = field(default_factory=tuple)

    def unwrap(self) -> None:
        raise CensusValidationError(list(self.issues))


@dataclass(frozen=True)
class EmptyInput:
    """Zero records were supplied."""

    def unwrap(self) -> None:
        raise EmptyInputError()


@dataclass(frozen=True)
class PeakFound:
    """Successful analysis: the census and its peak report."""

    census: Census
    report: PeakReport

    def unwrap(self) -> PeakReport:
        return self.report


BuildOutcome = Union[CensusBuilt, ValidationFailed]
AnalysisOutcome = Union[PeakFound, EmptyInput, ValidationFailed]


def _in_range(year: int) -> bool:
    return MIN_YEAR <= year <= MAX_YEAR


def validate_record(index: int, record: PersonRecord) -> ValidatedPerson | RecordIssue:
    """Apply the checks in fixed order; the first failing one wins."""

    name = record.name
    if name is None:
        return RecordIssue(kind=IssueKind.MISSING_NAME, index=index, field="name")
    if not name.strip():
        return RecordIssue(kind=IssueKind.EMPTY_NAME, index=index, field="name", value=name)

    birth, death = record.birth_year, record.death_year
    if birth is None or death is None:
        missing = [
            label
            for label, value in (("birthYear", birth), ("deathYear", death))
            if value is None
        ]
        return RecordIssue(
            kind=IssueKind.MISSING_YEARS,
            index=index,
            name=name,
            field=" and ".join(missing),
        )

    if not _in_range(birth):
        return RecordIssue(
            kind=IssueKind.BIRTH_YEAR_OUT_OF_RANGE,
            index=index,
            name=name,
            field="birthYear",
            value=birth,
        )
    if not _in_range(death):
        return RecordIssue(
            kind=IssueKind.DEATH_YEAR_OUT_OF_RANGE,
            index=index,
            name=name,
            field="deathYear",
            value=death,
        )
    if death < birth:
        return RecordIssue(
            kind=IssueKind.DEATH_BEFORE_BIRTH,
            index=index,
            name=name,
            field="deathYear",
            value=f"{birth} - {death}",
        )

    return ValidatedPerson(name=name, birth_year=birth, death_year=death)


def build_census(
    records: Sequence[PersonRecord],
    *,
    policy: ValidationPolicy | None = None,
) -> BuildOutcome:
    """Validate `records` as one batch and build the year -> names census.

    Without `policy`, `ValidationPolicy.default()` applies. With `FAIL_FAST`
    the first invalid record stops the pass. With `COLLECT_ALL` every record
    is checked and every issue reported. In both cases a single invalid
    record means no census at all.
    """

    policy = policy or ValidationPolicy.default()
    names_by_year: dict[int, list[str]] = {}
    issues: list[RecordIssue] = []

    for index, record in enumerate(records):
        checked = validate_record(index, record)
        if isinstance(checked, RecordIssue):
            logger.warning(checked.message)
            issues.append(checked)
            if policy is ValidationPolicy.FAIL_FAST:
                break
            continue

        if issues:
            # Ya no habrá censo; solo seguimos validando.
            continue

        for year in checked.years_alive():
            names_by_year.setdefault(year, []).append(checked.name)

    if issues:
        logger.info("Census rejected: %d invalid record(s) (%s)", len(issues), policy.label())
        return ValidationFailed(issues=tuple(issues))

    census = Census(years={year: tuple(names) for year, names in names_by_year.items()})
    logger.debug("Census built from %d record(s) covering %d year(s)", len(records), len(census.years))
    return CensusBuilt(census=census)


def find_peak(census: Census) -> PeakReport:
    """Find the maximum occupancy and every year reaching it (ascending)."""

    max_count = 0
    liveliest: list[int] = []

    for year, names in census.items():
        count = len(names)
        if count == 0:
            continue
        if count > max_count:
            max_count = count
            liveliest = [year]
        elif count == max_count:
            liveliest.append(year)

    entries = tuple(LiveliestYear(year=year, names=census.names(year)) for year in liveliest)
    return PeakReport(max_count=max_count, entries=entries)


def analyze(
    records: Sequence[PersonRecord],
    *,
    policy: ValidationPolicy | None = None,
) -> AnalysisOutcome:
    """Run the full flow: empty-input check, census build, peak finding."""

    policy = policy or ValidationPolicy.default()
    if not records:
        logger.info("No records supplied")
        return EmptyInput()

    built = build_census(records, policy=policy)
    if isinstance(built, ValidationFailed):
        return built

    report = find_peak(built.census)
    logger.info(
        "Peak occupancy %d reached in %d year(s)",
        report.max_count,
        len(report.entries),
    )
    return PeakFound(census=built.census, report=report)
