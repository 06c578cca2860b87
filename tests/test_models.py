import pytest
from pydantic import ValidationError

from core.domain.models import Census, LiveliestYear, PeakReport, PersonRecord, ValidatedPerson


class TestPersonRecord:
    def test_reads_wire_keys(self):
        record = PersonRecord.model_validate({"name": "Alice", "birthYear": 1950, "deathYear": 1960})
        assert record.name == "Alice"
        assert record.birth_year == 1950
        assert record.death_year == 1960

    def test_accepts_snake_case_keys(self):
        record = PersonRecord.model_validate({"name": "Alice", "birth_year": 1950, "death_year": 1960})
        assert (record.birth_year, record.death_year) == (1950, 1960)

    @pytest.mark.parametrize(
        "raw",
        [
            {"name": 42, "birthYear": "1950", "deathYear": True},
            {"name": None, "birthYear": None, "deathYear": None},
            {"name": ["Alice"], "birthYear": 1950.5, "deathYear": {}},
        ],
    )
    def test_wrong_types_become_absent(self, raw):
        record = PersonRecord.model_validate(raw)
        assert record.name is None
        assert record.birth_year is None
        assert record.death_year is None

    def test_unknown_keys_are_ignored(self):
        record = PersonRecord.model_validate({"name": "A", "birthYear": 1900, "deathYear": 1900, "x": 1})
        assert record.name == "A"

    @pytest.mark.parametrize("raw", ["Alice", 3, None, ["Alice", 1950, 1960]])
    def test_from_raw_non_object(self, raw):
        assert PersonRecord.from_raw(raw) == PersonRecord()


class TestValidatedPerson:
    def test_years_alive_is_inclusive(self):
        person = ValidatedPerson(name="A", birth_year=1990, death_year=1992)
        assert list(person.years_alive()) == [1990, 1991, 1992]

    @pytest.mark.parametrize(
        "birth,death",
        [(1899, 1950), (1950, 2001), (1970, 1960)],
    )
    def test_rejects_invalid_lifespans(self, birth, death):
        with pytest.raises(ValidationError):
            ValidatedPerson(name="A", birth_year=birth, death_year=death)


class TestCensus:
    def test_keys_are_sorted(self):
        census = Census(years={1960: ("B",), 1950: ("A",)})
        assert list(census.years) == [1950, 1960]
        assert [year for year, _ in census.items()] == [1950, 1960]

    def test_rejects_zero_occupancy_year(self):
        with pytest.raises(ValidationError):
            Census(years={1950: ()})

    def test_rejects_year_out_of_range(self):
        with pytest.raises(ValidationError):
            Census(years={1850: ("A",)})

    def test_occupancy_of_absent_year_is_zero(self):
        census = Census(years={1950: ("A", "B")})
        assert census.occupancy(1950) == 2
        assert census.occupancy(1951) == 0
        assert census.names(1951) == ()

    def test_empty(self):
        assert Census().is_empty
        assert not Census(years={1950: ("A",)}).is_empty

    def test_is_immutable(self):
        census = Census(years={1950: ("A",)})
        with pytest.raises(ValidationError):
            census.years = {}

    def test_years_mapping_is_read_only(self):
        census = Census(years={1950: ("A",)})
        with pytest.raises(TypeError):
            census.years[1850] = ("x",)
        with pytest.raises(TypeError):
            census.years[1951] = ()
        with pytest.raises(TypeError):
            del census.years[1950]
        assert dict(census.years) == {1950: ("A",)}

    def test_source_dict_changes_do_not_leak(self):
        source = {1950: ("A",)}
        census = Census(years=source)
        source[1850] = ("ghost",)
        assert 1850 not in census.years

    def test_default_census_is_read_only(self):
        with pytest.raises(TypeError):
            Census().years[1950] = ("A",)

    def test_dump_is_plain_dict(self):
        assert Census(years={1950: ("A",)}).model_dump() == {"years": {1950: ("A",)}}


def test_peak_report_dump_includes_liveliest_years():
    report = PeakReport(
        max_count=1,
        entries=(LiveliestYear(year=1900, names=("A",)), LiveliestYear(year=1901, names=("A",))),
    )
    dumped = report.model_dump(mode="json")
    assert dumped["liveliest_years"] == [1900, 1901]
    assert dumped["entries"][0] == {"year": 1900, "names": ["A"]}
