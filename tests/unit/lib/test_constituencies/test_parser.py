"""Unit tests for the area JSON parser."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from election_db.lib.constituencies.parser import (
    Area,
    AreaDecodeError,
    Candidate,
    load_area,
    load_areas,
    parse_area,
)
from election_db.lib.constituencies.walker import walk_constituencies


class TestParseArea:
    """Tests for parse_area()."""

    def test_full_area_parses(self, sample_area: dict) -> None:
        area = parse_area(sample_area)
        assert isinstance(area, Area)
        assert area.name == "Dublin Bay South"
        assert area.year == 2016
        assert area.valid == 44034
        assert area.counts_held == 9
        assert len(area.candidates) == 2

    def test_candidate_order_preserved(self, sample_area: dict) -> None:
        area = parse_area(sample_area)
        assert [c.full_name for c in area.candidates] == ["Eoghan Murphy", "Kevin Humphreys"]
        assert area.candidates[0].counts == [8161, 8285, 9125]

    def test_name_only_defaults_everything_else(self) -> None:
        area = parse_area({"name": "Test"})
        assert area.name == "Test"
        assert area.year == 0
        assert area.candidates == []
        assert area.area_type == ""
        assert area.description == ""
        assert area.election_type == ""
        for field in ("counts_held", "electorate", "quota", "spoilt", "turnout", "valid"):
            assert getattr(area, field) is None

    def test_empty_object_parses(self) -> None:
        assert parse_area({}) == Area()

    def test_candidate_defaults(self) -> None:
        candidate = parse_area({"candidates": [{}]}).candidates[0]
        assert candidate == Candidate()
        assert candidate.elected is False
        assert candidate.counts == []
        assert candidate.first_pref_pc is None
        assert candidate.transfers is None
        assert candidate.transfers_pc is None

    def test_nulls_resolve_to_zero_values(self) -> None:
        area = parse_area({"name": None, "year": None, "candidates": None, "valid": None})
        assert area.name == ""
        assert area.year == 0
        assert area.candidates == []
        assert area.valid is None

    def test_unknown_fields_ignored(self) -> None:
        area = parse_area({"name": "Test", "constituency_id": 12})
        assert "constituency_id" not in area.model_dump()

    def test_integer_percentage_becomes_float(self) -> None:
        candidate = parse_area({"candidates": [{"first_pref_pc": 20}]}).candidates[0]
        assert candidate.first_pref_pc == 20.0
        assert isinstance(candidate.first_pref_pc, float)

    @pytest.mark.parametrize(
        "raw",
        [
            {"name": 7},
            {"year": "2016"},
            {"valid": "44034"},
            {"valid": 440.5},
            {"candidates": {}},
            {"candidates": [{"elected": 1}]},
            {"candidates": [{"counts": ["12"]}]},
            {"candidates": [{"first_pref_pc": "18.5"}]},
        ],
    )
    def test_type_mismatch_raises(self, raw: dict) -> None:
        with pytest.raises(ValidationError):
            parse_area(raw)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_percentage_raises(self, value: float) -> None:
        with pytest.raises(ValidationError):
            parse_area({"candidates": [{"first_pref_pc": value}]})

    @pytest.mark.parametrize(
        "raw",
        [
            {"counts_held": 128},
            {"year": 40000},
            {"spoilt": -40000},
            {"valid": 2**31},
        ],
    )
    def test_integer_out_of_range_raises(self, raw: dict) -> None:
        with pytest.raises(ValidationError):
            parse_area(raw)


class TestLoadArea:
    """Tests for load_area()."""

    def test_loads_file(self, tmp_path: Path, sample_area: dict) -> None:
        path = tmp_path / "2016.json"
        path.write_text(json.dumps(sample_area), encoding="utf-8")
        area = load_area(path)
        assert area.valid == 44034
        assert area.candidates[1].transfers == 92

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(AreaDecodeError, match="couldn't open file") as exc_info:
            load_area(tmp_path / "missing.json")
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(AreaDecodeError, match="broken.json"):
            load_area(path)

    def test_non_object_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(AreaDecodeError):
            load_area(path)

    def test_ill_typed_field_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "2016.json"
        path.write_text('{"year": "2016"}', encoding="utf-8")
        with pytest.raises(AreaDecodeError):
            load_area(path)

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_percentage_raises(self, tmp_path: Path, literal: str) -> None:
        path = tmp_path / "2016.json"
        path.write_text(f'{{"candidates": [{{"first_pref_pc": {literal}}}]}}', encoding="utf-8")
        with pytest.raises(AreaDecodeError):
            load_area(path)

    def test_non_finite_transfer_percentage_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "2016.json"
        path.write_text('{"candidates": [{"transfers_pc": NaN}]}', encoding="utf-8")
        with pytest.raises(AreaDecodeError):
            load_area(path)


class TestLoadAreas:
    """Tests for load_areas()."""

    def test_concatenates_batches_in_folder_order(self, make_election_dir) -> None:
        election_dir = make_election_dir(
            files={
                "b-north": {"2016.json": {"name": "B North", "year": 2016}},
                "a-south": {
                    "2011.json": {"name": "A South", "year": 2011},
                    "2016.json": {"name": "A South", "year": 2016},
                },
            }
        )
        areas = load_areas(walk_constituencies(election_dir))
        assert [(a.name, a.year) for a in areas] == [("A South", 2011), ("A South", 2016), ("B North", 2016)]

    def test_first_bad_file_aborts(self, make_election_dir) -> None:
        election_dir = make_election_dir(
            files={
                "a-south": {"2016.json": {"name": "A South"}},
                "b-north": {"2016.json": "{oops"},
            }
        )
        with pytest.raises(AreaDecodeError, match="b-north"):
            load_areas(walk_constituencies(election_dir))
