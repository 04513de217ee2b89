"""Tests for fixture value coercion and the fixture reader."""

from datetime import datetime

from pipelines.aggregates import stat_type_from_filename
from pipelines.extractors import FixtureExtractor
from pipelines.transformers import (
    optional_pid,
    parse_datetime,
    parse_flag,
    parse_float,
    parse_int,
    parse_score,
    zone_name,
)


class TestParseInt:
    def test_plain_values(self):
        assert parse_int(42) == 42
        assert parse_int("17") == 17
        assert parse_int(3.9) == 3

    def test_leading_number_of_decorated_string(self):
        """A not-out score keeps its runs."""
        assert parse_int("140*") == 140
        assert parse_int(" 87* ") == 87

    def test_unparseable_falls_back_to_default(self):
        assert parse_int("abc") == 0
        assert parse_int("") == 0
        assert parse_int(None) == 0
        assert parse_int("-", default=None) is None
        assert parse_int(float("nan"), default=None) is None

    def test_booleans_are_not_numbers(self):
        assert parse_int(True, default=None) is None


class TestParseFloat:
    def test_leading_decimal(self):
        assert parse_float("12.3 ov") == 12.3
        assert parse_float("7.75") == 7.75
        assert parse_float(4) == 4.0
        assert parse_float(".5") == 0.5

    def test_default(self):
        assert parse_float("n/a") is None
        assert parse_float(None, default=0.0) == 0.0


class TestParseScore:
    def test_runs_and_wickets(self):
        assert parse_score("178/5") == (178, 5)

    def test_bare_runs_means_no_wickets(self):
        assert parse_score("178") == (178, 0)

    def test_empty(self):
        assert parse_score(None) == (0, 0)
        assert parse_score("") == (0, 0)


class TestMiscTransformers:
    def test_parse_flag(self):
        assert parse_flag("true") is True
        assert parse_flag(True) is True
        assert parse_flag("false") is False
        assert parse_flag(1) is False
        assert parse_flag(None) is False

    def test_parse_datetime(self):
        assert parse_datetime("2022-05-29 14:30:00") == datetime(2022, 5, 29, 14, 30)
        assert parse_datetime("2022-05-29") == datetime(2022, 5, 29)
        assert parse_datetime("29/05/2022") is None
        assert parse_datetime("") is None

    def test_zone_name(self):
        assert zone_name(0) == "Fine Leg"
        assert zone_name("1") == "Square Leg"
        assert zone_name(7) == "3rd man"
        assert zone_name(8) is None
        assert zone_name(-1) is None
        assert zone_name(None) is None

    def test_optional_pid(self):
        assert optional_pid("201") == 201
        assert optional_pid(0) is None
        assert optional_pid("0") is None
        assert optional_pid("") is None
        assert optional_pid(None) is None

    def test_stat_type_from_filename(self):
        assert stat_type_from_filename("batting_stats/batting_most_runs.json", "batting_") == "most_runs"
        assert stat_type_from_filename("bowling_best_economy_rates.json", "bowling_") == "best_economy_rates"
        assert stat_type_from_filename("other.json", "batting_") == "other"


class TestFixtureExtractor:
    def test_reads_json(self, tmp_path):
        (tmp_path / "teams").mkdir()
        (tmp_path / "teams" / "teams.json").write_text('[{"tid": 1}]', encoding="utf-8")

        assert FixtureExtractor(tmp_path).read_json("teams/teams.json") == [{"tid": 1}]

    def test_missing_file_is_none(self, tmp_path):
        assert FixtureExtractor(tmp_path).read_json("teams/teams.json") is None

    def test_malformed_file_is_none(self, tmp_path):
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")

        assert FixtureExtractor(tmp_path).read_json("broken.json") is None

    def test_list_files(self, tmp_path):
        directory = tmp_path / "scorecards"
        directory.mkdir()
        for name in ("b.json", "a.json", "notes.txt"):
            (directory / name).write_text("{}", encoding="utf-8")

        files = FixtureExtractor(tmp_path).list_files("scorecards")

        assert [str(path) for path in files] == ["scorecards/a.json", "scorecards/b.json"]

    def test_list_files_missing_directory(self, tmp_path):
        assert FixtureExtractor(tmp_path).list_files("scorecards") == []
