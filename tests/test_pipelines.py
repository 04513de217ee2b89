"""Tests for the fixture import stages and the pipeline registry."""

import json

import pytest
from peewee import IntegrityError

from db.models import (
    BattingAggregate,
    BattingLine,
    BowlingAggregate,
    BowlingLine,
    Commentary,
    Competition,
    FallOfWicket,
    Innings,
    Match,
    Player,
    PlayerCareerStats,
    Standing,
    Team,
    TeamSquad,
    TeamStats,
    Venue,
    WagonWheel,
)
from pipelines import PIPELINE_REGISTRY, get_pipeline, list_pipelines, run_all_pipelines, run_pipeline
from pipelines.loaders import BulkLoader

from conftest import run, write_fixture_tree


def row_counts():
    models = (
        Team, Player, TeamSquad, PlayerCareerStats, Competition, Venue, Match, Innings,
        BattingLine, BowlingLine, FallOfWicket, Standing, BattingAggregate, BowlingAggregate,
        TeamStats, WagonWheel, Commentary,
    )
    return {model.__name__: model.select().count() for model in models}


class TestRegistry:
    def test_stage_order(self):
        assert list(PIPELINE_REGISTRY) == [
            "teams",
            "squads",
            "player_career_stats",
            "competition_venues",
            "matches",
            "scorecards",
            "standings",
            "batting_aggregates",
            "bowling_aggregates",
            "team_stats",
            "wagon_wheels",
            "commentary",
        ]

    def test_unknown_pipeline(self):
        with pytest.raises(KeyError, match="Unknown pipeline"):
            get_pipeline("fantasy_points")

    def test_list_pipelines(self):
        info = list_pipelines()
        assert len(info) == 12
        assert info[0]["name"] == "teams"
        assert info[0]["target_tables"] == ["teams"]


class TestFullImport:
    def test_imports_every_table(self, seeded):
        counts = row_counts()

        assert counts["Team"] == 2
        # Squad for an unknown team is ignored
        assert counts["Player"] == 4
        assert counts["TeamSquad"] == 4
        assert counts["PlayerCareerStats"] == 1
        assert counts["Competition"] == 1
        assert counts["Venue"] == 1
        assert counts["Match"] == 2
        assert counts["Innings"] == 2
        assert counts["BattingLine"] == 3
        assert counts["BowlingLine"] == 2
        assert counts["FallOfWicket"] == 2
        assert counts["Standing"] == 2
        assert counts["BattingAggregate"] == 4
        assert counts["BowlingAggregate"] == 2
        assert counts["TeamStats"] == 2
        assert counts["WagonWheel"] == 3
        assert counts["Commentary"] == 4

    def test_records_processed(self, seeded):
        assert seeded["teams"].records_processed == 2
        assert seeded["squads"].records_processed == 4
        assert seeded["competition_venues"].records_processed == 2
        assert seeded["wagon_wheels"].records_processed == 3
        assert seeded["commentary"].records_processed == 4
        assert not any(result.skipped for result in seeded.values())

    def test_rerun_skips_every_stage(self, seeded, fixture_dir):
        """A second import leaves the database untouched."""
        before = row_counts()

        results = run(run_all_pipelines(data_dir=str(fixture_dir)))

        assert len(results) == 12
        assert all(result.status == "success" for result in results.values())
        assert all(result.skipped for result in results.values())
        assert all(result.records_processed == 0 for result in results.values())
        assert "already exist" in results["teams"].message
        assert row_counts() == before

    def test_match_fields(self, seeded):
        match = Match.by_match_id(5001)

        assert match.team_a.abbr == "GT"
        assert match.team_b.abbr == "RR"
        assert match.winning_team.abbr == "GT"
        assert match.toss_winner.abbr == "RR"
        assert match.team_b_overs == "20"
        assert match.match_number == "74"
        assert match.has_commentary is True
        assert match.venue.name == "Narendra Modi Stadium"
        assert match.competition.total_matches == 74

    def test_scorecard_fields(self, seeded):
        innings = Innings.get(Innings.iid == 9002)
        assert (innings.runs, innings.wickets, innings.overs) == (133, 3, 18.1)

        miller = BattingLine.get((BattingLine.innings == innings) & (BattingLine.position == 2))
        assert miller.runs == 32
        assert miller.is_batting is True
        assert miller.bowler_pid is None

        buttler = BattingLine.get(BattingLine.innings == Innings.get(Innings.iid == 9001))
        assert buttler.bowler_pid == 101

        scores = sorted(row.score for row in FallOfWicket.select())
        assert scores == ["31/1", "79/3"]

    def test_ball_level_fields(self, seeded):
        four = WagonWheel.get(WagonWheel.event_name == "four")
        assert four.zone_name == "Square Leg"
        assert four.batsman_pid == 201
        assert four.over == 0.1

        generated = Commentary.get(Commentary.event_id == "9001_1")
        assert generated.is_wicket is True
        assert generated.over == 12

    def test_aggregates_and_career(self, seeded):
        pandya = Player.by_pid(101)

        best = BattingAggregate.get(
            (BattingAggregate.player == pandya) & (BattingAggregate.stat_type == "most_runs")
        )
        assert best.highest == 87

        chahal = BowlingAggregate.get(BowlingAggregate.stat_type == "top_wicket_takers", BowlingAggregate.wickets == 27)
        assert chahal.best_inning == "5/40"

        career = PlayerCareerStats.get(PlayerCareerStats.player == pandya)
        assert json.loads(career.batting_stats)["t20"]["runs"] == "1963"

    def test_team_stats_merge(self, seeded):
        rr = TeamStats.get(TeamStats.team == Team.by_tid(2))
        assert rr.total_runs == 2942
        assert rr.highest_score == "222/2"
        assert rr.matches_won == 10

        gt = TeamStats.get(TeamStats.team == Team.by_tid(1))
        assert gt.highest_score is None

    def test_standings_round(self, seeded):
        rows = list(Standing.select().order_by(Standing.points.desc()))
        assert [row.team.abbr for row in rows] == ["GT", "RR"]
        assert rows[0].round_id == 1
        assert rows[0].round_name == "League"
        assert rows[0].qualified is True
        assert rows[0].net_run_rate == 0.316


class TestStageDependencies:
    def test_scorecards_before_matches_imports_nothing(self, database, fixture_dir):
        for name in ("teams", "squads", "competition_venues"):
            run(run_pipeline(name, str(fixture_dir)))

        result = run(run_pipeline("scorecards", str(fixture_dir)))

        assert result.status == "success"
        assert result.records_processed == 0
        assert Innings.select().count() == 0

    def test_matches_need_competition(self, database, fixture_dir):
        run(run_pipeline("teams", str(fixture_dir)))

        result = run(run_pipeline("matches", str(fixture_dir)))

        assert result.status == "success"
        assert Match.select().count() == 0

    def test_missing_fixture_tree(self, database, tmp_path):
        """An absent directory is logged, not fatal."""
        results = run(run_all_pipelines(data_dir=str(tmp_path / "nowhere")))

        assert len(results) == 12
        assert all(result.status == "success" for result in results.values())
        assert all(result.records_processed == 0 for result in results.values())

    def test_competition_venues_runs_until_both_tables_filled(self, database, fixture_dir):
        Competition.upsert_competition(77, {"title": "Indian Premier League"})

        result = run(run_pipeline("competition_venues", str(fixture_dir)))

        assert result.skipped is False
        assert Venue.select().count() == 1

    def test_upsert_updates_existing_rows(self, database, tmp_path):
        fixtures = write_fixture_tree(tmp_path / "v1", {"teams/teams.json": [{"tid": 1, "title": "Old"}]})
        run(get_pipeline("teams", str(fixtures)).execute(_context("teams")))

        fixtures = write_fixture_tree(tmp_path / "v2", {"teams/teams.json": [{"tid": 1, "title": "Gujarat Titans"}]})
        run(get_pipeline("teams", str(fixtures)).execute(_context("teams")))

        assert Team.select().count() == 1
        assert Team.by_tid(1).title == "Gujarat Titans"


class TestFailures:
    def test_stage_failure_is_reported(self, database, fixture_dir, monkeypatch):
        def broken(*args, **kwargs):
            raise IntegrityError("duplicate key")

        monkeypatch.setattr(Team, "upsert_team", broken)

        result = run(run_pipeline("teams", str(fixture_dir)))

        assert result.status == "error"
        assert result.error == "duplicate key"
        assert result.skipped is False

    def test_run_all_stops_at_first_failure(self, database, fixture_dir, monkeypatch):
        def broken(*args, **kwargs):
            raise IntegrityError("bad squad")

        monkeypatch.setattr(Player, "upsert_player", broken)

        results = run(run_all_pipelines(data_dir=str(fixture_dir)))

        assert list(results) == ["teams", "squads"]
        assert results["teams"].status == "success"
        assert results["squads"].status == "error"
        assert Match.select().count() == 0


class TestBulkLoader:
    def rows(self, *tids):
        return [{"tid": tid, "title": f"Team {tid}"} for tid in tids]

    def test_chunk_size_must_be_positive(self):
        with pytest.raises(ValueError):
            BulkLoader(Team, chunk_size=0)

    def test_empty_batch(self, database):
        assert BulkLoader(Team).load([]) == 0

    def test_single_batch(self, database):
        assert BulkLoader(Team, chunk_size=2).load(self.rows(1, 2, 3)) == 3
        assert Team.select().count() == 3

    def test_duplicates_are_ignored(self, database):
        loader = BulkLoader(Team)
        loader.load(self.rows(1, 2))

        assert loader.load(self.rows(2, 3)) == 1
        assert Team.select().count() == 3

    def test_failed_batch_falls_back_to_chunks(self, database):
        """Only the chunk holding the bad row is lost."""

        class PoisonedLoader(BulkLoader):
            def _insert(self, rows):
                if any(row["tid"] == 3 for row in rows):
                    raise IntegrityError("poisoned row")
                return super()._insert(rows)

        inserted = PoisonedLoader(Team, chunk_size=2).load(self.rows(1, 2, 3, 4, 5))

        assert inserted == 3
        assert sorted(team.tid for team in Team.select()) == [1, 2, 5]


def _context(name):
    from pipelines import PipelineContext

    ctx = PipelineContext(name)
    ctx.start_tracking()
    return ctx
