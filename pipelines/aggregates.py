"""
Aggregate Stats Pipelines

Tournament-wide batting and bowling ranking tables. Each file holds one
category; its name gives the stat type (batting_most_runs.json -> most_runs).
"""

from pathlib import Path
from typing import ClassVar

from db.models.cricket import BattingAggregate, BowlingAggregate, Player, Team
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.transformers import parse_float, parse_int


def stat_type_from_filename(path: str | Path, prefix: str) -> str:
    stem = Path(path).name.removesuffix(".json")
    return stem[len(prefix):] if stem.startswith(prefix) else stem


class _AggregatePipeline(BasePipeline):
    """Shared loop over one stats directory; subclasses map a stat row to columns."""

    subdir: ClassVar[str]
    prefix: ClassVar[str]

    async def execute(self, ctx: PipelineContext) -> None:
        model = self.target_models[0]
        for path in self.fixtures.list_files(self.subdir):
            stat_type = stat_type_from_filename(path, self.prefix)
            data = self.fixtures.read_json(path)
            stats = (data.get("response") or {}).get("stats") if isinstance(data, dict) else None
            if not isinstance(stats, list):
                continue

            loaded = 0
            for stat in stats:
                player = Player.by_pid((stat.get("player") or {}).get("pid"))
                team = Team.by_tid((stat.get("team") or {}).get("tid"))
                if player is None or team is None:
                    continue
                model.upsert_aggregate(player, stat_type, {"team": team, **self.map_stat(stat)})
                loaded += 1

            ctx.increment_records(loaded)
            ctx.log.info("stat_type_imported", stat_type=stat_type, records=loaded)

    def map_stat(self, stat: dict) -> dict:
        raise NotImplementedError


class BattingAggregatesPipeline(_AggregatePipeline):
    config = PipelineConfig(
        name="batting_aggregates",
        display_name="Batting Aggregates",
        description="Batting ranking tables from batting_stats/",
        target_tables=("batting_aggregates",),
    )
    target_models = (BattingAggregate,)
    subdir = "batting_stats"
    prefix = "batting_"

    def map_stat(self, stat: dict) -> dict:
        return {
            "matches": parse_int(stat.get("matches")),
            "innings": parse_int(stat.get("innings")),
            "runs": parse_int(stat.get("runs")),
            "balls": parse_int(stat.get("balls")),
            "not_out": parse_int(stat.get("notout")),
            "highest": parse_int(stat.get("highest"), default=None),
            "centuries": parse_int(stat.get("run100")),
            "fifties": parse_int(stat.get("run50")),
            "fours": parse_int(stat.get("run4")),
            "sixes": parse_int(stat.get("run6")),
            "catches": parse_int(stat.get("catches")),
            "stumpings": parse_int(stat.get("stumpings")),
            "average": parse_float(stat.get("average")),
            "strike_rate": parse_float(stat.get("strike")),
        }


class BowlingAggregatesPipeline(_AggregatePipeline):
    config = PipelineConfig(
        name="bowling_aggregates",
        display_name="Bowling Aggregates",
        description="Bowling ranking tables from bowling_stats/",
        target_tables=("bowling_aggregates",),
    )
    target_models = (BowlingAggregate,)
    subdir = "bowling_stats"
    prefix = "bowling_"

    def map_stat(self, stat: dict) -> dict:
        return {
            "matches": parse_int(stat.get("matches")),
            "overs": parse_float(stat.get("overs"), default=0.0),
            "runs": parse_int(stat.get("runs")),
            "wickets": parse_int(stat.get("wickets")),
            "maidens": parse_int(stat.get("maidens")),
            "average": parse_float(stat.get("average")),
            "economy": parse_float(stat.get("econ")),
            "strike_rate": parse_float(stat.get("strike")),
            "best_inning": _text(stat.get("bestinning")),
            "best_match": _text(stat.get("bestmatch")),
            "wicket4i": parse_int(stat.get("wicket4i")),
            "wicket5i": parse_int(stat.get("wicket5i")),
        }


def _text(value) -> str | None:
    return None if value in (None, "") else str(value)
