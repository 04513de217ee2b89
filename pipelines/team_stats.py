"""
Team Stats Pipeline

Merges the per-team stat files under team_stats/ into one row per team.
team_total_runs.json decides which teams get a row; the other files only
fill in columns for those teams.
"""

from typing import Callable

from db.models.cricket import Team, TeamStats
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.transformers import parse_int


def _score(value) -> str | None:
    return None if value in (None, "") else str(value)


def _margin(value) -> int | None:
    return parse_int(value, default=None)


# (file, column, source key, parser)
MERGED_FIELDS: list[tuple[str, str, str, Callable]] = [
    ("team_match_win.json", "matches_won", "win", parse_int),
    ("team_extra_run_conceded.json", "extra_runs_conceded", "extras", parse_int),
    ("team_highest_score.json", "highest_score", "score", _score),
    ("team_lowest_score.json", "lowest_score", "score", _score),
    ("team_highest_win_margin_runs.json", "highest_win_margin_runs", "margin", _margin),
    ("team_lowest_win_margin_runs.json", "lowest_win_margin_runs", "margin", _margin),
    ("team_highest_win_margin_wickets.json", "highest_win_margin_wickets", "margin", _margin),
    ("team_lowest_win_margin_wickets.json", "lowest_win_margin_wickets", "margin", _margin),
]


class TeamStatsPipeline(BasePipeline):
    config = PipelineConfig(
        name="team_stats",
        display_name="Team Stats",
        description="Per-team totals merged from team_stats/",
        target_tables=("team_stats",),
    )
    target_models = (TeamStats,)

    async def execute(self, ctx: PipelineContext) -> None:
        merged: dict[int, tuple[Team, dict]] = {}

        for stat in self._stats("team_total_runs.json"):
            team = Team.by_tid((stat.get("team") or {}).get("tid"))
            if team is None:
                continue
            merged[team.id] = (
                team,
                {
                    "total_runs": parse_int(stat.get("runs")),
                    "total_wickets": parse_int(stat.get("wickets")),
                    "total_centuries": parse_int(stat.get("run100")),
                    "total_fifties": parse_int(stat.get("run50")),
                },
            )

        for filename, column, key, parser in MERGED_FIELDS:
            for stat in self._stats(filename):
                team = Team.by_tid((stat.get("team") or {}).get("tid"))
                if team is None or team.id not in merged:
                    continue
                merged[team.id][1][column] = parser(stat.get(key))

        for team, values in merged.values():
            TeamStats.upsert_stats(team, values)
            ctx.increment_records()

        ctx.log.info("team_stats_imported", records=ctx.records_processed)

    def _stats(self, filename: str) -> list[dict]:
        data = self.fixtures.read_json(f"team_stats/{filename}")
        if not isinstance(data, dict):
            return []
        stats = (data.get("response") or {}).get("stats")
        return stats if isinstance(stats, list) else []
