"""
Teams Pipeline

Loads the tournament's franchises from teams/teams.json.
"""

from db.models.cricket import Team
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext


class TeamsPipeline(BasePipeline):
    config = PipelineConfig(
        name="teams",
        display_name="Teams",
        description="Franchises from teams/teams.json",
        target_tables=("teams",),
    )
    target_models = (Team,)

    async def execute(self, ctx: PipelineContext) -> None:
        teams = self.fixtures.read_json("teams/teams.json")
        if not isinstance(teams, list):
            ctx.log.warning("no_team_data")
            return

        for team in teams:
            if team.get("tid") is None:
                ctx.log.warning("team_without_tid", title=team.get("title"))
                continue

            Team.upsert_team(
                team["tid"],
                {
                    "title": team.get("title"),
                    "abbr": team.get("abbr"),
                    "alt_name": team.get("alt_name"),
                    "type": team.get("type"),
                    "thumb_url": team.get("thumb_url"),
                    "logo_url": team.get("logo_url"),
                    "country": team.get("country"),
                    "sex": team.get("sex") or "male",
                },
            )
            ctx.increment_records()

        ctx.log.info("teams_imported", records=ctx.records_processed)
