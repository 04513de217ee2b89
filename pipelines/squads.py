"""
Squads Pipeline

Loads players and their season membership from squads/squads.json.
"""

from core.settings import settings
from db.base import db
from db.models.cricket import Player, Team, TeamSquad
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.transformers import parse_float


class SquadsPipeline(BasePipeline):
    """
    Upsert each squad player and the (team, player, season) link.

    Squads whose team has not been imported are skipped; a player listed by
    two squads is stored once and linked to both.
    """

    config = PipelineConfig(
        name="squads",
        display_name="Players & Squads",
        description="Players and team squads from squads/squads.json",
        target_tables=("players",),
    )
    target_models = (Player,)

    async def execute(self, ctx: PipelineContext) -> None:
        squads = self.fixtures.read_json("squads/squads.json")
        if not isinstance(squads, list):
            ctx.log.warning("no_squad_data")
            return

        season = settings.season
        for squad in squads:
            team = Team.by_tid(squad.get("team_id"))
            if team is None:
                ctx.log.info("squad_team_missing", team_id=squad.get("team_id"))
                continue

            with db.atomic():
                for record in squad.get("players") or []:
                    if record.get("pid") is None:
                        continue
                    player = Player.upsert_player(record["pid"], self._player_fields(record))
                    TeamSquad.add_member(team, player, season)
                    ctx.increment_records()

        ctx.log.info("squads_imported", players=ctx.records_processed, season=season)

    def _player_fields(self, record: dict) -> dict:
        return {
            "title": record.get("title"),
            "short_name": record.get("short_name"),
            "first_name": record.get("first_name"),
            "last_name": record.get("last_name"),
            "birthdate": record.get("birthdate"),
            "birthplace": record.get("birthplace"),
            "country": record.get("country"),
            "playing_role": record.get("playing_role"),
            "batting_style": record.get("batting_style"),
            "bowling_style": record.get("bowling_style"),
            "fantasy_rating": parse_float(record.get("fantasy_player_rating")),
            "nationality": record.get("nationality"),
            "twitter_profile": record.get("twitter_profile"),
            "instagram_profile": record.get("instagram_profile"),
        }
