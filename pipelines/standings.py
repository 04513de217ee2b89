"""
Standings Pipeline

Points table per round from standings/standings.json, recorded against the
first competition in the database.
"""

from db.models.cricket import Competition, Standing, Team
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.transformers import parse_flag, parse_float, parse_int


class StandingsPipeline(BasePipeline):
    config = PipelineConfig(
        name="standings",
        display_name="Standings",
        description="Points table rows per round",
        target_tables=("standings",),
    )
    target_models = (Standing,)

    async def execute(self, ctx: PipelineContext) -> None:
        data = self.fixtures.read_json("standings/standings.json")
        if not isinstance(data, dict) or not isinstance(data.get("standings"), list):
            ctx.log.warning("no_standings_data")
            return

        competition = Competition.select().order_by(Competition.id).first()
        if competition is None:
            ctx.log.warning("competition_missing")
            return

        for round_data in data["standings"]:
            round_info = round_data.get("round") or {}
            round_id = parse_int(round_info.get("rid"), default=None)
            if round_id is None:
                continue

            for row in round_data.get("standings") or []:
                team = Team.by_tid(row.get("team_id"))
                if team is None:
                    continue

                Standing.upsert_standing(
                    competition,
                    team,
                    round_id,
                    {
                        "round_name": round_info.get("name"),
                        "played": parse_int(row.get("played")),
                        "win": parse_int(row.get("win")),
                        "loss": parse_int(row.get("loss")),
                        "draw": parse_int(row.get("draw")),
                        "nr": parse_int(row.get("nr")),
                        "over_for": parse_float(row.get("overfor")),
                        "run_for": parse_int(row.get("runfor"), default=None),
                        "over_against": parse_float(row.get("overagainst")),
                        "run_against": parse_int(row.get("runagainst"), default=None),
                        "net_run_rate": parse_float(row.get("netrr")),
                        "points": parse_int(row.get("points")),
                        "last_five_matches": row.get("lastfivematch"),
                        "last_five_results": row.get("lastfivematchresult"),
                        "qualified": parse_flag(row.get("quality")),
                    },
                )
                ctx.increment_records()

        ctx.log.info("standings_imported", records=ctx.records_processed)
