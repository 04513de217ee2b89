"""
Player Career Stats Pipeline

One file per player under player_career_stats/, stored as raw JSON text.
"""

import json

from db.models.cricket import Player, PlayerCareerStats
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext


class PlayerCareerStatsPipeline(BasePipeline):
    config = PipelineConfig(
        name="player_career_stats",
        display_name="Player Career Stats",
        description="Career batting/bowling records per player",
        target_tables=("player_career_stats",),
    )
    target_models = (PlayerCareerStats,)

    async def execute(self, ctx: PipelineContext) -> None:
        files = self.fixtures.list_files("player_career_stats")
        ctx.log.info("career_files_found", count=len(files))

        for path in files:
            data = self.fixtures.read_json(path)
            if not isinstance(data, dict) or not data.get("player"):
                continue

            player = Player.by_pid(data["player"].get("pid"))
            if player is None:
                continue

            PlayerCareerStats.upsert_career(
                player,
                json.dumps(data.get("batting") or {}),
                json.dumps(data.get("bowling") or {}),
            )
            ctx.increment_records()

        ctx.log.info("career_stats_imported", records=ctx.records_processed)
