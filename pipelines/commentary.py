"""
Commentary Pipeline

Ball-by-ball commentary from match_innings_commentary/*.json, one file per
innings. Entries without an event_id get "<iid>_<index>" so that re-loading
the same file never duplicates rows.
"""

from core.settings import settings
from db.models.cricket import Commentary
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.loaders import BulkLoader
from pipelines.transformers import optional_pid, parse_int
from pipelines.wagon_wheels import innings_lookup


class CommentaryPipeline(BasePipeline):
    config = PipelineConfig(
        name="commentary",
        display_name="Commentary",
        description="Ball-by-ball commentary from match_innings_commentary/",
        target_tables=("commentaries",),
    )
    target_models = (Commentary,)

    async def execute(self, ctx: PipelineContext) -> None:
        innings_map = innings_lookup()
        files = self.fixtures.list_files("match_innings_commentary")
        ctx.log.info("commentary_files_found", count=len(files))

        rows = []
        for path in files:
            data = self.fixtures.read_json(path)
            if not isinstance(data, dict) or not data.get("inning") or not data.get("commentaries"):
                continue

            iid = data["inning"].get("iid")
            ids = innings_map.get(parse_int(iid, default=None))
            if ids is None:
                continue
            innings_id, match_id = ids

            for index, entry in enumerate(data["commentaries"]):
                rows.append(self._row(entry, iid, index, innings_id, match_id))

        ctx.log.info("commentary_rows_prepared", rows=len(rows))
        loader = BulkLoader(Commentary, settings.commentary_chunk_size, ctx.log)
        ctx.increment_records(loader.load(rows))

    def _row(self, entry: dict, iid, index: int, innings_id: int, match_id: int) -> dict:
        return {
            "event_id": str(entry.get("event_id") or f"{iid}_{index}"),
            "match": match_id,
            "innings": innings_id,
            "event": entry.get("event") or "ball",
            "batsman_pid": optional_pid(entry.get("batsman_id")),
            "bowler_pid": optional_pid(entry.get("bowler_id")),
            "over": parse_int(entry.get("over")),
            "ball": parse_int(entry.get("ball")),
            "commentary": entry.get("commentary") or "",
            "run": parse_int(entry.get("run")),
            "is_wide": entry.get("wideball") is True,
            "is_no_ball": entry.get("noball") is True,
            "is_six": entry.get("six") is True,
            "is_four": entry.get("four") is True,
            "is_wicket": entry.get("event") == "wicket",
        }
