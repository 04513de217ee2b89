"""
Wagon Wheels Pipeline

Per-ball shot placement from match_wagon_wheel/*.json. Each innings carries
a `wagons` list of positional arrays:

    [batsman_id, bowler_id, over, bat_run, team_run, x, y, zone_id,
     event_name, unique_over]

All rows are collected first and written through the bulk loader.
"""

from core.settings import settings
from db.models.cricket import Innings, WagonWheel
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.loaders import BulkLoader
from pipelines.transformers import optional_pid, parse_float, parse_int, zone_name

WAGON_FIELDS = (
    "batsman_id",
    "bowler_id",
    "over",
    "bat_run",
    "team_run",
    "x",
    "y",
    "zone_id",
    "event_name",
    "unique_over",
)


def innings_lookup() -> dict[int, tuple[int, int]]:
    """Map feed innings id -> (innings row id, match row id)."""
    query = Innings.select(Innings.id, Innings.iid, Innings.match)
    return {row.iid: (row.id, row.match_id) for row in query}


class WagonWheelsPipeline(BasePipeline):
    config = PipelineConfig(
        name="wagon_wheels",
        display_name="Wagon Wheels",
        description="Shot placement per ball from match_wagon_wheel/",
        target_tables=("wagon_wheels",),
    )
    target_models = (WagonWheel,)

    async def execute(self, ctx: PipelineContext) -> None:
        innings_map = innings_lookup()
        rows = []

        for path in self.fixtures.list_files("match_wagon_wheel"):
            data = self.fixtures.read_json(path)
            if not isinstance(data, dict):
                continue

            for inning in data.get("innings") or []:
                ids = innings_map.get(parse_int(inning.get("inning_id"), default=None))
                if ids is None:
                    continue
                innings_id, match_id = ids
                for wagon in inning.get("wagons") or []:
                    rows.append(self._row(wagon, innings_id, match_id))

        ctx.log.info("wagon_rows_prepared", rows=len(rows))
        loader = BulkLoader(WagonWheel, settings.wagon_wheel_chunk_size, ctx.log)
        ctx.increment_records(loader.load(rows))

    def _row(self, wagon: list, innings_id: int, match_id: int) -> dict:
        values = dict(zip(WAGON_FIELDS, list(wagon) + [None] * len(WAGON_FIELDS)))
        return {
            "match": match_id,
            "innings": innings_id,
            "batsman_pid": optional_pid(values["batsman_id"]),
            "bowler_pid": optional_pid(values["bowler_id"]),
            "over": parse_float(values["over"], default=0.0),
            "bat_run": parse_int(values["bat_run"]),
            "team_run": parse_int(values["team_run"]),
            "x_coord": parse_int(values["x"]),
            "y_coord": parse_int(values["y"]),
            "zone_id": parse_int(values["zone_id"]),
            "zone_name": zone_name(values["zone_id"]),
            "event_name": values["event_name"] or "",
            "unique_over": parse_float(values["unique_over"], default=0.0),
        }
