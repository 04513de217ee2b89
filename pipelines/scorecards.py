"""
Scorecards Pipeline

Loads innings, batting lines, bowling lines and fall of wickets from
scorecards/*.json. Only matches already in the database are considered, so
running this stage before `matches` imports nothing.
"""

from db.base import db
from db.models.cricket import (
    BattingLine,
    BowlingLine,
    FallOfWicket,
    Innings,
    Match,
    Player,
    Team,
)
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.transformers import optional_pid, parse_float, parse_flag, parse_int, parse_score


class ScorecardsPipeline(BasePipeline):
    config = PipelineConfig(
        name="scorecards",
        display_name="Scorecards",
        description="Innings, batting/bowling lines and fall of wickets",
        target_tables=("innings",),
    )
    target_models = (Innings,)

    async def execute(self, ctx: PipelineContext) -> None:
        files = self.fixtures.list_files("scorecards")
        ctx.log.info("scorecard_files_found", count=len(files))

        batting_lines = 0
        bowling_lines = 0
        for path in files:
            data = self.fixtures.read_json(path)
            if not isinstance(data, dict) or not data.get("innings"):
                continue

            match = Match.by_match_id(data.get("match_id"))
            if match is None:
                ctx.log.debug("scorecard_match_missing", match_id=data.get("match_id"), file=str(path))
                continue

            with db.atomic():
                for inning in data["innings"]:
                    innings = self._load_innings(match, inning)
                    if innings is None:
                        continue
                    ctx.increment_records()
                    batting_lines += self._load_batting(innings, inning.get("batsmen") or [])
                    bowling_lines += self._load_bowling(innings, inning.get("bowlers") or [])
                    self._load_fall_of_wickets(innings, inning.get("fows") or [])

        ctx.log.info(
            "scorecards_imported",
            innings=ctx.records_processed,
            batting_lines=batting_lines,
            bowling_lines=bowling_lines,
        )

    def _load_innings(self, match: Match, inning: dict) -> Innings | None:
        batting_team = Team.by_tid(inning.get("batting_team_id"))
        fielding_team = Team.by_tid(inning.get("fielding_team_id"))
        if inning.get("iid") is None or batting_team is None or fielding_team is None:
            return None

        runs, wickets = parse_score(inning.get("scores"))
        return Innings.upsert_innings(
            inning["iid"],
            {
                "match": match,
                "number": parse_int(inning.get("number")),
                "name": inning.get("name"),
                "status": parse_int(inning.get("status"), default=None),
                "is_super_over": parse_flag(inning.get("issuperover")),
                "result": parse_int(inning.get("result"), default=None),
                "batting_team": batting_team,
                "fielding_team": fielding_team,
                "scores": inning.get("scores"),
                "scores_full": inning.get("scores_full"),
                "runs": runs,
                "wickets": wickets,
                "overs": parse_float(inning.get("overs"), default=0.0),
            },
        )

    def _load_batting(self, innings: Innings, batsmen: list[dict]) -> int:
        count = 0
        for position, batsman in enumerate(batsmen, start=1):
            player = Player.by_pid(batsman.get("batsman_id"))
            if player is None:
                continue
            BattingLine.upsert_line(
                innings,
                player,
                {
                    "name": batsman.get("name"),
                    "position": position,
                    "runs": parse_int(batsman.get("runs")),
                    "balls_faced": parse_int(batsman.get("balls_faced")),
                    "fours": parse_int(batsman.get("fours")),
                    "sixes": parse_int(batsman.get("sixes")),
                    "strike_rate": parse_float(batsman.get("strike_rate"), default=0.0),
                    "how_out": batsman.get("how_out"),
                    "dismissal": batsman.get("dismissal"),
                    "bowler_pid": optional_pid(batsman.get("bowler_id")),
                    "is_batting": parse_flag(batsman.get("batting")),
                },
            )
            count += 1
        return count

    def _load_bowling(self, innings: Innings, bowlers: list[dict]) -> int:
        count = 0
        for bowler in bowlers:
            player = Player.by_pid(bowler.get("bowler_id"))
            if player is None:
                continue
            BowlingLine.upsert_line(
                innings,
                player,
                {
                    "name": bowler.get("name"),
                    "overs": parse_float(bowler.get("overs"), default=0.0),
                    "runs_conceded": parse_int(bowler.get("runs_conceded")),
                    "wickets": parse_int(bowler.get("wickets")),
                    "maidens": parse_int(bowler.get("maidens")),
                    "no_balls": parse_int(bowler.get("noballs")),
                    "wides": parse_int(bowler.get("wides")),
                    "economy": parse_float(bowler.get("econ"), default=0.0),
                    "dot_balls": parse_int(bowler.get("dotballs"), default=None),
                },
            )
            count += 1
        return count

    def _load_fall_of_wickets(self, innings: Innings, fows: list[dict]) -> None:
        # No natural key: replace the innings' list wholesale
        FallOfWicket.delete().where(FallOfWicket.innings == innings).execute()
        rows = [
            {
                "innings": innings,
                "name": fow.get("name"),
                "runs": parse_int(fow.get("runs")),
                "overs": parse_float(fow.get("overs_at_dismissal"), default=0.0),
                "score": f"{fow.get('score_at_dismissal')}/{fow.get('number')}",
            }
            for fow in fows
        ]
        if rows:
            FallOfWicket.insert_many(rows).execute()
