"""
Matches Pipeline

Loads fixtures and results from matches/matches.json. A match is stored only
when its venue, both teams and the competition are already present.
"""

from db.models.cricket import Competition, Match, Team, Venue
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.transformers import parse_datetime, parse_int


class MatchesPipeline(BasePipeline):
    config = PipelineConfig(
        name="matches",
        display_name="Matches",
        description="Match fixtures and results from matches/matches.json",
        target_tables=("matches",),
    )
    target_models = (Match,)

    async def execute(self, ctx: PipelineContext) -> None:
        matches = self.fixtures.read_json("matches/matches.json")
        if not isinstance(matches, list) or not matches:
            ctx.log.warning("no_match_data")
            return

        competition = Competition.by_cid((matches[0].get("competition") or {}).get("cid"))
        if competition is None:
            ctx.log.warning("competition_missing")
            return

        skipped = 0
        for match in matches:
            team_a_data = match.get("teama") or {}
            team_b_data = match.get("teamb") or {}
            venue = Venue.by_venue_id((match.get("venue") or {}).get("venue_id"))
            team_a = Team.by_tid(team_a_data.get("team_id"))
            team_b = Team.by_tid(team_b_data.get("team_id"))

            if match.get("match_id") is None or not (venue and team_a and team_b):
                skipped += 1
                ctx.log.debug("match_skipped", match_id=match.get("match_id"))
                continue

            toss = match.get("toss") or {}
            Match.upsert_match(
                match["match_id"],
                {
                    "title": match.get("title"),
                    "short_title": match.get("short_title"),
                    "subtitle": match.get("subtitle"),
                    "match_number": _text(match.get("match_number")),
                    "format": parse_int(match.get("format"), default=None),
                    "format_str": match.get("format_str"),
                    "status": parse_int(match.get("status"), default=None),
                    "status_str": match.get("status_str"),
                    "status_note": match.get("status_note"),
                    "date_start": parse_datetime(match.get("date_start")),
                    "date_end": parse_datetime(match.get("date_end")),
                    "timestamp_start": parse_int(match.get("timestamp_start"), default=None),
                    "timestamp_end": parse_int(match.get("timestamp_end"), default=None),
                    "date_start_ist": parse_datetime(match.get("date_start_ist")),
                    "date_end_ist": parse_datetime(match.get("date_end_ist")),
                    "team_a": team_a,
                    "team_a_scores_full": team_a_data.get("scores_full"),
                    "team_a_scores": team_a_data.get("scores"),
                    "team_a_overs": _text(team_a_data.get("overs")),
                    "team_b": team_b,
                    "team_b_scores_full": team_b_data.get("scores_full"),
                    "team_b_scores": team_b_data.get("scores"),
                    "team_b_overs": _text(team_b_data.get("overs")),
                    "result": match.get("result"),
                    "result_type": parse_int(match.get("result_type"), default=None),
                    "win_margin": _text(match.get("win_margin")),
                    "winning_team": Team.by_tid(match.get("winning_team_id") or None),
                    "toss_text": toss.get("text"),
                    "toss_winner": Team.by_tid(toss.get("winner") or None),
                    "toss_decision": parse_int(toss.get("decision"), default=None),
                    "umpires": _text(match.get("umpires")),
                    "referee": match.get("referee"),
                    "has_commentary": match.get("commentary") == 1,
                    "has_wagon": match.get("wagon") == 1,
                    "latest_inning_number": parse_int(match.get("latest_inning_number"), default=None),
                    "venue": venue,
                    "competition": competition,
                },
            )
            ctx.increment_records()

        ctx.log.info("matches_imported", records=ctx.records_processed, skipped=skipped)


def _text(value) -> str | None:
    if value is None or value == "":
        return None
    return str(value)
