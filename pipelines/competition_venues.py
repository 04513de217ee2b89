"""
Competition & Venues Pipeline

The competition is taken from the first match in matches/matches.json;
venues are the distinct venues across all matches.
"""

from db.models.cricket import Competition, Venue
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.transformers import parse_int


class CompetitionVenuesPipeline(BasePipeline):
    config = PipelineConfig(
        name="competition_venues",
        display_name="Competition & Venues",
        description="Competition and distinct venues from matches/matches.json",
        target_tables=("competitions", "venues"),
    )
    target_models = (Competition, Venue)

    def should_skip(self, existing: dict[str, int]) -> bool:
        # Both tables must be populated
        return all(existing.values())

    async def execute(self, ctx: PipelineContext) -> None:
        matches = self.fixtures.read_json("matches/matches.json")
        if not isinstance(matches, list) or not matches:
            ctx.log.warning("no_match_data")
            return

        competition = matches[0].get("competition")
        if competition and competition.get("cid") is not None:
            Competition.upsert_competition(
                competition["cid"],
                {
                    "title": competition.get("title"),
                    "abbr": competition.get("abbr"),
                    "season": competition.get("season"),
                    "total_matches": parse_int(competition.get("total_matches"), default=None),
                    "total_teams": parse_int(competition.get("total_teams"), default=None),
                },
            )
            ctx.increment_records()

        venues: dict[str, dict] = {}
        for match in matches:
            venue = match.get("venue")
            if venue and venue.get("venue_id") is not None:
                venues.setdefault(str(venue["venue_id"]), venue)

        for venue_id, venue in venues.items():
            Venue.upsert_venue(
                venue_id,
                {
                    "name": venue.get("name"),
                    "location": venue.get("location"),
                    "country": venue.get("country"),
                    "timezone": venue.get("timezone"),
                },
            )
            ctx.increment_records()

        ctx.log.info("venues_imported", venues=len(venues))
