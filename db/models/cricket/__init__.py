"""
Cricket Schema Models

Relational models for one tournament edition, populated once from the JSON
fixtures by the import pipelines. Parents are listed before children.
"""

from db.models.cricket.teams import Team
from db.models.cricket.players import Player, TeamSquad, PlayerCareerStats
from db.models.cricket.competitions import Competition, Venue
from db.models.cricket.matches import Match
from db.models.cricket.scorecards import Innings, BattingLine, BowlingLine, FallOfWicket
from db.models.cricket.standings import Standing
from db.models.cricket.aggregates import BattingAggregate, BowlingAggregate, TeamStats
from db.models.cricket.ball_events import WagonWheel, Commentary, ZONE_NAMES

__all__ = [
    # Dimension tables
    "Team",
    "Player",
    "TeamSquad",
    "PlayerCareerStats",
    "Competition",
    "Venue",
    # Match tables
    "Match",
    "Innings",
    "BattingLine",
    "BowlingLine",
    "FallOfWicket",
    # Aggregate tables
    "Standing",
    "BattingAggregate",
    "BowlingAggregate",
    "TeamStats",
    # Ball-level tables
    "WagonWheel",
    "Commentary",
    "ZONE_NAMES",
]
