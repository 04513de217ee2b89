# Import all models to ensure they are registered with the database
from .cricket import (
    Team,
    Player,
    TeamSquad,
    PlayerCareerStats,
    Competition,
    Venue,
    Match,
    Innings,
    BattingLine,
    BowlingLine,
    FallOfWicket,
    Standing,
    BattingAggregate,
    BowlingAggregate,
    TeamStats,
    WagonWheel,
    Commentary,
)

# Creation order: parents before children
ALL_MODELS = [
    Team,
    Player,
    TeamSquad,
    PlayerCareerStats,
    Competition,
    Venue,
    Match,
    Innings,
    BattingLine,
    BowlingLine,
    FallOfWicket,
    Standing,
    BattingAggregate,
    BowlingAggregate,
    TeamStats,
    WagonWheel,
    Commentary,
]

__all__ = [model.__name__ for model in ALL_MODELS] + ["ALL_MODELS"]
