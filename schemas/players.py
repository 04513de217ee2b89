"""
Schemas for player responses: listings, profiles, aggregates and per-innings
records.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from schemas.common import BaseResponse, OrmModel, Pagination, PlayerSummary, TeamSummary
from schemas.matches import BattingLineItem, BowlingLineItem, MatchBrief


class BattingAggregateItem(OrmModel):
    """Tournament batting ranking row for one stat category."""

    id: int
    stat_type: str
    player_id: int
    team_id: int
    matches: int = 0
    innings: int = 0
    runs: int = 0
    balls: int = 0
    not_out: int = 0
    highest: Optional[int] = None
    centuries: int = 0
    fifties: int = 0
    fours: int = 0
    sixes: int = 0
    catches: int = 0
    stumpings: int = 0
    average: Optional[float] = None
    strike_rate: Optional[float] = None


class BowlingAggregateItem(OrmModel):
    """Tournament bowling ranking row for one stat category."""

    id: int
    stat_type: str
    player_id: int
    team_id: int
    matches: int = 0
    overs: float = 0
    runs: int = 0
    wickets: int = 0
    maidens: int = 0
    average: Optional[float] = None
    economy: Optional[float] = None
    strike_rate: Optional[float] = None
    best_inning: Optional[str] = None
    best_match: Optional[str] = None
    wicket4i: int = 0
    wicket5i: int = 0


class RankedBatsman(BattingAggregateItem):
    player: PlayerSummary
    team: TeamSummary


class RankedBowler(BowlingAggregateItem):
    player: PlayerSummary
    team: TeamSummary


class SquadItem(OrmModel):
    season: str
    team: TeamSummary


class PlayerWithAggregates(PlayerSummary):
    batting_stats: list[BattingAggregateItem] = Field(default_factory=list)
    bowling_stats: list[BowlingAggregateItem] = Field(default_factory=list)


class PlayerListItem(PlayerWithAggregates):
    squads: list[SquadItem] = Field(default_factory=list)


class CareerStats(BaseModel):
    batting: dict[str, Any] = Field(default_factory=dict)
    bowling: dict[str, Any] = Field(default_factory=dict)


class PlayerDetail(PlayerListItem):
    career_stats: Optional[CareerStats] = None


class InningsContext(OrmModel):
    id: int
    iid: int
    number: int
    name: Optional[str] = None
    scores: Optional[str] = None
    batting_team: TeamSummary
    fielding_team: TeamSummary
    match: MatchBrief


class PlayerBattingRecord(BattingLineItem):
    innings: InningsContext


class PlayerBowlingRecord(BowlingLineItem):
    innings: InningsContext


class PlayersListResp(BaseResponse):
    """Response for GET /v1/players."""

    data: list[PlayerListItem] = Field(default_factory=list)
    pagination: Pagination


class TopBatsmenResp(BaseResponse):
    data: list[RankedBatsman] = Field(default_factory=list)


class TopBowlersResp(BaseResponse):
    data: list[RankedBowler] = Field(default_factory=list)


class PlayerDetailResp(BaseResponse):
    data: Optional[PlayerDetail] = None


class PlayerBattingResp(BaseResponse):
    data: list[PlayerBattingRecord] = Field(default_factory=list)


class PlayerBowlingResp(BaseResponse):
    data: list[PlayerBowlingRecord] = Field(default_factory=list)
