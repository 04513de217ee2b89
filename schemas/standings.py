"""
Schemas for points table responses.
"""

from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import BaseResponse, CompetitionSummary, OrmModel, TeamSummary


class StandingSummary(OrmModel):
    """One team's row in the points table for a round."""

    id: int
    round_id: int
    round_name: Optional[str] = None
    played: int = 0
    win: int = 0
    loss: int = 0
    draw: int = 0
    nr: int = 0
    over_for: Optional[float] = None
    run_for: Optional[int] = None
    over_against: Optional[float] = None
    run_against: Optional[int] = None
    net_run_rate: Optional[float] = None
    points: int = 0
    last_five_matches: Optional[str] = None
    last_five_results: Optional[str] = None
    qualified: bool = False


class StandingItem(StandingSummary):
    team: TeamSummary
    competition: CompetitionSummary


class RoundItem(BaseModel):
    round_id: int = Field(..., description="Round id from the feed")
    round_name: Optional[str] = Field(None, description="Round label, e.g. 'Regular'")


class StandingsResp(BaseResponse):
    """Response for GET /v1/standings."""

    data: list[StandingItem] = Field(default_factory=list)


class RoundsResp(BaseResponse):
    data: list[RoundItem] = Field(default_factory=list)


class TeamStandingResp(BaseResponse):
    data: Optional[StandingItem] = None
