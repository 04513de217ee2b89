"""
Schemas for team-related API responses.
"""

from typing import Optional

from pydantic import Field

from schemas.common import BaseResponse, Pagination, PlayerSummary, TeamSummary
from schemas.players import PlayerWithAggregates
from schemas.standings import StandingSummary
from schemas.stats import TeamStatsItem


class TeamListItem(TeamSummary):
    """Team with its best standing row and merged stats."""

    best_standing: Optional[StandingSummary] = Field(None, description="Highest-points standing row")
    stats: Optional[TeamStatsItem] = None


class TeamDetail(TeamSummary):
    latest_standing: Optional[StandingSummary] = Field(None, description="Standing in the latest round")
    stats: Optional[TeamStatsItem] = None
    squad: list[PlayerSummary] = Field(default_factory=list)


class TeamsListResp(BaseResponse):
    """Response for GET /v1/teams."""

    data: list[TeamListItem] = Field(default_factory=list)
    pagination: Pagination


class TeamDetailResp(BaseResponse):
    """Response for GET /v1/teams/{id}."""

    data: Optional[TeamDetail] = None


class TeamPlayersResp(BaseResponse):
    """Response for GET /v1/teams/{id}/players."""

    data: list[PlayerWithAggregates] = Field(default_factory=list)
