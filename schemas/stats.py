"""
Schemas for tournament-wide statistics.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import BaseResponse, CompetitionSummary, OrmModel, TeamSummary
from schemas.players import RankedBatsman, RankedBowler


class TeamStatsItem(OrmModel):
    """Merged per-team totals."""

    id: int
    team_id: int
    total_runs: int = 0
    total_wickets: int = 0
    total_centuries: int = 0
    total_fifties: int = 0
    matches_won: int = 0
    extra_runs_conceded: int = 0
    highest_score: Optional[str] = None
    lowest_score: Optional[str] = None
    highest_win_margin_runs: Optional[int] = None
    lowest_win_margin_runs: Optional[int] = None
    highest_win_margin_wickets: Optional[int] = None
    lowest_win_margin_wickets: Optional[int] = None


class HighestScore(BaseModel):
    runs: int
    balls: int
    player: Optional[str] = None
    match: Optional[str] = None


class BestBowling(BaseModel):
    wickets: int
    runs: int
    overs: float
    player: Optional[str] = None
    match: Optional[str] = None


class TopSixHitter(BaseModel):
    player: Optional[str] = None
    sixes: int


class StatsOverview(BaseModel):
    tournament: Optional[CompetitionSummary] = None
    total_matches: int = 0
    total_teams: int = 0
    total_players: int = 0
    total_runs: int = 0
    total_wickets: int = 0
    highest_score: Optional[HighestScore] = None
    best_bowling: Optional[BestBowling] = None
    top_six_hitter: Optional[TopSixHitter] = None


class TeamPerformanceItem(BaseModel):
    team: TeamSummary
    played: int = 0
    win: int = 0
    loss: int = 0
    points: int = 0
    net_run_rate: Optional[float] = None
    qualified: bool = False
    win_percentage: float = Field(0, description="Wins / played * 100, one decimal")


class RunsPerMatchItem(BaseModel):
    match_number: int = Field(..., description="1-based position in date order")
    short_title: Optional[str] = None
    date: Optional[datetime] = None
    total_runs: int = 0
    team_a: Optional[str] = None
    team_b: Optional[str] = None


class TopScorer(BaseModel):
    name: Optional[str] = None
    runs: int = 0
    average: Optional[float] = None
    strike_rate: Optional[float] = None


class TeamTopScorer(BaseModel):
    team: Optional[str] = None
    team_name: Optional[str] = None
    logo_url: Optional[str] = None
    top_scorer: TopScorer


class StatsOverviewResp(BaseResponse):
    """Response for GET /v1/stats/overview."""

    data: Optional[StatsOverview] = None


class BattingStatsResp(BaseResponse):
    data: list[RankedBatsman] = Field(default_factory=list)


class BowlingStatsResp(BaseResponse):
    data: list[RankedBowler] = Field(default_factory=list)


class TeamPerformanceResp(BaseResponse):
    data: list[TeamPerformanceItem] = Field(default_factory=list)


class RunsPerMatchResp(BaseResponse):
    data: list[RunsPerMatchItem] = Field(default_factory=list)


class TopScorersByTeamResp(BaseResponse):
    data: list[TeamTopScorer] = Field(default_factory=list)
