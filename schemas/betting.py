"""
Schemas for the betting insight endpoints. All values come from the static
tables in utils.constants.
"""

from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import BaseResponse


class TeamBettingProfile(BaseModel):
    abbr: str
    name: str
    win_rate: float
    chasing_win_rate: float
    batting_first_win_rate: float
    avg_score: float
    recommendation: str
    strategy: str
    risk_level: int = Field(..., ge=1, le=5, description="1 (safest) to 5")
    tips: list[str] = Field(default_factory=list)


class PlayerBettingTip(BaseModel):
    type: str
    probability: float
    risk: str
    stars: int


class PlayerBet(BaseModel):
    id: int
    name: str
    team: str
    role: str
    runs: int
    average: float
    strike_rate: float
    centuries: int
    fifties: int
    sixes: int
    fours: int
    big_score_rate: Optional[float] = None
    sixes_per_match: Optional[float] = None
    fours_per_match: Optional[float] = None
    not_outs: Optional[int] = None
    betting_tips: list[PlayerBettingTip] = Field(default_factory=list)
    verdict: str


class MatchScenario(BaseModel):
    scenario: str
    win_probability: Optional[float] = None
    expected_total: Optional[str] = None
    probability: Optional[float] = None
    recommendation: str
    confidence: str
    reasoning: str


class RiskBet(BaseModel):
    bet: str
    probability: float
    team: str
    stars: Optional[int] = None
    reason: Optional[str] = None


class RiskCategories(BaseModel):
    safe_bets: list[RiskBet] = Field(default_factory=list)
    value_bets: list[RiskBet] = Field(default_factory=list)
    avoid_bets: list[RiskBet] = Field(default_factory=list)


class KeyInsight(BaseModel):
    icon: str
    title: str
    value: str
    probability: str


class TournamentSnapshot(BaseModel):
    total_matches: int
    total_centuries: int
    century_rate: str
    avg_match_score: int
    highest_score: str
    lowest_score: str


class BettingOverview(BaseModel):
    top_bets: list[RiskBet] = Field(default_factory=list)
    value_bets: list[RiskBet] = Field(default_factory=list)
    avoid_bets: list[RiskBet] = Field(default_factory=list)
    key_insights: list[KeyInsight] = Field(default_factory=list)
    tournament_stats: TournamentSnapshot


class PredictedTeam(TeamBettingProfile):
    win_probability: int = Field(..., description="Normalised so both sides sum to 100")


class Prediction(BaseModel):
    favorite: str
    favorite_win_prob: int
    underdog: str
    upset_potential: str = Field(..., description="HIGH when the underdog is above 35%")
    recommendation: str
    reasoning: str


class MatchPrediction(BaseModel):
    team_a: PredictedTeam
    team_b: PredictedTeam
    prediction: Prediction
    betting_tips: list[str] = Field(default_factory=list)


class BettingOverviewResp(BaseResponse):
    data: Optional[BettingOverview] = None


class BettingTeamsResp(BaseResponse):
    data: list[TeamBettingProfile] = Field(default_factory=list)


class BettingTeamResp(BaseResponse):
    data: Optional[TeamBettingProfile] = None


class PlayerBetsResp(BaseResponse):
    data: list[PlayerBet] = Field(default_factory=list)


class ScenariosResp(BaseResponse):
    data: list[MatchScenario] = Field(default_factory=list)


class RiskAssessmentResp(BaseResponse):
    data: Optional[RiskCategories] = None


class MatchPredictionResp(BaseResponse):
    """Response for GET /v1/betting/match-predictor."""

    data: Optional[MatchPrediction] = None
