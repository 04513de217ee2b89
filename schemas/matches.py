"""
Schemas for match, scorecard, wagon wheel and commentary responses.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import (
    BaseResponse,
    CompetitionSummary,
    OrmModel,
    Pagination,
    PlayerSummary,
    TeamSummary,
    VenueSummary,
)


class MatchBrief(OrmModel):
    """Enough of a match to label a scorecard line."""

    id: int
    match_id: int
    title: Optional[str] = None
    short_title: Optional[str] = None
    status: Optional[int] = None
    date_start: Optional[datetime] = None
    result: Optional[str] = None
    team_a: TeamSummary
    team_b: TeamSummary
    venue: VenueSummary


class MatchSummary(MatchBrief):
    subtitle: Optional[str] = None
    match_number: Optional[str] = None
    format: Optional[int] = None
    format_str: Optional[str] = None
    status_str: Optional[str] = None
    status_note: Optional[str] = None
    date_end: Optional[datetime] = None
    date_start_ist: Optional[datetime] = None
    date_end_ist: Optional[datetime] = None
    timestamp_start: Optional[int] = None
    timestamp_end: Optional[int] = None
    team_a_scores_full: Optional[str] = None
    team_a_scores: Optional[str] = None
    team_a_overs: Optional[str] = None
    team_b_scores_full: Optional[str] = None
    team_b_scores: Optional[str] = None
    team_b_overs: Optional[str] = None
    result_type: Optional[int] = None
    win_margin: Optional[str] = None
    winning_team: Optional[TeamSummary] = None
    toss_text: Optional[str] = None
    toss_winner: Optional[TeamSummary] = None
    toss_decision: Optional[int] = None
    has_commentary: bool = False
    has_wagon: bool = False


# --------------------------- Scorecards ---------------------------- #


class InningsSummary(OrmModel):
    id: int
    iid: int
    number: int
    name: Optional[str] = None
    status: Optional[int] = None
    is_super_over: bool = False
    result: Optional[int] = None
    scores: Optional[str] = None
    scores_full: Optional[str] = None
    runs: int = 0
    wickets: int = 0
    overs: float = 0
    batting_team: TeamSummary
    fielding_team: TeamSummary


class BattingLineItem(OrmModel):
    id: int
    player_id: int
    name: Optional[str] = None
    position: int
    runs: int = 0
    balls_faced: int = 0
    fours: int = 0
    sixes: int = 0
    strike_rate: float = 0
    how_out: Optional[str] = None
    dismissal: Optional[str] = None
    bowler_pid: Optional[int] = Field(None, description="Feed player id of the dismissing bowler")
    is_batting: bool = False


class BowlingLineItem(OrmModel):
    id: int
    player_id: int
    name: Optional[str] = None
    overs: float = 0
    runs_conceded: int = 0
    wickets: int = 0
    maidens: int = 0
    no_balls: int = 0
    wides: int = 0
    economy: float = 0
    dot_balls: Optional[int] = None


class ScorecardBattingLine(BattingLineItem):
    player: PlayerSummary


class ScorecardBowlingLine(BowlingLineItem):
    player: PlayerSummary


class FallOfWicketItem(OrmModel):
    id: int
    name: Optional[str] = None
    runs: int = 0
    overs: float = 0
    score: Optional[str] = None


class InningsDetail(InningsSummary):
    batting: list[ScorecardBattingLine] = Field(default_factory=list)
    bowling: list[ScorecardBowlingLine] = Field(default_factory=list)
    fall_of_wickets: list[FallOfWicketItem] = Field(default_factory=list)


class MatchDetail(MatchSummary):
    umpires: Optional[str] = None
    referee: Optional[str] = None
    latest_inning_number: Optional[int] = None
    competition: CompetitionSummary
    innings: list[InningsDetail] = Field(default_factory=list)


class VenueWithCount(VenueSummary):
    match_count: int = 0


# --------------------------- Wagon wheel ---------------------------- #


class WagonBall(OrmModel):
    id: int
    innings_id: int
    batsman_pid: Optional[int] = None
    bowler_pid: Optional[int] = None
    over: float = 0
    bat_run: int = 0
    team_run: int = 0
    x_coord: int = 0
    y_coord: int = 0
    zone_id: int = 0
    zone_name: Optional[str] = None
    event_name: str = ""
    unique_over: float = 0


class WagonBatsman(BaseModel):
    player_id: int
    pid: Optional[int] = Field(None, description="Feed player id, matches WagonBall.batsman_pid")
    name: Optional[str] = None
    runs: int = 0
    balls: int = 0
    fours: int = 0
    sixes: int = 0


class WagonInnings(BaseModel):
    innings_number: int
    innings_name: Optional[str] = None
    batting_team: TeamSummary
    batsmen: list[WagonBatsman] = Field(default_factory=list)
    wagon_data: list[WagonBall] = Field(default_factory=list)


class ZoneStat(BaseModel):
    runs: int = 0
    balls: int = 0
    fours: int = 0
    sixes: int = 0


class WagonWheelData(BaseModel):
    match_id: int
    total_balls: int
    innings: list[WagonInnings] = Field(default_factory=list)
    zone_stats: dict[str, ZoneStat] = Field(default_factory=dict)
    zone_names: list[str] = Field(default_factory=list)


# --------------------------- Commentary ---------------------------- #


class CommentaryItem(OrmModel):
    id: int
    event_id: str
    innings_id: int
    event: str
    batsman_pid: Optional[int] = None
    bowler_pid: Optional[int] = None
    over: int = 0
    ball: int = 0
    commentary: str = ""
    run: int = 0
    is_wide: bool = False
    is_no_ball: bool = False
    is_six: bool = False
    is_four: bool = False
    is_wicket: bool = False


class CommentaryInningsGroup(BaseModel):
    innings_number: int
    innings_name: str
    batting_team: Optional[TeamSummary] = None
    overs: dict[int, list[CommentaryItem]] = Field(default_factory=dict)


class CommentaryHighlights(BaseModel):
    """Counts over the returned page only."""

    wickets: int = 0
    sixes: int = 0
    fours: int = 0
    total_runs: int = 0


class CommentaryData(BaseModel):
    match_id: int
    innings: list[InningsSummary] = Field(default_factory=list)
    commentaries: list[CommentaryItem] = Field(default_factory=list)
    grouped_by_innings: list[CommentaryInningsGroup] = Field(default_factory=list)
    highlights: CommentaryHighlights


class HighlightsSummary(BaseModel):
    total_wickets: int = 0
    total_sixes: int = 0
    total_fours: int = 0


class HighlightsData(BaseModel):
    match_id: int
    innings: list[InningsSummary] = Field(default_factory=list)
    wickets: list[CommentaryItem] = Field(default_factory=list)
    sixes: list[CommentaryItem] = Field(default_factory=list)
    fours: list[CommentaryItem] = Field(default_factory=list)
    summary: HighlightsSummary


# --------------------------- Responses ---------------------------- #


class MatchesListResp(BaseResponse):
    """Response for GET /v1/matches and /v1/teams/{id}/matches."""

    data: list[MatchSummary] = Field(default_factory=list)
    pagination: Pagination


class MatchListResp(BaseResponse):
    data: list[MatchSummary] = Field(default_factory=list)


class VenuesResp(BaseResponse):
    data: list[VenueWithCount] = Field(default_factory=list)


class MatchDetailResp(BaseResponse):
    data: Optional[MatchDetail] = None


class ScorecardResp(BaseResponse):
    data: list[InningsDetail] = Field(default_factory=list)


class WagonWheelResp(BaseResponse):
    data: Optional[WagonWheelData] = None


class CommentaryResp(BaseResponse):
    data: Optional[CommentaryData] = None
    pagination: Pagination


class HighlightsResp(BaseResponse):
    data: Optional[HighlightsData] = None
