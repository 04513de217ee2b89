"""
Public API routes for betting insights. Served from static tables.
"""

from typing import Optional

from fastapi import APIRouter, Path, Query, Request

from core.rate_limit import PUBLIC_RATE_LIMIT, limiter
from schemas.betting import (
    BettingOverviewResp,
    BettingTeamResp,
    BettingTeamsResp,
    MatchPredictionResp,
    PlayerBetsResp,
    RiskAssessmentResp,
    ScenariosResp,
)
from services.betting_service import BettingService

router = APIRouter(prefix="/betting", tags=["Betting"])


@router.get("/overview", response_model=BettingOverviewResp, summary="Betting overview")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_overview(request: Request) -> BettingOverviewResp:
    return await BettingService.get_overview()


@router.get("/teams", response_model=BettingTeamsResp, summary="Team betting profiles")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def list_teams(request: Request) -> BettingTeamsResp:
    """Profiles ordered from safest to riskiest."""
    return await BettingService.list_teams()


@router.get(
    "/teams/{abbr}",
    response_model=BettingTeamResp,
    summary="Team betting profile",
    responses={404: {"description": "Unknown team"}},
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_team(request: Request, abbr: str = Path(..., description="Team abbreviation, e.g. GT")) -> BettingTeamResp:
    return await BettingService.get_team(abbr)


@router.get("/players", response_model=PlayerBetsResp, summary="Player betting tips")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def list_players(
    request: Request,
    limit: Optional[int] = Query(None, description="Rows to return, at most 20"),
) -> PlayerBetsResp:
    return await BettingService.list_players(limit=limit)


@router.get("/scenarios", response_model=ScenariosResp, summary="Match scenarios")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def list_scenarios(request: Request) -> ScenariosResp:
    return await BettingService.list_scenarios()


@router.get("/risk-assessment", response_model=RiskAssessmentResp, summary="Bets grouped by risk")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_risk_assessment(request: Request) -> RiskAssessmentResp:
    return await BettingService.get_risk_assessment()


@router.get(
    "/match-predictor",
    response_model=MatchPredictionResp,
    summary="Predict a match",
    responses={
        400: {"description": "A team is missing"},
        404: {"description": "Unknown team"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def predict_match(
    request: Request,
    team_a: Optional[str] = Query(None, description="Abbreviation of the first team"),
    team_b: Optional[str] = Query(None, description="Abbreviation of the second team"),
    batting_first: Optional[str] = Query(None, description="Abbreviation of the side batting first"),
) -> MatchPredictionResp:
    return await BettingService.predict_match(team_a, team_b, batting_first=batting_first)
