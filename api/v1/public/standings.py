from typing import Optional

from fastapi import APIRouter, Path, Query, Request

from core.rate_limit import PUBLIC_RATE_LIMIT, limiter
from schemas.standings import RoundsResp, StandingsResp, TeamStandingResp
from services.standings_service import StandingsService

router = APIRouter(prefix="/standings", tags=["Standings"])


@router.get("", response_model=StandingsResp, summary="Points table")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_standings(
    request: Request,
    round_id: Optional[int] = Query(None, description="Round to show, defaults to the latest"),
) -> StandingsResp:
    return await StandingsService.get_standings(round_id=round_id)


@router.get("/rounds", response_model=RoundsResp, summary="Rounds with standings")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_rounds(request: Request) -> RoundsResp:
    return await StandingsService.get_rounds()


@router.get(
    "/team/{team_id}",
    response_model=TeamStandingResp,
    summary="Latest standing of a team",
    responses={404: {"description": "Team standing not found"}},
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_team_standing(request: Request, team_id: int = Path(..., description="Team id")) -> TeamStandingResp:
    return await StandingsService.get_team_standing(team_id)
