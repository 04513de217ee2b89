"""
Public API routes for teams.
"""

from typing import Optional

from fastapi import APIRouter, Path, Query, Request

from core.rate_limit import PUBLIC_RATE_LIMIT, limiter
from schemas.matches import MatchesListResp
from schemas.teams import TeamDetailResp, TeamPlayersResp, TeamsListResp
from services.team_service import TeamService

router = APIRouter(prefix="/teams", tags=["Teams"])


@router.get(
    "",
    response_model=TeamsListResp,
    summary="List teams",
    description="Teams ordered by name, each with its best standing row and merged team stats.",
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def list_teams(
    request: Request,
    page: Optional[int] = Query(None, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, description="Page size, at most 100"),
    search: Optional[str] = Query(None, description="Substring of the team name or abbreviation"),
) -> TeamsListResp:
    return await TeamService.list_teams(page=page, limit=limit, search=search)


@router.get(
    "/{team_id}",
    response_model=TeamDetailResp,
    summary="Get a team",
    responses={404: {"description": "Team not found"}},
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_team(request: Request, team_id: int = Path(..., description="Team id")) -> TeamDetailResp:
    """Team with its latest standing, team stats and squad."""
    return await TeamService.get_team(team_id)


@router.get(
    "/{team_id}/players",
    response_model=TeamPlayersResp,
    summary="Get a team's players",
    responses={404: {"description": "Team not found"}},
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_team_players(request: Request, team_id: int = Path(..., description="Team id")) -> TeamPlayersResp:
    return await TeamService.get_team_players(team_id)


@router.get(
    "/{team_id}/matches",
    response_model=MatchesListResp,
    summary="Get a team's matches",
    responses={404: {"description": "Team not found"}},
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_team_matches(
    request: Request,
    team_id: int = Path(..., description="Team id"),
    page: Optional[int] = Query(None, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, description="Page size, at most 50"),
) -> MatchesListResp:
    return await TeamService.get_team_matches(team_id, page=page, limit=limit)
