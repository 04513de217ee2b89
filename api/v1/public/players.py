"""
Public API routes for players.

The /top/* routes are declared before /{player_id} so they are not captured
by the id route.
"""

from typing import Optional

from fastapi import APIRouter, Path, Query, Request

from core.rate_limit import PUBLIC_RATE_LIMIT, limiter
from schemas.players import (
    PlayerBattingResp,
    PlayerBowlingResp,
    PlayerDetailResp,
    PlayersListResp,
    TopBatsmenResp,
    TopBowlersResp,
)
from services.player_service import PlayerService

router = APIRouter(prefix="/players", tags=["Players"])


@router.get("/top/batsmen", response_model=TopBatsmenResp, summary="Top run scorers")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def top_batsmen(
    request: Request,
    limit: Optional[int] = Query(None, description="Rows to return, at most 50"),
    sort_by: Optional[str] = Query(
        None, description="runs, average, strike_rate, centuries, fifties or sixes"
    ),
) -> TopBatsmenResp:
    return await PlayerService.top_batsmen(limit=limit, sort_by=sort_by)


@router.get("/top/bowlers", response_model=TopBowlersResp, summary="Top wicket takers")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def top_bowlers(
    request: Request,
    limit: Optional[int] = Query(None, description="Rows to return, at most 50"),
    sort_by: Optional[str] = Query(
        None, description="wickets, economy, average or strike_rate (economy and average ascending)"
    ),
) -> TopBowlersResp:
    return await PlayerService.top_bowlers(limit=limit, sort_by=sort_by)


@router.get("", response_model=PlayersListResp, summary="List players")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def list_players(
    request: Request,
    page: Optional[int] = Query(None, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, description="Page size, at most 100"),
    search: Optional[str] = Query(None, description="Substring of the player's name"),
    role: Optional[str] = Query(None, description="Playing role, e.g. bat, bowl, all, wk"),
    team_id: Optional[int] = Query(None, description="Only players in this team's squad"),
) -> PlayersListResp:
    return await PlayerService.list_players(page=page, limit=limit, search=search, role=role, team_id=team_id)


@router.get(
    "/{player_id}",
    response_model=PlayerDetailResp,
    summary="Get a player",
    responses={404: {"description": "Player not found"}},
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_player(request: Request, player_id: int = Path(..., description="Player id")) -> PlayerDetailResp:
    """Player profile with squads, career stats and every aggregate row."""
    return await PlayerService.get_player(player_id)


@router.get("/{player_id}/batting", response_model=PlayerBattingResp, summary="Per-innings batting")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_player_batting(request: Request, player_id: int = Path(..., description="Player id")) -> PlayerBattingResp:
    return await PlayerService.get_batting(player_id)


@router.get("/{player_id}/bowling", response_model=PlayerBowlingResp, summary="Per-innings bowling")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_player_bowling(request: Request, player_id: int = Path(..., description="Player id")) -> PlayerBowlingResp:
    return await PlayerService.get_bowling(player_id)
