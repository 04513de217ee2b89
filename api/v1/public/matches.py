"""
Public API routes for matches and their nested resources.

Static paths (/recent/list, /venues/list) must stay above /{match_id}.
"""

from typing import Optional

from fastapi import APIRouter, Path, Query, Request

from core.rate_limit import PUBLIC_RATE_LIMIT, limiter
from schemas.matches import (
    CommentaryResp,
    HighlightsResp,
    MatchDetailResp,
    MatchesListResp,
    MatchListResp,
    ScorecardResp,
    VenuesResp,
    WagonWheelResp,
)
from services.match_service import MatchService

router = APIRouter(prefix="/matches", tags=["Matches"])

NOT_FOUND = {404: {"description": "Match not found"}}


@router.get("/recent/list", response_model=MatchListResp, summary="Recently completed matches")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def recent_matches(
    request: Request,
    limit: Optional[int] = Query(None, description="Rows to return, at most 20"),
) -> MatchListResp:
    return await MatchService.recent_matches(limit=limit)


@router.get("/venues/list", response_model=VenuesResp, summary="Venues with match counts")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def list_venues(request: Request) -> VenuesResp:
    return await MatchService.list_venues()


@router.get("", response_model=MatchesListResp, summary="List matches")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def list_matches(
    request: Request,
    page: Optional[int] = Query(None, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, description="Page size, at most 50"),
    team_id: Optional[int] = Query(None, description="Matches involving this team"),
    venue_id: Optional[int] = Query(None, description="Matches at this venue"),
    status: Optional[int] = Query(None, description="1 scheduled, 2 completed, 3 live"),
) -> MatchesListResp:
    """Matches newest first."""
    return await MatchService.list_matches(
        page=page,
        limit=limit,
        team_id=team_id,
        venue_id=venue_id,
        status=status,
    )


@router.get("/{match_id}", response_model=MatchDetailResp, summary="Get a match", responses=NOT_FOUND)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_match(request: Request, match_id: int = Path(..., description="Match id")) -> MatchDetailResp:
    return await MatchService.get_match(match_id)


@router.get(
    "/{match_id}/scorecard",
    response_model=ScorecardResp,
    summary="Get a match scorecard",
    responses={404: {"description": "Scorecard not found"}},
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_scorecard(request: Request, match_id: int = Path(..., description="Match id")) -> ScorecardResp:
    return await MatchService.get_scorecard(match_id)


@router.get("/{match_id}/wagon-wheel", response_model=WagonWheelResp, summary="Shot placement", responses=NOT_FOUND)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_wagon_wheel(
    request: Request,
    match_id: int = Path(..., description="Match id"),
    innings_number: Optional[int] = Query(None, description="Only this innings"),
    batsman_id: Optional[int] = Query(None, description="Feed player id of the batsman"),
) -> WagonWheelResp:
    return await MatchService.get_wagon_wheel(match_id, innings_number=innings_number, batsman_id=batsman_id)


@router.get("/{match_id}/commentary", response_model=CommentaryResp, summary="Ball-by-ball commentary", responses=NOT_FOUND)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_commentary(
    request: Request,
    match_id: int = Path(..., description="Match id"),
    innings_number: Optional[int] = Query(None, description="Only this innings"),
    over: Optional[int] = Query(None, description="Only this over"),
    events: Optional[str] = Query(None, description="Comma separated: wicket, six, four"),
    page: Optional[int] = Query(None, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, description="Page size, at most 200"),
) -> CommentaryResp:
    return await MatchService.get_commentary(
        match_id,
        innings_number=innings_number,
        over=over,
        events=events,
        page=page,
        limit=limit,
    )


@router.get("/{match_id}/highlights", response_model=HighlightsResp, summary="Wickets, sixes and fours", responses=NOT_FOUND)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_highlights(request: Request, match_id: int = Path(..., description="Match id")) -> HighlightsResp:
    return await MatchService.get_highlights(match_id)
