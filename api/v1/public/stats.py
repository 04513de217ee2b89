"""
Public API routes for tournament statistics.
"""

from typing import Optional

from fastapi import APIRouter, Query, Request

from core.rate_limit import PUBLIC_RATE_LIMIT, limiter
from schemas.stats import (
    BattingStatsResp,
    BowlingStatsResp,
    RunsPerMatchResp,
    StatsOverviewResp,
    TeamPerformanceResp,
    TopScorersByTeamResp,
)
from services.stats_service import StatsService

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("/overview", response_model=StatsOverviewResp, summary="Tournament overview")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_overview(request: Request) -> StatsOverviewResp:
    """Totals plus the highest score, best bowling figures and top six hitter."""
    return await StatsService.get_overview()


@router.get("/batting", response_model=BattingStatsResp, summary="Batting rankings")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_batting_stats(
    request: Request,
    stat_type: Optional[str] = Query(None, alias="type", description="Ranking category, e.g. most_runs, highest_average, most_run6"),
    limit: Optional[int] = Query(None, description="Rows to return, at most 50"),
) -> BattingStatsResp:
    return await StatsService.get_batting_stats(stat_type=stat_type, limit=limit)


@router.get("/bowling", response_model=BowlingStatsResp, summary="Bowling rankings")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_bowling_stats(
    request: Request,
    stat_type: Optional[str] = Query(None, alias="type", description="Ranking category, e.g. top_wicket_takers, best_economy_rates"),
    limit: Optional[int] = Query(None, description="Rows to return, at most 50"),
) -> BowlingStatsResp:
    return await StatsService.get_bowling_stats(stat_type=stat_type, limit=limit)


@router.get("/team-performance", response_model=TeamPerformanceResp, summary="Team performance")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_team_performance(request: Request) -> TeamPerformanceResp:
    return await StatsService.get_team_performance()


@router.get("/runs-per-match", response_model=RunsPerMatchResp, summary="Runs per completed match")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_runs_per_match(request: Request) -> RunsPerMatchResp:
    return await StatsService.get_runs_per_match()


@router.get("/top-scorers-by-team", response_model=TopScorersByTeamResp, summary="Top scorer of each team")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_top_scorers_by_team(request: Request) -> TopScorersByTeamResp:
    return await StatsService.get_top_scorers_by_team()
