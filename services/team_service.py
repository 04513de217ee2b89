"""
Service for team listings, team detail, squads and team fixtures.
"""

from core.errors import ApiError
from core.logging import get_logger
from db.models import Match, Player, Standing, Team, TeamSquad, TeamStats
from schemas.common import ApiStatus, Pagination, PlayerSummary, TeamSummary, clamp_limit, clamp_page
from schemas.matches import MatchesListResp, MatchSummary
from schemas.standings import StandingSummary
from schemas.stats import TeamStatsItem
from schemas.teams import TeamDetail, TeamDetailResp, TeamListItem, TeamPlayersResp, TeamsListResp
from services.player_service import player_with_aggregates


def _stats_for(team: Team) -> TeamStatsItem | None:
    row = TeamStats.get_or_none(TeamStats.team == team)
    return TeamStatsItem.model_validate(row) if row else None


def _standing(team: Team, *ordering) -> StandingSummary | None:
    row = Standing.select().where(Standing.team == team).order_by(*ordering).first()
    return StandingSummary.model_validate(row) if row else None


def get_team_or_404(team_id: int) -> Team:
    team = Team.get_or_none(Team.id == team_id)
    if team is None:
        raise ApiError.not_found("Team not found")
    return team


class TeamService:

    @staticmethod
    async def list_teams(page: int | None = None, limit: int | None = None, search: str | None = None) -> TeamsListResp:
        page = clamp_page(page)
        limit = clamp_limit(limit, default=10, maximum=100)

        query = Team.select()
        if search:
            term = search.strip()
            query = query.where(Team.title.contains(term) | Team.abbr.contains(term))

        total = query.count()
        teams = query.order_by(Team.title.asc(), Team.id).paginate(page, limit)

        data = [
            TeamListItem(
                **TeamSummary.model_validate(team).model_dump(),
                best_standing=_standing(team, Standing.points.desc(), Standing.round_id.desc()),
                stats=_stats_for(team),
            )
            for team in teams
        ]

        return TeamsListResp(
            status=ApiStatus.SUCCESS,
            message=f"Found {total} teams",
            data=data,
            pagination=Pagination.build(page, limit, total),
        )

    @staticmethod
    async def get_team(team_id: int) -> TeamDetailResp:
        team = get_team_or_404(team_id)

        squad = (
            Player.select()
            .join(TeamSquad)
            .where(TeamSquad.team == team)
            .order_by(Player.title)
        )

        detail = TeamDetail(
            **TeamSummary.model_validate(team).model_dump(),
            latest_standing=_standing(team, Standing.round_id.desc()),
            stats=_stats_for(team),
            squad=[PlayerSummary.model_validate(player) for player in squad],
        )
        return TeamDetailResp(status=ApiStatus.SUCCESS, message="Team fetched successfully", data=detail)

    @staticmethod
    async def get_team_players(team_id: int) -> TeamPlayersResp:
        """
        Squad players of a team with their headline batting and bowling
        aggregates. An existing team with no squad rows yields an empty list.
        """
        team = get_team_or_404(team_id)

        players = (
            Player.select()
            .join(TeamSquad)
            .where(TeamSquad.team == team)
            .order_by(Player.title)
            .distinct()
        )
        data = [player_with_aggregates(player, headline_only=True) for player in players]

        return TeamPlayersResp(
            status=ApiStatus.SUCCESS,
            message=f"Found {len(data)} players",
            data=data,
        )

    @staticmethod
    async def get_team_matches(team_id: int, page: int | None = None, limit: int | None = None) -> MatchesListResp:
        team = get_team_or_404(team_id)
        page = clamp_page(page)
        limit = clamp_limit(limit, default=10, maximum=50)

        query = Match.select().where((Match.team_a == team) | (Match.team_b == team))
        total = query.count()
        matches = query.order_by(Match.date_start.desc(), Match.id.desc()).paginate(page, limit)

        get_logger().debug("team_matches_fetched", team_id=team.id, total=total)

        return MatchesListResp(
            status=ApiStatus.SUCCESS,
            message=f"Found {total} matches",
            data=[MatchSummary.model_validate(match) for match in matches],
            pagination=Pagination.build(page, limit, total),
        )
