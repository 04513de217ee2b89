"""
Service for player listings, rankings, profiles and per-innings records.
"""

import json

from core.errors import ApiError
from core.logging import get_logger
from db.models import (
    BattingAggregate,
    BattingLine,
    BowlingAggregate,
    BowlingLine,
    Innings,
    Match,
    Player,
    PlayerCareerStats,
    Team,
    TeamSquad,
)
from schemas.common import ApiStatus, Pagination, PlayerSummary, clamp_limit, clamp_page
from schemas.matches import BattingLineItem, BowlingLineItem
from schemas.players import (
    BattingAggregateItem,
    BowlingAggregateItem,
    CareerStats,
    InningsContext,
    PlayerBattingRecord,
    PlayerBattingResp,
    PlayerBowlingRecord,
    PlayerBowlingResp,
    PlayerDetail,
    PlayerDetailResp,
    PlayerListItem,
    PlayersListResp,
    PlayerWithAggregates,
    RankedBatsman,
    RankedBowler,
    SquadItem,
    TopBatsmenResp,
    TopBowlersResp,
)

# Headline aggregate categories shown next to a player
MOST_RUNS = "most_runs"
TOP_WICKET_TAKERS = "top_wicket_takers"

BATSMEN_SORT_FIELDS = {
    "runs": BattingAggregate.runs,
    "average": BattingAggregate.average,
    "strike_rate": BattingAggregate.strike_rate,
    "centuries": BattingAggregate.centuries,
    "fifties": BattingAggregate.fifties,
    "sixes": BattingAggregate.sixes,
}

BOWLERS_SORT_FIELDS = {
    "wickets": BowlingAggregate.wickets,
    "economy": BowlingAggregate.economy,
    "average": BowlingAggregate.average,
    "strike_rate": BowlingAggregate.strike_rate,
}

# Lower is better for these bowling figures
ASCENDING_BOWLING_SORTS = {"economy", "average"}


def player_with_aggregates(player: Player, headline_only: bool = False) -> PlayerWithAggregates:
    batting = BattingAggregate.select().where(BattingAggregate.player == player)
    bowling = BowlingAggregate.select().where(BowlingAggregate.player == player)
    if headline_only:
        batting = batting.where(BattingAggregate.stat_type == MOST_RUNS)
        bowling = bowling.where(BowlingAggregate.stat_type == TOP_WICKET_TAKERS)

    return PlayerWithAggregates(
        **PlayerSummary.model_validate(player).model_dump(),
        batting_stats=[BattingAggregateItem.model_validate(row) for row in batting.order_by(BattingAggregate.id)],
        bowling_stats=[BowlingAggregateItem.model_validate(row) for row in bowling.order_by(BowlingAggregate.id)],
    )


def _squads(player: Player) -> list[SquadItem]:
    rows = (
        TeamSquad.select(TeamSquad, Team)
        .join(Team)
        .where(TeamSquad.player == player)
        .order_by(TeamSquad.season.desc(), Team.title)
    )
    return [SquadItem.model_validate(row) for row in rows]


def _career(player: Player) -> CareerStats | None:
    row = PlayerCareerStats.get_or_none(PlayerCareerStats.player == player)
    if row is None:
        return None
    try:
        return CareerStats(
            batting=json.loads(row.batting_stats or "{}"),
            bowling=json.loads(row.bowling_stats or "{}"),
        )
    except ValueError:
        get_logger().warning("career_stats_unreadable", player_id=player.id)
        return CareerStats()


def _innings_context(innings: Innings) -> InningsContext:
    return InningsContext.model_validate(innings)


def get_player_or_404(player_id: int) -> Player:
    player = Player.get_or_none(Player.id == player_id)
    if player is None:
        raise ApiError.not_found("Player not found")
    return player


class PlayerService:

    @staticmethod
    async def list_players(
        page: int | None = None,
        limit: int | None = None,
        search: str | None = None,
        role: str | None = None,
        team_id: int | None = None,
    ) -> PlayersListResp:
        """
        List players with optional filters.

        Args:
            search: Substring of the full or short name
            role: Exact playing role (e.g. "bat", "bowl", "all", "wk")
            team_id: Only players in this team's squad
        """
        page = clamp_page(page)
        limit = clamp_limit(limit, default=20, maximum=100)

        query = Player.select()
        if search:
            term = search.strip()
            query = query.where(Player.title.contains(term) | Player.short_name.contains(term))
        if role:
            query = query.where(Player.playing_role == role)
        if team_id:
            in_squad = TeamSquad.select(TeamSquad.player).where(TeamSquad.team == team_id)
            query = query.where(Player.id.in_(in_squad))

        total = query.count()
        players = query.order_by(Player.title.asc(), Player.id).paginate(page, limit)

        data = []
        for player in players:
            base = player_with_aggregates(player, headline_only=True)
            data.append(
                PlayerListItem(
                    **base.model_dump(),
                    squads=_squads(player),
                )
            )

        return PlayersListResp(
            status=ApiStatus.SUCCESS,
            message=f"Found {total} players",
            data=data,
            pagination=Pagination.build(page, limit, total),
        )

    @staticmethod
    async def top_batsmen(limit: int | None = None, sort_by: str | None = None) -> TopBatsmenResp:
        limit = clamp_limit(limit, default=10, maximum=50)
        field = BATSMEN_SORT_FIELDS.get(sort_by or "runs", BattingAggregate.runs)

        rows = (
            BattingAggregate.select(BattingAggregate, Player, Team)
            .join(Player)
            .switch(BattingAggregate)
            .join(Team)
            .where(BattingAggregate.stat_type == MOST_RUNS)
            .order_by(field.desc(nulls="last"), BattingAggregate.id)
            .limit(limit)
        )
        return TopBatsmenResp(
            status=ApiStatus.SUCCESS,
            message="Top batsmen fetched successfully",
            data=[RankedBatsman.model_validate(row) for row in rows],
        )

    @staticmethod
    async def top_bowlers(limit: int | None = None, sort_by: str | None = None) -> TopBowlersResp:
        limit = clamp_limit(limit, default=10, maximum=50)
        sort_by = sort_by if sort_by in BOWLERS_SORT_FIELDS else "wickets"
        field = BOWLERS_SORT_FIELDS[sort_by]
        ordering = field.asc(nulls="last") if sort_by in ASCENDING_BOWLING_SORTS else field.desc(nulls="last")

        rows = (
            BowlingAggregate.select(BowlingAggregate, Player, Team)
            .join(Player)
            .switch(BowlingAggregate)
            .join(Team)
            .where(BowlingAggregate.stat_type == TOP_WICKET_TAKERS)
            .order_by(ordering, BowlingAggregate.id)
            .limit(limit)
        )
        return TopBowlersResp(
            status=ApiStatus.SUCCESS,
            message="Top bowlers fetched successfully",
            data=[RankedBowler.model_validate(row) for row in rows],
        )

    @staticmethod
    async def get_player(player_id: int) -> PlayerDetailResp:
        player = get_player_or_404(player_id)
        base = player_with_aggregates(player)

        detail = PlayerDetail(
            **base.model_dump(),
            squads=_squads(player),
            career_stats=_career(player),
        )
        return PlayerDetailResp(status=ApiStatus.SUCCESS, message="Player fetched successfully", data=detail)

    @staticmethod
    async def get_batting(player_id: int) -> PlayerBattingResp:
        player = get_player_or_404(player_id)

        lines = (
            BattingLine.select(BattingLine, Innings, Match)
            .join(Innings)
            .join(Match)
            .where(BattingLine.player == player)
            .order_by(BattingLine.runs.desc(), Match.date_start)
        )
        data = [
            PlayerBattingRecord(
                **BattingLineItem.model_validate(line).model_dump(),
                innings=_innings_context(line.innings),
            )
            for line in lines
        ]
        return PlayerBattingResp(status=ApiStatus.SUCCESS, message=f"Found {len(data)} innings", data=data)

    @staticmethod
    async def get_bowling(player_id: int) -> PlayerBowlingResp:
        player = get_player_or_404(player_id)

        lines = (
            BowlingLine.select(BowlingLine, Innings, Match)
            .join(Innings)
            .join(Match)
            .where(BowlingLine.player == player)
            .order_by(BowlingLine.wickets.desc(), BowlingLine.runs_conceded, Match.date_start)
        )
        data = [
            PlayerBowlingRecord(
                **BowlingLineItem.model_validate(line).model_dump(),
                innings=_innings_context(line.innings),
            )
            for line in lines
        ]
        return PlayerBowlingResp(status=ApiStatus.SUCCESS, message=f"Found {len(data)} innings", data=data)
