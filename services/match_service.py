"""
Service for matches and their nested resources: scorecards, wagon wheels,
ball-by-ball commentary and highlights.
"""

import operator
from functools import reduce

from peewee import JOIN, fn

from core.errors import ApiError
from core.logging import get_logger
from db.models import (
    BattingLine,
    BowlingLine,
    Commentary,
    FallOfWicket,
    Innings,
    Match,
    Player,
    Venue,
    WagonWheel,
)
from db.models.cricket import ZONE_NAMES
from db.models.cricket.matches import STATUS_COMPLETED
from schemas.common import ApiStatus, CompetitionSummary, Pagination, TeamSummary, clamp_limit, clamp_page
from schemas.matches import (
    CommentaryData,
    CommentaryHighlights,
    CommentaryInningsGroup,
    CommentaryItem,
    CommentaryResp,
    FallOfWicketItem,
    HighlightsData,
    HighlightsResp,
    HighlightsSummary,
    InningsDetail,
    InningsSummary,
    MatchDetail,
    MatchDetailResp,
    MatchesListResp,
    MatchListResp,
    MatchSummary,
    ScorecardBattingLine,
    ScorecardBowlingLine,
    ScorecardResp,
    VenuesResp,
    VenueWithCount,
    WagonBall,
    WagonBatsman,
    WagonInnings,
    WagonWheelData,
    WagonWheelResp,
    ZoneStat,
)

# Commentary ?events= filter names
EVENT_FILTERS = {
    "wicket": Commentary.is_wicket,
    "six": Commentary.is_six,
    "four": Commentary.is_four,
}


def get_match_or_404(match_id: int) -> Match:
    match = Match.get_or_none(Match.id == match_id)
    if match is None:
        raise ApiError.not_found("Match not found")
    return match


def _match_innings(match: Match) -> list[Innings]:
    return list(Innings.select().where(Innings.match == match).order_by(Innings.number, Innings.id))


def _innings_detail(innings: Innings, bowling_order) -> InningsDetail:
    batting = (
        BattingLine.select(BattingLine, Player)
        .join(Player)
        .where(BattingLine.innings == innings)
        .order_by(BattingLine.position, BattingLine.id)
    )
    bowling = (
        BowlingLine.select(BowlingLine, Player)
        .join(Player)
        .where(BowlingLine.innings == innings)
        .order_by(bowling_order, BowlingLine.id)
    )
    wickets = (
        FallOfWicket.select()
        .where(FallOfWicket.innings == innings)
        .order_by(FallOfWicket.runs, FallOfWicket.id)
    )

    return InningsDetail(
        **InningsSummary.model_validate(innings).model_dump(),
        batting=[ScorecardBattingLine.model_validate(line) for line in batting],
        bowling=[ScorecardBowlingLine.model_validate(line) for line in bowling],
        fall_of_wickets=[FallOfWicketItem.model_validate(row) for row in wickets],
    )


def _innings_by_number(match: Match, number: int | None) -> Innings | None:
    if not number:
        return None
    return Innings.get_or_none((Innings.match == match) & (Innings.number == number))


class MatchService:

    @staticmethod
    async def list_matches(
        page: int | None = None,
        limit: int | None = None,
        team_id: int | None = None,
        venue_id: int | None = None,
        status: int | None = None,
    ) -> MatchesListResp:
        page = clamp_page(page)
        limit = clamp_limit(limit, default=10, maximum=50)

        query = Match.select()
        if team_id:
            query = query.where((Match.team_a == team_id) | (Match.team_b == team_id))
        if venue_id:
            query = query.where(Match.venue == venue_id)
        if status is not None:
            query = query.where(Match.status == status)

        total = query.count()
        matches = query.order_by(Match.date_start.desc(), Match.id.desc()).paginate(page, limit)

        return MatchesListResp(
            status=ApiStatus.SUCCESS,
            message=f"Found {total} matches",
            data=[MatchSummary.model_validate(match) for match in matches],
            pagination=Pagination.build(page, limit, total),
        )

    @staticmethod
    async def recent_matches(limit: int | None = None) -> MatchListResp:
        limit = clamp_limit(limit, default=5, maximum=20)
        matches = (
            Match.select()
            .where(Match.status == STATUS_COMPLETED)
            .order_by(Match.date_start.desc(), Match.id.desc())
            .limit(limit)
        )
        data = [MatchSummary.model_validate(match) for match in matches]
        return MatchListResp(status=ApiStatus.SUCCESS, message=f"Found {len(data)} matches", data=data)

    @staticmethod
    async def list_venues() -> VenuesResp:
        venues = (
            Venue.select(Venue, fn.COUNT(Match.id).alias("match_count"))
            .join(Match, JOIN.LEFT_OUTER)
            .group_by(Venue.id)
            .order_by(Venue.name, Venue.id)
        )
        data = [VenueWithCount.model_validate(venue) for venue in venues]
        return VenuesResp(status=ApiStatus.SUCCESS, message=f"Found {len(data)} venues", data=data)

    @staticmethod
    async def get_match(match_id: int) -> MatchDetailResp:
        match = get_match_or_404(match_id)

        detail = MatchDetail(
            **MatchSummary.model_validate(match).model_dump(),
            umpires=match.umpires,
            referee=match.referee,
            latest_inning_number=match.latest_inning_number,
            competition=CompetitionSummary.model_validate(match.competition),
            innings=[_innings_detail(inn, BowlingLine.overs.desc()) for inn in _match_innings(match)],
        )
        return MatchDetailResp(status=ApiStatus.SUCCESS, message="Match fetched successfully", data=detail)

    @staticmethod
    async def get_scorecard(match_id: int) -> ScorecardResp:
        innings = list(Innings.select().where(Innings.match == match_id).order_by(Innings.number, Innings.id))
        if not innings:
            raise ApiError.not_found("Scorecard not found")

        data = [_innings_detail(inn, BowlingLine.wickets.desc()) for inn in innings]
        return ScorecardResp(status=ApiStatus.SUCCESS, message="Scorecard fetched successfully", data=data)

    @staticmethod
    async def get_wagon_wheel(
        match_id: int,
        innings_number: int | None = None,
        batsman_id: int | None = None,
    ) -> WagonWheelResp:
        """
        Shot placement for a match, grouped per innings with the batsmen who
        batted in it, plus run/ball/boundary totals per fielding zone.

        `batsman_id` is the feed player id, the same value stored on each ball.
        An unknown innings number is ignored rather than rejected.
        """
        match = get_match_or_404(match_id)

        balls = WagonWheel.select().where(WagonWheel.match == match)
        selected = _innings_by_number(match, innings_number)
        if selected is not None:
            balls = balls.where(WagonWheel.innings == selected)
        if batsman_id:
            balls = balls.where(WagonWheel.batsman_pid == batsman_id)
        balls = list(balls.order_by(WagonWheel.unique_over, WagonWheel.id))

        grouped = []
        for inn in _match_innings(match):
            lines = (
                BattingLine.select(BattingLine, Player)
                .join(Player)
                .where(BattingLine.innings == inn)
                .order_by(BattingLine.position, BattingLine.id)
            )
            grouped.append(
                WagonInnings(
                    innings_number=inn.number,
                    innings_name=inn.name,
                    batting_team=TeamSummary.model_validate(inn.batting_team),
                    batsmen=[
                        WagonBatsman(
                            player_id=line.player_id,
                            pid=line.player.pid,
                            name=line.name,
                            runs=line.runs,
                            balls=line.balls_faced,
                            fours=line.fours,
                            sixes=line.sixes,
                        )
                        for line in lines
                    ],
                    wagon_data=[WagonBall.model_validate(ball) for ball in balls if ball.innings_id == inn.id],
                )
            )

        zone_stats: dict[str, ZoneStat] = {}
        for ball in balls:
            zone = ZONE_NAMES[ball.zone_id] if 0 <= ball.zone_id < len(ZONE_NAMES) else "Unknown"
            stat = zone_stats.setdefault(zone, ZoneStat())
            stat.runs += ball.bat_run
            stat.balls += 1
            if ball.event_name == "four":
                stat.fours += 1
            elif ball.event_name == "six":
                stat.sixes += 1

        data = WagonWheelData(
            match_id=match.id,
            total_balls=len(balls),
            innings=grouped,
            zone_stats=zone_stats,
            zone_names=list(ZONE_NAMES),
        )
        return WagonWheelResp(status=ApiStatus.SUCCESS, message="Wagon wheel fetched successfully", data=data)

    @staticmethod
    async def get_commentary(
        match_id: int,
        innings_number: int | None = None,
        over: int | None = None,
        events: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> CommentaryResp:
        """
        Ball-by-ball commentary, newest ball first.

        `events` is a comma separated subset of wicket, six, four; a ball
        matching any of them is returned. Unknown names are ignored. The
        highlight counts cover the returned page only.
        """
        match = get_match_or_404(match_id)
        page = clamp_page(page)
        limit = clamp_limit(limit, default=50, maximum=200)

        query = Commentary.select().where(Commentary.match == match)
        selected = _innings_by_number(match, innings_number)
        if selected is not None:
            query = query.where(Commentary.innings == selected)
        if over is not None:
            query = query.where(Commentary.over == over)
        if events:
            flags = [EVENT_FILTERS[name.strip()] for name in events.split(",") if name.strip() in EVENT_FILTERS]
            if flags:
                query = query.where(reduce(operator.or_, flags))

        total = query.count()
        rows = list(
            query.order_by(Commentary.over.desc(), Commentary.ball.desc(), Commentary.id.desc())
            .paginate(page, limit)
        )

        innings = _match_innings(match)
        by_id = {inn.id: inn for inn in innings}
        groups: dict[int, CommentaryInningsGroup] = {}
        items = []
        for row in rows:
            item = CommentaryItem.model_validate(row)
            items.append(item)

            inn = by_id.get(row.innings_id)
            number = inn.number if inn else 1
            group = groups.get(number)
            if group is None:
                group = groups[number] = CommentaryInningsGroup(
                    innings_number=number,
                    innings_name=(inn.name if inn and inn.name else f"Innings {number}"),
                    batting_team=TeamSummary.model_validate(inn.batting_team) if inn else None,
                )
            group.overs.setdefault(row.over, []).append(item)

        highlights = CommentaryHighlights(
            wickets=sum(1 for item in items if item.is_wicket),
            sixes=sum(1 for item in items if item.is_six),
            fours=sum(1 for item in items if item.is_four),
            total_runs=sum(item.run for item in items),
        )

        data = CommentaryData(
            match_id=match.id,
            innings=[InningsSummary.model_validate(inn) for inn in innings],
            commentaries=items,
            grouped_by_innings=list(groups.values()),
            highlights=highlights,
        )
        return CommentaryResp(
            status=ApiStatus.SUCCESS,
            message=f"Found {total} commentary entries",
            data=data,
            pagination=Pagination.build(page, limit, total),
        )

    @staticmethod
    async def get_highlights(match_id: int) -> HighlightsResp:
        match = get_match_or_404(match_id)

        def events(flag):
            rows = (
                Commentary.select()
                .where((Commentary.match == match) & flag)
                .order_by(Commentary.over, Commentary.ball, Commentary.id)
            )
            return [CommentaryItem.model_validate(row) for row in rows]

        wickets = events(Commentary.is_wicket)
        sixes = events(Commentary.is_six)
        fours = events(Commentary.is_four)

        get_logger().debug("highlights_fetched", match_id=match.id, wickets=len(wickets))

        data = HighlightsData(
            match_id=match.id,
            innings=[InningsSummary.model_validate(inn) for inn in _match_innings(match)],
            wickets=wickets,
            sixes=sixes,
            fours=fours,
            summary=HighlightsSummary(
                total_wickets=len(wickets),
                total_sixes=len(sixes),
                total_fours=len(fours),
            ),
        )
        return HighlightsResp(status=ApiStatus.SUCCESS, message="Highlights fetched successfully", data=data)
