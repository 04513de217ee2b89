"""
Service for tournament-wide statistics: overview numbers, ranking tables and
the chart series used by the dashboard.
"""

from peewee import fn

from core.logging import get_logger
from db.models import (
    BattingAggregate,
    BattingLine,
    BowlingAggregate,
    BowlingLine,
    Competition,
    Innings,
    Match,
    Player,
    Standing,
    Team,
)
from db.models.cricket.matches import STATUS_COMPLETED
from schemas.common import ApiStatus, CompetitionSummary, TeamSummary, clamp_limit
from schemas.players import RankedBatsman, RankedBowler
from schemas.stats import (
    BattingStatsResp,
    BestBowling,
    BowlingStatsResp,
    HighestScore,
    RunsPerMatchItem,
    RunsPerMatchResp,
    StatsOverview,
    StatsOverviewResp,
    TeamPerformanceItem,
    TeamPerformanceResp,
    TeamTopScorer,
    TopScorer,
    TopScorersByTeamResp,
    TopSixHitter,
)

# Ranking category -> column it is ranked by (descending unless listed below)
BATTING_ORDER = {
    "most_runs": BattingAggregate.runs,
    "highest_average": BattingAggregate.average,
    "highest_strikerate": BattingAggregate.strike_rate,
    "most_run6": BattingAggregate.sixes,
    "most_run4": BattingAggregate.fours,
    "most_run50": BattingAggregate.fifties,
    "most_run100": BattingAggregate.centuries,
}

BOWLING_ORDER = {
    "top_wicket_takers": BowlingAggregate.wickets,
    "best_economy_rates": BowlingAggregate.economy,
    "best_averages": BowlingAggregate.average,
    "best_strike_rates": BowlingAggregate.strike_rate,
}
ASCENDING_BOWLING = {"best_economy_rates", "best_averages", "best_strike_rates"}

# Matches plotted in the runs-per-match series
RUNS_SERIES_LENGTH = 30


def _highest_score() -> HighestScore | None:
    line = (
        BattingLine.select(BattingLine, Player, Innings, Match)
        .join(Player)
        .switch(BattingLine)
        .join(Innings)
        .join(Match)
        .order_by(BattingLine.runs.desc(), BattingLine.balls_faced, BattingLine.id)
        .first()
    )
    if line is None:
        return None
    return HighestScore(
        runs=line.runs,
        balls=line.balls_faced,
        player=line.player.title,
        match=line.innings.match.short_title,
    )


def _best_bowling() -> BestBowling | None:
    line = (
        BowlingLine.select(BowlingLine, Player, Innings, Match)
        .join(Player)
        .switch(BowlingLine)
        .join(Innings)
        .join(Match)
        .order_by(BowlingLine.wickets.desc(), BowlingLine.runs_conceded, BowlingLine.id)
        .first()
    )
    if line is None:
        return None
    return BestBowling(
        wickets=line.wickets,
        runs=line.runs_conceded,
        overs=line.overs,
        player=line.player.title,
        match=line.innings.match.short_title,
    )


def _top_six_hitter() -> TopSixHitter | None:
    total_sixes = fn.SUM(BattingLine.sixes)
    row = (
        BattingLine.select(BattingLine.player, total_sixes.alias("total_sixes"))
        .group_by(BattingLine.player)
        .order_by(total_sixes.desc(), BattingLine.player)
        .first()
    )
    if row is None:
        return None
    player = Player.get_or_none(Player.id == row.player_id)
    if player is None:
        return None
    return TopSixHitter(player=player.title, sixes=row.total_sixes or 0)


class StatsService:

    @staticmethod
    async def get_overview() -> StatsOverviewResp:
        competition = Competition.select().order_by(Competition.id).first()
        totals = Innings.select(
            fn.COALESCE(fn.SUM(Innings.runs), 0).alias("runs"),
            fn.COALESCE(fn.SUM(Innings.wickets), 0).alias("wickets"),
        ).dicts().get()

        overview = StatsOverview(
            tournament=CompetitionSummary.model_validate(competition) if competition else None,
            total_matches=Match.select().count(),
            total_teams=Team.select().count(),
            total_players=Player.select().count(),
            total_runs=totals["runs"],
            total_wickets=totals["wickets"],
            highest_score=_highest_score(),
            best_bowling=_best_bowling(),
            top_six_hitter=_top_six_hitter(),
        )
        return StatsOverviewResp(status=ApiStatus.SUCCESS, message="Overview fetched successfully", data=overview)

    @staticmethod
    async def get_batting_stats(stat_type: str | None = None, limit: int | None = None) -> BattingStatsResp:
        stat_type = stat_type or "most_runs"
        limit = clamp_limit(limit, default=10, maximum=50)
        field = BATTING_ORDER.get(stat_type, BattingAggregate.runs)

        rows = (
            BattingAggregate.select(BattingAggregate, Player, Team)
            .join(Player)
            .switch(BattingAggregate)
            .join(Team)
            .where(BattingAggregate.stat_type == stat_type)
            .order_by(field.desc(nulls="last"), BattingAggregate.id)
            .limit(limit)
        )
        data = [RankedBatsman.model_validate(row) for row in rows]
        return BattingStatsResp(status=ApiStatus.SUCCESS, message=f"Found {len(data)} rows", data=data)

    @staticmethod
    async def get_bowling_stats(stat_type: str | None = None, limit: int | None = None) -> BowlingStatsResp:
        stat_type = stat_type or "top_wicket_takers"
        limit = clamp_limit(limit, default=10, maximum=50)
        field = BOWLING_ORDER.get(stat_type, BowlingAggregate.wickets)
        ordering = field.asc(nulls="last") if stat_type in ASCENDING_BOWLING else field.desc(nulls="last")

        rows = (
            BowlingAggregate.select(BowlingAggregate, Player, Team)
            .join(Player)
            .switch(BowlingAggregate)
            .join(Team)
            .where(BowlingAggregate.stat_type == stat_type)
            .order_by(ordering, BowlingAggregate.id)
            .limit(limit)
        )
        data = [RankedBowler.model_validate(row) for row in rows]
        return BowlingStatsResp(status=ApiStatus.SUCCESS, message=f"Found {len(data)} rows", data=data)

    @staticmethod
    async def get_team_performance() -> TeamPerformanceResp:
        """Each team's standing in its latest round, best points first."""
        latest = {}
        rows = (
            Standing.select(Standing, Team)
            .join(Team)
            .order_by(Standing.round_id.desc(), Standing.id)
        )
        for row in rows:
            latest.setdefault(row.team_id, row)

        data = [
            TeamPerformanceItem(
                team=TeamSummary.model_validate(row.team),
                played=row.played,
                win=row.win,
                loss=row.loss,
                points=row.points,
                net_run_rate=row.net_run_rate,
                qualified=row.qualified,
                win_percentage=round(row.win / row.played * 100, 1) if row.played else 0,
            )
            for row in latest.values()
        ]
        data.sort(key=lambda item: item.points, reverse=True)

        return TeamPerformanceResp(status=ApiStatus.SUCCESS, message="Team performance fetched successfully", data=data)

    @staticmethod
    async def get_runs_per_match() -> RunsPerMatchResp:
        matches = list(
            Match.select()
            .where(Match.status == STATUS_COMPLETED)
            .order_by(Match.date_start, Match.id)
            .limit(RUNS_SERIES_LENGTH)
        )

        runs_by_match = {}
        if matches:
            totals = (
                Innings.select(Innings.match, fn.SUM(Innings.runs).alias("total"))
                .where(Innings.match.in_([match.id for match in matches]))
                .group_by(Innings.match)
            )
            runs_by_match = {row.match_id: row.total or 0 for row in totals}

        data = [
            RunsPerMatchItem(
                match_number=index,
                short_title=match.short_title,
                date=match.date_start,
                total_runs=runs_by_match.get(match.id, 0),
                team_a=match.team_a.abbr,
                team_b=match.team_b.abbr,
            )
            for index, match in enumerate(matches, start=1)
        ]
        return RunsPerMatchResp(status=ApiStatus.SUCCESS, message=f"Found {len(data)} matches", data=data)

    @staticmethod
    async def get_top_scorers_by_team() -> TopScorersByTeamResp:
        data = []
        for team in Team.select().order_by(Team.id):
            best = (
                BattingAggregate.select(BattingAggregate, Player)
                .join(Player)
                .where((BattingAggregate.team == team) & (BattingAggregate.stat_type == "most_runs"))
                .order_by(BattingAggregate.runs.desc(), BattingAggregate.id)
                .first()
            )
            # Teams without a ranked batsman are left out
            if best is None:
                continue
            data.append(
                TeamTopScorer(
                    team=team.abbr,
                    team_name=team.title,
                    logo_url=team.logo_url,
                    top_scorer=TopScorer(
                        name=best.player.short_name or best.player.title,
                        runs=best.runs,
                        average=best.average,
                        strike_rate=best.strike_rate,
                    ),
                )
            )

        get_logger().debug("top_scorers_by_team", teams=len(data))
        return TopScorersByTeamResp(status=ApiStatus.SUCCESS, message=f"Found {len(data)} teams", data=data)
