"""
Betting insights built from the static lookup tables in utils.constants.

Nothing here touches the database. The match predictor turns two teams' win
rates into a pair of whole-number probabilities that always sum to 100.
"""

import math

from core.errors import ApiError
from core.logging import get_logger
from schemas.betting import (
    BettingOverview,
    BettingOverviewResp,
    BettingTeamResp,
    BettingTeamsResp,
    KeyInsight,
    MatchPrediction,
    MatchPredictionResp,
    MatchScenario,
    PlayerBet,
    PlayerBetsResp,
    PredictedTeam,
    Prediction,
    RiskAssessmentResp,
    RiskBet,
    RiskCategories,
    ScenariosResp,
    TeamBettingProfile,
    TournamentSnapshot,
)
from schemas.common import ApiStatus, clamp_limit
from utils.constants import (
    KEY_INSIGHTS,
    MATCH_SCENARIOS,
    RISK_CATEGORIES,
    SAFE_RISK_LEVEL,
    TEAM_BETTING_DATA,
    TOP_PLAYER_BETS,
    TOURNAMENT_SNAPSHOT,
    UPSET_THRESHOLD,
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def split_probabilities(rate_a: float, rate_b: float) -> tuple[int, int]:
    """
    Normalise two win rates into whole percentages summing to 100.

    Team A's share is rounded half up and team B takes the remainder. Two
    zero rates split evenly.
    """
    total = rate_a + rate_b
    if total <= 0:
        return 50, 50
    share_a = _round_half_up(rate_a / total * 100)
    return share_a, 100 - share_a


def _profile(abbr: str | None) -> dict | None:
    if not abbr:
        return None
    return TEAM_BETTING_DATA.get(abbr.strip().upper())


class BettingService:

    @staticmethod
    async def get_overview() -> BettingOverviewResp:
        overview = BettingOverview(
            top_bets=[RiskBet(**bet) for bet in RISK_CATEGORIES["safe_bets"][:5]],
            value_bets=[RiskBet(**bet) for bet in RISK_CATEGORIES["value_bets"][:3]],
            avoid_bets=[RiskBet(**bet) for bet in RISK_CATEGORIES["avoid_bets"][:3]],
            key_insights=[KeyInsight(**insight) for insight in KEY_INSIGHTS],
            tournament_stats=TournamentSnapshot(**TOURNAMENT_SNAPSHOT),
        )
        return BettingOverviewResp(status=ApiStatus.SUCCESS, message="Betting overview", data=overview)

    @staticmethod
    async def list_teams() -> BettingTeamsResp:
        # Stable sort keeps table order within a risk level
        teams = sorted(TEAM_BETTING_DATA.values(), key=lambda team: team["risk_level"])
        return BettingTeamsResp(
            status=ApiStatus.SUCCESS,
            message=f"Found {len(teams)} teams",
            data=[TeamBettingProfile(**team) for team in teams],
        )

    @staticmethod
    async def get_team(abbr: str) -> BettingTeamResp:
        team = _profile(abbr)
        if team is None:
            raise ApiError.not_found(f"No betting profile for team '{abbr}'")
        return BettingTeamResp(status=ApiStatus.SUCCESS, message="Team profile", data=TeamBettingProfile(**team))

    @staticmethod
    async def list_players(limit: int | None = None) -> PlayerBetsResp:
        limit = clamp_limit(limit, default=10, maximum=20)
        players = [PlayerBet(**player) for player in TOP_PLAYER_BETS[:limit]]
        return PlayerBetsResp(status=ApiStatus.SUCCESS, message=f"Found {len(players)} players", data=players)

    @staticmethod
    async def list_scenarios() -> ScenariosResp:
        return ScenariosResp(
            status=ApiStatus.SUCCESS,
            message="Match scenarios",
            data=[MatchScenario(**scenario) for scenario in MATCH_SCENARIOS],
        )

    @staticmethod
    async def get_risk_assessment() -> RiskAssessmentResp:
        categories = RiskCategories(
            safe_bets=[RiskBet(**bet) for bet in RISK_CATEGORIES["safe_bets"]],
            value_bets=[RiskBet(**bet) for bet in RISK_CATEGORIES["value_bets"]],
            avoid_bets=[RiskBet(**bet) for bet in RISK_CATEGORIES["avoid_bets"]],
        )
        return RiskAssessmentResp(status=ApiStatus.SUCCESS, message="Risk assessment", data=categories)

    @staticmethod
    async def predict_match(
        team_a: str | None,
        team_b: str | None,
        batting_first: str | None = None,
    ) -> MatchPredictionResp:
        """
        Predict a match between two teams.

        With `batting_first` naming one side, that side is rated on its
        batting-first win rate and the other on its chasing win rate.
        Otherwise both use their overall win rate. On an even split team B
        is reported as the favourite.
        """
        if not team_a or not team_b:
            raise ApiError.bad_request("Both team_a and team_b are required")

        profile_a = _profile(team_a)
        profile_b = _profile(team_b)
        if profile_a is None or profile_b is None:
            raise ApiError.not_found("One or both teams not found")

        batting_first = batting_first.strip().upper() if batting_first else None
        if batting_first == profile_a["abbr"]:
            rate_a, rate_b = profile_a["batting_first_win_rate"], profile_b["chasing_win_rate"]
        elif batting_first == profile_b["abbr"]:
            rate_a, rate_b = profile_a["chasing_win_rate"], profile_b["batting_first_win_rate"]
        else:
            rate_a, rate_b = profile_a["win_rate"], profile_b["win_rate"]

        prob_a, prob_b = split_probabilities(rate_a, rate_b)
        if prob_a > prob_b:
            favorite, underdog = profile_a, profile_b
        else:
            favorite, underdog = profile_b, profile_a
        favorite_prob = max(prob_a, prob_b)

        prediction = Prediction(
            favorite=favorite["abbr"],
            favorite_win_prob=favorite_prob,
            underdog=underdog["abbr"],
            upset_potential="HIGH" if min(prob_a, prob_b) > UPSET_THRESHOLD else "LOW",
            recommendation=f"BET_{favorite['abbr']}" if favorite["risk_level"] <= SAFE_RISK_LEVEL else "CAUTION",
            reasoning=(
                f"{favorite['name']} has {favorite['win_rate']}% overall win rate "
                f"vs {underdog['name']}'s {underdog['win_rate']}%"
            ),
        )

        tips = [
            f"{favorite['abbr']} favored with {favorite_prob}% probability",
            f"Batting first: {batting_first}" if batting_first else "Toss outcome will affect odds",
            *favorite["tips"][:2],
        ]

        get_logger().debug(
            "match_predicted",
            team_a=profile_a["abbr"],
            team_b=profile_b["abbr"],
            batting_first=batting_first,
            prob_a=prob_a,
        )

        data = MatchPrediction(
            team_a=PredictedTeam(**profile_a, win_probability=prob_a),
            team_b=PredictedTeam(**profile_b, win_probability=prob_b),
            prediction=prediction,
            betting_tips=tips,
        )
        return MatchPredictionResp(status=ApiStatus.SUCCESS, message="Match prediction", data=data)
