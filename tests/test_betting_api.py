"""Tests for the static betting insights and the match predictor."""

import pytest

from services.betting_service import split_probabilities
from utils.constants import MATCH_SCENARIOS, TEAM_BETTING_DATA, TOP_PLAYER_BETS


class TestSplitProbabilities:
    @pytest.mark.parametrize(
        "rate_a, rate_b, expected",
        [
            (75.0, 62.5, (55, 45)),
            (71, 57, (55, 45)),
            (78, 67, (54, 46)),
            (50.0, 50.0, (50, 50)),
            (1, 3, (25, 75)),
            (0, 0, (50, 50)),
        ],
    )
    def test_split(self, rate_a, rate_b, expected):
        assert split_probabilities(rate_a, rate_b) == expected

    def test_half_rounds_up(self):
        # 1 / 8 * 100 == 12.5
        assert split_probabilities(1, 7) == (13, 87)


class TestBettingTables:
    def test_overview(self, client):
        data = client.get("/v1/betting/overview").json()["data"]

        assert len(data["top_bets"]) == 5
        assert len(data["value_bets"]) == 3
        assert len(data["avoid_bets"]) == 3
        assert len(data["key_insights"]) == 4
        assert data["tournament_stats"]["total_matches"] == 74

    def test_teams_sorted_by_risk(self, client):
        data = client.get("/v1/betting/teams").json()["data"]
        levels = [team["risk_level"] for team in data]

        assert len(data) == len(TEAM_BETTING_DATA)
        assert levels == sorted(levels)
        assert data[0]["abbr"] == "GT"

    def test_team_lookup_is_case_insensitive(self, client):
        response = client.get("/v1/betting/teams/rr")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Rajasthan Royals"

    def test_unknown_team(self, client):
        response = client.get("/v1/betting/teams/XYZ")
        assert response.status_code == 404
        assert response.json()["status"] == "error"

    def test_players(self, client):
        default = client.get("/v1/betting/players").json()["data"]
        limited = client.get("/v1/betting/players", params={"limit": 3}).json()["data"]

        assert len(default) == min(10, len(TOP_PLAYER_BETS))
        assert [player["name"] for player in limited] == [player["name"] for player in TOP_PLAYER_BETS[:3]]

    def test_scenarios(self, client):
        data = client.get("/v1/betting/scenarios").json()["data"]
        assert len(data) == len(MATCH_SCENARIOS)

    def test_risk_assessment(self, client):
        data = client.get("/v1/betting/risk-assessment").json()["data"]

        assert len(data["safe_bets"]) == 5
        assert len(data["value_bets"]) == 4
        assert len(data["avoid_bets"]) == 4


class TestMatchPredictor:
    URL = "/v1/betting/match-predictor"

    def test_overall_win_rates(self, client):
        data = client.get(self.URL, params={"team_a": "GT", "team_b": "RR"}).json()["data"]

        assert data["team_a"]["win_probability"] == 55
        assert data["team_b"]["win_probability"] == 45
        assert data["prediction"]["favorite"] == "GT"
        assert data["prediction"]["underdog"] == "RR"
        assert data["prediction"]["favorite_win_prob"] == 55
        assert data["prediction"]["upset_potential"] == "HIGH"
        assert data["prediction"]["recommendation"] == "BET_GT"
        assert data["betting_tips"][0] == "GT favored with 55% probability"
        assert data["betting_tips"][1] == "Toss outcome will affect odds"
        assert data["betting_tips"][2:] == TEAM_BETTING_DATA["GT"]["tips"][:2]

    @pytest.mark.parametrize("batting_first, expected", [("GT", (55, 45)), ("rr", (54, 46))])
    def test_batting_first(self, client, batting_first, expected):
        params = {"team_a": "GT", "team_b": "RR", "batting_first": batting_first}

        data = client.get(self.URL, params=params).json()["data"]

        assert (data["team_a"]["win_probability"], data["team_b"]["win_probability"]) == expected
        assert data["betting_tips"][1] == f"Batting first: {batting_first.upper()}"

    @pytest.mark.parametrize("team_a, team_b", [("GT", "MI"), ("kkr", "lsg"), ("CSK", "MI"), ("DC", "PBKS")])
    def test_probabilities_sum_to_100(self, client, team_a, team_b):
        data = client.get(self.URL, params={"team_a": team_a, "team_b": team_b}).json()["data"]
        assert data["team_a"]["win_probability"] + data["team_b"]["win_probability"] == 100

    def test_even_split_favours_team_b(self, client):
        data = client.get(self.URL, params={"team_a": "CSK", "team_b": "MI"}).json()["data"]

        assert data["prediction"]["favorite"] == "MI"
        assert data["prediction"]["underdog"] == "CSK"
        assert data["prediction"]["recommendation"] == "CAUTION"

    def test_lopsided_match(self, client):
        data = client.get(self.URL, params={"team_a": "GT", "team_b": "MI"}).json()["data"]

        assert data["team_a"]["win_probability"] == 72
        assert data["prediction"]["upset_potential"] == "LOW"

    def test_missing_team(self, client):
        response = client.get(self.URL, params={"team_a": "GT"})

        assert response.status_code == 400
        assert response.json()["message"] == "Both team_a and team_b are required"

    def test_unknown_team(self, client):
        response = client.get(self.URL, params={"team_a": "GT", "team_b": "XYZ"})

        assert response.status_code == 404
        assert response.json()["message"] == "One or both teams not found"
