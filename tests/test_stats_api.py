"""Tests for tournament-wide statistics endpoints."""


class TestOverview:
    def test_totals(self, seeded, client):
        data = client.get("/v1/stats/overview").json()["data"]

        assert data["tournament"]["title"] == "Indian Premier League"
        assert (data["total_matches"], data["total_teams"], data["total_players"]) == (2, 2, 4)
        assert data["total_runs"] == 263
        assert data["total_wickets"] == 12

    def test_records(self, seeded, client):
        data = client.get("/v1/stats/overview").json()["data"]

        assert data["highest_score"] == {"runs": 39, "balls": 35, "player": "Jos Buttler", "match": "GT vs RR"}
        assert data["best_bowling"]["player"] == "Hardik Pandya"
        assert (data["best_bowling"]["wickets"], data["best_bowling"]["runs"]) == (3, 17)
        assert data["top_six_hitter"] == {"player": "David Miller", "sixes": 1}

    def test_empty_database(self, client):
        data = client.get("/v1/stats/overview").json()["data"]

        assert data["tournament"] is None
        assert data["total_runs"] == 0
        assert data["highest_score"] is None
        assert data["best_bowling"] is None
        assert data["top_six_hitter"] is None


class TestRankings:
    def test_batting_default(self, seeded, client):
        data = client.get("/v1/stats/batting").json()["data"]
        assert [row["player"]["pid"] for row in data] == [201, 101, 102]

    def test_batting_by_type(self, seeded, client):
        data = client.get("/v1/stats/batting", params={"type": "highest_average", "limit": 5}).json()["data"]

        assert len(data) == 1
        assert data[0]["average"] == 68.71
        assert data[0]["team"]["abbr"] == "GT"

    def test_batting_unknown_type(self, seeded, client):
        assert client.get("/v1/stats/batting", params={"type": "most_ducks"}).json()["data"] == []

    def test_bowling(self, seeded, client):
        data = client.get("/v1/stats/bowling", params={"type": "top_wicket_takers"}).json()["data"]

        assert [row["wickets"] for row in data] == [27, 8]
        assert data[0]["best_inning"] == "5/40"

    def test_limit(self, seeded, client):
        data = client.get("/v1/stats/batting", params={"limit": 1}).json()["data"]
        assert len(data) == 1


class TestCharts:
    def test_team_performance(self, seeded, client):
        data = client.get("/v1/stats/team-performance").json()["data"]

        assert [row["team"]["abbr"] for row in data] == ["GT", "RR"]
        assert data[0]["win_percentage"] == 71.4
        assert data[1]["win_percentage"] == 64.3

    def test_runs_per_match(self, seeded, client):
        data = client.get("/v1/stats/runs-per-match").json()["data"]

        assert len(data) == 1
        assert data[0]["match_number"] == 1
        assert data[0]["total_runs"] == 263
        assert (data[0]["team_a"], data[0]["team_b"]) == ("GT", "RR")

    def test_top_scorers_by_team(self, seeded, client):
        data = client.get("/v1/stats/top-scorers-by-team").json()["data"]

        by_team = {row["team"]: row["top_scorer"] for row in data}
        assert by_team["GT"]["name"] == "H Pandya"
        assert by_team["GT"]["runs"] == 487
        assert by_team["RR"]["name"] == "J Buttler"

    def test_empty_database(self, client):
        assert client.get("/v1/stats/team-performance").json()["data"] == []
        assert client.get("/v1/stats/runs-per-match").json()["data"] == []
        assert client.get("/v1/stats/top-scorers-by-team").json()["data"] == []
