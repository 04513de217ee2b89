"""Tests for the general API surface, teams, players and standings."""

from peewee import OperationalError

from db.base import db
from db.models import Player, Team


class TestGeneral:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Welcome to the IPL Stats API"}

    def test_health(self, client):
        response = client.get("/health")
        body = response.json()

        assert response.status_code == 200
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["uptime"] >= 0
        assert "timestamp" in body

    def test_health_reports_database_failure(self, client, monkeypatch):
        def unreachable(*args, **kwargs):
            raise OperationalError("connection refused")

        monkeypatch.setattr(db.obj, "execute_sql", unreachable)

        response = client.get("/health")
        body = response.json()

        assert response.status_code == 503
        assert body["status"] == "unhealthy"
        assert body["database"] == "disconnected"
        assert body["error"] == "connection refused"

    def test_unknown_route(self, client):
        response = client.get("/v1/umpires")
        body = response.json()

        assert response.status_code == 404
        assert body["status"] == "error"
        assert body["data"] is None
        assert "/v1/umpires" in body["message"]

    def test_request_id_header(self, client):
        response = client.get("/", headers={"X-Request-ID": "abc-123"})
        assert response.headers.get("X-Request-ID") == "abc-123"


class TestTeams:
    def test_pagination(self, client):
        for tid in range(1, 26):
            Team.upsert_team(tid, {"title": f"Team {tid:02d}", "abbr": f"T{tid}"})

        response = client.get("/v1/teams", params={"page": 2, "limit": 10})
        body = response.json()

        assert response.status_code == 200
        assert len(body["data"]) == 10
        assert body["data"][0]["title"] == "Team 11"
        assert body["pagination"] == {"page": 2, "limit": 10, "total": 25, "total_pages": 3}

    def test_limit_is_clamped(self, client):
        Team.upsert_team(1, {"title": "Gujarat Titans", "abbr": "GT"})

        body = client.get("/v1/teams", params={"page": 0, "limit": 1000}).json()

        assert body["pagination"]["page"] == 1
        assert body["pagination"]["limit"] == 100

    def test_non_numeric_page(self, client):
        response = client.get("/v1/teams", params={"page": "two"})
        assert response.status_code == 400
        assert response.json()["status"] == "error"

    def test_search(self, seeded, client):
        body = client.get("/v1/teams", params={"search": "rr"}).json()
        assert [team["abbr"] for team in body["data"]] == ["RR"]

    def test_list_includes_standing_and_stats(self, seeded, client):
        gt = client.get("/v1/teams").json()["data"][0]

        assert gt["abbr"] == "GT"
        assert gt["best_standing"]["points"] == 20
        assert gt["stats"]["total_runs"] == 2549

    def test_detail(self, seeded, client):
        team = Team.by_tid(1)

        body = client.get(f"/v1/teams/{team.id}").json()

        assert body["status"] == "success"
        assert body["data"]["latest_standing"]["round_name"] == "League"
        assert sorted(player["pid"] for player in body["data"]["squad"]) == [101, 102]

    def test_detail_not_found(self, client):
        response = client.get("/v1/teams/999")
        assert response.status_code == 404
        assert response.json()["message"] == "Team not found"

    def test_detail_invalid_id(self, client):
        assert client.get("/v1/teams/gt").status_code == 400

    def test_players_of_team_without_squad(self, client):
        team = Team.upsert_team(50, {"title": "Empty XI", "abbr": "EXI"})

        response = client.get(f"/v1/teams/{team.id}/players")

        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_players_with_headline_aggregates(self, seeded, client):
        team = Team.by_tid(1)

        players = client.get(f"/v1/teams/{team.id}/players").json()["data"]
        pandya = next(player for player in players if player["pid"] == 101)

        assert [row["stat_type"] for row in pandya["batting_stats"]] == ["most_runs"]
        assert pandya["bowling_stats"][0]["wickets"] == 8

    def test_team_matches(self, seeded, client):
        team = Team.by_tid(2)

        body = client.get(f"/v1/teams/{team.id}/matches").json()

        assert body["pagination"]["total"] == 2
        assert [match["match_id"] for match in body["data"]] == [5002, 5001]


class TestPlayers:
    def test_list_filters(self, seeded, client):
        team = Team.by_tid(2)

        by_team = client.get("/v1/players", params={"team_id": team.id}).json()
        by_role = client.get("/v1/players", params={"role": "bowl"}).json()
        by_name = client.get("/v1/players", params={"search": "miller"}).json()

        assert sorted(player["pid"] for player in by_team["data"]) == [201, 202]
        assert [player["pid"] for player in by_role["data"]] == [202]
        assert [player["pid"] for player in by_name["data"]] == [102]
        assert by_name["data"][0]["squads"][0]["team"]["abbr"] == "GT"

    def test_top_batsmen(self, seeded, client):
        by_runs = client.get("/v1/players/top/batsmen").json()["data"]
        by_average = client.get("/v1/players/top/batsmen", params={"sort_by": "average"}).json()["data"]

        assert [row["player"]["pid"] for row in by_runs] == [201, 101, 102]
        assert by_runs[0]["team"]["abbr"] == "RR"
        assert by_average[0]["player"]["pid"] == 102

    def test_top_bowlers(self, seeded, client):
        by_wickets = client.get("/v1/players/top/bowlers").json()["data"]
        by_economy = client.get("/v1/players/top/bowlers", params={"sort_by": "economy", "limit": 1}).json()["data"]

        assert [row["player"]["pid"] for row in by_wickets] == [202, 101]
        assert [row["player"]["pid"] for row in by_economy] == [101]

    def test_detail(self, seeded, client):
        pandya = Player.by_pid(101)

        data = client.get(f"/v1/players/{pandya.id}").json()["data"]

        assert data["title"] == "Hardik Pandya"
        assert data["fantasy_rating"] == 9.5
        assert data["career_stats"]["batting"]["t20"]["matches"] == 107
        assert data["squads"][0]["season"] == "2022"

    def test_detail_without_career_stats(self, seeded, client):
        chahal = Player.by_pid(202)

        data = client.get(f"/v1/players/{chahal.id}").json()["data"]

        assert data["career_stats"] is None

    def test_detail_not_found(self, client):
        response = client.get("/v1/players/4040")
        assert response.status_code == 404
        assert response.json()["status"] == "error"

    def test_batting_records(self, seeded, client):
        pandya = Player.by_pid(101)

        records = client.get(f"/v1/players/{pandya.id}/batting").json()["data"]

        assert len(records) == 1
        assert records[0]["runs"] == 34
        assert records[0]["innings"]["match"]["short_title"] == "GT vs RR"
        assert records[0]["innings"]["batting_team"]["abbr"] == "GT"

    def test_bowling_records(self, seeded, client):
        pandya = Player.by_pid(101)

        records = client.get(f"/v1/players/{pandya.id}/bowling").json()["data"]

        assert [record["wickets"] for record in records] == [3]
        assert records[0]["economy"] == 4.25


class TestStandings:
    def test_empty(self, client):
        response = client.get("/v1/standings")
        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_latest_round_ordered_by_points(self, seeded, client):
        rows = client.get("/v1/standings").json()["data"]

        assert [row["team"]["abbr"] for row in rows] == ["GT", "RR"]
        assert rows[0]["competition"]["abbr"] == "IPL"
        assert rows[0]["qualified"] is True

    def test_unknown_round(self, seeded, client):
        assert client.get("/v1/standings", params={"round_id": 7}).json()["data"] == []

    def test_rounds(self, seeded, client):
        data = client.get("/v1/standings/rounds").json()["data"]
        assert data == [{"round_id": 1, "round_name": "League"}]

    def test_team_standing(self, seeded, client):
        team = Team.by_tid(2)

        data = client.get(f"/v1/standings/team/{team.id}").json()["data"]

        assert data["points"] == 18
        assert data["last_five_results"] == "W,L,W,L,W"

    def test_team_standing_not_found(self, client):
        response = client.get("/v1/standings/team/12")
        assert response.status_code == 404
        assert response.json()["message"] == "Team standing not found"
