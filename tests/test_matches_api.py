"""Tests for match listing, detail and the ball-level match resources."""

import pytest

from db.models import Match, Team, Venue


@pytest.fixture
def final(seeded):
    return Match.by_match_id(5001)


class TestMatchList:
    def test_newest_first(self, seeded, client):
        body = client.get("/v1/matches").json()

        assert [match["match_id"] for match in body["data"]] == [5002, 5001]
        assert body["pagination"] == {"page": 1, "limit": 10, "total": 2, "total_pages": 1}
        assert body["data"][1]["team_a"]["abbr"] == "GT"
        assert body["data"][1]["venue"]["name"] == "Narendra Modi Stadium"

    def test_filters(self, seeded, client):
        venue = Venue.by_venue_id("9")
        team = Team.by_tid(1)

        completed = client.get("/v1/matches", params={"status": 2}).json()["data"]
        by_venue = client.get("/v1/matches", params={"venue_id": venue.id}).json()["data"]
        by_team = client.get("/v1/matches", params={"team_id": team.id}).json()["data"]

        assert [match["match_id"] for match in completed] == [5001]
        assert len(by_venue) == 2
        assert len(by_team) == 2

    def test_recent_completed(self, seeded, client):
        data = client.get("/v1/matches/recent/list").json()["data"]

        assert [match["match_id"] for match in data] == [5001]
        assert data[0]["result"] == "Gujarat Titans won by 7 wickets"

    def test_venues_with_counts(self, seeded, client):
        data = client.get("/v1/matches/venues/list").json()["data"]

        assert len(data) == 1
        assert data[0]["match_count"] == 2
        assert data[0]["location"] == "Ahmedabad"


class TestMatchDetail:
    def test_detail(self, final, client):
        data = client.get(f"/v1/matches/{final.id}").json()["data"]

        assert data["short_title"] == "GT vs RR"
        assert data["winning_team"]["abbr"] == "GT"
        assert data["competition"]["season"] == "2022"
        assert [inn["number"] for inn in data["innings"]] == [1, 2]

        first = data["innings"][0]
        assert first["batting_team"]["abbr"] == "RR"
        assert first["batting"][0]["player"]["pid"] == 201
        assert [fow["runs"] for fow in first["fall_of_wickets"]] == [31, 79]

        second = data["innings"][1]
        assert [line["name"] for line in second["batting"]] == ["Hardik Pandya", "David Miller"]

    def test_invalid_id(self, client):
        response = client.get("/v1/matches/abc")
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid Request"

    def test_not_found(self, client):
        response = client.get("/v1/matches/999")
        assert response.status_code == 404
        assert response.json()["message"] == "Match not found"

    def test_scorecard(self, final, client):
        data = client.get(f"/v1/matches/{final.id}/scorecard").json()["data"]

        assert len(data) == 2
        assert data[0]["bowling"][0]["wickets"] == 3
        assert data[1]["runs"] == 133

    def test_scorecard_of_unplayed_match(self, seeded, client):
        scheduled = Match.by_match_id(5002)

        response = client.get(f"/v1/matches/{scheduled.id}/scorecard")

        assert response.status_code == 404
        assert response.json()["message"] == "Scorecard not found"


class TestWagonWheel:
    def test_all_balls(self, final, client):
        data = client.get(f"/v1/matches/{final.id}/wagon-wheel").json()["data"]

        assert data["total_balls"] == 3
        assert data["zone_stats"]["Square Leg"] == {"runs": 4, "balls": 1, "fours": 1, "sixes": 0}
        assert data["zone_stats"]["Long on"] == {"runs": 6, "balls": 1, "fours": 0, "sixes": 1}
        assert data["zone_stats"]["Fine Leg"]["balls"] == 1
        assert len(data["zone_names"]) == 8

        first, second = data["innings"]
        assert len(first["wagon_data"]) == 2
        assert first["batsmen"][0]["pid"] == 201
        assert second["batting_team"]["abbr"] == "GT"

    def test_filters(self, final, client):
        url = f"/v1/matches/{final.id}/wagon-wheel"

        assert client.get(url, params={"innings_number": 2}).json()["data"]["total_balls"] == 1
        assert client.get(url, params={"batsman_id": 201}).json()["data"]["total_balls"] == 2

    def test_unknown_innings_is_ignored(self, final, client):
        data = client.get(f"/v1/matches/{final.id}/wagon-wheel", params={"innings_number": 5}).json()["data"]
        assert data["total_balls"] == 3

    def test_match_not_found(self, client):
        assert client.get("/v1/matches/999/wagon-wheel").status_code == 404


class TestCommentary:
    def test_newest_ball_first(self, final, client):
        body = client.get(f"/v1/matches/{final.id}/commentary").json()
        data = body["data"]

        assert [(item["over"], item["ball"]) for item in data["commentaries"]] == [(19, 6), (17, 3), (12, 4), (0, 1)]
        assert body["pagination"]["total"] == 4
        assert data["highlights"] == {"wickets": 1, "sixes": 2, "fours": 1, "total_runs": 16}

        groups = data["grouped_by_innings"]
        assert [group["innings_number"] for group in groups] == [1, 2]
        assert sorted(groups[0]["overs"]) == ["0", "12", "19"]

    def test_event_filter(self, final, client):
        data = client.get(f"/v1/matches/{final.id}/commentary", params={"events": "wicket,six"}).json()["data"]

        assert [item["event_id"] for item in data["commentaries"]] == ["e3", "e4", "9001_1"]
        assert data["highlights"]["fours"] == 0

    def test_unknown_event_names_are_ignored(self, final, client):
        body = client.get(f"/v1/matches/{final.id}/commentary", params={"events": "dropped_catch"}).json()
        assert body["pagination"]["total"] == 4

    def test_innings_and_over_filters(self, final, client):
        url = f"/v1/matches/{final.id}/commentary"

        second = client.get(url, params={"innings_number": 2}).json()["data"]["commentaries"]
        over_twelve = client.get(url, params={"over": 12}).json()["data"]["commentaries"]

        assert [item["event_id"] for item in second] == ["e4"]
        assert [item["is_wicket"] for item in over_twelve] == [True]

    def test_pagination(self, final, client):
        body = client.get(f"/v1/matches/{final.id}/commentary", params={"page": 2, "limit": 2}).json()

        assert [item["event_id"] for item in body["data"]["commentaries"]] == ["9001_1", "e1"]
        assert body["pagination"]["total_pages"] == 2
        # Counts cover the returned page only
        assert body["data"]["highlights"]["sixes"] == 0

    def test_match_not_found(self, client):
        assert client.get("/v1/matches/999/commentary").status_code == 404


class TestHighlights:
    def test_highlights(self, final, client):
        data = client.get(f"/v1/matches/{final.id}/highlights").json()["data"]

        assert [item["event_id"] for item in data["wickets"]] == ["9001_1"]
        assert [item["event_id"] for item in data["sixes"]] == ["e4", "e3"]
        assert [item["event_id"] for item in data["fours"]] == ["e1"]
        assert data["summary"] == {"total_wickets": 1, "total_sixes": 2, "total_fours": 1}
        assert len(data["innings"]) == 2

    def test_match_without_commentary(self, seeded, client):
        scheduled = Match.by_match_id(5002)

        data = client.get(f"/v1/matches/{scheduled.id}/highlights").json()["data"]

        assert data["summary"] == {"total_wickets": 0, "total_sixes": 0, "total_fours": 0}
