"""Pytest configuration and fixtures for the IPL stats tests."""

import asyncio
import json
import os
from pathlib import Path

import pytest

# Set up test environment before settings are read
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from db.base import close_db, init_db  # noqa: E402


# A two-team slice of the 2022 final, enough to exercise every import stage.
FIXTURES = {
    "teams/teams.json": [
        {"tid": 1, "title": "Gujarat Titans", "abbr": "GT", "type": "club", "country": "in"},
        {"tid": 2, "title": "Rajasthan Royals", "abbr": "RR", "type": "club", "country": "in"},
    ],
    "squads/squads.json": [
        {
            "team_id": 1,
            "players": [
                {"pid": 101, "title": "Hardik Pandya", "short_name": "H Pandya", "playing_role": "all",
                 "fantasy_player_rating": "9.5"},
                {"pid": 102, "title": "David Miller", "short_name": "D Miller", "playing_role": "bat"},
            ],
        },
        {
            "team_id": 2,
            "players": [
                {"pid": 201, "title": "Jos Buttler", "short_name": "J Buttler", "playing_role": "wk"},
                {"pid": 202, "title": "Yuzvendra Chahal", "short_name": "Y Chahal", "playing_role": "bowl"},
            ],
        },
        # Team not imported: ignored
        {"team_id": 99, "players": [{"pid": 999, "title": "Nobody"}]},
    ],
    "player_career_stats/101.json": {
        "player": {"pid": 101},
        "batting": {"t20": {"matches": 107, "runs": "1963"}},
        "bowling": {"t20": {"wickets": 50}},
    },
    "matches/matches.json": [
        {
            "match_id": 5001,
            "title": "Gujarat Titans vs Rajasthan Royals",
            "short_title": "GT vs RR",
            "subtitle": "Final",
            "match_number": 74,
            "format": 6,
            "format_str": "T20",
            "status": 2,
            "status_str": "Completed",
            "date_start": "2022-05-29 14:30:00",
            "date_end": "2022-05-29 18:30:00",
            "timestamp_start": 1653834600,
            "competition": {
                "cid": 77, "title": "Indian Premier League", "abbr": "IPL",
                "season": "2022", "total_matches": "74", "total_teams": 10,
            },
            "venue": {
                "venue_id": "9", "name": "Narendra Modi Stadium", "location": "Ahmedabad",
                "country": "India", "timezone": "Asia/Kolkata",
            },
            "teama": {"team_id": 1, "scores": "133/3", "scores_full": "133/3 (18.1 ov)", "overs": "18.1"},
            "teamb": {"team_id": 2, "scores": "130/9", "scores_full": "130/9 (20 ov)", "overs": 20},
            "result": "Gujarat Titans won by 7 wickets",
            "win_margin": "7 wickets",
            "winning_team_id": 1,
            "toss": {"text": "Rajasthan Royals have won the toss and elected to bat", "winner": 2, "decision": 1},
            "umpires": "Nitin Menon, Chris Gaffaney",
            "referee": "Javagal Srinath",
            "commentary": 1,
            "wagon": 1,
            "latest_inning_number": 2,
        },
        {
            "match_id": 5002,
            "title": "Rajasthan Royals vs Gujarat Titans",
            "short_title": "RR vs GT",
            "status": 1,
            "date_start": "2022-06-05 14:00:00",
            "competition": {"cid": 77},
            "venue": {"venue_id": "9", "name": "Narendra Modi Stadium"},
            "teama": {"team_id": 2},
            "teamb": {"team_id": 1},
        },
    ],
    "scorecards/5001.json": {
        "match_id": 5001,
        "innings": [
            {
                "iid": 9001,
                "number": 1,
                "name": "Rajasthan Royals Inning",
                "batting_team_id": 2,
                "fielding_team_id": 1,
                "scores": "130/9",
                "scores_full": "130/9 (20 ov)",
                "overs": "20",
                "batsmen": [
                    {"batsman_id": "201", "name": "Jos Buttler", "runs": "39", "balls_faced": "35",
                     "fours": "5", "sixes": "0", "strike_rate": "111.42",
                     "how_out": "c Saha b Pandya", "dismissal": "caught", "bowler_id": "101"},
                ],
                "bowlers": [
                    {"bowler_id": "101", "name": "Hardik Pandya", "overs": "4", "runs_conceded": "17",
                     "wickets": "3", "maidens": "0", "econ": "4.25", "dotballs": "12"},
                ],
                "fows": [
                    {"name": "Jos Buttler", "runs": "79", "overs_at_dismissal": "12.4",
                     "score_at_dismissal": 79, "number": 3},
                    {"name": "Yashasvi Jaiswal", "runs": "31", "overs_at_dismissal": "5.0",
                     "score_at_dismissal": 31, "number": 1},
                ],
            },
            {
                "iid": 9002,
                "number": 2,
                "name": "Gujarat Titans Inning",
                "batting_team_id": 1,
                "fielding_team_id": 2,
                "scores": "133/3",
                "overs": "18.1",
                "batsmen": [
                    {"batsman_id": "101", "name": "Hardik Pandya", "runs": "34", "balls_faced": "30",
                     "fours": "3", "sixes": "0", "strike_rate": "113.33",
                     "how_out": "c Jaiswal b Chahal", "bowler_id": "202"},
                    {"batsman_id": "102", "name": "David Miller", "runs": "32*", "balls_faced": "19",
                     "fours": "3", "sixes": "1", "strike_rate": "168.42", "how_out": "not out",
                     "batting": "true", "bowler_id": "0"},
                ],
                "bowlers": [
                    {"bowler_id": "202", "name": "Yuzvendra Chahal", "overs": "4", "runs_conceded": "20",
                     "wickets": "1", "econ": "5.00"},
                ],
                "fows": [],
            },
        ],
    },
    "standings/standings.json": {
        "standings": [
            {
                "round": {"rid": "1", "name": "League"},
                "standings": [
                    {"team_id": 2, "played": "14", "win": "9", "loss": "5", "points": "18",
                     "netrr": "0.298", "quality": "true", "lastfivematchresult": "W,L,W,L,W"},
                    {"team_id": 1, "played": "14", "win": "10", "loss": "4", "points": "20",
                     "netrr": "0.316", "quality": "true", "lastfivematchresult": "L,W,L,W,W"},
                ],
            },
        ],
    },
    "batting_stats/batting_most_runs.json": {
        "response": {
            "stats": [
                {"player": {"pid": 201}, "team": {"tid": 2}, "matches": "17", "innings": "17",
                 "runs": "863", "balls": "579", "notout": "2", "highest": "116", "run100": "4",
                 "run50": "4", "run4": "83", "run6": "45", "average": "57.53", "strike": "149.05"},
                {"player": {"pid": 101}, "team": {"tid": 1}, "matches": "15", "runs": "487",
                 "highest": "87*", "run50": "4", "run6": "12", "average": "44.27", "strike": "131.27"},
                {"player": {"pid": 102}, "team": {"tid": 1}, "matches": "16", "runs": "481",
                 "run6": "23", "average": "68.71", "strike": "142.73"},
            ],
        },
    },
    "batting_stats/batting_highest_average.json": {
        "response": {
            "stats": [
                {"player": {"pid": 102}, "team": {"tid": 1}, "runs": "481", "average": "68.71"},
            ],
        },
    },
    "bowling_stats/bowling_top_wicket_takers.json": {
        "response": {
            "stats": [
                {"player": {"pid": 202}, "team": {"tid": 2}, "matches": "17", "overs": "68",
                 "runs": "527", "wickets": "27", "average": "19.51", "econ": "7.75",
                 "strike": "15.1", "bestinning": "5/40", "wicket5i": "1"},
                {"player": {"pid": 101}, "team": {"tid": 1}, "matches": "15", "overs": "30.3",
                 "runs": "267", "wickets": "8", "average": "33.38", "econ": "7.27", "strike": "27.3"},
            ],
        },
    },
    "team_stats/team_total_runs.json": {
        "response": {
            "stats": [
                {"team": {"tid": 1}, "runs": "2549", "wickets": "94", "run100": "0", "run50": "15"},
                {"team": {"tid": 2}, "runs": "2942", "wickets": "110", "run100": "4", "run50": "17"},
            ],
        },
    },
    "team_stats/team_highest_score.json": {
        "response": {"stats": [{"team": {"tid": 2}, "score": "222/2"}]},
    },
    "team_stats/team_match_win.json": {
        "response": {"stats": [{"team": {"tid": 1}, "win": "12"}, {"team": {"tid": 2}, "win": "10"}]},
    },
    "match_wagon_wheel/5001.json": {
        "innings": [
            {
                "inning_id": 9001,
                "wagons": [
                    [201, 101, "0.1", 4, 4, 120, 40, 1, "four", 0.1],
                    [201, 101, "0.2", 0, 0, 0, 0, 0, "", 0.2],
                ],
            },
            {
                "inning_id": 9002,
                "wagons": [[102, 202, "17.3", 6, 6, 200, 10, 3, "six", 17.3]],
            },
        ],
    },
    "match_innings_commentary/9001.json": {
        "inning": {"iid": 9001},
        "commentaries": [
            {"event_id": "e1", "event": "ball", "batsman_id": "201", "bowler_id": "101",
             "over": "0", "ball": "1", "run": 4, "four": True, "commentary": "FOUR, driven through cover"},
            {"event": "wicket", "batsman_id": "201", "bowler_id": "101",
             "over": "12", "ball": "4", "run": 0, "commentary": "OUT, caught at point"},
            {"event_id": "e3", "event": "ball", "over": "19", "ball": "6", "run": 6, "six": True,
             "commentary": "SIX to finish the innings"},
        ],
    },
    "match_innings_commentary/9002.json": {
        "inning": {"iid": 9002},
        "commentaries": [
            {"event_id": "e4", "event": "ball", "over": "17", "ball": "3", "run": 6, "six": True,
             "commentary": "SIX, Miller seals it"},
        ],
    },
}


def write_fixture_tree(root: Path, files: dict | None = None) -> Path:
    for relative, content in (files or FIXTURES).items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(content), encoding="utf-8")
    return root


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def database(tmp_path):
    """A fresh SQLite database with every table created."""
    db = init_db(f"sqlite:///{tmp_path / 'ipl_test.db'}")
    yield db
    close_db()


@pytest.fixture
def fixture_dir(tmp_path):
    return write_fixture_tree(tmp_path / "fixtures")


@pytest.fixture
def seeded(database, fixture_dir):
    """Database populated by a full import of the fixture tree."""
    from pipelines import run_all_pipelines

    results = run(run_all_pipelines(data_dir=str(fixture_dir)))
    assert all(result.status == "success" for result in results.values()), results
    return results


@pytest.fixture
def client(database):
    from fastapi.testclient import TestClient

    from main import app

    return TestClient(app)
