"""
Fixture Extractor

Reads the tournament's JSON fixture tree from local disk. Unreadable or
malformed files are logged and reported as missing; they never abort an
import stage.
"""

import json
from pathlib import Path
from typing import Any

from pipelines.extractors.base import BaseExtractor


class FixtureExtractor(BaseExtractor):
    """
    Extractor for the JSON fixture directory.

    Layout (relative to data_dir):
        teams/teams.json, squads/squads.json, matches/matches.json,
        standings/standings.json, player_career_stats/*.json,
        scorecards/*.json, batting_stats/batting_<type>.json,
        bowling_stats/bowling_<type>.json, team_stats/team_*.json,
        match_wagon_wheel/*.json, match_innings_commentary/*.json
    """

    def __init__(self, data_dir: str | Path):
        super().__init__("fixtures")
        self.data_dir = Path(data_dir)

    def extract(self, relative_path: str = "", **kwargs: Any) -> Any:
        return self.read_json(relative_path)

    def read_json(self, relative_path: str | Path) -> Any | None:
        """
        Parse one fixture file.

        Returns:
            The decoded JSON value, or None if the file is missing,
            unreadable or not valid JSON.
        """
        path = self.data_dir / relative_path
        try:
            with open(path, encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, ValueError) as e:
            self.log.warning("fixture_read_error", path=str(path), error=str(e))
            return None

    def list_files(self, subdir: str) -> list[Path]:
        """Sorted *.json files of a fixture subdirectory, relative to data_dir."""
        directory = self.data_dir / subdir
        if not directory.is_dir():
            self.log.warning("fixture_dir_missing", path=str(directory))
            return []
        return sorted(
            path.relative_to(self.data_dir)
            for path in directory.iterdir()
            if path.is_file() and path.suffix == ".json"
        )
