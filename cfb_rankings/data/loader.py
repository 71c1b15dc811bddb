"""Data loader for season JSON files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

import numpy as np

from .validators import validate_games_payload, validate_ratings_payload, validate_teams_payload

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

TEAMS_FILES = ("teams.json", "teams-fbs.json")
GAMES_FILE = "games-regular.json"
PRIOR_FILE = "sp-ratings.json"

_WRAPPER_KEYS = ("teams", "games", "ratings", "data")


class DataRequirementError(ValueError):
    """Raised when required season data is unavailable."""


@dataclass
class SeasonData:
    """Raw season records as loaded from disk."""

    season: int
    teams: List[dict] = field(default_factory=list)
    games: List[dict] = field(default_factory=list)
    ratings: List[dict] = field(default_factory=list)
    sources: Dict[str, str] = field(default_factory=dict)


class DataLoader:
    """Loads and saves season data as JSON files."""

    @staticmethod
    def load_json_records(file_path: PathLike) -> List[dict]:
        """
        Load a list of records from a JSON file.

        Accepts a bare list or an object wrapping the list under one of
        ``teams``, ``games``, ``ratings`` or ``data``.

        Args:
            file_path: Path to JSON file

        Returns:
            List of raw records
        """
        path = Path(file_path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError as exc:
            raise DataRequirementError(f"Could not parse {path}: {exc}") from exc

        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict):
            for key in _WRAPPER_KEYS:
                if isinstance(payload.get(key), list):
                    return payload[key]
        raise DataRequirementError(f"{path} does not contain a list of records")

    @staticmethod
    def season_dir(data_dir: PathLike, season: int) -> Path:
        return Path(data_dir) / str(season)

    @classmethod
    def load_season(cls, data_dir: PathLike, season: int) -> SeasonData:
        """
        Load teams, regular-season games and optional preseason ratings.

        Args:
            data_dir: Root directory holding one sub-directory per season
            season: Season year

        Returns:
            SeasonData with the raw records
        """
        base = cls.season_dir(data_dir, season)
        data = SeasonData(season=season)

        teams_path = next((base / name for name in TEAMS_FILES if (base / name).exists()), None)
        if teams_path is None:
            raise DataRequirementError(
                f"No team file for {season}: expected one of {', '.join(TEAMS_FILES)} in {base}"
            )
        if teams_path.name != TEAMS_FILES[0]:
            logger.warning("%s missing; falling back to %s (FCS opponents will be dropped)", TEAMS_FILES[0], teams_path.name)
        data.teams = cls.load_json_records(teams_path)
        data.sources["teams"] = str(teams_path)

        games_path = base / GAMES_FILE
        if not games_path.exists():
            raise DataRequirementError(f"Missing {GAMES_FILE} for {season} in {base}")
        data.games = cls.load_json_records(games_path)
        data.sources["games"] = str(games_path)

        prior_path = base / PRIOR_FILE
        if prior_path.exists():
            try:
                data.ratings = cls.load_json_records(prior_path)
                data.sources["ratings"] = str(prior_path)
            except DataRequirementError as exc:
                logger.warning("Ignoring unreadable preseason ratings: %s", exc)
        else:
            logger.info("No %s for %s; ranking without a preseason prior", PRIOR_FILE, season)

        for label, errors in (
            ("teams", validate_teams_payload(data.teams)),
            ("games", validate_games_payload(data.games)),
            ("ratings", validate_ratings_payload(data.ratings)),
        ):
            if errors:
                logger.warning("%d %s payload problems (first: %s)", len(errors), label, errors[0])

        return data

    @staticmethod
    def save_rankings_to_json(payload: dict, file_path: PathLike) -> None:
        """
        Save a rankings document to a JSON file.

        Args:
            payload: JSON-serializable rankings document
            file_path: Output file path
        """
        path = Path(file_path)
        if path.parent and not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)

    @staticmethod
    def create_sample_season(data_dir: PathLike, season: int, seed: int = 2024) -> Path:
        """
        Write a small synthetic season for demos and tests.

        Eight FBS programs in two conferences plus three FCS opponents, six
        weeks of games with reproducible scores.

        Args:
            data_dir: Root data directory
            season: Season year used for the sub-directory
            seed: Random seed for scores

        Returns:
            Path to the season directory
        """
        rng = np.random.default_rng(seed)
        teams = [
            {"id": 1, "school": "Northfield", "mascot": "Owls", "abbreviation": "NFLD", "conference": "Lakes", "classification": "fbs"},
            {"id": 2, "school": "Eastbrook", "mascot": "Stags", "abbreviation": "EBRK", "conference": "Lakes", "classification": "fbs"},
            {"id": 3, "school": "Westvale", "mascot": "Hawks", "abbreviation": "WVAL", "conference": "Lakes", "classification": "fbs"},
            {"id": 4, "school": "Southport", "mascot": "Mariners", "abbreviation": "SPRT", "conference": "Lakes", "classification": "fbs"},
            {"id": 5, "school": "Highland State", "mascot": "Rams", "abbreviation": "HSU", "conference": "Plains", "classification": "fbs"},
            {"id": 6, "school": "Riverton", "mascot": "Otters", "abbreviation": "RIV", "conference": "Plains", "classification": "fbs"},
            {"id": 7, "school": "Cedar Falls Tech", "mascot": "Miners", "abbreviation": "CFT", "conference": "Plains", "classification": "fbs"},
            {"id": 8, "school": "Pine Ridge", "mascot": "Wolves", "abbreviation": "PRU", "conference": "Plains", "classification": "fbs"},
            {"id": 101, "school": "Valley A&M", "mascot": "Bulldogs", "conference": "Valley", "classification": "fcs"},
            {"id": 102, "school": "Coastal Baptist", "mascot": "Pelicans", "conference": "Valley", "classification": "fcs"},
            {"id": 103, "school": "Mountain College", "mascot": "Goats", "conference": "Valley", "classification": "fcs"},
        ]
        strength = {t["id"]: s for t, s in zip(teams, (9, 7, 4, 2, 8, 5, 3, 1, -3, -5, -6))}
        schedule = [
            (1, [(1, 101), (2, 102), (3, 5), (4, 103), (6, 7), (8, 2)]),
            (2, [(5, 101), (7, 1), (2, 3), (4, 6), (102, 8), (103, 6)]),
            (3, [(1, 2), (3, 4), (5, 6), (7, 8)]),
            (4, [(4, 1), (2, 3), (6, 8), (7, 5)]),
            (5, [(1, 3), (4, 2), (5, 8), (6, 7)]),
            (6, [(2, 5), (3, 6), (8, 4), (1, 6)]),
        ]
        games = []
        for week, pairs in schedule:
            for home, away in pairs:
                edge = 3.0 * (strength[home] - strength[away]) + 2.5
                margin = int(round(rng.normal(edge, 10.0)))
                if margin == 0:
                    margin = 1
                base = int(rng.integers(13, 31))
                home_pts = base + max(margin, 0)
                away_pts = base + max(-margin, 0)
                games.append({
                    "week": week,
                    "home_id": home,
                    "away_id": away,
                    "home_points": home_pts,
                    "away_points": away_pts,
                    "neutral_site": False,
                })
        ratings = [
            {"team": t["school"], "rating": round(strength[t["id"]] * 2.0 + float(rng.normal(0.0, 1.5)), 1)}
            for t in teams
            if t["classification"] == "fbs"
        ]

        base_dir = DataLoader.season_dir(data_dir, season)
        base_dir.mkdir(parents=True, exist_ok=True)
        for name, records in ((TEAMS_FILES[0], teams), (GAMES_FILE, games), (PRIOR_FILE, ratings)):
            with open(base_dir / name, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2)
        return base_dir
