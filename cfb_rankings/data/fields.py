"""Ordered-priority field resolution for loosely shaped source records.

Team, game and rating feeds spell the same field several ways depending on
which endpoint produced them. Each tuple below lists the accepted spellings
in priority order; the first key that is present with a non-null value wins.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Optional

# Team records
TEAM_ID_FIELDS = ("id", "teamId", "schoolId", "cfbd_id")
TEAM_NAME_FIELDS = ("school", "team", "name", "displayName", "teamName")
TEAM_CLASSIFICATION_FIELDS = ("classification", "division", "subdivision")
TEAM_CONFERENCE_FIELDS = ("conference", "conf", "conference_abbreviation")
TEAM_ALIAS_FIELDS = (
    "school",
    "team",
    "name",
    "displayName",
    "abbreviation",
    "alt_name1",
    "alt_name2",
    "alt_name3",
    "mascot",
)
TEAM_ALIAS_LIST_FIELDS = ("alternateNames",)

# Game records
HOME_ID_FIELDS = ("home_id", "homeId", "homeTeamId", "homeTeamID")
AWAY_ID_FIELDS = ("away_id", "awayId", "awayTeamId", "awayTeamID")
HOME_NAME_FIELDS = ("home", "homeTeam", "home_team", "team_home", "team1", "homeSchool", "home_school")
AWAY_NAME_FIELDS = ("away", "awayTeam", "away_team", "team_away", "team2", "awaySchool", "away_school")
HOME_POINTS_FIELDS = ("home_points", "homePoints", "points_home", "home_score", "score1")
AWAY_POINTS_FIELDS = ("away_points", "awayPoints", "points_away", "away_score", "score2")
WEEK_FIELDS = ("week", "game_week", "gameWeek")
NEUTRAL_FIELDS = ("neutral_site", "neutral", "isNeutral")

# Preseason rating records
PRIOR_NAME_FIELDS = ("team", "school", "name")
PRIOR_RATING_FIELDS = ("rating", "sp", "overall")


def pick_field(record: Mapping[str, Any], keys: Iterable[str], default: Any = None) -> Any:
    """Return the first present, non-null value among ``keys``.

    >>> pick_field({"team": None, "school": "Ohio State"}, ("team", "school"))
    'Ohio State'
    """
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return default


def pick_truthy(record: Mapping[str, Any], keys: Iterable[str], default: Any = None) -> Any:
    """Like :func:`pick_field` but also skips empty strings and other falsy values."""
    for key in keys:
        value = record.get(key)
        if value:
            return value
    return default


def to_float(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def normalize_id(value) -> Optional[str]:
    """Canonical string key for a team id; numeric ids compare by value.

    >>> normalize_id(1.0), normalize_id(" 1.0 "), normalize_id("SEC-12")
    ('1', '1', 'SEC-12')
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    s = str(value).strip()
    if not s:
        return None
    number = to_float(s)
    if number is not None and number.is_integer():
        return str(int(number))
    return s


def to_week(value) -> int:
    """Coerce a week field to an integer >= 1, defaulting to 1."""
    number = to_float(value)
    if number is None or number < 1:
        return 1
    return int(number)


def to_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "t"}
    return bool(value)
