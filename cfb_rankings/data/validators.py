"""Schema validators for season input payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import List, Sequence

from .fields import (
    AWAY_ID_FIELDS,
    AWAY_NAME_FIELDS,
    AWAY_POINTS_FIELDS,
    HOME_ID_FIELDS,
    HOME_NAME_FIELDS,
    HOME_POINTS_FIELDS,
    PRIOR_NAME_FIELDS,
    TEAM_CLASSIFICATION_FIELDS,
    TEAM_NAME_FIELDS,
    pick_field,
    pick_truthy,
    to_float,
)


def validate_teams_payload(teams: Sequence) -> List[str]:
    errors: List[str] = []
    if not isinstance(teams, list) or not teams:
        return ["teams payload must be a non-empty list"]

    unclassified = 0
    for idx, row in enumerate(teams):
        if not isinstance(row, Mapping):
            errors.append(f"teams[{idx}] must be an object")
            continue
        if not pick_field(row, TEAM_NAME_FIELDS):
            errors.append(f"teams[{idx}] missing name fields: {', '.join(TEAM_NAME_FIELDS)}")
        if not pick_truthy(row, TEAM_CLASSIFICATION_FIELDS):
            unclassified += 1
    if unclassified == len(teams):
        errors.append("no team record carries a classification; nothing can be published")
    return errors


def validate_games_payload(games: Sequence) -> List[str]:
    errors: List[str] = []
    if not isinstance(games, list):
        return ["games payload must be a list"]

    for idx, row in enumerate(games):
        if not isinstance(row, Mapping):
            errors.append(f"games[{idx}] must be an object")
            continue
        for side, id_fields, name_fields in (
            ("home", HOME_ID_FIELDS, HOME_NAME_FIELDS),
            ("away", AWAY_ID_FIELDS, AWAY_NAME_FIELDS),
        ):
            if pick_field(row, id_fields) is None and pick_field(row, name_fields) is None:
                errors.append(f"games[{idx}] has no {side} team id or name")
        for side, fields in (("home", HOME_POINTS_FIELDS), ("away", AWAY_POINTS_FIELDS)):
            if to_float(pick_field(row, fields)) is None:
                errors.append(f"games[{idx}] missing/invalid {side} points")
    return errors


def validate_ratings_payload(ratings: Sequence) -> List[str]:
    errors: List[str] = []
    if not isinstance(ratings, list):
        return ["ratings payload must be a list"]
    for idx, row in enumerate(ratings):
        if not isinstance(row, Mapping):
            errors.append(f"ratings[{idx}] must be an object")
        elif not pick_truthy(row, PRIOR_NAME_FIELDS):
            errors.append(f"ratings[{idx}] missing team name")
    return errors
