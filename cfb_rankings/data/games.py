"""Game record parsing and attachment to the team pool."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..models.game import GameResult
from ..models.ranking import RankingRun
from .fields import (
    AWAY_ID_FIELDS,
    AWAY_NAME_FIELDS,
    AWAY_POINTS_FIELDS,
    HOME_ID_FIELDS,
    HOME_NAME_FIELDS,
    HOME_POINTS_FIELDS,
    NEUTRAL_FIELDS,
    WEEK_FIELDS,
    normalize_id,
    pick_field,
    to_bool,
    to_float,
    to_week,
)
from .normalize import clean_name
from .team_index import TeamIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedGame:
    """A scored game with unresolved participants."""

    home_id: Optional[str]
    away_id: Optional[str]
    home_name: Optional[str]
    away_name: Optional[str]
    home_points: float
    away_points: float
    week: int = 1
    neutral_site: bool = False


@dataclass
class AttachSummary:
    parsed: int = 0
    attached: int = 0
    unscored: int = 0
    unresolved: int = 0


def _opt_str(value) -> Optional[str]:
    if value is None:
        return None
    s = clean_name(value)
    return s or None


def parse_game(record: Mapping) -> Optional[ParsedGame]:
    """Parse one raw game record; None when either score is missing or non-numeric."""
    home_points = to_float(pick_field(record, HOME_POINTS_FIELDS))
    away_points = to_float(pick_field(record, AWAY_POINTS_FIELDS))
    if home_points is None or away_points is None:
        return None
    return ParsedGame(
        home_id=normalize_id(pick_field(record, HOME_ID_FIELDS)),
        away_id=normalize_id(pick_field(record, AWAY_ID_FIELDS)),
        home_name=_opt_str(pick_field(record, HOME_NAME_FIELDS)),
        away_name=_opt_str(pick_field(record, AWAY_NAME_FIELDS)),
        home_points=home_points,
        away_points=away_points,
        week=to_week(pick_field(record, WEEK_FIELDS)),
        neutral_site=to_bool(pick_field(record, NEUTRAL_FIELDS, False)),
    )


def parse_games(records: Iterable) -> List[ParsedGame]:
    games: List[ParsedGame] = []
    for record in records:
        if not isinstance(record, Mapping):
            continue
        game = parse_game(record)
        if game is not None:
            games.append(game)
    return games


def attach_games(run: RankingRun, index: TeamIndex, records: Iterable) -> AttachSummary:
    """
    Attach a symmetric pair of results to both participants of every usable game.

    A participant resolves by id, then by case-insensitive alias, then by its
    raw name. Games where either side is not a team in ``run`` are skipped,
    so opponents outside the roster never influence any score.

    Args:
        run: Ranking run holding the team pool
        index: Team index built from the same roster
        records: Raw game records

    Returns:
        AttachSummary with counts of attached and skipped games
    """
    records = list(records)
    games = parse_games(records)
    summary = AttachSummary(parsed=len(games), unscored=len(records) - len(games))
    for game in games:
        home = run.get(index.resolve(game.home_id, game.home_name) or "")
        away = run.get(index.resolve(game.away_id, game.away_name) or "")
        if home is None or away is None or home is away:
            summary.unresolved += 1
            logger.debug(
                "Skipping game %s vs %s (week %d): participant not in roster",
                game.away_name or game.away_id,
                game.home_name or game.home_id,
                game.week,
            )
            continue

        neutral = game.neutral_site
        home_entry = GameResult(
            opponent=away.name,
            points_for=game.home_points,
            points_against=game.away_points,
            week=game.week,
            neutral_site=neutral,
            is_home=not neutral,
            is_away=False,
        )
        home.add_game(home_entry)
        away.add_game(home_entry.mirrored(home.name))
        summary.attached += 1

    if summary.unscored or summary.unresolved:
        logger.info(
            "Attached %d games; skipped %d unscored and %d unresolved",
            summary.attached,
            summary.unscored,
            summary.unresolved,
        )
    return summary
