"""Optional preseason rating prior (SP+ style feed)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Dict, Iterable, Optional

import numpy as np

from .fields import PRIOR_NAME_FIELDS, PRIOR_RATING_FIELDS, pick_field, pick_truthy, to_float
from .normalize import clean_name

logger = logging.getLogger(__name__)


class PreseasonPrior:
    """
    Z-scored preseason ratings keyed by lower-cased team name.

    Values are clamped to +/- ``z_clip`` standard deviations and divided by
    ``scale`` so they land in [-0.25, 0.25] with the defaults.
    """

    def __init__(self, ratings: Optional[Dict[str, float]] = None, z_clip: float = 2.5, scale: float = 10.0):
        self.ratings: Dict[str, float] = dict(ratings or {})
        self.z_clip = z_clip
        self.scale = scale
        if self.ratings:
            values = np.fromiter(self.ratings.values(), dtype=float)
            self.mean = float(values.mean())
            std = float(values.std())
            self.std = std if std > 0 else 1.0
        else:
            self.mean = 0.0
            self.std = 1.0

    def __len__(self) -> int:
        return len(self.ratings)

    def __bool__(self) -> bool:
        return bool(self.ratings)

    def get(self, name: str) -> Optional[float]:
        """Scaled prior for ``name``, or None when the team is unrated."""
        key = clean_name(name).lower()
        raw = self.ratings.get(key) if key else None
        if raw is None:
            return None
        z = (raw - self.mean) / self.std
        return float(np.clip(z, -self.z_clip, self.z_clip)) / self.scale


def index_prior(records: Optional[Iterable], z_clip: float = 2.5, scale: float = 10.0) -> PreseasonPrior:
    """
    Build a :class:`PreseasonPrior` from raw rating records.

    A missing feed (``None`` or empty) yields an empty prior. Ratings that
    are not numeric count as 0.0; records without a name are skipped.
    """
    ratings: Dict[str, float] = {}
    for record in records or []:
        if not isinstance(record, Mapping):
            continue
        name = clean_name(pick_truthy(record, PRIOR_NAME_FIELDS, ""))
        if not name:
            continue
        rating = to_float(pick_field(record, PRIOR_RATING_FIELDS))
        ratings[name.lower()] = rating if rating is not None else 0.0
    if not ratings:
        logger.info("No preseason ratings supplied; prior disabled")
    return PreseasonPrior(ratings, z_clip=z_clip, scale=scale)
