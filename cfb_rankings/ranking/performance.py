"""Opponent-adjusted scoring performance and percentile-based efficiency."""

from typing import Sequence

import numpy as np

from ..models.ranking import RankingRun
from .base import RankingStage
from .config import RankingConfig


def percentile_ranks(values: Sequence[float], higher_is_better: bool = True) -> np.ndarray:
    """
    Map each value to a 0..1 percentile within ``values``.

    A value's rank is the count of pool values less than or equal to it,
    capped at ``n - 1``; the percentile is ``rank / (n - 1)``. Ties share a
    percentile and the pool maximum maps to 1.0.

    Args:
        values: Pool of values
        higher_is_better: When False the percentile is inverted

    Returns:
        Array of percentiles aligned with ``values``
    """
    arr = np.asarray(values, dtype=float)
    n = arr.size
    if n == 0:
        return arr
    ordered = np.sort(arr, kind="stable")
    rank = np.minimum(np.searchsorted(ordered, arr, side="right"), n - 1)
    pct = rank / max(1, n - 1)
    return pct if higher_is_better else 1.0 - pct


def efficiency_score(off_pct: float, def_pct: float, balance_bonus: float = 0.02) -> float:
    """Geometric mean of offense and defense percentiles plus a small balance bonus, in [0, 1]."""
    core = float(np.sqrt(off_pct * def_pct))
    bonus = balance_bonus * (1.0 - abs(off_pct - def_pct))
    return float(np.clip(core + bonus, 0.0, 1.0))


class PerformanceStage(RankingStage):
    """Computes per-game scoring rates, opponent-relative performance and efficiency."""

    def __init__(self, config: RankingConfig):
        super().__init__("performance", config)

    def apply(self, run: RankingRun) -> None:
        cfg = self.config
        for team in run:
            gp = team.games_played or 1
            team.pf_pg = sum(g.points_for for g in team.games) / gp
            team.pa_pg = sum(g.points_against for g in team.games) / gp

        # perf is reported but does not feed the composite; efficiency does.
        for team in run:
            agg = 0.0
            for game in team.games:
                opp = run.get(game.opponent)
                off_rel = (game.points_for - opp.pa_pg) / cfg.perf_divisor
                def_rel = (opp.pf_pg - game.points_against) / cfg.perf_divisor
                agg += max(-cfg.perf_clip, min(cfg.perf_clip, off_rel + def_rel))
            team.perf = agg / (team.games_played or 1)

        off = percentile_ranks([t.pf_pg for t in run], higher_is_better=True)
        dfn = percentile_ranks([t.pa_pg for t in run], higher_is_better=False)
        for team, off_pct, def_pct in zip(run.teams, off, dfn):
            team.off_pct = float(off_pct)
            team.def_pct = float(def_pct)
            team.efficiency = efficiency_score(team.off_pct, team.def_pct, cfg.balance_bonus)
