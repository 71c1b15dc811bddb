"""Ranking model configuration knobs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


def _default_weights() -> Dict[str, float]:
    return {
        "efficiency": 0.45,
        "results": 0.25,
        "sos": 0.15,
        "quality": 0.10,
        "recency": 0.05,
    }


@dataclass
class RankingConfig:
    """Every tunable constant of the ranking model. Defaults are the production values."""

    # Results
    mov_cap: float = 24.0
    win_value: float = 1.30
    loss_value: float = -1.20
    mov_weight: float = 0.28
    lower_division_win_mul: float = 0.75
    lower_division_loss_mul: float = 1.30
    home_weight: float = 1.0
    away_weight: float = 1.02
    neutral_weight: float = 1.0
    recency_step: float = 0.02

    # Schedule strength
    sos_iterations: int = 5
    results_keep: float = 0.9
    results_pull: float = 0.1
    owp_default: float = 0.5
    sos_iter_weight: float = 0.72
    owp_weight: float = 0.28
    sos_floor: float = -0.15
    sos_floor_slope: float = 0.6
    late_season_games: float = 4.5
    late_season_scale: float = 1.06

    # Resume
    top_tiers: tuple = (10, 25, 50)
    tier_credits: tuple = (0.50, 0.32, 0.16)
    bad_loss_penalty: float = 0.26
    soft_loss_penalty: float = 0.11

    # Performance and efficiency
    perf_divisor: float = 28.0
    perf_clip: float = 1.2
    balance_bonus: float = 0.02

    # Composite
    weights: Dict[str, float] = field(default_factory=_default_weights)
    undefeated_min_games: int = 3
    undefeated_base: float = 0.048
    undefeated_cap: float = 0.06
    undefeated_ramp: float = 5.0
    undefeated_floor: float = 0.7
    undefeated_tilt: float = 0.3
    early_loss_max_games: int = 6
    early_loss_step: float = 0.006
    prior_start: float = 0.12
    prior_decay: float = 0.02
    prior_cap: float = 0.08
    prior_z_clip: float = 2.5
    prior_scale: float = 10.0

    # Head-to-head smoothing and publication
    h2h_window: int = 7
    h2h_nudge: float = 0.004
    empty_score: float = -0.085
    lower_division: str = "fcs"
    published_division: str = "fbs"

    def __post_init__(self):
        if len(self.top_tiers) != len(self.tier_credits):
            raise ValueError("top_tiers and tier_credits must have the same length")
        if list(self.top_tiers) != sorted(self.top_tiers):
            raise ValueError("top_tiers must be ascending")
        if self.sos_iterations < 0:
            raise ValueError("sos_iterations must be >= 0")
        missing = {"efficiency", "results", "sos", "quality", "recency"} - set(self.weights)
        if missing:
            raise ValueError(f"weights missing components: {', '.join(sorted(missing))}")
