"""Composite score: weighted components, record adjustments and a fading preseason prior."""

import math
from typing import Optional

from ..data.priors import PreseasonPrior
from ..models.ranking import RankingRun
from ..models.team import Team
from .base import RankingStage
from .config import RankingConfig


def undefeated_bonus(games_played: int, losses: int, efficiency: float, config: RankingConfig) -> float:
    """Bonus for a spotless record, ramping in over the first games and tilted by efficiency."""
    if losses != 0 or games_played < config.undefeated_min_games:
        return 0.0
    ramp = 1.0 - math.exp(-games_played / config.undefeated_ramp)
    tilt = config.undefeated_floor + config.undefeated_tilt * efficiency
    return min(config.undefeated_cap, config.undefeated_base * ramp * tilt)


def early_loss_drag(games_played: int, losses: int, config: RankingConfig) -> float:
    """Penalty per loss that fades to zero once a team passes ``early_loss_max_games``."""
    if losses < 1 or games_played > config.early_loss_max_games:
        return 0.0
    horizon = config.early_loss_max_games + 1
    return config.early_loss_step * losses * (horizon - games_played) / horizon


def prior_weight(games_played: int, config: RankingConfig) -> float:
    """
    Weight of the preseason prior.

    The linear decay is clamped to ``prior_cap`` before the lower bound,
    so the weight at zero games is the cap, not ``prior_start``.
    """
    raw = config.prior_start - config.prior_decay * games_played
    return max(0.0, min(config.prior_cap, raw))


class CompositeStage(RankingStage):
    """Blends efficiency, results, SOS, quality and recency into one score per team."""

    def __init__(self, config: RankingConfig, prior: Optional[PreseasonPrior] = None):
        super().__init__("composite", config)
        self.prior = prior or PreseasonPrior()

    def core_score(self, team: Team) -> float:
        w = self.config.weights
        core = (
            w["efficiency"] * team.efficiency
            + w["results"] * team.results
            + w["sos"] * team.sos
            + w["quality"] * team.quality
            + w["recency"] * team.recency_per_game
        )
        gp = team.games_played
        core += undefeated_bonus(gp, team.losses, team.efficiency, self.config)
        core -= early_loss_drag(gp, team.losses, self.config)
        return core

    def apply(self, run: RankingRun) -> None:
        for team in run:
            team.recency_per_game = team.recency / max(1, team.games_played)

        for team in run:
            core = self.core_score(team)
            prior_value = self.prior.get(team.name)
            if prior_value is None:
                prior_value = 0.0
            pw = prior_weight(team.games_played, self.config)
            team.score = (1.0 - pw) * core + pw * prior_value
