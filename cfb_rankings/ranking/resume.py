"""Resume quality: credit for wins over top opponents, debits for bad losses."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from ..models.ranking import RankingRun
from ..models.team import Team
from .base import RankingStage
from .config import RankingConfig


@dataclass(frozen=True)
class ResumeTiers:
    """Nested top-N name sets, smallest first (top-10 within top-25 within top-50)."""

    sets: Sequence[Set[str]]

    def tier_of(self, name: str) -> Optional[int]:
        """Index of the highest tier containing ``name``, or None when outside every tier."""
        for i, members in enumerate(self.sets):
            if name in members:
                return i
        return None

    def contains(self, tier: int, name: str) -> bool:
        return name in self.sets[tier]


def build_resume_tiers(teams: List[Team], sizes: Sequence[int]) -> ResumeTiers:
    """
    Rank every team by interim ``results + sos`` and take top-N prefixes.

    Args:
        teams: Whole pool in canonical order
        sizes: Ascending tier sizes

    Returns:
        ResumeTiers for lookups during quality scoring
    """
    interim = sorted(teams, key=lambda t: -(t.results + t.sos))
    names = [t.name for t in interim]
    return ResumeTiers(sets=tuple(set(names[:n]) for n in sizes))


class ResumeStage(RankingStage):
    """Scores each team's wins and losses against the interim top-N tiers."""

    def __init__(self, config: RankingConfig):
        super().__init__("resume", config)

    def game_credit(self, tiers: ResumeTiers, opponent: str, won: bool) -> float:
        cfg = self.config
        if won:
            tier = tiers.tier_of(opponent)
            return cfg.tier_credits[tier] if tier is not None else 0.0
        if not tiers.contains(len(tiers.sets) - 1, opponent):
            return -cfg.bad_loss_penalty
        if len(tiers.sets) > 1 and not tiers.contains(len(tiers.sets) - 2, opponent):
            return -cfg.soft_loss_penalty
        return 0.0

    def apply(self, run: RankingRun) -> None:
        tiers = build_resume_tiers(run.teams, self.config.top_tiers)
        for team in run:
            total = sum(self.game_credit(tiers, g.opponent, g.won) for g in team.games)
            team.quality = total / max(1, team.games_played)
