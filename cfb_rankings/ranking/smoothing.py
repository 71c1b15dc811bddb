"""Head-to-head smoothing, final ordering and publication."""

import logging
from typing import Dict, List, Set

from ..models.ranking import RankingRun
from ..models.team import Team
from .base import RankingStage
from .config import RankingConfig

logger = logging.getLogger(__name__)


def sort_by_score(teams: List[Team]) -> List[Team]:
    """Stable descending sort on score."""
    return sorted(teams, key=lambda t: -t.score)


def losses_by_team(teams: List[Team]) -> Dict[str, Set[str]]:
    """Opponents each team failed to beat (ties included)."""
    return {t.name: {g.opponent for g in t.games if not g.won} for t in teams}


class HeadToHeadStage(RankingStage):
    """
    Nudges teams just below a higher-ranked team they have a clean record against.

    For each team at position i, every team at positions i+1..i+window that
    has not lost to it, and that it has not lost to, gains ``h2h_nudge``.
    All nudges are read from the pre-nudge order and applied together.
    """

    def __init__(self, config: RankingConfig):
        super().__init__("head_to_head", config)

    def nudges(self, ordered: List[Team]) -> Dict[str, int]:
        """Number of nudges earned by each team, keyed by name."""
        window = self.config.h2h_window
        lost_to = losses_by_team(ordered)
        nudges: Dict[str, int] = {}
        for i, upper in enumerate(ordered):
            for lower in ordered[i + 1:i + 1 + window]:
                if upper.name in lost_to[lower.name] or lower.name in lost_to[upper.name]:
                    continue
                nudges[lower.name] = nudges.get(lower.name, 0) + 1
        return nudges

    def apply(self, run: RankingRun) -> None:
        ordered = sort_by_score(run.teams)
        nudges = self.nudges(ordered)
        step = self.config.h2h_nudge
        for team in ordered:
            for _ in range(nudges.get(team.name, 0)):
                team.score += step
        run.ranked = sort_by_score(ordered)
        logger.debug("Applied %d head-to-head nudges", len(nudges))


class PublishStage(RankingStage):
    """Filters the ranked pool to the published division and assigns ranks."""

    def __init__(self, config: RankingConfig):
        super().__init__("publish", config)

    def apply(self, run: RankingRun) -> None:
        division = self.config.published_division
        ranked = run.ranked or sort_by_score(run.teams)
        published = [t for t in ranked if t.classification == division]
        for i, team in enumerate(published, start=1):
            team.rank = i
        for i, team in enumerate(sorted(published, key=lambda t: -t.sos), start=1):
            team.sos_rank = i
        run.published = published
