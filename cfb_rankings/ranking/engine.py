"""Ranking engine: builds the team pool, attaches games and runs the ordered stages."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import List, Optional

from ..data.games import attach_games
from ..data.priors import PreseasonPrior, index_prior
from ..data.team_index import TeamIndex, build_team_index
from ..models.ranking import RankingRun
from ..models.team import Team
from .base import RankingStage
from .composite import CompositeStage
from .config import RankingConfig
from .performance import PerformanceStage
from .resume import ResumeStage
from .results import ResultsStage
from .schedule import ScheduleStrengthStage
from .smoothing import HeadToHeadStage, PublishStage

logger = logging.getLogger(__name__)


class RankingInputError(ValueError):
    """Raised when an input collection is not a collection of records at all."""


def _as_records(value, label: str, optional: bool = False) -> list:
    if value is None and optional:
        return []
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise RankingInputError(
            f"{label} must be an iterable collection of records, got {type(value).__name__}"
        )
    return list(value)


class RankingEngine:
    """Deterministic multi-stage ranking over one season's teams and games."""

    def __init__(self, config: Optional[RankingConfig] = None):
        """
        Initialize the engine.

        Args:
            config: Model configuration (uses production defaults if None)
        """
        self.config = config or RankingConfig()

    def build_stages(self, prior: PreseasonPrior) -> List[RankingStage]:
        """Stages in execution order; each reads fields written by the ones before it."""
        cfg = self.config
        return [
            ResultsStage(cfg),
            ScheduleStrengthStage(cfg),
            ResumeStage(cfg),
            PerformanceStage(cfg),
            CompositeStage(cfg, prior),
            HeadToHeadStage(cfg),
            PublishStage(cfg),
        ]

    @staticmethod
    def build_run(index: TeamIndex) -> RankingRun:
        return RankingRun([
            Team(name=meta.name, conference=meta.conference, classification=meta.classification)
            for meta in index.meta.values()
        ])

    def run(self, teams_raw, games_raw, prior_raw=None) -> RankingRun:
        """
        Rank a season.

        Args:
            teams_raw: Raw team records (all divisions)
            games_raw: Raw game records
            prior_raw: Optional preseason rating records

        Returns:
            Completed RankingRun; ``published`` holds the ranked output
        """
        teams_raw = _as_records(teams_raw, "teams")
        games_raw = _as_records(games_raw, "games")
        prior_raw = _as_records(prior_raw, "preseason ratings", optional=True)

        index = build_team_index(teams_raw)
        run = self.build_run(index)
        summary = attach_games(run, index, games_raw)
        logger.info("Ranking %d teams with %d games", len(run), summary.attached)

        if run.total_games == 0:
            logger.warning("No usable games; returning alphabetical placeholder order")
            return self._empty_run(run)

        run.games_mean = run.total_games / max(1, len(run))
        run.late_season = run.games_mean >= self.config.late_season_games

        prior = index_prior(prior_raw, z_clip=self.config.prior_z_clip, scale=self.config.prior_scale)
        for stage in self.build_stages(prior):
            stage.apply(run)
        return run

    def rank(self, teams_raw, games_raw, prior_raw=None) -> List[Team]:
        """Published teams in rank order."""
        return self.run(teams_raw, games_raw, prior_raw).published

    def _empty_run(self, run: RankingRun) -> RankingRun:
        division = self.config.published_division
        published = sorted(
            (t for t in run if t.classification == division),
            key=lambda t: (t.name.lower(), t.name),
        )
        for i, team in enumerate(published, start=1):
            team.rank = i
            team.score = self.config.empty_score
        run.ranked = list(published)
        run.published = published
        return run


def rank_teams(teams_raw, games_raw, prior_raw=None, config: Optional[RankingConfig] = None) -> List[Team]:
    """Convenience wrapper around :meth:`RankingEngine.rank`."""
    return RankingEngine(config).rank(teams_raw, games_raw, prior_raw)
