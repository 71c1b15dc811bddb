"""Strength of schedule: iterated opponent results blended with opponents' win percentage."""

import logging

from ..models.ranking import RankingRun
from ..models.team import Team
from .base import RankingStage
from .config import RankingConfig

logger = logging.getLogger(__name__)


def _mean(values, default: float = 0.0) -> float:
    values = list(values)
    return sum(values) / len(values) if values else default


class ScheduleStrengthStage(RankingStage):
    """
    Fixed-point relaxation over the game graph.

    Each pass recomputes every team's ``sos_iter`` from opponents' current
    results, then pulls every team's results slightly toward its
    ``sos_iter``. Results therefore drift across passes; later stages see
    the smoothed values.
    """

    def __init__(self, config: RankingConfig):
        super().__init__("schedule", config)

    def iterate(self, run: RankingRun) -> None:
        keep, pull = self.config.results_keep, self.config.results_pull
        for _ in range(self.config.sos_iterations):
            for team in run:
                team.sos_iter = _mean(self._opponent(run, g.opponent).results for g in team.games)
            for team in run:
                team.results = keep * team.results + pull * team.sos_iter

    def opponents_win_pct(self, run: RankingRun, team: Team) -> float:
        default = self.config.owp_default
        pcts = []
        for game in team.games:
            opp = self._opponent(run, game.opponent)
            pcts.append(opp.wins / opp.games_played if opp.games else default)
        return _mean(pcts, default)

    def blend(self, sos_iter: float, owp: float, late_season: bool) -> float:
        """Combine iterated SOS and OWP, compress the weak-schedule tail, scale late in the season."""
        cfg = self.config
        sos = cfg.sos_iter_weight * sos_iter + cfg.owp_weight * (owp - cfg.owp_default)
        if sos < cfg.sos_floor:
            sos = cfg.sos_floor + cfg.sos_floor_slope * (sos - cfg.sos_floor)
        if late_season:
            sos *= cfg.late_season_scale
        return sos

    def apply(self, run: RankingRun) -> None:
        self.iterate(run)
        for team in run:
            team.owp = self.opponents_win_pct(run, team)
        for team in run:
            team.sos = self.blend(team.sos_iter, team.owp, run.late_season)

        for i, team in enumerate(sorted(run.teams, key=lambda t: -t.sos), start=1):
            team.sos_rank_all = i
        logger.debug("SOS computed for %d teams (late season: %s)", len(run), run.late_season)

    @staticmethod
    def _opponent(run: RankingRun, name: str) -> Team:
        # Attachment only links teams present in the run.
        return run.get(name)
