"""Game results signal: capped margin, win/loss base values, venue and recency."""

from ..models.game import GameResult
from ..models.ranking import RankingRun
from ..models.team import Team
from .base import RankingStage
from .config import RankingConfig


class ResultsStage(RankingStage):
    """Converts each team's games into a single results value plus W/L and recency totals."""

    def __init__(self, config: RankingConfig):
        super().__init__("results", config)

    def location_weight(self, game: GameResult) -> float:
        if game.neutral_site:
            return self.config.neutral_weight
        if game.is_away:
            return self.config.away_weight
        return self.config.home_weight

    def game_score(self, game: GameResult, opponent: Team = None) -> float:
        """
        Score a single game before recency is added.

        Args:
            game: Game from the scored team's perspective
            opponent: Opponent team, used for the lower-division adjustment

        Returns:
            Venue-weighted game score
        """
        cfg = self.config
        vs_lower = opponent is not None and opponent.classification == cfg.lower_division
        if game.won:
            base = cfg.win_value * (cfg.lower_division_win_mul if vs_lower else 1.0)
        else:
            base = cfg.loss_value * (cfg.lower_division_loss_mul if vs_lower else 1.0)
        capped = max(-cfg.mov_cap, min(cfg.mov_cap, game.margin))
        return (base + (capped / cfg.mov_cap) * cfg.mov_weight) * self.location_weight(game)

    def apply(self, run: RankingRun) -> None:
        step = self.config.recency_step
        for team in run:
            total = 0.0
            wins = losses = 0
            recency = 0.0
            for game in team.games:
                week_recency = step * game.week
                total += self.game_score(game, run.get(game.opponent)) + week_recency
                recency += week_recency
                if game.won:
                    wins += 1
                else:
                    losses += 1
            team.wins = wins
            team.losses = losses
            team.recency = recency
            team.results = total / team.games_played if team.games else 0.0
