"""College football rankings from season game results."""

from .models import GameResult, RankingRun, Team
from .ranking import RankingConfig, RankingEngine, RankingInputError, rank_teams

__version__ = "0.1.0"

__all__ = [
    "GameResult",
    "RankingConfig",
    "RankingEngine",
    "RankingInputError",
    "RankingRun",
    "Team",
    "rank_teams",
]
