from .config import RankingConfig
from .engine import RankingEngine, RankingInputError, rank_teams

__all__ = ["RankingConfig", "RankingEngine", "RankingInputError", "rank_teams"]
