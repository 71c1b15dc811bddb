from .game import GameResult
from .ranking import RankingRun
from .team import Team

__all__ = ["GameResult", "RankingRun", "Team"]
