from .games import attach_games, parse_games
from .priors import PreseasonPrior, index_prior
from .team_index import TeamIndex, build_team_index

__all__ = [
    "PreseasonPrior",
    "TeamIndex",
    "attach_games",
    "build_team_index",
    "index_prior",
    "parse_games",
]
