"""Ranking run model: the explicit team sequence shared by every stage."""

from typing import Dict, Iterator, List, Optional

from .team import Team


class RankingRun:
    """
    Transient state for one ranking invocation.

    ``teams`` is the canonical iteration order (roster order). Stages never
    iterate a name-keyed mapping; ``get`` is only used to resolve opponents.
    """

    def __init__(self, teams: List[Team]):
        """
        Initialize run with teams.

        Args:
            teams: Every team in the pool, in roster order
        """
        self.teams: List[Team] = list(teams)
        self._index: Dict[str, int] = {}
        for i, team in enumerate(self.teams):
            if team.name in self._index:
                raise ValueError(f"Duplicate team name in run: {team.name}")
            self._index[team.name] = i

        self.games_mean: float = 0.0
        self.late_season: bool = False
        self.ranked: List[Team] = []
        self.published: List[Team] = []

    def __iter__(self) -> Iterator[Team]:
        return iter(self.teams)

    def __len__(self) -> int:
        return len(self.teams)

    def get(self, name: str) -> Optional[Team]:
        """Get a team by canonical name."""
        idx = self._index.get(name)
        return None if idx is None else self.teams[idx]

    @property
    def total_games(self) -> int:
        """Attached game entries across the pool (two per source game)."""
        return sum(t.games_played for t in self.teams)

    def to_dict(self) -> dict:
        """Convert run summary and published teams to dictionary."""
        return {
            "team_count": len(self.teams),
            "games_mean": self.games_mean,
            "late_season": self.late_season,
            "teams": [team.to_dict() for team in self.published],
        }
