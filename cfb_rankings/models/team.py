"""Team model for college football rankings."""

from dataclasses import dataclass, field
from typing import List, Optional

from .game import GameResult


@dataclass
class Team:
    """
    A school in the ranking pool.

    The identity fields are fixed when the team index is built; ``games``
    only grows while games are attached. Every other field is derived by
    exactly one ranking stage and written once per run.
    """

    name: str
    conference: str = "Unknown"
    classification: str = "unknown"
    games: List[GameResult] = field(default_factory=list)

    wins: int = 0
    losses: int = 0
    results: float = 0.0
    sos_iter: float = 0.0
    owp: float = 0.5
    sos: float = 0.0
    quality: float = 0.0
    recency: float = 0.0
    recency_per_game: float = 0.0
    perf: float = 0.0
    pf_pg: float = 0.0
    pa_pg: float = 0.0
    off_pct: float = 0.5
    def_pct: float = 0.5
    efficiency: float = 0.0
    score: float = 0.0

    rank: Optional[int] = None
    sos_rank_all: Optional[int] = None
    sos_rank: Optional[int] = None

    # Filled by season enrichment, not by the core engine.
    pf: Optional[float] = None
    pa: Optional[float] = None
    top10_wins: Optional[int] = None
    top25_wins: Optional[int] = None
    top50_wins: Optional[int] = None
    off_rank: Optional[int] = None
    def_rank: Optional[int] = None

    def __post_init__(self):
        """Validate team data."""
        if not self.name or not self.name.strip():
            raise ValueError("Team name must be non-empty")

    @property
    def games_played(self) -> int:
        return len(self.games)

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}"

    def add_game(self, game: GameResult) -> None:
        self.games.append(game)

    def to_dict(self) -> dict:
        """Convert team to the published output dictionary."""
        data = {
            "rank": self.rank,
            "name": self.name,
            "conference": self.conference,
            "classification": self.classification,
            "wins": self.wins,
            "losses": self.losses,
            "results": self.results,
            "sos": self.sos,
            "sos_rank": self.sos_rank,
            "sos_rank_all": self.sos_rank_all,
            "owp": self.owp,
            "quality": self.quality,
            "recency": self.recency_per_game,
            "perf": self.perf,
            "pf_pg": self.pf_pg,
            "pa_pg": self.pa_pg,
            "off_pct": self.off_pct,
            "def_pct": self.def_pct,
            "efficiency": self.efficiency,
            "score": self.score,
            "games": [g.to_dict() for g in self.games],
        }
        for key in ("pf", "pa", "top10_wins", "top25_wins", "top50_wins", "off_rank", "def_rank"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Team":
        """Create team from a published output dictionary."""
        team = cls(
            name=data["name"],
            conference=data.get("conference", "Unknown"),
            classification=data.get("classification", "unknown"),
            games=[GameResult.from_dict(g) for g in data.get("games", [])],
        )
        team.rank = data.get("rank")
        team.wins = data.get("wins", 0)
        team.losses = data.get("losses", 0)
        team.results = data.get("results", 0.0)
        team.sos = data.get("sos", 0.0)
        team.sos_rank = data.get("sos_rank")
        team.sos_rank_all = data.get("sos_rank_all")
        team.owp = data.get("owp", 0.5)
        team.quality = data.get("quality", 0.0)
        team.recency_per_game = data.get("recency", 0.0)
        team.perf = data.get("perf", 0.0)
        team.pf_pg = data.get("pf_pg", 0.0)
        team.pa_pg = data.get("pa_pg", 0.0)
        team.off_pct = data.get("off_pct", 0.5)
        team.def_pct = data.get("def_pct", 0.5)
        team.efficiency = data.get("efficiency", 0.0)
        team.score = data.get("score", 0.0)
        for key in ("pf", "pa", "top10_wins", "top25_wins", "top50_wins", "off_rank", "def_rank"):
            if key in data:
                setattr(team, key, data[key])
        return team
