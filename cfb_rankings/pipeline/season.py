"""Season build: load files, rank, adjust for display, enrich and persist."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..data.loader import DataLoader, DataRequirementError, SeasonData
from ..models.ranking import RankingRun
from ..models.team import Team
from ..ranking.config import RankingConfig
from ..ranking.engine import RankingEngine

logger = logging.getLogger(__name__)

__all__ = [
    "DataRequirementError",
    "SeasonConfig",
    "SeasonRankings",
    "apply_display_adjustments",
    "build_rankings_for_season",
    "enrich_rankings",
    "run_season_to_file",
    "write_rankings",
]

UNRANKED = 999


@dataclass
class SeasonConfig:
    """Season build configuration knobs."""

    season: int = 2024
    data_dir: str = "data"
    display_adjustments: bool = True
    undefeated_display_bonus: float = 0.01
    undefeated_display_min_games: int = 3
    multi_loss_display_penalty: float = 0.01
    multi_loss_display_losses: int = 2
    multi_loss_display_max_games: int = 5
    ranking: RankingConfig = field(default_factory=RankingConfig)


@dataclass
class SeasonRankings:
    """Published rankings for a season plus the run that produced them."""

    season: int
    teams: List[Team]
    run: RankingRun
    sources: Dict[str, str] = field(default_factory=dict)
    generated_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> dict:
        return {
            "season": self.season,
            "generated_at": self.generated_at,
            "team_count": len(self.teams),
            "games_mean": self.run.games_mean,
            "late_season": self.run.late_season,
            "sources": self.sources,
            "teams": [t.to_dict() for t in self.teams],
        }


def apply_display_adjustments(teams: List[Team], config: SeasonConfig) -> List[Team]:
    """
    Small record-based nudges applied to the published list, then re-rank.

    Args:
        teams: Published teams in rank order
        config: Season configuration

    Returns:
        Teams re-sorted by adjusted score with ranks reassigned
    """
    for team in teams:
        gp = team.games_played
        if gp >= config.undefeated_display_min_games and team.losses == 0:
            team.score += config.undefeated_display_bonus
        if team.losses >= config.multi_loss_display_losses and gp <= config.multi_loss_display_max_games:
            team.score -= config.multi_loss_display_penalty
    ordered = sorted(teams, key=lambda t: -t.score)
    for i, team in enumerate(ordered, start=1):
        team.rank = i
    return ordered


def enrich_rankings(teams: List[Team]) -> List[Team]:
    """
    Add point totals, wins over final top-10/25/50 teams and offense/defense ranks.

    Opponents outside the published list count as unranked.
    """
    rank_of = {t.name: t.rank for t in teams}
    for team in teams:
        team.pf = sum(g.points_for for g in team.games)
        team.pa = sum(g.points_against for g in team.games)
        counts = {10: 0, 25: 0, 50: 0}
        for game in team.games:
            if not game.won:
                continue
            opp_rank = rank_of.get(game.opponent) or UNRANKED
            for cutoff in counts:
                if opp_rank <= cutoff:
                    counts[cutoff] += 1
        team.top10_wins = counts[10]
        team.top25_wins = counts[25]
        team.top50_wins = counts[50]

    offense = sorted(teams, key=lambda t: -(t.pf / (t.games_played or 1)))
    defense = sorted(teams, key=lambda t: t.pa / (t.games_played or 1))
    for i, team in enumerate(offense, start=1):
        team.off_rank = i
    for i, team in enumerate(defense, start=1):
        team.def_rank = i
    return teams


def rank_season_data(data: SeasonData, config: Optional[SeasonConfig] = None) -> SeasonRankings:
    """Rank already-loaded season records."""
    config = config or SeasonConfig(season=data.season)
    run = RankingEngine(config.ranking).run(data.teams, data.games, data.ratings)
    teams = list(run.published)
    if config.display_adjustments and run.total_games:
        teams = apply_display_adjustments(teams, config)
        run.published = teams
    enrich_rankings(teams)
    logger.info("Ranked %d published teams for %s", len(teams), data.season)
    return SeasonRankings(season=data.season, teams=teams, run=run, sources=dict(data.sources))


def build_rankings_for_season(season: int, data_dir: str = "data", config: Optional[SeasonConfig] = None) -> SeasonRankings:
    """
    Load a season from ``data_dir`` and rank it.

    Args:
        season: Season year
        data_dir: Root directory holding ``<season>/teams.json`` etc.
        config: Season configuration (defaults if None)

    Returns:
        SeasonRankings with enriched published teams
    """
    config = config or SeasonConfig(season=season, data_dir=data_dir)
    data = DataLoader.load_season(data_dir, season)
    return rank_season_data(data, config)


def write_rankings(result: SeasonRankings, path: str) -> None:
    """Persist a ranked season as a JSON document."""
    DataLoader.save_rankings_to_json(result.to_dict(), path)


def run_season_to_file(config: SeasonConfig, output_path: str) -> SeasonRankings:
    """Build a season's rankings and persist them as JSON."""
    result = build_rankings_for_season(config.season, config.data_dir, config)
    write_rankings(result, output_path)
    return result
