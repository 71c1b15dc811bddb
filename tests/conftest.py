"""Shared fixtures for ranking tests."""

import pytest

from cfb_rankings.data.games import attach_games
from cfb_rankings.data.loader import DataLoader
from cfb_rankings.data.team_index import build_team_index
from cfb_rankings.ranking.engine import RankingEngine


@pytest.fixture
def build_run():
    """Factory: raw records -> RankingRun with games attached, no stages applied."""

    def _build(teams, games):
        index = build_team_index(teams)
        run = RankingEngine.build_run(index)
        attach_games(run, index, games)
        return run

    return _build


@pytest.fixture
def sample_season(tmp_path):
    """Synthetic season written to disk; returns (data_dir, season)."""
    DataLoader.create_sample_season(tmp_path, 2024)
    return tmp_path, 2024


@pytest.fixture
def sample_records(sample_season):
    data_dir, season = sample_season
    data = DataLoader.load_season(data_dir, season)
    return data.teams, data.games, data.ratings
