"""Tests for conference aggregation."""

import math

import pytest

from cfb_rankings.analysis.conferences import CONFERENCE_COLUMNS, aggregate_conferences
from cfb_rankings.models.team import Team


def _team(name, conference, rank, score, wins, losses, sos=0.0, quality=0.0, results=0.0):
    team = Team(name=name, conference=conference, classification="fbs")
    team.rank = rank
    team.score = score
    team.wins = wins
    team.losses = losses
    team.sos = sos
    team.quality = quality
    team.results = results
    team.off_rank = rank
    team.def_rank = rank
    return team


@pytest.fixture
def teams():
    return [
        _team("A", "Lakes", 1, 0.9, 6, 0, sos=0.2),
        _team("B", "Plains", 2, 0.8, 5, 1),
        _team("C", "Lakes", 30, 0.3, 2, 4, sos=0.0),
        _team("D", "Plains", 3, 0.7, 5, 1),
        _team("E", "", 40, 0.1, 1, 5),
    ]


def test_columns_and_order(teams):
    table = aggregate_conferences(teams)
    assert list(table.columns) == CONFERENCE_COLUMNS
    assert list(table["conference"]) == ["Plains", "Lakes", "Unknown"]
    assert list(table["rank"]) == [1, 2, 3]


def test_aggregates(teams):
    table = aggregate_conferences(teams).set_index("conference")
    lakes = table.loc["Lakes"]
    assert lakes["count"] == 2
    assert lakes["wins"] == 8
    assert lakes["losses"] == 4
    assert lakes["games"] == 12
    assert lakes["win_pct"] == pytest.approx(8 / 12)
    assert lakes["avg_rank"] == pytest.approx(15.5)
    assert lakes["hi_rank"] == 1
    assert lakes["low_rank"] == 30
    assert lakes["avg_score"] == pytest.approx(0.6)
    assert lakes["median_score"] == pytest.approx(0.6)
    assert lakes["avg_sos"] == pytest.approx(0.1)
    assert lakes["top25_teams"] == 1
    assert lakes["score_stdev"] == pytest.approx(0.3)

    plains = table.loc["Plains"]
    assert plains["top25_teams"] == 2
    assert plains["score_stdev"] == pytest.approx(0.05)


def test_single_team_conference_has_zero_stdev(teams):
    table = aggregate_conferences(teams).set_index("conference")
    assert table.loc["Unknown", "score_stdev"] == pytest.approx(0.0)


def test_missing_ranks_are_skipped():
    team = _team("A", "Lakes", None, 0.5, 0, 0)
    table = aggregate_conferences([team])
    assert math.isnan(table.loc[0, "avg_rank"])
    assert math.isnan(table.loc[0, "win_pct"])


def test_empty_input():
    table = aggregate_conferences([])
    assert table.empty
    assert list(table.columns) == CONFERENCE_COLUMNS
