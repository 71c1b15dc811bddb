"""Tests for scoring rates, opponent-adjusted performance and efficiency."""

import numpy as np
import pytest

from cfb_rankings.ranking.config import RankingConfig
from cfb_rankings.ranking.performance import PerformanceStage, efficiency_score, percentile_ranks

TEAMS = [
    {"school": "A", "classification": "fbs"},
    {"school": "B", "classification": "fbs"},
    {"school": "C", "classification": "fbs"},
]
GAMES = [
    {"home": "A", "away": "B", "home_points": 35, "away_points": 14},
    {"home": "A", "away": "C", "home_points": 28, "away_points": 21},
    {"home": "B", "away": "C", "home_points": 24, "away_points": 10},
]


class TestPercentileRanks:
    def test_distinct_values(self):
        np.testing.assert_allclose(percentile_ranks([10, 20, 30]), [0.5, 1.0, 1.0])
        np.testing.assert_allclose(percentile_ranks([1, 2, 3, 4]), [1 / 3, 2 / 3, 1.0, 1.0])

    def test_inverted(self):
        np.testing.assert_allclose(percentile_ranks([10, 20, 30], higher_is_better=False), [0.5, 0.0, 0.0])

    def test_ties_share_percentile(self):
        np.testing.assert_allclose(percentile_ranks([5, 5, 1]), [1.0, 1.0, 0.5])

    def test_order_independent_of_input_order(self):
        np.testing.assert_allclose(percentile_ranks([30, 10, 20]), [1.0, 0.5, 1.0])

    def test_single_and_empty(self):
        np.testing.assert_allclose(percentile_ranks([7.0]), [0.0])
        np.testing.assert_allclose(percentile_ranks([7.0], higher_is_better=False), [1.0])
        assert percentile_ranks([]).size == 0


class TestEfficiency:
    def test_balanced_team_gets_bonus(self):
        assert efficiency_score(0.25, 0.25) == pytest.approx(0.27)

    def test_clamped_to_one(self):
        assert efficiency_score(1.0, 1.0) == 1.0

    def test_one_sided_team(self):
        assert efficiency_score(1.0, 0.0) == pytest.approx(0.0)

    def test_geometric_mean_plus_symmetry(self):
        assert efficiency_score(0.81, 0.49) == pytest.approx(0.63 + 0.02 * (1 - 0.32))


def test_apply_computes_rates_perf_and_efficiency(build_run):
    run = build_run(TEAMS, GAMES)
    PerformanceStage(RankingConfig()).apply(run)
    a, b, c = run.get("A"), run.get("B"), run.get("C")

    assert (a.pf_pg, a.pa_pg) == pytest.approx((31.5, 17.5))
    assert (b.pf_pg, b.pa_pg) == pytest.approx((19.0, 22.5))
    assert (c.pf_pg, c.pa_pg) == pytest.approx((15.5, 26.0))

    vs_b = (35 - 22.5) / 28 + (19.0 - 14) / 28
    vs_c = (28 - 26.0) / 28 + (15.5 - 21) / 28
    assert a.perf == pytest.approx((vs_b + vs_c) / 2)

    assert (a.off_pct, a.def_pct) == pytest.approx((1.0, 0.5))
    assert (c.off_pct, c.def_pct) == pytest.approx((0.5, 0.0))
    assert a.efficiency == pytest.approx(np.sqrt(0.5) + 0.02 * 0.5)
    assert c.efficiency == pytest.approx(0.0 + 0.02 * 0.5)


def test_perf_is_clamped_per_game(build_run):
    run = build_run(
        [{"school": "A"}, {"school": "B"}, {"school": "C"}],
        [
            {"home": "A", "away": "B", "home_points": 100, "away_points": 0},
            {"home": "B", "away": "C", "home_points": 50, "away_points": 0},
        ],
    )
    PerformanceStage(RankingConfig()).apply(run)
    assert run.get("A").perf == pytest.approx(1.2)


def test_zero_game_team_has_zero_rates(build_run):
    run = build_run(TEAMS + [{"school": "Idle"}], GAMES)
    PerformanceStage(RankingConfig()).apply(run)
    idle = run.get("Idle")
    assert (idle.pf_pg, idle.pa_pg, idle.perf) == (0.0, 0.0, 0.0)
