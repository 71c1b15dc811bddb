"""Tests for the schedule-strength stage."""

import pytest

from cfb_rankings.models.game import GameResult
from cfb_rankings.models.ranking import RankingRun
from cfb_rankings.models.team import Team
from cfb_rankings.ranking.config import RankingConfig
from cfb_rankings.ranking.schedule import ScheduleStrengthStage


def _triangle():
    """A played B and C; B and C played only A."""
    a, b, c = Team(name="A"), Team(name="B"), Team(name="C")
    for opp, pts in ((b, (21, 14)), (c, (10, 13))):
        game = GameResult(opponent=opp.name, points_for=pts[0], points_against=pts[1], is_home=True)
        a.add_game(game)
        opp.add_game(game.mirrored("A"))
    return RankingRun([a, b, c])


def test_single_iteration_updates_sos_then_results():
    run = _triangle()
    run.get("A").results, run.get("B").results, run.get("C").results = 1.0, 0.5, -0.5

    ScheduleStrengthStage(RankingConfig(sos_iterations=1)).iterate(run)

    assert run.get("A").sos_iter == pytest.approx(0.0)
    assert run.get("B").sos_iter == pytest.approx(1.0)
    assert run.get("C").sos_iter == pytest.approx(1.0)
    assert run.get("A").results == pytest.approx(0.9)
    assert run.get("B").results == pytest.approx(0.55)
    assert run.get("C").results == pytest.approx(-0.35)


def test_sos_iter_reads_pre_pass_results():
    run = _triangle()
    run.get("A").results, run.get("B").results, run.get("C").results = 1.0, 0.5, -0.5
    ScheduleStrengthStage(RankingConfig(sos_iterations=2)).iterate(run)
    # Second pass uses the first pass's updated results (0.9, 0.55, -0.35).
    assert run.get("A").sos_iter == pytest.approx((0.55 - 0.35) / 2)
    assert run.get("B").sos_iter == pytest.approx(0.9)


def test_opponents_win_pct():
    run = _triangle()
    run.get("B").wins = 1
    run.get("C").wins = 0
    stage = ScheduleStrengthStage(RankingConfig())
    assert stage.opponents_win_pct(run, run.get("A")) == pytest.approx(0.5)
    run.get("A").wins = 1
    assert stage.opponents_win_pct(run, run.get("B")) == pytest.approx(0.5)


def test_blend_mid_schedule():
    stage = ScheduleStrengthStage(RankingConfig())
    assert stage.blend(0.2, 0.7, late_season=False) == pytest.approx(0.2)
    assert stage.blend(0.2, 0.7, late_season=True) == pytest.approx(0.212)


def test_blend_compresses_weak_tail():
    stage = ScheduleStrengthStage(RankingConfig())
    raw = 0.72 * -0.5 + 0.28 * (0.2 - 0.5)
    assert raw < -0.15
    assert stage.blend(-0.5, 0.2, late_season=False) == pytest.approx(-0.15 + 0.6 * (raw + 0.15))


def test_blend_leaves_values_above_floor():
    stage = ScheduleStrengthStage(RankingConfig())
    assert stage.blend(-0.1, 0.5, late_season=False) == pytest.approx(-0.072)


def test_apply_zero_game_team_has_zero_sos():
    run = _triangle()
    idle = Team(name="Idle")
    run = RankingRun(run.teams + [idle])
    run.late_season = True
    ScheduleStrengthStage(RankingConfig()).apply(run)
    assert idle.sos_iter == 0.0
    assert idle.owp == 0.5
    assert idle.sos == 0.0


def test_apply_assigns_full_pool_sos_ranks():
    run = _triangle()
    run.get("A").results, run.get("B").results, run.get("C").results = 1.0, 0.5, -0.5
    ScheduleStrengthStage(RankingConfig()).apply(run)

    ranks = sorted(t.sos_rank_all for t in run)
    assert ranks == [1, 2, 3]
    by_rank = sorted(run.teams, key=lambda t: t.sos_rank_all)
    assert all(x.sos >= y.sos for x, y in zip(by_rank, by_rank[1:]))
