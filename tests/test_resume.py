"""Tests for resume tiers and quality scoring."""

import pytest

from cfb_rankings.models.game import GameResult
from cfb_rankings.models.ranking import RankingRun
from cfb_rankings.models.team import Team
from cfb_rankings.ranking.composite import undefeated_bonus
from cfb_rankings.ranking.config import RankingConfig
from cfb_rankings.ranking.resume import ResumeStage, build_resume_tiers


def _pool(size=60):
    """Teams T00..T{size-1} ordered strongest first by results + sos."""
    teams = []
    for i in range(size):
        team = Team(name=f"T{i:02d}", classification="fbs")
        team.results = float(size - i)
        team.sos = 0.0
        teams.append(team)
    return teams


def test_tiers_are_prefixes_of_interim_order():
    tiers = build_resume_tiers(_pool(), (10, 25, 50))
    assert tiers.tier_of("T00") == 0
    assert tiers.tier_of("T09") == 0
    assert tiers.tier_of("T10") == 1
    assert tiers.tier_of("T24") == 1
    assert tiers.tier_of("T25") == 2
    assert tiers.tier_of("T49") == 2
    assert tiers.tier_of("T50") is None
    assert tiers.tier_of("Ghost") is None


def test_tiers_use_results_plus_sos():
    a, b = Team(name="A"), Team(name="B")
    a.results, a.sos = 1.0, -0.6
    b.results, b.sos = 0.5, 0.2
    tiers = build_resume_tiers([a, b], (1, 2))
    assert tiers.tier_of("B") == 0
    assert tiers.tier_of("A") == 1


@pytest.mark.parametrize(
    "opponent,won,expected",
    [
        ("T05", True, 0.50),
        ("T15", True, 0.32),
        ("T40", True, 0.16),
        ("T55", True, 0.0),
        ("T05", False, 0.0),
        ("T20", False, 0.0),
        ("T30", False, -0.11),
        ("T55", False, -0.26),
        ("Ghost", False, -0.26),
    ],
)
def test_game_credit(opponent, won, expected):
    stage = ResumeStage(RankingConfig())
    tiers = build_resume_tiers(_pool(), (10, 25, 50))
    assert stage.game_credit(tiers, opponent, won) == pytest.approx(expected)


def test_quality_is_mean_credit_per_game():
    teams = _pool()
    hero = teams[20]
    for opp, pf, pa in (("T03", 24, 21), ("T30", 10, 17), ("T59", 35, 0)):
        hero.add_game(GameResult(opponent=opp, points_for=pf, points_against=pa, is_home=True))
    run = RankingRun(teams)
    ResumeStage(RankingConfig()).apply(run)
    assert hero.quality == pytest.approx((0.50 - 0.11 + 0.0) / 3)
    assert teams[0].quality == 0.0


def test_resume_beats_raw_record():
    """Two 3-0 teams: narrow wins over top-25 opponents outrank blowouts of lower-division foes."""
    teams = _pool()
    blowout = Team(name="Blowout", classification="fbs")
    grinder = Team(name="Grinder", classification="fbs")
    cupcakes = []
    for i in range(3):
        cupcake = Team(name=f"FCS{i}", classification="fcs")
        cupcake.results = -5.0
        cupcakes.append(cupcake)
        blowout.add_game(GameResult(opponent=cupcake.name, points_for=28, points_against=7, is_home=True))
        grinder.add_game(GameResult(opponent=f"T{i * 8:02d}", points_for=24, points_against=21, is_home=True))
    blowout.results = grinder.results = -10.0
    run = RankingRun(teams + [blowout, grinder] + cupcakes)

    ResumeStage(RankingConfig()).apply(run)

    assert grinder.quality > blowout.quality
    assert blowout.quality == 0.0
    config = RankingConfig()
    assert undefeated_bonus(3, 0, 0.40, config) < undefeated_bonus(3, 0, 0.90, config)


def test_team_without_games_has_zero_quality():
    teams = _pool(3)
    run = RankingRun(teams)
    ResumeStage(RankingConfig()).apply(run)
    assert all(t.quality == 0.0 for t in teams)
