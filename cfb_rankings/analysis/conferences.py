"""Conference-level aggregation of published rankings."""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from ..models.team import Team

CONFERENCE_COLUMNS = [
    "rank",
    "conference",
    "count",
    "wins",
    "losses",
    "games",
    "win_pct",
    "avg_rank",
    "hi_rank",
    "low_rank",
    "avg_score",
    "median_score",
    "avg_results",
    "avg_sos",
    "avg_quality",
    "avg_off_rank",
    "avg_def_rank",
    "top25_teams",
    "score_stdev",
]


def teams_frame(teams: Iterable[Team]) -> pd.DataFrame:
    """One row per team with the fields conference metrics are built from."""
    rows = [
        {
            "conference": t.conference or "Unknown",
            "rank": t.rank,
            "wins": t.wins,
            "losses": t.losses,
            "score": t.score,
            "results": t.results,
            "sos": t.sos,
            "quality": t.quality,
            "off_rank": t.off_rank,
            "def_rank": t.def_rank,
        }
        for t in teams
    ]
    frame = pd.DataFrame(rows, columns=["conference", "rank", "wins", "losses", "score", "results", "sos", "quality", "off_rank", "def_rank"])
    for col in ("rank", "off_rank", "def_rank"):
        frame[col] = pd.to_numeric(frame[col], errors="coerce")
    return frame


def aggregate_conferences(teams: Iterable[Team]) -> pd.DataFrame:
    """
    Aggregate published teams by conference, ranked by average score.

    Missing ranks are skipped in averages; the score standard deviation is
    the population value.

    Args:
        teams: Published, enriched teams

    Returns:
        DataFrame with CONFERENCE_COLUMNS, best conference first
    """
    frame = teams_frame(teams)
    if frame.empty:
        return pd.DataFrame(columns=CONFERENCE_COLUMNS)

    grouped = frame.groupby("conference", sort=False)
    table = pd.DataFrame({
        "count": grouped.size(),
        "wins": grouped["wins"].sum(),
        "losses": grouped["losses"].sum(),
        "avg_rank": grouped["rank"].mean(),
        "hi_rank": grouped["rank"].min(),
        "low_rank": grouped["rank"].max(),
        "avg_score": grouped["score"].mean(),
        "median_score": grouped["score"].median(),
        "avg_results": grouped["results"].mean(),
        "avg_sos": grouped["sos"].mean(),
        "avg_quality": grouped["quality"].mean(),
        "avg_off_rank": grouped["off_rank"].mean(),
        "avg_def_rank": grouped["def_rank"].mean(),
        "top25_teams": grouped["rank"].apply(lambda r: int((r <= 25).sum())),
        "score_stdev": grouped["score"].std(ddof=0),
    }).reset_index()

    table["games"] = table["wins"] + table["losses"]
    table["win_pct"] = table["wins"] / table["games"].replace(0, np.nan)
    table = table.sort_values("avg_score", ascending=False, kind="stable").reset_index(drop=True)
    table["rank"] = np.arange(1, len(table) + 1)
    return table[CONFERENCE_COLUMNS]
