"""Main CLI interface for the college football rankings."""

import argparse
import logging
import os
import sys

from .analysis.conferences import aggregate_conferences
from .data.loader import DataLoader, DataRequirementError
from .pipeline.season import SeasonConfig, build_rankings_for_season, run_season_to_file
from .ranking.engine import RankingInputError

DEFAULT_DATA_DIR = os.getenv("CFB_DATA_DIR", "data")


def rank_season(args):
    """Rank a season and write the published list."""
    print(f"Loading {args.season} season from {args.data_dir}...")
    config = SeasonConfig(
        season=args.season,
        data_dir=args.data_dir,
        display_adjustments=not args.no_display_adjustments,
    )
    output = args.output or f"rankings_{args.season}.json"

    try:
        result = run_season_to_file(config, output)
    except (DataRequirementError, RankingInputError) as exc:
        print(f"Error: {exc}")
        return 1

    print(f"\n{'='*60}")
    print(f"{args.season} RANKINGS ({len(result.teams)} teams, {result.run.games_mean:.1f} games/team)")
    print(f"{'='*60}\n")
    for team in result.teams[:args.top]:
        print(
            f"{team.rank:>3}. {team.name:<28} {team.record:>6}  "
            f"score {team.score:+.4f}  sos {team.sos:+.3f} (#{team.sos_rank})"
        )

    print(f"\nSaved rankings to {output}")
    print("✓ Done!")
    return 0


def conference_table(args):
    """Aggregate a season's rankings by conference."""
    try:
        result = build_rankings_for_season(args.season, args.data_dir, SeasonConfig(season=args.season, data_dir=args.data_dir))
    except (DataRequirementError, RankingInputError) as exc:
        print(f"Error: {exc}")
        return 1

    table = aggregate_conferences(result.teams)
    if table.empty:
        print("No published teams to aggregate.")
        return 0

    print(table[["rank", "conference", "count", "wins", "losses", "avg_rank", "avg_score", "avg_sos"]].to_string(index=False))
    if args.output:
        table.to_csv(args.output, index=False)
        print(f"\nSaved conference table to {args.output}")
    return 0


def create_sample(args):
    """Create a synthetic sample season."""
    path = DataLoader.create_sample_season(args.data_dir, args.season)
    print(f"✓ Sample season written to {path}")
    print("\nYou can now rank it with:")
    print(f"  cfb-rankings rank --season {args.season} --data-dir {args.data_dir}")
    return 0


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="College football rankings - resume, schedule and efficiency driven team rankings"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    rank_parser = subparsers.add_parser("rank", help="Rank a season")
    rank_parser.add_argument("--season", "-s", type=int, required=True, help="Season year")
    rank_parser.add_argument(
        "--data-dir", "-d",
        default=DEFAULT_DATA_DIR,
        help="Root data directory with one folder per season (default: $CFB_DATA_DIR or ./data)"
    )
    rank_parser.add_argument("--output", "-o", default=None, help="Output JSON (default: rankings_<season>.json)")
    rank_parser.add_argument("--top", type=int, default=25, help="Teams to print (default: 25)")
    rank_parser.add_argument(
        "--no-display-adjustments",
        action="store_true",
        help="Skip the record-based display nudges applied after ranking"
    )

    conf_parser = subparsers.add_parser("conferences", help="Aggregate rankings by conference")
    conf_parser.add_argument("--season", "-s", type=int, required=True, help="Season year")
    conf_parser.add_argument("--data-dir", "-d", default=DEFAULT_DATA_DIR, help="Root data directory")
    conf_parser.add_argument("--output", "-o", default=None, help="Optional CSV output path")

    sample_parser = subparsers.add_parser("sample", help="Create a synthetic sample season")
    sample_parser.add_argument("--season", "-s", type=int, default=2024, help="Season year (default: 2024)")
    sample_parser.add_argument("--data-dir", "-d", default=DEFAULT_DATA_DIR, help="Root data directory")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "rank":
        return rank_season(args)
    elif args.command == "conferences":
        return conference_table(args)
    elif args.command == "sample":
        return create_sample(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
