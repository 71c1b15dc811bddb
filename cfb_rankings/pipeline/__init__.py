from .season import SeasonConfig, SeasonRankings, build_rankings_for_season, run_season_to_file, write_rankings

__all__ = ["SeasonConfig", "SeasonRankings", "build_rankings_for_season", "run_season_to_file", "write_rankings"]
