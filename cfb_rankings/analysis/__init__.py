from .conferences import CONFERENCE_COLUMNS, aggregate_conferences

__all__ = ["CONFERENCE_COLUMNS", "aggregate_conferences"]
