"""Base stage interface for the ranking pipeline."""

from abc import ABC, abstractmethod

from ..models.ranking import RankingRun
from .config import RankingConfig


class RankingStage(ABC):
    """A single ordered step that enriches every team of a run in place."""

    def __init__(self, name: str, config: RankingConfig):
        """
        Initialize stage.

        Args:
            name: Name of the stage, used in logs
            config: Shared model configuration
        """
        self.name = name
        self.config = config

    @abstractmethod
    def apply(self, run: RankingRun) -> None:
        """
        Compute this stage's fields for every team in the run.

        Args:
            run: Ranking run whose teams already carry all earlier stages' fields
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
