"""Per-team game result model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameResult:
    """One side of a played game, seen from the team it is attached to."""

    opponent: str
    points_for: float
    points_against: float
    week: int = 1
    neutral_site: bool = False
    is_home: bool = False
    is_away: bool = False

    def __post_init__(self):
        """Validate venue flags."""
        if self.is_home and self.is_away:
            raise ValueError("A game cannot be both home and away")
        if self.week < 1:
            raise ValueError(f"Week must be >= 1, got {self.week}")

    @property
    def won(self) -> bool:
        """Ties count as losses for both sides."""
        return self.points_for > self.points_against

    @property
    def margin(self) -> float:
        return self.points_for - self.points_against

    def mirrored(self, opponent: str) -> "GameResult":
        """
        Build the same game from the other participant's perspective.

        Args:
            opponent: Canonical name of the team this entry belongs to

        Returns:
            GameResult with points swapped and venue flipped
        """
        return GameResult(
            opponent=opponent,
            points_for=self.points_against,
            points_against=self.points_for,
            week=self.week,
            neutral_site=self.neutral_site,
            is_home=self.is_away,
            is_away=self.is_home,
        )

    def to_dict(self) -> dict:
        """Convert game result to dictionary."""
        return {
            "opponent": self.opponent,
            "points_for": self.points_for,
            "points_against": self.points_against,
            "week": self.week,
            "neutral_site": self.neutral_site,
            "is_home": self.is_home,
            "is_away": self.is_away,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameResult":
        """Create game result from dictionary."""
        return cls(
            opponent=data["opponent"],
            points_for=data["points_for"],
            points_against=data["points_against"],
            week=data.get("week", 1),
            neutral_site=data.get("neutral_site", False),
            is_home=data.get("is_home", False),
            is_away=data.get("is_away", False),
        )
