"""
Player domain model.
"""

from dataclasses import dataclass, field
from enum import Enum


class Position(str, Enum):
    """Pitch positions a player can be registered at."""

    GK = "GK"
    DEF = "DEF"
    MID = "MID"
    FWD = "FWD"


POSITIONS = [Position.GK, Position.DEF, Position.MID, Position.FWD]

# Goalkeepers are scarce, so they are placed first
POSITION_WEIGHTS: dict[str, float] = {
    Position.GK: 10,
    Position.MID: 8,
    Position.FWD: 7,
    Position.DEF: 6,
}
DEFAULT_POSITION_WEIGHT = 5


def get_position_weight(position: str) -> float:
    """Placement priority contributed by a position (unknown positions weigh 5)."""
    return POSITION_WEIGHTS.get(position, DEFAULT_POSITION_WEIGHT)


@dataclass
class Player:
    """
    Represents a player in the weekly roster.

    This is a pure domain model with no infrastructure dependencies.
    Conflicts are the ids of players this player must not share a team with.
    The relation is not guaranteed to be mirrored on the other player.
    """

    id: str
    name: str
    rating: float = 3.0  # 1-5 in 0.5 steps
    position: Position = Position.MID
    conflicts: set[str] = field(default_factory=set)
    active: bool = True

    def get_weight(self) -> float:
        """
        Calculate how urgently this player should be placed during a shuffle.

        Higher weights are placed earlier so they get first pick of teams:
        rating * 2 + position weight - 0.5 per listed conflict.

        Returns:
            Placement weight
        """
        rating_weight = self.rating * 2
        conflict_weight = len(self.conflicts) * 0.5
        return rating_weight + get_position_weight(self.position) - conflict_weight

    def conflicts_with(self, other: "Player") -> bool:
        """Check the conflict relation in both directions."""
        return other.id in self.conflicts or self.id in other.conflicts

    def __str__(self) -> str:
        position = self.position.value if isinstance(self.position, Position) else self.position
        return f"{self.name} ({position}, {self.rating:g}*)"
