"""
Team domain model.
"""

from dataclasses import dataclass, field
from enum import Enum

from domain.models.player import POSITIONS, Player


class TeamColor(str, Enum):
    """Bib colours available on match day."""

    WHITE = "white"
    COLORED = "colored"
    BLACK = "black"


# Constraint matching wraps every team index onto this cycle
TEAM_COLOR_CYCLE = [TeamColor.WHITE, TeamColor.COLORED, TeamColor.BLACK]

TEAM_NAMES = ["White Team", "Colored Team", "Black Team"]
TEAM_HEX_COLORS = ["#FFFFFF", "#4CAF50", "#000000"]
TEAM_BORDER_COLORS = ["#E0E0E0", "#4CAF50", "#000000"]
DEFAULT_HEX_COLOR = "#2E7D32"


def team_color_for_index(team_index: int) -> TeamColor:
    """Colour used for constraint matching at a team index (index mod 3)."""
    return TEAM_COLOR_CYCLE[team_index % len(TEAM_COLOR_CYCLE)]


def calculate_average_rating(players: list[Player]) -> float:
    """Mean player rating rounded to 2 decimals, 0 for an empty team."""
    if not players:
        return 0
    return round(sum(p.rating for p in players) / len(players), 2)


def get_position_distribution(players: list[Player]) -> dict[str, int]:
    """Count players per position (all four positions always present)."""
    distribution = dict.fromkeys(POSITIONS, 0)
    for player in players:
        distribution[player.position] = distribution.get(player.position, 0) + 1
    return distribution


@dataclass
class Team:
    """
    Represents a generated team.

    This is a pure domain model with no infrastructure dependencies.
    average_rating is kept in sync with players via recalculate_average().
    """

    id: str
    name: str
    players: list[Player] = field(default_factory=list)
    average_rating: float = 0
    color: str = DEFAULT_HEX_COLOR
    border_color: str = DEFAULT_HEX_COLOR
    team_color: TeamColor = TeamColor.COLORED

    def recalculate_average(self) -> float:
        """Recompute and store the team's average rating."""
        self.average_rating = calculate_average_rating(self.players)
        return self.average_rating

    def player_ids(self) -> set[str]:
        return {p.id for p in self.players}

    def has_player(self, player_id: str) -> bool:
        return any(p.id == player_id for p in self.players)

    def get_position_distribution(self) -> dict[str, int]:
        return get_position_distribution(self.players)

    def __str__(self) -> str:
        player_names = ", ".join(p.name for p in self.players)
        return f"{self.name} ({self.average_rating:.2f}): {player_names}"
