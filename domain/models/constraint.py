"""
Team constraint domain model.
"""

from dataclasses import dataclass, field
from enum import Enum

from domain.models.team import TeamColor


class ConstraintType(str, Enum):
    """Kinds of rules a roster manager can put on a group of players."""

    MUTUAL_EXCLUDE = "cannot_play_together"
    MUTUAL_INCLUDE = "must_play_together"
    SEPARATE_TEAMS = "separate_teams"
    COLOR_EXCLUDE = "cannot_wear_color"


@dataclass
class TeamConstraint:
    """
    A rule over a set of players, evaluated while teams are being filled.

    restricted_colors is only meaningful for COLOR_EXCLUDE constraints.
    """

    id: str
    name: str
    type: ConstraintType
    player_ids: set[str] = field(default_factory=set)
    restricted_colors: set[TeamColor] = field(default_factory=set)
    description: str = ""
    active: bool = True

    def references(self, player_id: str) -> bool:
        """Check whether this constraint names the given player."""
        return player_id in self.player_ids

    def other_player_ids(self, player_id: str) -> set[str]:
        """Ids named by this constraint besides the given player."""
        return self.player_ids - {player_id}
