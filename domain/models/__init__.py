"""
Domain models - pure data structures representing business entities.
"""

from domain.models.constraint import ConstraintType, TeamConstraint
from domain.models.player import Player, Position
from domain.models.team import Team, TeamColor
from domain.models.team_selection import TeamSelection

__all__ = [
    "ConstraintType",
    "Player",
    "Position",
    "Team",
    "TeamColor",
    "TeamConstraint",
    "TeamSelection",
]
