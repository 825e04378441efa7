"""
Team selection domain model.
"""

from dataclasses import dataclass, field
from datetime import datetime

from domain.models.team import Team


@dataclass
class TeamSelection:
    """
    A snapshot of generated teams that the organiser chose to keep.

    Selections are historical input only: the shuffler reads them to avoid
    repeating recent pairings and never modifies them.
    """

    id: str
    date: datetime
    name: str  # e.g. "Game 1 - Sept 15"
    teams: list[Team] = field(default_factory=list)
    active_player_ids: set[str] = field(default_factory=set)
    notes: str | None = None
    saved: bool = True
