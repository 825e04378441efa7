"""
Service layer for saved team selections.
"""

import copy
import logging
import uuid
from datetime import date, datetime

from config import SELECTION_NAME_MAX_LENGTH, SELECTION_NAME_MIN_LENGTH
from domain.models.team import Team
from domain.models.team_selection import TeamSelection
from services import error_codes
from services.result import Result

logger = logging.getLogger("team_balancer.services.team_selection")


class TeamSelectionService:
    """
    Service for saving generated teams and reading selection history.

    Storage is left to the caller: this service builds and orders
    TeamSelection objects but never persists them.
    """

    def __init__(
        self,
        min_name_length: int = SELECTION_NAME_MIN_LENGTH,
        max_name_length: int = SELECTION_NAME_MAX_LENGTH,
    ):
        self.min_name_length = min_name_length
        self.max_name_length = max_name_length

    @staticmethod
    def default_selection_name(today: date | None = None) -> str:
        """Suggested name for a selection, e.g. "Game - Oct 18, 2026"."""
        today = today or date.today()
        return f"Game - {today:%b} {today.day}, {today.year}"

    def validate_selection_name(self, name: str) -> Result[str]:
        """
        Check a selection name.

        Returns:
            Result.ok(trimmed_name) or Result.fail(error, INVALID_SELECTION_NAME)
        """
        trimmed = name.strip()
        if not trimmed:
            return Result.fail("Selection name is required", code=error_codes.INVALID_SELECTION_NAME)
        if len(trimmed) < self.min_name_length:
            return Result.fail(
                f"Name must be at least {self.min_name_length} characters",
                code=error_codes.INVALID_SELECTION_NAME,
            )
        if len(trimmed) > self.max_name_length:
            return Result.fail(
                f"Name must be less than {self.max_name_length} characters",
                code=error_codes.INVALID_SELECTION_NAME,
            )
        return Result.ok(trimmed)

    def create_selection(
        self,
        teams: list[Team],
        active_player_ids: set[str],
        name: str,
        notes: str | None = None,
        now: datetime | None = None,
        selection_id: str | None = None,
    ) -> Result[TeamSelection]:
        """
        Snapshot generated teams as a saved selection.

        The teams are deep-copied so later redistribution or roster edits do
        not rewrite history.

        Args:
            teams: Teams to save
            active_player_ids: Players that were available for this game
            name: User-given selection name
            notes: Optional free text; blank notes are stored as None
            now: Timestamp to record (defaults to the current time)
            selection_id: Explicit id (defaults to a random one)

        Returns:
            Result.ok(TeamSelection) or Result.fail(error, code)
        """
        name_result = self.validate_selection_name(name)
        if not name_result:
            return Result.fail(name_result.error, code=name_result.error_code)

        trimmed_notes = notes.strip() if notes else ""
        selection = TeamSelection(
            id=selection_id or uuid.uuid4().hex[:9],
            date=now or datetime.now(),
            name=name_result.value,
            teams=copy.deepcopy(teams),
            active_player_ids=set(active_player_ids),
            notes=trimmed_notes or None,
            saved=True,
        )
        logger.info(
            f"Saved selection '{selection.name}' with {len(selection.teams)} teams "
            f"and {len(selection.active_player_ids)} players"
        )
        return Result.ok(selection)

    @staticmethod
    def sort_history(history: list[TeamSelection]) -> list[TeamSelection]:
        """Selections newest first, for display."""
        return sorted(history, key=lambda s: s.date, reverse=True)

    @staticmethod
    def recent_saved_selections(history: list[TeamSelection]) -> list[TeamSelection]:
        """
        Saved selections oldest first.

        This is the order the pairing history builder expects: it keeps the
        tail of the list as the most recent games.
        """
        return sorted((s for s in history if s.saved), key=lambda s: s.date)
