"""
Constraint evaluation domain service.

Decides whether a player may join a team under player conflicts and the
roster's active team constraints.
"""

from collections.abc import Iterable

from domain.models.constraint import ConstraintType, TeamConstraint
from domain.models.player import Player
from domain.models.team import team_color_for_index


class ConstraintService:
    """
    Pure domain service for placement constraints.

    Responsibilities:
    - Check pairwise player conflicts (both directions)
    - Evaluate each active team constraint that names the player
    """

    def can_play_together(self, player1: Player, player2: Player) -> bool:
        """Check that neither player lists the other as a conflict."""
        return not player1.conflicts_with(player2)

    def can_add_player(
        self,
        player: Player,
        team_players: list[Player],
        constraints: Iterable[TeamConstraint] | None = None,
        team_index: int | None = None,
    ) -> bool:
        """
        Decide whether a player may be added to a team.

        Args:
            player: Player being placed
            team_players: Current members of the target team
            constraints: Team constraints; inactive ones are ignored
            team_index: Index of the target team. Colour restrictions are only
                checked when this is provided.

        Returns:
            True if the placement violates nothing
        """
        if not all(self.can_play_together(player, teammate) for teammate in team_players):
            return False

        if not constraints:
            return True

        team_player_ids = {p.id for p in team_players}
        for constraint in constraints:
            if not constraint.active or not constraint.references(player.id):
                continue
            if not self._constraint_allows(constraint, player, team_player_ids, team_index):
                return False

        return True

    def _constraint_allows(
        self,
        constraint: TeamConstraint,
        player: Player,
        team_player_ids: set[str],
        team_index: int | None,
    ) -> bool:
        """Evaluate a single constraint that references the player."""
        if constraint.type == ConstraintType.MUTUAL_EXCLUDE:
            return not (constraint.other_player_ids(player.id) & team_player_ids)

        if constraint.type == ConstraintType.SEPARATE_TEAMS:
            # Same check as MUTUAL_EXCLUDE: only the target team is inspected,
            # full dispersal across every team is not required.
            return not (constraint.other_player_ids(player.id) & team_player_ids)

        if constraint.type == ConstraintType.MUTUAL_INCLUDE:
            # Not enforced during placement
            return True

        if constraint.type == ConstraintType.COLOR_EXCLUDE:
            if team_index is None or not constraint.restricted_colors:
                return True
            # Compared by value; unknown colour strings simply never match
            restricted = {getattr(color, "value", color) for color in constraint.restricted_colors}
            return team_color_for_index(team_index).value not in restricted

        return True
