"""
Service layer for team generation and manual moves.
"""

import logging

from config import DEFAULT_TEAM_SIZE, DIVERSIFY_PAIRINGS
from domain.models.constraint import TeamConstraint
from domain.models.player import Player
from domain.models.team import Team
from domain.models.team_selection import TeamSelection
from services import error_codes
from services.result import Result
from services.team_selection_service import TeamSelectionService
from shuffler import BalancedShuffler, TeamGenerationOptions

logger = logging.getLogger("team_balancer.services.team_generation")


class TeamGenerationService:
    """
    Service for generating teams and moving players between them.

    Wraps BalancedShuffler to validate caller input and report problems as
    Result failures instead of exceptions.
    """

    def __init__(
        self,
        shuffler: BalancedShuffler | None = None,
        selection_service: TeamSelectionService | None = None,
    ):
        self.shuffler = shuffler or BalancedShuffler()
        self.selection_service = selection_service or TeamSelectionService()

    def generate_teams(
        self,
        players: list[Player],
        active_player_ids: set[str],
        team_size: int | None = None,
        constraints: list[TeamConstraint] | None = None,
        history: list[TeamSelection] | None = None,
        diversify_pairings: bool | None = None,
    ) -> Result[list[Team]]:
        """
        Generate balanced teams for this week's players.

        Args:
            players: Full roster
            active_player_ids: Players available for this game
            team_size: Target players per team (default from config)
            constraints: Team constraints; inactive ones are ignored
            history: Selection history in any order; only saved selections are used
            diversify_pairings: Avoid recent pairings (default from config)

        Returns:
            Result.ok(teams), where teams is empty if fewer than 2 players are active,
            or Result.fail(error, INVALID_TEAM_SIZE)
        """
        team_size = team_size if team_size is not None else DEFAULT_TEAM_SIZE
        if team_size < 1:
            return Result.fail(
                f"Team size must be at least 1, got {team_size}",
                code=error_codes.INVALID_TEAM_SIZE,
            )

        options = TeamGenerationOptions(
            active_player_ids=set(active_player_ids),
            team_size=team_size,
            team_constraints=[c for c in (constraints or []) if c.active],
            previous_selections=self.selection_service.recent_saved_selections(history or []),
            diversify_pairings=(
                diversify_pairings if diversify_pairings is not None else DIVERSIFY_PAIRINGS
            ),
        )
        teams = self.shuffler.generate_balanced_teams(players, options)
        if not teams:
            logger.info("Team generation skipped: fewer than 2 active players")
        return Result.ok(teams)

    def move_player(
        self,
        teams: list[Team],
        player_id: str,
        target_team_id: str,
        players: list[Player],
        constraints: list[TeamConstraint] | None = None,
    ) -> Result[list[Team]]:
        """
        Move a player to another team.

        Unlike the shuffler's redistribute_player, unknown ids are reported as
        failures here. A move the target team rejects still succeeds and leaves
        the player on no team; the caller decides how to surface that.

        Returns:
            Result.ok(new_teams) or Result.fail(error, PLAYER_NOT_FOUND / TEAM_NOT_FOUND)
        """
        if not any(p.id == player_id for p in players):
            return Result.fail(f"Player {player_id} not found", code=error_codes.PLAYER_NOT_FOUND)
        if not any(t.id == target_team_id for t in teams):
            return Result.fail(f"Team {target_team_id} not found", code=error_codes.TEAM_NOT_FOUND)

        new_teams = self.shuffler.redistribute_player(
            teams, player_id, target_team_id, players, constraints
        )
        return Result.ok(new_teams)
