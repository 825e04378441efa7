"""
Roster validation utilities.

Centralizes the checks applied before players and constraints are stored by
the management layer.
"""

import logging

from config import MAX_PLAYER_RATING, MIN_PLAYER_RATING, PLAYER_RATING_STEP
from domain.models.constraint import ConstraintType, TeamConstraint
from domain.models.player import Player
from domain.models.team import TeamColor
from services import error_codes
from services.result import Result

logger = logging.getLogger("team_balancer.services.roster_validation")


def validate_player_name(
    name: str,
    all_players: list[Player],
    player_id: str | None = None,
) -> Result[str]:
    """
    Check that a player name is present and not already taken.

    Names are compared case-insensitively after trimming. The player being
    edited (player_id) is ignored so saving an unchanged name succeeds.

    Args:
        name: Proposed name
        all_players: Existing roster
        player_id: Id of the player being edited, if any

    Returns:
        Result.ok(trimmed_name) or Result.fail(error, code)
    """
    trimmed = name.strip()
    if not trimmed:
        return Result.fail("Player name is required", code=error_codes.INVALID_PLAYER_NAME)

    existing = next(
        (
            p
            for p in all_players
            if p.id != player_id and p.name.strip().lower() == trimmed.lower()
        ),
        None,
    )
    if existing is not None:
        return Result.fail(
            f'A player named "{existing.name}" already exists',
            code=error_codes.PLAYER_ALREADY_EXISTS,
        )

    return Result.ok(trimmed)


def validate_rating(rating: float) -> Result[float]:
    """
    Check a star rating: within the configured range and in half-star steps.

    Examples:
        >>> validate_rating(3.5)
        Result(success=True, value=3.5)

        >>> validate_rating(3.25)
        Result(success=False, error="...", error_code="invalid_rating")
    """
    if rating < MIN_PLAYER_RATING or rating > MAX_PLAYER_RATING:
        return Result.fail(
            f"Rating must be between {MIN_PLAYER_RATING:g} and {MAX_PLAYER_RATING:g}, got {rating:g}",
            code=error_codes.INVALID_RATING,
        )

    steps = rating / PLAYER_RATING_STEP
    if abs(steps - round(steps)) > 1e-9:
        return Result.fail(
            f"Rating must be a multiple of {PLAYER_RATING_STEP:g}, got {rating:g}",
            code=error_codes.INVALID_RATING,
        )

    return Result.ok(float(rating))


def validate_constraint(constraint: TeamConstraint) -> Result[TeamConstraint]:
    """
    Check that a constraint is complete enough to be evaluated.

    Colour constraints need at least one player and one restricted colour;
    every other kind needs at least two players.
    """
    if not constraint.name.strip():
        return Result.fail("Please provide a constraint name", code=error_codes.INVALID_CONSTRAINT)

    if constraint.type == ConstraintType.COLOR_EXCLUDE:
        if len(constraint.player_ids) < 1:
            return Result.fail(
                "Select at least 1 player for color constraints",
                code=error_codes.INVALID_CONSTRAINT,
            )
        if not constraint.restricted_colors:
            return Result.fail(
                "Select at least one restricted color",
                code=error_codes.INVALID_CONSTRAINT,
            )
        known_colors = {color.value for color in TeamColor}
        unknown = sorted(
            str(getattr(color, "value", color))
            for color in constraint.restricted_colors
            if getattr(color, "value", color) not in known_colors
        )
        if unknown:
            return Result.fail(
                f"Unknown team color: {', '.join(unknown)}",
                code=error_codes.INVALID_CONSTRAINT,
            )
    elif len(constraint.player_ids) < 2:
        return Result.fail(
            "Select at least 2 players for this type of constraint",
            code=error_codes.INVALID_CONSTRAINT,
        )

    return Result.ok(constraint)


def find_asymmetric_conflicts(players: list[Player]) -> list[tuple[str, str]]:
    """
    List conflicts that are only recorded on one side.

    Placement checks both directions, so these are harmless for shuffling;
    they are reported so the roster can be tidied up.

    Returns:
        (player_id, conflict_id) pairs where conflict_id does not list player_id back
    """
    players_by_id = {p.id: p for p in players}
    asymmetric = []
    for player in players:
        for conflict_id in sorted(player.conflicts):
            other = players_by_id.get(conflict_id)
            if other is not None and player.id not in other.conflicts:
                asymmetric.append((player.id, conflict_id))

    if asymmetric:
        logger.debug(f"Found {len(asymmetric)} one-sided conflicts")
    return asymmetric
