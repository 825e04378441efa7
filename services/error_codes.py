"""
Standard error codes for service layer.

These error codes allow callers to programmatically handle specific error
conditions without parsing error message text.

Usage:
    from services.error_codes import INVALID_TEAM_SIZE
    from services.result import Result

    if team_size < 1:
        return Result.fail("Team size must be at least 1", code=INVALID_TEAM_SIZE)
"""

# General errors
NOT_FOUND = "not_found"
VALIDATION_ERROR = "validation_error"

# Player/roster errors
PLAYER_NOT_FOUND = "player_not_found"
PLAYER_ALREADY_EXISTS = "player_already_exists"
INVALID_PLAYER_NAME = "invalid_player_name"
INVALID_RATING = "invalid_rating"

# Constraint errors
INVALID_CONSTRAINT = "invalid_constraint"

# Team generation errors
INVALID_TEAM_SIZE = "invalid_team_size"
TEAM_NOT_FOUND = "team_not_found"

# Team selection history errors
INVALID_SELECTION_NAME = "invalid_selection_name"
