"""
Application services layer.

Services orchestrate business operations using the shuffler and domain services.
"""

# Result type for consistent error handling
from services.result import Result
from services.team_generation_service import TeamGenerationService
from services.team_selection_service import TeamSelectionService

__all__ = [
    "Result",
    "TeamGenerationService",
    "TeamSelectionService",
]
