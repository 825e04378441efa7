"""
Domain services containing pure business logic.
"""

from domain.services.constraint_service import ConstraintService
from domain.services.pairing_history import (
    build_pairing_history,
    get_pairing_count,
    make_pair_key,
)
from domain.services.team_balancing_service import PartitionScore, TeamBalancingService

__all__ = [
    "ConstraintService",
    "PartitionScore",
    "TeamBalancingService",
    "build_pairing_history",
    "get_pairing_count",
    "make_pair_key",
]
