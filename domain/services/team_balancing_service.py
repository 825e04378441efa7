"""
Team balancing domain service.

Handles balance scoring of candidate partitions.
"""

import math
from dataclasses import dataclass

from domain.models.player import Player
from domain.models.team import get_position_distribution
from domain.services.pairing_history import PairKey, get_pairing_count


@dataclass(frozen=True)
class PartitionScore:
    """Breakdown of a partition's score (lower is better)."""

    rating_balance: float
    position_balance: float
    pairing_penalty: float
    total: float


class TeamBalancingService:
    """
    Pure domain service for team balancing logic.

    Responsibilities:
    - Measure rating spread between teams
    - Measure positional imbalance inside teams
    - Penalize teammates who were paired often in recent selections
    """

    def __init__(
        self,
        rating_balance_weight: float = 2.0,
        position_balance_weight: float = 1.0,
        pairing_penalty_weight: float = 0.5,
    ):
        """
        Initialize team balancing service.

        Args:
            rating_balance_weight: Weight applied to the rating standard deviation
            position_balance_weight: Weight applied to the positional imbalance
            pairing_penalty_weight: Weight applied to the repeated-pairing penalty
        """
        self.rating_balance_weight = rating_balance_weight
        self.position_balance_weight = position_balance_weight
        self.pairing_penalty_weight = pairing_penalty_weight

    def calculate_rating_balance(self, teams: list[list[Player]]) -> float:
        """
        Population standard deviation of the teams' average ratings.

        Empty teams count with an average of 0.
        """
        if not teams:
            return 0.0

        team_ratings = [
            sum(p.rating for p in team) / max(len(team), 1) for team in teams
        ]
        avg_rating = sum(team_ratings) / len(team_ratings)
        variance = sum((rating - avg_rating) ** 2 for rating in team_ratings) / len(team_ratings)
        return math.sqrt(variance)

    def calculate_position_balance(self, teams: list[list[Player]]) -> float:
        """
        Sum over teams of (most common position count - least common position count).
        """
        total_imbalance = 0
        for team in teams:
            counts = get_position_distribution(team).values()
            total_imbalance += max(counts) - min(counts)
        return total_imbalance

    def calculate_pairing_penalty(
        self,
        teams: list[list[Player]],
        pairing_history: dict[PairKey, int],
    ) -> float:
        """
        Sum of squared pairing counts over every same-team pair.

        The quadratic term punishes a pair seen three times far more than
        three different pairs seen once.
        """
        if not pairing_history:
            return 0
        total_penalty = 0
        for team in teams:
            for i in range(len(team)):
                for j in range(i + 1, len(team)):
                    count = get_pairing_count(pairing_history, team[i].id, team[j].id)
                    total_penalty += count * count
        return total_penalty

    def score_partition(
        self,
        teams: list[list[Player]],
        pairing_history: dict[PairKey, int] | None = None,
        diversify_pairings: bool = True,
    ) -> PartitionScore:
        """
        Score a candidate partition (lower is better).

        Args:
            teams: Player groups, ordered by team index
            pairing_history: Co-occurrence counts from recent selections
            diversify_pairings: When False the pairing penalty is always 0

        Returns:
            PartitionScore with each component and the weighted total
        """
        rating_balance = self.calculate_rating_balance(teams)
        position_balance = self.calculate_position_balance(teams)
        pairing_penalty = (
            self.calculate_pairing_penalty(teams, pairing_history or {})
            if diversify_pairings
            else 0
        )
        total = (
            rating_balance * self.rating_balance_weight
            + position_balance * self.position_balance_weight
            + pairing_penalty * self.pairing_penalty_weight
        )
        return PartitionScore(
            rating_balance=rating_balance,
            position_balance=position_balance,
            pairing_penalty=pairing_penalty,
            total=total,
        )
