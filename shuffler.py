"""
Balanced team shuffling algorithm.
"""

import logging
import math
import random
import string
from collections.abc import Iterable
from dataclasses import dataclass, replace

from config import (
    DEFAULT_TEAM_SIZE,
    DIVERSIFY_PAIRINGS,
    PAIRING_HISTORY_WINDOW,
    TEAM_GENERATOR_SETTINGS,
)
from domain.models.constraint import TeamConstraint
from domain.models.player import Player
from domain.models.team import (
    DEFAULT_HEX_COLOR,
    TEAM_BORDER_COLORS,
    TEAM_COLOR_CYCLE,
    TEAM_HEX_COLORS,
    TEAM_NAMES,
    Team,
    TeamColor,
    calculate_average_rating,
)
from domain.models.team_selection import TeamSelection
from domain.services.constraint_service import ConstraintService
from domain.services.pairing_history import PairKey, build_pairing_history, get_pairing_count
from domain.services.team_balancing_service import PartitionScore, TeamBalancingService

logger = logging.getLogger("team_balancer.shuffler")

TEAM_ID_ALPHABET = string.ascii_lowercase + string.digits
TEAM_ID_LENGTH = 9


@dataclass
class TeamGenerationOptions:
    """Inputs for a single team generation run."""

    active_player_ids: set[str]
    team_size: int = DEFAULT_TEAM_SIZE
    team_constraints: list[TeamConstraint] | None = None
    previous_selections: list[TeamSelection] | None = None  # Oldest first
    diversify_pairings: bool = DIVERSIFY_PAIRINGS


class BalancedShuffler:
    """
    Implements balanced team shuffling.

    Runs a fixed number of randomized greedy attempts and keeps the partition
    with the lowest balance score. All randomness comes from the injected
    random.Random, so a seeded instance reproduces its output exactly.
    """

    def __init__(
        self,
        attempts: int | None = None,
        pairing_history_window: int | None = None,
        rating_balance_weight: float | None = None,
        position_balance_weight: float | None = None,
        pairing_penalty_weight: float | None = None,
        rng: random.Random | None = None,
    ):
        """
        Initialize the shuffler.

        Args:
            attempts: Number of independent greedy attempts per generation (default 50)
            pairing_history_window: How many recent selections feed the pairing history (default 5)
            rating_balance_weight: Score weight for rating spread between teams (default 2.0)
            position_balance_weight: Score weight for positional imbalance (default 1.0)
            pairing_penalty_weight: Score weight for repeated pairings (default 0.5)
            rng: Random source for shuffling and perturbation (default: unseeded)
        """
        settings = TEAM_GENERATOR_SETTINGS
        self.attempts = attempts if attempts is not None else settings["attempts"]
        if self.attempts < 1:
            raise ValueError(f"Need at least 1 attempt, got {self.attempts}")
        self.pairing_history_window = (
            pairing_history_window
            if pairing_history_window is not None
            else PAIRING_HISTORY_WINDOW
        )
        self.balancing_service = TeamBalancingService(
            rating_balance_weight=(
                rating_balance_weight
                if rating_balance_weight is not None
                else settings["rating_balance_weight"]
            ),
            position_balance_weight=(
                position_balance_weight
                if position_balance_weight is not None
                else settings["position_balance_weight"]
            ),
            pairing_penalty_weight=(
                pairing_penalty_weight
                if pairing_penalty_weight is not None
                else settings["pairing_penalty_weight"]
            ),
        )
        self.constraint_service = ConstraintService()
        self.rng = rng if rng is not None else random.Random()

    @staticmethod
    def calculate_team_count(active_count: int, team_size: int) -> int:
        """Number of teams for a run: never fewer than two."""
        return max(2, math.ceil(active_count / team_size))

    def _order_players(self, players: list[Player], weights: dict[str, float]) -> list[Player]:
        """
        Shuffle, then sort by weight with a +/-1 random perturbation.

        Heavier players still tend to go first, but the order varies between attempts.
        """
        shuffled = list(players)
        self.rng.shuffle(shuffled)
        return sorted(
            shuffled,
            key=lambda p: weights[p.id] + self.rng.uniform(-1, 1),
            reverse=True,
        )

    def _score_placement(
        self,
        player: Player,
        team: list[Player],
        num_teams: int,
        pairing_history: dict[PairKey, int],
    ) -> float:
        """
        Desirability of adding a player to a team (higher is better).

        Favors smaller teams, teams missing the player's position, teams with a
        lower average rating and teammates the player has rarely been paired with.
        """
        score = (num_teams - len(team)) * 5

        same_position = sum(1 for p in team if p.position == player.position)
        if same_position == 0:
            score += 10
        else:
            score -= same_position * 3

        team_rating = sum(p.rating for p in team) / len(team) if team else 0
        score += (5 - team_rating) * 2

        if pairing_history:
            repeat_count = sum(
                get_pairing_count(pairing_history, player.id, teammate.id) for teammate in team
            )
            score -= repeat_count * 3

        return score

    def _generate_attempt(
        self,
        players: list[Player],
        num_teams: int,
        weights: dict[str, float],
        constraints: list[TeamConstraint] | None = None,
        pairing_history: dict[PairKey, int] | None = None,
    ) -> list[list[Player]]:
        """
        One randomized greedy pass over all players.

        Args:
            players: Active players to distribute
            num_teams: Number of teams to fill
            weights: Placement weight per player id
            constraints: Team constraints to respect
            pairing_history: Co-occurrence counts from recent selections

        Returns:
            List of player groups, ordered by team index
        """
        pairing_history = pairing_history or {}
        teams: list[list[Player]] = [[] for _ in range(num_teams)]

        for player in self._order_players(players, weights):
            best_team_index = None
            best_score = -math.inf

            for team_index, team in enumerate(teams):
                if not self.constraint_service.can_add_player(
                    player, team, constraints, team_index
                ):
                    continue
                score = self._score_placement(player, team, num_teams, pairing_history)
                if score > best_score:
                    best_score = score
                    best_team_index = team_index

            if best_team_index is None:
                # Every player must land somewhere, even if it breaks a constraint
                logger.warning(
                    f"No eligible team for {player.name} ({player.id}); forcing placement into team 0"
                )
                best_team_index = 0

            teams[best_team_index].append(player)

        return teams

    def generate_balanced_teams(
        self,
        all_players: list[Player],
        options: TeamGenerationOptions,
    ) -> list[Team]:
        """
        Split the active players into balanced teams.

        Args:
            all_players: Full roster; only players that are flagged active and
                listed in options.active_player_ids take part
            options: Team size, constraints and pairing history inputs

        Returns:
            Materialized teams, or an empty list when fewer than 2 players are active
        """
        if options.team_size < 1:
            raise ValueError(f"Team size must be at least 1, got {options.team_size}")

        active_ids = set(options.active_player_ids)
        active_players = [p for p in all_players if p.active and p.id in active_ids]

        if len(active_players) < 2:
            logger.info(f"Not enough active players to generate teams ({len(active_players)})")
            return []

        num_teams = self.calculate_team_count(len(active_players), options.team_size)

        pairing_history: dict[PairKey, int] = {}
        if options.diversify_pairings and options.previous_selections:
            pairing_history = build_pairing_history(
                options.previous_selections, self.pairing_history_window
            )

        weights = {p.id: p.get_weight() for p in active_players}

        logger.info(
            f"Generating {num_teams} teams from {len(active_players)} players "
            f"({self.attempts} attempts, {len(pairing_history)} known pairings)"
        )

        best_partition: list[list[Player]] = []
        best_score: PartitionScore | None = None
        best_attempt = 0

        for attempt in range(self.attempts):
            partition = self._generate_attempt(
                active_players,
                num_teams,
                weights,
                options.team_constraints,
                pairing_history,
            )
            score = self.balancing_service.score_partition(
                partition, pairing_history, options.diversify_pairings
            )
            logger.debug(f"Attempt {attempt + 1}: score={score.total:.3f}")

            # Strict comparison keeps the earliest attempt on ties
            if best_score is None or score.total < best_score.total:
                best_score = score
                best_partition = partition
                best_attempt = attempt

        logger.info(
            f"Selected attempt #{best_attempt + 1} with score {best_score.total:.3f} "
            f"(Rating Balance: {best_score.rating_balance:.3f}, "
            f"Position Balance: {best_score.position_balance:.0f}, "
            f"Pairing Penalty: {best_score.pairing_penalty:.0f})"
        )

        return self._materialize_teams(best_partition)

    def _generate_team_id(self) -> str:
        return "".join(self.rng.choice(TEAM_ID_ALPHABET) for _ in range(TEAM_ID_LENGTH))

    def _materialize_teams(self, partition: list[list[Player]]) -> list[Team]:
        """
        Attach ids, names and colours to a partition.

        The first three teams get the white/colored/black kits; any further team
        gets a generic name and the default colour.
        """
        teams = []
        for index, team_players in enumerate(partition):
            if index < len(TEAM_NAMES):
                name = TEAM_NAMES[index]
                color = TEAM_HEX_COLORS[index]
                border_color = TEAM_BORDER_COLORS[index]
                team_color = TEAM_COLOR_CYCLE[index]
            else:
                name = f"Team {index + 1}"
                color = DEFAULT_HEX_COLOR
                border_color = DEFAULT_HEX_COLOR
                team_color = TeamColor.COLORED

            teams.append(
                Team(
                    id=self._generate_team_id(),
                    name=name,
                    players=list(team_players),
                    average_rating=calculate_average_rating(team_players),
                    color=color,
                    border_color=border_color,
                    team_color=team_color,
                )
            )
        return teams

    def redistribute_player(
        self,
        teams: list[Team],
        player_id: str,
        target_team_id: str,
        all_players: list[Player],
        constraints: Iterable[TeamConstraint] | None = None,
    ) -> list[Team]:
        """
        Move a player into another team.

        The player is removed from every team that holds them and then added to
        the target team if it accepts them. Only the target team is checked and
        no team index is passed, so colour restrictions are not applied here.
        A rejected player ends up on no team at all.

        Args:
            teams: Current teams (not modified)
            player_id: Player to move
            target_team_id: Team to move the player into
            all_players: Roster used to look the player up
            constraints: Optional team constraints to check against the target team

        Returns:
            New list of teams, or the input unchanged when the player is unknown.
            An unknown target team still removes the player everywhere.
        """
        player = next((p for p in all_players if p.id == player_id), None)
        if player is None:
            return teams

        if not any(t.id == target_team_id for t in teams):
            logger.warning(
                f"Unknown target team {target_team_id}; {player.name} ({player.id}) "
                f"is no longer on any team"
            )

        redistributed = []
        for team in teams:
            new_players = [p for p in team.players if p.id != player_id]
            if team.id == target_team_id:
                if self.constraint_service.can_add_player(player, new_players, constraints):
                    new_players.append(player)
                else:
                    logger.warning(
                        f"{player.name} ({player.id}) cannot join {team.name}; "
                        f"player is no longer on any team"
                    )
            redistributed.append(
                replace(
                    team,
                    players=new_players,
                    average_rating=calculate_average_rating(new_players),
                )
            )
        return redistributed


def generate_balanced_teams(
    all_players: list[Player],
    options: TeamGenerationOptions,
    rng: random.Random | None = None,
) -> list[Team]:
    """Convenience wrapper around BalancedShuffler.generate_balanced_teams."""
    return BalancedShuffler(rng=rng).generate_balanced_teams(all_players, options)


def redistribute_player(
    teams: list[Team],
    player_id: str,
    target_team_id: str,
    all_players: list[Player],
) -> list[Team]:
    """Convenience wrapper around BalancedShuffler.redistribute_player."""
    return BalancedShuffler().redistribute_player(teams, player_id, target_team_id, all_players)
