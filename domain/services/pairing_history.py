"""
Pairing history domain logic.

Counts how often two players have shared a team across recent saved
selections so the shuffler can steer away from repeating them.
"""

from collections.abc import Sequence

from domain.models.team_selection import TeamSelection

PairKey = tuple[str, str]


def make_pair_key(player1_id: str, player2_id: str) -> PairKey:
    """Order-independent key for a pair of players."""
    if player1_id <= player2_id:
        return (player1_id, player2_id)
    return (player2_id, player1_id)


def build_pairing_history(
    previous_selections: Sequence[TeamSelection],
    limit: int = 5,
) -> dict[PairKey, int]:
    """
    Build a co-occurrence map from the most recent selections.

    Args:
        previous_selections: Selections in chronological order (oldest first)
        limit: Number of most recent selections to consider

    Returns:
        Dict mapping pair keys to the number of selections in which the two
        players shared a team
    """
    pairing_history: dict[PairKey, int] = {}
    if limit <= 0:
        return pairing_history

    for selection in list(previous_selections)[-limit:]:
        for team in selection.teams:
            player_ids = [p.id for p in team.players]
            for i in range(len(player_ids)):
                for j in range(i + 1, len(player_ids)):
                    pair = make_pair_key(player_ids[i], player_ids[j])
                    pairing_history[pair] = pairing_history.get(pair, 0) + 1

    return pairing_history


def get_pairing_count(
    pairing_history: dict[PairKey, int],
    player1_id: str,
    player2_id: str,
) -> int:
    """Number of recent selections in which two players were teammates."""
    return pairing_history.get(make_pair_key(player1_id, player2_id), 0)
