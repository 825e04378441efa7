"""
Pytest fixtures for tests.

Provides a standard weekly roster and seeded random sources so shuffle
results are reproducible.
"""

import random

import pytest

from domain.models.player import Player, Position


TEST_SEED = 1234
"""Default seed for shuffler tests. Import and use this constant."""

ROSTER_ROWS = [
    ("p1", "Alex", 5.0, Position.GK),
    ("p2", "Ben", 2.0, Position.GK),
    ("p3", "Chris", 4.5, Position.DEF),
    ("p4", "Dan", 3.0, Position.DEF),
    ("p5", "Eli", 1.5, Position.DEF),
    ("p6", "Fred", 2.5, Position.DEF),
    ("p7", "Gus", 4.0, Position.MID),
    ("p8", "Hank", 3.5, Position.MID),
    ("p9", "Ivan", 1.0, Position.MID),
    ("p10", "Jon", 5.0, Position.FWD),
    ("p11", "Karl", 3.0, Position.FWD),
    ("p12", "Liam", 2.0, Position.FWD),
]


def make_players(rows=ROSTER_ROWS) -> list[Player]:
    """Build fresh Player objects from (id, name, rating, position) tuples."""
    return [
        Player(id=player_id, name=name, rating=rating, position=position)
        for player_id, name, rating, position in rows
    ]


@pytest.fixture
def roster():
    """Twelve active players with mixed ratings and positions."""
    return make_players()


@pytest.fixture
def active_ids(roster):
    """Ids of every player in the standard roster."""
    return {p.id for p in roster}


@pytest.fixture
def seeded_rng():
    """Random source with a fixed seed."""
    return random.Random(TEST_SEED)
