"""
Tests for TeamGenerationService.
"""

import random
from datetime import datetime

import pytest

from config import DEFAULT_TEAM_SIZE
from domain.models.constraint import ConstraintType, TeamConstraint
from domain.models.team import Team
from domain.models.team_selection import TeamSelection
from services import error_codes
from services.team_generation_service import TeamGenerationService
from shuffler import BalancedShuffler


@pytest.fixture
def service(seeded_rng):
    return TeamGenerationService(shuffler=BalancedShuffler(rng=seeded_rng))


class RecordingShuffler(BalancedShuffler):
    """Shuffler that records the options it was called with."""

    def __init__(self):
        super().__init__(rng=random.Random(0))
        self.calls = []

    def generate_balanced_teams(self, all_players, options):
        self.calls.append(options)
        return super().generate_balanced_teams(all_players, options)


class TestGenerateTeams:
    """Tests for TeamGenerationService.generate_teams."""

    def test_generates_teams(self, service, roster, active_ids):
        result = service.generate_teams(roster, active_ids, team_size=6)
        assert result.success
        assert len(result.value) == 2
        assert {p.id for t in result.value for p in t.players} == active_ids

    def test_too_few_players_is_empty_success(self, service, roster):
        result = service.generate_teams(roster, {"p1"})
        assert result.success
        assert result.value == []

    @pytest.mark.parametrize("team_size", [0, -3])
    def test_invalid_team_size_fails(self, service, roster, active_ids, team_size):
        result = service.generate_teams(roster, active_ids, team_size=team_size)
        assert not result
        assert result.error_code == error_codes.INVALID_TEAM_SIZE

    def test_default_team_size_from_config(self, roster, active_ids):
        shuffler = RecordingShuffler()
        TeamGenerationService(shuffler=shuffler).generate_teams(roster, active_ids)
        assert shuffler.calls[0].team_size == DEFAULT_TEAM_SIZE

    def test_only_active_constraints_forwarded(self, roster, active_ids):
        shuffler = RecordingShuffler()
        on = TeamConstraint(
            id="on", name="On", type=ConstraintType.MUTUAL_EXCLUDE, player_ids={"p1", "p10"}
        )
        off = TeamConstraint(
            id="off",
            name="Off",
            type=ConstraintType.MUTUAL_EXCLUDE,
            player_ids={"p2", "p3"},
            active=False,
        )
        TeamGenerationService(shuffler=shuffler).generate_teams(
            roster, active_ids, constraints=[on, off]
        )
        assert [c.id for c in shuffler.calls[0].team_constraints] == ["on"]

    def test_history_filtered_and_ordered(self, roster, active_ids):
        shuffler = RecordingShuffler()
        history = [
            TeamSelection(id="new", date=datetime(2026, 10, 11), name="New"),
            TeamSelection(id="unsaved", date=datetime(2026, 10, 12), name="Draft", saved=False),
            TeamSelection(id="old", date=datetime(2026, 10, 4), name="Old"),
        ]
        TeamGenerationService(shuffler=shuffler).generate_teams(
            roster, active_ids, history=history, diversify_pairings=False
        )
        options = shuffler.calls[0]
        assert [s.id for s in options.previous_selections] == ["old", "new"]
        assert options.diversify_pairings is False


class TestMovePlayer:
    """Tests for TeamGenerationService.move_player."""

    @pytest.fixture
    def teams(self, service, roster, active_ids):
        return service.generate_teams(roster, active_ids, team_size=6).unwrap()

    def test_move(self, service, roster, teams):
        mover = teams[0].players[0]
        result = service.move_player(teams, mover.id, teams[1].id, roster)

        assert result.success
        assert not result.value[0].has_player(mover.id)
        assert result.value[1].has_player(mover.id)

    def test_unknown_player_fails(self, service, roster, teams):
        result = service.move_player(teams, "ghost", teams[1].id, roster)
        assert not result
        assert result.error_code == error_codes.PLAYER_NOT_FOUND

    def test_unknown_team_fails(self, service, roster, teams):
        result = service.move_player(teams, "p1", "no-such-team", roster)
        assert not result
        assert result.error_code == error_codes.TEAM_NOT_FOUND

    def test_rejected_move_still_succeeds(self, service, roster):
        """The player ends up on no team; the caller decides what to show."""
        by_id = {p.id: p for p in roster}
        teams = [
            Team(id="t1", name="White Team", players=[by_id["p1"]]),
            Team(id="t2", name="Colored Team", players=[by_id["p2"]]),
        ]
        by_id["p2"].conflicts = {"p1"}

        result = service.move_player(teams, "p1", "t2", roster)
        assert result.success
        assert all(not t.has_player("p1") for t in result.value)
