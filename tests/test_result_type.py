"""
Tests for the Result values returned by the service layer.
"""

import dataclasses
import inspect
from datetime import datetime

import pytest

from domain.models.player import Player
from domain.models.team import Team
from services import error_codes
from services.result import Result
from services.roster_validation import validate_rating
from services.team_generation_service import TeamGenerationService
from services.team_selection_service import TeamSelectionService
from shuffler import BalancedShuffler


@pytest.fixture
def teams():
    return [
        Team(id="t1", name="White Team", players=[Player(id="a", name="Amy")]),
        Team(id="t2", name="Colored Team", players=[Player(id="b", name="Bea")]),
    ]


class TestSuccessShape:
    """Successful service calls carry a value and no error."""

    def test_generated_teams(self, roster, active_ids, seeded_rng):
        service = TeamGenerationService(shuffler=BalancedShuffler(rng=seeded_rng))
        result = service.generate_teams(roster, active_ids, team_size=6)

        assert isinstance(result, Result)
        assert result
        assert result.error is None
        assert result.error_code is None
        assert [len(t.players) for t in result.unwrap()] == [6, 6]

    def test_empty_generation_is_still_a_success(self, roster):
        """Too few players is not an error: the value is an empty list."""
        result = TeamGenerationService().generate_teams(roster, set())
        assert result.success is True
        assert result.value == []
        assert result.unwrap_or(None) == []

    def test_validated_value_is_normalised(self):
        result = validate_rating(4)
        assert result.unwrap() == 4.0
        assert isinstance(result.value, float)


class TestFailureShape:
    """Failed service calls carry a message and a code, never a value."""

    @pytest.mark.parametrize(
        "call,code",
        [
            (
                lambda svc, teams: svc.move_player(teams, "ghost", "t2", []),
                error_codes.PLAYER_NOT_FOUND,
            ),
            (
                lambda svc, teams: svc.move_player(teams, "a", "t9", [Player(id="a", name="Amy")]),
                error_codes.TEAM_NOT_FOUND,
            ),
            (
                lambda svc, teams: svc.generate_teams([], set(), team_size=0),
                error_codes.INVALID_TEAM_SIZE,
            ),
        ],
    )
    def test_generation_service_failures(self, teams, call, code):
        result = call(TeamGenerationService(), teams)

        assert not result
        assert result.value is None
        assert result.error_code == code
        assert result.error

    def test_selection_name_failure(self, teams):
        result = TeamSelectionService().create_selection(teams, {"a", "b"}, "  ")
        assert result.success is False
        assert result.error == "Selection name is required"
        assert result.error_code == error_codes.INVALID_SELECTION_NAME

    def test_unwrap_failure_raises_with_message(self):
        result = validate_rating(7.0)
        with pytest.raises(ValueError, match="Cannot unwrap failed result: Rating must be between"):
            result.unwrap()

    def test_unwrap_or_falls_back(self, teams):
        result = TeamGenerationService().move_player(teams, "ghost", "t2", [])
        assert result.unwrap_or(teams) is teams


class TestResultValues:
    """Result objects are plain immutable values."""

    def test_result_is_frozen(self, teams):
        result = TeamSelectionService().create_selection(
            teams, {"a", "b"}, "Game 1", now=datetime(2026, 10, 18)
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.value = None

    def test_equal_failures_compare_equal(self):
        assert validate_rating(0.5) == validate_rating(0.5)
        assert Result.fail("x", code=error_codes.NOT_FOUND) != Result.fail("x")


class TestErrorCodes:
    """Tests for error code constants."""

    def test_error_codes_are_unique_strings(self):
        codes = [
            value
            for name, value in inspect.getmembers(error_codes)
            if not name.startswith("_") and isinstance(value, str)
        ]
        assert codes
        assert len(codes) == len(set(codes)), "Duplicate error codes found"

    def test_codes_used_by_services_exist(self):
        for name in (
            "PLAYER_NOT_FOUND",
            "TEAM_NOT_FOUND",
            "INVALID_TEAM_SIZE",
            "INVALID_RATING",
            "INVALID_CONSTRAINT",
            "INVALID_SELECTION_NAME",
            "PLAYER_ALREADY_EXISTS",
        ):
            assert hasattr(error_codes, name)
