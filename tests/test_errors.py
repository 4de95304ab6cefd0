"""Tests for the error taxonomy."""

import pytest
from pydantic import ValidationError

from crimsonnimbus.errors import (
    ArenaError,
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    ServiceUnavailableError,
    ValidationFailedError,
    violations_from,
)
from crimsonnimbus.models.characters import NewCharacter


class TestArenaErrors:
    """Test suite for ArenaError subclasses."""

    @pytest.mark.parametrize(
        "error_cls,kind,status",
        [
            (NotFoundError, "not_found", 404),
            (ForbiddenError, "forbidden", 401),
            (InvalidStateError, "invalid_state", 409),
            (InvalidArgumentError, "invalid_argument", 400),
            (ServiceUnavailableError, "service_unavailable", 500),
            (ConflictError, "conflict", 409),
        ],
    )
    def test_kinds_and_status_codes(self, error_cls, kind, status):
        """Test that each error maps to a stable kind and status."""
        error = error_cls("boom")
        assert isinstance(error, ArenaError)
        assert error.to_dict() == {"code": status, "error": kind, "message": "boom"}

    def test_default_message(self):
        """Test that errors without a message use the default one."""
        assert ForbiddenError().message == "You are not authorized to perform this action."
        assert str(NotFoundError()) == NotFoundError.default_message

    def test_validation_failed_carries_violations(self):
        """Test that validation failures include their violations."""
        error = ValidationFailedError([{"name": "too short"}])
        body = error.to_dict()
        assert body["code"] == 422
        assert body["violations"] == [{"name": "too short"}]


class TestViolationsFrom:
    """Test suite for violations_from."""

    def test_nested_fields_joined_with_dots(self):
        """Test the flattened violation format."""
        with pytest.raises(ValidationError) as exc_info:
            NewCharacter.model_validate({"name": "", "stats": {"height": 1, "weight": 1}})
        violations = violations_from(exc_info.value)
        fields = {field for violation in violations for field in violation}
        assert "name" in fields
        assert "stats.power" in fields
        assert all(len(violation) == 1 for violation in violations)
