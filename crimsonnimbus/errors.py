"""Error taxonomy shared by the arena services.

Every failure a service can report is an ``ArenaError`` subclass. Each carries a
stable ``kind`` and the status code the transport layer should answer with, so a
caller only needs a single ``except ArenaError`` to translate any of them.
"""

from typing import Any, Optional

from pydantic import ValidationError


class ArenaError(Exception):
    """Base class for all arena failures."""

    kind = "arena_error"
    status_code = 500
    default_message = "The server has an internal error."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the response body the transport sends back."""
        return {"code": self.status_code, "error": self.kind, "message": self.message}


class NotFoundError(ArenaError):
    kind = "not_found"
    status_code = 404
    default_message = "Requested resource could not be located."


class ForbiddenError(ArenaError):
    kind = "forbidden"
    status_code = 401
    default_message = "You are not authorized to perform this action."


class InvalidStateError(ArenaError):
    kind = "invalid_state"
    status_code = 409
    default_message = "Request conflicts with requested resource state."


class InvalidArgumentError(ArenaError):
    kind = "invalid_argument"
    status_code = 400
    default_message = "Your request cannot be completed as it is malformed."


class ServiceUnavailableError(ArenaError):
    kind = "service_unavailable"
    status_code = 500
    default_message = "Internal character database is unavailable."


class ConflictError(ArenaError):
    kind = "conflict"
    status_code = 409
    default_message = "Resource was modified by another request."


class ValidationFailedError(ArenaError):
    """Entity failed field validation; ``violations`` maps fields to messages."""

    kind = "validation_failed"
    status_code = 422
    default_message = "The provided entity cannot be processed."

    def __init__(self, violations: list[dict[str, str]], message: Optional[str] = None) -> None:
        super().__init__(message)
        self.violations = violations

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["violations"] = self.violations
        return body


def violations_from(error: ValidationError) -> list[dict[str, str]]:
    """
    Flatten a pydantic ValidationError into one ``{field: message}`` per problem.

    Nested locations are joined with dots, e.g. ``stats.power``.
    """
    violations = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"]) or "__root__"
        violations.append({field: detail["msg"]})
    return violations
