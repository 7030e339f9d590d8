"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP. They serve as stable contracts between repositories, the
token provider, policies, and application services.

The translation to HTTP responses (RFC 7807) is handled by
``product_api/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from repositories, policies or domain logic.
    - The API layer translates them to ``APIError`` subclasses.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is missing or no longer visible (soft-deleted).

    :param entity: Entity name (e.g., "Product").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return self.detail


class AuthenticationError(ServiceError):
    """Raised when a request carries no usable credential (missing/invalid/expired)."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class InvalidTokenError(ServiceError):
    """Raised by the token provider when a token cannot be trusted."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


class InvalidCredentialsError(ServiceError):
    """
    Raised when login fails.

    The message is deliberately identical for "unknown email" and "wrong
    password".
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class AuthorizationError(ServiceError):
    """Raised when an authenticated actor may not act on a resource."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


@dataclass(slots=True)
class ValidationError(ServiceError):
    """
    Raised when client input violates field-level constraints.

    :param errors: Mapping of field name to the list of violation messages.
    :type errors: dict[str, list[str]]
    """

    errors: dict[str, list[str]] = field(default_factory=dict)

    def __str__(self) -> str:
        return "Validation failed"

    @classmethod
    def from_messages(cls, messages: Mapping[str, object]) -> ValidationError:
        """Build from marshmallow-style ``{field: [msg, ...]}`` messages."""
        errors: dict[str, list[str]] = {}
        for name, value in messages.items():
            if isinstance(value, str):
                errors[name] = [value]
            elif isinstance(value, Sequence):
                errors[name] = [str(v) for v in value]
            else:
                errors[name] = [str(value)]
        return cls(errors=errors)

    def violations(self) -> list[dict[str, str]]:
        """Flatten the mapping into ``[{"field": ..., "message": ...}, ...]``."""
        return [
            {"field": name, "message": message}
            for name, messages in self.errors.items()
            for message in messages
        ]
