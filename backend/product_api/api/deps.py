"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from flask import Response, current_app, g, jsonify, request

from product_api.core.extensions import get_token_provider
from product_api.core.logger import ensure_request_id
from product_api.services._shared.base import ServiceContext
from product_api.services._shared.errors import (
    AuthenticationError,
    InvalidTokenError,
    ValidationError,
)

F = TypeVar("F", bound=Callable[..., Any])

BEARER_PREFIX = "bearer "


@dataclass(frozen=True, slots=True)
class Identity:
    """Caller resolved from a verified bearer token."""

    id: int
    email: str


def _bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    if not header.lower().startswith(BEARER_PREFIX):
        raise AuthenticationError("Token not provided")
    token = header[len(BEARER_PREFIX) :].strip()
    if not token:
        raise AuthenticationError("Token not provided")
    return token


def require_auth(func: F) -> F:
    """Ensure the request carries a valid bearer token.

    On success ``g.identity`` holds the caller's :class:`Identity`. The guard
    never touches the database.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        token = _bearer_token()
        try:
            claims = get_token_provider().verify(token)
            user_id = int(claims.subject)
        except (InvalidTokenError, ValueError) as exc:
            raise AuthenticationError("Invalid or expired token") from exc
        g.identity = Identity(id=user_id, email=claims.email)
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_identity() -> Identity | None:
    """Return the identity set by :func:`require_auth`, if any."""

    return g.get("identity")


def service_context() -> ServiceContext:
    """Build the request-scoped context handed to services."""

    identity = current_identity()
    return ServiceContext(
        actor_id=identity.id if identity else None,
        actor_email=identity.email if identity else None,
        request_id=ensure_request_id(),
    )


def parse_product_id(raw: str) -> int:
    """Parse a path id; anything but a positive integer is a 422."""

    if raw.isascii() and raw.isdigit() and int(raw) > 0:
        return int(raw)
    raise ValidationError({"id": ["Must be a positive integer."]})


def json_body() -> dict[str, Any]:
    """Return the JSON request body, or an empty mapping when absent."""

    payload = request.get_json(silent=True)
    return payload if payload is not None else {}


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
