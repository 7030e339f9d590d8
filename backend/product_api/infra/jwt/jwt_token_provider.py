# product_api/infra/jwt/jwt_token_provider.py
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from product_api.services._shared.errors import InvalidTokenError
from product_api.services._shared.ports import TokenClaims, TokenProvider

REQUIRED_CLAIMS = ("sub", "email", "exp", "iat")


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class TokenConfig:
    """
    Immutable token settings resolved once at startup.

    :param secret: HMAC signing key.
    :type secret: str
    :param expires: Lifetime of issued tokens.
    :type expires: timedelta
    :param algorithm: JWS algorithm name understood by PyJWT.
    :type algorithm: str
    """

    secret: str
    expires: timedelta
    algorithm: str = "HS256"


@dataclass(slots=True)
class JWTTokenProvider(TokenProvider):
    """
    Stateless bearer-token adapter built on PyJWT.

    Tokens carry ``sub`` (user id as string), ``email``, ``iat`` and ``exp``.
    There is no server-side revocation: a token stays valid until it expires.

    .. note::
       ``clock`` exists so tests can pin "now"; production uses UTC wall time.
    """

    config: TokenConfig
    clock: Callable[[], datetime] = field(default=_utcnow)

    def issue(self, user_id: int | str, email: str) -> str:
        """Sign a token binding ``user_id`` and ``email`` for ``config.expires``."""
        now = self.clock()
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + self.config.expires).timestamp()),
        }
        return jwt.encode(payload, self.config.secret, algorithm=self.config.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode ``token`` and return its identity claims.

        :raises InvalidTokenError: On bad signature, malformed token, missing
            claims, or expiry.
        """
        if not token:
            raise InvalidTokenError("Token not provided")
        try:
            # Expiry is checked against our clock rather than PyJWT's.
            payload = jwt.decode(
                token,
                self.config.secret,
                algorithms=[self.config.algorithm],
                options={"require": list(REQUIRED_CLAIMS), "verify_exp": False},
            )
        except jwt.PyJWTError as exc:
            raise InvalidTokenError() from exc

        exp = payload["exp"]
        if not isinstance(exp, int | float) or exp <= self.clock().timestamp():
            raise InvalidTokenError()

        subject, email = payload["sub"], payload["email"]
        if not isinstance(subject, str) or not subject or not isinstance(email, str):
            raise InvalidTokenError()
        return TokenClaims(subject=subject, email=email)
