from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """
    Identity asserted by a verified bearer token.

    :param subject: User id carried in the ``sub`` claim.
    :type subject: str
    :param email: Email carried in the ``email`` claim.
    :type email: str
    """

    subject: str
    email: str


class TokenProvider(Protocol):
    """Port for issuing and verifying signed, time-limited bearer tokens."""

    def issue(self, user_id: int | str, email: str) -> str: ...

    def verify(self, token: str) -> TokenClaims: ...
