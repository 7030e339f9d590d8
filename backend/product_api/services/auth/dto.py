# product_api/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class RegisterIn:
    """
    Input DTO for sign-up.

    :param name: Display name.
    :type name: str
    :param email: Login email (normalized by the model).
    :type email: str
    :param password: Raw password, hashed before storage.
    :type password: str
    """

    name: str
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: User email.
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class UserOut:
    """Public profile; never carries the password hash."""

    id: int
    name: str
    email: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class AuthOut:
    """
    Result of register/login.

    :param user: Authenticated user's profile.
    :type user: UserOut
    :param token: Signed bearer token.
    :type token: str
    """

    user: UserOut
    token: str
