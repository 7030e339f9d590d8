"""Authentication service and DTOs."""

from .dto import AuthOut, LoginIn, RegisterIn, UserOut
from .service import AuthService

__all__ = ["AuthService", "RegisterIn", "LoginIn", "UserOut", "AuthOut"]
