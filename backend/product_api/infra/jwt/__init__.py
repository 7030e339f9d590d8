"""Bearer-token adapters."""

from .jwt_token_provider import JWTTokenProvider, TokenConfig

__all__ = ["JWTTokenProvider", "TokenConfig"]
