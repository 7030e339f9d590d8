"""
product_api.services._shared.ports
==================================

*Ports* (hexagonal interfaces) the service layer depends on.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`, the abstraction for issuing and verifying
    bearer tokens, and the :class:`~.TokenClaims` value it returns.

Concrete adapters live under ``product_api.infra``.
"""

from __future__ import annotations

from .token_provider import TokenClaims, TokenProvider

__all__ = ["TokenClaims", "TokenProvider"]
