"""Service layer public API.

This package exposes the essential building blocks for the service layer so that
callers can import from :mod:`product_api.services` without knowing internal
structure.

Re-exports
----------
- Base primitives (from ``product_api.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Shared DTOs (from ``product_api.services._shared.dto``)
    * :class:`PageMeta`

- Auth service (from ``product_api.services.auth``)
    * :class:`AuthService`
    * DTOs: :class:`RegisterIn`, :class:`LoginIn`, :class:`UserOut`,
      :class:`AuthOut`

- Product service (from ``product_api.services.products``)
    * :class:`ProductService`
    * DTOs: :class:`ProductCreateIn`, :class:`ProductUpdateIn`,
      :class:`ProductOut`, :class:`ProductListOut`
"""

from __future__ import annotations

# Base primitives (service base + request-scoped context)
from ._shared.base import BaseService, ServiceContext

# Shared DTOs (compose these in endpoint-specific DTOs)
from ._shared.dto import PageMeta

# Auth service + DTOs
from .auth import AuthOut, AuthService, LoginIn, RegisterIn, UserOut

# Product service + DTOs
from .products import (
    ProductCreateIn,
    ProductListOut,
    ProductOut,
    ProductService,
    ProductUpdateIn,
)

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    # Shared DTOs
    "PageMeta",
    # Auth
    "AuthService",
    "RegisterIn",
    "LoginIn",
    "UserOut",
    "AuthOut",
    # Products
    "ProductService",
    "ProductCreateIn",
    "ProductUpdateIn",
    "ProductOut",
    "ProductListOut",
]
