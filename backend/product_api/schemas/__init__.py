"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import AuthResponseSchema, LoginSchema, RegisterSchema
from .common import PageSchema, build_page
from .product import (
    ProductCreateSchema,
    ProductPageSchema,
    ProductSchema,
    ProductUpdateSchema,
)
from .user import UserSchema

__all__ = [
    "AuthResponseSchema",
    "LoginSchema",
    "RegisterSchema",
    "PageSchema",
    "build_page",
    "ProductCreateSchema",
    "ProductUpdateSchema",
    "ProductSchema",
    "ProductPageSchema",
    "UserSchema",
]
