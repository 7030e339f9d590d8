"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from product_api.repositories.base import BaseRepository, apply_sorting
from product_api.repositories.product import ListingQuery, ProductFilter, ProductRepository
from product_api.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "apply_sorting",
    "ListingQuery",
    "ProductFilter",
    "ProductRepository",
    "UserRepository",
]
