# comments in English; strict reST docstrings
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

from product_api.services._shared.dto import PageMeta

# ------------------------------ Input DTOs ------------------------------- #


@dataclass(frozen=True, slots=True)
class ProductCreateIn:
    """
    Input DTO for product creation. The owner comes from the caller, never
    from the payload.

    :param name: Display name (trimmed, non-empty).
    :type name: str
    :param price: Unit price, ``>= 0``.
    :type price: float
    :param description: Free text.
    :type description: str
    :param stock: Units available, ``>= 0``.
    :type stock: int
    """

    name: str
    price: float
    description: str = ""
    stock: int = 0


@dataclass(frozen=True, slots=True)
class ProductUpdateIn:
    """
    Partial update. ``None`` means "leave unchanged".

    :param name: New display name.
    :type name: str | None
    :param description: New description.
    :type description: str | None
    :param price: New price.
    :type price: float | None
    :param stock: New stock level.
    :type stock: int | None
    :param active: New visibility flag.
    :type active: bool | None
    """

    name: str | None = None
    description: str | None = None
    price: float | None = None
    stock: int | None = None
    active: bool | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were provided."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


# ------------------------------ Output DTOs ------------------------------ #


@dataclass(frozen=True, slots=True)
class ProductOut:
    """
    Public projection of a Product row.

    :param owner: Owner's user id.
    """

    id: int
    name: str
    description: str
    price: float
    stock: int
    active: bool
    owner: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class ProductListOut:
    """
    One page of products.

    :param items: Rows on the page.
    :type items: Sequence[ProductOut]
    :param meta: Paging metadata.
    :type meta: PageMeta
    """

    items: Sequence[ProductOut]
    meta: PageMeta
