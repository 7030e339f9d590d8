"""Product repository: lookups, filtered listing and counting."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, cast

from sqlalchemy import Select, func, or_, select
from sqlalchemy.sql.elements import ColumnElement

from product_api.models.product import Product
from product_api.repositories.base import BaseRepository, apply_sorting

LIKE_ESCAPE = "\\"


@dataclass(frozen=True, slots=True)
class ProductFilter:
    """Row filter for product listings.

    :param active_only: Restrict to ``active=True`` rows.
    :type active_only: bool
    :param search: Free-text terms matched against name and description.
    :type search: str | None
    """

    active_only: bool = True
    search: str | None = None


@dataclass(frozen=True, slots=True)
class ListingQuery:
    """Bounded listing request consumed by :meth:`ProductRepository.find_products`.

    :param filter: Row filter.
    :param sort: ``(field, is_desc)`` pairs in priority order.
    :param skip: Rows to skip (``(page - 1) * limit``).
    :param limit: Maximum rows to return.
    :param page: 1-based page the window corresponds to.
    """

    filter: ProductFilter
    sort: Sequence[tuple[str, bool]] = field(default_factory=tuple)
    skip: int = 0
    limit: int = 10
    page: int = 1


def _like_pattern(term: str) -> str:
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


class ProductRepository(BaseRepository[Product]):
    """Persistence-only repository for :class:`Product`.

    Text search is a case-insensitive substring match (``ILIKE``) over
    ``name`` and ``description``; whitespace-separated terms are OR-ed.
    """

    model = Product

    # ---------------------------- Whitelists ----------------------------

    def _sortable_fields(self):
        return {
            "name": Product.name,
            "price": Product.price,
            "stock": Product.stock,
            "created_at": Product.created_at,
            "updated_at": Product.updated_at,
        }

    def _updatable_fields(self):
        """Mutable fields; ``owner_id`` is deliberately absent."""
        return {"name", "description", "price", "stock", "active"}

    # ---------------------------- Filtering ----------------------------

    def _filter_clauses(self, product_filter: ProductFilter) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        if product_filter.active_only:
            clauses.append(Product.active.is_(True))
        terms = (product_filter.search or "").split()
        if terms:
            matches: list[ColumnElement[bool]] = []
            for term in terms:
                pattern = _like_pattern(term)
                matches.append(Product.name.ilike(pattern, escape=LIKE_ESCAPE))
                matches.append(Product.description.ilike(pattern, escape=LIKE_ESCAPE))
            clauses.append(or_(*matches))
        return clauses

    def _filtered(self, stmt: Select[Any], product_filter: ProductFilter) -> Select[Any]:
        clauses = self._filter_clauses(product_filter)
        return stmt.where(*clauses) if clauses else stmt

    # ---------------------------- Queries ----------------------------

    def find_products(self, query: ListingQuery) -> list[Product]:
        """Return one page of products matching ``query``."""
        stmt = self._filtered(select(Product), query.filter)
        stmt = apply_sorting(stmt, self._sortable_fields(), query.sort, pk_attr=Product.id)
        stmt = stmt.offset(query.skip).limit(query.limit)
        return cast(list[Product], list(self.session.execute(stmt).scalars().all()))

    def count_products(self, product_filter: ProductFilter) -> int:
        """Count products matching ``product_filter`` (ignores paging)."""
        stmt = self._filtered(select(func.count()).select_from(Product), product_filter)
        return int(self.session.execute(stmt).scalar_one())

    # ---------------------------- Commands ----------------------------

    def create(
        self,
        *,
        owner_id: int,
        name: str,
        price: float,
        description: str = "",
        stock: int = 0,
    ) -> Product:
        """Persist a new active product owned by ``owner_id``."""
        product = Product(
            owner_id=owner_id,
            name=name,
            price=price,
            description=description,
            stock=stock,
            active=True,
        )
        return self.add(product)

    def save(self, product: Product) -> Product:
        """Flush in-place changes made to ``product``."""
        self.flush()
        return product
