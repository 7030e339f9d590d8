# comments in English; strict reST docstrings
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from product_api.models.product import Product
from product_api.repositories.product import ProductRepository
from product_api.services._shared.base import BaseService, ServiceContext
from product_api.services._shared.dto import PageMeta
from product_api.services._shared.errors import NotFoundError, ValidationError
from product_api.services._shared.policies.common import authorize_mutation
from product_api.services.products.dto import (
    ProductCreateIn,
    ProductListOut,
    ProductOut,
    ProductUpdateIn,
)
from product_api.services.products.listing import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    build_listing_query,
)

logger = logging.getLogger(__name__)


def _to_out(row: Product) -> ProductOut:
    return ProductOut(
        id=row.id,
        name=row.name,
        description=row.description,
        price=row.price,
        stock=row.stock,
        active=row.active,
        owner=row.owner_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class ProductService(BaseService):
    """
    Application service for the product catalogue.

    Responsibilities
    ----------------
    - Create products owned by the calling user.
    - Public read and listing of *active* products only.
    - Partial update and soft delete restricted to the owner.

    Notes
    -----
    - Framework-agnostic; the caller is taken from :class:`ServiceContext`.
    - Missing and soft-deleted products are indistinguishable (``NotFound``),
      and that check precedes the ownership check.
    """

    def __init__(
        self,
        *,
        ctx: ServiceContext | None = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> None:
        super().__init__(ctx=ctx)
        self.default_limit = default_limit
        self.max_limit = max_limit

    # ------------------------------------------------------------------ #
    # Create
    # ------------------------------------------------------------------ #

    def create(self, dto: ProductCreateIn) -> ProductOut:
        """
        Create an active product owned by the authenticated actor.

        :param dto: Creation input.
        :type dto: :class:`ProductCreateIn`
        :returns: Persisted product.
        :rtype: :class:`ProductOut`
        :raises AuthenticationError: When no actor is present.
        :raises ValidationError: When the model rejects a field.
        """
        owner_id = self.require_actor()
        with self.rw_uow() as uow:
            repo: ProductRepository = uow.products
            try:
                row = repo.create(
                    owner_id=owner_id,
                    name=dto.name,
                    price=dto.price,
                    description=dto.description,
                    stock=dto.stock,
                )
            except ValueError as exc:
                raise ValidationError({"body": [str(exc)]}) from exc
            out = _to_out(row)

        logger.info(
            "Product created",
            extra={"product_id": out.id, "user_id": owner_id},
        )
        return out

    # ------------------------------------------------------------------ #
    # Read
    # ------------------------------------------------------------------ #

    def get(self, product_id: int) -> ProductOut:
        """
        Fetch an active product by id.

        :raises NotFoundError: When missing or soft-deleted.
        """
        with self.ro_uow() as uow:
            row = uow.products.get(product_id)
            if row is None or not row.active:
                raise NotFoundError("Product", product_id)
            return _to_out(row)

    def list(self, params: Mapping[str, Any]) -> ProductListOut:
        """
        Return one page of active products.

        :param params: Raw ``page``/``limit``/``search``/``sort`` values.
        :returns: Items plus ``page``, ``limit`` and the unpaged ``total``.
        :raises ValidationError: On malformed listing parameters.
        """
        query = build_listing_query(
            params, default_limit=self.default_limit, max_limit=self.max_limit
        )
        with self.ro_uow() as uow:
            repo: ProductRepository = uow.products
            rows = repo.find_products(query)
            total = repo.count_products(query.filter)
            items = [_to_out(r) for r in rows]

        logger.debug("Products listed", extra={"count": len(items), "page": query.page})
        return ProductListOut(
            items=items,
            meta=PageMeta(page=query.page, limit=query.limit, total=total),
        )

    # ------------------------------------------------------------------ #
    # Update / Delete
    # ------------------------------------------------------------------ #

    def update(self, product_id: int, dto: ProductUpdateIn) -> ProductOut:
        """
        Apply a partial update as the owner.

        Omitted fields stay unchanged; an empty update returns the product
        as is.

        :raises NotFoundError: Missing or soft-deleted product.
        :raises AuthorizationError: Caller is not the owner.
        :raises ValidationError: When the model rejects a field.
        """
        actor_id = self.require_actor()
        with self.rw_uow() as uow:
            repo: ProductRepository = uow.products
            row = authorize_mutation(repo.get(product_id), actor_id, key=product_id)
            changes = dto.changes()
            if changes:
                try:
                    repo.assign_updates(row, changes)
                except ValueError as exc:
                    raise ValidationError({"body": [str(exc)]}) from exc
            out = _to_out(row)

        logger.info(
            "Product updated",
            extra={"product_id": product_id, "user_id": actor_id},
        )
        return out

    def delete(self, product_id: int) -> None:
        """
        Soft-delete a product as the owner.

        :raises NotFoundError: Missing or already inactive.
        :raises AuthorizationError: Caller is not the owner.
        """
        actor_id = self.require_actor()
        with self.rw_uow() as uow:
            repo: ProductRepository = uow.products
            row = authorize_mutation(repo.get(product_id), actor_id, key=product_id)
            row.active = False
            repo.save(row)

        logger.info(
            "Product deleted",
            extra={"product_id": product_id, "user_id": actor_id},
        )
