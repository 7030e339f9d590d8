"""Unit tests for ProductService lifecycle operations."""

from __future__ import annotations

import pytest
from product_api.models.product import Product
from product_api.services._shared.base import ServiceContext
from product_api.services._shared.errors import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from product_api.services.products.dto import ProductCreateIn, ProductUpdateIn
from product_api.services.products.service import ProductService
from tests.factories.product import ProductFactory
from tests.factories.user import UserFactory


@pytest.fixture()
def owner(app):
    return UserFactory()


@pytest.fixture()
def stranger(app):
    return UserFactory()


def _as(user) -> ProductService:
    return ProductService(ctx=ServiceContext(actor_id=user.id, actor_email=user.email))


class TestCreate:
    def test_owner_is_the_caller_and_defaults_apply(self, owner):
        out = _as(owner).create(ProductCreateIn(name="Keyboard", price=199.9))

        assert out.owner == owner.id
        assert out.stock == 0
        assert out.description == ""
        assert out.active is True
        assert out.id is not None
        assert out.created_at is not None

    def test_requires_an_actor(self, app):
        with pytest.raises(AuthenticationError):
            ProductService().create(ProductCreateIn(name="Keyboard", price=1))

    def test_model_rejection_becomes_validation_error(self, owner, session):
        with pytest.raises(ValidationError):
            _as(owner).create(ProductCreateIn(name="Keyboard", price=-1))
        assert session.query(Product).count() == 0


class TestRead:
    def test_get_active(self, owner):
        product = ProductFactory(owner_id=owner.id, name="Lamp")

        assert ProductService().get(product.id).name == "Lamp"

    def test_get_inactive_is_not_found(self, owner):
        product = ProductFactory(owner_id=owner.id, active=False)

        with pytest.raises(NotFoundError):
            ProductService().get(product.id)

    def test_get_unknown_is_not_found(self, app):
        with pytest.raises(NotFoundError):
            ProductService().get(424242)

    def test_list_reports_page_metadata(self, owner):
        for i in range(3):
            ProductFactory(owner_id=owner.id, name=f"Item {i}")
        ProductFactory(owner_id=owner.id, active=False)

        result = ProductService().list({"limit": "2", "page": "2", "sort": "name"})

        assert [p.name for p in result.items] == ["Item 2"]
        assert (result.meta.page, result.meta.limit, result.meta.total) == (2, 2, 3)

    def test_list_past_last_page_is_empty(self, owner):
        ProductFactory(owner_id=owner.id)

        result = ProductService().list({"page": "5"})

        assert result.items == []
        assert result.meta.total == 1

    def test_list_uses_configured_default_limit(self, owner):
        for _ in range(4):
            ProductFactory(owner_id=owner.id)

        result = ProductService(default_limit=3).list({})

        assert len(result.items) == 3
        assert result.meta.limit == 3


class TestUpdate:
    def test_partial_update_leaves_omitted_fields(self, owner):
        product = ProductFactory(owner_id=owner.id, name="Lamp", price=10, stock=4)

        out = _as(owner).update(product.id, ProductUpdateIn(price=12.5))

        assert (out.name, out.price, out.stock) == ("Lamp", 12.5, 4)

    def test_empty_update_returns_record_unchanged(self, owner):
        product = ProductFactory(owner_id=owner.id, name="Lamp")

        out = _as(owner).update(product.id, ProductUpdateIn())

        assert out.name == "Lamp"

    def test_non_owner_is_forbidden(self, owner, stranger):
        product = ProductFactory(owner_id=owner.id)

        with pytest.raises(AuthorizationError):
            _as(stranger).update(product.id, ProductUpdateIn(name="Hijack"))

    def test_update_can_deactivate(self, owner):
        product = ProductFactory(owner_id=owner.id)

        out = _as(owner).update(product.id, ProductUpdateIn(active=False))

        assert out.active is False
        with pytest.raises(NotFoundError):
            ProductService().get(product.id)

    def test_invalid_value_is_rolled_back(self, owner, session):
        product = ProductFactory(owner_id=owner.id, name="Lamp", stock=2)

        with pytest.raises(ValidationError):
            _as(owner).update(product.id, ProductUpdateIn(name="Desk", stock=-3))

        assert session.get(Product, product.id).name == "Lamp"


class TestDelete:
    def test_delete_then_read_update_delete_are_not_found(self, owner, stranger):
        out = _as(owner).create(ProductCreateIn(name="Keyboard", price=199.9))

        _as(owner).delete(out.id)

        with pytest.raises(NotFoundError):
            ProductService().get(out.id)
        with pytest.raises(NotFoundError):
            _as(owner).update(out.id, ProductUpdateIn(name="Back"))
        with pytest.raises(NotFoundError):
            _as(owner).delete(out.id)
        # Not found wins over forbidden for a non-owner as well
        with pytest.raises(NotFoundError):
            _as(stranger).delete(out.id)

    def test_delete_is_soft(self, owner, session):
        product = ProductFactory(owner_id=owner.id)

        _as(owner).delete(product.id)

        row = session.get(Product, product.id)
        assert row is not None
        assert row.active is False

    def test_non_owner_cannot_delete(self, owner, stranger, session):
        product = ProductFactory(owner_id=owner.id)

        with pytest.raises(AuthorizationError):
            _as(stranger).delete(product.id)
        assert session.get(Product, product.id).active is True
