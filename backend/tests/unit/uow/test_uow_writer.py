"""
Unit tests for SQLAlchemyUnitOfWork (writer), using factories.
"""

from __future__ import annotations

import pytest
from product_api.models import Product
from product_api.uow import SQLAlchemyUnitOfWork
from tests.factories.user import UserFactory


class TestSQLAlchemyUnitOfWorkWriter:
    def test_writer_uow_commits_on_success(self, db):
        """
        GIVEN a writer UoW
        WHEN we create a product via repo inside the context and leave without exception
        THEN the transaction is committed and the row is visible afterwards.
        """
        owner = UserFactory()
        initial = db.session.query(Product).count()

        with SQLAlchemyUnitOfWork() as uow:
            uow.products.create(owner_id=owner.id, name="Desk", price=120)

        db.session.remove()
        assert db.session.query(Product).count() == initial + 1

    def test_writer_uow_rolls_back_on_exception(self, db):
        """
        GIVEN a writer UoW
        WHEN an exception is raised inside the context
        THEN the transaction is rolled back and no rows are persisted.
        """
        owner = UserFactory()
        initial = db.session.query(Product).count()

        with pytest.raises(RuntimeError), SQLAlchemyUnitOfWork() as uow:
            uow.products.create(owner_id=owner.id, name="Desk", price=120)
            raise RuntimeError("boom")  # forces rollback

        assert db.session.query(Product).count() == initial
