import pytest
from product_api.models.product import Product
from product_api.uow import (
    SQLAlchemyReadOnlyUnitOfWork as ROuow,
)
from product_api.uow import (
    SQLAlchemyUnitOfWork as RWuow,
)
from tests.factories.product import ProductFactory
from tests.factories.user import UserFactory


class TestSQLAlchemyReadOnlyUnitOfWork:
    def test_blocks_orm_flush_writes(self, db):
        """
        Ensure that attempting to flush ORM changes inside the RO UoW raises.
        """
        owner = UserFactory()
        with ROuow() as uow, pytest.raises(RuntimeError, match="ORM flush blocked"):
            uow.session.add(Product(name="Lamp", price=1, owner_id=owner.id))
            uow.session.flush()

    def test_allows_reads(self, db):
        """
        Read operations should work normally within RO UoW.
        """
        ProductFactory()

        with ROuow() as uow:
            assert uow.session.query(Product).count() == 1

    def test_disallows_commit(self, db):
        """
        RO UoW must reject commit() by design.
        """
        with ROuow() as uow, pytest.raises(RuntimeError, match="does not allow commit"):
            uow.commit()

    def test_always_rolls_back_changes(self, db):
        """
        Any attempted modifications must not persist after RO UoW exits.
        """
        product_id = ProductFactory(name="Original").id

        with ROuow() as uow, pytest.raises(RuntimeError, match="ORM flush blocked"):
            row = uow.session.get(Product, product_id)
            row.name = "Mutated"
            uow.session.flush()

        with RWuow() as uow:
            assert uow.session.get(Product, product_id).name == "Original"

    def test_guard_is_removed_on_exit(self, db):
        """
        A writer UoW opened after a read-only one can flush again.
        """
        owner = UserFactory()
        with ROuow():
            pass

        with RWuow() as uow:
            created = uow.products.create(owner_id=owner.id, name="Chair", price=40)

        assert created.id is not None
