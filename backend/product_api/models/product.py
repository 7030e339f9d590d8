"""Product model: catalogue item owned by the user who created it."""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    true,
)
from sqlalchemy.orm import Mapped, mapped_column, validates

from product_api.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

#: Stock is a 32-bit INTEGER column on every supported backend.
MAX_STOCK = 2**31 - 1


class Product(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Catalogue item with soft-delete semantics.

    Fields
    ------
    name : str
        Trimmed, non-empty label.
    description : str
        Free text, empty by default.
    price : float
        Unit price, never negative.
    stock : int
        Units available, never negative.
    active : bool
        ``False`` once soft-deleted; inactive rows are hidden from reads and
        listings but never removed.
    owner_id : int
        Creator's user id. Set once; reassignment raises.
    """

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    price: Mapped[float] = mapped_column(Float, nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT"), nullable=False
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="price_non_negative"),
        CheckConstraint("stock >= 0", name="stock_non_negative"),
        Index("ix_products_name", "name"),
        Index("ix_products_active_created_at", "active", "created_at"),
        Index("ix_products_owner_id", "owner_id"),
    )

    # -------------------- Validators --------------------
    @validates("name")
    def _normalize_name(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Product name is required.")
        return value.strip()

    @validates("price")
    def _validate_price(self, key: str, value: float) -> float:
        if value is None or value < 0:
            raise ValueError("Price must be greater than or equal to 0.")
        return float(value)

    @validates("stock")
    def _validate_stock(self, key: str, value: int) -> int:
        if value is None or not 0 <= value <= MAX_STOCK:
            raise ValueError(f"Stock must be between 0 and {MAX_STOCK}.")
        return int(value)

    @validates("owner_id")
    def _freeze_owner(self, key: str, value: int) -> int:
        """Allow the owner to be assigned once; it is immutable afterwards."""
        current = self.owner_id
        if current is not None and current != value:
            raise ValueError("Product owner cannot be changed.")
        return value
