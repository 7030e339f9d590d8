"""Product resource schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate, validates

from product_api.models.product import MAX_STOCK

from .common import PageSchema


class _ProductFieldsMixin:
    """Field-level rules shared by create and update payloads."""

    @validates("name")
    def _name_not_blank(self, value: str, **_: Any) -> None:
        if not value.strip():
            raise ValidationError("Name must not be blank.")


class ProductCreateSchema(_ProductFieldsMixin, Schema):
    """Payload for creating a product; ``owner``/``active`` are not accepted."""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=validate.Length(min=1, max=200))
    description = fields.String(load_default="")
    price = fields.Float(required=True, allow_nan=False, validate=validate.Range(min=0))
    stock = fields.Integer(
        load_default=0, strict=True, validate=validate.Range(min=0, max=MAX_STOCK)
    )


class ProductUpdateSchema(_ProductFieldsMixin, Schema):
    """Partial update payload; every field is optional."""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(validate=validate.Length(min=1, max=200))
    description = fields.String()
    price = fields.Float(allow_nan=False, validate=validate.Range(min=0))
    stock = fields.Integer(strict=True, validate=validate.Range(min=0, max=MAX_STOCK))
    active = fields.Boolean()


class ProductSchema(Schema):
    """Public representation of a product."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    description = fields.String(required=True)
    price = fields.Float(required=True)
    stock = fields.Integer(required=True)
    active = fields.Boolean(required=True)
    owner = fields.Integer(required=True)
    created_at = fields.DateTime(required=True)
    updated_at = fields.DateTime(required=True)


class ProductPageSchema(PageSchema):
    """Paginated product listing."""

    items = fields.List(fields.Nested(ProductSchema), required=True)
