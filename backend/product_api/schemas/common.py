"""Common Marshmallow schemas shared across resources."""

from __future__ import annotations

from marshmallow import Schema, fields


class PageSchema(Schema):
    """Envelope fields for paginated responses: ``{page, limit, total, items}``."""

    page = fields.Integer(required=True)
    limit = fields.Integer(required=True)
    total = fields.Integer(required=True)


def build_page(*, items: list, page: int, limit: int, total: int) -> dict:
    """Return the paginated response mapping."""

    return {"page": int(page), "limit": int(limit), "total": int(total), "items": items}
