"""
Translate raw listing parameters into a bounded :class:`ListingQuery`.

The builder is pure: it never touches the database. Every violation is
collected per field and raised as one :class:`ValidationError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from marshmallow import EXCLUDE, Schema, fields, validate, validates
from marshmallow import ValidationError as MarshmallowValidationError

from product_api.repositories.product import ListingQuery, ProductFilter
from product_api.services._shared.errors import ValidationError

DEFAULT_LIMIT = 10
MAX_LIMIT = 100
MAX_PAGE = 1_000_000
DEFAULT_SORT: tuple[tuple[str, bool], ...] = (("created_at", True),)

SORTABLE_FIELDS = ("name", "price", "stock", "created_at", "updated_at")
SORT_ALIASES = {"createdAt": "created_at", "updatedAt": "updated_at"}


class ListingParamsSchema(Schema):
    """Query-string shape for product listings; unknown keys are ignored.

    :param max_limit: Largest accepted ``limit``.
    """

    class Meta:
        unknown = EXCLUDE

    page = fields.Integer(load_default=1, validate=validate.Range(min=1, max=MAX_PAGE))
    limit = fields.Integer(load_default=None)
    search = fields.String(load_default=None)
    sort = fields.String(load_default=None)

    def __init__(self, *, max_limit: int = MAX_LIMIT, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.max_limit = max_limit

    @validates("limit")
    def _limit_in_range(self, value: int | None, **_: Any) -> None:
        if value is not None and not 1 <= value <= self.max_limit:
            raise MarshmallowValidationError(f"Must be between 1 and {self.max_limit}.")

    @validates("sort")
    def _sort_tokens_known(self, value: str | None, **_: Any) -> None:
        try:
            parse_sort(value)
        except ValidationError as err:
            raise MarshmallowValidationError(err.errors["sort"]) from err


def parse_sort(raw: str | None) -> tuple[tuple[str, bool], ...]:
    """
    Parse ``"-price,name"`` into ``(("price", True), ("name", False))``.

    Blank input yields :data:`DEFAULT_SORT`. Empty tokens between commas are
    skipped.

    :raises ValidationError: On unknown fields or a bare ``-``.
    """
    if raw is None or not raw.strip():
        return DEFAULT_SORT

    orders: list[tuple[str, bool]] = []
    problems: list[str] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        desc = token.startswith("-")
        name = token[1:].strip() if desc else token
        if not name:
            problems.append("Sort field name is missing after '-'.")
            continue
        name = SORT_ALIASES.get(name, name)
        if name not in SORTABLE_FIELDS:
            problems.append(
                f"Unknown sort field '{name}'. Allowed: {', '.join(SORTABLE_FIELDS)}."
            )
            continue
        orders.append((name, desc))

    if problems:
        raise ValidationError({"sort": problems})
    return tuple(orders) or DEFAULT_SORT


def build_listing_query(
    params: Mapping[str, Any],
    *,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> ListingQuery:
    """
    Build the repository query for one page of active products.

    :param params: Raw parameters (``page``, ``limit``, ``search``, ``sort``).
    :param default_limit: Page size used when ``limit`` is absent.
    :param max_limit: Largest accepted page size.
    :returns: Validated listing query; ``filter.active_only`` is always set.
    :raises ValidationError: When any parameter is out of range or malformed.
    """
    try:
        data = ListingParamsSchema(max_limit=max_limit).load(dict(params))
    except MarshmallowValidationError as err:
        raise ValidationError.from_messages(err.normalized_messages()) from err

    limit = data["limit"] if data["limit"] is not None else default_limit
    search = (data["search"] or "").strip() or None
    page = data["page"]
    return ListingQuery(
        filter=ProductFilter(active_only=True, search=search),
        sort=parse_sort(data["sort"]),
        skip=(page - 1) * limit,
        limit=limit,
        page=page,
    )
