"""Product catalogue endpoints."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from product_api.api.deps import (
    json_body,
    json_response,
    parse_product_id,
    require_auth,
    service_context,
    timing,
)
from product_api.schemas import (
    ProductCreateSchema,
    ProductPageSchema,
    ProductSchema,
    ProductUpdateSchema,
    build_page,
)
from product_api.services.products import (
    ProductCreateIn,
    ProductService,
    ProductUpdateIn,
)

bp = Blueprint("products", __name__)

product_schema = ProductSchema()
product_page_schema = ProductPageSchema()
product_create_schema = ProductCreateSchema()
product_update_schema = ProductUpdateSchema()


def _service() -> ProductService:
    return ProductService(
        ctx=service_context(),
        default_limit=int(current_app.config.get("PRODUCTS_DEFAULT_LIMIT", 10)),
        max_limit=int(current_app.config.get("PRODUCTS_MAX_LIMIT", 100)),
    )


@bp.get("")
@timing
def list_products():
    """Return a page of active products (``page``, ``limit``, ``search``, ``sort``)."""

    result = _service().list(request.args.to_dict())
    body = build_page(
        items=list(result.items),
        page=result.meta.page,
        limit=result.meta.limit,
        total=result.meta.total,
    )
    return json_response(product_page_schema.dump(body))


@bp.get("/<product_id>")
@timing
def get_product(product_id: str):
    """Return one active product."""

    product = _service().get(parse_product_id(product_id))
    return json_response(product_schema.dump(product))


@bp.post("")
@require_auth
@timing
def create_product():
    """Create a product owned by the caller."""

    data = product_create_schema.load(json_body())
    product = _service().create(ProductCreateIn(**data))
    return json_response(product_schema.dump(product), status=201)


@bp.patch("/<product_id>")
@require_auth
@timing
def update_product(product_id: str):
    """Partially update a product the caller owns."""

    pid = parse_product_id(product_id)
    data = product_update_schema.load(json_body())
    product = _service().update(pid, ProductUpdateIn(**data))
    return json_response(product_schema.dump(product))


@bp.delete("/<product_id>")
@require_auth
@timing
def delete_product(product_id: str):
    """Soft-delete a product the caller owns."""

    _service().delete(parse_product_id(product_id))
    return "", 204
