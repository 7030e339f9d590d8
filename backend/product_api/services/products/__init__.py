"""Product catalogue service and DTOs."""

from .dto import ProductCreateIn, ProductListOut, ProductOut, ProductUpdateIn
from .listing import build_listing_query, parse_sort
from .service import ProductService

__all__ = [
    "ProductService",
    "ProductCreateIn",
    "ProductUpdateIn",
    "ProductOut",
    "ProductListOut",
    "build_listing_query",
    "parse_sort",
]
