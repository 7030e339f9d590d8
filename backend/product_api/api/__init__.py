"""HTTP surface of the product API; mounts the versioned blueprints."""

from __future__ import annotations

import logging

from flask import Flask

logger = logging.getLogger(__name__)


def init_app(app: Flask) -> None:
    """Mount every v1 blueprint beneath ``{API_BASE_PREFIX}/v1``.

    Relative prefixes in the registry start with ``/`` or are empty; the
    health blueprint uses the empty one and answers at the version root.
    """
    from product_api.api.v1 import API_VERSION, REGISTRY

    base = app.config.get("API_BASE_PREFIX", "/api").rstrip("/")
    version_root = f"{base}/{API_VERSION}"
    for bp, rel_prefix in REGISTRY:
        url_prefix = version_root + rel_prefix.rstrip("/")
        app.register_blueprint(bp, url_prefix=url_prefix)
        logger.debug("Mounted blueprint %s at %s", bp.name, url_prefix)


__all__ = ["init_app"]
