"""Application factory for the product API."""

from __future__ import annotations

from flask import Flask

from product_api.core import cors, errors, extensions
from product_api.core import logger as app_logging
from product_api.core.config import BaseConfig, get_config


def create_app(config: type[BaseConfig] | str | None = None) -> Flask:
    """Build the product API application.

    :param config: Config class or import path accepted by
        :meth:`flask.Config.from_object`; ``None`` selects by ``APP_ENV``.
    :returns: Application with the database, token provider, login rate
        limiter, request ids, CORS, routes and problem+json handlers wired.
    """
    app = Flask(__name__)
    app.config.from_object(get_config() if config is None else config)

    app_logging.configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    extensions.init_app(app)
    app_logging.init_app(app)
    cors.init_app(app)

    from product_api import api

    api.init_app(app)
    errors.init_app(app)

    return app
