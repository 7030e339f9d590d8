"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Flask, current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

from product_api.core.config import PLACEHOLDER_JWT_SECRET, parse_duration

if TYPE_CHECKING:
    from product_api.infra.jwt import JWTTokenProvider, TokenConfig

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
migrate = Migrate(render_as_batch=True)
limiter = Limiter(key_func=get_remote_address)

TOKEN_PROVIDER_KEY = "token_provider"


def build_token_config(config: dict) -> TokenConfig:
    """Build the immutable token settings from a Flask config mapping.

    Parameters
    ----------
    config: dict
        Application config holding ``JWT_SECRET_KEY``, ``JWT_EXPIRES_IN``
        and ``JWT_ALGORITHM``.

    Raises
    ------
    RuntimeError
        When a production app still carries the placeholder secret.
    """
    from product_api.infra.jwt import TokenConfig

    secret = config.get("JWT_SECRET_KEY") or ""
    if not secret:
        raise RuntimeError("JWT_SECRET_KEY must be configured.")
    if secret == PLACEHOLDER_JWT_SECRET and not (config.get("DEBUG") or config.get("TESTING")):
        raise RuntimeError("Refusing to start with the placeholder JWT_SECRET_KEY.")
    return TokenConfig(
        secret=secret,
        expires=parse_duration(config.get("JWT_EXPIRES_IN", "1d")),
        algorithm=config.get("JWT_ALGORITHM", "HS256"),
    )


def init_app(app: Flask) -> None:
    """Initialize SQLAlchemy, migrations, rate limiting and the token provider.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. This call imports the
        :mod:`product_api.models` package to ensure SQLAlchemy metadata is
        ready for migrations.
    """
    db.init_app(app)

    # Ensure models are imported so Alembic sees metadata
    from product_api import models as _models  # noqa: F401

    migrate.init_app(app, db)
    limiter.init_app(app)

    from product_api.infra.jwt import JWTTokenProvider

    app.extensions[TOKEN_PROVIDER_KEY] = JWTTokenProvider(build_token_config(app.config))


def get_token_provider() -> JWTTokenProvider:
    """Return the token provider registered on the current application."""
    provider = current_app.extensions.get(TOKEN_PROVIDER_KEY)
    if provider is None:
        raise RuntimeError("Token provider is not initialized. Call init_app() first.")
    return provider
