"""Authentication endpoints using the service layer."""

from __future__ import annotations

from flask import Blueprint, current_app

from product_api.api.deps import (
    json_body,
    json_response,
    require_auth,
    service_context,
    timing,
)
from product_api.core.extensions import get_token_provider, limiter
from product_api.schemas import (
    AuthResponseSchema,
    LoginSchema,
    RegisterSchema,
    UserSchema,
)
from product_api.services.auth import AuthService, LoginIn, RegisterIn

bp = Blueprint("auth", __name__)

register_schema = RegisterSchema()
login_schema = LoginSchema()
user_schema = UserSchema()
auth_schema = AuthResponseSchema()


def _login_rate_limit() -> str:
    return str(current_app.config.get("AUTH_LOGIN_RATE_LIMIT", "5 per minute"))


def _service() -> AuthService:
    return AuthService(token_provider=get_token_provider(), ctx=service_context())


@bp.post("/register")
@timing
def register():
    """Register a new user and log them in."""

    data = register_schema.load(json_body())
    result = _service().register(RegisterIn(**data))
    return json_response(auth_schema.dump(result), status=201)


@bp.post("/login")
@limiter.limit(_login_rate_limit)
@timing
def login():
    """Authenticate credentials and issue a bearer token."""

    data = login_schema.load(json_body())
    result = _service().login(LoginIn(**data))
    return json_response(auth_schema.dump(result))


@bp.get("/me")
@require_auth
@timing
def whoami():
    """Return the authenticated user's profile."""

    return json_response(user_schema.dump(_service().whoami()))
