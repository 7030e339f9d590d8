# tests/unit/services/test_auth_service.py
from __future__ import annotations

import pytest
from product_api.models.user import User
from product_api.services._shared.base import ServiceContext
from product_api.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    InvalidCredentialsError,
)
from product_api.services.auth.dto import AuthOut, LoginIn, RegisterIn
from product_api.services.auth.service import AuthService
from tests.factories.user import UserFactory


# ------------------------------ Fixtures ---------------------------------- #
@pytest.fixture()
def service(token_provider) -> AuthService:
    """Build an AuthService wired to the app's token provider."""
    return AuthService(token_provider=token_provider)


# -------------------------------- Tests ----------------------------------- #
def test_register_persists_hashed_user_and_issues_token(service, session, token_provider):
    out = service.register(RegisterIn(name="Ada", email="Ada@Example.com", password="secret1"))

    assert isinstance(out, AuthOut)
    assert out.user.email == "ada@example.com"
    claims = token_provider.verify(out.token)
    assert claims.subject == str(out.user.id)
    assert claims.email == "ada@example.com"

    stored = session.get(User, out.user.id)
    assert stored.password_hash != "secret1"
    assert stored.verify_password("secret1")


def test_register_duplicate_email_is_conflict(service):
    UserFactory(email="taken@example.com")

    with pytest.raises(ConflictError):
        service.register(RegisterIn(name="X", email="TAKEN@example.com", password="secret1"))


def test_login_returns_profile_and_token(service, token_provider):
    user = UserFactory(email="log@example.com", password="right-pass")

    out = service.login(LoginIn(email="log@example.com", password="right-pass"))

    assert out.user.id == user.id
    assert token_provider.verify(out.token).subject == str(user.id)


def test_login_failures_are_indistinguishable(service):
    UserFactory(email="known@example.com", password="right-pass")

    with pytest.raises(InvalidCredentialsError) as unknown:
        service.login(LoginIn(email="nobody@example.com", password="right-pass"))
    with pytest.raises(InvalidCredentialsError) as wrong:
        service.login(LoginIn(email="known@example.com", password="wrong-pass"))

    assert str(unknown.value) == str(wrong.value) == "Invalid credentials"


def test_whoami_returns_profile(token_provider):
    user = UserFactory(name="Grace")
    svc = AuthService(token_provider=token_provider, ctx=ServiceContext(actor_id=user.id))

    me = svc.whoami()

    assert (me.id, me.name, me.email) == (user.id, "Grace", user.email)


def test_whoami_for_vanished_user_is_unauthenticated(token_provider):
    svc = AuthService(token_provider=token_provider, ctx=ServiceContext(actor_id=12345))

    with pytest.raises(AuthenticationError):
        svc.whoami()


def test_whoami_without_actor_is_unauthenticated(service):
    with pytest.raises(AuthenticationError):
        service.whoami()
