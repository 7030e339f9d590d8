"""Unit tests for the PyJWT-backed token provider."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time
from product_api.infra.jwt import JWTTokenProvider, TokenConfig
from product_api.services._shared.errors import InvalidTokenError
from product_api.services._shared.ports import TokenClaims

SECRET = "unit-test-secret-0123456789-abcdefghijklmnop"


@pytest.fixture()
def config() -> TokenConfig:
    return TokenConfig(secret=SECRET, expires=timedelta(hours=1))


@pytest.fixture()
def provider(config) -> JWTTokenProvider:
    return JWTTokenProvider(config)


def test_issue_then_verify_returns_claims(provider):
    token = provider.issue(12, "a@example.com")

    assert provider.verify(token) == TokenClaims(subject="12", email="a@example.com")


def test_token_carries_iat_and_exp(config):
    now = datetime.now(UTC).replace(microsecond=0)
    provider = JWTTokenProvider(config, clock=lambda: now)

    payload = jwt.decode(provider.issue(1, "a@example.com"), SECRET, algorithms=["HS256"])

    assert payload["sub"] == "1"
    assert payload["iat"] == int(now.timestamp())
    assert payload["exp"] - payload["iat"] == 3600


def test_tampered_token_is_rejected(provider):
    token = provider.issue(1, "a@example.com")
    header, payload, signature = token.split(".")
    forged = ".".join([header, payload, signature[::-1]])

    with pytest.raises(InvalidTokenError):
        provider.verify(forged)


def test_token_signed_with_other_secret_is_rejected(provider, config):
    other = JWTTokenProvider(TokenConfig(secret=SECRET + "-other", expires=config.expires))

    with pytest.raises(InvalidTokenError):
        provider.verify(other.issue(1, "a@example.com"))


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_malformed_tokens_are_rejected(provider, token):
    with pytest.raises(InvalidTokenError):
        provider.verify(token)


def test_missing_claims_are_rejected(provider):
    now = int(datetime.now(UTC).timestamp())
    token = jwt.encode({"sub": "1", "iat": now, "exp": now + 60}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        provider.verify(token)


def test_expired_token_is_rejected_with_injected_clock(config):
    past = datetime.now(UTC) - timedelta(hours=2)
    issued = JWTTokenProvider(config, clock=lambda: past).issue(1, "a@example.com")

    with pytest.raises(InvalidTokenError):
        JWTTokenProvider(config).verify(issued)


def test_token_expires_after_configured_lifetime(provider):
    with freeze_time("2025-03-01 10:00:00"):
        token = provider.issue(5, "b@example.com")

    with freeze_time("2025-03-01 10:59:00"):
        assert provider.verify(token).subject == "5"

    with freeze_time("2025-03-01 11:00:01"):
        with pytest.raises(InvalidTokenError):
            provider.verify(token)
