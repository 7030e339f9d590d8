"""Unit tests for UserRepository."""

import pytest
from product_api.repositories.user import UserRepository
from tests.factories.user import UserFactory


class TestUserRepository:
    """Ensure ``UserRepository`` performs core persistence operations."""

    @pytest.fixture()
    def repo(self, session):
        return UserRepository(session=session)

    def test_create_hashes_password_and_normalizes_email(self, repo, session):
        user = repo.create(name="Alice", email="Alice@Example.COM", password="secret1")
        session.commit()

        assert user.id is not None
        assert user.email == "alice@example.com"
        assert user.verify_password("secret1")

    def test_get_by_email_is_case_insensitive(self, repo):
        u = UserFactory(email="bob@example.com")

        fetched = repo.get_by_email("  BOB@example.com")
        assert fetched is not None
        assert fetched.id == u.id

    def test_exists_by_email(self, repo):
        UserFactory(email="carol@example.com")

        assert repo.exists_by_email("Carol@Example.com")
        assert not repo.exists_by_email("nonexistent@example.com")

    def test_get_unknown_id_returns_none(self, repo):
        assert repo.get(999) is None
