# product_api/services/auth/service.py
from __future__ import annotations

import logging
from functools import lru_cache

from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from product_api.models.user import User
from product_api.repositories.user import UserRepository
from product_api.services._shared.base import BaseService, ServiceContext
from product_api.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    InvalidCredentialsError,
    ValidationError,
)
from product_api.services._shared.ports.token_provider import TokenProvider
from product_api.services.auth.dto import AuthOut, LoginIn, RegisterIn, UserOut

logger = logging.getLogger(__name__)

EMAIL_IN_USE = "Email already registered"


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # Compared against when the email is unknown so both login branches hash.
    return generate_password_hash("not-a-real-password")


def _to_out(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
    )


class AuthService(BaseService):
    """
    Authentication service: sign-up, credential login and "who am I".

    Tokens are issued through the injected :class:`TokenProvider`; the
    service never decodes them itself (the HTTP guard does).
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param token_provider: Adapter for issuing JWTs.
        :param ctx: Optional request-scoped context.
        """
        super().__init__(ctx=ctx)
        self.tokens = token_provider

    # ------------------------------------------------------------------ #
    # Register
    # ------------------------------------------------------------------ #

    def register(self, dto: RegisterIn) -> AuthOut:
        """
        Create an account and log it in.

        :param dto: Sign-up input.
        :returns: Profile plus a fresh token.
        :raises ConflictError: If the normalized email is taken.
        :raises ValidationError: If the model rejects a field.
        """
        with self.rw_uow() as uow:
            repo: UserRepository = uow.users
            if repo.exists_by_email(dto.email):
                raise ConflictError("User", EMAIL_IN_USE)
            try:
                user = repo.create(name=dto.name, email=dto.email, password=dto.password)
            except ValueError as exc:
                raise ValidationError({"body": [str(exc)]}) from exc
            except IntegrityError as exc:
                # Lost a race with a concurrent sign-up on the same email.
                raise ConflictError("User", EMAIL_IN_USE) from exc
            out = _to_out(user)

        logger.info("User registered", extra={"user_id": out.id})
        return AuthOut(user=out, token=self.tokens.issue(out.id, out.email))

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> AuthOut:
        """
        Verify credentials and issue a token.

        Unknown email and wrong password fail identically.

        :raises InvalidCredentialsError: On any credential mismatch.
        """
        with self.ro_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get_by_email(dto.email)
            if user is None:
                check_password_hash(_dummy_hash(), dto.password)
                raise InvalidCredentialsError()
            if not user.verify_password(dto.password):
                raise InvalidCredentialsError()
            out = _to_out(user)

        logger.info("User logged in", extra={"user_id": out.id})
        return AuthOut(user=out, token=self.tokens.issue(out.id, out.email))

    # ------------------------------------------------------------------ #
    # Whoami
    # ------------------------------------------------------------------ #

    def whoami(self) -> UserOut:
        """
        Return the profile of the authenticated actor.

        :raises AuthenticationError: No actor, or the account no longer exists.
        """
        actor_id = self.require_actor()
        with self.ro_uow() as uow:
            user = uow.users.get(actor_id)
            if user is None:
                raise AuthenticationError("User no longer exists")
            return _to_out(user)
