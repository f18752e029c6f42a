# petcare/services/auth/service.py
from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from typing import NoReturn

from petcare.models.user import User
from petcare.services._shared.base import BaseService, ServiceContext
from petcare.services._shared.errors import (
    InternalServiceError,
    InvalidCredentialsError,
    ServiceError,
    TokenInvalidError,
    TokenMalformedError,
)
from petcare.services._shared.ports import (
    PasswordHasher,
    RefreshTokenStore,
    TokenCodec,
    UserDirectory,
)
from petcare.services.auth.dto import AuthTokenConfig, LoginIn, RefreshIn, TokenPairOut

log = logging.getLogger(__name__)


class AuthService(BaseService):
    """
    Token lifecycle service (authenticate / refresh).

    Each operation is a single read-write unit of work: every refresh record
    of the user is invalidated and the new one is stored in the same
    transaction, so a user holds at most one exchangeable refresh token.

    A refresh is accepted only if all of the following hold:

    * the token verifies and its ``exp`` is in the future;
    * a stored record with that exact token belongs to the subject;
    * the record is unused and at most ``reuse_window`` old.

    The last two are enforced by :meth:`RefreshTokenStore.claim`, a single
    conditional ``UPDATE``. Of two concurrent refreshes presenting the same
    token only the one whose update affects the row proceeds.
    """

    def __init__(
        self,
        *,
        token_codec: TokenCodec,
        password_hasher: PasswordHasher,
        token_cfg: AuthTokenConfig | None = None,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param token_codec: Adapter signing and verifying JWTs.
        :param password_hasher: Adapter verifying stored password hashes.
        :param token_cfg: Token lifetimes and refresh reuse window.
        :param ctx: Request-scoped context.
        """
        super().__init__(ctx=ctx)
        self.tokens = token_codec
        self.hasher = password_hasher
        self.cfg = token_cfg or AuthTokenConfig()

    # ------------------------------------------------------------------ #
    # Authenticate
    # ------------------------------------------------------------------ #

    def authenticate(self, dto: LoginIn) -> TokenPairOut:
        """
        Verify credentials and issue a fresh token pair.

        :param dto: Login input.
        :returns: Access/refresh token pair.
        :raises InvalidCredentialsError: Unknown login or wrong password.
        """
        with self.rw_uow() as uow:
            users: UserDirectory = uow.users
            user = users.get_by_login(dto.login)
            if user is None or not self.hasher.verify(user.password_hash, dto.password):
                log.warning("Authentication failed for login %s", dto.login)
                raise InvalidCredentialsError()

            pair = self._rotate(uow.refresh_tokens, user)

        log.info("User %s authenticated", user.login, extra={"actor": user.login})
        return pair

    # ------------------------------------------------------------------ #
    # Refresh
    # ------------------------------------------------------------------ #

    def refresh(self, dto: RefreshIn) -> TokenPairOut:
        """
        Exchange a refresh token for a new pair.

        :param dto: Refresh input.
        :returns: New access/refresh token pair.
        :raises TokenInvalidError: Malformed, expired, unknown, used or stale token.
        :raises InternalServiceError: Unexpected codec or storage failure.
        """
        token = dto.refresh_token
        try:
            login = self.tokens.extract_subject(token)
        except TokenMalformedError as exc:
            log.warning("Refresh rejected: malformed token", extra={"reason": "malformed"})
            raise TokenInvalidError() from exc

        try:
            with self.rw_uow() as uow:
                user = uow.users.get_by_login(login)
                if user is None:
                    self._reject(login, "unknown_subject")
                if not self.tokens.is_currently_valid(token, login):
                    self._reject(login, "expired")

                store: RefreshTokenStore = uow.refresh_tokens
                now = self.now_utc()
                claimed = store.claim(
                    token=token, owner_id=user.id, not_before=now - self.cfg.reuse_window
                )
                if not claimed:
                    self._reject(login, self._claim_failure_reason(store, token, user.id, now))

                pair = self._rotate(store, user)
        except ServiceError:
            raise
        except Exception as exc:
            log.exception("Refresh failed unexpectedly for %s", login)
            raise InternalServiceError("Unable to refresh token") from exc

        log.info("Tokens refreshed for %s", login, extra={"actor": login})
        return pair

    # ------------------------------------------------------------------ #
    # Token minting
    # ------------------------------------------------------------------ #

    def mint_access_token(self, user: User) -> str:
        """
        Sign an access token for ``user``.

        Claims: ``id`` (as string), ``name``, ``email`` and ``role``, the
        comma-joined authorities of the user.
        """
        claims = {
            "id": str(user.id),
            "name": user.person.name,
            "email": user.email,
            "role": ",".join([user.role.authority]),
        }
        return self.tokens.sign(claims, user.login, self.cfg.access_expires)

    def mint_refresh_token(self, login: str) -> str:
        # Wire format is sub/iat/exp plus a random jti carrying no user data.
        # Without it two tokens minted in the same second are the same string
        # and a consumed token would be exchangeable again (DESIGN.md,
        # "Distinct refresh tokens").
        return self.tokens.sign({"jti": uuid.uuid4().hex}, login, self.cfg.refresh_expires)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _rotate(self, store: RefreshTokenStore, user: User) -> TokenPairOut:
        """Invalidate every record of ``user`` and store a freshly minted one."""
        store.invalidate_all_for_owner(user.id)
        access = self.mint_access_token(user)
        refresh = self.mint_refresh_token(user.login)
        store.create(token=refresh, owner_id=user.id, created_at=self.now_utc())
        return TokenPairOut(access_token=access, refresh_token=refresh)

    def _claim_failure_reason(
        self, store: RefreshTokenStore, token: str, owner_id: int, now: datetime
    ) -> str:
        record = store.find_by_token(token)
        if record is None or record.owner_id != owner_id:
            return "unknown_token"
        if record.used:
            return "already_used"
        if not record.is_valid(now, self.cfg.reuse_window):
            return "stale"
        # Consumed by a concurrent refresh between the claim and this lookup.
        return "already_used"

    @staticmethod
    def _reject(login: str, reason: str) -> NoReturn:
        log.warning(
            "Refresh rejected for %s: %s", login, reason, extra={"actor": login, "reason": reason}
        )
        raise TokenInvalidError()

    @staticmethod
    def now_utc() -> datetime:
        return datetime.now(UTC)
