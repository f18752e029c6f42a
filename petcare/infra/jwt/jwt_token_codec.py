# petcare/infra/jwt/jwt_token_codec.py
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from petcare.services._shared.errors import TokenMalformedError
from petcare.services._shared.ports import TokenCodec


class JWTTokenCodec(TokenCodec):
    """
    HS256 implementation of :class:`TokenCodec` on top of PyJWT.

    The secret is the same one ``flask-jwt-extended`` uses to verify bearer
    tokens, so access tokens minted here are accepted by ``require_auth``.

    Parsing never enforces ``exp``: expiry is judged separately by
    :meth:`is_currently_valid` so that claims of an expired token can still
    be inspected.
    """

    ALGORITHM = "HS256"

    def __init__(self, secret_key: str) -> None:
        self._secret_key = secret_key

    def sign(self, claims: dict[str, Any], subject: str, ttl: timedelta) -> str:
        """
        Sign ``claims`` for ``subject``.

        :param claims: Extra claims (must not override ``sub``/``iat``/``exp``).
        :param subject: Value of the ``sub`` claim.
        :param ttl: Lifetime; ``exp = iat + ttl``.
        :returns: Encoded compact JWT.
        :raises ValueError: If the secret is empty.
        """
        if not self._secret_key:
            raise ValueError("JWT secret key cannot be empty")
        now = datetime.now(UTC)
        payload: dict[str, Any] = dict(claims)
        payload.update({"sub": subject, "iat": now, "exp": now + ttl})
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_and_parse(self, token: str) -> dict[str, Any]:
        if not self._secret_key:
            raise TokenMalformedError("Token secret is not configured")
        try:
            return jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"verify_exp": False, "require": ["sub", "exp"]},
            )
        except jwt.InvalidTokenError as exc:
            raise TokenMalformedError(f"Invalid token: {exc}") from exc

    def extract_claim(self, token: str, name: str) -> Any:
        return self.verify_and_parse(token).get(name)

    def extract_subject(self, token: str) -> str:
        subject = self.extract_claim(token, "sub")
        if not isinstance(subject, str) or not subject:
            raise TokenMalformedError("Token subject is missing")
        return subject

    def is_currently_valid(self, token: str, expected_subject: str) -> bool:
        try:
            claims = self.verify_and_parse(token)
        except TokenMalformedError:
            return False
        if claims.get("sub") != expected_subject:
            return False
        try:
            expires_at = float(claims["exp"])
        except (TypeError, ValueError):
            return False
        return expires_at > datetime.now(UTC).timestamp()
