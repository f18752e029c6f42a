from __future__ import annotations

from datetime import timedelta
from typing import Any, Protocol


class TokenCodec(Protocol):
    """
    Port for signing and verifying compact, HMAC-signed claim sets.

    Implementations raise :class:`~petcare.services._shared.errors.TokenMalformedError`
    from every parsing operation when the token cannot be verified.
    """

    def sign(self, claims: dict[str, Any], subject: str, ttl: timedelta) -> str:
        """Embed ``sub``, ``iat=now``, ``exp=now+ttl`` plus ``claims`` and sign."""
        ...

    def verify_and_parse(self, token: str) -> dict[str, Any]:
        """Verify the signature and return all claims, expired or not."""
        ...

    def extract_claim(self, token: str, name: str) -> Any:
        """Return one claim (``None`` when absent)."""
        ...

    def extract_subject(self, token: str) -> str:
        """Return the ``sub`` claim."""
        ...

    def is_currently_valid(self, token: str, expected_subject: str) -> bool:
        """``True`` iff the subject matches and ``exp`` is in the future."""
        ...
