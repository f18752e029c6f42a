# petcare/infra/security/werkzeug_password_hasher.py
from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from petcare.services._shared.ports import PasswordHasher


@dataclass(frozen=True, slots=True)
class WerkzeugPasswordHasher(PasswordHasher):
    """
    :class:`PasswordHasher` backed by ``werkzeug.security``.

    :param method: Hashing method understood by ``generate_password_hash``.
    """

    method: str = "scrypt"

    def hash(self, raw: str) -> str:
        if not isinstance(raw, str) or not raw:
            raise ValueError("Password must be a non-empty string.")
        return generate_password_hash(raw, method=self.method)

    def verify(self, password_hash: str, raw: str) -> bool:
        if not password_hash or not raw:
            return False
        # ``check_password_hash`` is untyped; coerce for mypy.
        return bool(check_password_hash(password_hash, raw))
