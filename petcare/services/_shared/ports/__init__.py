"""
petcare.services._shared.ports
==============================

Collection of *ports* (hexagonal interfaces) the service layer depends on.

Modules
-------
- :mod:`token_codec`:
    Defines :class:`~.TokenCodec`, signing and verification of HMAC tokens.

- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher`, one-way credential hashing.

- :mod:`refresh_token_store`:
    Defines :class:`~.RefreshTokenStore`, persistence of refresh token
    records with an atomic claim.

- :mod:`user_directory`:
    Defines :class:`~.UserDirectory`, lookups of active users.

Design Notes
------------
Concrete adapters live under ``petcare.infra`` (codec, hasher) and
``petcare.repositories`` (store, directory).
"""

from __future__ import annotations

from .password_hasher import PasswordHasher
from .refresh_token_store import RefreshTokenStore
from .token_codec import TokenCodec
from .user_directory import UserDirectory

__all__ = [
    "PasswordHasher",
    "RefreshTokenStore",
    "TokenCodec",
    "UserDirectory",
]
