# petcare/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for authentication.

    :param login: User login.
    :type login: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    login: str
    password: str


@dataclass(frozen=True, slots=True)
class RefreshIn:
    """
    Input DTO for token refresh.

    :param refresh_token: Encoded refresh JWT.
    :type refresh_token: str
    """

    refresh_token: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class TokenPairOut:
    """
    Output DTO with access and refresh tokens.

    :param access_token: Encoded access JWT.
    :type access_token: str
    :param refresh_token: Encoded refresh JWT.
    :type refresh_token: str
    """

    access_token: str
    refresh_token: str


# ---------------------------- Config DTO ---------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    """
    Token emission configuration.

    :param access_expires: Access token lifetime (24 minutes by default).
    :type access_expires: timedelta
    :param refresh_expires: Refresh token lifetime.
    :type refresh_expires: timedelta
    :param reuse_window: Maximum age of a stored refresh record that may
        still be exchanged, independent of the token's own ``exp``.
    :type reuse_window: timedelta
    """

    access_expires: timedelta = timedelta(minutes=24)
    refresh_expires: timedelta = timedelta(hours=24)
    reuse_window: timedelta = timedelta(minutes=5)
