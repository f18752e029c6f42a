"""Authentication service layer exposing token lifecycle use cases and DTOs."""

from __future__ import annotations

from .dto import AuthTokenConfig, LoginIn, RefreshIn, TokenPairOut
from .service import AuthService

__all__ = ["AuthService", "AuthTokenConfig", "LoginIn", "RefreshIn", "TokenPairOut"]
