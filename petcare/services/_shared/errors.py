"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never import Flask or HTTP
concepts. Each carries a stable ``kind`` that callers can branch on; the
message text is informational only.

The translation to HTTP responses (RFC 7807) is handled by
``petcare/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from repositories or domain logic.
    """

    kind: ClassVar[str] = "service_error"


class InvalidCredentialsError(ServiceError):
    """Raised when a login/password pair does not match an active user."""

    kind = "invalid_credentials"

    def __init__(self, message: str = "Invalid login or password") -> None:
        super().__init__(message)


class TokenMalformedError(ServiceError):
    """
    Raised by the token codec when a token cannot be verified or parsed.

    Bad signature, broken structure and unusable secret all end up here.
    """

    kind = "token_malformed"

    def __init__(self, message: str = "Malformed token") -> None:
        super().__init__(message)


class TokenInvalidError(ServiceError):
    """
    Raised when a refresh token cannot be exchanged.

    Covers malformed, expired, already-used, stale and unknown tokens alike.
    Retrying with the same token is pointless.
    """

    kind = "token_invalid"

    def __init__(self, message: str = "Refresh token is invalid") -> None:
        super().__init__(message)


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an active entity is not found in the repository.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    kind: ClassVar[str] = "not_found"

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class UniquenessViolationError(ServiceError):
    """
    Raised when a value must be unique among active rows but is already taken.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param field: Offending field (``login``, ``email``, ``identifier``).
    :type field: str
    :param value: The duplicated value.
    :type value: str
    """

    kind: ClassVar[str] = "uniqueness_violation"

    entity: str
    field: str
    value: str

    def __str__(self) -> str:
        return f"{self.entity} with {self.field} '{self.value}' already exists"


class BadRequestError(ServiceError):
    """Raised when the request contradicts itself (e.g. path id vs payload id)."""

    kind = "bad_request"


class InternalServiceError(ServiceError):
    """
    Raised for unexpected faults (codec or storage failures) inside a use case.

    The original exception is chained as ``__cause__``.
    """

    kind = "internal_error"

    def __init__(self, message: str = "Internal error") -> None:
        super().__init__(message)
