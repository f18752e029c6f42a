"""User and Person models."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Index, String
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from petcare.core.extensions import db

from .base import PKMixin, ReprMixin, SoftDeleteMixin, TimestampMixin
from .enums import Role

if TYPE_CHECKING:
    from .refresh_token import RefreshToken


class Person(PKMixin, ReprMixin, SoftDeleteMixin, TimestampMixin, db.Model):
    """
    Personal data attached 1:1 to a :class:`User`.

    Fields
    ------
    name : str
        Full name.
    identifier : str
        National document number. Unique among active users, enforced by the
        user validator rather than by a database constraint so that
        soft-deleted rows release the value.
    phone_number : str | None
        Contact phone.
    birth_date : date | None
        Date of birth.
    """

    __tablename__ = "persons"

    name: Mapped[str] = mapped_column(String(120), nullable=False)
    identifier: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    phone_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    user: Mapped[User] = relationship(back_populates="person", uselist=False)

    @validates("identifier")
    def _normalize_identifier(self, key: str, value: str) -> str:
        """
        Trim the identifier.

        :raises ValueError: If the identifier is blank.
        """
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Identifier is required.")
        return value.strip()


class User(PKMixin, ReprMixin, SoftDeleteMixin, TimestampMixin, db.Model):
    """
    Authentication identity.

    Fields
    ------
    login : str
        Credential name, used as the token subject.
    email : str
        Contact email. Stored normalized (lowercase, trimmed).
    password_hash : str
        One-way hash of the password; never serialized.
    role : Role
        Single role granted to the user.
    person : Person
        Personal data, created and soft-deleted together with the user.

    Notes
    -----
    Login, email and the person identifier must be unique among *active*
    users only, so no database unique constraint is declared on them.
    """

    __tablename__ = "users"

    login: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(
        SAEnum(Role, name="user_role", native_enum=False, length=20),
        nullable=False,
        default=Role.USER,
    )
    person_id: Mapped[int] = mapped_column(ForeignKey("persons.id"), nullable=False, unique=True)

    person: Mapped[Person] = relationship(
        back_populates="user",
        cascade="all",
        lazy="joined",
    )
    refresh_tokens: Mapped[list[RefreshToken]] = relationship(
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="noload",
    )

    __table_args__ = (
        Index("ix_users_login_active", "login", "active"),
        Index("ix_users_email_active", "email", "active"),
    )

    # Plaintext staged by the mapper for the validator to hash; never persisted.
    pending_password = None

    @validates("email")
    def _normalize_email(self, key: str, value: str) -> str:
        """
        Normalize and validate email.

        :param key: Field name (``email``).
        :type key: str
        :param value: Email to normalize.
        :type value: str
        :returns: Normalized email (lowercased/trimmed).
        :rtype: str
        :raises ValueError: If email is missing or malformed.
        """
        if not value or not isinstance(value, str):
            raise ValueError("Email is required.")
        v = value.strip().lower()
        # Minimal sanity check; full validation happens at API layer.
        if "@" not in v or "." not in v.split("@")[-1]:
            raise ValueError("Email format looks invalid.")
        return v

    @validates("login")
    def _normalize_login(self, key: str, value: str) -> str:
        """
        Trim the login.

        :raises ValueError: If login is missing or only whitespace.
        """
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Login is required.")
        return value.strip()
