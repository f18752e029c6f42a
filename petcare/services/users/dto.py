# petcare/services/users/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from petcare.models.enums import Role


@dataclass(frozen=True, slots=True)
class PersonDTO:
    """
    Personal data of a user.

    :param id: Person identifier (``None`` when creating).
    :type id: int | None
    :param name: Full name.
    :type name: str
    :param identifier: National document number.
    :type identifier: str
    :param phone_number: Contact phone.
    :type phone_number: str | None
    :param birth_date: Date of birth.
    :type birth_date: date | None
    """

    id: int | None
    name: str
    identifier: str
    phone_number: str | None = None
    birth_date: date | None = None


@dataclass(frozen=True, slots=True)
class UserDTO:
    """
    User payload for create/update and the shape returned by the service.

    :param id: User identifier (``None`` when creating).
    :type id: int | None
    :param person: Personal data.
    :type person: PersonDTO
    :param login: Credential name.
    :type login: str
    :param email: Contact email.
    :type email: str
    :param role: Granted role.
    :type role: Role
    :param password: Plaintext password on input; always ``None`` on output.
    :type password: str | None
    """

    id: int | None
    person: PersonDTO
    login: str
    email: str
    role: Role = Role.USER
    password: str | None = None


@dataclass(frozen=True, slots=True)
class UserDetailsOut:
    """
    Flattened user profile.

    :param id: User identifier.
    :param name: Person name.
    :param identifier: Person document number.
    :param email: Contact email.
    :param phone_number: Contact phone.
    :param birth_date: Date of birth.
    :param role: Granted role.
    :param login: Credential name.
    """

    id: int
    name: str
    identifier: str
    email: str
    phone_number: str | None
    birth_date: date | None
    role: Role
    login: str


@dataclass(frozen=True, slots=True)
class RoleOut:
    """
    A role with its human description.

    :param name: Role name (``ADMIN``, ``USER``...).
    :param description: Human-readable label.
    """

    name: str
    description: str
