"""DTO ↔ entity translation for users."""

from __future__ import annotations

from petcare.models.user import Person, User
from petcare.services.users.dto import PersonDTO, UserDetailsOut, UserDTO


class UserMapper:
    """Build transient :class:`User` graphs and project them back to DTOs.

    The password never leaves the service: :meth:`to_dto` always returns
    ``password=None``.
    """

    def to_entity(self, dto: UserDTO) -> User:
        person = Person(
            id=dto.person.id,
            name=dto.person.name,
            identifier=dto.person.identifier,
            phone_number=dto.person.phone_number,
            birth_date=dto.person.birth_date,
        )
        user = User(
            id=dto.id,
            login=dto.login,
            email=dto.email,
            role=dto.role,
            person=person,
        )
        user.pending_password = dto.password
        return user

    def to_dto(self, entity: User) -> UserDTO:
        person = entity.person
        return UserDTO(
            id=entity.id,
            person=PersonDTO(
                id=person.id,
                name=person.name,
                identifier=person.identifier,
                phone_number=person.phone_number,
                birth_date=person.birth_date,
            ),
            login=entity.login,
            email=entity.email,
            role=entity.role,
            password=None,
        )

    def to_details(self, entity: User) -> UserDetailsOut:
        person = entity.person
        return UserDetailsOut(
            id=entity.id,
            name=person.name,
            identifier=person.identifier,
            email=entity.email,
            phone_number=person.phone_number,
            birth_date=person.birth_date,
            role=entity.role,
            login=entity.login,
        )
