# petcare/services/users/service.py
from __future__ import annotations

import logging

from petcare.models.enums import Role
from petcare.models.user import User
from petcare.services._shared.base import ServiceContext
from petcare.services._shared.errors import BadRequestError
from petcare.services._shared.ports import PasswordHasher
from petcare.services.entities.service import EntityLifecycleService
from petcare.services.users.dto import RoleOut, UserDetailsOut, UserDTO
from petcare.services.users.mapper import UserMapper
from petcare.services.users.validator import UserValidator

log = logging.getLogger(__name__)


class UserService(EntityLifecycleService[User, UserDTO]):
    """
    User lifecycle on top of :class:`EntityLifecycleService`.

    Adds the path/payload id check on update and a few read-only lookups
    used by the registration and profile screens.
    """

    entity_name = "User"
    repository_name = "users"

    def __init__(self, *, password_hasher: PasswordHasher, ctx: ServiceContext | None = None) -> None:
        """
        :param password_hasher: Hashing port handed to the validator.
        :param ctx: Request-scoped context.
        """
        self.user_mapper = UserMapper()
        super().__init__(
            mapper=self.user_mapper,
            validator=UserValidator(password_hasher),
            ctx=ctx,
        )

    def update(self, entity_id: int, dto: UserDTO) -> UserDTO:
        """
        Update user ``entity_id``.

        :raises BadRequestError: If ``dto.id`` names a different user.
            Nothing is read from storage in that case.
        :raises NotFoundError: If no active user has ``entity_id``.
        :raises UniquenessViolationError: If a changed login, email or
            identifier is taken by another active user.
        """
        if dto.id is not None and dto.id != entity_id:
            raise BadRequestError(f"Payload id {dto.id} does not match path id {entity_id}")
        return super().update(entity_id, dto)

    # ------------------------------------------------------------------ #
    # Lookups
    # ------------------------------------------------------------------ #

    @staticmethod
    def list_roles() -> list[RoleOut]:
        return [RoleOut(name=role.name, description=role.description) for role in Role]

    def exists_by_email(self, email: str) -> bool:
        """
        Whether an active user already uses ``email``.

        :raises BadRequestError: If ``email`` is blank.
        """
        if not email or not email.strip():
            raise BadRequestError("Email is required")
        with self.ro_uow() as uow:
            return uow.users.exists_by_email(email)

    def find_details(self, entity_id: int) -> UserDetailsOut:
        """Flattened profile of the active user ``entity_id``."""
        with self.ro_uow() as uow:
            return self.user_mapper.to_details(self._load(uow, entity_id))
