"""Uniqueness and password hooks for the user lifecycle."""

from __future__ import annotations

import logging

from petcare.models.user import User
from petcare.services._shared.errors import BadRequestError, UniquenessViolationError
from petcare.services._shared.ports import PasswordHasher, UserDirectory
from petcare.uow.sqlalchemy_uow import SQLAlchemyRepositoryContainer

log = logging.getLogger(__name__)

ENTITY = "User"


class UserValidator:
    """
    Validate users before they are written.

    * On create: require a password, enforce identifier, login and email
      uniqueness among active users, then hash the password.
    * On update: keep the stored person id and password hash, take the role
      from the payload, and re-check uniqueness only for values that changed.

    :param hasher: Password hashing port.
    """

    def __init__(self, hasher: PasswordHasher) -> None:
        self.hasher = hasher

    def validate_before_save(self, entity: User, repos: SQLAlchemyRepositoryContainer) -> None:
        directory: UserDirectory = repos.users
        raw = entity.pending_password
        if not raw:
            raise BadRequestError("Password is required")

        entity.person.id = None
        self.check_identifier(directory, entity.person.identifier)
        self.check_login(directory, entity.login)
        self.check_email(directory, entity.email)

        entity.password_hash = self.hasher.hash(raw)
        entity.pending_password = None

    def validate_before_update(
        self, candidate: User, existing: User, repos: SQLAlchemyRepositoryContainer
    ) -> None:
        directory: UserDirectory = repos.users

        candidate.person.id = existing.person.id
        candidate.password_hash = existing.password_hash
        # Passwords are never changed through a profile update.
        candidate.pending_password = None

        if candidate.person.identifier != existing.person.identifier:
            self.check_identifier(directory, candidate.person.identifier, exclude_id=existing.id)
        if candidate.login != existing.login:
            self.check_login(directory, candidate.login, exclude_id=existing.id)
        if candidate.email != existing.email:
            self.check_email(directory, candidate.email, exclude_id=existing.id)

    # ---------------------------- individual checks ----------------------------

    @staticmethod
    def check_identifier(
        directory: UserDirectory, identifier: str, *, exclude_id: int | None = None
    ) -> None:
        if directory.exists_by_identifier(identifier, exclude_id=exclude_id):
            log.info("Rejected duplicate identifier")
            raise UniquenessViolationError(ENTITY, "identifier", identifier)

    @staticmethod
    def check_login(directory: UserDirectory, login: str, *, exclude_id: int | None = None) -> None:
        if directory.exists_by_login(login, exclude_id=exclude_id):
            log.info("Rejected duplicate login %s", login)
            raise UniquenessViolationError(ENTITY, "login", login)

    @staticmethod
    def check_email(directory: UserDirectory, email: str, *, exclude_id: int | None = None) -> None:
        if directory.exists_by_email(email, exclude_id=exclude_id):
            log.info("Rejected duplicate email %s", email)
            raise UniquenessViolationError(ENTITY, "email", email)
