"""Flask CLI commands for bootstrapping the database."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext

from petcare.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from petcare.models.enums import Role
from petcare.services._shared.base import ServiceContext
from petcare.services._shared.errors import ServiceError
from petcare.services.users.dto import PersonDTO, UserDTO
from petcare.services.users.service import UserService

LOGGER = logging.getLogger(__name__)


@click.group("seed")
@click.option("--verbose", is_flag=True, help="Enable verbose logging for seeding.")
def seed_cli(verbose: bool) -> None:
    """Collection of database seeding commands."""
    LOGGER.setLevel(logging.DEBUG if verbose else logging.INFO)


@seed_cli.command("admin")
@click.option("--login", required=True, help="Login of the administrator.")
@click.option("--email", required=True, help="Contact email.")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--name", default="Administrator", show_default=True, help="Full name.")
@click.option("--identifier", default="00000000000", show_default=True, help="Document number.")
@with_appcontext
def admin_command(login: str, email: str, password: str, name: str, identifier: str) -> None:
    """Create an ADMIN user through the regular user lifecycle."""
    hasher = WerkzeugPasswordHasher(
        method=current_app.config.get("PASSWORD_HASH_METHOD", "scrypt")
    )
    service = UserService(password_hasher=hasher, ctx=ServiceContext(actor_login="cli"))
    dto = UserDTO(
        id=None,
        person=PersonDTO(id=None, name=name, identifier=identifier),
        login=login,
        email=email,
        role=Role.ADMIN,
        password=password,
    )
    try:
        created = service.create(dto)
    except ServiceError as exc:
        raise click.ClickException(f"Seeding failed: {exc}") from exc
    LOGGER.debug("Seeded admin id=%s", created.id)
    click.echo(f"Created admin '{created.login}' (id={created.id})")
