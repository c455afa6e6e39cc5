"""Command group: user registration through injected collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from solidctl.commands._base import SolidGroup
from solidctl.domain.errors import InvalidArgument

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext


def _parse_user(spec: str) -> tuple[str, int, str]:
    """Split ``NAME,AGE,EMAIL`` into its typed parts."""
    parts = [p.strip() for p in spec.split(",")]
    if len(parts) != 3:
        raise InvalidArgument(f"User {spec!r} must look like NAME,AGE,EMAIL", user=spec)
    name, age, email = parts
    try:
        age_value = int(age)
    except ValueError:
        raise InvalidArgument(f"Age {age!r} is not an integer", field="age", value=age) from None
    return name, age_value, email


@click.group(
    cls=SolidGroup,
    examples="""\
  solidctl users register --user "Ada,36,ada@example.com" --user "Linus,12,linus@example.com"
  solidctl --json users register --user 'Grace,85,grace@example.com'""",
)
def users() -> None:
    """Register users via a repository and a logger contract."""


@users.command(
    examples="""\
  solidctl users register --user "Ada,36,ada@example.com"
  SOLIDCTL_USERS__REPOSITORY=sql solidctl users register --user 'Lin,12,lin@example.com'""",
)
@click.option("--user", "user_specs", multiple=True, required=True, help="NAME,AGE,EMAIL")
@click.pass_obj
def register(app: AppContext, user_specs: tuple[str, ...]) -> None:
    """Register each --user in order; stops at the first rejected user."""
    from solidctl.services.contracts import UsersData, dump_validated, user_item

    repository = app.user_repository()
    svc = app.user_service(repository)

    def _run() -> dict[str, Any]:
        for spec in user_specs:
            svc.register(*_parse_user(spec))
        items = [user_item(u) for u in repository.all()]
        return dump_validated(UsersData, {"count": len(items), "items": items})

    meta = {"repository": app.settings.users.repository}
    app.emit(app.run("users_register", _run, meta=meta))
