"""UserService: registration split into validate, store, and log.

The service validates locally, then hands the user to the injected
repository and logger exactly once each. It never creates either
collaborator and never swallows their failures.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from solidctl.domain.users import User

if TYPE_CHECKING:
    from solidctl.domain.contracts import Logger, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Registers users through a repository and a logger contract.

    Usage::

        service = UserService(InMemoryUserRepository(), StructlogLogger())
        user = service.register("Ada", 36, "ada@example.com")
    """

    def __init__(self, repository: UserRepository, event_log: Logger) -> None:
        self._repository = repository
        self._event_log = event_log

    def register(self, name: object, age: object, email: object) -> User:
        """Validate and store a new user.

        Raises:
            InvalidArgument: blank name, bad age, or malformed email.
            InvalidState: the repository already holds this email.
        """
        user = User(name=name, age=age, email=email)  # type: ignore[arg-type]
        self._repository.add(user)
        self._event_log.log("user.registered", email=user.email, adult=user.is_adult())
        logger.debug("Registered user %s", user.email)
        return user
