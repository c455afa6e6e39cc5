"""``AppContext``: the composition root handed to every command.

The root group stores one on ``ctx.obj``; commands receive it with
``@click.pass_obj``, ask it for services wired from settings, and hand
the ServiceResult back to :meth:`AppContext.emit`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from solidctl.domain.errors import SolidError
from solidctl.output.formatters import OutputSettings, format_result
from solidctl.services.result import ServiceResult, failure, success

if TYPE_CHECKING:
    from solidctl.config.settings import SolidSettings
    from solidctl.domain.contracts import Logger, UserRepository
    from solidctl.plugins.manager import PluginManager
    from solidctl.services.accounts import AccountService
    from solidctl.services.orders import OrderService
    from solidctl.services.users import UserService

logger = logging.getLogger(__name__)


class AppContext:
    """Settings plus lazily built collaborators for one CLI invocation.

    Nothing touches plugins or the database until a command asks, so
    ``--help`` and ``--version`` stay cheap.
    """

    def __init__(self, settings: SolidSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        self._event_log: Logger | None = None

        from solidctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def load_plugins(self) -> PluginManager:
        """Discover and load plugins once; later calls return the same manager."""
        if self._plugins is None:
            from solidctl.plugins.manager import PluginManager

            self._plugins = PluginManager()
            if self.settings.plugins.enabled:
                local_dir = self.settings.plugins.local_dir
                self._plugins.discover_and_load(
                    local_dir=Path(local_dir) if local_dir else None,
                )
        return self._plugins

    @property
    def event_log(self) -> Logger:
        if self._event_log is None:
            from solidctl.infrastructure.loggers import StructlogLogger

            self._event_log = StructlogLogger()
        return self._event_log

    def account_service(self) -> AccountService:
        from solidctl.services.accounts import AccountService

        return AccountService(self.event_log)

    def user_repository(self) -> UserRepository:
        """A fresh repository owned by the caller, per ``[users] repository``."""
        if self.settings.users.repository == "sql":
            from solidctl.infrastructure.database.engine import init_database
            from solidctl.infrastructure.repositories import SqlUserRepository

            return SqlUserRepository(init_database(self.settings.users.database_url))

        from solidctl.infrastructure.repositories import InMemoryUserRepository

        return InMemoryUserRepository()

    def user_service(self, repository: UserRepository) -> UserService:
        from solidctl.services.users import UserService

        return UserService(repository, self.event_log)

    def order_service(self, processor_name: str | None = None) -> OrderService:
        """Build an OrderService for *processor_name* (default from settings).

        Raises:
            InvalidArgument: If no processor is registered under the name.
        """
        from solidctl.infrastructure.payments import create_payment_processor
        from solidctl.services.orders import OrderService

        self.load_plugins()
        payments = self.settings.payments
        processor = create_payment_processor(
            processor_name or payments.processor,
            limit=payments.limit,
        )
        return OrderService(processor, self.event_log, currency=self.settings.account.currency)

    # ------------------------------------------------------------------
    # Execution and output
    # ------------------------------------------------------------------

    @property
    def plugin_warnings(self) -> list[str]:
        """Warnings from plugin loading, empty when plugins were never loaded."""
        return self._plugins.warnings if self._plugins is not None else []

    def run(
        self,
        op: str,
        action: Callable[[], dict[str, Any]],
        *,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Run *action* and wrap its payload, turning domain failures into results.

        Only :class:`SolidError` is converted; anything else propagates.
        A success carries any plugin warnings and the given *meta*.
        """
        try:
            data = action()
        except SolidError as exc:
            logger.debug("%s failed: %s", op, exc.code)
            return failure(op, exc)
        return self.succeed(op, data, meta=meta)

    def succeed(
        self, op: str, data: dict[str, Any], *, meta: dict[str, Any] | None = None
    ) -> ServiceResult:
        return success(op, data, warnings=self.plugin_warnings, meta=meta or None)

    def plugin_meta(self) -> dict[str, Any]:
        """``{"plugins": [...]}`` naming loaded plugins, or ``{}`` when there are none."""
        names = self.load_plugins().list_plugin_names()
        return {"plugins": names} if names else {}

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and end the command.

        A success goes to stdout (warnings to stderr unless the output is
        JSON); a failure goes to stderr and exits with status 1.
        """
        text = format_result(result, settings=self.output_settings)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
        if self.settings.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
