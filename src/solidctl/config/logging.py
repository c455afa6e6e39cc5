"""structlog setup for solidctl.

Everything goes to stderr so stdout stays clean for ``--json``. Records
from plain ``logging.getLogger(__name__)`` loggers and from structlog
loggers (the ``StructlogLogger`` event provider) share one formatter.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Third-party loggers that stay at WARNING even in verbose mode.
_LIBRARY_LOGGERS = ("sqlalchemy", "pluggy")


def _solidctl_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Install a single stderr handler and route structlog through it.

    Args:
        verbose: ``solidctl`` loggers at DEBUG, so business events show too.
        quiet: Only errors from ``solidctl`` loggers. Ignored with *verbose*.
        log_json: One JSON object per line instead of the console renderer.

    Safe to call repeatedly; each call replaces the previous handler.
    """
    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if log_json:
        shared.append(structlog.processors.format_exc_info)
    shared.append(structlog.processors.UnicodeDecoder())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("solidctl").setLevel(_solidctl_level(verbose=verbose, quiet=quiet))
    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
