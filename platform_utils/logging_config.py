"""
Logging setup for platform-utils.

Every service logs under the ``platform_utils`` namespace. setup_logging()
attaches a rich console handler and a nightly rotating file to that
namespace only, so handlers on the host application's root logger are
left alone.
"""

import logging
import logging.handlers
from rich.logging import RichHandler
from rich.console import Console

from .config import Settings

PACKAGE_LOGGER = "platform_utils"

# Marks handlers installed here so repeated setup replaces them
_HANDLER_MARKER = "_platform_utils_handler"


def setup_logging(settings: Settings, console: Console | None = None) -> logging.Logger:
    log_dir = settings.log_directory
    log_dir.mkdir(parents=True, exist_ok=True)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_own_handlers(package_logger)

    rich_handler = RichHandler(
        console=console or Console(width=120, stderr=True),
        show_time=True,
        show_level=True,
        show_path=True,
        markup=True,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(settings.log_level)

    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=settings.log_file_path,
        when="midnight",
        interval=1,
        backupCount=settings.log_retention_days,
        encoding="utf-8",
    )
    file_handler.setLevel(settings.log_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - "
            "%(filename)s:%(lineno)d in %(funcName)s() - %(message)s"
        )
    )

    for handler in (rich_handler, file_handler):
        setattr(handler, _HANDLER_MARKER, True)
        package_logger.addHandler(handler)

    package_logger.setLevel(settings.log_level)
    # Our handlers already print these records
    package_logger.propagate = False

    package_logger.info(
        f"[bold green]platform-utils logging[/] - "
        f"File: [cyan]{settings.log_file_path}[/], "
        f"Level: [yellow]{settings.log_level}[/], "
        f"Retention: [blue]{settings.log_retention_days}[/] days"
    )
    return package_logger


def teardown_logging() -> None:
    """Detach the handlers installed by setup_logging() and restore propagation."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_own_handlers(package_logger)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


def _remove_own_handlers(package_logger: logging.Logger) -> None:
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            package_logger.removeHandler(handler)
            handler.close()
