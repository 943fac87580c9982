"""
Rich console logging with tenant and user prefixes for wacloud.

The prefix is written into the message itself by ContextLogger, so any
handler or format string downstream prints it unchanged:

    [T:106540352242922][U:16315551234] Decoded 1 message
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from wacloud.core.config.settings import settings

from .context import get_current_tenant_context, get_current_user_context

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
CONSOLE_FORMAT = "[%(name)s] %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_console = Console(
    theme=Theme(
        {
            "logging.level.debug": "dim white",
            "logging.level.info": "cyan",
            "logging.level.warning": "yellow",
            "logging.level.error": "bold red",
        }
    )
)


class CompactFormatter(logging.Formatter):
    """Keep only the last two dotted parts of wacloud logger names."""

    def format(self, record: logging.LogRecord) -> str:
        if record.name.startswith("wacloud."):
            # other handlers share the record
            record = logging.makeLogRecord(record.__dict__)
            *_, package, module = record.name.split(".")
            record.name = f"{package}.{module}"
        return super().format(record)


class ContextLogger:
    """
    Wrap a stdlib logger and prefix every message with the active context.

    Values set through set_request_context() win over the ones bound with
    bind(), which lets a long-lived client logger report the tenant and the
    user of the webhook currently being handled.
    """

    def __init__(
        self,
        logger: logging.Logger,
        tenant_id: str | None = None,
        user_id: str | None = None,
    ):
        self.logger = logger
        self.tenant_id = tenant_id
        self.user_id = user_id

    def prefix(self) -> str:
        tenant = get_current_tenant_context() or self.tenant_id
        user = get_current_user_context() or self.user_id
        return "".join(
            f"[{tag}:{value}]" for tag, value in (("T", tenant), ("U", user)) if value
        )

    def _log(self, level: int, message: str, *args: Any, **kwargs: Any) -> None:
        if not self.logger.isEnabledFor(level):
            return
        prefix = self.prefix()
        text = f"{prefix} {message}" if prefix else message
        kwargs.setdefault("stacklevel", 3)
        self.logger.log(level, text, *args, **kwargs)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, message, *args, **kwargs)

    def bind(self, **context: str | None) -> ContextLogger:
        """
        Return a copy with ``tenant_id`` and/or ``user_id`` replaced.

        Example:
            client_logger = logger.bind(tenant_id="106540352242922")
        """
        return ContextLogger(
            self.logger,
            tenant_id=context.get("tenant_id", self.tenant_id),
            user_id=context.get("user_id", self.user_id),
        )


def setup_logging(
    *,
    level: str = "INFO",
    mode: str = "PROD",
    log_dir: str | None = None,
    console_fmt: str | None = None,
    file_fmt: str | None = None,
) -> None:
    """
    Configure the root logger with a Rich console handler.

    Args:
        level: One of DEBUG, INFO, WARNING or ERROR; anything else means INFO.
        mode: "DEV" also writes a daily file under ``log_dir``.
        log_dir: Directory for the daily log file.
        console_fmt: Format string for the console handler.
        file_fmt: Format string for the file handler.
    """
    level = level.upper() if level.upper() in LEVELS else "INFO"

    console = RichHandler(console=_console, rich_tracebacks=True, markup=False)
    console.setFormatter(CompactFormatter(console_fmt or CONSOLE_FORMAT))
    handlers: list[logging.Handler] = [console]

    if log_dir and mode.upper() == "DEV":
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        daily = logging.FileHandler(
            directory / f"wacloud_{date.today():%Y%m%d}.log", encoding="utf-8"
        )
        daily.setFormatter(CompactFormatter(file_fmt or FILE_FORMAT))
        handlers.append(daily)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.getLogger("wacloud.setup").info("Logging initialized (%s)", level)


def setup_app_logging() -> None:
    """Configure logging from the LOG_LEVEL, LOG_DIR and ENVIRONMENT settings."""
    setup_logging(
        level=settings.log_level,
        mode=settings.environment,
        log_dir=settings.log_dir,
    )


def get_logger(name: str) -> ContextLogger:
    """Return a ContextLogger for ``name``, usually ``__name__``."""
    return ContextLogger(logging.getLogger(name))
