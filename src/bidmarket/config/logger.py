"""Logger configuration."""

import logging
import sys
from collections.abc import Mapping
from typing import Any

from loguru import logger
from loki_logger_handler.formatters.loguru_formatter import LoguruFormatter
from loki_logger_handler.loki_logger_handler import LokiLoggerHandler

from .config import settings

__all__ = ["config_logger"]


_LOKI_URL = "http://alloy:9999/loki/api/v1/push"  # NOSONAR
_SILENCED_MESSAGES = ("changes detected",)


def config_logger() -> None:
    """Configure loguru sinks for the current environment.

    Production logs go to stderr and Loki, with stdlib logging (uvicorn,
    sqlalchemy) routed through loguru. Development logs go to stdout and a
    rotating file. Testing only logs to stdout.
    """
    is_production = settings.app_env == "production"

    if is_production:
        _intercept_stdlib_logging()

    logger.remove()

    if settings.app_env == "development":
        logger.add(
            settings.log_path,
            rotation=settings.rotation,
            format=_development_format,
            enqueue=True,
            backtrace=False,
            diagnose=False,
            compression="zip",
            colorize=False,
            level=logging.DEBUG,
        )

    logger.add(
        sys.stderr if is_production else sys.stdout,
        format=_production_format if is_production else _development_format,
        level=settings.log_level,
        colorize=not is_production,
        enqueue=not settings.app_env == "testing",
        backtrace=not is_production,
        diagnose=not is_production,
        catch=not is_production,
    )

    if is_production:
        logger.add(
            LokiLoggerHandler(
                url=_LOKI_URL,
                labels={
                    "application": "bidmarket",
                    "environment": settings.app_env,
                    "version": settings.version,
                },
                timeout=5,
                enable_structured_loki_metadata=True,
                default_formatter=LoguruFormatter(),  # type: ignore[arg-type]
            ),
            serialize=True,
            enqueue=True,
            level=settings.log_level,
        )


def _intercept_stdlib_logging() -> None:
    """Route every stdlib logger through loguru."""
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(settings.log_level)

    for name in logging.root.manager.loggerDict:
        logger_instance = logging.getLogger(name)
        logger_instance.handlers = []
        logger_instance.propagate = True


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        """Intercepts standard logging and sends it to Loguru."""
        message = record.getMessage()
        if any(silenced in message for silenced in _SILENCED_MESSAGES):
            return

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_back and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, message)


def _format_extras(extra: Mapping[str, Any], *, colored: bool) -> str:
    if colored:
        return " | ".join(
            f"<yellow>{k}</yellow>=<cyan>{v}</cyan>" for k, v in extra.items()
        )
    return " | ".join(f"{k}={v}" for k, v in extra.items())


def _production_format(record: Mapping[str, Any]) -> str:
    """Structured single-line format for production."""
    line = (
        f"{record['time'].strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]} | "
        f"{record['level']:<8} | "
        f"{record['name']}:{record['line']} - "
        f"{record['message']}"
    )

    if record["extra"]:
        line += " | " + _format_extras(record["extra"], colored=False)

    return line.replace("{", "{{").replace("}", "}}") + "\n{exception}"


def _development_format(record: Mapping[str, Any]) -> str:
    """Colored format for development including function names and extras."""
    ts = record["time"].strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]

    line = (
        f"<green>{ts}</green> | "
        f"<level>{record['level']:<8}</level> | "
        f"<cyan>{record['name']}:{record['function']}:{record['line']}</cyan> - "
        "{message}"
    )

    if record["extra"]:
        extras = _format_extras(record["extra"], colored=True)
        line += " | " + extras.replace("{", "{{").replace("}", "}}")

    return line + "\n{exception}"
