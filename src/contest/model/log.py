"""Loguru setup for applications that embed the contest model."""

from __future__ import annotations

import logging
import sys

from loguru import logger

from .config import ModelSettings

__all__ = ["InterceptHandler", "setup_logging"]

FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Sink added by the last setup_logging call; host sinks are never touched.
_handler_id: int | None = None


class InterceptHandler(logging.Handler):
    """Route stdlib logging records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller that originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(settings: ModelSettings | None = None, *, intercept_stdlib: bool = True) -> int:
    """
    Enable contest logging through a stderr sink owned by this package.

    Calling it again replaces the sink from the previous call. Sinks the host
    application added to loguru are left in place.

    Args:
        settings (ModelSettings | None): Source of the log level; loaded with
            ``ModelSettings.load()`` when None.
        intercept_stdlib (bool): Also route stdlib ``logging`` through loguru.

    Returns:
        int: The loguru handler id of the stderr sink.
    """
    global _handler_id

    settings = settings or ModelSettings.load()
    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            # The host already removed it.
            pass
    _handler_id = logger.add(
        sys.stderr,
        level=settings.log_level,
        format=FORMAT,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )
    logger.enable("contest")
    if intercept_stdlib:
        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.debug("Logging initialized with level: {}", settings.log_level)
    return _handler_id
