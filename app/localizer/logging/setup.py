"""Structlog setup for the localizer.

Catalog misses and resolutions are logged as snake_case events with keyword
context. Output is console-rendered outside production, JSON in production,
and silenced while pytest is running.

Usage:
    from localizer.logging import get_module_logger

    logger = get_module_logger()
    logger.info("initialized_localizer", default_locale="en-US")
"""

import logging
import sys
import inspect
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from localizer.configuration import Settings

# Above CRITICAL, so nothing reaches the handlers
_SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Return True when running under pytest."""
    return "pytest" in sys.modules


def _processors(json_output: bool) -> List[Processor]:
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the standard library logger.

    Args:
        settings: Settings to read LOG_LEVEL and production mode from.
            Loaded from the environment when omitted.
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production (JSON output).

    Returns:
        A logger bound to the new configuration.
    """
    testing = _is_test_environment()

    if testing:
        processors: List[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = _SILENT
    else:
        settings = settings or Settings()
        if is_production is None:
            is_production = settings.is_production
        processors = _processors(json_output=is_production)
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=testing)
    if testing:
        logging.root.setLevel(_SILENT)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return a logger bound with the calling module's name.

    Binds ``component`` (last dotted part) and ``module_path``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
