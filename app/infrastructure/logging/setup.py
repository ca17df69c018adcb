"""Structlog setup for the translation engine.

configure_logging() runs once on import. Modules then take their logger with
get_module_logger(), which binds the module name so events from the
translator, the backends and the formatters can be told apart:

    logger = get_module_logger()
    logger.debug("translation_resolved", key="greeting", language="en")
    # component="translator", module_path="infrastructure.i18n.translator"

Under pytest every record is dropped.
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

SILENT_LEVEL = logging.CRITICAL + 1


def _running_under_pytest() -> bool:
    return "pytest" in sys.modules


def build_processors(json_output: bool) -> List[Any]:
    """Processor chain ending in a JSON or a console renderer."""
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> BoundLogger:
    """Configure structlog on top of the standard logging module.

    Args:
        level: Level name (DEBUG, INFO, ...). Defaults to Settings.LOG_LEVEL.
        json_output: Render JSON lines instead of console output. Defaults to
            Settings.is_production.

    Returns:
        The root structlog logger.
    """
    if _running_under_pytest():
        processors: List[Any] = [structlog.stdlib.add_log_level, structlog.processors.KeyValueRenderer()]
        numeric_level = SILENT_LEVEL
    else:
        if level is None or json_output is None:
            from infrastructure.configuration import Settings

            settings = Settings()
            level = level or settings.LOG_LEVEL
            json_output = settings.is_production if json_output is None else json_output
        processors = build_processors(json_output)
        numeric_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=numeric_level, force=True)
    logging.root.setLevel(numeric_level)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module's name.

    Binds "component" (last dotted part) and "module_path" (full name).
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(component=module.__name__.rsplit(".", 1)[-1], module_path=module.__name__)
