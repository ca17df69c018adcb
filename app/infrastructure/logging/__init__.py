"""Structured logging for the translation engine.

    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("loaded_translations", language="en", namespace="translation")
"""

from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
