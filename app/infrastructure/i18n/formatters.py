"""Value formatters used by the interpolator.

A formatter turns an interpolated value into text according to the format
spec written after the format separator (e.g., "{{price, .2f}}").
"""

import builtins
from abc import ABC, abstractmethod
from typing import Any, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()


class Formatter(ABC):
    """Abstract value formatter.

    Formatters registered on the Interpolator are tried in registration order;
    the first one whose can_format returns True formats the value.
    """

    @abstractmethod
    def can_format(self, value: Any, format: str, language: str) -> bool:
        """Whether this formatter handles the value."""
        pass

    @abstractmethod
    def format(self, value: Any, format: str, language: str) -> Optional[str]:
        """Format the value.

        Args:
            value: Value resolved from the interpolation arguments.
            format: Format spec following the format separator.
            language: Language of the translation being rendered.

        Returns:
            Formatted text, or None when value is None.
        """
        pass


class DefaultFormatter(Formatter):
    """Formats any value with Python's format() mini-language."""

    def can_format(self, value: Any, format: str, language: str) -> bool:
        return True

    def format(self, value: Any, format: str, language: str) -> Optional[str]:
        if value is None:
            return None
        if not format:
            return str(value)

        try:
            return builtins.format(value, format)
        except (TypeError, ValueError) as e:
            logger.warning(
                "invalid_format_spec",
                format=format,
                value_type=type(value).__name__,
                error=str(e),
            )
            return str(value)
