"""Missing-key events and their dispatch.

A MissingKeyEvent is raised whenever no candidate key resolves for a
language and namespace. Listeners and handlers react to it (e.g., to seed a
backend) but never change the result of the translate call.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Sequence, Tuple
from uuid import UUID, uuid4

from infrastructure.i18n.plugins import MissingKeyHandler
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.i18n.translator import Translator

logger = get_module_logger()

MISSING_KEY_EVENT = "i18n.missing_key"

MissingKeyListener = Callable[["MissingKeyEvent"], Any]


@dataclass(frozen=True)
class MissingKeyEvent:
    """A translation key that resolved in no candidate form."""

    language: str
    namespace: str
    key: str
    possible_keys: Tuple[str, ...]
    """Candidate keys in build order, least specific first. Lookups try them in reverse."""

    event_type: str = MISSING_KEY_EVENT
    timestamp: datetime = field(default_factory=datetime.now)
    correlation_id: UUID = field(default_factory=uuid4)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to dictionary.

        Returns:
            Dictionary representation with ISO format timestamp and string UUID.
        """
        data = asdict(self)
        data["possible_keys"] = list(self.possible_keys)
        data["timestamp"] = self.timestamp.isoformat()
        data["correlation_id"] = str(self.correlation_id)
        return data


async def dispatch_missing_key(
    translator: "Translator",
    event: MissingKeyEvent,
    listeners: Sequence[MissingKeyListener],
    handlers: Sequence[MissingKeyHandler],
) -> List[Any]:
    """Deliver a missing-key event to listeners, then to handlers.

    Every listener and handler is called in registration order. A failing
    one is logged and the remaining ones still run.

    Args:
        translator: Translator that missed the key, passed to handlers.
        event: The event to dispatch.
        listeners: Synchronous callables receiving the event.
        handlers: Asynchronous handler plugins.

    Returns:
        List of return values from the listeners and handlers that succeeded.
    """
    results = []

    logger.info(
        "missing_translation",
        language=event.language,
        namespace=event.namespace,
        key=event.key,
        possible_keys=list(event.possible_keys),
        listener_count=len(listeners) + len(handlers),
    )

    for listener in listeners:
        try:
            results.append(listener(event))
        except Exception as e:
            logger.error(
                "missing_key_listener_failed",
                listener=getattr(listener, "__name__", "unknown"),
                key=event.key,
                error=str(e),
                correlation_id=str(event.correlation_id),
            )

    for handler in handlers:
        try:
            results.append(await handler.handle_missing_key(translator, event))
        except Exception as e:
            logger.error(
                "missing_key_handler_failed",
                handler=type(handler).__name__,
                key=event.key,
                error=str(e),
                correlation_id=str(event.correlation_id),
            )

    return results
