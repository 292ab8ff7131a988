"""
Access logging for resource requests.

The transport layer builds one AccessEvent per request and hands it to
an access logger. Loggers only decide where the event goes; they do not
shape it.
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional

from core.logging import get_logger


class AccessOutcome(str, Enum):
    """How a request ended, from the caller's point of view."""
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    ERROR = "error"


@dataclass(frozen=True)
class AccessEvent:
    """Structured record of one handled request."""
    operation: Optional[str]
    outcome: AccessOutcome
    duration_ms: float
    record_id: Optional[str] = None
    method: Optional[str] = None
    path: Optional[str] = None
    status_code: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = asdict(self)
        data["outcome"] = self.outcome.value
        return data


class BaseAccessLogger(ABC):
    """Sink for access events."""

    @abstractmethod
    def emit(self, event: AccessEvent) -> None:
        """Write a single event to the sink."""
        pass


class StructlogAccessLogger(BaseAccessLogger):
    """
    Writes access events through structlog.

    Each event becomes one "Request handled" line with the event fields
    as key/value context, rendered by whatever processors are configured.
    """

    def __init__(self, logger_name: str = "access"):
        self._logger = get_logger(logger_name)

    def emit(self, event: AccessEvent) -> None:
        fields = event.to_dict()
        fields["duration_ms"] = round(event.duration_ms, 3)

        if event.outcome == AccessOutcome.ERROR:
            self._logger.warning("Request handled", **fields)
        else:
            self._logger.info("Request handled", **fields)


class RecordingAccessLogger(BaseAccessLogger):
    """Keeps emitted events in memory, oldest first."""

    def __init__(self) -> None:
        self.events: list[AccessEvent] = []

    def emit(self, event: AccessEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()
