import sys
import json
from typing import Optional, TextIO
from datetime import datetime, timezone

from .bus import MessageStore

LOG_LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}


class CliRenderer:
    """
    Renders messages as human-readable, formatted text strings.
    """

    def __init__(
        self,
        store: MessageStore,
        stream: Optional[TextIO] = None,
        min_level: str = "INFO",
    ):
        self._store = store
        self._stream = stream
        self._min_level_val = LOG_LEVELS.get(min_level.upper(), 20)

    @property
    def stream(self) -> TextIO:
        # Resolved per message so a swapped sys.stderr is honoured.
        return self._stream if self._stream is not None else sys.stderr

    def render(self, msg_id: str, level: str, **kwargs):
        if LOG_LEVELS.get(level.upper(), 20) >= self._min_level_val:
            if "extents" in kwargs:
                kwargs["size"] = "x".join(str(n) for n in kwargs["extents"])
            message = self._store.get(msg_id, **kwargs)
            print(message, file=self.stream)


class JsonRenderer:
    """
    Renders messages as structured, JSON-formatted strings.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        min_level: str = "INFO",
    ):
        self._stream = stream
        self._min_level_val = LOG_LEVELS.get(min_level.upper(), 20)

    @property
    def stream(self) -> TextIO:
        # Resolved per message so a swapped sys.stderr is honoured.
        return self._stream if self._stream is not None else sys.stderr

    def render(self, msg_id: str, level: str, **kwargs):
        if LOG_LEVELS.get(level.upper(), 20) >= self._min_level_val:
            log_record = {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "level": level.upper(),
                "event_id": msg_id,
                "data": kwargs,
            }

            def default_serializer(o):
                """Handle non-serializable objects gracefully."""
                return repr(o)

            json_str = json.dumps(log_record, default=default_serializer)
            print(json_str, file=self.stream)
