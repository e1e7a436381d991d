"""
Decoder logging.

Decode events are kept in memory by ``RingBufferHandler`` so callers can
inspect the most recent successes and failures without configuring a log
sink. ``configure_logger`` may be called repeatedly for the same name; the
latest level and ring size always apply.
"""
import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class RingBufferHandler(logging.Handler):
    """Keeps the last ``max_entries`` log records as plain event dicts."""

    def __init__(self, max_entries: int = 200):
        super().__init__()
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int:
        return self._events.maxlen

    def resize(self, max_entries: int) -> None:
        """Change the capacity, keeping the newest events that still fit."""
        with self._lock:
            if max_entries != self._events.maxlen:
                self._events = deque(self._events, maxlen=max_entries)

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "logger": record.name,
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self, level: Optional[str] = None) -> List[Dict]:
        with self._lock:
            events = list(self._events)
        if level is None:
            return events
        return [event for event in events if event["level"] == level]

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def get_ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def configure_logger(name: str, ring_size: int, level: int | str = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    handler = get_ring_buffer(logger)
    if handler is None:
        handler = RingBufferHandler(max_entries=ring_size)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    else:
        handler.resize(ring_size)
    return logger
