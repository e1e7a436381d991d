"""Tests for decoder settings and decode logging."""
import logging

import pytest

from heoslink.config import DecoderSettings, get_settings
from heoslink.logging import RingBufferHandler, configure_logger, get_ring_buffer
from heoslink.parsing.errors import EnvelopeError
from heoslink.parsing.response import ResponseDecoder

GOOD = b'{"heos":{"command":"player/get_players","result":"success","message":""},"payload":[]}'


def _debug_logger(name: str) -> tuple[logging.Logger, RingBufferHandler]:
    """Helper: build an isolated logger that records every level."""
    logger = configure_logger(name, ring_size=10, level=logging.DEBUG)
    handler = get_ring_buffer(logger)
    handler.clear()
    return logger, handler


def test_settings_defaults():
    settings = DecoderSettings()
    assert settings.lenient_command_path is False
    assert settings.log_ring_size == 200
    assert settings.log_preview_bytes == 64


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("HEOS_LENIENT_COMMAND_PATH", "true")
    monkeypatch.setenv("HEOS_LOG_PREVIEW_BYTES", "8")
    settings = DecoderSettings()
    assert settings.lenient_command_path is True
    assert settings.log_preview_bytes == 8


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_ring_buffer_keeps_latest():
    handler = RingBufferHandler(max_entries=2)
    logger = logging.getLogger("heoslink.tests.ring")
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.INFO)
    try:
        for name in ("one", "two", "three"):
            logger.info(name, extra={"details": {"n": name}})
    finally:
        logger.removeHandler(handler)
    events = handler.get_events()
    assert [event["event"] for event in events] == ["two", "three"]
    assert events[-1]["details"] == {"n": "three"}
    assert events[-1]["level"] == "INFO"


def test_configure_logger_reuses_handler_and_applies_latest_settings():
    first = configure_logger("heoslink.tests.reuse", ring_size=5)
    second = configure_logger("heoslink.tests.reuse", ring_size=50, level=logging.DEBUG)
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG
    assert get_ring_buffer(second).max_entries == 50


def test_resize_keeps_newest_events():
    handler = RingBufferHandler(max_entries=5)
    for n in range(5):
        handler.emit(logging.makeLogRecord({"msg": f"e{n}", "levelname": "INFO"}))
    handler.resize(2)
    assert handler.max_entries == 2
    assert [event["event"] for event in handler.get_events()] == ["e3", "e4"]


def test_get_events_filters_by_level():
    handler = RingBufferHandler(max_entries=5)
    handler.emit(logging.makeLogRecord({"msg": "a", "levelname": "INFO"}))
    handler.emit(logging.makeLogRecord({"msg": "b", "levelname": "WARNING"}))
    assert [event["event"] for event in handler.get_events(level="WARNING")] == ["b"]


def test_decode_success_logged():
    logger, handler = _debug_logger("heoslink.tests.success")
    ResponseDecoder(settings=DecoderSettings(), logger=logger).decode(GOOD + b"\x00")
    events = handler.get_events()
    assert events[-1]["event"] == "response_decoded"
    assert events[-1]["details"] == {"command": "player/get_players", "result": "success", "payload_entries": 0}


def test_decode_failure_logged_and_reraised():
    logger, handler = _debug_logger("heoslink.tests.failure")
    decoder = ResponseDecoder(settings=DecoderSettings(log_preview_bytes=4), logger=logger)
    with pytest.raises(EnvelopeError):
        decoder.decode(b"not json\x00\x00")
    event = handler.get_events()[-1]
    assert event["event"] == "response_decode_failed"
    assert event["level"] == "WARNING"
    assert event["details"]["error"] == "EnvelopeError"
    assert event["details"]["frame_length"] == 8
    assert event["details"]["preview"] == "not ... (+4 bytes)"


def test_later_decoder_settings_apply_to_shared_logger():
    ResponseDecoder(settings=DecoderSettings())
    decoder = ResponseDecoder(settings=DecoderSettings(log_level="DEBUG", log_ring_size=3))
    handler = get_ring_buffer(decoder.logger)
    assert decoder.logger.level == logging.DEBUG
    assert handler.max_entries == 3

    handler.clear()
    decoder.decode(GOOD)
    assert [event["event"] for event in handler.get_events()] == ["response_decoded"]
