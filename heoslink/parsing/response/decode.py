"""
Top-level decoder turning raw response bytes into a ``Response``.
"""
from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import ValidationError

from heoslink.config import DecoderSettings, get_settings
from heoslink.core.frame import frame_preview, trim_frame
from heoslink.logging import configure_logger
from heoslink.parsing.errors import DecodeError, EnvelopeError
from heoslink.parsing.response.model import LENIENT_COMMAND_PATH, Response

LOGGER_NAME = "heoslink.decoder"


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-standard JSON constant: {name}")


def load_envelope(frame: bytes, lenient_command_path: bool = False) -> Response:
    """
    Parse a trimmed frame as JSON and validate it into a ``Response``.

    Args:
        frame: Response bytes with the NUL padding already removed.
        lenient_command_path: See ``parse_command``.

    Raises:
        EnvelopeError: On invalid JSON or an unexpected envelope shape.
        DecodeError: Any error raised by the field parsers.
    """
    # Responses are UTF-8 only, without a BOM.
    try:
        text = frame.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EnvelopeError(f"response is not valid UTF-8: {exc}") from exc

    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise EnvelopeError(f"invalid JSON: {exc}") from exc

    try:
        return Response.model_validate(document, context={LENIENT_COMMAND_PATH: lenient_command_path})
    except ValidationError as exc:
        raise EnvelopeError(f"unexpected envelope shape: {exc}") from exc


class ResponseDecoder:
    """
    Decodes raw device responses using a fixed set of settings.

    The decoder holds no per-call state, so one instance can be shared
    between threads.
    """

    def __init__(self, settings: Optional[DecoderSettings] = None, logger: Optional[logging.Logger] = None) -> None:
        self.settings = settings or get_settings()
        self.logger = logger or configure_logger(LOGGER_NAME, self.settings.log_ring_size, self.settings.log_level)

    def decode(self, raw: bytes | bytearray | memoryview) -> Response:
        frame = trim_frame(raw)
        try:
            response = load_envelope(frame, lenient_command_path=self.settings.lenient_command_path)
        except DecodeError as exc:
            self.logger.warning(
                "response_decode_failed",
                extra={
                    "details": {
                        "error": type(exc).__name__,
                        "reason": str(exc),
                        "frame_length": len(frame),
                        "preview": frame_preview(frame, self.settings.log_preview_bytes),
                    }
                },
            )
            raise
        self.logger.debug(
            "response_decoded",
            extra={
                "details": {
                    "command": str(response.heos.command),
                    "result": response.heos.result,
                    "payload_entries": len(response.payload),
                }
            },
        )
        return response


def decode_response(raw: bytes | bytearray | memoryview, settings: Optional[DecoderSettings] = None) -> Response:
    """
    Decode one raw, possibly NUL-padded, response envelope.

    Args:
        raw: The bytes received from the transport.
        settings: Decoder settings; defaults to ``get_settings()``.

    Returns:
        The decoded ``Response``.

    Raises:
        DecodeError: A subclass describing why decoding failed.
    """
    return ResponseDecoder(settings=settings).decode(raw)
