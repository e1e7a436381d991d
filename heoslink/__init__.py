from heoslink.config import DecoderSettings, get_settings
from heoslink.core.frame import trim_frame
from heoslink.parsing.command import CommandIdentifier, parse_command
from heoslink.parsing.errors import (
    CommandPathError,
    DecodeError,
    EnvelopeError,
    MalformedMessageError,
    PayloadTypeError,
)
from heoslink.parsing.message import parse_message
from heoslink.parsing.payload import format_number, parse_payload
from heoslink.parsing.response import HeosResponse, Response, ResponseDecoder, decode_response
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "CommandIdentifier",
    "CommandPathError",
    "DecodeError",
    "DecoderSettings",
    "EnvelopeError",
    "HeosResponse",
    "MalformedMessageError",
    "PayloadTypeError",
    "Response",
    "ResponseDecoder",
    "decode_response",
    "format_number",
    "get_settings",
    "parse_command",
    "parse_message",
    "parse_payload",
    "trim_frame",
]

try:
    __version__ = version("heoslink")
except PackageNotFoundError:
    __version__ = "0.0.0"
