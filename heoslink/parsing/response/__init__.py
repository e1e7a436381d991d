"""
Envelope decoding for HEOS responses.

A response is a JSON object holding a ``heos`` status object and a
``payload`` array. This sub-package validates the envelope and wires the
command, message and payload parsers into the typed models.
"""
from heoslink.parsing.response.decode import ResponseDecoder, decode_response, load_envelope
from heoslink.parsing.response.model import HeosResponse, Response

__all__ = [
    "HeosResponse",
    "Response",
    "ResponseDecoder",
    "decode_response",
    "load_envelope",
]
