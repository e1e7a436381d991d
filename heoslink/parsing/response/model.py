"""
Typed models for a decoded HEOS response envelope.

The ``command`` and ``message`` fields of the ``heos`` object and the
``payload`` array carry their own micro-formats; each is decoded by a
field validator that delegates to the matching parser.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from heoslink.parsing.command import CommandIdentifier, parse_command
from heoslink.parsing.message import parse_message
from heoslink.parsing.payload import parse_payload

LENIENT_COMMAND_PATH = "lenient_command_path"


class HeosResponse(BaseModel):
    """
    The ``heos`` status object of a response.

    Attributes:
        command: The command the response answers.
        result: The result indicator, e.g. ``"success"`` or ``"fail"``.
        message: The decoded ``key=value`` message pairs.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    command: CommandIdentifier
    result: str = ""
    message: dict[str, str] = Field(default_factory=dict)

    @field_validator("command", mode="before")
    @classmethod
    def decode_command(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, CommandIdentifier):
            return value
        if not isinstance(value, str):
            raise ValueError(f"command must be a string, got {type(value).__name__}")
        lenient = bool((info.context or {}).get(LENIENT_COMMAND_PATH, False))
        return parse_command(value, lenient=lenient)

    @field_validator("result", mode="before")
    @classmethod
    def default_result(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("message", mode="before")
    @classmethod
    def decode_message(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, str):
            raise ValueError(f"message must be a string, got {type(value).__name__}")
        return parse_message(value)


class Response(BaseModel):
    """
    A fully decoded device response.

    Attributes:
        heos: The status object.
        payload: Payload records with every value coerced to a string.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    heos: HeosResponse
    payload: list[dict[str, str]] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def decode_heos_first(cls, data: Any, info: ValidationInfo) -> Any:
        # The heos object is validated before the payload is normalised.
        if not isinstance(data, dict) or isinstance(data.get("heos"), HeosResponse):
            return data
        heos = HeosResponse.model_validate(data.get("heos"), context=info.context)
        return {**data, "heos": heos}

    @field_validator("payload", mode="before")
    @classmethod
    def decode_payload(cls, value: Any) -> Any:
        if value is None:
            return []
        return parse_payload(value)

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump()
