"""
Fallback schema for message kinds this library does not know.

The platform reports messages it cannot deliver as ``unsupported`` and keeps
adding new kinds over time. Rather than rejecting the whole webhook, such
messages decode to ``WhatsAppUnknownMessage``, which keeps the common fields,
any ``errors`` and the original ``type`` value.
"""

from typing import Any, ClassVar, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from wacloud.schemas.whatsapp.base_models import BaseInboundMessage, MessageError


class WhatsAppUnknownMessage(BaseInboundMessage):
    """Message of an unknown or unsupported kind."""

    check_foreign_content: ClassVar[bool] = False

    type: Literal["unknown"] = Field(
        "unknown", description="Always 'unknown' for the fallback kind"
    )
    original_type: str | None = Field(
        None, description="The type value the platform sent, if any"
    )

    @model_validator(mode="before")
    @classmethod
    def keep_original_type(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        kind = data.get("type")
        # Non-string values stay in place for the type check below
        if kind is None or (isinstance(kind, str) and kind != "unknown"):
            data = {**data, "original_type": kind, "type": "unknown"}
        return data

    @field_validator("type", mode="before")
    @classmethod
    def type_is_a_string(cls, value: Any) -> Any:
        if not isinstance(value, str):
            raise PydanticCustomError("string_type", "Message type must be a string")
        return value

    @property
    def error_codes(self) -> list[int]:
        return [error.code for error in self.errors or []]

    @property
    def primary_error(self) -> MessageError | None:
        return self.errors[0] if self.errors else None

    @property
    def is_unsupported(self) -> bool:
        """True when the platform itself flagged the message as unsupported."""
        return self.original_type == "unsupported"
