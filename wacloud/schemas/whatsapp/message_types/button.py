"""
WhatsApp button message schema.

A button message is sent when a user taps a quick reply button on a template
message. Replies to interactive messages arrive as ``interactive`` instead.
"""

from typing import Literal

from pydantic import Field

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.whatsapp.base_models import BaseInboundMessage


class ButtonContent(InboundModel):
    """Quick reply button content."""

    text: str = Field(..., description="Button label text displayed to user")
    payload: str | None = Field(None, description="Button payload data")


class WhatsAppButtonMessage(BaseInboundMessage):
    """WhatsApp template quick reply button message model."""

    type: Literal["button"] = Field(
        ..., description="Message type, always 'button' for button replies"
    )
    button: ButtonContent = Field(..., description="Button reply content")

    @property
    def button_text(self) -> str:
        return self.button.text

    @property
    def button_payload(self) -> str | None:
        return self.button.payload
