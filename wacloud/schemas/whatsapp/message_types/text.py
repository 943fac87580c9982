"""
WhatsApp text message schema.

Covers regular text, forwarded text, message business button replies and
Click-to-WhatsApp ad messages: all of them share the text shape and differ
only in ``context``/``referral``.
"""

from typing import Literal

from pydantic import Field

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.whatsapp.base_models import BaseInboundMessage


class TextContent(InboundModel):
    """Text message content."""

    body: str = Field(..., description="The text content of the message")


class WhatsAppTextMessage(BaseInboundMessage):
    """WhatsApp text message model."""

    type: Literal["text"] = Field(
        ..., description="Message type, always 'text' for text messages"
    )
    text: TextContent = Field(..., description="Text message content")

    @property
    def body(self) -> str:
        return self.text.body
