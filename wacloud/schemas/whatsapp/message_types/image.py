"""WhatsApp image message schema."""

from typing import Literal

from pydantic import Field

from wacloud.schemas.whatsapp.base_models import BaseInboundMessage, BaseMediaContent


class ImageContent(BaseMediaContent):
    """Image message content."""

    caption: str | None = Field(None, description="Optional image caption")


class WhatsAppImageMessage(BaseInboundMessage):
    """WhatsApp image message model."""

    type: Literal["image"] = Field(..., description="Message type, always 'image'")
    image: ImageContent = Field(..., description="Image content and metadata")

    @property
    def media_id(self) -> str:
        return self.image.id
