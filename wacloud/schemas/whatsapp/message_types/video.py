"""WhatsApp video message schema."""

from typing import Literal

from pydantic import Field

from wacloud.schemas.whatsapp.base_models import BaseInboundMessage, BaseMediaContent


class VideoContent(BaseMediaContent):
    """Video message content."""

    caption: str | None = Field(None, description="Optional video caption")


class WhatsAppVideoMessage(BaseInboundMessage):
    """WhatsApp video message model."""

    type: Literal["video"] = Field(..., description="Message type, always 'video'")
    video: VideoContent = Field(..., description="Video content and metadata")

    @property
    def media_id(self) -> str:
        return self.video.id
