"""WhatsApp sticker message schema."""

from typing import Literal

from pydantic import Field, StrictBool

from wacloud.schemas.whatsapp.base_models import BaseInboundMessage, BaseMediaContent


class StickerContent(BaseMediaContent):
    """Sticker message content."""

    animated: StrictBool | None = Field(
        None, description="True if the sticker is animated"
    )


class WhatsAppStickerMessage(BaseInboundMessage):
    """WhatsApp sticker message model."""

    type: Literal["sticker"] = Field(..., description="Message type, always 'sticker'")
    sticker: StickerContent = Field(..., description="Sticker content and metadata")

    @property
    def is_animated(self) -> bool:
        return bool(self.sticker.animated)
