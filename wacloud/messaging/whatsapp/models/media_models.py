"""
Media message models for WhatsApp messaging.

Media is referenced either by a previously uploaded media ``id`` or by a
public ``link``. Exactly one of the two must be given.
"""

from enum import Enum
from typing import Literal

from pydantic import Field, model_validator

from wacloud.messaging.whatsapp.models.basic_models import BaseOutboundMessage
from wacloud.schemas.core.base_model import OutboundModel
from wacloud.schemas.whatsapp.validators import HttpUrlStr, NonBlankStr

# Platform limit for media captions
CAPTION_MAX_LENGTH = 1024


class MediaType(Enum):
    """Supported media types for WhatsApp messages."""

    AUDIO = "audio"
    DOCUMENT = "document"
    IMAGE = "image"
    STICKER = "sticker"
    VIDEO = "video"


class MediaObject(OutboundModel):
    """Reference to media by uploaded ID or by link."""

    id: NonBlankStr | None = Field(None, description="Uploaded media ID")
    link: HttpUrlStr | None = Field(None, description="Public http(s) media URL")

    @model_validator(mode="after")
    def validate_exactly_one_source(self):
        """Require exactly one of id and link."""
        if (self.id is None) == (self.link is None):
            raise ValueError("Exactly one of 'id' or 'link' must be provided")
        return self

    @property
    def is_link(self) -> bool:
        return self.link is not None


class CaptionedMediaObject(MediaObject):
    caption: str | None = Field(
        None, max_length=CAPTION_MAX_LENGTH, description="Media caption"
    )


class DocumentObject(CaptionedMediaObject):
    filename: str | None = Field(
        None, description="Filename shown to the recipient"
    )


class HeaderDocumentObject(MediaObject):
    """Document used as an interactive header (no caption)."""

    filename: str | None = Field(None, description="Filename shown to the recipient")


class ImageMessage(BaseOutboundMessage):
    type: Literal["image"] = "image"
    image: CaptionedMediaObject


class VideoMessage(BaseOutboundMessage):
    type: Literal["video"] = "video"
    video: CaptionedMediaObject


class AudioMessage(BaseOutboundMessage):
    type: Literal["audio"] = "audio"
    audio: MediaObject


class DocumentMessage(BaseOutboundMessage):
    type: Literal["document"] = "document"
    document: DocumentObject


class StickerMessage(BaseOutboundMessage):
    type: Literal["sticker"] = "sticker"
    sticker: MediaObject


MEDIA_MESSAGE_MODELS: dict[MediaType, type[BaseOutboundMessage]] = {
    MediaType.IMAGE: ImageMessage,
    MediaType.VIDEO: VideoMessage,
    MediaType.AUDIO: AudioMessage,
    MediaType.DOCUMENT: DocumentMessage,
    MediaType.STICKER: StickerMessage,
}
