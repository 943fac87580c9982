"""WhatsApp document message schema."""

from typing import Literal

from pydantic import Field

from wacloud.schemas.whatsapp.base_models import BaseInboundMessage, BaseMediaContent


class DocumentContent(BaseMediaContent):
    """Document message content."""

    caption: str | None = Field(None, description="Optional document caption")
    filename: str | None = Field(None, description="Original document filename")


class WhatsAppDocumentMessage(BaseInboundMessage):
    """WhatsApp document message model."""

    type: Literal["document"] = Field(
        ..., description="Message type, always 'document'"
    )
    document: DocumentContent = Field(..., description="Document content and metadata")

    @property
    def media_id(self) -> str:
        return self.document.id

    @property
    def file_extension(self) -> str | None:
        """Extension of the original filename, lowercased, if any."""
        filename = self.document.filename
        if not filename or "." not in filename:
            return None
        return filename.rsplit(".", 1)[1].lower()
