"""
Basic outbound message models for WhatsApp messaging.

Wire-shaped Pydantic schemas for the fields every outbound message shares,
plus text, reaction and read receipt payloads and the ``MessageResult``
returned by the messenger.
"""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from wacloud.schemas.core.base_model import OutboundModel
from wacloud.schemas.core.errors import ValidationIssue
from wacloud.schemas.whatsapp.validators import NonBlankStr

# Platform limit for text message bodies
TEXT_BODY_MAX_LENGTH = 4096


class MessageResult(BaseModel):
    """Result of a messaging operation.

    Standard response model for all messenger send operations. Validation
    failures carry their issues; API failures carry the platform error code.
    """

    model_config = ConfigDict(use_enum_values=True)

    success: bool
    message_id: str | None = None
    recipient: str | None = None
    error: str | None = None
    error_code: str | None = None
    issues: list[ValidationIssue] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    tenant_id: str | None = None  # phone_number_id in WhatsApp context


class MessageReference(OutboundModel):
    """Reply threading: the message being replied to."""

    message_id: NonBlankStr = Field(..., description="ID of the quoted message")


class BaseOutboundMessage(OutboundModel):
    """Envelope fields shared by every sendable message."""

    messaging_product: Literal["whatsapp"] = Field(
        "whatsapp", description="Always 'whatsapp'"
    )
    recipient_type: Literal["individual"] = Field(
        "individual", description="Always 'individual' for one-to-one messages"
    )
    to: NonBlankStr = Field(
        ..., description="Recipient phone number (international format) or BSUID"
    )
    context: MessageReference | None = Field(
        None, description="Message being replied to, if any"
    )

    @property
    def reply_to_message_id(self) -> str | None:
        return self.context.message_id if self.context else None


class TextBody(OutboundModel):
    body: str = Field(
        ...,
        min_length=1,
        max_length=TEXT_BODY_MAX_LENGTH,
        description="Text content of the message",
    )
    preview_url: StrictBool | None = Field(
        None, description="Render a preview for the first URL in the body"
    )


class TextMessage(BaseOutboundMessage):
    """Outbound text message."""

    type: Literal["text"] = "text"
    text: TextBody


class ReactionBody(OutboundModel):
    message_id: NonBlankStr = Field(..., description="ID of the message to react to")
    emoji: str = Field(
        ..., description="Emoji to react with; an empty string removes the reaction"
    )


class ReactionMessage(BaseOutboundMessage):
    """Outbound reaction to an earlier message."""

    type: Literal["reaction"] = "reaction"
    reaction: ReactionBody


class TypingIndicator(OutboundModel):
    type: Literal["text"] = "text"


class ReadReceipt(OutboundModel):
    """Marks an inbound message as read, optionally showing a typing indicator.

    Posted to the messages endpoint like a message, but it is not one: it has
    no recipient and no ``type``.
    """

    messaging_product: Literal["whatsapp"] = "whatsapp"
    status: Literal["read"] = "read"
    message_id: NonBlankStr = Field(..., description="WhatsApp message ID to mark")
    typing_indicator: TypingIndicator | None = Field(
        None, description="Show a typing indicator to the sender"
    )
