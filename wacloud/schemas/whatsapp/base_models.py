"""
Base models for WhatsApp Business Platform webhooks.

This module contains the Pydantic models shared across the message and status
shapes: phone number metadata, sender contacts, reply/forward context, ad
referrals, pricing and error objects, plus the base class every inbound
message kind derives from.
"""

from typing import Any, ClassVar

from pydantic import Field, StrictBool, StrictInt, model_validator
from pydantic_core import PydanticCustomError

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.core.types import CONTENT_MESSAGE_TYPES
from wacloud.schemas.whatsapp.validators import TimestampStr


class WhatsAppMetadata(InboundModel):
    """
    Business phone number metadata from WhatsApp webhooks.

    Present in all message webhooks to identify the business phone number
    that received or sent the message.
    """

    display_phone_number: str = Field(
        ..., description="Business display phone number (formatted for display)"
    )
    phone_number_id: str = Field(
        ..., description="Business phone number ID (WhatsApp internal identifier)"
    )


class ContactProfile(InboundModel):
    """
    User profile information from WhatsApp contact.

    BSUID support (v24.0+) adds an optional username and country code.
    """

    name: str = Field(..., description="WhatsApp user's display name")
    username: str | None = Field(
        None, description="WhatsApp username if the user enabled usernames"
    )
    country_code: str | None = Field(None, description="User's country code")


class WhatsAppContact(InboundModel):
    """
    Contact information for the sender of an inbound message.

    ``wa_id`` may be empty for username-only users; ``user_id`` (BSUID) is
    then the stable identifier.
    """

    wa_id: str = Field(default="", description="WhatsApp user ID/phone number")
    bsuid: str | None = Field(
        None, alias="user_id", description="Business Scoped User ID (BSUID)"
    )
    profile: ContactProfile = Field(..., description="User profile information")

    @property
    def user_id(self) -> str:
        """BSUID when available, otherwise the wa_id phone number."""
        if self.bsuid and self.bsuid.strip():
            return self.bsuid.strip()
        return self.wa_id

    @property
    def is_username_only(self) -> bool:
        """True when the user has a BSUID but no visible phone number."""
        return bool(self.bsuid) and not self.wa_id.strip()


class ReferredProduct(InboundModel):
    """Product catalog reference for message business button context."""

    catalog_id: str = Field(..., description="Product catalog ID")
    product_retailer_id: str = Field(..., description="Product retailer ID")


class MessageContext(InboundModel):
    """
    Context information for WhatsApp messages.

    Used for replies, forwards, and message business button interactions.
    """

    # For replies and message business buttons
    from_: str | None = Field(
        None, alias="from", description="Original message sender (for replies)"
    )
    id: str | None = Field(
        None, description="ID of the original message being replied to or referenced"
    )

    # For forwarded messages
    forwarded: StrictBool | None = Field(
        None, description="True if forwarded 5 times or less"
    )
    frequently_forwarded: StrictBool | None = Field(
        None, description="True if forwarded more than 5 times"
    )

    referred_product: ReferredProduct | None = Field(
        None, description="Product information for message business button"
    )


class WelcomeMessage(InboundModel):
    """Welcome message for Click-to-WhatsApp ads."""

    text: str = Field(..., description="Ad greeting text")


class AdReferral(InboundModel):
    """
    Click-to-WhatsApp ad referral information.

    Present when a user sends a message via an ad or post. Every field is
    optional because the platform omits different ones per source type.
    """

    source_url: str | None = Field(None, description="Ad or post URL")
    source_id: str | None = Field(None, description="Ad or post ID")
    source_type: str | None = Field(None, description="Source type (ad, post)")
    body: str | None = Field(None, description="Ad primary text")
    headline: str | None = Field(None, description="Ad headline")
    media_type: str | None = Field(None, description="Ad media type (image, video)")
    image_url: str | None = Field(None, description="Ad image URL")
    video_url: str | None = Field(None, description="Ad video URL")
    thumbnail_url: str | None = Field(None, description="Ad video thumbnail URL")
    ctwa_clid: str | None = Field(None, description="Click-to-WhatsApp ad click ID")
    welcome_message: WelcomeMessage | None = Field(
        None, description="Ad greeting message"
    )


class ConversationOrigin(InboundModel):
    """Conversation origin information for pricing."""

    type: str = Field(..., description="Conversation category")


class Conversation(InboundModel):
    """Conversation information for message status."""

    id: str = Field(..., description="Conversation ID")
    expiration_timestamp: TimestampStr | None = Field(
        None, description="Unix timestamp when conversation expires"
    )
    origin: ConversationOrigin | None = Field(None, description="Conversation origin")


class Pricing(InboundModel):
    """Pricing information for message status."""

    billable: StrictBool = Field(..., description="Whether message is billable")
    pricing_model: str = Field(
        ..., description="Pricing model (CBP=conversation-based, PMP=per-message)"
    )
    category: str = Field(..., description="Pricing category")
    type: str | None = Field(None, description="Pricing type")


class ErrorData(InboundModel):
    """Error details for failed messages."""

    details: str = Field(..., description="Detailed error description")


class MessageError(InboundModel):
    """Error object attached to messages, statuses or a whole value."""

    code: StrictInt = Field(..., description="Error code")
    title: str | None = Field(None, description="Error title")
    message: str | None = Field(None, description="Error message")
    error_data: ErrorData | None = Field(None, description="Additional error details")
    href: str | None = Field(None, description="Link to error documentation")


class BaseInboundMessage(InboundModel):
    """
    Fields shared by every inbound message kind.

    Subclasses add a ``type`` literal and the same-named content field. The
    platform attaches ``context``, ``referral``, ``group_id`` and ``errors``
    independently of the kind, so every subclass accepts them.
    """

    # Disabled on the unknown fallback, which may carry any content key
    check_foreign_content: ClassVar[bool] = True

    from_: str = Field(
        ..., alias="from", description="WhatsApp user phone number who sent the message"
    )
    id: str = Field(..., description="Unique WhatsApp message ID")
    timestamp_str: TimestampStr = Field(
        ..., alias="timestamp", description="Unix timestamp when the message was sent"
    )
    group_id: str | None = Field(None, description="Group ID for group messages")
    context: MessageContext | None = Field(
        None, description="Context for replies, forwards, or message business buttons"
    )
    referral: AdReferral | None = Field(
        None, description="Click-to-WhatsApp ad referral information"
    )
    errors: list[MessageError] | None = Field(
        None, description="Errors attached to the message"
    )

    @model_validator(mode="before")
    @classmethod
    def reject_foreign_content(cls, data: Any) -> Any:
        """Reject a message that carries the content field of another kind."""
        if not cls.check_foreign_content or not isinstance(data, dict):
            return data

        kind = data.get("type")
        foreign = sorted(
            key for key in CONTENT_MESSAGE_TYPES if key != kind and key in data
        )
        if foreign:
            raise PydanticCustomError(
                "kind_content_mismatch",
                "Message of type '{kind}' must not carry content for '{foreign}'",
                {"kind": kind, "foreign": ", ".join(foreign)},
            )
        return data

    @property
    def sender_id(self) -> str:
        return self.from_

    @property
    def timestamp(self) -> int:
        """Unix timestamp as an integer."""
        return int(self.timestamp_str)

    @property
    def is_forwarded(self) -> bool:
        return self.context is not None and bool(
            self.context.forwarded or self.context.frequently_forwarded
        )

    @property
    def is_reply(self) -> bool:
        """True when the message replies to an earlier message."""
        return (
            self.context is not None
            and self.context.id is not None
            and not self.is_forwarded
        )

    @property
    def is_ad_referral(self) -> bool:
        return self.referral is not None


class BaseMediaContent(InboundModel):
    """
    Media reference shared by image, video, audio, document and sticker messages.

    The media itself is downloaded separately with ``id`` (or ``url`` when the
    platform includes a pre-signed one).
    """

    id: str = Field(..., description="Media ID for downloading the file")
    mime_type: str | None = Field(None, description="MIME type of the media")
    sha256: str | None = Field(None, description="SHA256 hash of the media file")
    url: str | None = Field(None, description="Download URL, when provided")
