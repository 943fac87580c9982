"""
Graph API response models for the messaging and subscription endpoints.

Responses come from the platform, so like webhook models they ignore keys
they do not know.
"""

from pydantic import Field

from wacloud.schemas.core.base_model import InboundModel, OutboundModel
from wacloud.schemas.whatsapp.validators import HttpUrlStr, NonBlankStr


class SentContact(InboundModel):
    input: str = Field(..., description="Recipient as given in the request")
    wa_id: str | None = Field(None, description="WhatsApp ID of the recipient")


class SentMessage(InboundModel):
    id: str = Field(..., description="WhatsApp message ID (wamid)")
    message_status: str | None = Field(
        None, description="Pacing status for template messages, e.g. 'accepted'"
    )


class SendMessageResponse(InboundModel):
    """Response to ``POST /{phone_number_id}/messages`` for a message."""

    messaging_product: str = "whatsapp"
    contacts: list[SentContact] = Field(default_factory=list)
    messages: list[SentMessage] = Field(..., min_length=1)

    @property
    def message_id(self) -> str:
        return self.messages[0].id


class SuccessResponse(InboundModel):
    """``{"success": true}`` responses (read receipts, subscribe, unsubscribe)."""

    success: bool


class SubscribedAppData(InboundModel):
    id: str
    link: str | None = None
    name: str | None = None


class SubscribedApp(InboundModel):
    whatsapp_business_api_data: SubscribedAppData
    override_callback_uri: str | None = None


class SubscriptionsResponse(InboundModel):
    """Apps subscribed to a WhatsApp Business Account."""

    data: list[SubscribedApp] = Field(default_factory=list)


class OverrideCallbackRequest(OutboundModel):
    """Body that points a WABA's webhooks at an alternate endpoint."""

    override_callback_uri: HttpUrlStr = Field(
        ..., description="Alternate webhook endpoint URL"
    )
    verify_token: NonBlankStr = Field(
        ..., description="Verification token for the alternate endpoint"
    )


class OverrideCallbackResponse(InboundModel):
    data: list[SubscribedApp] = Field(default_factory=list)
