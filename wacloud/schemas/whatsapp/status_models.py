"""
Delivery status schema for outgoing messages.

Statuses arrive in the ``statuses`` array of a messages webhook whenever a
message sent by the business changes state.
"""

from typing import Literal

from pydantic import Field

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.core.types import MessageStatus
from wacloud.schemas.whatsapp.base_models import Conversation, MessageError, Pricing
from wacloud.schemas.whatsapp.validators import TimestampStr


class WhatsAppMessageStatus(InboundModel):
    """Status update for one outgoing message."""

    id: str = Field(..., description="ID of the message this status refers to")
    recipient_id: str = Field(..., description="WhatsApp ID of the recipient")
    status: Literal["sent", "delivered", "read", "failed", "deleted"] = Field(
        ..., description="New delivery status"
    )
    timestamp_str: TimestampStr = Field(
        ..., alias="timestamp", description="Unix timestamp of the status change"
    )
    conversation: Conversation | None = Field(
        None, description="Conversation the message belongs to"
    )
    pricing: Pricing | None = Field(None, description="Billing information")
    errors: list[MessageError] | None = Field(
        None, description="Delivery errors (when status is failed)"
    )
    biz_opaque_callback_data: str | None = Field(
        None, description="Tracking data set by the business when sending"
    )

    @property
    def message_status(self) -> MessageStatus:
        return MessageStatus(self.status)

    @property
    def timestamp(self) -> int:
        return int(self.timestamp_str)

    @property
    def is_failed(self) -> bool:
        return self.status == MessageStatus.FAILED.value

    @property
    def is_billable(self) -> bool:
        return self.pricing is not None and self.pricing.billable
