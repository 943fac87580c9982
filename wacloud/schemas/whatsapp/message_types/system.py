"""
WhatsApp system message schema.

System messages report account events such as a user changing their phone
number or identity.
"""

from typing import Literal

from pydantic import Field

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.whatsapp.base_models import BaseInboundMessage


class SystemContent(InboundModel):
    """System message content."""

    body: str | None = Field(None, description="System message text")
    type: str | None = Field(
        None, description="Event type (user_changed_number, customer_identity_changed)"
    )
    wa_id: str | None = Field(None, description="WhatsApp ID")
    new_wa_id: str | None = Field(None, description="New WhatsApp ID after a change")
    customer: str | None = Field(None, description="Customer phone number")
    identity: str | None = Field(None, description="Identity hash")
    user: str | None = Field(None, description="User description")


class WhatsAppSystemMessage(BaseInboundMessage):
    """WhatsApp system message model."""

    type: Literal["system"] = Field(..., description="Message type, always 'system'")
    system: SystemContent = Field(..., description="System event details")

    @property
    def is_number_change(self) -> bool:
        return self.system.type == "user_changed_number"
