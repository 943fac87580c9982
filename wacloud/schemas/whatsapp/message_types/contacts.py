"""
WhatsApp contacts message schema.

A contacts message carries one or more contact cards shared from the
user's address book.
"""

from typing import Literal

from pydantic import Field

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.whatsapp.base_models import BaseInboundMessage


class ContactName(InboundModel):
    formatted_name: str = Field(..., description="Full formatted name")
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None


class ContactPhone(InboundModel):
    phone: str | None = None
    type: str | None = Field(None, description="CELL, MAIN, IPHONE, HOME or WORK")
    wa_id: str | None = None


class ContactEmail(InboundModel):
    email: str | None = None
    type: str | None = None


class ContactUrl(InboundModel):
    url: str | None = None
    type: str | None = None


class ContactAddress(InboundModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    type: str | None = None


class ContactOrg(InboundModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class ContactCard(InboundModel):
    """One shared contact."""

    name: ContactName = Field(..., description="Contact name")
    org: ContactOrg | None = None
    phones: list[ContactPhone] | None = None
    emails: list[ContactEmail] | None = None
    urls: list[ContactUrl] | None = None
    addresses: list[ContactAddress] | None = None
    birthday: str | None = Field(None, description="Birthday (YYYY-MM-DD)")


class WhatsAppContactsMessage(BaseInboundMessage):
    """WhatsApp contacts message model."""

    type: Literal["contacts"] = Field(
        ..., description="Message type, always 'contacts'"
    )
    contacts: list[ContactCard] = Field(..., description="Shared contact cards")

    @property
    def contact_count(self) -> int:
        return len(self.contacts)
