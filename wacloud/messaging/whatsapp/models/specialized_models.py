"""
Specialized message models for WhatsApp messaging.

Location and contact card payloads. Coordinates accept numbers or numeric
strings and are range checked; contact cards carry the typed sub-objects
the platform renders in the chat.
"""

from typing import Literal

from pydantic import Field, field_validator

from wacloud.messaging.whatsapp.models.basic_models import BaseOutboundMessage
from wacloud.schemas.core.base_model import OutboundModel
from wacloud.schemas.whatsapp.validators import (
    DateStr,
    EmailStr,
    HttpUrlStr,
    Latitude,
    Longitude,
    NonBlankStr,
)

HomeOrWork = Literal["HOME", "WORK"]


class LocationBody(OutboundModel):
    latitude: Latitude = Field(..., description="Latitude in degrees")
    longitude: Longitude = Field(..., description="Longitude in degrees")
    name: str | None = Field(None, max_length=1000, description="Location name")
    address: str | None = Field(None, max_length=1000, description="Street address")


class LocationMessage(BaseOutboundMessage):
    """Outbound location pin."""

    type: Literal["location"] = "location"
    location: LocationBody


class ContactName(OutboundModel):
    formatted_name: NonBlankStr = Field(..., description="Full name as displayed")
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None


class ContactPhone(OutboundModel):
    phone: str | None = None
    wa_id: str | None = None
    type: Literal["CELL", "MAIN", "IPHONE", "HOME", "WORK"] | None = None


class ContactEmail(OutboundModel):
    email: EmailStr | None = None
    type: HomeOrWork | None = None


class ContactUrl(OutboundModel):
    url: HttpUrlStr | None = None
    type: HomeOrWork | None = None


class ContactAddress(OutboundModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    type: HomeOrWork | None = None


class ContactOrg(OutboundModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class ContactCard(OutboundModel):
    """One contact card."""

    name: ContactName
    org: ContactOrg | None = None
    phones: list[ContactPhone] | None = None
    emails: list[ContactEmail] | None = None
    urls: list[ContactUrl] | None = None
    addresses: list[ContactAddress] | None = None
    birthday: DateStr | None = Field(None, description="Birthday (YYYY-MM-DD)")


class ContactMessage(BaseOutboundMessage):
    """Outbound contact cards."""

    type: Literal["contacts"] = "contacts"
    contacts: list[ContactCard] = Field(..., min_length=1)

    @field_validator("contacts")
    @classmethod
    def validate_contacts_reachable(cls, v: list[ContactCard]) -> list[ContactCard]:
        """Each card needs a way to reach the contact."""
        for card in v:
            if not (card.phones or card.emails or card.urls):
                raise ValueError(
                    f"Contact '{card.name.formatted_name}' needs a phone, email or URL"
                )
        return v
