"""
WhatsApp location message schema.

Coordinates arrive as numbers on some webhook versions and as numeric strings
on others; both are accepted and preserved as sent.
"""

from typing import Literal

from pydantic import Field

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.whatsapp.base_models import BaseInboundMessage
from wacloud.schemas.whatsapp.validators import Latitude, Longitude, number_value


class LocationContent(InboundModel):
    """Location message content."""

    latitude: Latitude = Field(..., description="Latitude of the location")
    longitude: Longitude = Field(..., description="Longitude of the location")
    name: str | None = Field(None, description="Name of the location")
    address: str | None = Field(None, description="Address of the location")
    url: str | None = Field(None, description="URL for the location")


class WhatsAppLocationMessage(BaseInboundMessage):
    """WhatsApp location message model."""

    type: Literal["location"] = Field(
        ..., description="Message type, always 'location'"
    )
    location: LocationContent = Field(..., description="Shared location")

    @property
    def coordinates(self) -> tuple[float, float]:
        """(latitude, longitude) as floats."""
        return (
            number_value(self.location.latitude),
            number_value(self.location.longitude),
        )
