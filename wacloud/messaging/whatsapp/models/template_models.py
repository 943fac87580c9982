"""
WhatsApp template message models.

Provides Pydantic v2 validation models for sending pre-approved templates:
- TemplateParameter: one value substituted into a component
- TemplateComponent: header, body or button parameters
- TemplateMessage: the outbound ``template`` message

Whether the named template exists, and how many parameters it takes, is only
known to the platform; these models check the shape of what is sent.
"""

from enum import Enum
from typing import Literal

from pydantic import Field, StrictInt, model_validator

from wacloud.messaging.whatsapp.models.basic_models import BaseOutboundMessage
from wacloud.messaging.whatsapp.models.media_models import (
    DocumentObject,
    MediaObject,
)
from wacloud.schemas.core.base_model import OutboundModel
from wacloud.schemas.whatsapp.validators import NonBlankStr


class TemplateParameterType(str, Enum):
    """Template parameter types."""

    TEXT = "text"
    CURRENCY = "currency"
    DATE_TIME = "date_time"
    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"
    PAYLOAD = "payload"  # Quick reply button payload


class TemplateComponentType(str, Enum):
    HEADER = "header"
    BODY = "body"
    BUTTON = "button"


class TemplateButtonSubType(str, Enum):
    QUICK_REPLY = "quick_reply"
    URL = "url"


class CurrencyParameter(OutboundModel):
    fallback_value: str = Field(..., description="Text shown if localization fails")
    code: str = Field(
        ..., min_length=3, max_length=3, description="ISO 4217 currency code"
    )
    amount_1000: StrictInt = Field(..., description="Amount multiplied by 1000")


class DateTimeParameter(OutboundModel):
    fallback_value: str = Field(..., description="Date shown to the recipient")


class TemplateParameter(OutboundModel):
    """Template parameter for dynamic content replacement.

    The field named by ``type`` is required and no other value field may be
    set, e.g. ``{"type": "currency", "currency": {...}}``.
    """

    type: TemplateParameterType = Field(..., description="Parameter type")
    text: str | None = Field(None, max_length=1024, description="Text value")
    currency: CurrencyParameter | None = None
    date_time: DateTimeParameter | None = None
    image: MediaObject | None = None
    document: DocumentObject | None = None
    video: MediaObject | None = None
    payload: str | None = Field(
        None, max_length=256, description="Payload returned when the button is tapped"
    )

    @model_validator(mode="after")
    def validate_value_matches_type(self):
        """Require the value field named by type, and only that one."""
        expected = self.type.value
        if getattr(self, expected) is None:
            raise ValueError(f"'{expected}' is required for {expected} parameters")

        others = [
            t.value
            for t in TemplateParameterType
            if t.value != expected and getattr(self, t.value) is not None
        ]
        if others:
            raise ValueError(
                f"{', '.join(others)} not allowed for {expected} parameters"
            )
        return self


class TemplateComponent(OutboundModel):
    """Template component (header, body or button) with its parameters."""

    type: TemplateComponentType = Field(..., description="Component type")
    sub_type: TemplateButtonSubType | None = Field(
        None, description="Button kind, buttons only"
    )
    index: StrictInt | None = Field(
        None, ge=0, le=9, description="Position of the button in the template"
    )
    parameters: list[TemplateParameter] | None = Field(
        None, description="Component parameters"
    )

    @model_validator(mode="after")
    def validate_button_fields(self):
        """Buttons need sub_type and index; other components take neither."""
        is_button = self.type is TemplateComponentType.BUTTON
        has_button_fields = self.sub_type is not None or self.index is not None
        if is_button and (self.sub_type is None or self.index is None):
            raise ValueError("Button components require 'sub_type' and 'index'")
        if not is_button and has_button_fields:
            raise ValueError(
                f"'sub_type' and 'index' are only allowed on button components, "
                f"not {self.type.value}"
            )
        return self


class TemplateLanguage(OutboundModel):
    """Template language configuration."""

    code: str = Field(
        ...,
        min_length=2,
        max_length=15,
        pattern=r"^[A-Za-z]{2,3}([_-][A-Za-z0-9]+)*$",
        description="Language and locale code, e.g. en_US",
    )
    policy: Literal["deterministic"] | None = None


class TemplateBody(OutboundModel):
    name: NonBlankStr = Field(..., max_length=512, description="Template name")
    language: TemplateLanguage
    components: list[TemplateComponent] | None = None


class TemplateMessage(BaseOutboundMessage):
    """Outbound template message."""

    type: Literal["template"] = "template"
    template: TemplateBody
