"""Template components update schema (edited template content)."""

from pydantic import Field

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.whatsapp.templates.base import (
    BaseTemplateValue,
    TemplateButtonType,
)


class TemplateButton(InboundModel):
    message_template_button_type: TemplateButtonType = Field(
        ..., description="Button type"
    )
    message_template_button_text: str = Field(..., description="Button label")
    message_template_button_url: str | None = Field(None, description="URL buttons")
    message_template_button_phone_number: str | None = Field(
        None, description="Phone number buttons"
    )


class TemplateComponentsUpdateValue(BaseTemplateValue):
    """Rendered text of an edited template."""

    message_template_element: str = Field(..., description="Template body text")
    message_template_title: str | None = Field(None, description="Header text")
    message_template_footer: str | None = Field(None, description="Footer text")
    message_template_buttons: list[TemplateButton] | None = Field(
        None, description="Template buttons"
    )
