"""Template status update schema (approval, rejection, pauses, disabling)."""

from pydantic import Field, StrictInt, model_validator

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.whatsapp.templates.base import (
    BaseTemplateValue,
    TemplatePauseTitle,
    TemplateRejectionReason,
    TemplateStatusEvent,
)


class TemplateDisableInfo(InboundModel):
    disable_date: StrictInt = Field(
        ..., description="Unix time the template was disabled"
    )


class TemplateOtherInfo(InboundModel):
    """Pause/unpause details."""

    title: TemplatePauseTitle = Field(..., description="Pause event title")
    description: str = Field(..., description="Human readable explanation")


class TemplateStatusUpdateValue(BaseTemplateValue):
    """
    Value of a ``message_template_status_update`` change.

    ``reason`` accompanies rejections, ``other_info`` accompanies pauses and
    ``disable_info`` is only meaningful when the template was disabled.
    """

    event: TemplateStatusEvent = Field(..., description="New template status")
    reason: TemplateRejectionReason | None = Field(
        None, description="Rejection reason"
    )
    disable_info: TemplateDisableInfo | None = Field(
        None, description="Disable details, only with event DISABLED"
    )
    other_info: TemplateOtherInfo | None = Field(
        None, description="Pause details"
    )

    @model_validator(mode="after")
    def validate_disable_info(self):
        """Reject disable_info on events other than DISABLED."""
        disabled = self.event is TemplateStatusEvent.DISABLED
        if self.disable_info is not None and not disabled:
            raise ValueError("disable_info is only allowed when event is DISABLED")
        return self

    @property
    def is_approved(self) -> bool:
        return self.event is TemplateStatusEvent.APPROVED

    @property
    def is_rejected(self) -> bool:
        return self.event is TemplateStatusEvent.REJECTED
