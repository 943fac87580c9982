"""
Main webhook container models for WhatsApp Business Platform.

This module contains the envelope (``object`` / ``entry`` / ``changes``) and
the per-family change models. Each change is resolved by its ``field``
discriminator first; only then is its ``value`` validated against the family
shape. Unknown families are rejected, unlike unknown message kinds.
"""

from collections.abc import Iterator
from typing import Annotated, Any, Literal

from pydantic import Discriminator, Field, StrictInt, Tag, model_validator

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.core.types import WebhookField
from wacloud.schemas.core.unions import (
    read_discriminator,
    strict_discriminator,
    tag_resolver,
)
from wacloud.schemas.whatsapp.base_models import (
    MessageError,
    WhatsAppContact,
    WhatsAppMetadata,
)
from wacloud.schemas.whatsapp.message_union import InboundMessage
from wacloud.schemas.whatsapp.status_models import WhatsAppMessageStatus
from wacloud.schemas.whatsapp.templates import (
    TemplateCategoryCompletedValue,
    TemplateCategoryImpendingValue,
    TemplateCategoryUpdateValue,
    TemplateComponentsUpdateValue,
    TemplateQualityUpdateValue,
    TemplateStatusUpdateValue,
)


class MessagesValue(InboundModel):
    """
    The value object of a ``messages`` change.

    Carries incoming messages, delivery statuses for outgoing messages, or
    errors. At least one of the three must be present and non-empty.
    """

    messaging_product: Literal["whatsapp"] = Field(
        ..., description="Always 'whatsapp' for WhatsApp Business webhooks"
    )
    metadata: WhatsAppMetadata = Field(
        ..., description="Business phone number metadata"
    )
    contacts: list[WhatsAppContact] | None = Field(
        None, description="Contact information (present for incoming messages)"
    )
    messages: list[InboundMessage] | None = Field(
        None, description="Incoming messages, one model per message kind"
    )
    statuses: list[WhatsAppMessageStatus] | None = Field(
        None, description="Outgoing message status updates"
    )
    errors: list[MessageError] | None = Field(
        None, description="System, app, or account level errors"
    )

    @model_validator(mode="after")
    def validate_webhook_content(self):
        """Ensure the value has messages, statuses, or errors."""
        if not (self.messages or self.statuses or self.errors):
            raise ValueError(
                "Value must contain at least one of messages, statuses, or errors"
            )
        return self


def resolve_template_status_family(value: Any) -> str:
    """
    Pick the status or quality shape for a ``message_template_status_update``.

    Quality score changes are delivered under the status field too; they are
    recognized by their ``new_quality_score`` key.
    """
    if read_discriminator(value, "new_quality_score") is not None:
        return "template:quality"
    return "template:status"


TemplateStatusFamilyValue = Annotated[
    Annotated[TemplateStatusUpdateValue, Tag("template:status")]
    | Annotated[TemplateQualityUpdateValue, Tag("template:quality")],
    Discriminator(resolve_template_status_family),
]


class MessagesChange(InboundModel):
    """Incoming messages and delivery statuses."""

    field: Literal["messages"] = Field(..., description="Change discriminator")
    value: MessagesValue = Field(..., description="The webhook payload data")


class TemplateStatusChange(InboundModel):
    """Template status change (or quality change on older API versions)."""

    field: Literal["message_template_status_update"] = Field(
        ..., description="Change discriminator"
    )
    value: TemplateStatusFamilyValue = Field(..., description="Template event")


class TemplateQualityChange(InboundModel):
    """Template quality score change."""

    field: Literal["message_template_quality_update"] = Field(
        ..., description="Change discriminator"
    )
    value: TemplateQualityUpdateValue = Field(..., description="Template event")


class TemplateComponentsChange(InboundModel):
    """Template content change."""

    field: Literal["message_template_components_update"] = Field(
        ..., description="Change discriminator"
    )
    value: TemplateComponentsUpdateValue = Field(..., description="Template event")


class TemplateCategoryChange(InboundModel):
    """Template category change, impending or completed."""

    field: Literal["template_category_update"] = Field(
        ..., description="Change discriminator"
    )
    value: TemplateCategoryUpdateValue = Field(..., description="Template event")


resolve_change_field = tag_resolver("field", "change", (f.value for f in WebhookField))

WebhookChange = Annotated[
    Annotated[MessagesChange, Tag("change:messages")]
    | Annotated[TemplateStatusChange, Tag("change:message_template_status_update")]
    | Annotated[TemplateQualityChange, Tag("change:message_template_quality_update")]
    | Annotated[
        TemplateComponentsChange, Tag("change:message_template_components_update")
    ]
    | Annotated[TemplateCategoryChange, Tag("change:template_category_update")],
    strict_discriminator(resolve_change_field, "field", "webhook field"),
]

TemplateEventValue = (
    TemplateStatusUpdateValue
    | TemplateQualityUpdateValue
    | TemplateComponentsUpdateValue
    | TemplateCategoryImpendingValue
    | TemplateCategoryCompletedValue
)


class WebhookEntry(InboundModel):
    """
    Entry object for WhatsApp Business Account webhook.

    Contains the business account ID and the changes that occurred. ``time``
    is sent with template events and omitted with messages.
    """

    id: str = Field(..., description="WhatsApp Business Account ID")
    changes: list[WebhookChange] = Field(
        ..., description="Array of changes (typically contains one change)"
    )
    time: StrictInt | None = Field(None, description="Unix time of the event")


class WhatsAppWebhook(InboundModel):
    """
    Top-level WhatsApp Business Platform webhook.

    A single delivery may mix families across its entries and changes; each
    change is resolved on its own.
    """

    object: Literal["whatsapp_business_account"] = Field(
        ..., description="Always 'whatsapp_business_account'"
    )
    entry: list[WebhookEntry] = Field(
        ..., description="Account entries (may be empty)"
    )

    def iter_changes(self) -> Iterator[WebhookChange]:
        for entry in self.entry:
            yield from entry.changes

    def _messages_values(self) -> Iterator[MessagesValue]:
        for change in self.iter_changes():
            if isinstance(change, MessagesChange):
                yield change.value

    @property
    def is_incoming_message(self) -> bool:
        """Check if this webhook contains incoming messages."""
        return any(value.messages for value in self._messages_values())

    @property
    def is_status_update(self) -> bool:
        """Check if this webhook contains message status updates."""
        return any(value.statuses for value in self._messages_values())

    @property
    def has_errors(self) -> bool:
        return any(value.errors for value in self._messages_values())

    @property
    def is_template_event(self) -> bool:
        return any(
            not isinstance(change, MessagesChange) for change in self.iter_changes()
        )

    def get_business_account_id(self) -> str:
        """Get the WhatsApp Business Account ID from the first entry."""
        if not self.entry:
            raise ValueError("No entry data available")
        return self.entry[0].id

    def get_phone_number_id(self) -> str | None:
        """Get the business phone number ID of the first messages change."""
        value = next(self._messages_values(), None)
        return value.metadata.phone_number_id if value else None

    def get_messages(self) -> list[InboundMessage]:
        """All incoming messages, in payload order."""
        messages: list[InboundMessage] = []
        for value in self._messages_values():
            messages.extend(value.messages or [])
        return messages

    def get_statuses(self) -> list[WhatsAppMessageStatus]:
        statuses: list[WhatsAppMessageStatus] = []
        for value in self._messages_values():
            statuses.extend(value.statuses or [])
        return statuses

    def get_contacts(self) -> list[WhatsAppContact]:
        contacts: list[WhatsAppContact] = []
        for value in self._messages_values():
            contacts.extend(value.contacts or [])
        return contacts

    def get_template_events(self) -> list[TemplateEventValue]:
        """Values of every template family change, in payload order."""
        return [
            change.value
            for change in self.iter_changes()
            if not isinstance(change, MessagesChange)
        ]
