"""
WhatsApp Business Platform webhook schemas.

``WhatsAppWebhook`` is the entry point; everything below it is reachable
through its typed fields.
"""

from .base_models import (
    AdReferral,
    MessageContext,
    MessageError,
    WhatsAppContact,
    WhatsAppMetadata,
)
from .message_union import MESSAGE_MODELS, InboundMessage, inbound_message_adapter
from .status_models import WhatsAppMessageStatus
from .webhook_container import (
    MessagesChange,
    MessagesValue,
    TemplateCategoryChange,
    TemplateComponentsChange,
    TemplateQualityChange,
    TemplateStatusChange,
    WebhookChange,
    WebhookEntry,
    WhatsAppWebhook,
)

__all__ = [
    "AdReferral",
    "InboundMessage",
    "MESSAGE_MODELS",
    "MessageContext",
    "MessageError",
    "MessagesChange",
    "MessagesValue",
    "TemplateCategoryChange",
    "TemplateComponentsChange",
    "TemplateQualityChange",
    "TemplateStatusChange",
    "WebhookChange",
    "WebhookEntry",
    "WhatsAppContact",
    "WhatsAppMessageStatus",
    "WhatsAppMetadata",
    "WhatsAppWebhook",
    "inbound_message_adapter",
]
