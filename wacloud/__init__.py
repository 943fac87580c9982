"""
wacloud - WhatsApp Cloud API payload schemas

Decode and validate webhook deliveries into typed, immutable models, and
build validated outbound messages before they are sent.

Clean Import Interface:
- Only the entry points are exposed at top level
- Models live under wacloud.schemas (inbound) and
  wacloud.messaging.whatsapp.models (outbound)
"""

from .core.config.settings import settings
from .messaging.whatsapp.builders import (
    build_audio_message,
    build_button_message,
    build_contacts_message,
    build_cta_url_message,
    build_document_message,
    build_image_message,
    build_list_message,
    build_location_message,
    build_reaction_message,
    build_read_receipt,
    build_sticker_message,
    build_template_message,
    build_text_message,
    build_video_message,
)
from .messaging.whatsapp.client import WhatsAppApiError, WhatsAppClient
from .messaging.whatsapp.messenger import WhatsAppMessenger
from .messaging.whatsapp.models import parse_outbound_message
from .schemas.core import (
    ErrorKind,
    ValidationIssue,
    ValidationMode,
    ValidationResult,
    WhatsAppValidationError,
)
from .schemas.whatsapp import WhatsAppWebhook
from .webhooks import WhatsAppErrorHandler, decode_message, decode_webhook, parse_webhook

# Dynamic version from pyproject.toml
__version__ = settings.version

__all__ = [
    # Decoding
    "WhatsAppWebhook",
    "decode_message",
    "decode_webhook",
    "parse_webhook",
    # Validation results
    "ErrorKind",
    "ValidationIssue",
    "ValidationMode",
    "ValidationResult",
    "WhatsAppValidationError",
    "WhatsAppErrorHandler",
    # Building
    "build_audio_message",
    "build_button_message",
    "build_contacts_message",
    "build_cta_url_message",
    "build_document_message",
    "build_image_message",
    "build_list_message",
    "build_location_message",
    "build_reaction_message",
    "build_read_receipt",
    "build_sticker_message",
    "build_template_message",
    "build_text_message",
    "build_video_message",
    "parse_outbound_message",
    # Transport
    "WhatsAppApiError",
    "WhatsAppClient",
    "WhatsAppMessenger",
]
