"""
Core schema building blocks shared by inbound and outbound payloads.

Base model configuration, enums, the validation error taxonomy and the
tagged-union helpers.
"""

from .base_model import InboundModel, OutboundModel, PayloadModel
from .errors import (
    ErrorKind,
    ValidationIssue,
    ValidationResult,
    WhatsAppValidationError,
    issues_from_validation_error,
)
from .types import (
    InteractiveReplyType,
    InteractiveType,
    MessageStatus,
    MessageType,
    OutboundMessageType,
    ValidationMode,
    WebhookField,
)

__all__ = [
    # Base models
    "InboundModel",
    "OutboundModel",
    "PayloadModel",
    # Errors
    "ErrorKind",
    "ValidationIssue",
    "ValidationResult",
    "WhatsAppValidationError",
    "issues_from_validation_error",
    # Types
    "InteractiveReplyType",
    "InteractiveType",
    "MessageStatus",
    "MessageType",
    "OutboundMessageType",
    "ValidationMode",
    "WebhookField",
]
