"""
Shared enums for WhatsApp Cloud API payloads.

Models use ``Literal`` types for their discriminators; these enums are the
single source of the known values, used by the union resolvers and by
callers that branch on a decoded payload.
"""

from enum import Enum


class WebhookField(str, Enum):
    """Values of the change-level ``field`` discriminator."""

    MESSAGES = "messages"
    TEMPLATE_STATUS_UPDATE = "message_template_status_update"
    TEMPLATE_QUALITY_UPDATE = "message_template_quality_update"
    TEMPLATE_COMPONENTS_UPDATE = "message_template_components_update"
    TEMPLATE_CATEGORY_UPDATE = "template_category_update"


class MessageType(str, Enum):
    """Inbound message kinds, keyed by the message ``type`` discriminator."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    STICKER = "sticker"
    LOCATION = "location"
    CONTACTS = "contacts"
    INTERACTIVE = "interactive"
    BUTTON = "button"  # Quick reply button on a template message
    REACTION = "reaction"
    ORDER = "order"
    SYSTEM = "system"
    UNKNOWN = "unknown"  # Fallback for kinds this library does not know yet


# Kinds whose content lives under a same-named key of the message object.
CONTENT_MESSAGE_TYPES: frozenset[str] = frozenset(
    t.value for t in MessageType if t is not MessageType.UNKNOWN
)


class MessageStatus(str, Enum):
    """Delivery status values reported for outgoing messages."""

    SENT = "sent"
    DELIVERED = "delivered"
    READ = "read"
    FAILED = "failed"
    DELETED = "deleted"


class InteractiveReplyType(str, Enum):
    """Inbound interactive reply kinds."""

    BUTTON_REPLY = "button_reply"
    LIST_REPLY = "list_reply"
    NFM_REPLY = "nfm_reply"  # WhatsApp Flows response


class OutboundMessageType(str, Enum):
    """Sendable message kinds, keyed by the outbound ``type`` field."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    STICKER = "sticker"
    LOCATION = "location"
    CONTACTS = "contacts"
    TEMPLATE = "template"
    INTERACTIVE = "interactive"
    REACTION = "reaction"


class InteractiveType(str, Enum):
    """Outbound interactive message kinds."""

    BUTTON = "button"
    LIST = "list"
    CTA_URL = "cta_url"


class ValidationMode(str, Enum):
    """How many violations a validation call reports."""

    COLLECT_ALL = "collect_all"
    FAIL_FAST = "fail_fast"
