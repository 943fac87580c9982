"""
Tagged union over the inbound message kinds.

The message ``type`` selects exactly one kind. Unlike the webhook ``field``,
this axis tolerates forward evolution: an absent, unknown or ``unsupported``
type resolves to ``WhatsAppUnknownMessage`` instead of failing.
"""

from typing import Annotated

from pydantic import Discriminator, Tag, TypeAdapter

from wacloud.schemas.core.types import CONTENT_MESSAGE_TYPES, MessageType
from wacloud.schemas.core.unions import tag_resolver
from wacloud.schemas.whatsapp.message_types import (
    WhatsAppAudioMessage,
    WhatsAppButtonMessage,
    WhatsAppContactsMessage,
    WhatsAppDocumentMessage,
    WhatsAppImageMessage,
    WhatsAppInteractiveMessage,
    WhatsAppLocationMessage,
    WhatsAppOrderMessage,
    WhatsAppReactionMessage,
    WhatsAppStickerMessage,
    WhatsAppSystemMessage,
    WhatsAppTextMessage,
    WhatsAppUnknownMessage,
    WhatsAppVideoMessage,
)

resolve_message_type = tag_resolver(
    "type", "message", CONTENT_MESSAGE_TYPES, fallback=MessageType.UNKNOWN.value
)

InboundMessage = Annotated[
    Annotated[WhatsAppTextMessage, Tag("message:text")]
    | Annotated[WhatsAppImageMessage, Tag("message:image")]
    | Annotated[WhatsAppVideoMessage, Tag("message:video")]
    | Annotated[WhatsAppAudioMessage, Tag("message:audio")]
    | Annotated[WhatsAppDocumentMessage, Tag("message:document")]
    | Annotated[WhatsAppStickerMessage, Tag("message:sticker")]
    | Annotated[WhatsAppLocationMessage, Tag("message:location")]
    | Annotated[WhatsAppContactsMessage, Tag("message:contacts")]
    | Annotated[WhatsAppInteractiveMessage, Tag("message:interactive")]
    | Annotated[WhatsAppButtonMessage, Tag("message:button")]
    | Annotated[WhatsAppReactionMessage, Tag("message:reaction")]
    | Annotated[WhatsAppOrderMessage, Tag("message:order")]
    | Annotated[WhatsAppSystemMessage, Tag("message:system")]
    | Annotated[WhatsAppUnknownMessage, Tag("message:unknown")],
    Discriminator(resolve_message_type),
]

# Message kind -> model, for callers that branch on a decoded message
MESSAGE_MODELS: dict[MessageType, type] = {
    MessageType.TEXT: WhatsAppTextMessage,
    MessageType.IMAGE: WhatsAppImageMessage,
    MessageType.VIDEO: WhatsAppVideoMessage,
    MessageType.AUDIO: WhatsAppAudioMessage,
    MessageType.DOCUMENT: WhatsAppDocumentMessage,
    MessageType.STICKER: WhatsAppStickerMessage,
    MessageType.LOCATION: WhatsAppLocationMessage,
    MessageType.CONTACTS: WhatsAppContactsMessage,
    MessageType.INTERACTIVE: WhatsAppInteractiveMessage,
    MessageType.BUTTON: WhatsAppButtonMessage,
    MessageType.REACTION: WhatsAppReactionMessage,
    MessageType.ORDER: WhatsAppOrderMessage,
    MessageType.SYSTEM: WhatsAppSystemMessage,
    MessageType.UNKNOWN: WhatsAppUnknownMessage,
}

inbound_message_adapter: TypeAdapter[InboundMessage] = TypeAdapter(InboundMessage)
