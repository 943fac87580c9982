"""Inbound message kinds, one module per kind."""

from wacloud.schemas.whatsapp.message_types.audio import (
    AudioContent,
    WhatsAppAudioMessage,
)
from wacloud.schemas.whatsapp.message_types.button import (
    ButtonContent,
    WhatsAppButtonMessage,
)
from wacloud.schemas.whatsapp.message_types.contacts import (
    ContactCard,
    WhatsAppContactsMessage,
)
from wacloud.schemas.whatsapp.message_types.document import (
    DocumentContent,
    WhatsAppDocumentMessage,
)
from wacloud.schemas.whatsapp.message_types.image import (
    ImageContent,
    WhatsAppImageMessage,
)
from wacloud.schemas.whatsapp.message_types.interactive import (
    ButtonReplyContent,
    ListReplyContent,
    NfmReplyContent,
    WhatsAppInteractiveMessage,
)
from wacloud.schemas.whatsapp.message_types.location import (
    LocationContent,
    WhatsAppLocationMessage,
)
from wacloud.schemas.whatsapp.message_types.order import (
    OrderContent,
    ProductItem,
    WhatsAppOrderMessage,
)
from wacloud.schemas.whatsapp.message_types.reaction import (
    ReactionContent,
    WhatsAppReactionMessage,
)
from wacloud.schemas.whatsapp.message_types.sticker import (
    StickerContent,
    WhatsAppStickerMessage,
)
from wacloud.schemas.whatsapp.message_types.system import (
    SystemContent,
    WhatsAppSystemMessage,
)
from wacloud.schemas.whatsapp.message_types.text import (
    TextContent,
    WhatsAppTextMessage,
)
from wacloud.schemas.whatsapp.message_types.unknown import WhatsAppUnknownMessage
from wacloud.schemas.whatsapp.message_types.video import (
    VideoContent,
    WhatsAppVideoMessage,
)

__all__ = [
    "AudioContent",
    "ButtonContent",
    "ButtonReplyContent",
    "ContactCard",
    "DocumentContent",
    "ImageContent",
    "ListReplyContent",
    "LocationContent",
    "NfmReplyContent",
    "OrderContent",
    "ProductItem",
    "ReactionContent",
    "StickerContent",
    "SystemContent",
    "TextContent",
    "VideoContent",
    "WhatsAppAudioMessage",
    "WhatsAppButtonMessage",
    "WhatsAppContactsMessage",
    "WhatsAppDocumentMessage",
    "WhatsAppImageMessage",
    "WhatsAppInteractiveMessage",
    "WhatsAppLocationMessage",
    "WhatsAppOrderMessage",
    "WhatsAppReactionMessage",
    "WhatsAppStickerMessage",
    "WhatsAppSystemMessage",
    "WhatsAppTextMessage",
    "WhatsAppUnknownMessage",
    "WhatsAppVideoMessage",
]
