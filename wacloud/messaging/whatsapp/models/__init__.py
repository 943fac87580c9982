"""WhatsApp outbound models package."""

from .basic_models import (
    MessageReference,
    MessageResult,
    ReactionMessage,
    ReadReceipt,
    TextMessage,
)
from .interactive_models import (
    ButtonInteractive,
    CtaUrlInteractive,
    InteractiveHeader,
    InteractiveMessage,
    ListInteractive,
    ListRow,
    ListSection,
    ReplyButton,
    ReplyButtonContent,
)
from .media_models import (
    AudioMessage,
    DocumentMessage,
    ImageMessage,
    MediaObject,
    MediaType,
    StickerMessage,
    VideoMessage,
)
from .outbound_union import (
    OutboundMessage,
    outbound_message_adapter,
    parse_outbound_message,
)
from .response_models import (
    OverrideCallbackRequest,
    OverrideCallbackResponse,
    SendMessageResponse,
    SubscriptionsResponse,
    SuccessResponse,
)
from .specialized_models import ContactCard, ContactMessage, LocationMessage
from .template_models import (
    TemplateComponent,
    TemplateLanguage,
    TemplateMessage,
    TemplateParameter,
)

__all__ = [
    "MessageResult",
    "MessageReference",
    "TextMessage",
    "ReactionMessage",
    "ReadReceipt",
    "MediaType",
    "MediaObject",
    "ImageMessage",
    "VideoMessage",
    "AudioMessage",
    "DocumentMessage",
    "StickerMessage",
    "LocationMessage",
    "ContactCard",
    "ContactMessage",
    "TemplateParameter",
    "TemplateComponent",
    "TemplateLanguage",
    "TemplateMessage",
    "InteractiveHeader",
    "ReplyButton",
    "ReplyButtonContent",
    "ListRow",
    "ListSection",
    "ButtonInteractive",
    "ListInteractive",
    "CtaUrlInteractive",
    "InteractiveMessage",
    "OutboundMessage",
    "outbound_message_adapter",
    "parse_outbound_message",
    "SendMessageResponse",
    "SuccessResponse",
    "SubscriptionsResponse",
    "OverrideCallbackRequest",
    "OverrideCallbackResponse",
]
