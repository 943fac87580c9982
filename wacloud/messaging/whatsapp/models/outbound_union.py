"""
Tagged union over the outbound message kinds.

Used to validate an already encoded payload, e.g. one read back from a queue
or produced by ``to_payload()``. Unknown ``type`` values are rejected.
"""

from typing import Annotated, Any

from pydantic import Tag, TypeAdapter, ValidationError

from wacloud.messaging.whatsapp.models.basic_models import (
    ReactionMessage,
    TextMessage,
)
from wacloud.messaging.whatsapp.models.interactive_models import InteractiveMessage
from wacloud.messaging.whatsapp.models.media_models import (
    AudioMessage,
    DocumentMessage,
    ImageMessage,
    StickerMessage,
    VideoMessage,
)
from wacloud.messaging.whatsapp.models.specialized_models import (
    ContactMessage,
    LocationMessage,
)
from wacloud.messaging.whatsapp.models.template_models import TemplateMessage
from wacloud.schemas.core.errors import ValidationResult, issues_from_validation_error
from wacloud.schemas.core.types import OutboundMessageType, ValidationMode
from wacloud.schemas.core.unions import strict_discriminator, tag_resolver

resolve_outbound_type = tag_resolver(
    "type", "outbound", (t.value for t in OutboundMessageType)
)

OutboundMessage = Annotated[
    Annotated[TextMessage, Tag("outbound:text")]
    | Annotated[ImageMessage, Tag("outbound:image")]
    | Annotated[VideoMessage, Tag("outbound:video")]
    | Annotated[AudioMessage, Tag("outbound:audio")]
    | Annotated[DocumentMessage, Tag("outbound:document")]
    | Annotated[StickerMessage, Tag("outbound:sticker")]
    | Annotated[LocationMessage, Tag("outbound:location")]
    | Annotated[ContactMessage, Tag("outbound:contacts")]
    | Annotated[TemplateMessage, Tag("outbound:template")]
    | Annotated[InteractiveMessage, Tag("outbound:interactive")]
    | Annotated[ReactionMessage, Tag("outbound:reaction")],
    strict_discriminator(resolve_outbound_type, "type", "message type"),
]

outbound_message_adapter: TypeAdapter[OutboundMessage] = TypeAdapter(OutboundMessage)


def parse_outbound_message(
    payload: dict[str, Any], mode: ValidationMode | str = ValidationMode.COLLECT_ALL
) -> ValidationResult[OutboundMessage]:
    """
    Validate an encoded outbound payload through the outbound union.

    Args:
        payload: Wire-shaped message dict
        mode: COLLECT_ALL (default) or FAIL_FAST

    Returns:
        ValidationResult with the typed message, or issues whose paths are
        relative to ``payload``
    """
    mode = ValidationMode(mode)
    try:
        message = outbound_message_adapter.validate_python(payload)
    except ValidationError as e:
        return ValidationResult.failed(issues_from_validation_error(e, payload, mode))
    return ValidationResult.ok(message)
