"""
Outbound message builders.

Each ``build_*_message`` function assembles the wire payload for one message
kind from keyword arguments and validates it through the kind's model. The
result is a ``ValidationResult``: the frozen model on success, or issues whose
paths point into the wire payload (``("interactive", "action", "buttons")``),
so they can be reported next to what is actually sent.

Nested arguments (buttons, sections, contacts, components, headers) accept
either plain dicts in wire shape or the corresponding models.
"""

from typing import Any, TypeVar

from pydantic import ValidationError

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.models.basic_models import (
    BaseOutboundMessage,
    ReactionMessage,
    ReadReceipt,
    TextMessage,
)
from wacloud.messaging.whatsapp.models.interactive_models import (
    InteractiveHeader,
    InteractiveMessage,
    ListSection,
    ReplyButtonContent,
)
from wacloud.messaging.whatsapp.models.media_models import (
    MEDIA_MESSAGE_MODELS,
    AudioMessage,
    DocumentMessage,
    ImageMessage,
    MediaType,
    StickerMessage,
    VideoMessage,
)
from wacloud.messaging.whatsapp.models.specialized_models import (
    ContactCard,
    ContactMessage,
    LocationMessage,
)
from wacloud.messaging.whatsapp.models.template_models import (
    TemplateComponent,
    TemplateMessage,
)
from wacloud.schemas.core.base_model import OutboundModel, PayloadModel
from wacloud.schemas.core.errors import ValidationResult, issues_from_validation_error
from wacloud.schemas.core.types import ValidationMode

M = TypeVar("M", bound=OutboundModel)

Mode = ValidationMode | str

logger = get_logger(__name__)


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in data.items() if value is not None}


def _as_payload(item: Any) -> Any:
    """Wire form of a nested argument given as a model or as a dict."""
    if isinstance(item, PayloadModel):
        return item.to_payload()
    return item


def _envelope(
    to: str, message_type: str, reply_to_message_id: str | None
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "messaging_product": "whatsapp",
        "recipient_type": "individual",
        "to": to,
        "type": message_type,
    }
    # Add reply context if specified
    if reply_to_message_id is not None:
        payload["context"] = {"message_id": reply_to_message_id}
    return payload


def _validate(model: type[M], payload: dict[str, Any], mode: Mode) -> ValidationResult[M]:
    mode = ValidationMode(mode)
    try:
        message = model.model_validate(payload)
    except ValidationError as e:
        issues = issues_from_validation_error(e, payload, mode)
        logger.debug(
            f"{model.__name__} rejected with {len(issues)} issue(s), first: {issues[0]}"
        )
        return ValidationResult[model].failed(issues)
    return ValidationResult[model].ok(message)


def build_text_message(
    to: str,
    body: str,
    *,
    preview_url: bool | None = None,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[TextMessage]:
    """
    Build a text message.

    Args:
        to: Recipient phone number or BSUID
        body: Message text (max 4096 chars)
        preview_url: Render a preview for the first URL in the body
        reply_to_message_id: Message to reply to, if any
        mode: COLLECT_ALL (default) or FAIL_FAST
    """
    payload = _envelope(to, "text", reply_to_message_id)
    payload["text"] = _compact({"body": body, "preview_url": preview_url})
    return _validate(TextMessage, payload, mode)


def _build_media_message(
    media_type: MediaType,
    to: str,
    media_id: str | None,
    link: str | None,
    reply_to_message_id: str | None,
    mode: Mode,
    **extra: Any,
) -> ValidationResult[BaseOutboundMessage]:
    payload = _envelope(to, media_type.value, reply_to_message_id)
    payload[media_type.value] = _compact({"id": media_id, "link": link, **extra})
    return _validate(MEDIA_MESSAGE_MODELS[media_type], payload, mode)


def build_image_message(
    to: str,
    *,
    media_id: str | None = None,
    link: str | None = None,
    caption: str | None = None,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[ImageMessage]:
    """
    Build an image message from an uploaded media ID or a public link.

    Exactly one of ``media_id`` and ``link`` must be given.
    """
    return _build_media_message(
        MediaType.IMAGE, to, media_id, link, reply_to_message_id, mode, caption=caption
    )


def build_video_message(
    to: str,
    *,
    media_id: str | None = None,
    link: str | None = None,
    caption: str | None = None,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[VideoMessage]:
    return _build_media_message(
        MediaType.VIDEO, to, media_id, link, reply_to_message_id, mode, caption=caption
    )


def build_audio_message(
    to: str,
    *,
    media_id: str | None = None,
    link: str | None = None,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[AudioMessage]:
    return _build_media_message(
        MediaType.AUDIO, to, media_id, link, reply_to_message_id, mode
    )


def build_document_message(
    to: str,
    *,
    media_id: str | None = None,
    link: str | None = None,
    caption: str | None = None,
    filename: str | None = None,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[DocumentMessage]:
    return _build_media_message(
        MediaType.DOCUMENT,
        to,
        media_id,
        link,
        reply_to_message_id,
        mode,
        caption=caption,
        filename=filename,
    )


def build_sticker_message(
    to: str,
    *,
    media_id: str | None = None,
    link: str | None = None,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[StickerMessage]:
    return _build_media_message(
        MediaType.STICKER, to, media_id, link, reply_to_message_id, mode
    )


def build_location_message(
    to: str,
    latitude: float | str,
    longitude: float | str,
    *,
    name: str | None = None,
    address: str | None = None,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[LocationMessage]:
    """
    Build a location pin.

    Coordinates may be numbers or numeric strings; they are sent as given.
    """
    payload = _envelope(to, "location", reply_to_message_id)
    payload["location"] = _compact(
        {"latitude": latitude, "longitude": longitude, "name": name, "address": address}
    )
    return _validate(LocationMessage, payload, mode)


def build_contacts_message(
    to: str,
    contacts: list[ContactCard | dict[str, Any]],
    *,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[ContactMessage]:
    payload = _envelope(to, "contacts", reply_to_message_id)
    payload["contacts"] = [_as_payload(card) for card in contacts]
    return _validate(ContactMessage, payload, mode)


def build_template_message(
    to: str,
    name: str,
    language_code: str,
    *,
    components: list[TemplateComponent | dict[str, Any]] | None = None,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[TemplateMessage]:
    """
    Build a template message.

    Args:
        to: Recipient phone number or BSUID
        name: Approved template name
        language_code: Template language, e.g. ``en_US``
        components: Header, body and button parameters, if the template has any
        reply_to_message_id: Message to reply to, if any
        mode: COLLECT_ALL (default) or FAIL_FAST
    """
    payload = _envelope(to, "template", reply_to_message_id)
    template: dict[str, Any] = {"name": name, "language": {"code": language_code}}
    if components is not None:
        template["components"] = [_as_payload(c) for c in components]
    payload["template"] = template
    return _validate(TemplateMessage, payload, mode)


def _interactive_payload(
    to: str,
    interactive_type: str,
    body: str,
    header: dict[str, Any] | None,
    footer: str | None,
    action: dict[str, Any],
    reply_to_message_id: str | None,
) -> dict[str, Any]:
    payload = _envelope(to, "interactive", reply_to_message_id)
    interactive: dict[str, Any] = {"type": interactive_type}
    if header is not None:
        interactive["header"] = header
    interactive["body"] = {"text": body}
    if footer is not None:
        interactive["footer"] = {"text": footer}
    interactive["action"] = action
    payload["interactive"] = interactive
    return payload


def build_button_message(
    to: str,
    body: str,
    buttons: list[ReplyButtonContent | dict[str, Any]],
    *,
    header: InteractiveHeader | dict[str, Any] | None = None,
    footer: str | None = None,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[InteractiveMessage]:
    """
    Build a quick reply button message.

    Args:
        to: Recipient phone number or BSUID
        body: Main message text (max 1024 chars)
        buttons: 1 to 3 buttons, each ``{"id": ..., "title": ...}``
        header: Optional text or media header
        footer: Footer text (max 60 chars)
        reply_to_message_id: Message to reply to, if any
        mode: COLLECT_ALL (default) or FAIL_FAST
    """
    formatted_buttons = [
        {"type": "reply", "reply": _as_payload(button)} for button in buttons
    ]
    payload = _interactive_payload(
        to,
        "button",
        body,
        _as_payload(header),
        footer,
        {"buttons": formatted_buttons},
        reply_to_message_id,
    )
    return _validate(InteractiveMessage, payload, mode)


def build_list_message(
    to: str,
    body: str,
    button: str,
    sections: list[ListSection | dict[str, Any]],
    *,
    header: str | None = None,
    footer: str | None = None,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[InteractiveMessage]:
    """
    Build a list message.

    ``button`` is the label of the button that opens the list. List headers
    are text only.
    """
    header_payload = {"type": "text", "text": header} if header is not None else None
    payload = _interactive_payload(
        to,
        "list",
        body,
        header_payload,
        footer,
        {"button": button, "sections": [_as_payload(s) for s in sections]},
        reply_to_message_id,
    )
    return _validate(InteractiveMessage, payload, mode)


def build_cta_url_message(
    to: str,
    body: str,
    display_text: str,
    url: str,
    *,
    header: InteractiveHeader | dict[str, Any] | None = None,
    footer: str | None = None,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[InteractiveMessage]:
    action = {
        "name": "cta_url",
        "parameters": {"display_text": display_text, "url": url},
    }
    payload = _interactive_payload(
        to, "cta_url", body, _as_payload(header), footer, action, reply_to_message_id
    )
    return _validate(InteractiveMessage, payload, mode)


def build_reaction_message(
    to: str,
    message_id: str,
    emoji: str,
    *,
    reply_to_message_id: str | None = None,
    mode: Mode = ValidationMode.COLLECT_ALL,
) -> ValidationResult[ReactionMessage]:
    """React to ``message_id``; an empty ``emoji`` removes the reaction."""
    payload = _envelope(to, "reaction", reply_to_message_id)
    payload["reaction"] = {"message_id": message_id, "emoji": emoji}
    return _validate(ReactionMessage, payload, mode)


def build_read_receipt(
    message_id: str, typing: bool = False, mode: Mode = ValidationMode.COLLECT_ALL
) -> ValidationResult[ReadReceipt]:
    """Mark ``message_id`` as read, optionally showing a typing indicator."""
    payload: dict[str, Any] = {
        "messaging_product": "whatsapp",
        "status": "read",
        "message_id": message_id,
    }
    if typing:
        payload["typing_indicator"] = {"type": "text"}
    return _validate(ReadReceipt, payload, mode)
