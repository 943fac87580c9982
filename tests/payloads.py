"""Payload factories for webhook deliveries."""

from typing import Any

BUSINESS_ACCOUNT_ID = "102290129340398"
PHONE_NUMBER_ID = "106540352242922"
SENDER = "16315551234"

# Minimal content for every inbound message kind
MESSAGE_CONTENT: dict[str, Any] = {
    "text": {"body": "hi"},
    "image": {"id": "img-1", "mime_type": "image/jpeg", "sha256": "abc"},
    "video": {"id": "vid-1", "mime_type": "video/mp4"},
    "audio": {"id": "aud-1", "mime_type": "audio/ogg", "voice": True},
    "document": {"id": "doc-1", "filename": "Invoice.PDF"},
    "sticker": {"id": "stk-1", "animated": False},
    "location": {"latitude": 37.48, "longitude": "-122.14"},
    "contacts": [{"name": {"formatted_name": "Ada Lovelace"}}],
    "interactive": {
        "type": "button_reply",
        "button_reply": {"id": "yes", "title": "Yes"},
    },
    "button": {"text": "Stop promotions", "payload": "STOP"},
    "reaction": {"message_id": "wamid.original", "emoji": "👍"},
    "order": {
        "catalog_id": "cat-1",
        "product_items": [
            {
                "product_retailer_id": "sku-1",
                "quantity": "2",
                "item_price": 1.5,
                "currency": "USD",
            }
        ],
    },
    "system": {"type": "user_changed_number", "body": "User changed number"},
}


def make_message(message_type: str | None = "text", **overrides: Any) -> dict[str, Any]:
    """Inbound message object; the kind's minimal content is added when known."""
    message: dict[str, Any] = {
        "from": SENDER,
        "id": "wamid.HBgLMTYzMTU1NTEyMzQVAgASGBQzQTRBNjU5OUFFRTAzODEwMTQ0RgA=",
        "timestamp": "1603059201",
    }
    if message_type is not None:
        message["type"] = message_type
    if message_type in MESSAGE_CONTENT:
        message[message_type] = MESSAGE_CONTENT[message_type]
    message.update(overrides)
    return message


def make_status(status: str = "delivered", **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": "wamid.outgoing",
        "recipient_id": SENDER,
        "status": status,
        "timestamp": "1603059202",
    }
    payload.update(overrides)
    return payload


def make_messages_value(
    messages: list[dict[str, Any]] | None = None,
    statuses: list[dict[str, Any]] | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    value: dict[str, Any] = {
        "messaging_product": "whatsapp",
        "metadata": {
            "display_phone_number": "15550783881",
            "phone_number_id": PHONE_NUMBER_ID,
        },
    }
    if messages is not None:
        value["contacts"] = [{"profile": {"name": "Kerry Fisher"}, "wa_id": SENDER}]
        value["messages"] = messages
    if statuses is not None:
        value["statuses"] = statuses
    value.update(overrides)
    return value


def make_template_value(**fields: Any) -> dict[str, Any]:
    value: dict[str, Any] = {
        "message_template_id": 12345678,
        "message_template_name": "order_confirmation",
        "message_template_language": "en_US",
    }
    value.update(fields)
    return value


def make_webhook(*changes: dict[str, Any], time: int | None = None) -> dict[str, Any]:
    """Envelope with one entry holding the given ``{"field", "value"}`` changes."""
    entry: dict[str, Any] = {"id": BUSINESS_ACCOUNT_ID, "changes": list(changes)}
    if time is not None:
        entry["time"] = time
    return {"object": "whatsapp_business_account", "entry": [entry]}


def messages_change(**value_kwargs: Any) -> dict[str, Any]:
    return {"field": "messages", "value": make_messages_value(**value_kwargs)}
