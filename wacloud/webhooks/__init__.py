"""
Webhook decoding for the WhatsApp Cloud API.

Usage:
    from wacloud.webhooks import decode_webhook

    result = decode_webhook(request_body)
    if result.success:
        for message in result.value.get_messages():
            ...
"""

from .decoder import decode_message, decode_webhook, parse_webhook
from .error_handler import WhatsAppErrorHandler

__all__ = [
    "WhatsAppErrorHandler",
    "decode_message",
    "decode_webhook",
    "parse_webhook",
]
