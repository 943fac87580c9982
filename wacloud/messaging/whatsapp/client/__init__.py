"""WhatsApp client package."""

from .whatsapp_client import WhatsAppApiError, WhatsAppClient, WhatsAppUrlBuilder

__all__ = ["WhatsAppApiError", "WhatsAppClient", "WhatsAppUrlBuilder"]
