"""WhatsApp Cloud API messaging: outbound models, builders, transport and messenger."""
