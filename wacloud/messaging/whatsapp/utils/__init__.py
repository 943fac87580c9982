"""WhatsApp messaging utilities."""
