"""
WhatsApp audio message schema.

Covers voice recordings made in the WhatsApp client and uploaded audio files.
"""

from typing import Literal

from pydantic import Field, StrictBool

from wacloud.schemas.whatsapp.base_models import BaseInboundMessage, BaseMediaContent


class AudioContent(BaseMediaContent):
    """Audio message content."""

    voice: StrictBool | None = Field(
        None, description="True if audio is a voice recording, False if audio file"
    )


class WhatsAppAudioMessage(BaseInboundMessage):
    """WhatsApp audio message model."""

    type: Literal["audio"] = Field(
        ..., description="Message type, always 'audio' for audio messages"
    )
    audio: AudioContent = Field(..., description="Audio message content and metadata")

    @property
    def media_id(self) -> str:
        return self.audio.id

    @property
    def is_voice_message(self) -> bool:
        """Check if this is a voice recording."""
        return bool(self.audio.voice)
