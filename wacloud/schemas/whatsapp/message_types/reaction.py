"""
WhatsApp reaction message schema.

Reactions are emoji responses to earlier messages. Removing a reaction sends
the same shape without an emoji.
"""

from typing import Literal

from pydantic import Field

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.whatsapp.base_models import BaseInboundMessage


class ReactionContent(InboundModel):
    """Reaction message content."""

    message_id: str = Field(..., description="ID of the message being reacted to")
    emoji: str | None = Field(
        None, description="Emoji used for reaction (absent when removed)"
    )


class WhatsAppReactionMessage(BaseInboundMessage):
    """WhatsApp reaction message model."""

    type: Literal["reaction"] = Field(
        ..., description="Message type, always 'reaction'"
    )
    reaction: ReactionContent = Field(..., description="Reaction content")

    @property
    def target_message_id(self) -> str:
        return self.reaction.message_id

    @property
    def is_removing_reaction(self) -> bool:
        """Check if this removes a previous reaction."""
        return not self.reaction.emoji
