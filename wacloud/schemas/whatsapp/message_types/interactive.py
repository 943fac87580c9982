"""
WhatsApp interactive message schema.

Interactive messages are the user's replies to reply buttons, list messages
and WhatsApp Flows. The ``interactive.type`` discriminator selects the reply
shape; an unknown reply type is rejected rather than guessed.
"""

import json
from typing import Annotated, Any, Literal

from pydantic import Field, Tag

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.core.types import InteractiveReplyType
from wacloud.schemas.core.unions import strict_discriminator, tag_resolver
from wacloud.schemas.whatsapp.base_models import BaseInboundMessage


class ButtonReply(InboundModel):
    """Reply button the user tapped."""

    id: str = Field(..., description="Button ID set when sending the message")
    title: str = Field(..., description="Button title displayed to the user")


class ListReply(InboundModel):
    """List row the user selected."""

    id: str = Field(..., description="Row ID set when sending the message")
    title: str = Field(..., description="Row title")
    description: str | None = Field(None, description="Row description")


class NfmReply(InboundModel):
    """WhatsApp Flows completion payload."""

    response_json: str = Field(..., description="JSON string with the flow response")
    name: str | None = Field(None, description="Flow name, usually 'flow'")
    body: str | None = Field(None, description="Text shown to the user on completion")

    def response_data(self) -> dict[str, Any]:
        """Decode ``response_json`` into a dict."""
        return json.loads(self.response_json)


class ButtonReplyContent(InboundModel):
    type: Literal["button_reply"] = Field(..., description="Reply type")
    button_reply: ButtonReply = Field(..., description="Selected button")


class ListReplyContent(InboundModel):
    type: Literal["list_reply"] = Field(..., description="Reply type")
    list_reply: ListReply = Field(..., description="Selected list row")


class NfmReplyContent(InboundModel):
    type: Literal["nfm_reply"] = Field(..., description="Reply type")
    nfm_reply: NfmReply = Field(..., description="Flow response")


resolve_reply_type = tag_resolver(
    "type", "interactive", (t.value for t in InteractiveReplyType)
)

InteractiveContent = Annotated[
    Annotated[ButtonReplyContent, Tag("interactive:button_reply")]
    | Annotated[ListReplyContent, Tag("interactive:list_reply")]
    | Annotated[NfmReplyContent, Tag("interactive:nfm_reply")],
    strict_discriminator(resolve_reply_type, "type", "interactive reply type"),
]


class WhatsAppInteractiveMessage(BaseInboundMessage):
    """WhatsApp interactive reply message model."""

    type: Literal["interactive"] = Field(
        ..., description="Message type, always 'interactive'"
    )
    interactive: InteractiveContent = Field(..., description="Interactive reply")

    @property
    def reply_type(self) -> str:
        return self.interactive.type

    @property
    def selected_id(self) -> str | None:
        """ID of the tapped button or selected row; None for flow replies."""
        if isinstance(self.interactive, ButtonReplyContent):
            return self.interactive.button_reply.id
        if isinstance(self.interactive, ListReplyContent):
            return self.interactive.list_reply.id
        return None

    @property
    def selected_title(self) -> str | None:
        if isinstance(self.interactive, ButtonReplyContent):
            return self.interactive.button_reply.title
        if isinstance(self.interactive, ListReplyContent):
            return self.interactive.list_reply.title
        return None
