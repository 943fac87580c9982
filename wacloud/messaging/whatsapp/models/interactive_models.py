"""
Interactive message models for WhatsApp messaging.

Wire-shaped Pydantic schemas for the three interactive kinds:
1. Button Messages - Quick reply buttons (max 3)
2. List Messages - Sectioned lists with rows (max 10 sections, 10 rows each)
3. Call-to-Action Messages - URL buttons with external links

The ``interactive.type`` discriminator selects the kind; an unknown value is
rejected rather than guessed.
"""

from typing import Annotated, Literal

from pydantic import Field, Tag, field_validator, model_validator

from wacloud.messaging.whatsapp.models.basic_models import BaseOutboundMessage
from wacloud.messaging.whatsapp.models.media_models import (
    HeaderDocumentObject,
    MediaObject,
)
from wacloud.schemas.core.base_model import OutboundModel
from wacloud.schemas.core.types import InteractiveType
from wacloud.schemas.core.unions import strict_discriminator, tag_resolver
from wacloud.schemas.whatsapp.validators import HttpUrlStr, NonBlankStr

# Platform limits
BODY_TEXT_MAX_LENGTH = 1024
HEADER_TEXT_MAX_LENGTH = 60
FOOTER_TEXT_MAX_LENGTH = 60
MAX_REPLY_BUTTONS = 3
MAX_LIST_SECTIONS = 10
MAX_LIST_ROWS = 10


class InteractiveHeader(OutboundModel):
    """Header for button messages: text or media.

    The field named by ``type`` is required and no other content field may be
    set.
    """

    type: Literal["text", "image", "video", "document"] = Field(
        ..., description="Header type"
    )
    text: str | None = Field(
        None,
        min_length=1,
        max_length=HEADER_TEXT_MAX_LENGTH,
        description="Header text (for text headers)",
    )
    image: MediaObject | None = None
    video: MediaObject | None = None
    document: HeaderDocumentObject | None = None

    @model_validator(mode="after")
    def validate_content_matches_type(self):
        if getattr(self, self.type) is None:
            raise ValueError(f"'{self.type}' is required for {self.type} headers")
        others = [
            name
            for name in ("text", "image", "video", "document")
            if name != self.type and getattr(self, name) is not None
        ]
        if others:
            raise ValueError(f"{', '.join(others)} not allowed in {self.type} headers")
        return self


class TextHeader(OutboundModel):
    """Text-only header, used by list messages."""

    type: Literal["text"] = "text"
    text: str = Field(..., min_length=1, max_length=HEADER_TEXT_MAX_LENGTH)


class BodyText(OutboundModel):
    text: str = Field(
        ..., min_length=1, max_length=BODY_TEXT_MAX_LENGTH, description="Main text"
    )


class FooterText(OutboundModel):
    text: str = Field(..., min_length=1, max_length=FOOTER_TEXT_MAX_LENGTH)


class ReplyButtonContent(OutboundModel):
    id: NonBlankStr = Field(..., max_length=256, description="Unique button identifier")
    title: NonBlankStr = Field(..., max_length=20, description="Button display text")


class ReplyButton(OutboundModel):
    """Reply button for button messages."""

    type: Literal["reply"] = "reply"
    reply: ReplyButtonContent


class ButtonAction(OutboundModel):
    buttons: list[ReplyButton] = Field(
        ...,
        min_length=1,
        max_length=MAX_REPLY_BUTTONS,
        description="Reply buttons (max 3)",
    )

    @field_validator("buttons")
    @classmethod
    def validate_button_uniqueness(cls, v: list[ReplyButton]) -> list[ReplyButton]:
        """Validate button IDs are unique."""
        button_ids = [button.reply.id for button in v]
        if len(button_ids) != len(set(button_ids)):
            raise ValueError("Button IDs must be unique")
        return v


class ListRow(OutboundModel):
    """Row within a list section."""

    id: NonBlankStr = Field(..., max_length=200, description="Unique row identifier")
    title: NonBlankStr = Field(..., max_length=24, description="Row title")
    description: str | None = Field(
        None, max_length=72, description="Optional row description"
    )


class ListSection(OutboundModel):
    """Section within a list message."""

    title: str | None = Field(None, max_length=24, description="Section title")
    rows: list[ListRow] = Field(
        ...,
        min_length=1,
        max_length=MAX_LIST_ROWS,
        description="List of rows in this section (max 10)",
    )


class ListAction(OutboundModel):
    button: NonBlankStr = Field(
        ..., max_length=20, description="Text for the button that opens the list"
    )
    sections: list[ListSection] = Field(
        ...,
        min_length=1,
        max_length=MAX_LIST_SECTIONS,
        description="List of sections (max 10)",
    )

    @field_validator("sections")
    @classmethod
    def validate_sections(cls, v: list[ListSection]) -> list[ListSection]:
        """Row IDs are unique across sections; several sections need titles."""
        all_row_ids = [row.id for section in v for row in section.rows]
        if len(all_row_ids) != len(set(all_row_ids)):
            raise ValueError("Row IDs must be unique across all sections")
        if len(v) > 1 and any(not section.title for section in v):
            raise ValueError("Every section needs a title when there are several")
        return v


class CtaUrlParameters(OutboundModel):
    display_text: NonBlankStr = Field(
        ..., max_length=20, description="Text to display on the button"
    )
    url: HttpUrlStr = Field(..., description="URL to load when button is tapped")


class CtaUrlAction(OutboundModel):
    name: Literal["cta_url"] = "cta_url"
    parameters: CtaUrlParameters


class ButtonInteractive(OutboundModel):
    """Quick reply buttons, with an optional text or media header."""

    type: Literal["button"] = "button"
    header: InteractiveHeader | None = None
    body: BodyText
    footer: FooterText | None = None
    action: ButtonAction


class ListInteractive(OutboundModel):
    """Sectioned list opened from a single button; text headers only."""

    type: Literal["list"] = "list"
    header: TextHeader | None = None
    body: BodyText
    footer: FooterText | None = None
    action: ListAction


class CtaUrlInteractive(OutboundModel):
    """A single button that opens a URL."""

    type: Literal["cta_url"] = "cta_url"
    header: InteractiveHeader | None = None
    body: BodyText
    footer: FooterText | None = None
    action: CtaUrlAction


resolve_interactive_type = tag_resolver(
    "type", "interactive", (t.value for t in InteractiveType)
)

InteractiveContent = Annotated[
    Annotated[ButtonInteractive, Tag("interactive:button")]
    | Annotated[ListInteractive, Tag("interactive:list")]
    | Annotated[CtaUrlInteractive, Tag("interactive:cta_url")],
    strict_discriminator(resolve_interactive_type, "type", "interactive type"),
]


class InteractiveMessage(BaseOutboundMessage):
    """Outbound interactive message."""

    type: Literal["interactive"] = "interactive"
    interactive: InteractiveContent
