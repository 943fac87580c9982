"""Outbound message builders: keyword arguments in, validated payload models out."""

from .message_builder import (
    build_audio_message,
    build_button_message,
    build_contacts_message,
    build_cta_url_message,
    build_document_message,
    build_image_message,
    build_list_message,
    build_location_message,
    build_reaction_message,
    build_read_receipt,
    build_sticker_message,
    build_template_message,
    build_text_message,
    build_video_message,
)

__all__ = [
    "build_audio_message",
    "build_button_message",
    "build_contacts_message",
    "build_cta_url_message",
    "build_document_message",
    "build_image_message",
    "build_list_message",
    "build_location_message",
    "build_reaction_message",
    "build_read_receipt",
    "build_sticker_message",
    "build_template_message",
    "build_text_message",
    "build_video_message",
]
