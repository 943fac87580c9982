"""
Tests for the inbound message kinds and the message type resolver.

Covers every kind's minimal shape, the unknown-kind fallback, kind/content
consistency and the interactive reply union.
"""

import pytest
from pydantic import ValidationError

from payloads import make_message
from wacloud.schemas.core.errors import ErrorKind
from wacloud.schemas.core.types import CONTENT_MESSAGE_TYPES, MessageType
from wacloud.schemas.whatsapp.message_types import (
    WhatsAppInteractiveMessage,
    WhatsAppUnknownMessage,
)
from wacloud.schemas.whatsapp.message_union import (
    MESSAGE_MODELS,
    inbound_message_adapter,
)
from wacloud.webhooks.decoder import decode_message

ALL_KINDS = [kind.value for kind in MessageType]


class TestMessageKinds:
    """Every kind decodes to its own model with only its own content."""

    def test_fourteen_kinds(self):
        assert len(ALL_KINDS) == 14

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_minimal_message_decodes_to_its_kind(self, kind):
        message = inbound_message_adapter.validate_python(make_message(kind))

        assert message.type == kind
        assert type(message) is MESSAGE_MODELS[MessageType(kind)]
        if kind != MessageType.UNKNOWN.value:
            assert getattr(message, kind)
        for other in CONTENT_MESSAGE_TYPES - {kind}:
            assert getattr(message, other, None) is None

    def test_text_message_fields(self):
        message = inbound_message_adapter.validate_python(make_message("text"))

        assert message.body == "hi"
        assert message.sender_id == "16315551234"
        assert message.timestamp == 1603059201
        assert not message.is_reply

    def test_location_keeps_number_representation(self):
        message = inbound_message_adapter.validate_python(make_message("location"))

        assert message.location.latitude == 37.48
        assert message.location.longitude == "-122.14"
        assert message.coordinates == (37.48, -122.14)

    def test_order_accepts_numeric_strings(self):
        message = inbound_message_adapter.validate_python(make_message("order"))

        item = message.order.product_items[0]
        assert item.quantity == "2"
        assert item.item_price == 1.5
        assert message.total == 3.0

    def test_media_helpers(self):
        document = inbound_message_adapter.validate_python(make_message("document"))
        audio = inbound_message_adapter.validate_python(make_message("audio"))

        assert document.file_extension == "pdf"
        assert document.media_id == "doc-1"
        assert audio.is_voice_message

    def test_unknown_keys_are_ignored(self):
        payload = make_message("text", brand_new_field={"x": 1})
        payload["text"] = {"body": "hi", "rendering_hint": "bold"}

        message = inbound_message_adapter.validate_python(payload)

        assert message.body == "hi"
        assert not hasattr(message, "brand_new_field")

    def test_reply_and_forward_context(self):
        reply = inbound_message_adapter.validate_python(
            make_message("text", context={"from": "15550001111", "id": "wamid.prev"})
        )
        forwarded = inbound_message_adapter.validate_python(
            make_message("text", context={"forwarded": True})
        )

        assert reply.is_reply
        assert reply.context.from_ == "15550001111"
        assert forwarded.is_forwarded
        assert not forwarded.is_reply

    def test_ad_referral(self):
        message = inbound_message_adapter.validate_python(
            make_message(
                "text",
                referral={"source_type": "ad", "ctwa_clid": "clid-1"},
            )
        )
        assert message.is_ad_referral
        assert message.referral.ctwa_clid == "clid-1"

    def test_strict_bool_rejects_strings(self):
        payload = make_message("audio")
        payload["audio"] = {"id": "aud-1", "voice": "true"}

        result = decode_message(payload)

        assert not result.success
        issue = result.errors[0]
        assert issue.kind is ErrorKind.TYPE_MISMATCH
        assert issue.path == ("audio", "voice")

    def test_missing_content_field(self):
        payload = make_message("image")
        del payload["image"]

        result = decode_message(payload)

        assert result.errors[0].kind is ErrorKind.MISSING_FIELD
        assert result.errors[0].path == ("image",)


class TestUnknownKindFallback:
    """Unknown, absent and unsupported types decode to the fallback kind."""

    def test_unrecognized_type(self):
        message = inbound_message_adapter.validate_python(
            make_message("poll", poll={"question": "Lunch?"})
        )

        assert isinstance(message, WhatsAppUnknownMessage)
        assert message.type == "unknown"
        assert message.original_type == "poll"

    def test_unsupported_type_keeps_errors(self):
        message = inbound_message_adapter.validate_python(
            make_message(
                "unsupported",
                errors=[
                    {
                        "code": 131051,
                        "title": "Message type unknown",
                        "error_data": {"details": "Message type is not supported"},
                    }
                ],
            )
        )

        assert isinstance(message, WhatsAppUnknownMessage)
        assert message.is_unsupported
        assert message.error_codes == [131051]
        assert message.primary_error.error_data.details == "Message type is not supported"

    def test_absent_type(self):
        message = inbound_message_adapter.validate_python(make_message(None))

        assert isinstance(message, WhatsAppUnknownMessage)
        assert message.original_type is None

    @pytest.mark.parametrize("kind", [5, ["text"], True])
    def test_non_string_type_is_a_type_mismatch(self, kind):
        result = decode_message(make_message(None, type=kind))

        [issue] = result.errors
        assert issue.kind is ErrorKind.TYPE_MISMATCH
        assert issue.path == ("type",)

    def test_fallback_still_requires_common_fields(self):
        payload = make_message("poll")
        del payload["from"]

        result = decode_message(payload)

        assert not result.success
        assert result.errors[0].kind is ErrorKind.MISSING_FIELD
        assert result.errors[0].path == ("from",)


class TestContentConsistency:
    """A message must not carry another kind's content."""

    def test_foreign_content_is_rejected(self):
        payload = make_message("text", image={"id": "img-1"})

        result = decode_message(payload)

        assert not result.success
        issue = result.errors[0]
        assert issue.kind is ErrorKind.CONSTRAINT_VIOLATION
        assert issue.constraint == "kind_content_mismatch"
        assert "image" in issue.message

    def test_type_with_only_other_content(self):
        payload = make_message("text")
        del payload["text"]
        payload["image"] = {"id": "img-1"}

        with pytest.raises(ValidationError):
            inbound_message_adapter.validate_python(payload)


class TestInteractiveReplies:
    def test_button_reply(self):
        message = inbound_message_adapter.validate_python(make_message("interactive"))

        assert isinstance(message, WhatsAppInteractiveMessage)
        assert message.reply_type == "button_reply"
        assert message.selected_id == "yes"
        assert message.selected_title == "Yes"

    def test_list_reply(self):
        message = inbound_message_adapter.validate_python(
            make_message(
                "interactive",
                interactive={
                    "type": "list_reply",
                    "list_reply": {"id": "row-2", "title": "Tuesday"},
                },
            )
        )
        assert message.selected_id == "row-2"

    def test_flow_reply(self):
        message = inbound_message_adapter.validate_python(
            make_message(
                "interactive",
                interactive={
                    "type": "nfm_reply",
                    "nfm_reply": {
                        "name": "flow",
                        "body": "Sent",
                        "response_json": '{"flow_token": "abc", "rating": 5}',
                    },
                },
            )
        )

        assert message.selected_id is None
        assert message.interactive.nfm_reply.response_data() == {
            "flow_token": "abc",
            "rating": 5,
        }

    def test_unknown_reply_type(self):
        payload = make_message(
            "interactive", interactive={"type": "product_reply", "product_reply": {}}
        )

        result = decode_message(payload)

        issue = result.errors[0]
        assert issue.kind is ErrorKind.UNKNOWN_UNION_VARIANT
        assert issue.path == ("interactive", "type")
        assert issue.input == "product_reply"

    def test_missing_reply_type(self):
        payload = make_message(
            "interactive", interactive={"button_reply": {"id": "a", "title": "A"}}
        )

        result = decode_message(payload)

        assert result.errors[0].kind is ErrorKind.MISSING_FIELD
        assert result.errors[0].path == ("interactive", "type")
