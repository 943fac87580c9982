"""
Tests for WhatsAppMessenger against a mocked client.
"""

import logging
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from wacloud.core.config.settings import settings
from wacloud.messaging.whatsapp.client.whatsapp_client import (
    WhatsAppApiError,
    WhatsAppUrlBuilder,
)
from wacloud.messaging.whatsapp.messenger import WhatsAppMessenger
from wacloud.messaging.whatsapp.utils.error_helpers import VALIDATION_ERROR_CODE
from wacloud.schemas.core.errors import ErrorKind, WhatsAppValidationError
from wacloud.schemas.core.types import ValidationMode

PHONE_ID = "106540352242922"
TO = "16315551234"
SUBSCRIBED_APPS_URL = "https://graph.facebook.com/v21.0/waba-1/subscribed_apps"


@pytest.fixture
def client(sent_response):
    mock = MagicMock()
    mock.phone_number_id = PHONE_ID
    mock.url_builder = WhatsAppUrlBuilder("https://graph.facebook.com", "v21.0", PHONE_ID)
    mock.post_request = AsyncMock(return_value=sent_response)
    mock.get_request = AsyncMock()
    mock.delete_request = AsyncMock()
    return mock


@pytest.fixture
def messenger(client):
    return WhatsAppMessenger(client)


def posted_payload(client) -> dict:
    return client.post_request.await_args.args[0]


class TestSendText:
    @pytest.mark.asyncio
    async def test_success(self, messenger, client):
        result = await messenger.send_text("Your order shipped", TO)

        assert result.success
        assert result.message_id == "wamid.sent"
        assert result.recipient == TO
        assert result.tenant_id == PHONE_ID
        assert posted_payload(client)["text"] == {
            "body": "Your order shipped",
            "preview_url": False,
        }

    @pytest.mark.asyncio
    async def test_url_preview(self, messenger, client):
        await messenger.send_text("Track at https://example.com/t/1", TO)
        assert posted_payload(client)["text"]["preview_url"] is True

        await messenger.send_text("https://example.com", TO, disable_preview=True)
        assert posted_payload(client)["text"]["preview_url"] is False

    @pytest.mark.asyncio
    async def test_reply(self, messenger, client):
        await messenger.send_text("Yes", TO, reply_to_message_id="wamid.prev")

        assert posted_payload(client)["context"] == {"message_id": "wamid.prev"}

    @pytest.mark.asyncio
    async def test_invalid_payload_is_not_sent(self, messenger, client, caplog):
        result = await messenger.send_text("", TO)

        assert not result.success
        assert result.error_code == VALIDATION_ERROR_CODE
        assert result.issues[0].path == ("text", "body")
        client.post_request.assert_not_awaited()
        assert "failed validation" in caplog.text


class TestFailures:
    @pytest.mark.asyncio
    async def test_api_error(self, messenger, client):
        client.post_request.side_effect = WhatsAppApiError(
            status=400, message="Re-engagement message", code=131047
        )

        result = await messenger.send_text("hi", TO)

        assert not result.success
        assert result.error_code == "131047"
        assert "Re-engagement message" in result.error

    @pytest.mark.asyncio
    async def test_bsuid_auth_error_is_logged(self, messenger, client, caplog):
        client.post_request.side_effect = WhatsAppApiError(
            status=400, message="Not allowed", code=131062
        )

        await messenger.send_template("US.1349", "otp_code", "en_US")

        assert "Cannot send authentication messages to BSUID" in caplog.text

    @pytest.mark.asyncio
    async def test_authentication_error(self, messenger, client, caplog):
        client.post_request.side_effect = WhatsAppApiError(status=401, message="Expired")

        result = await messenger.send_reaction(TO, "wamid.1", "👍")

        assert result.error_code == "401"
        assert "WhatsApp Authentication Failed" in caplog.text

    @pytest.mark.asyncio
    async def test_network_error(self, messenger, client):
        client.post_request.side_effect = aiohttp.ClientConnectionError("reset")

        result = await messenger.send_text("hi", TO)

        assert not result.success
        assert result.error_code is None
        assert "reset" in result.error

    @pytest.mark.asyncio
    async def test_malformed_response(self, messenger, client):
        client.post_request.return_value = {"messaging_product": "whatsapp"}

        result = await messenger.send_text("hi", TO)

        assert not result.success


class TestSend:
    @pytest.mark.asyncio
    async def test_encoded_payload(self, messenger, client):
        payload = {"to": TO, "type": "reaction", "reaction": {"message_id": "w", "emoji": "🎉"}}

        result = await messenger.send(payload)

        assert result.success
        assert posted_payload(client) == {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            **payload,
        }

    @pytest.mark.asyncio
    async def test_invalid_encoded_payload(self, messenger, client):
        result = await messenger.send({"to": TO, "type": "poll"})

        assert result.issues[0].kind is ErrorKind.UNKNOWN_UNION_VARIANT
        assert result.recipient == TO
        client.post_request.assert_not_awaited()


class TestMessageKinds:
    @pytest.mark.asyncio
    async def test_media(self, messenger, client):
        result = await messenger.send_document(
            TO, link="https://example.com/invoice.pdf", filename="invoice.pdf"
        )

        assert result.success
        assert posted_payload(client)["document"]["filename"] == "invoice.pdf"

    @pytest.mark.asyncio
    async def test_media_needs_exactly_one_source(self, messenger, client):
        result = await messenger.send_image(TO)

        assert result.issues[0].path == ("image",)
        client.post_request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_buttons(self, messenger, client):
        buttons = [{"id": str(i), "title": f"Option {i}"} for i in range(4)]

        three = await messenger.send_button_message(TO, "Pick", buttons[:3], footer_text="f")
        four = await messenger.send_button_message(TO, "Pick", buttons)

        assert three.success
        assert four.issues[0].path == ("interactive", "action", "buttons")

    @pytest.mark.asyncio
    async def test_list(self, messenger, client):
        sections = [{"rows": [{"id": "r1", "title": "Row 1"}]}]

        result = await messenger.send_list_message(TO, "Choose", "Open", sections)

        assert result.success
        assert posted_payload(client)["interactive"]["type"] == "list"

    @pytest.mark.asyncio
    async def test_cta(self, messenger, client):
        result = await messenger.send_cta_message(
            TO, "Track", "Open", "https://example.com/t"
        )

        assert result.success
        assert posted_payload(client)["interactive"]["type"] == "cta_url"

    @pytest.mark.asyncio
    async def test_location_and_contacts(self, messenger, client):
        location = await messenger.send_location(TO, "37.48", "-122.14", name="HQ")
        contacts = await messenger.send_contacts(
            TO,
            [{"name": {"formatted_name": "Ada"}, "phones": [{"phone": "+441234"}]}],
        )

        assert location.success
        assert contacts.success
        assert posted_payload(client)["contacts"][0]["name"] == {"formatted_name": "Ada"}


class TestMarkAsRead:
    @pytest.mark.asyncio
    async def test_with_typing_indicator(self, messenger, client):
        client.post_request.return_value = {"success": True}

        result = await messenger.mark_as_read("wamid.in", typing=True)

        assert result.success
        assert result.message_id == "wamid.in"
        assert posted_payload(client) == {
            "messaging_product": "whatsapp",
            "status": "read",
            "message_id": "wamid.in",
            "typing_indicator": {"type": "text"},
        }

    @pytest.mark.asyncio
    async def test_platform_declines(self, messenger, client):
        client.post_request.return_value = {"success": False}

        result = await messenger.mark_as_read("wamid.in")

        assert not result.success


class TestChatActions:
    @pytest.mark.asyncio
    async def test_remove_reaction(self, messenger, client):
        result = await messenger.remove_reaction(TO, "wamid.in")

        assert result.success
        assert posted_payload(client)["reaction"] == {
            "message_id": "wamid.in",
            "emoji": "",
        }

    @pytest.mark.asyncio
    async def test_show_typing(self, messenger, client):
        client.post_request.return_value = {"success": True}

        result = await messenger.show_typing("wamid.in")

        assert result.success
        assert posted_payload(client)["typing_indicator"] == {"type": "text"}

    @pytest.mark.asyncio
    async def test_typing_then_send(self, messenger, client, sent_response, monkeypatch):
        sleep = AsyncMock()
        monkeypatch.setattr("asyncio.sleep", sleep)
        client.post_request.side_effect = [{"success": True}, sent_response]

        result = await messenger.typing_then_send("wamid.in", TO, "On it", delay=1.5)

        assert result.success
        sleep.assert_awaited_once_with(1.5)
        receipt, reply = [call.args[0] for call in client.post_request.await_args_list]
        assert receipt["status"] == "read"
        assert receipt["typing_indicator"] == {"type": "text"}
        assert reply["text"]["body"] == "On it"

    @pytest.mark.asyncio
    async def test_text_is_sent_when_typing_fails(
        self, messenger, client, sent_response, caplog
    ):
        client.post_request.side_effect = [{"success": False}, sent_response]

        with caplog.at_level(logging.WARNING):
            result = await messenger.typing_then_send("wamid.in", TO, "On it", delay=0)

        assert result.success
        assert client.post_request.await_count == 2
        assert "Typing indicator for wamid.in failed" in caplog.text


class TestSubscriptions:
    @pytest.mark.asyncio
    async def test_subscribe(self, messenger, client):
        client.post_request.return_value = {"success": True}

        response = await messenger.subscribe_app("waba-1")

        assert response.success
        client.post_request.assert_awaited_once_with({}, custom_url=SUBSCRIBED_APPS_URL)

    @pytest.mark.asyncio
    async def test_get_subscriptions(self, messenger, client):
        client.get_request.return_value = {
            "data": [
                {
                    "whatsapp_business_api_data": {"id": "app-1", "name": "Orders"},
                    "override_callback_uri": "https://example.com/hook",
                }
            ]
        }

        response = await messenger.get_subscriptions("waba-1")

        client.get_request.assert_awaited_once_with("waba-1/subscribed_apps")
        assert response.data[0].whatsapp_business_api_data.name == "Orders"

    @pytest.mark.asyncio
    async def test_unsubscribe(self, messenger, client):
        client.delete_request.return_value = {"success": True}

        assert (await messenger.unsubscribe_app("waba-1")).success
        client.delete_request.assert_awaited_once_with("waba-1/subscribed_apps")

    @pytest.mark.asyncio
    async def test_override_callback_url(self, messenger, client):
        client.post_request.return_value = {"data": []}

        await messenger.override_callback_url(
            "https://example.com/hook", "s3cret", waba_id="waba-1"
        )

        client.post_request.assert_awaited_once_with(
            {"override_callback_uri": "https://example.com/hook", "verify_token": "s3cret"},
            custom_url=SUBSCRIBED_APPS_URL,
        )

    @pytest.mark.asyncio
    async def test_override_rejects_invalid_uri(self, messenger, client):
        with pytest.raises(WhatsAppValidationError) as exc_info:
            await messenger.override_callback_url("not a url", " ", waba_id="waba-1")

        assert [issue.path for issue in exc_info.value.issues] == [
            ("override_callback_uri",),
            ("verify_token",),
        ]
        client.post_request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_default_business_id(self, client, monkeypatch):
        monkeypatch.setattr(settings, "wp_bid", "waba-1")
        client.delete_request.return_value = {"success": True}

        await WhatsAppMessenger(client).unsubscribe_app()

        client.delete_request.assert_awaited_once_with("waba-1/subscribed_apps")

    @pytest.mark.asyncio
    async def test_business_id_required(self, client, monkeypatch):
        monkeypatch.setattr(settings, "wp_bid", None)

        with pytest.raises(ValueError, match="WP_BID"):
            await WhatsAppMessenger(client).subscribe_app()

        client.post_request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_api_errors_propagate(self, messenger, client):
        client.post_request.side_effect = WhatsAppApiError(status=403, message="Forbidden")

        with pytest.raises(WhatsAppApiError):
            await messenger.subscribe_app("waba-1")


class TestValidationMode:
    def test_default_comes_from_settings(self, client, monkeypatch):
        monkeypatch.setattr(settings, "validation_mode", ValidationMode.FAIL_FAST)

        assert WhatsAppMessenger(client).validation_mode is ValidationMode.FAIL_FAST

    @pytest.mark.asyncio
    async def test_explicit_mode(self, client, monkeypatch):
        monkeypatch.setattr(settings, "validation_mode", ValidationMode.COLLECT_ALL)
        messenger = WhatsAppMessenger(client, validation_mode="fail_fast")

        result = await messenger.send_cta_message(TO, "", "", "not a url")

        assert messenger.validation_mode is ValidationMode.FAIL_FAST
        assert len(result.issues) == 1
        client.post_request.assert_not_awaited()


class TestLoggingContext:
    @pytest.mark.asyncio
    async def test_tenant_prefix(self, messenger, caplog):
        caplog.set_level(logging.INFO, logger="wacloud.messaging.whatsapp.messenger.whatsapp_messenger")

        await messenger.send_text("hi", TO)

        assert f"[T:{PHONE_ID}]" in caplog.text
