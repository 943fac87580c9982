"""
Tests for the aiohttp transport client.
"""

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from wacloud.core.config.settings import settings
from wacloud.messaging.whatsapp.client import WhatsAppApiError, WhatsAppClient
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppUrlBuilder

PHONE_ID = "106540352242922"
BASE = "https://graph.facebook.com/v21.0"


def make_client(session) -> WhatsAppClient:
    return WhatsAppClient(
        session,
        access_token="EAAG-test-token",
        phone_number_id=PHONE_ID,
        api_version="v21.0",
        base_url="https://graph.facebook.com/",
    )


class TestUrlBuilder:
    def test_urls(self):
        urls = WhatsAppUrlBuilder("https://graph.facebook.com/", "v21.0", PHONE_ID)

        assert urls.get_messages_url() == f"{BASE}/{PHONE_ID}/messages"
        assert urls.get_subscribed_apps_url("waba-1") == f"{BASE}/waba-1/subscribed_apps"
        assert urls.get_endpoint_url("/me") == f"{BASE}/me"


class TestWhatsAppApiError:
    def test_from_error_envelope(self):
        body = {
            "error": {
                "message": "(#131030) Recipient phone number not in allowed list",
                "type": "OAuthException",
                "code": 131030,
                "error_subcode": 2655007,
                "error_data": {"details": "Add recipient to the allowed list"},
                "fbtrace_id": "Az8or2yhqkZfEZ-_4Qn_Bam",
            }
        }

        error = WhatsAppApiError.from_response(400, body)

        assert error.code == 131030
        assert error.subcode == 2655007
        assert error.error_type == "OAuthException"
        assert error.details == "Add recipient to the allowed list"
        assert error.fbtrace_id == "Az8or2yhqkZfEZ-_4Qn_Bam"
        assert not error.is_authentication_error
        assert str(error).startswith("WhatsApp API error 400 (code 131030)")

    def test_body_without_envelope(self):
        error = WhatsAppApiError.from_response(502, {"raw": "Bad Gateway"})

        assert error.message == "HTTP 502"
        assert error.code is None
        assert str(error) == "WhatsApp API error 502: HTTP 502"

    def test_token_error_code(self):
        body = {"error": {"message": "Session has expired", "code": 190}}

        assert WhatsAppApiError.from_response(400, body).is_authentication_error


class TestPostRequest:
    @pytest.mark.asyncio
    async def test_posts_json_with_bearer_token(self, mock_session_factory, sent_response):
        session = mock_session_factory(body=sent_response)
        client = make_client(session)

        result = await client.post_request({"to": "1", "type": "text"})

        assert result == sent_response
        session.post.assert_called_once_with(
            f"{BASE}/{PHONE_ID}/messages",
            headers={
                "Authorization": "Bearer EAAG-test-token",
                "Content-Type": "application/json",
            },
            json={"to": "1", "type": "text"},
        )

    @pytest.mark.asyncio
    async def test_custom_url(self, mock_session_factory):
        session = mock_session_factory(body={"success": True})
        client = make_client(session)

        await client.post_request({}, custom_url=f"{BASE}/waba-1/subscribed_apps")

        assert session.post.call_args.args[0] == f"{BASE}/waba-1/subscribed_apps"

    @pytest.mark.asyncio
    async def test_error_envelope_is_raised(self, mock_session_factory, caplog):
        body = {"error": {"message": "Invalid parameter", "code": 100, "fbtrace_id": "X1"}}
        client = make_client(mock_session_factory(status=400, body=body))

        with pytest.raises(WhatsAppApiError) as exc_info:
            await client.post_request({"to": "1"})

        assert exc_info.value.status == 400
        assert exc_info.value.code == 100
        assert "fbtrace_id: X1" in caplog.text

    @pytest.mark.asyncio
    async def test_unauthorized(self, mock_session_factory, caplog):
        body = {"error": {"message": "Invalid OAuth access token", "code": 190}}
        client = make_client(mock_session_factory(status=401, body=body))

        with pytest.raises(WhatsAppApiError) as exc_info:
            await client.post_request({})

        assert exc_info.value.is_authentication_error
        assert "ACCESS TOKEN EXPIRED OR INVALID" in caplog.text
        assert "EAAG-tes..." in caplog.text

    @pytest.mark.asyncio
    async def test_non_json_error_body(self, mock_session_factory):
        session = mock_session_factory(status=502)
        session.response.json = AsyncMock(side_effect=ValueError("not JSON"))
        session.response.text = AsyncMock(return_value="<html>Bad Gateway</html>")
        client = make_client(session)

        with pytest.raises(WhatsAppApiError) as exc_info:
            await client.post_request({})

        assert exc_info.value.status == 502
        assert "Bad Gateway" in exc_info.value.details

    @pytest.mark.asyncio
    async def test_network_error_is_reraised(self, caplog):
        session = MagicMock()
        session.post = MagicMock(side_effect=aiohttp.ClientConnectionError("reset"))
        client = make_client(session)

        with pytest.raises(aiohttp.ClientConnectionError):
            await client.post_request({})

        assert "POST request failed" in caplog.text


class TestGetAndDelete:
    @pytest.mark.asyncio
    async def test_get(self, mock_session_factory):
        session = mock_session_factory(body={"data": []})
        client = make_client(session)

        result = await client.get_request("waba-1/subscribed_apps", params={"limit": 5})

        assert result == {"data": []}
        assert session.get.call_args.args[0] == f"{BASE}/waba-1/subscribed_apps"
        assert session.get.call_args.kwargs["params"] == {"limit": 5}

    @pytest.mark.asyncio
    async def test_delete(self, mock_session_factory):
        session = mock_session_factory(body={"success": True})
        client = make_client(session)

        assert await client.delete_request("waba-1/subscribed_apps") == {"success": True}
        assert session.delete.call_args.args[0] == f"{BASE}/waba-1/subscribed_apps"

    @pytest.mark.asyncio
    async def test_get_error(self, mock_session_factory):
        client = make_client(mock_session_factory(status=404, body={"error": {"message": "Unknown path"}}))

        with pytest.raises(WhatsAppApiError, match="Unknown path"):
            await client.get_request("nope")


class TestFromSettings:
    def test_uses_configured_credentials(self, monkeypatch):
        monkeypatch.setattr(settings, "wp_access_token", "EAAG-env")
        monkeypatch.setattr(settings, "wp_phone_id", "555")
        session = MagicMock()

        client = WhatsAppClient.from_settings(session)

        assert client.session is session
        assert client.tenant_id == "555"
        assert client.url_builder.get_messages_url().endswith("/555/messages")

    def test_missing_credentials(self, monkeypatch):
        monkeypatch.setattr(settings, "wp_access_token", None)

        with pytest.raises(ValueError, match="WP_ACCESS_TOKEN"):
            WhatsAppClient.from_settings(MagicMock())
