"""
Tests for WhatsAppErrorHandler formatting and classification.
"""

import aiohttp
import pytest
from pydantic import ValidationError

from payloads import make_message
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppApiError
from wacloud.messaging.whatsapp.models.basic_models import TextMessage
from wacloud.schemas.core.errors import WhatsAppValidationError
from wacloud.webhooks.decoder import decode_message, decode_webhook
from wacloud.webhooks.error_handler import WhatsAppErrorHandler


class TestFormatValidationError:
    def test_from_result(self):
        payload = make_message("text")
        payload["text"] = {"body": 5}

        formatted = WhatsAppErrorHandler.format_validation_error(decode_message(payload))

        assert formatted["error"] == "validation_failed"
        assert formatted["error_count"] == 1
        detail = formatted["details"][0]
        assert detail["field"] == "text.body"
        assert detail["path"] == ["text", "body"]
        assert detail["kind"] == "type_mismatch"
        assert detail["type"] == "string_type"
        assert detail["input"] == 5

    def test_from_exception(self):
        error = decode_webhook(b"not json").errors
        formatted = WhatsAppErrorHandler.format_validation_error(
            WhatsAppValidationError("Invalid WhatsApp webhook", error)
        )

        assert formatted["message"] == "Invalid WhatsApp webhook"
        assert formatted["details"][0]["field"] == "<root>"

    def test_from_pydantic_error(self):
        payload = {"to": "16315551234", "type": "text", "text": {"body": ""}}
        with pytest.raises(ValidationError) as exc_info:
            TextMessage.model_validate(payload)

        formatted = WhatsAppErrorHandler.format_validation_error(
            exc_info.value, payload
        )

        assert formatted["details"][0]["path"] == ["text", "body"]
        assert formatted["details"][0]["kind"] == "constraint_violation"


class TestFormatWhatsAppError:
    def test_envelope_fields(self):
        error = WhatsAppApiError(
            status=400, message="Invalid parameter", code=100, subcode=2494010,
            fbtrace_id="AbC",
        )

        assert WhatsAppErrorHandler.format_whatsapp_error(error) == {
            "error": "whatsapp_api_error",
            "message": "Invalid parameter",
            "status": 400,
            "code": 100,
            "subcode": 2494010,
            "fbtrace_id": "AbC",
        }


class TestClassification:
    @pytest.mark.parametrize(
        "error, recoverable, priority",
        [
            (WhatsAppValidationError("bad"), False, "medium"),
            (WhatsAppApiError(status=429, message="Rate limited"), True, "high"),
            (WhatsAppApiError(status=503, message="Unavailable"), True, "high"),
            (WhatsAppApiError(status=400, message="Bad request"), False, "medium"),
            (WhatsAppApiError(status=401, message="Expired"), False, "critical"),
            (WhatsAppApiError(status=400, message="Token", code=190), False, "critical"),
            (aiohttp.ClientConnectionError("reset"), True, "high"),
            (TimeoutError(), True, "high"),
            (RuntimeError("boom"), False, "critical"),
        ],
    )
    def test_recoverability_and_priority(self, error, recoverable, priority):
        assert WhatsAppErrorHandler.is_recoverable_error(error) is recoverable
        assert WhatsAppErrorHandler.get_error_priority(error) == priority

    def test_pydantic_error_is_not_recoverable(self):
        with pytest.raises(ValidationError) as exc_info:
            TextMessage.model_validate({})

        assert not WhatsAppErrorHandler.is_recoverable_error(exc_info.value)
