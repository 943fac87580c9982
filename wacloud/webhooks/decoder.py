"""
Webhook decoding entry points.

``decode_webhook`` takes the raw request body (or an already parsed JSON
value) and returns a ``ValidationResult`` holding either the typed
``WhatsAppWebhook`` or the list of path-qualified issues. Nothing here
raises on bad input; ``parse_webhook`` is the raising variant for callers
that prefer exceptions.
"""

import json
from typing import Any

from pydantic import ValidationError

from wacloud.core.logging.logger import get_logger
from wacloud.schemas.core.errors import (
    ErrorKind,
    ValidationIssue,
    ValidationResult,
    issues_from_validation_error,
)
from wacloud.schemas.core.types import ValidationMode
from wacloud.schemas.whatsapp.message_types.unknown import WhatsAppUnknownMessage
from wacloud.schemas.whatsapp.message_union import (
    InboundMessage,
    inbound_message_adapter,
)
from wacloud.schemas.whatsapp.webhook_container import WhatsAppWebhook

RawPayload = bytes | bytearray | str | dict[str, Any] | list[Any]

logger = get_logger(__name__)


def _load_json(raw: RawPayload) -> tuple[Any, ValidationIssue | None]:
    """
    Parse bytes or text into a JSON value; other inputs pass through.

    Every parser failure becomes a root issue: syntax and encoding errors,
    integers longer than the interpreter's digit limit (ValueError) and
    nesting deeper than the recursion limit (RecursionError).
    """
    if not isinstance(raw, bytes | bytearray | str):
        return raw, None
    try:
        return json.loads(raw), None
    except (ValueError, RecursionError) as e:
        return None, ValidationIssue(
            kind=ErrorKind.TYPE_MISMATCH,
            path=(),
            message=f"Invalid JSON: {e}",
            constraint="json_invalid",
        )


def decode_webhook(
    raw: RawPayload, mode: ValidationMode | str = ValidationMode.COLLECT_ALL
) -> ValidationResult[WhatsAppWebhook]:
    """
    Decode and validate a webhook delivery.

    Args:
        raw: Request body as bytes/str, or an already parsed JSON value
        mode: COLLECT_ALL (default) reports every violation, FAIL_FAST only
            the first in payload order

    Returns:
        ValidationResult with the typed webhook on success, or the issues
    """
    mode = ValidationMode(mode)
    payload, json_issue = _load_json(raw)
    if json_issue is not None:
        logger.info(f"Rejected webhook body: {json_issue.message}")
        return ValidationResult[WhatsAppWebhook].failed([json_issue])

    try:
        webhook = WhatsAppWebhook.model_validate(payload)
    except ValidationError as e:
        issues = issues_from_validation_error(e, payload, mode)
        logger.info(
            f"Rejected webhook payload with {len(issues)} issue(s), first: {issues[0]}"
        )
        return ValidationResult[WhatsAppWebhook].failed(issues)

    for message in webhook.get_messages():
        if isinstance(message, WhatsAppUnknownMessage):
            logger.debug(
                f"Message {message.id} has unknown type "
                f"'{message.original_type}', decoded as fallback"
            )
    return ValidationResult[WhatsAppWebhook].ok(webhook)


def parse_webhook(
    raw: RawPayload, mode: ValidationMode | str = ValidationMode.COLLECT_ALL
) -> WhatsAppWebhook:
    """
    Decode a webhook delivery, raising on invalid input.

    Raises:
        WhatsAppValidationError: If the payload is not a valid webhook
    """
    return decode_webhook(raw, mode).raise_for_errors("Invalid WhatsApp webhook")


def decode_message(
    raw: RawPayload, mode: ValidationMode | str = ValidationMode.COLLECT_ALL
) -> ValidationResult[InboundMessage]:
    """
    Decode a single inbound message object outside of a webhook envelope.

    Paths in the returned issues are relative to the message object.
    """
    mode = ValidationMode(mode)
    payload, json_issue = _load_json(raw)
    if json_issue is not None:
        return ValidationResult.failed([json_issue])

    try:
        message = inbound_message_adapter.validate_python(payload)
    except ValidationError as e:
        return ValidationResult.failed(issues_from_validation_error(e, payload, mode))
    return ValidationResult.ok(message)
