"""
Failed-send results for the messenger.

A send never raises for a rejected payload, an API error or a network
error. These helpers log the failure once and describe it in a
``MessageResult``. Two platform codes get an extra log line:

- 190 (or HTTP 401): the access token expired or is invalid
- 131062: authentication templates cannot be sent to a BSUID recipient
"""

from wacloud.core.logging.logger import ContextLogger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppApiError
from wacloud.messaging.whatsapp.models.basic_models import MessageResult
from wacloud.schemas.core.errors import ValidationIssue

ERROR_CODE_BSUID_AUTH_NOT_ALLOWED = 131062

# error_code of a MessageResult for a payload that never left the process
VALIDATION_ERROR_CODE = "VALIDATION_ERROR"


def _api_error_code(error: Exception) -> str | None:
    if not isinstance(error, WhatsAppApiError):
        return None
    return str(error.status if error.code is None else error.code)


def send_failure(
    error: Exception,
    operation: str,
    recipient: str | None,
    tenant_id: str,
    logger: ContextLogger,
) -> MessageResult:
    """Log a send that failed after validation and describe it.

    Args:
        error: API, network, timeout or response decoding error
        operation: What was attempted, e.g. "send text message"
        recipient: Phone number, BSUID or message ID the call targeted
        tenant_id: Business phone number ID
        logger: Logger bound to the tenant

    Returns:
        MessageResult with success=False. ``error_code`` is the platform
        code, or the HTTP status when the body carried none.
    """
    if isinstance(error, WhatsAppApiError):
        if error.is_authentication_error:
            logger.error(
                f"WhatsApp Authentication Failed: cannot {operation}, "
                f"check the access token of tenant {tenant_id}"
            )
        elif error.code == ERROR_CODE_BSUID_AUTH_NOT_ALLOWED:
            logger.warning(
                "Cannot send authentication messages to BSUID "
                f"{recipient}, use the phone number instead"
            )

    logger.error(f"Failed to {operation} to {recipient}: {error}")
    return MessageResult(
        success=False,
        error=str(error),
        error_code=_api_error_code(error),
        recipient=recipient,
        tenant_id=tenant_id,
    )


def validation_failure(
    issues: list[ValidationIssue],
    operation: str,
    recipient: str | None,
    tenant_id: str,
    logger: ContextLogger,
) -> MessageResult:
    """MessageResult for a payload rejected before it was sent."""
    summary = str(issues[0]) if issues else "Payload validation failed"
    logger.warning(
        f"Not sending: {operation} to {recipient} failed validation "
        f"({len(issues)} issue(s)), first: {summary}"
    )
    return MessageResult(
        success=False,
        error=summary,
        error_code=VALIDATION_ERROR_CODE,
        issues=issues,
        recipient=recipient,
        tenant_id=tenant_id,
    )
