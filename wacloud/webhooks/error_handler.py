"""
Error formatting and classification for webhook and messaging failures.

Turns validation outcomes into response-ready dicts (e.g. the body of a 400
reply to a webhook delivery) and tells validation failures, which never
succeed on retry, from transport failures, which may.
"""

from typing import Any

import aiohttp
from pydantic import ValidationError

from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppApiError
from wacloud.schemas.core.errors import (
    ValidationIssue,
    ValidationResult,
    WhatsAppValidationError,
    issues_from_validation_error,
)

# HTTP statuses worth retrying: rate limiting and server errors
RECOVERABLE_STATUSES = frozenset({429, 500, 502, 503, 504})


def _issue_details(issues: list[ValidationIssue]) -> list[dict[str, Any]]:
    return [
        {
            "field": issue.location,
            "path": list(issue.path),
            "kind": issue.kind.value,
            "message": issue.message,
            "type": issue.constraint,
            "input": issue.input,
        }
        for issue in issues
    ]


class WhatsAppErrorHandler:
    """Utility class for handling WhatsApp validation and processing errors."""

    @staticmethod
    def format_validation_error(
        error: ValidationResult | WhatsAppValidationError | ValidationError,
        payload: Any = None,
    ) -> dict[str, Any]:
        """
        Format a failed validation for API responses.

        Args:
            error: A failed ValidationResult, a WhatsAppValidationError, or a
                raw Pydantic ValidationError
            payload: Input of the raw ValidationError, used to resolve paths

        Returns:
            Formatted error dictionary
        """
        if isinstance(error, ValidationResult):
            issues = list(error.errors)
            message = "WhatsApp payload validation failed"
        elif isinstance(error, WhatsAppValidationError):
            issues = error.issues
            message = error.message
        else:
            issues = issues_from_validation_error(error, payload)
            message = "WhatsApp payload validation failed"

        details = _issue_details(issues)
        return {
            "error": "validation_failed",
            "message": message,
            "details": details,
            "error_count": len(details),
        }

    @staticmethod
    def format_whatsapp_error(error: WhatsAppApiError) -> dict[str, Any]:
        """Format a Graph API error for API responses."""
        return {
            "error": "whatsapp_api_error",
            "message": error.message,
            "status": error.status,
            "code": error.code,
            "subcode": error.subcode,
            "fbtrace_id": error.fbtrace_id,
        }

    @staticmethod
    def is_recoverable_error(error: Exception) -> bool:
        """
        Determine if an error is recoverable and the request could be retried.

        Args:
            error: Exception to check

        Returns:
            True if error is recoverable, False otherwise
        """
        # Validation errors are not recoverable
        if isinstance(error, ValidationError | WhatsAppValidationError):
            return False

        if isinstance(error, WhatsAppApiError):
            return error.status in RECOVERABLE_STATUSES

        # Network/timeout errors might be recoverable
        return isinstance(error, aiohttp.ClientError | ConnectionError | TimeoutError)

    @staticmethod
    def get_error_priority(error: Exception) -> str:
        """
        Get the priority level for an error for logging and alerting.

        Returns:
            Priority level: 'low', 'medium', 'high', 'critical'
        """
        if isinstance(error, ValidationError | WhatsAppValidationError):
            # Data issues
            return "medium"

        if isinstance(error, WhatsAppApiError):
            if error.is_authentication_error:
                return "critical"
            if error.status in RECOVERABLE_STATUSES:
                return "high"
            return "medium"

        if isinstance(error, aiohttp.ClientError | ConnectionError | TimeoutError):
            return "high"

        # Unknown errors
        return "critical"
