"""
Shared pieces of the template event family.

Every template webhook value identifies the template by id, name and
language; the enums below are the closed domains the platform documents.
"""

from enum import Enum

from pydantic import Field, StrictInt

from wacloud.schemas.core.base_model import InboundModel


class TemplateStatusEvent(str, Enum):
    APPROVED = "APPROVED"
    ARCHIVED = "ARCHIVED"
    DELETED = "DELETED"
    DISABLED = "DISABLED"
    FLAGGED = "FLAGGED"
    IN_APPEAL = "IN_APPEAL"
    LIMIT_EXCEEDED = "LIMIT_EXCEEDED"
    LOCKED = "LOCKED"
    PAUSED = "PAUSED"
    PENDING = "PENDING"
    REINSTATED = "REINSTATED"
    PENDING_DELETION = "PENDING_DELETION"
    REJECTED = "REJECTED"


class TemplateRejectionReason(str, Enum):
    ABUSIVE_CONTENT = "ABUSIVE_CONTENT"
    CATEGORY_NOT_AVAILABLE = "CATEGORY_NOT_AVAILABLE"
    INCORRECT_CATEGORY = "INCORRECT_CATEGORY"
    INVALID_FORMAT = "INVALID_FORMAT"
    NONE = "NONE"
    PROMOTIONAL = "PROMOTIONAL"
    SCAM = "SCAM"
    TAG_CONTENT_MISMATCH = "TAG_CONTENT_MISMATCH"


class TemplatePauseTitle(str, Enum):
    """Titles of the ``other_info`` block sent with pause related events."""

    FIRST_PAUSE = "FIRST_PAUSE"
    SECOND_PAUSE = "SECOND_PAUSE"
    RATE_LIMITING_PAUSE = "RATE_LIMITING_PAUSE"
    UNPAUSE = "UNPAUSE"
    DISABLED = "DISABLED"


class TemplateQualityScore(str, Enum):
    GREEN = "GREEN"
    RED = "RED"
    YELLOW = "YELLOW"
    UNKNOWN = "UNKNOWN"


class TemplateCategory(str, Enum):
    AUTHENTICATION = "AUTHENTICATION"
    MARKETING = "MARKETING"
    UTILITY = "UTILITY"


class TemplateButtonType(str, Enum):
    CATALOG = "CATALOG"
    COPY_CODE = "COPY_CODE"
    EXTENSION = "EXTENSION"
    FLOW = "FLOW"
    MPM = "MPM"
    ORDER_DETAILS = "ORDER_DETAILS"
    OTP = "OTP"
    PHONE_NUMBER = "PHONE_NUMBER"
    POSTBACK = "POSTBACK"
    REMINDER = "REMINDER"
    SEND_LOCATION = "SEND_LOCATION"
    SPM = "SPM"
    QUICK_REPLY = "QUICK_REPLY"
    URL = "URL"
    VOICE_CALL = "VOICE_CALL"


class BaseTemplateValue(InboundModel):
    """Template identity carried by every template event."""

    message_template_id: StrictInt = Field(..., description="Template ID")
    message_template_name: str = Field(..., description="Template name")
    message_template_language: str = Field(
        ..., description="Template language and locale code"
    )
