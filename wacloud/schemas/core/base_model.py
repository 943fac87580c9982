"""
Base Pydantic configuration shared by every payload model.

Inbound (webhook) models ignore keys they do not know so that additions to
the platform never break decoding. Outbound models forbid unknown keys so a
typo never reaches the platform. Both are immutable once validated.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

INBOUND_CONFIG = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
OUTBOUND_CONFIG = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class PayloadModel(BaseModel):
    """Base class for models that map one-to-one onto a JSON payload."""

    model_config = INBOUND_CONFIG

    def to_payload(self) -> dict[str, Any]:
        """
        Serialize to the JSON-ready dict used on the wire.

        Aliases are applied (``from_`` becomes ``from``) and unset optional
        fields are omitted.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class InboundModel(PayloadModel):
    """Base for webhook payload models."""

    model_config = INBOUND_CONFIG


class OutboundModel(PayloadModel):
    """Base for payloads sent to the platform."""

    model_config = OUTBOUND_CONFIG
