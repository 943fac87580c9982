"""
WhatsApp messenger: one method per outbound message kind.

Provides the send side of the library on top of WhatsAppClient:
- Basic messaging: send, send_text, send_reaction, remove_reaction, mark_as_read
- Chat actions: show_typing, typing_then_send
- Media messaging: send_image, send_video, send_audio, send_document, send_sticker
- Interactive messaging: send_button_message, send_list_message, send_cta_message
- Template and specialized messaging: send_template, send_location, send_contacts
- Webhook subscriptions: subscribe_app, get_subscriptions, unsubscribe_app,
  override_callback_url

Every send method validates through the builders first. An invalid payload is
never sent; its issues are returned in the MessageResult. API and network
failures are also returned as a failed MessageResult. Subscription methods
return response models and raise on failure.
"""

import asyncio
from typing import Any

import aiohttp
from pydantic import ValidationError

from wacloud.core.config.settings import settings
from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.builders import message_builder as builders
from wacloud.messaging.whatsapp.client.whatsapp_client import (
    WhatsAppApiError,
    WhatsAppClient,
)
from wacloud.messaging.whatsapp.models.basic_models import (
    BaseOutboundMessage,
    MessageResult,
)
from wacloud.messaging.whatsapp.models.interactive_models import InteractiveHeader
from wacloud.messaging.whatsapp.models.outbound_union import parse_outbound_message
from wacloud.messaging.whatsapp.models.response_models import (
    OverrideCallbackRequest,
    OverrideCallbackResponse,
    SendMessageResponse,
    SubscriptionsResponse,
    SuccessResponse,
)
from wacloud.messaging.whatsapp.utils.error_helpers import (
    send_failure,
    validation_failure,
)
from wacloud.schemas.core.errors import (
    ValidationResult,
    WhatsAppValidationError,
    issues_from_validation_error,
)
from wacloud.schemas.core.types import ValidationMode

# Failures a send turns into a failed MessageResult
SEND_ERRORS = (WhatsAppApiError, aiohttp.ClientError, TimeoutError, ValidationError)


class WhatsAppMessenger:
    """
    WhatsApp messenger for one business phone number.

    Uses composition with:
    - WhatsAppClient: HTTP transport and credentials
    - message_builder: payload construction and validation
    """

    def __init__(
        self,
        client: WhatsAppClient,
        tenant_id: str | None = None,
        business_id: str | None = None,
        validation_mode: ValidationMode | str | None = None,
    ):
        """Initialize the messenger.

        Args:
            client: Configured WhatsApp client for API operations
            tenant_id: Tenant identifier, defaults to the client's phone_number_id
            business_id: Default WABA ID for subscription calls, defaults to WP_BID
            validation_mode: Mode used to validate payloads before sending,
                defaults to the VALIDATION_MODE setting
        """
        self.client = client
        self._tenant_id = tenant_id or client.phone_number_id
        self.business_id = business_id or settings.wp_bid
        self.validation_mode = settings.resolve_validation_mode(validation_mode)
        self.logger = get_logger(__name__).bind(tenant_id=self._tenant_id)

    @property
    def tenant_id(self) -> str:
        """Get the tenant ID this messenger serves."""
        return self._tenant_id

    async def send(
        self, message: BaseOutboundMessage | dict[str, Any]
    ) -> MessageResult:
        """Send an outbound message.

        Args:
            message: A validated message model, or an encoded payload that is
                validated through the outbound union first

        Returns:
            MessageResult with the WhatsApp message ID on success
        """
        if isinstance(message, dict):
            parsed = parse_outbound_message(message, self.validation_mode)
            if not parsed.success:
                return validation_failure(
                    parsed.errors,
                    "send message",
                    message.get("to"),
                    self._tenant_id,
                    self.logger,
                )
            message = parsed.value

        operation = f"send {getattr(message, 'type', 'message')} message"
        try:
            response = await self.client.post_request(message.to_payload())
            sent = SendMessageResponse.model_validate(response)
        except SEND_ERRORS as e:
            return send_failure(e, operation, message.to, self._tenant_id, self.logger)

        self.logger.info(
            f"{operation.capitalize()} succeeded to {message.to}, id: {sent.message_id}"
        )
        return MessageResult(
            success=True,
            message_id=sent.message_id,
            recipient=message.to,
            tenant_id=self._tenant_id,
        )

    async def _send_built(
        self, built: ValidationResult, operation: str, recipient: str
    ) -> MessageResult:
        if not built.success:
            return validation_failure(
                built.errors, operation, recipient, self._tenant_id, self.logger
            )
        return await self.send(built.value)

    # Basic messaging

    async def send_text(
        self,
        text: str,
        recipient: str,
        reply_to_message_id: str | None = None,
        disable_preview: bool = False,
    ) -> MessageResult:
        """Send text message.

        Args:
            text: Text content of the message (1-4096 characters)
            recipient: Recipient phone number or BSUID
            reply_to_message_id: Optional message ID to reply to
            disable_preview: Whether to disable URL preview

        Returns:
            MessageResult with operation status and metadata
        """
        # Check for URLs for preview control
        has_url = "http://" in text or "https://" in text
        built = builders.build_text_message(
            recipient,
            text,
            preview_url=has_url and not disable_preview,
            reply_to_message_id=reply_to_message_id,
            mode=self.validation_mode,
        )
        return await self._send_built(built, "send text message", recipient)

    async def send_reaction(
        self, recipient: str, message_id: str, emoji: str
    ) -> MessageResult:
        built = builders.build_reaction_message(
            recipient, message_id, emoji, mode=self.validation_mode
        )
        return await self._send_built(built, "send reaction", recipient)

    async def remove_reaction(self, recipient: str, message_id: str) -> MessageResult:
        """Clear this business's reaction on ``message_id``."""
        return await self.send_reaction(recipient, message_id, "")

    async def mark_as_read(
        self, message_id: str, typing: bool = False
    ) -> MessageResult:
        """Mark message as read, optionally with typing indicator.

        Args:
            message_id: WhatsApp message ID to mark as read
            typing: Whether to show typing indicator after marking as read
        """
        operation = "mark message as read"
        built = builders.build_read_receipt(
            message_id, typing=typing, mode=self.validation_mode
        )
        if not built.success:
            return validation_failure(
                built.errors, operation, message_id, self._tenant_id, self.logger
            )

        try:
            response = await self.client.post_request(built.value.to_payload())
            result = SuccessResponse.model_validate(response)
        except SEND_ERRORS as e:
            return send_failure(e, operation, message_id, self._tenant_id, self.logger)

        self.logger.debug(f"Marked {message_id} as read (typing={typing})")
        return MessageResult(
            success=result.success,
            message_id=message_id,
            error=None if result.success else "Platform returned success=false",
            tenant_id=self._tenant_id,
        )

    # Chat actions

    async def show_typing(self, message_id: str) -> MessageResult:
        """Mark ``message_id`` as read and show the typing indicator.

        The indicator is tied to the message being answered. It disappears once a
        reply is sent, or after about 25 seconds.
        """
        return await self.mark_as_read(message_id, typing=True)

    async def typing_then_send(
        self,
        message_id: str,
        recipient: str,
        text: str,
        delay: float = 2.0,
    ) -> MessageResult:
        """Show typing on ``message_id``, wait ``delay`` seconds, then reply with text.

        The text is sent even if the typing indicator was refused.
        """
        typing = await self.show_typing(message_id)
        if not typing.success:
            self.logger.warning(f"Typing indicator for {message_id} failed: {typing.error}")
        await asyncio.sleep(delay)
        return await self.send_text(text, recipient)

    # Media messaging

    async def send_image(
        self,
        recipient: str,
        media_id: str | None = None,
        link: str | None = None,
        caption: str | None = None,
        reply_to_message_id: str | None = None,
    ) -> MessageResult:
        """Send an image by uploaded media ID or public link (exactly one)."""
        built = builders.build_image_message(
            recipient,
            media_id=media_id,
            link=link,
            caption=caption,
            reply_to_message_id=reply_to_message_id,
            mode=self.validation_mode,
        )
        return await self._send_built(built, "send image message", recipient)

    async def send_video(
        self,
        recipient: str,
        media_id: str | None = None,
        link: str | None = None,
        caption: str | None = None,
        reply_to_message_id: str | None = None,
    ) -> MessageResult:
        built = builders.build_video_message(
            recipient,
            media_id=media_id,
            link=link,
            caption=caption,
            reply_to_message_id=reply_to_message_id,
            mode=self.validation_mode,
        )
        return await self._send_built(built, "send video message", recipient)

    async def send_audio(
        self,
        recipient: str,
        media_id: str | None = None,
        link: str | None = None,
        reply_to_message_id: str | None = None,
    ) -> MessageResult:
        built = builders.build_audio_message(
            recipient,
            media_id=media_id,
            link=link,
            reply_to_message_id=reply_to_message_id,
            mode=self.validation_mode,
        )
        return await self._send_built(built, "send audio message", recipient)

    async def send_document(
        self,
        recipient: str,
        media_id: str | None = None,
        link: str | None = None,
        caption: str | None = None,
        filename: str | None = None,
        reply_to_message_id: str | None = None,
    ) -> MessageResult:
        built = builders.build_document_message(
            recipient,
            media_id=media_id,
            link=link,
            caption=caption,
            filename=filename,
            reply_to_message_id=reply_to_message_id,
            mode=self.validation_mode,
        )
        return await self._send_built(built, "send document message", recipient)

    async def send_sticker(
        self,
        recipient: str,
        media_id: str | None = None,
        link: str | None = None,
        reply_to_message_id: str | None = None,
    ) -> MessageResult:
        built = builders.build_sticker_message(
            recipient,
            media_id=media_id,
            link=link,
            reply_to_message_id=reply_to_message_id,
            mode=self.validation_mode,
        )
        return await self._send_built(built, "send sticker message", recipient)

    # Interactive messaging

    async def send_button_message(
        self,
        recipient: str,
        body: str,
        buttons: list[dict[str, Any]],
        header: InteractiveHeader | dict[str, Any] | None = None,
        footer_text: str | None = None,
        reply_to_message_id: str | None = None,
    ) -> MessageResult:
        """Send an interactive button menu.

        Args:
            recipient: Recipient phone number or BSUID
            body: Main message text (max 1024 chars)
            buttons: 1 to 3 buttons, each ``{"id": ..., "title": ...}``
            header: Optional text or media header
            footer_text: Footer text (max 60 chars)
            reply_to_message_id: Optional message ID to reply to
        """
        built = builders.build_button_message(
            recipient,
            body,
            buttons,
            header=header,
            footer=footer_text,
            reply_to_message_id=reply_to_message_id,
            mode=self.validation_mode,
        )
        return await self._send_built(built, "send button message", recipient)

    async def send_list_message(
        self,
        recipient: str,
        body: str,
        button_text: str,
        sections: list[dict[str, Any]],
        header: str | None = None,
        footer_text: str | None = None,
        reply_to_message_id: str | None = None,
    ) -> MessageResult:
        built = builders.build_list_message(
            recipient,
            body,
            button_text,
            sections,
            header=header,
            footer=footer_text,
            reply_to_message_id=reply_to_message_id,
            mode=self.validation_mode,
        )
        return await self._send_built(built, "send list message", recipient)

    async def send_cta_message(
        self,
        recipient: str,
        body: str,
        button_text: str,
        button_url: str,
        header: InteractiveHeader | dict[str, Any] | None = None,
        footer_text: str | None = None,
        reply_to_message_id: str | None = None,
    ) -> MessageResult:
        built = builders.build_cta_url_message(
            recipient,
            body,
            button_text,
            button_url,
            header=header,
            footer=footer_text,
            reply_to_message_id=reply_to_message_id,
            mode=self.validation_mode,
        )
        return await self._send_built(built, "send CTA message", recipient)

    # Template and specialized messaging

    async def send_template(
        self,
        recipient: str,
        template_name: str,
        language_code: str,
        components: list[dict[str, Any]] | None = None,
        reply_to_message_id: str | None = None,
    ) -> MessageResult:
        built = builders.build_template_message(
            recipient,
            template_name,
            language_code,
            components=components,
            reply_to_message_id=reply_to_message_id,
            mode=self.validation_mode,
        )
        return await self._send_built(built, "send template message", recipient)

    async def send_location(
        self,
        recipient: str,
        latitude: float | str,
        longitude: float | str,
        name: str | None = None,
        address: str | None = None,
        reply_to_message_id: str | None = None,
    ) -> MessageResult:
        built = builders.build_location_message(
            recipient,
            latitude,
            longitude,
            name=name,
            address=address,
            reply_to_message_id=reply_to_message_id,
            mode=self.validation_mode,
        )
        return await self._send_built(built, "send location message", recipient)

    async def send_contacts(
        self,
        recipient: str,
        contacts: list[dict[str, Any]],
        reply_to_message_id: str | None = None,
    ) -> MessageResult:
        built = builders.build_contacts_message(
            recipient,
            contacts,
            reply_to_message_id=reply_to_message_id,
            mode=self.validation_mode,
        )
        return await self._send_built(built, "send contacts message", recipient)

    # Webhook subscriptions

    def _business_id(self, waba_id: str | None) -> str:
        waba_id = waba_id or self.business_id
        if not waba_id:
            raise ValueError("A WABA ID is required: pass waba_id or set WP_BID")
        return waba_id

    async def subscribe_app(self, waba_id: str | None = None) -> SuccessResponse:
        """Subscribe this app to webhooks of a WhatsApp Business Account.

        Raises:
            WhatsAppApiError: If the platform rejects the request
        """
        waba_id = self._business_id(waba_id)
        url = self.client.url_builder.get_subscribed_apps_url(waba_id)
        response = await self.client.post_request({}, custom_url=url)
        self.logger.info(f"Subscribed app to WABA {waba_id}")
        return SuccessResponse.model_validate(response)

    async def get_subscriptions(self, waba_id: str | None = None) -> SubscriptionsResponse:
        """List the apps subscribed to a WhatsApp Business Account."""
        waba_id = self._business_id(waba_id)
        response = await self.client.get_request(f"{waba_id}/subscribed_apps")
        return SubscriptionsResponse.model_validate(response)

    async def unsubscribe_app(self, waba_id: str | None = None) -> SuccessResponse:
        waba_id = self._business_id(waba_id)
        response = await self.client.delete_request(f"{waba_id}/subscribed_apps")
        self.logger.info(f"Unsubscribed app from WABA {waba_id}")
        return SuccessResponse.model_validate(response)

    async def override_callback_url(
        self, uri: str, verify_token: str, waba_id: str | None = None
    ) -> OverrideCallbackResponse:
        """Point the webhooks of one WABA at an alternate callback URL.

        Raises:
            WhatsAppValidationError: If ``uri`` or ``verify_token`` is invalid
            WhatsAppApiError: If the platform rejects the request
        """
        body = {"override_callback_uri": uri, "verify_token": verify_token}
        try:
            request = OverrideCallbackRequest.model_validate(body)
        except ValidationError as e:
            raise WhatsAppValidationError(
                "Invalid callback override", issues_from_validation_error(e, body)
            ) from e

        waba_id = self._business_id(waba_id)
        url = self.client.url_builder.get_subscribed_apps_url(waba_id)
        response = await self.client.post_request(request.to_payload(), custom_url=url)
        self.logger.info(f"Overrode callback URL of WABA {waba_id}")
        return OverrideCallbackResponse.model_validate(response)
