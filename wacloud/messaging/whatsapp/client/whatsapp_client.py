"""
WhatsApp Cloud API transport client.

Key Design Decisions:
- phone_number_id IS the tenant_id (WhatsApp Business phone number identifier)
- Pure dependency injection: the aiohttp session is owned by the caller
- Payloads arrive already validated; this module only moves bytes
- Platform error envelopes are logged, then raised as WhatsAppApiError
"""

from typing import Any

import aiohttp

from wacloud.core.config.settings import settings
from wacloud.core.logging.logger import get_logger


class WhatsAppApiError(Exception):
    """
    Error response from the Graph API.

    Built from the platform's error envelope::

        {"error": {"message", "type", "code", "error_subcode", "fbtrace_id"}}
    """

    def __init__(
        self,
        status: int,
        message: str,
        code: int | None = None,
        subcode: int | None = None,
        error_type: str | None = None,
        fbtrace_id: str | None = None,
        details: str | None = None,
    ):
        self.status = status
        self.message = message
        self.code = code
        self.subcode = subcode
        self.error_type = error_type
        self.fbtrace_id = fbtrace_id
        self.details = details
        super().__init__(message)

    @classmethod
    def from_response(cls, status: int, body: Any) -> "WhatsAppApiError":
        """Parse the error envelope; bodies without one keep the HTTP status only."""
        error = body.get("error") if isinstance(body, dict) else None
        if not isinstance(error, dict):
            return cls(status=status, message=f"HTTP {status}", details=str(body))

        error_data = error.get("error_data")
        return cls(
            status=status,
            message=error.get("message") or f"HTTP {status}",
            code=error.get("code"),
            subcode=error.get("error_subcode"),
            error_type=error.get("type"),
            fbtrace_id=error.get("fbtrace_id"),
            details=error_data.get("details") if isinstance(error_data, dict) else None,
        )

    @property
    def is_authentication_error(self) -> bool:
        return self.status == 401 or self.code == 190

    def __str__(self) -> str:
        code = f" (code {self.code})" if self.code is not None else ""
        return f"WhatsApp API error {self.status}{code}: {self.message}"


class WhatsAppUrlBuilder:
    """Graph API URLs for one business phone number."""

    def __init__(self, base_url: str, api_version: str, phone_number_id: str):
        """
        Args:
            base_url: Graph API host, with or without a trailing slash
            api_version: Graph API version, e.g. v21.0
            phone_number_id: Business phone number ID messages are sent from
        """
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self.phone_number_id = phone_number_id

    def get_messages_url(self) -> str:
        return f"{self.base_url}/{self.api_version}/{self.phone_number_id}/messages"

    def get_subscribed_apps_url(self, waba_id: str) -> str:
        return self.get_endpoint_url(f"{waba_id}/subscribed_apps")

    def get_endpoint_url(self, endpoint: str) -> str:
        """Build URL for any endpoint path relative to the API version."""
        return f"{self.base_url}/{self.api_version}/{endpoint.lstrip('/')}"


class WhatsAppClient:
    """
    WhatsApp Cloud API client with injected session and credentials.

    Every request carries the bearer token. Successful responses are returned
    as decoded JSON; HTTP errors are logged and raised as WhatsAppApiError,
    network failures are logged and re-raised unchanged.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        access_token: str,
        phone_number_id: str,
        logger: Any | None = None,
        api_version: str = settings.api_version,
        base_url: str = settings.base_url,
    ):
        """
        Args:
            session: aiohttp session owned and closed by the caller
            access_token: Bearer token of the business
            phone_number_id: Sending phone number ID, also used as tenant ID in logs
            logger: Logger to use instead of the module one
            api_version: Graph API version, e.g. v21.0
            base_url: Graph API host
        """
        self.session = session
        self.access_token = access_token
        self.phone_number_id = phone_number_id
        self.logger = logger or get_logger(__name__)
        self.url_builder = WhatsAppUrlBuilder(base_url, api_version, phone_number_id)

        self.logger.debug(
            f"Client ready for phone number {self.phone_number_id} on {api_version}"
        )

    @classmethod
    def from_settings(cls, session: aiohttp.ClientSession) -> "WhatsAppClient":
        """Create a client from WP_ACCESS_TOKEN / WP_PHONE_ID and the API settings."""
        access_token, phone_number_id = settings.require_credentials()
        return cls(
            session,
            access_token,
            phone_number_id,
            api_version=settings.api_version,
            base_url=settings.base_url,
        )

    @property
    def tenant_id(self) -> str:
        return self.phone_number_id

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }

    async def _read_response(
        self, response: aiohttp.ClientResponse, method: str, url: str
    ) -> dict[str, Any]:
        try:
            body = await response.json(content_type=None)
        except ValueError:
            body = {"raw": await response.text()}

        if response.status < 400:
            self.logger.debug(f"{method} {url} returned: {body}")
            return body

        error = WhatsAppApiError.from_response(response.status, body)
        if error.is_authentication_error:
            self.logger.error("🚨 WHATSAPP ACCESS TOKEN EXPIRED OR INVALID 🚨")
            self.logger.error(
                f"🚨 Tenant {self.tenant_id} authentication FAILED - "
                f"{response.status}: {error.message}"
            )
            self.logger.error(f"🚨 Token starts with: {self.access_token[:8]}...")
        else:
            self.logger.error(
                f"HTTP {method} error for tenant {self.tenant_id}: {error} "
                f"(fbtrace_id: {error.fbtrace_id})"
            )
        self.logger.debug(f"Failed URL: {url}")
        raise error

    async def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        send = getattr(self.session, method.lower())
        try:
            async with send(url, headers=self._get_headers(), **kwargs) as response:
                return await self._read_response(response, method, url)
        except aiohttp.ClientError as err:
            self.logger.error(f"{method} request failed for tenant {self.tenant_id}: {err}")
            raise

    async def post_request(
        self, payload: dict[str, Any], custom_url: str | None = None
    ) -> dict[str, Any]:
        """POST a JSON body, by default to this phone number's messages endpoint.

        Args:
            payload: Encoded request body
            custom_url: Absolute URL to post to instead

        Returns:
            Decoded JSON response

        Raises:
            WhatsAppApiError: The platform answered with HTTP 400 or above
            aiohttp.ClientError: The request never got a response
        """
        url = custom_url or self.url_builder.get_messages_url()
        self.logger.debug(f"POST {url}: {payload}")
        return await self._request("POST", url, json=payload)

    async def get_request(
        self, endpoint: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """GET a path relative to the API version, e.g. ``{waba_id}/subscribed_apps``.

        Raises the same errors as post_request.
        """
        url = self.url_builder.get_endpoint_url(endpoint)
        return await self._request("GET", url, params=params)

    async def delete_request(
        self, endpoint: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        url = self.url_builder.get_endpoint_url(endpoint)
        return await self._request("DELETE", url, params=params)
