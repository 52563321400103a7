"""Telegram Bot API delivery client.

Sends report chunks to a chat through the Bot API ``sendMessage`` method
using httpx for async HTTP requests. Messages go out in HTML parse mode
with link previews disabled.

References:
    - https://core.telegram.org/bots/api#sendmessage
"""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class DeliveryError(Exception):
    """Base exception for delivery errors."""


class EmptyMessageError(DeliveryError):
    """Raised when asked to send an empty or whitespace-only message."""

    def __init__(self):
        super().__init__("Message is empty")


class TelegramAPIError(DeliveryError):
    """Raised when the Bot API answers with a non-200 status.

    Attributes:
        status_code: HTTP status returned by the API
        body: Raw response body
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Telegram API error: {status_code} {body}")


class TelegramClient:
    """Async client for posting messages to one Telegram chat.

    Example:
        async with TelegramClient(bot_token, chat_id) as client:
            await client.send_message("<b>Hello</b>")
    """

    BASE_URL = "https://api.telegram.org"

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            bot_token: Bot credential issued by BotFather
            chat_id: Destination chat identifier
            base_url: Bot API base URL (defaults to the public API)
            timeout: Request timeout in seconds
            client: Optional shared httpx.AsyncClient; the caller keeps
                    ownership of an injected client
        """
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "TelegramClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @property
    def send_url(self) -> str:
        return f"{self.base_url}/bot{self.bot_token}/sendMessage"

    async def send_message(self, text: str) -> dict[str, Any]:
        """Send one message to the configured chat.

        Args:
            text: Message body (HTML parse mode)

        Returns:
            Parsed JSON response from the Bot API

        Raises:
            EmptyMessageError: If text is empty or whitespace-only
            TelegramAPIError: If the API answers with a non-200 status
            DeliveryError: If the request could not be completed
        """
        if not text or not text.strip():
            raise EmptyMessageError()

        payload = {
            "chat_id": self.chat_id,
            "text": text,
            "parse_mode": "HTML",
            "disable_web_page_preview": True,
        }
        logger.debug(f"Sending {len(text)} chars to chat {self.chat_id}")

        try:
            resp = await self._get_client().post(self.send_url, json=payload)
        except httpx.HTTPError as e:
            raise DeliveryError(f"Telegram request failed: {e}") from e

        if resp.status_code != 200:
            raise TelegramAPIError(resp.status_code, resp.text)

        try:
            return resp.json()
        except ValueError as e:
            raise DeliveryError(f"Telegram returned a non-JSON body: {resp.text[:200]}") from e
