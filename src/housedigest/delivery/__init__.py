"""Report delivery to chat endpoints."""

from .telegram import DeliveryError, EmptyMessageError, TelegramAPIError, TelegramClient

__all__ = ["DeliveryError", "EmptyMessageError", "TelegramAPIError", "TelegramClient"]
