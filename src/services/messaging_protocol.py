"""Messaging abstraction protocols for decoupling from the Send API.

This module provides a Protocol-based abstraction for delivering outbound
messages, allowing the application to:
- Mock delivery in tests without httpx mocking
- Inject the Send API client into the webhook through FastAPI dependencies
"""

from typing import Protocol

import logfire

from src.constants import (
    FACEBOOK_API_TIMEOUT_SECONDS,
    FACEBOOK_GRAPH_API_BASE_URL,
    FACEBOOK_GRAPH_API_VERSION,
)
from src.models.messenger import OutboundMessage


class MessagingService(Protocol):
    """Protocol for delivering outbound messages.

    Implementations never raise for delivery failures: they log and report
    the outcome, and nobody retries.
    """

    async def send(self, message: OutboundMessage) -> bool:
        """Deliver a message or sender action.

        Args:
            message: Outbound Send API payload

        Returns:
            True if delivered successfully, False otherwise
        """
        ...


class FacebookMessagingService:
    """Facebook Send API implementation of MessagingService.

    Example:
        >>> service = FacebookMessagingService(page_access_token="...")
        >>> await service.send(builder.typing_on("user123"))
        True
    """

    def __init__(
        self,
        page_access_token: str,
        *,
        base_url: str = FACEBOOK_GRAPH_API_BASE_URL,
        api_version: str = FACEBOOK_GRAPH_API_VERSION,
        timeout: float = FACEBOOK_API_TIMEOUT_SECONDS,
    ):
        """Initialize with Facebook Page access token.

        Args:
            page_access_token: Facebook Page access token for API calls
            base_url: Graph API host
            api_version: Graph API version
            timeout: Request timeout in seconds
        """
        if not page_access_token:
            raise ValueError("page_access_token is required")
        self._token = page_access_token
        self._base_url = base_url
        self._api_version = api_version
        self._timeout = timeout

    async def send(self, message: OutboundMessage) -> bool:
        """Send via the Facebook Send API.

        Returns:
            True if the Send API accepted the message, False on any error
        """
        from src.services.facebook_service import call_send_api

        try:
            await call_send_api(
                page_access_token=self._token,
                message=message,
                base_url=self._base_url,
                api_version=self._api_version,
                timeout=self._timeout,
            )
            return True
        except Exception as e:
            logfire.error(
                "FacebookMessagingService.send failed",
                recipient_id=message.recipient.id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return False


class MockMessagingService:
    """Mock implementation for testing.

    Allows tests to verify outbound traffic without making real API calls.

    Example:
        >>> service = MockMessagingService()
        >>> await service.send(message)
        True
        >>> service.sent_messages
        [OutboundMessage(...)]
    """

    def __init__(self, should_fail_send: bool = False):
        """Initialize mock service.

        Args:
            should_fail_send: Whether send should return False
        """
        self._should_fail_send = should_fail_send
        self.sent_messages: list[OutboundMessage] = []

    async def send(self, message: OutboundMessage) -> bool:
        """Record sent message and return configured result."""
        self.sent_messages.append(message)
        return not self._should_fail_send


def get_messaging_service(
    page_access_token: str,
    *,
    base_url: str = FACEBOOK_GRAPH_API_BASE_URL,
    api_version: str = FACEBOOK_GRAPH_API_VERSION,
    timeout: float = FACEBOOK_API_TIMEOUT_SECONDS,
) -> FacebookMessagingService:
    """Factory function to get a MessagingService implementation."""
    return FacebookMessagingService(
        page_access_token=page_access_token,
        base_url=base_url,
        api_version=api_version,
        timeout=timeout,
    )
