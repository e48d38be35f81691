"""Send messages to Facebook Graph API service."""

import time

import httpx
import logfire

from src.constants import (
    FACEBOOK_API_TIMEOUT_SECONDS,
    FACEBOOK_GRAPH_API_BASE_URL,
    FACEBOOK_GRAPH_API_VERSION,
)
from src.logging_config import mask_pii
from src.models.messenger import OutboundMessage, SendAPIResponse


def send_api_url(
    base_url: str = FACEBOOK_GRAPH_API_BASE_URL,
    api_version: str = FACEBOOK_GRAPH_API_VERSION,
) -> str:
    """Send API endpoint for the page that owns the access token."""
    return f"{base_url.rstrip('/')}/{api_version}/me/messages"


async def call_send_api(
    page_access_token: str,
    message: OutboundMessage,
    *,
    base_url: str = FACEBOOK_GRAPH_API_BASE_URL,
    api_version: str = FACEBOOK_GRAPH_API_VERSION,
    timeout: float = FACEBOOK_API_TIMEOUT_SECONDS,
) -> SendAPIResponse:
    """
    Call the Send API with a message or sender action.

    Args:
        page_access_token: Facebook Page access token
        message: Outbound payload (recipient plus message or sender action)
        base_url: Graph API host
        api_version: Graph API version
        timeout: Request timeout in seconds

    Returns:
        Parsed Send API response (recipient and message ids)

    Raises:
        httpx.HTTPStatusError: if the Send API returns a non-200 status
        httpx.RequestError: on transport errors
    """
    start_time = time.time()
    recipient_id = message.recipient.id

    logfire.info(
        "Calling Send API",
        recipient_id=recipient_id,
        sender_action=message.sender_action.value if message.sender_action else None,
        access_token=mask_pii(page_access_token),
        api_version=api_version,
    )

    url = send_api_url(base_url, api_version)
    params = {"access_token": page_access_token}

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(url, params=params, json=message.to_payload())
            elapsed = time.time() - start_time

            if response.status_code != 200:
                logfire.error(
                    "Failed calling Send API",
                    recipient_id=recipient_id,
                    status_code=response.status_code,
                    response_body=response.text[:500],  # Limit response body length
                    response_time_ms=elapsed * 1000,
                )
                response.raise_for_status()
                # 2xx other than 200 is still not the documented success reply
                raise httpx.HTTPStatusError(
                    f"Unexpected Send API status {response.status_code}",
                    request=response.request,
                    response=response,
                )

            result = SendAPIResponse.model_validate(response.json())
            if result.message_id:
                logfire.info(
                    "Successfully sent message",
                    message_id=result.message_id,
                    recipient_id=result.recipient_id,
                    response_time_ms=elapsed * 1000,
                )
            else:
                logfire.info(
                    "Successfully called Send API",
                    recipient_id=result.recipient_id,
                    response_time_ms=elapsed * 1000,
                )
            return result
    except httpx.RequestError as e:
        elapsed = time.time() - start_time
        logfire.error(
            "Facebook API request error",
            recipient_id=recipient_id,
            error=str(e),
            error_type=type(e).__name__,
            response_time_ms=elapsed * 1000,
        )
        raise
