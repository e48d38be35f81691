"""FastAPI dependencies wiring settings into the webhook collaborators.

Tests replace any of these through ``app.dependency_overrides``.
"""

import logging

from fastapi import Depends, HTTPException, Request

from src.config import Settings, get_settings
from src.constants import SIGNATURE_HEADER
from src.services.event_dispatcher import EventDispatcher
from src.services.messaging_protocol import MessagingService, get_messaging_service
from src.services.response_builder import ResponseBuilder
from src.services.signature import SignatureMismatchError, SignatureVerifier

logger = logging.getLogger(__name__)


def get_signature_verifier(
    settings: Settings = Depends(get_settings),
) -> SignatureVerifier:
    return SignatureVerifier(settings.messenger_app_secret)


def get_response_builder(settings: Settings = Depends(get_settings)) -> ResponseBuilder:
    return ResponseBuilder(settings.server_url)


def get_event_dispatcher(
    builder: ResponseBuilder = Depends(get_response_builder),
) -> EventDispatcher:
    return EventDispatcher(builder)


def get_outbound_messaging(
    settings: Settings = Depends(get_settings),
) -> MessagingService:
    return get_messaging_service(
        settings.messenger_page_access_token,
        base_url=settings.graph_api_base_url,
        api_version=settings.graph_api_version,
        timeout=settings.facebook_api_timeout_seconds,
    )


async def verified_body(
    request: Request,
    verifier: SignatureVerifier = Depends(get_signature_verifier),
) -> bytes:
    """Raw request body, checked against the x-hub-signature header.

    The digest must be computed over the bytes as received, so this runs
    before any JSON decoding.

    Raises:
        HTTPException: 403 when the signature does not match
    """
    raw_body = await request.body()
    try:
        verifier.verify(raw_body, request.headers.get(SIGNATURE_HEADER))
    except SignatureMismatchError as e:
        logger.warning("Rejecting webhook: %s", e)
        raise HTTPException(status_code=403, detail=str(e)) from e
    return raw_body
