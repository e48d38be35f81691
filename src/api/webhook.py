"""Facebook webhook endpoints.

Verification (GET) echoes the subscription challenge. Callbacks (POST) are
signature-checked on the raw body, dispatched into outbound messages, and
acknowledged immediately; the Send API calls run as background tasks after
the response has been sent.
"""

import json
import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from src.api.dependencies import (
    get_event_dispatcher,
    get_outbound_messaging,
    verified_body,
)
from src.config import Settings, get_settings
from src.constants import PAGE_OBJECT_TYPE
from src.models.messenger import OutboundMessage, WebhookEnvelope
from src.services.event_dispatcher import EventDispatcher
from src.services.messaging_protocol import MessagingService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def verify_webhook(request: Request, settings: Settings = Depends(get_settings)):
    """Facebook webhook verification endpoint."""
    mode = request.query_params.get("hub.mode")
    token = request.query_params.get("hub.verify_token")
    challenge = request.query_params.get("hub.challenge")

    if mode == "subscribe" and token == settings.messenger_validation_token:
        logger.info("Validating webhook")
        return PlainTextResponse(challenge)

    logger.error("Failed validation. Make sure the validation tokens match.")
    return Response(status_code=403)


@router.post("")
async def handle_webhook(
    background_tasks: BackgroundTasks,
    raw_body: bytes = Depends(verified_body),
    dispatcher: EventDispatcher = Depends(get_event_dispatcher),
    messaging: MessagingService = Depends(get_outbound_messaging),
):
    """Handle incoming Facebook Messenger webhook events.

    The platform expects a 200 within 20 seconds, so nothing here waits on
    the Send API.
    """
    try:
        payload = json.loads(raw_body)
    except ValueError as e:
        logger.warning("Rejecting undecodable webhook body: %s", e)
        raise HTTPException(status_code=400, detail="Invalid webhook payload") from e

    if not isinstance(payload, dict):
        logger.warning("Rejecting webhook body that is not a JSON object")
        raise HTTPException(status_code=400, detail="Invalid webhook payload")

    # Other subscriptions are acknowledged without looking at their entries
    if payload.get("object") != PAGE_OBJECT_TYPE:
        return {"status": "ignored"}

    try:
        envelope = WebhookEnvelope.model_validate(payload)
    except ValidationError as e:
        logger.warning("Rejecting malformed webhook envelope: %s", e)
        raise HTTPException(status_code=400, detail="Invalid webhook payload") from e

    for message in dispatcher.dispatch(envelope):
        background_tasks.add_task(deliver_outbound, messaging, message)

    return {"status": "ok"}


async def deliver_outbound(messaging: MessagingService, message: OutboundMessage) -> None:
    """Send one outbound message; failures are logged and not retried."""
    try:
        delivered = await messaging.send(message)
    except Exception as e:
        logger.error("Error sending outbound message: %s", e, exc_info=True)
        return

    if not delivered:
        logger.warning(
            "Outbound message to %s was not delivered", message.recipient.id
        )
