"""Webhook event dispatcher.

Walks a webhook envelope entry by entry, decodes each messaging event into
its variant and turns it into zero or one outbound message. Sending is left
to the caller so the webhook can acknowledge before any Send API call
completes.
"""

from __future__ import annotations

from typing import Callable

import logfire
from pydantic import ValidationError

from src.constants import (
    ATTACHMENT_ACK_TEXT,
    AUTHENTICATION_SUCCESS_TEXT,
    PAGE_OBJECT_TYPE,
    POSTBACK_ACK_TEXT,
    QUICK_REPLY_ACK_TEXT,
)
from src.models.messenger import (
    AccountLinkingEvent,
    DeliveryEvent,
    MessageEvent,
    MessagingEvent,
    OptinEvent,
    OutboundMessage,
    PostbackEvent,
    ReadEvent,
    UnknownEvent,
    WebhookEnvelope,
    parse_messaging_event,
)
from src.services.response_builder import ResponseBuilder

KeywordBuilder = Callable[[str], OutboundMessage]

# Exact, case-sensitive text -> ResponseBuilder method name
KEYWORD_BUILDERS: dict[str, str] = {
    "image": "image_message",
    "gif": "gif_message",
    "audio": "audio_message",
    "video": "video_message",
    "file": "file_message",
    "button": "button_message",
    "generic": "generic_message",
    "receipt": "receipt_message",
    "quick reply": "quick_reply_message",
    "read receipt": "read_receipt",
    "typing on": "typing_on",
    "typing off": "typing_off",
    "account linking": "account_linking_message",
}


class EventDispatcher:
    """Route messaging events to their handlers.

    Example:
        >>> dispatcher = EventDispatcher(ResponseBuilder("https://bot.example"))
        >>> outbound = dispatcher.dispatch(envelope)
    """

    def __init__(self, builder: ResponseBuilder):
        self.builder = builder
        self._handlers: dict[type, Callable[..., OutboundMessage | None]] = {
            OptinEvent: self.received_authentication,
            MessageEvent: self.received_message,
            DeliveryEvent: self.received_delivery_confirmation,
            PostbackEvent: self.received_postback,
            ReadEvent: self.received_message_read,
            AccountLinkingEvent: self.received_account_link,
            UnknownEvent: self.received_unknown,
        }

    def dispatch(self, envelope: WebhookEnvelope) -> list[OutboundMessage]:
        """Handle every event of a page subscription envelope.

        Returns:
            Outbound messages in entry/event order; empty for envelopes whose
            object is not a page
        """
        if envelope.object != PAGE_OBJECT_TYPE:
            logfire.info("Ignoring webhook for non-page object", object=envelope.object)
            return []

        outbound: list[OutboundMessage] = []
        for entry in envelope.entry:
            for raw_event in entry.messaging:
                if not isinstance(raw_event, dict):
                    logfire.warn(
                        "Dropping messaging event that is not an object",
                        page_id=entry.id,
                        event_type=type(raw_event).__name__,
                    )
                    continue

                try:
                    event = parse_messaging_event(raw_event)
                except ValidationError as e:
                    logfire.warn(
                        "Dropping malformed messaging event",
                        page_id=entry.id,
                        error_count=e.error_count(),
                        error=str(e),
                    )
                    continue

                reply = self.handle_event(event)
                if reply is not None:
                    outbound.append(reply)
        return outbound

    def handle_event(self, event: MessagingEvent) -> OutboundMessage | None:
        """Run the handler for a single decoded event."""
        return self._handlers[type(event)](event)

    def select_builder(self, text: str) -> KeywordBuilder | None:
        """Builder for a keyword, or None when the text is not a keyword."""
        method_name = KEYWORD_BUILDERS.get(text)
        if method_name is None:
            return None
        return getattr(self.builder, method_name)

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def received_authentication(self, event: OptinEvent) -> OutboundMessage:
        # optin.ref is the data-ref set on the "Send to Messenger" plugin
        logfire.info(
            "Received authentication",
            sender_id=event.sender.id,
            recipient_id=event.recipient.id,
            pass_through_param=event.optin.ref,
            timestamp=event.timestamp,
        )
        return self.builder.text_message(event.sender.id, AUTHENTICATION_SUCCESS_TEXT)

    def received_message(self, event: MessageEvent) -> OutboundMessage | None:
        sender_id = event.sender.id
        message = event.message

        logfire.info(
            "Received message",
            sender_id=sender_id,
            recipient_id=event.recipient.id,
            timestamp=event.timestamp,
            message=message.model_dump(exclude_none=True),
        )

        if message.is_echo:
            # Replying to echoes would loop
            logfire.info(
                "Received echo",
                message_id=message.mid,
                app_id=message.app_id,
                metadata=message.metadata,
            )
            return None

        if message.quick_reply is not None:
            logfire.info(
                "Quick reply tapped",
                message_id=message.mid,
                payload=message.quick_reply.payload,
            )
            return self.builder.text_message(sender_id, QUICK_REPLY_ACK_TEXT)

        if message.text:
            build = self.select_builder(message.text)
            if build is None:
                return self.builder.fact_message(sender_id, message.text)
            return build(sender_id)

        if message.attachments:
            return self.builder.text_message(sender_id, ATTACHMENT_ACK_TEXT)

        return None

    def received_delivery_confirmation(self, event: DeliveryEvent) -> None:
        delivery = event.delivery
        for message_id in delivery.mids or []:
            logfire.info("Received delivery confirmation", message_id=message_id)
        logfire.info(
            "All messages before watermark were delivered",
            watermark=delivery.watermark,
            seq=delivery.seq,
        )
        return None

    def received_postback(self, event: PostbackEvent) -> OutboundMessage:
        # The payload is developer-defined on the postback button
        logfire.info(
            "Received postback",
            sender_id=event.sender.id,
            recipient_id=event.recipient.id,
            payload=event.postback.payload,
            timestamp=event.timestamp,
        )
        return self.builder.text_message(event.sender.id, POSTBACK_ACK_TEXT)

    def received_message_read(self, event: ReadEvent) -> None:
        logfire.info(
            "Received message read event",
            watermark=event.read.watermark,
            seq=event.read.seq,
        )
        return None

    def received_account_link(self, event: AccountLinkingEvent) -> None:
        logfire.info(
            "Received account link event",
            sender_id=event.sender.id,
            status=event.account_linking.status,
            authorization_code=event.account_linking.authorization_code,
        )
        return None

    def received_unknown(self, event: UnknownEvent) -> None:
        logfire.warn(
            "Webhook received unknown messaging event",
            event=event.model_dump(exclude_none=True),
        )
        return None
