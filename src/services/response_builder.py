"""Canned Send API messages returned to Messenger users.

Each builder takes the recipient's page-scoped id and returns a ready to
send OutboundMessage. Builders never perform I/O; the webhook schedules the
actual Send API call.
"""

import random

from src.constants import (
    AUDIO_ASSET_PATH,
    FILE_ASSET_PATH,
    GEAR_VR_SQUARE_ASSET_PATH,
    GIF_ASSET_PATH,
    IMAGE_ASSET_PATH,
    RECEIPT_ID_UPPER_BOUND,
    RIFT_SQUARE_ASSET_PATH,
    TEXT_MESSAGE_METADATA,
    TOUCH_IMAGE_ASSET_PATH,
    VIDEO_ASSET_PATH,
)
from src.models.messenger import (
    Attachment,
    OutboundMessage,
    OutboundMessageBody,
    QuickReplyOption,
    Recipient,
    SenderAction,
)
from src.services.facts import CAT_FACTS

RIFT_URL = "https://www.oculus.com/en-us/rift/"
TOUCH_URL = "https://www.oculus.com/en-us/touch/"


class ResponseBuilder:
    """Build outbound messages for a single configured page.

    Args:
        server_url: Public base URL of this server, used for asset links
        rng: Random source for facts and receipt ids (seed it in tests)
    """

    def __init__(self, server_url: str, rng: random.Random | None = None):
        self._server_url = server_url.rstrip("/")
        self._rng = rng or random.Random()

    def asset_url(self, path: str) -> str:
        """Absolute URL for a path served by this server."""
        return f"{self._server_url}{path}"

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    def text_message(self, recipient_id: str, text: str) -> OutboundMessage:
        """Plain text message tagged with developer metadata."""
        return _message(
            recipient_id,
            OutboundMessageBody(text=text, metadata=TEXT_MESSAGE_METADATA),
        )

    def random_fact(self) -> str:
        return self._rng.choice(CAT_FACTS)

    def fact_message(self, recipient_id: str, incoming_text: str) -> OutboundMessage:
        """Default reply to unrecognized text.

        The incoming text is deliberately not echoed; a random fact is sent
        in its place.
        """
        return self.text_message(recipient_id, self.random_fact())

    # -------------------------------------------------------------------------
    # Media attachments
    # -------------------------------------------------------------------------

    def _media_message(
        self, recipient_id: str, media_type: str, path: str
    ) -> OutboundMessage:
        attachment = Attachment(type=media_type, payload={"url": self.asset_url(path)})
        return _message(recipient_id, OutboundMessageBody(attachment=attachment))

    def image_message(self, recipient_id: str) -> OutboundMessage:
        return self._media_message(recipient_id, "image", IMAGE_ASSET_PATH)

    def gif_message(self, recipient_id: str) -> OutboundMessage:
        # GIFs are sent as image attachments
        return self._media_message(recipient_id, "image", GIF_ASSET_PATH)

    def audio_message(self, recipient_id: str) -> OutboundMessage:
        return self._media_message(recipient_id, "audio", AUDIO_ASSET_PATH)

    def video_message(self, recipient_id: str) -> OutboundMessage:
        return self._media_message(recipient_id, "video", VIDEO_ASSET_PATH)

    def file_message(self, recipient_id: str) -> OutboundMessage:
        return self._media_message(recipient_id, "file", FILE_ASSET_PATH)

    # -------------------------------------------------------------------------
    # Templates
    # -------------------------------------------------------------------------

    def button_message(self, recipient_id: str) -> OutboundMessage:
        """Button template with web URL, postback and phone number buttons."""
        return _template(
            recipient_id,
            {
                "template_type": "button",
                "text": "This is test text",
                "buttons": [
                    {"type": "web_url", "url": RIFT_URL, "title": "Open Web URL"},
                    {
                        "type": "postback",
                        "title": "Trigger Postback",
                        "payload": "DEVELOPER_DEFINED_PAYLOAD",
                    },
                    {
                        "type": "phone_number",
                        "title": "Call Phone Number",
                        "payload": "+16505551234",
                    },
                ],
            },
        )

    def generic_message(self, recipient_id: str) -> OutboundMessage:
        """Generic template with two bubbles."""
        return _template(
            recipient_id,
            {
                "template_type": "generic",
                "elements": [
                    {
                        "title": "rift",
                        "subtitle": "Next-generation virtual reality",
                        "item_url": RIFT_URL,
                        "image_url": self.asset_url(IMAGE_ASSET_PATH),
                        "buttons": [
                            {"type": "web_url", "url": RIFT_URL, "title": "Open Web URL"},
                            {
                                "type": "postback",
                                "title": "Call Postback",
                                "payload": "Payload for first bubble",
                            },
                        ],
                    },
                    {
                        "title": "touch",
                        "subtitle": "Your Hands, Now in VR",
                        "item_url": TOUCH_URL,
                        "image_url": self.asset_url(TOUCH_IMAGE_ASSET_PATH),
                        "buttons": [
                            {"type": "web_url", "url": TOUCH_URL, "title": "Open Web URL"},
                            {
                                "type": "postback",
                                "title": "Call Postback",
                                "payload": "Payload for second bubble",
                            },
                        ],
                    },
                ],
            },
        )

    def receipt_order_number(self) -> str:
        # The API requires a unique order number per receipt
        return f"order{self._rng.randrange(RECEIPT_ID_UPPER_BOUND)}"

    def receipt_message(self, recipient_id: str) -> OutboundMessage:
        """Receipt template for a two-item order."""
        return _template(
            recipient_id,
            {
                "template_type": "receipt",
                "recipient_name": "Peter Chang",
                "order_number": self.receipt_order_number(),
                "currency": "USD",
                "payment_method": "Visa 1234",
                "timestamp": "1428444852",
                "elements": [
                    {
                        "title": "Oculus Rift",
                        "subtitle": "Includes: headset, sensor, remote",
                        "quantity": 1,
                        "price": 599.00,
                        "currency": "USD",
                        "image_url": self.asset_url(RIFT_SQUARE_ASSET_PATH),
                    },
                    {
                        "title": "Samsung Gear VR",
                        "subtitle": "Frost White",
                        "quantity": 1,
                        "price": 99.99,
                        "currency": "USD",
                        "image_url": self.asset_url(GEAR_VR_SQUARE_ASSET_PATH),
                    },
                ],
                "address": {
                    "street_1": "1 Hacker Way",
                    "street_2": "",
                    "city": "Menlo Park",
                    "postal_code": "94025",
                    "state": "CA",
                    "country": "US",
                },
                "summary": {
                    "subtotal": 698.99,
                    "shipping_cost": 20.00,
                    "total_tax": 57.67,
                    "total_cost": 626.66,
                },
                "adjustments": [
                    {"name": "New Customer Discount", "amount": -50},
                    {"name": "$100 Off Coupon", "amount": -100},
                ],
            },
        )

    def account_linking_message(self, recipient_id: str) -> OutboundMessage:
        """Button template with the account linking call-to-action."""
        return _template(
            recipient_id,
            {
                "template_type": "button",
                "text": "Welcome. Link your account.",
                "buttons": [
                    {"type": "account_link", "url": self.asset_url("/authorize")}
                ],
            },
        )

    def quick_reply_message(self, recipient_id: str) -> OutboundMessage:
        return _message(
            recipient_id,
            OutboundMessageBody(
                text="What's your favorite movie genre?",
                quick_replies=[
                    QuickReplyOption(
                        title="Action",
                        payload="DEVELOPER_DEFINED_PAYLOAD_FOR_PICKING_ACTION",
                    ),
                    QuickReplyOption(
                        title="Comedy",
                        payload="DEVELOPER_DEFINED_PAYLOAD_FOR_PICKING_COMEDY",
                    ),
                    QuickReplyOption(
                        title="Drama",
                        payload="DEVELOPER_DEFINED_PAYLOAD_FOR_PICKING_DRAMA",
                    ),
                ],
            ),
        )

    # -------------------------------------------------------------------------
    # Sender actions
    # -------------------------------------------------------------------------

    def read_receipt(self, recipient_id: str) -> OutboundMessage:
        """Mark the conversation as seen."""
        return _sender_action(recipient_id, SenderAction.MARK_SEEN)

    def typing_on(self, recipient_id: str) -> OutboundMessage:
        return _sender_action(recipient_id, SenderAction.TYPING_ON)

    def typing_off(self, recipient_id: str) -> OutboundMessage:
        return _sender_action(recipient_id, SenderAction.TYPING_OFF)


def _message(recipient_id: str, body: OutboundMessageBody) -> OutboundMessage:
    return OutboundMessage(recipient=Recipient(id=recipient_id), message=body)


def _template(recipient_id: str, payload: dict) -> OutboundMessage:
    attachment = Attachment(type="template", payload=payload)
    return _message(recipient_id, OutboundMessageBody(attachment=attachment))


def _sender_action(recipient_id: str, action: SenderAction) -> OutboundMessage:
    return OutboundMessage(recipient=Recipient(id=recipient_id), sender_action=action)
