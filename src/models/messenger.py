"""Incoming/outgoing Facebook Messenger models."""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    model_validator,
)

# Order matters: an event carrying several of these fields is classified by
# the first one present.
EVENT_KIND_PRIORITY = (
    "optin",
    "message",
    "delivery",
    "postback",
    "read",
    "account_linking",
)
UNKNOWN_EVENT_KIND = "unknown"


class MessengerModel(BaseModel):
    """Base for webhook models: tolerant of unknown fields, numeric ids as str."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


# =============================================================================
# Inbound webhook payload
# =============================================================================


class Participant(MessengerModel):
    """Sender or recipient of a messaging event."""

    id: str


class Optin(MessengerModel):
    """Send-to-Messenger plugin authentication."""

    ref: str | None = None


class QuickReply(MessengerModel):
    """Quick reply tapped by the user."""

    payload: str | None = None


class IncomingAttachment(MessengerModel):
    """Attachment sent by the user (image, audio, location, ...)."""

    type: str | None = None
    payload: Any = None


class Message(MessengerModel):
    """Message received, or echoed back for a message the page sent."""

    mid: str | None = None
    seq: int | None = None
    text: str | None = None
    attachments: list[IncomingAttachment] | None = None
    quick_reply: QuickReply | None = None
    is_echo: bool = False
    app_id: str | None = None
    metadata: str | None = None


class Delivery(MessengerModel):
    """Delivery confirmation for previously sent messages."""

    mids: list[str] | None = None
    watermark: int | None = None
    seq: int | None = None


class Postback(MessengerModel):
    """Postback button tapped on a structured message."""

    payload: str | None = None
    title: str | None = None


class Read(MessengerModel):
    """All messages before the watermark have been read."""

    watermark: int | None = None
    seq: int | None = None


class AccountLinking(MessengerModel):
    """Link or unlink account action."""

    status: str | None = None
    authorization_code: str | None = None


class AddressedEvent(MessengerModel):
    """Fields common to every recognized messaging event."""

    sender: Participant
    recipient: Participant
    timestamp: int | None = None


class OptinEvent(AddressedEvent):
    kind: Literal["optin"] = "optin"
    optin: Optin


class MessageEvent(AddressedEvent):
    kind: Literal["message"] = "message"
    message: Message


class DeliveryEvent(AddressedEvent):
    kind: Literal["delivery"] = "delivery"
    delivery: Delivery


class PostbackEvent(AddressedEvent):
    kind: Literal["postback"] = "postback"
    postback: Postback


class ReadEvent(AddressedEvent):
    kind: Literal["read"] = "read"
    read: Read


class AccountLinkingEvent(AddressedEvent):
    kind: Literal["account_linking"] = "account_linking"
    account_linking: AccountLinking


class UnknownEvent(MessengerModel):
    """Event with none of the recognized fields; kept whole for logging."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    kind: Literal["unknown"] = "unknown"
    sender: Participant | None = None
    recipient: Participant | None = None
    timestamp: int | None = None


def event_kind(value: Any) -> str:
    """Select the event variant by presence of its distinguishing field."""
    for kind in EVENT_KIND_PRIORITY:
        if isinstance(value, dict):
            present = value.get(kind) is not None
        else:
            present = getattr(value, kind, None) is not None
        if present:
            return kind
    return UNKNOWN_EVENT_KIND


MessagingEvent = Annotated[
    Union[
        Annotated[OptinEvent, Tag("optin")],
        Annotated[MessageEvent, Tag("message")],
        Annotated[DeliveryEvent, Tag("delivery")],
        Annotated[PostbackEvent, Tag("postback")],
        Annotated[ReadEvent, Tag("read")],
        Annotated[AccountLinkingEvent, Tag("account_linking")],
        Annotated[UnknownEvent, Tag(UNKNOWN_EVENT_KIND)],
    ],
    Discriminator(event_kind),
]

_messaging_event_adapter: TypeAdapter[MessagingEvent] = TypeAdapter(MessagingEvent)


def parse_messaging_event(raw: dict[str, Any]) -> MessagingEvent:
    """Decode one raw messaging event into its variant.

    Raises:
        pydantic.ValidationError: if the selected variant is malformed
    """
    return _messaging_event_adapter.validate_python(raw)


class PageEntry(MessengerModel):
    """One batched entry for a page.

    Events are kept raw here so that one malformed event cannot reject the
    whole envelope; they are decoded one by one with parse_messaging_event.
    """

    id: str | None = None
    time: Any = None
    messaging: list[Any] = Field(default_factory=list)


class WebhookEnvelope(MessengerModel):
    """Facebook webhook payload."""

    object: str | None = None
    entry: list[PageEntry] = Field(default_factory=list)


# =============================================================================
# Outbound Send API payload
# =============================================================================


class SenderAction(str, Enum):
    """Sender actions accepted by the Send API."""

    MARK_SEEN = "mark_seen"
    TYPING_ON = "typing_on"
    TYPING_OFF = "typing_off"


class Recipient(BaseModel):
    """Send API recipient."""

    id: str


class Attachment(BaseModel):
    """Outbound attachment; media types carry a url payload."""

    type: Literal["image", "audio", "video", "file", "template"]
    payload: dict[str, Any]


class QuickReplyOption(BaseModel):
    """Tappable quick reply offered with a text message."""

    content_type: str = "text"
    title: str
    payload: str


class OutboundMessageBody(BaseModel):
    """Message content: a text or an attachment, never both."""

    text: str | None = None
    attachment: Attachment | None = None
    quick_replies: list[QuickReplyOption] | None = None
    metadata: str | None = None

    @model_validator(mode="after")
    def _text_xor_attachment(self) -> "OutboundMessageBody":
        if (self.text is None) == (self.attachment is None):
            raise ValueError("message must have exactly one of text or attachment")
        return self


class OutboundMessage(BaseModel):
    """Send API request body."""

    recipient: Recipient
    message: OutboundMessageBody | None = None
    sender_action: SenderAction | None = None

    @model_validator(mode="after")
    def _message_xor_sender_action(self) -> "OutboundMessage":
        if (self.message is None) == (self.sender_action is None):
            raise ValueError(
                "outbound message must have exactly one of message or sender_action"
            )
        return self

    def to_payload(self) -> dict[str, Any]:
        """JSON body for the Send API."""
        return self.model_dump(mode="json", exclude_none=True)


class SendAPIResponse(BaseModel):
    """Successful Send API response."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    recipient_id: str | None = None
    message_id: str | None = None
