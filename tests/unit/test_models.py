"""Tests for Messenger webhook and Send API models."""

import pytest
from hypothesis import given, strategies as st
from pydantic import ValidationError

from src.models.messenger import (
    Attachment,
    MessageEvent,
    OutboundMessage,
    OutboundMessageBody,
    PageEntry,
    Recipient,
    SendAPIResponse,
    SenderAction,
    WebhookEnvelope,
    event_kind,
    parse_messaging_event,
)


class TestWebhookEnvelope:
    """Test inbound envelope decoding."""

    def test_entry_defaults_to_empty(self):
        envelope = WebhookEnvelope.model_validate({"object": "page"})

        assert envelope.entry == []

    def test_numeric_ids_coerced_to_str(self):
        envelope = WebhookEnvelope.model_validate(
            {"object": "page", "entry": [{"id": 1234567890, "time": 0, "messaging": []}]}
        )

        assert envelope.entry[0].id == "1234567890"

    def test_messaging_kept_raw(self):
        entry = PageEntry.model_validate(
            {"id": "1", "time": 0, "messaging": [{"anything": {"goes": True}}]}
        )

        assert entry.messaging == [{"anything": {"goes": True}}]

    @given(
        entry_id=st.text(min_size=1, max_size=100),
        time=st.integers(min_value=0),
    )
    def test_page_entry_properties(self, entry_id: str, time: int):
        """Property: PageEntry should accept valid inputs."""
        entry = PageEntry(id=entry_id, time=time)

        assert entry.id == entry_id
        assert entry.time == time
        assert entry.messaging == []


class TestMessagingEventDecoding:
    """Test the tagged union decoding."""

    def test_message_fields(self):
        event = parse_messaging_event(
            {
                "sender": {"id": 111},
                "recipient": {"id": 222},
                "timestamp": 1458692752478,
                "message": {
                    "mid": "mid.1457764197618:41d102a3e1ae206a38",
                    "seq": 73,
                    "text": "hello, world!",
                    "quick_reply": {"payload": "DEVELOPER_DEFINED_PAYLOAD"},
                },
            }
        )

        assert isinstance(event, MessageEvent)
        assert event.sender.id == "111"
        assert event.recipient.id == "222"
        assert event.message.seq == 73
        assert event.message.quick_reply.payload == "DEVELOPER_DEFINED_PAYLOAD"
        assert event.message.is_echo is False

    def test_missing_sender_rejected(self):
        with pytest.raises(ValidationError):
            parse_messaging_event({"recipient": {"id": "P"}, "message": {"text": "x"}})

    @pytest.mark.parametrize(
        "raw, kind",
        [
            ({"optin": {}}, "optin"),
            ({"message": {}}, "message"),
            ({"delivery": {}}, "delivery"),
            ({"postback": {}}, "postback"),
            ({"read": {}}, "read"),
            ({"account_linking": {}}, "account_linking"),
            ({}, "unknown"),
            ({"optin": None, "read": {}}, "read"),
        ],
    )
    def test_event_kind(self, raw, kind):
        """An empty object still counts as present; null does not."""
        assert event_kind(raw) == kind


class TestOutboundMessage:
    """Test outbound payload validation."""

    def test_requires_message_or_sender_action(self):
        with pytest.raises(ValidationError):
            OutboundMessage(recipient=Recipient(id="U"))

    def test_rejects_both_message_and_sender_action(self):
        with pytest.raises(ValidationError):
            OutboundMessage(
                recipient=Recipient(id="U"),
                message=OutboundMessageBody(text="hi"),
                sender_action=SenderAction.TYPING_ON,
            )

    def test_body_rejects_text_and_attachment(self):
        with pytest.raises(ValidationError):
            OutboundMessageBody(
                text="hi",
                attachment=Attachment(type="image", payload={"url": "https://x/y.png"}),
            )

    def test_attachment_type_is_restricted(self):
        with pytest.raises(ValidationError):
            Attachment(type="sticker", payload={})

    def test_payload_excludes_none(self):
        message = OutboundMessage(
            recipient=Recipient(id="U"), message=OutboundMessageBody(text="hi")
        )

        assert message.to_payload() == {"recipient": {"id": "U"}, "message": {"text": "hi"}}

    def test_sender_action_serialized_as_string(self):
        message = OutboundMessage(
            recipient=Recipient(id="U"), sender_action=SenderAction.MARK_SEEN
        )

        assert message.to_payload()["sender_action"] == "mark_seen"


class TestSendAPIResponse:
    def test_extra_fields_ignored(self):
        response = SendAPIResponse.model_validate(
            {"recipient_id": 1008372609250235, "message_id": "mid.1", "extra": 1}
        )

        assert response.recipient_id == "1008372609250235"
        assert response.message_id == "mid.1"
