"""Testes do parse do payload do host."""

from __future__ import annotations

import pytest

from api.connectors.share import ShareEventPayload, parse_share_payload
from app.protocols.models import ClipItem, ShareEvent
from utils.errors import InvalidSharePayloadError


class TestParseSharePayload:
    """Testes para parse_share_payload."""

    def test_minimal_payload(self) -> None:
        event = parse_share_payload({"action": "android.intent.action.VIEW", "data": "content://m/1"})
        assert event == ShareEvent(action="android.intent.action.VIEW", data="content://m/1")

    def test_collection_mime_types_applied_to_items(self) -> None:
        event = parse_share_payload(
            {
                "action": "android.intent.action.SEND",
                "clip_mime_types": ["text/plain"],
                "clip_items": [{"text": "http://x"}, {"uri": "content://m/1", "mime_types": ["image/png"]}],
            }
        )

        assert event.clip_items == (
            ClipItem(mime_types=frozenset({"text/plain"}), text="http://x"),
            ClipItem(mime_types=frozenset({"image/png"}), uri="content://m/1"),
        )
        assert event.clip_mime_types == frozenset({"text/plain", "image/png"})

    def test_absent_clip_items_stay_absent(self) -> None:
        event = parse_share_payload({"action": "x", "clip_mime_types": ["text/plain"]})
        assert event.clip_items is None

    def test_extras_are_copied(self) -> None:
        extras = {"exit_on_sent": True}
        event = parse_share_payload({"action": "x", "extras": extras})
        extras["exit_on_sent"] = False
        assert event.extras == {"exit_on_sent": True}

    def test_unknown_fields_are_ignored(self) -> None:
        event = parse_share_payload({"action": "x", "flags": 268435456})
        assert event == ShareEvent(action="x")

    @pytest.mark.parametrize(
        "payload",
        [
            {"clip_items": "nope"},
            {"clip_items": [{"mime_types": "text/plain"}]},
            {"data": 42},
            {"extras": ["a"]},
            ["not", "a", "mapping"],
        ],
    )
    def test_malformed_payload_raises(self, payload: object) -> None:
        with pytest.raises(InvalidSharePayloadError):
            parse_share_payload(payload)  # type: ignore[arg-type]

    def test_model_to_event(self) -> None:
        model = ShareEventPayload(action="x", clip_items=[])
        assert model.to_event() == ShareEvent(action="x", clip_items=())
