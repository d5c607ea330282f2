"""Tests for the event bus and the document text source."""

import pytest

from stylepatch.document import Document
from stylepatch.events import EventBus, TextChanged, TextLoaded, TextReset


# ---------------------------------------------------------------------------
# EventBus
# ---------------------------------------------------------------------------


class TestEventBus:
    def test_typed_subscription(self):
        bus = EventBus()
        seen = []
        bus.subscribe(TextChanged, seen.append)
        bus.emit(TextLoaded("a"))
        bus.emit(TextChanged("b"))
        assert seen == [TextChanged("b")]

    def test_global_listeners_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(TextChanged, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("all"))
        bus.emit(TextChanged("x"))
        assert order == ["all", "typed"]

    def test_unsubscribe_is_idempotent(self):
        bus = EventBus()
        seen = []
        sub = bus.on_all(seen.append)
        sub.unsubscribe()
        sub.unsubscribe()
        bus.emit(TextChanged("x"))
        assert seen == []
        assert not sub.active
        assert bus.listener_count() == 0

    def test_unsubscribe_only_removes_own_callback(self):
        bus = EventBus()
        seen = []
        first = bus.on_all(lambda e: seen.append("first"))
        bus.on_all(lambda e: seen.append("second"))
        first.unsubscribe()
        bus.emit(TextChanged("x"))
        assert seen == ["second"]

    def test_listener_error_reaches_emitter(self):
        doc = Document("a")

        def broken(text):
            raise RuntimeError("listener failed")

        doc.subscribe(broken)
        with pytest.raises(RuntimeError, match="listener failed"):
            doc.set_current("b")
        assert doc.current_text == "b"


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


class TestDocument:
    def test_initial_text(self):
        doc = Document("a")
        assert doc.original_text == "a"
        assert doc.current_text == "a"
        assert not doc.has_changes()

    def test_notifications(self):
        doc = Document()
        seen = []
        doc.subscribe(seen.append)
        doc.load("one")
        doc.set_current("two")
        doc.reset()
        assert seen == ["one", "two", "one"]

    def test_event_types(self):
        doc = Document()
        events = []
        doc.events.on_all(events.append)
        doc.load("a")
        doc.set_current("b")
        doc.reset()
        assert [type(e) for e in events] == [TextLoaded, TextChanged, TextReset]

    def test_unsubscribe(self):
        doc = Document()
        seen = []
        sub = doc.subscribe(seen.append)
        sub.unsubscribe()
        doc.load("x")
        assert seen == []

    def test_has_changes(self):
        doc = Document("a")
        doc.set_current("b")
        assert doc.has_changes()
        doc.reset()
        assert not doc.has_changes()

    def test_diff(self):
        doc = Document("a\nb\nc")
        doc.set_current("a\nB\nc\nd")
        diff = doc.diff()
        assert diff.modified == ("b → B",)
        assert diff.added == ("d",)
        assert diff.removed == ()

    def test_diff_removed_lines(self):
        doc = Document("a\nb")
        doc.set_current("a")
        assert doc.diff().removed == ("b",)

    def test_diff_empty(self):
        assert Document("same").diff().is_empty
