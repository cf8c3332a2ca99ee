"""Unit tests for the interactive trim and extend tools.

Tests cover:
- State transitions on each click
- Topmost-first picking
- Clicks mapped through the view transform
- Cancel and reset behaviour
- Undo/redo history
"""

import math

import pytest

from draftcore.config import DraftSettings, GeometryConfig
from draftcore.domain import Arc, Circle, Document, Line, Point, Transform
from draftcore.tools import (
    DocumentHistory,
    ExtendState,
    ExtendTool,
    ToolKind,
    TrimState,
    TrimTool,
    create_tool,
)


def _document(*entities) -> Document:
    doc = Document.create()
    for entity in entities:
        doc = doc.add_entity(entity.with_changes(layer=doc.active_layer_id))
    return doc


def _line(x1, y1, x2, y2) -> Line:
    return Line(start=Point(x1, y1), end=Point(x2, y2), layer="L")


class TestTrimTool:
    """Tests for TrimTool."""

    def setup_method(self):
        self.target = _line(0, 0, 10, 0)
        self.cutter = _line(5, -5, 5, 5)
        self.doc = _document(self.target, self.cutter)

    def test_initial_state(self):
        tool = TrimTool()
        assert tool.state is TrimState.SELECT_CUTTER
        assert tool.status_message == "Select cutting entity"

    def test_full_trim(self):
        tool = TrimTool()
        doc = tool.pointer_down(Point(5, 4), self.doc)
        assert tool.state is TrimState.SELECT_TARGET
        assert tool.cutter is not None and tool.cutter.id == self.cutter.id

        doc = tool.pointer_down(Point(8, 0.5), doc)
        assert tool.state is TrimState.SELECT_PORTION
        assert tool.intersections == [Point(5, 0)]

        doc = tool.pointer_down(Point(2, 0), doc)
        assert tool.state is TrimState.SELECT_CUTTER
        trimmed = doc.get_entity(self.target.id)
        assert isinstance(trimmed, Line)
        assert (trimmed.start, trimmed.end) == (Point(0, 0), Point(5, 0))

    def test_click_on_empty_space(self):
        tool = TrimTool()
        doc = tool.pointer_down(Point(50, 50), self.doc)
        assert doc is self.doc
        assert tool.state is TrimState.SELECT_CUTTER

    def test_target_must_cross_cutter(self):
        other = _line(20, 20, 30, 20)
        doc = self.doc.add_entity(other.with_changes(layer=self.doc.active_layer_id))
        tool = TrimTool()
        tool.pointer_down(Point(5, 4), doc)
        tool.pointer_down(Point(25, 20), doc)
        assert tool.state is TrimState.SELECT_TARGET

    def test_cancel_steps_back(self):
        tool = TrimTool()
        tool.pointer_down(Point(5, 4), self.doc)
        tool.pointer_down(Point(8, 0), self.doc)
        tool.cancel()
        assert tool.state is TrimState.SELECT_TARGET
        assert tool.cutter is not None
        tool.cancel()
        assert tool.state is TrimState.SELECT_CUTTER
        assert tool.cutter is None

    def test_incomplete_selection_resets(self):
        tool = TrimTool()
        tool.state = TrimState.SELECT_PORTION
        assert tool.pointer_down(Point(2, 0), self.doc) is self.doc
        assert tool.state is TrimState.SELECT_CUTTER

        tool.state = TrimState.SELECT_TARGET
        assert tool.pointer_down(Point(8, 0), self.doc) is self.doc
        assert tool.state is TrimState.SELECT_CUTTER

    def test_trim_circle_replaces_with_arc(self):
        circle = Circle(center=Point(0, 0), radius=5, layer="L")
        cutter = _line(-10, 0, 10, 0)
        doc = _document(circle, cutter)
        tool = TrimTool()
        doc = tool.pointer_down(Point(-8, 0), doc)
        doc = tool.pointer_down(Point(0, 5), doc)
        doc = tool.pointer_down(Point(0, 5), doc)
        assert doc.get_entity(circle.id) is None
        arcs = [e for e in doc.entities if isinstance(e, Arc)]
        assert len(arcs) == 1
        assert arcs[0].start_angle == pytest.approx(0.0)
        assert arcs[0].end_angle == pytest.approx(math.pi)
        assert doc.entities.index(arcs[0]) == 0

    def test_clicks_mapped_through_transform(self):
        """With a 2x view, screen (16, 0) is document (8, 0)."""
        tool = TrimTool(transform=Transform.scaling(2.0))
        doc = tool.pointer_down(Point(10, 8), self.doc)
        doc = tool.pointer_down(Point(4, 0), doc)
        doc = tool.pointer_down(Point(16, 0), doc)
        trimmed = doc.get_entity(self.target.id)
        assert (trimmed.start, trimmed.end) == (Point(5, 0), Point(10, 0))


class TestExtendTool:
    """Tests for ExtendTool."""

    def test_extend_several_targets(self):
        boundary = _line(10, -10, 10, 10)
        first = _line(0, 0, 5, 0)
        second = _line(0, 20, 4, 20)
        doc = _document(boundary, first, second)

        tool = ExtendTool()
        doc = tool.pointer_down(Point(10, 8), doc)
        assert tool.state is ExtendState.SELECT_TARGET

        doc = tool.pointer_down(Point(4, 0), doc)
        doc = tool.pointer_down(Point(3, 20), doc)
        assert tool.state is ExtendState.SELECT_TARGET
        assert doc.get_entity(first.id).end == Point(10, 0)
        assert doc.get_entity(second.id).end == Point(10, 20)

    def test_preview_does_not_modify(self):
        boundary = _line(10, -10, 10, 10)
        line = _line(0, 0, 5, 0)
        doc = _document(boundary, line)
        tool = ExtendTool()
        tool.pointer_down(Point(10, -8), doc)
        preview = tool.preview(Point(4, 0), doc)
        assert preview is not None
        assert preview.end == Point(10, 0)
        assert doc.get_entity(line.id).end == Point(5, 0)

    def test_unreachable_target_leaves_document(self):
        boundary = _line(10, -10, 10, 10)
        line = _line(0, 5, 5, 20)
        doc = _document(boundary, line)
        tool = ExtendTool()
        doc = tool.pointer_down(Point(10, -8), doc)
        assert tool.pointer_down(Point(1, 8), doc) is doc

    def test_cancel_resets(self):
        doc = _document(_line(0, 0, 10, 0))
        tool = ExtendTool()
        tool.pointer_down(Point(5, 0), doc)
        tool.cancel()
        assert tool.state is ExtendState.SELECT_BOUNDARY
        assert tool.boundary is None
        assert tool.status_message == "Select boundary entity"


class TestPicking:
    def test_topmost_entity_first(self):
        bottom = _line(0, 0, 10, 0)
        top = _line(0, 1, 10, 1)
        doc = _document(bottom, top)
        tool = TrimTool()
        hits = tool.hits(Point(5, 0.5), doc)
        assert [e.id for e in hits] == [top.id, bottom.id]

    def test_exclude(self):
        line = _line(0, 0, 10, 0)
        doc = _document(line)
        assert TrimTool().hits(Point(5, 0), doc, exclude=line.id) == []

    def test_tolerance_from_settings(self):
        tool = TrimTool(GeometryConfig(hit_tolerance=1.0))
        doc = _document(_line(0, 0, 10, 0))
        assert tool.hits(Point(5, 2), doc) == []


class TestRegistry:
    def test_create_tool_returns_fresh_instances(self):
        first = create_tool(ToolKind.TRIM)
        second = create_tool(ToolKind.TRIM)
        assert isinstance(first, TrimTool)
        assert first is not second

    def test_create_tool_uses_settings(self):
        settings = DraftSettings(geometry=GeometryConfig(hit_tolerance=12.0))
        tool = create_tool(ToolKind.EXTEND, settings)
        assert isinstance(tool, ExtendTool)
        assert tool.tolerance == 12.0


class TestDocumentHistory:
    """Tests for DocumentHistory."""

    def test_undo_redo(self):
        history = DocumentHistory()
        first = Document.create("one")
        second = first.with_changes(name="two")
        history.record(first)
        assert history.can_undo
        restored = history.undo(second)
        assert restored is first
        assert history.can_redo
        assert history.redo(restored) is second

    def test_record_clears_redo(self):
        history = DocumentHistory()
        a = Document.create("a")
        history.record(a)
        history.undo(a.with_changes(name="b"))
        history.record(a)
        assert not history.can_redo

    def test_capacity_drops_oldest(self):
        history = DocumentHistory(capacity=2)
        docs = [Document.create(str(i)) for i in range(3)]
        for doc in docs:
            history.record(doc)
        current = Document.create("current")
        current = history.undo(current)
        current = history.undo(current)
        assert current is docs[1]
        assert not history.can_undo

    def test_empty_history_returns_current(self):
        history = DocumentHistory()
        doc = Document.create()
        assert history.undo(doc) is doc
        assert history.redo(doc) is doc

    def test_invalid_capacity(self):
        with pytest.raises(ValueError, match="capacity"):
            DocumentHistory(capacity=0)
