"""Tests for the FlowLayout host adapter."""

import logging

import pytest

from flow_layout import layout_items
from flow_layout.core.configuration import (
    Direction,
    FlowConfiguration,
    HorizontalAlignment,
    VerticalAlignment,
)
from flow_layout.core.flow_layout import FlowLayout
from flow_layout.core.geometry import Point, ProposedSize, Rectangle, Size
from flow_layout.core.subview import FixedSizeItem, Subview


class RecordingSubview:
    """Subview that records every measure/place call."""

    def __init__(self, width, height):
        self.size = Size(width, height)
        self.measure_calls = []
        self.place_calls = []

    def measure(self, proposal):
        self.measure_calls.append(proposal)
        return self.size

    def place(self, origin, proposal):
        self.place_calls.append((origin, proposal))


def _make_items(*widths, height=20):
    return [FixedSizeItem(w, height, label=f"item-{i}") for i, w in enumerate(widths)]


def test_fixed_size_item_is_a_subview():
    assert isinstance(FixedSizeItem(10, 10), Subview)
    assert isinstance(RecordingSubview(10, 10), Subview)


def test_size_that_fits_uses_proposed_width():
    layout = FlowLayout(horizontal_spacing=10)
    size = layout.size_that_fits(ProposedSize(width=100, height=5), _make_items(30, 30, 30))
    assert size == Size(100, 40)


def test_size_that_fits_unspecified_width_resolves_to_zero():
    layout = FlowLayout()
    size = layout.size_that_fits(ProposedSize.unspecified(), _make_items(30, 30, 30))
    assert size.width == 0
    assert size.height == 60


def test_size_that_fits_no_subviews():
    layout = FlowLayout(horizontal_alignment="center")
    assert layout.size_that_fits(ProposedSize(width=100), []) == Size(100, 0)


def test_measure_uses_unspecified_proposal():
    subviews = [RecordingSubview(30, 20), RecordingSubview(40, 20)]
    FlowLayout().size_that_fits(ProposedSize(width=100), subviews)
    for subview in subviews:
        assert subview.measure_calls == [ProposedSize.unspecified()]


def test_place_subviews_calls_place_once_each():
    subviews = [RecordingSubview(30, 20), RecordingSubview(40, 20), RecordingSubview(50, 20)]
    proposal = ProposedSize(width=100)
    FlowLayout().place_subviews(Rectangle(0, 0, 100, 40), proposal, subviews)
    assert [len(s.place_calls) for s in subviews] == [1, 1, 1]
    assert subviews[0].place_calls[0] == (Point(0, 0), proposal)
    assert subviews[1].place_calls[0] == (Point(30, 0), proposal)
    assert subviews[2].place_calls[0] == (Point(0, 20), proposal)


def test_place_subviews_offsets_by_bounds_origin():
    items = _make_items(30, 30)
    FlowLayout().place_subviews(Rectangle(15, 25, 100, 20), ProposedSize(width=100), items)
    assert items[0].origin == Point(15, 25)
    assert items[1].origin == Point(45, 25)


def test_place_subviews_returns_local_layout():
    items = _make_items(30, 30)
    result = FlowLayout().place_subviews(
        Rectangle(15, 25, 100, 20), ProposedSize(width=100), items
    )
    assert result.positions == [Point(0, 0), Point(30, 0)]
    assert result.size == Size(100, 20)


def test_repeated_passes_place_identically():
    items = _make_items(30, 45, 20, 70)
    layout = FlowLayout(direction="reverse", horizontal_spacing=4, vertical_spacing=2)
    for _ in range(3):
        layout.place_subviews(Rectangle(0, 0, 100, 0), ProposedSize(width=100), items)
    for item in items:
        assert len(item.placements) == 3
        assert len(set(item.placements)) == 1


def test_string_arguments_are_coerced():
    layout = FlowLayout(
        direction="reverse",
        horizontal_alignment="trailing",
        vertical_alignment="bottom",
    )
    assert layout.configuration.direction is Direction.REVERSE
    assert layout.configuration.horizontal_alignment is HorizontalAlignment.TRAILING
    assert layout.configuration.vertical_alignment is VerticalAlignment.BOTTOM


def test_invalid_string_argument_raises():
    with pytest.raises(ValueError):
        FlowLayout(direction="sideways")


def test_from_configuration():
    config = FlowConfiguration(
        direction=Direction.REVERSE,
        horizontal_alignment=HorizontalAlignment.CENTER,
        horizontal_spacing=8,
        vertical_spacing=3,
    )
    layout = FlowLayout.from_configuration(config)
    assert layout.configuration == config


def test_reverse_center_placement():
    items = _make_items(10, 20, 30)
    layout = FlowLayout(direction="reverse", horizontal_alignment="center")
    layout.place_subviews(Rectangle(0, 0, 100, 20), ProposedSize(width=100), items)
    assert [item.origin.x for item in items] == [70, 50, 20]


def test_layout_items_convenience():
    items = _make_items(30, 30, 30)
    result = layout_items(items, 100, FlowConfiguration(horizontal_spacing=5))
    assert len(result.rows) == 1
    assert [item.origin.x for item in items] == [0, 35, 70]


def test_layout_items_unspecified_width():
    items = _make_items(30, 30)
    result = layout_items(items, None)
    assert result.width == 0
    assert len(result.rows) == 2


def test_debug_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="flow_layout"):
        FlowLayout().size_that_fits(ProposedSize(width=100), _make_items(30, 30))
    messages = [r.getMessage() for r in caplog.records]
    assert any("2 items" in m and "1 rows" in m for m in messages)
    assert any("resolved proposal" in m for m in messages)
