"""Flow layout algorithm: wrap items into rows like words in a paragraph."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from flow_layout.core.configuration import (
    Direction,
    FlowConfiguration,
    HorizontalAlignment,
    VerticalAlignment,
)
from flow_layout.core.geometry import Point, Rectangle, Size

logger = logging.getLogger(__name__)


@dataclass
class Row:
    """A run of consecutive items sharing one line of the layout."""

    top_offset: float
    indices: List[int] = field(default_factory=list)
    height: float = 0.0
    sum_of_item_widths: float = 0.0

    @property
    def item_count(self) -> int:
        return len(self.indices)

    @property
    def bottom(self) -> float:
        return self.top_offset + self.height

    def gaps_width(self, spacing: float) -> float:
        """Total spacing between the row's items (zero for 0 or 1 items)."""
        return max(self.item_count - 1, 0) * spacing

    def to_dict(self) -> Dict[str, Any]:
        return {
            "indices": list(self.indices),
            "top_offset": self.top_offset,
            "height": self.height,
            "sum_of_item_widths": self.sum_of_item_widths,
        }


@dataclass
class FlowLayoutResult:
    """Outcome of one layout pass.

    Attributes
    ----------
    width : float
        Always the container width; the layout never shrinks to content.
    fitting_height : float
        Distance from the container top to the bottom of the lowest row.
    positions : List[Point]
        Top-left origin of each item, in input order.
    rows : List[Row]
        Rows produced by grouping, top to bottom.
    """

    width: float
    fitting_height: float
    positions: List[Point]
    rows: List[Row]

    @property
    def size(self) -> Size:
        return Size(self.width, self.fitting_height)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "fitting_height": self.fitting_height,
            "positions": [p.to_dict() for p in self.positions],
            "rows": [r.to_dict() for r in self.rows],
        }

    def to_json(self, path: Union[str, Path]) -> None:
        """Save layout result to JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)


def group_rows(
    rects: Sequence[Rectangle],
    bounds: Rectangle,
    horizontal_spacing: float = 0.0,
    vertical_spacing: float = 0.0,
) -> Tuple[List[Row], float]:
    """Partition items into rows.

    An item joins the current row unless, while handling the item before
    it, the cursor plus its width would pass the container's right edge.
    The first item of a row is never moved, so an item wider than the
    container ends up alone on its row.

    Returns
    -------
    Tuple[List[Row], float]
        The rows and the content height measured from ``bounds.min_y``.
        With no items this is a single empty row and a height of 0.
    """
    x = bounds.min_x
    row = Row(top_offset=bounds.min_y)
    rows = [row]
    bottom = bounds.min_y

    for index, rect in enumerate(rects):
        row.indices.append(index)
        row.sum_of_item_widths += rect.width
        row.height = max(row.height, rect.height)
        bottom = max(bottom, row.top_offset + rect.height)
        x += rect.width + horizontal_spacing

        if index + 1 == len(rects):
            break
        # Look ahead: wrap before the next item if it would overflow
        if x + rects[index + 1].width > bounds.max_x:
            x = bounds.min_x
            row = Row(top_offset=row.bottom + vertical_spacing)
            rows.append(row)

    return rows, bottom - bounds.min_y


def _row_start(row: Row, bounds: Rectangle, configuration: FlowConfiguration) -> float:
    remaining = bounds.width - (
        row.sum_of_item_widths + row.gaps_width(configuration.horizontal_spacing)
    )
    if configuration.horizontal_alignment is HorizontalAlignment.CENTER:
        return bounds.min_x + remaining / 2
    if configuration.horizontal_alignment is HorizontalAlignment.TRAILING:
        return bounds.min_x + remaining
    return bounds.min_x


def _vertical_shift(row_height: float, item_height: float, alignment: VerticalAlignment) -> float:
    if alignment is VerticalAlignment.CENTER:
        return (row_height - item_height) / 2
    if alignment is VerticalAlignment.BOTTOM:
        return row_height - item_height
    return 0.0


def place_rows(
    rects: Sequence[Rectangle],
    rows: Sequence[Row],
    bounds: Rectangle,
    configuration: FlowConfiguration,
) -> List[Point]:
    """Compute the origin of every item from its row.

    With ``Direction.REVERSE`` a row's items are walked last to first, so
    the last item of the row gets the leftmost slot.
    """
    positions: List[Optional[Point]] = [None] * len(rects)

    for row in rows:
        x = _row_start(row, bounds, configuration)
        if configuration.direction is Direction.REVERSE:
            order = list(reversed(row.indices))
        else:
            order = row.indices
        for index in order:
            rect = rects[index]
            shift = _vertical_shift(row.height, rect.height, configuration.vertical_alignment)
            positions[index] = Point(x, row.top_offset + shift)
            x += rect.width + configuration.horizontal_spacing

    return positions  # type: ignore[return-value]


def compute_flow_layout(
    rects: Sequence[Rectangle],
    bounds: Rectangle,
    configuration: Optional[FlowConfiguration] = None,
) -> FlowLayoutResult:
    """Compute a flow layout of item rectangles within container bounds.

    Parameters
    ----------
    rects : Sequence[Rectangle]
        Natural size of each item; their origins are ignored.
    bounds : Rectangle
        Container bounds. Only the width constrains the layout.
    configuration : FlowConfiguration, optional
        Direction, alignment and spacing. Defaults to forward, leading,
        top, with no spacing.

    Returns
    -------
    FlowLayoutResult
        Container width, fitting height, and one origin per item.
    """
    configuration = configuration or FlowConfiguration()
    rects = list(rects)

    rows, fitting_height = group_rows(
        rects,
        bounds,
        configuration.horizontal_spacing,
        configuration.vertical_spacing,
    )
    positions = place_rows(rects, rows, bounds, configuration)

    logger.debug(
        "flow layout: %d items in width %s -> %d rows, height %s",
        len(rects),
        bounds.width,
        len(rows),
        fitting_height,
    )
    return FlowLayoutResult(
        width=bounds.width,
        fitting_height=fitting_height,
        positions=positions,
        rows=rows,
    )


class FlowLayoutEngine:
    """Holds a configuration and lays out any number of item lists with it.

    The engine keeps no state between calls.
    """

    def __init__(self, configuration: Optional[FlowConfiguration] = None) -> None:
        self.configuration = configuration or FlowConfiguration()

    def position(self, rects: Sequence[Rectangle], bounds: Rectangle) -> FlowLayoutResult:
        return compute_flow_layout(rects, bounds, self.configuration)

    def __repr__(self) -> str:
        return f"FlowLayoutEngine({self.configuration!r})"
