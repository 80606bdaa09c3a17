"""FlowLayout: host-facing adapter around the flow layout engine."""

import logging
from typing import List, Optional, Sequence, Union

from flow_layout.core.configuration import (
    Direction,
    FlowConfiguration,
    HorizontalAlignment,
    VerticalAlignment,
)
from flow_layout.core.geometry import ProposedSize, Rectangle, Size
from flow_layout.core.subview import Subview
from flow_layout.layouts.flow import FlowLayoutEngine, FlowLayoutResult

logger = logging.getLogger(__name__)


class FlowLayout:
    """A layout where subviews are arranged horizontally and wrap vertically,
    similar to how text behaves in a multiline label.

    The layout always accepts the width proposed by its container and
    reports the height its rows need.

    Parameters
    ----------
    direction : Direction or str
        ``"forward"`` (left to right) or ``"reverse"`` (right to left).
    horizontal_alignment : HorizontalAlignment or str
        ``"leading"``, ``"center"`` or ``"trailing"``.
    vertical_alignment : VerticalAlignment or str
        ``"top"``, ``"center"`` or ``"bottom"``.
    horizontal_spacing : float
        Gap between items in a row.
    vertical_spacing : float
        Gap between rows.

    Examples
    --------
    >>> items = [FixedSizeItem(30, 20) for _ in range(3)]
    >>> layout = FlowLayout(horizontal_spacing=5)
    >>> layout.size_that_fits(ProposedSize(width=100), items)
    Size(width=100, height=20.0)
    >>> result = layout.place_subviews(Rectangle(0, 0, 100, 20), ProposedSize(width=100), items)
    >>> [item.origin.x for item in items]
    [0.0, 35.0, 70.0]
    """

    def __init__(
        self,
        direction: Union[Direction, str] = Direction.FORWARD,
        horizontal_alignment: Union[HorizontalAlignment, str] = HorizontalAlignment.LEADING,
        vertical_alignment: Union[VerticalAlignment, str] = VerticalAlignment.TOP,
        horizontal_spacing: float = 0.0,
        vertical_spacing: float = 0.0,
    ) -> None:
        self.engine = FlowLayoutEngine(
            FlowConfiguration(
                direction=direction,  # type: ignore[arg-type]
                horizontal_alignment=horizontal_alignment,  # type: ignore[arg-type]
                vertical_alignment=vertical_alignment,  # type: ignore[arg-type]
                horizontal_spacing=horizontal_spacing,
                vertical_spacing=vertical_spacing,
            )
        )

    @classmethod
    def from_configuration(cls, configuration: FlowConfiguration) -> "FlowLayout":
        return cls(
            direction=configuration.direction,
            horizontal_alignment=configuration.horizontal_alignment,
            vertical_alignment=configuration.vertical_alignment,
            horizontal_spacing=configuration.horizontal_spacing,
            vertical_spacing=configuration.vertical_spacing,
        )

    @property
    def configuration(self) -> FlowConfiguration:
        return self.engine.configuration

    def size_that_fits(self, proposal: ProposedSize, subviews: Sequence[Subview]) -> Size:
        """Return the size the layout needs for the proposed container.

        The width is always the proposed width (zero when unspecified).
        """
        result = self._layout(proposal, subviews)
        return result.size

    def place_subviews(
        self,
        bounds: Rectangle,
        proposal: ProposedSize,
        subviews: Sequence[Subview],
    ) -> FlowLayoutResult:
        """Place every subview, offsetting origins by the host ``bounds``.

        Returns
        -------
        FlowLayoutResult
            The container-local layout the placements were derived from.
        """
        result = self._layout(proposal, subviews)
        for subview, position in zip(subviews, result.positions):
            subview.place(position.offset(bounds.min_x, bounds.min_y), proposal)
        return result

    def _layout(self, proposal: ProposedSize, subviews: Sequence[Subview]) -> FlowLayoutResult:
        rects: List[Rectangle] = []
        for subview in subviews:
            rects.append(Rectangle.of_size(subview.measure(ProposedSize.unspecified())))

        proposed_size = proposal.replacing_unspecified_dimensions()
        logger.debug("resolved proposal %s to %s", proposal, proposed_size)
        return self.engine.position(rects, Rectangle.of_size(proposed_size))

    def __repr__(self) -> str:
        return f"FlowLayout({self.configuration!r})"


def layout_items(
    subviews: Sequence[Subview],
    width: Optional[float],
    configuration: Optional[FlowConfiguration] = None,
) -> FlowLayoutResult:
    """Measure and place ``subviews`` in a container ``width`` wide, in one call."""
    layout = FlowLayout.from_configuration(configuration or FlowConfiguration())
    proposal = ProposedSize(width=width)
    bounds = Rectangle.of_size(proposal.replacing_unspecified_dimensions())
    return layout.place_subviews(bounds, proposal, subviews)
