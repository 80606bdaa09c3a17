"""
Flow Layout: wrap rectangular items into rows, like words in a paragraph.
"""

import logging

__version__ = "0.1.0"

from flow_layout.core.configuration import (
    Direction,
    FlowConfiguration,
    HorizontalAlignment,
    VerticalAlignment,
)
from flow_layout.core.flow_layout import FlowLayout, layout_items
from flow_layout.core.geometry import Point, ProposedSize, Rectangle, Size
from flow_layout.core.subview import FixedSizeItem, Subview
from flow_layout.layouts.flow import (
    FlowLayoutEngine,
    FlowLayoutResult,
    Row,
    compute_flow_layout,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def preview(items, width, **kwargs):  # type: ignore[no-untyped-def]
    """Convenience function to build a notebook preview of a flow layout."""
    from flow_layout.core.flow_view import FlowView

    return FlowView(items, width, **kwargs)


__all__ = [
    "Direction",
    "HorizontalAlignment",
    "VerticalAlignment",
    "FlowConfiguration",
    "Point",
    "Size",
    "Rectangle",
    "ProposedSize",
    "Subview",
    "FixedSizeItem",
    "Row",
    "FlowLayoutResult",
    "FlowLayoutEngine",
    "FlowLayout",
    "compute_flow_layout",
    "layout_items",
    "preview",
    "__version__",
]
