"""Core data model for flow layouts."""

from flow_layout.core.configuration import (
    Direction,
    FlowConfiguration,
    HorizontalAlignment,
    VerticalAlignment,
)
from flow_layout.core.geometry import Point, ProposedSize, Rectangle, Size
from flow_layout.core.subview import FixedSizeItem, Subview

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
]
