"""
The capabilities a host must provide for each laid-out item.

A host toolkit wraps its widgets in objects satisfying ``Subview``; the
layout asks each one for its natural size and later tells it where to go.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, runtime_checkable

from flow_layout.core.geometry import Point, ProposedSize, Size


@runtime_checkable
class Subview(Protocol):
    def measure(self, proposal: ProposedSize) -> Size:
        """Return the natural size for ``proposal``; must be idempotent."""
        ...

    def place(self, origin: Point, proposal: ProposedSize) -> None:
        """Put the item's top-left corner at ``origin``."""
        ...


@dataclass
class FixedSizeItem:
    """A subview with a fixed natural size that remembers where it was placed.

    Useful on its own for headless layout and as the item type rendered by
    ``FlowView``.
    """

    width: float
    height: float
    label: str = ""
    origin: Optional[Point] = None
    placements: List[Point] = field(default_factory=list, repr=False)

    def measure(self, proposal: ProposedSize) -> Size:
        return Size(self.width, self.height)

    def place(self, origin: Point, proposal: ProposedSize) -> None:
        self.origin = origin
        self.placements.append(origin)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)
