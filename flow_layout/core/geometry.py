"""
Geometry primitives shared by the flow packer and its host adapter.

All values are plain floats in container-local coordinates, with the
origin at the top-left corner and y growing downwards.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Point:
    """A position in container-local coordinates."""

    x: float = 0.0
    y: float = 0.0

    def offset(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True)
class Size:
    """A width/height pair."""

    width: float = 0.0
    height: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Size":
        return cls(width=data["width"], height=data["height"])


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle.

    The packer only reads ``width`` and ``height`` of item rectangles;
    the origin matters for the container bounds.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @classmethod
    def of_size(cls, size: Size) -> "Rectangle":
        """Zero-origin rectangle with the given size."""
        return cls(0.0, 0.0, size.width, size.height)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rectangle":
        return cls(
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            width=data["width"],
            height=data["height"],
        )


@dataclass(frozen=True)
class ProposedSize:
    """A size proposal from a host, where either dimension may be unspecified.

    ``None`` means the host imposes no constraint on that dimension.

    Examples
    --------
    >>> ProposedSize(width=320).replacing_unspecified_dimensions()
    Size(width=320, height=0.0)
    """

    width: Optional[float] = None
    height: Optional[float] = None

    @classmethod
    def unspecified(cls) -> "ProposedSize":
        return cls()

    @property
    def is_unspecified(self) -> bool:
        return self.width is None and self.height is None

    def replacing_unspecified_dimensions(self, by: Optional[Size] = None) -> Size:
        """Resolve unspecified dimensions, to zero unless ``by`` is given."""
        fallback = by or Size(0.0, 0.0)
        return Size(
            width=fallback.width if self.width is None else self.width,
            height=fallback.height if self.height is None else self.height,
        )
