"""
Configuration for a flow layout pass.

The configuration is a frozen value supplied by the caller; it can be
stored as JSON and validated against the bundled JSON Schema.
"""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "configuration-schema.json"


class Direction(Enum):
    """Order in which a row's items are placed."""

    FORWARD = "forward"
    REVERSE = "reverse"


class HorizontalAlignment(Enum):
    """Where a row sits within the container width."""

    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


class VerticalAlignment(Enum):
    """Where an item sits within its row height."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class FlowConfiguration:
    """Settings for grouping and placing items.

    Attributes
    ----------
    direction : Direction
        ``FORWARD`` places a row's items left to right, ``REVERSE`` right
        to left. Grouping into rows is the same for both.
    horizontal_alignment : HorizontalAlignment
        Alignment of each row within the container width.
    vertical_alignment : VerticalAlignment
        Alignment of each item within its row.
    horizontal_spacing : float
        Gap between adjacent items in a row.
    vertical_spacing : float
        Gap between consecutive rows.
    """

    direction: Direction = Direction.FORWARD
    horizontal_alignment: HorizontalAlignment = HorizontalAlignment.LEADING
    vertical_alignment: VerticalAlignment = VerticalAlignment.TOP
    horizontal_spacing: float = 0.0
    vertical_spacing: float = 0.0

    def __post_init__(self) -> None:
        # Accept enum values given as strings ("reverse", "center", ...)
        object.__setattr__(self, "direction", Direction(self.direction))
        object.__setattr__(
            self, "horizontal_alignment", HorizontalAlignment(self.horizontal_alignment)
        )
        object.__setattr__(
            self, "vertical_alignment", VerticalAlignment(self.vertical_alignment)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "direction": self.direction.value,
            "horizontal_alignment": self.horizontal_alignment.value,
            "vertical_alignment": self.vertical_alignment.value,
            "horizontal_spacing": self.horizontal_spacing,
            "vertical_spacing": self.vertical_spacing,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlowConfiguration":
        return cls(
            direction=Direction(data.get("direction", "forward")),
            horizontal_alignment=HorizontalAlignment(
                data.get("horizontal_alignment", "leading")
            ),
            vertical_alignment=VerticalAlignment(data.get("vertical_alignment", "top")),
            horizontal_spacing=data.get("horizontal_spacing", 0.0),
            vertical_spacing=data.get("vertical_spacing", 0.0),
        )

    def validate(self, strict: bool = False) -> bool:
        """Validate the configuration against the JSON schema.

        Parameters
        ----------
        strict : bool
            If True, raise ValidationError on failure.
            If False, return bool.

        Returns
        -------
        bool
            True if valid, False otherwise.
        """
        import jsonschema

        with open(SCHEMA_PATH) as f:
            schema = json.load(f)
        try:
            jsonschema.validate(self.to_dict(), schema)
        except jsonschema.ValidationError:
            if strict:
                raise
            return False
        return True

    def to_json(self, path: Union[str, Path]) -> None:
        """Save configuration to JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "FlowConfiguration":
        """Load configuration from JSON file."""
        with open(path) as f:
            return cls.from_dict(json.load(f))
