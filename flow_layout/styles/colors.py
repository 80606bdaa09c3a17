"""Neo-brutalist palette and constants for the flow layout preview."""

ITEM_COLORS = [
    "#FF6B00",
    "#0066FF",
    "#00BFFF",
    "#00AA55",
    "#FFCC00",
    "#AA44FF",
    "#00CCAA",
]

ITEM_TEXT_COLORS = [
    "#000000",
    "#FFFFFF",
    "#000000",
    "#FFFFFF",
    "#000000",
    "#FFFFFF",
    "#000000",
]

CONTAINER_BACKGROUND = "#F5F5F5"
ROW_GUIDE_COLOR = "#E0E0E0"
OVERFLOW_COLOR = "#FF0044"


def item_colors(index: int) -> tuple:
    """Background and text colour for the item at ``index``, cycling the palette."""
    slot = index % len(ITEM_COLORS)
    return ITEM_COLORS[slot], ITEM_TEXT_COLORS[slot]
