"""FlowView: Jupyter preview of a flow layout pass."""

import html
import uuid
from typing import List, Optional, Sequence, Union

from flow_layout.core.configuration import FlowConfiguration
from flow_layout.core.flow_layout import FlowLayout
from flow_layout.core.geometry import ProposedSize, Rectangle
from flow_layout.core.subview import FixedSizeItem
from flow_layout.layouts.flow import FlowLayoutResult
from flow_layout.styles.colors import (
    CONTAINER_BACKGROUND,
    OVERFLOW_COLOR,
    ROW_GUIDE_COLOR,
    item_colors,
)


class FlowView:
    """Renders laid-out items as absolute-positioned boxes.

    Parameters
    ----------
    items : Sequence[FixedSizeItem]
        Items to lay out, in order.
    width : float
        Container width in pixels.
    layout : FlowLayout, FlowConfiguration, optional
        How to lay out the items. Defaults to ``FlowLayout()``.
    show_rows : bool
        Draw a guide behind each row.
    result : FlowLayoutResult, optional
        A precomputed layout to render instead of running ``layout``.

    Raises
    ------
    ValueError
        If ``result`` is given and its position count differs from the
        item count.

    Examples
    --------
    >>> items = [FixedSizeItem(60, 24, label=w) for w in "flow layout in a notebook".split()]
    >>> view = FlowView(items, width=200, layout=FlowLayout(horizontal_spacing=4))
    >>> view.display()
    """

    def __init__(
        self,
        items: Sequence[FixedSizeItem],
        width: float,
        layout: Optional[Union[FlowLayout, FlowConfiguration]] = None,
        show_rows: bool = True,
        result: Optional[FlowLayoutResult] = None,
    ) -> None:
        if isinstance(layout, FlowConfiguration):
            layout = FlowLayout.from_configuration(layout)
        self.items: List[FixedSizeItem] = list(items)
        self.width = width
        self.layout = layout or FlowLayout()
        self.show_rows = show_rows
        if result is not None and len(result.positions) != len(self.items):
            raise ValueError(
                f"Layout has {len(result.positions)} positions for {len(self.items)} items"
            )
        self._result = result
        self._uid = uuid.uuid4().hex[:12]

    @property
    def result(self) -> FlowLayoutResult:
        """The layout being rendered, computed on first access."""
        if self._result is None:
            proposal = ProposedSize(width=self.width)
            self._result = self.layout.place_subviews(
                Rectangle.of_size(proposal.replacing_unspecified_dimensions()),
                proposal,
                self.items,
            )
        return self._result

    def _repr_html_(self) -> str:
        """Jupyter auto-display."""
        return self.to_html()

    def display(self) -> None:
        """Display in IPython/Jupyter."""
        from IPython.display import HTML
        from IPython.display import display as ipy_display

        ipy_display(HTML(self.to_html()))

    def to_html(self) -> str:
        """Generate the full HTML string."""
        uid = self._uid
        result = self.result
        parts = [
            f'<div id="flv-{uid}" class="flv-container">',
            f"<style>{self._css(uid)}</style>",
            self._header_html(result),
            f'<div class="flv-canvas" '
            f'style="width:{result.width}px;height:{result.fitting_height}px;">',
        ]
        if self.show_rows:
            parts.append(self._rows_html(result))
        for index, item in enumerate(self.items):
            parts.append(self._item_div(index, item, result))
        parts.append("</div>")
        parts.append("</div>")
        return "\n".join(parts)

    # ------------------------------------------------------------------ CSS
    def _css(self, uid: str) -> str:
        s = f"#flv-{uid}"
        return f"""
{s} * {{ box-sizing: border-box; margin: 0; padding: 0; }}
{s} {{
  font-family: 'JetBrains Mono', 'IBM Plex Mono',
    'Consolas', monospace;
  line-height: 1.4;
}}
{s} .flv-header {{
  display: flex; justify-content: space-between;
  border: 3px solid black; padding: 8px 16px;
  margin-bottom: 8px; background: {CONTAINER_BACKGROUND};
  font-size: 11px; font-weight: 700; text-transform: uppercase;
}}
{s} .flv-canvas {{
  position: relative; outline: 3px solid black;
  background: white;
}}
{s} .flv-row {{
  position: absolute; left: 0; right: 0;
  background: {ROW_GUIDE_COLOR}; opacity: 0.5;
}}
{s} .flv-item {{
  position: absolute; display: flex;
  justify-content: center; align-items: center;
  border: 2px solid black; overflow: hidden;
  font-size: 10px; font-weight: 700; white-space: nowrap;
}}
{s} .flv-item.flv-overflow {{ border-color: {OVERFLOW_COLOR}; border-style: dashed; }}
"""

    # --------------------------------------------------------------- Header
    def _header_html(self, result: FlowLayoutResult) -> str:
        row_count = len(result.rows) if self.items else 0
        return (
            f'<div class="flv-header">'
            f'<span class="flv-title">Flow Layout</span>'
            f'<span class="flv-stats">{len(self.items)} ITEMS / {row_count} ROWS / '
            f"{result.width:g} × {result.fitting_height:g}</span>"
            f"</div>"
        )

    # ----------------------------------------------------------------- Rows
    def _rows_html(self, result: FlowLayoutResult) -> str:
        parts = []
        for number, row in enumerate(result.rows):
            if not row.indices:
                continue
            parts.append(
                f'<div class="flv-row" data-row="{number}" '
                f'style="top:{row.top_offset}px;height:{row.height}px;"></div>'
            )
        return "\n".join(parts)

    # ---------------------------------------------------------------- Items
    def _item_div(self, index: int, item: FixedSizeItem, result: FlowLayoutResult) -> str:
        position = result.positions[index]
        background, foreground = item_colors(index)
        css_cls = "flv-item"
        if position.x < 0 or position.x + item.width > result.width:
            css_cls += " flv-overflow"
        label = html.escape(item.label or str(index))
        return (
            f'<div class="{css_cls}" data-item-index="{index}" '
            f'style="left:{position.x}px;top:{position.y}px;'
            f"width:{item.width}px;height:{item.height}px;"
            f'background:{background};color:{foreground};">'
            f"{label}"
            f"</div>"
        )
