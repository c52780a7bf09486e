"""
Table Layout

Lays out a header row plus body rows on a canvas with ReportLab Platypus,
splitting across pages when the table reaches the bottom margin.
"""

import logging
from typing import Callable, Optional, Sequence, Union
from xml.sax.saxutils import escape

from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, Table

from bizdocs.geometry import ResolvedConfig
from .styles import get_table_paragraph_styles, get_table_style


logger = logging.getLogger(__name__)

ColumnWidth = Union[float, str]
RowFill = Union[str, Callable[[int], Optional[str]], None]


def resolve_column_widths(column_widths: Optional[Sequence[ColumnWidth]], columns: int,
                          available_width: float) -> list:
    """
    Resolve column widths (inches or 'auto') to points.

    Auto columns share whatever width is left after the fixed columns, so the
    table always spans the available width.

    Args:
        column_widths: Widths in inches, 'auto' or None per column
        columns: Number of columns in the table
        available_width: Available width in points

    Returns:
        List of widths in points, one per column
    """
    widths = list(column_widths or [])
    widths += ['auto'] * (columns - len(widths))
    widths = widths[:columns]

    fixed = [w * inch for w in widths if isinstance(w, (int, float))]
    auto_count = columns - len(fixed)
    remaining = max(available_width - sum(fixed), 0)
    auto_width = remaining / auto_count if auto_count else 0

    return [w * inch if isinstance(w, (int, float)) else auto_width for w in widths]


def _cell(value, style) -> Paragraph:
    return Paragraph(escape('' if value is None else str(value)), style)


def draw_table(
    canvas,
    config: ResolvedConfig,
    headers: Sequence[str],
    rows: Sequence[Sequence],
    *,
    start_y: float,
    header_style: Optional[dict] = None,
    body_style: Optional[dict] = None,
    column_widths: Optional[Sequence[ColumnWidth]] = None,
    stripe_color: Optional[str] = None,
    show_grid: bool = False,
) -> float:
    """
    Draw a table starting at start_y and return the final vertical offset.

    Offsets are in inches from the top of the page. The table uses the
    configuration's margins; when it does not fit above the bottom margin it
    continues on a new page at the top margin with the header row repeated.

    Args:
        canvas: ReportLab canvas object
        config: Resolved page configuration
        headers: Header row
        rows: Body rows
        start_y: Starting offset in inches
        header_style: Optional fill_color/text_color/font_style overrides
        body_style: Optional fill_color (color or callable(row index))/text_color
        column_widths: Widths in inches or 'auto'
        stripe_color: Fill for alternate body rows
        show_grid: Draw cell borders in the border color

    Returns:
        Offset in inches just below the last drawn row, or start_y when
        there are no columns to draw
    """
    if not headers:
        logger.debug("Table has no header columns, nothing drawn")
        return start_y

    header_style = header_style or {}
    body_style = body_style or {}
    margins = config.margins
    page_height = config.page_height * inch
    available_width = config.content_width * inch

    header_paragraph, body_paragraph = get_table_paragraph_styles(
        config,
        header_color=header_style.get('text_color') or '#ffffff',
        header_font_style=header_style.get('font_style') or 'bold',
        body_color=body_style.get('text_color') or config.colors.text,
    )

    row_fills = []
    body_fill = body_style.get('fill_color')
    for index in range(len(rows)):
        fill = body_fill(index) if callable(body_fill) else body_fill
        if stripe_color and index % 2 == 1:
            fill = stripe_color
        row_fills.append(fill)

    data = [[_cell(h, header_paragraph) for h in headers]]
    data += [[_cell(v, body_paragraph) for v in row] for row in rows]

    table = Table(
        data,
        colWidths=resolve_column_widths(column_widths, len(headers), available_width),
        repeatRows=1,
    )
    table.setStyle(get_table_style(
        header_style.get('fill_color') or config.colors.primary,
        row_fills=row_fills,
        grid_color=config.colors.border if show_grid else None,
    ))

    x = margins.left * inch
    top = margins.top * inch
    bottom = margins.bottom * inch
    y = start_y * inch
    pending = [table]

    while pending:
        part = pending.pop(0)
        available_height = page_height - bottom - y
        _, height = part.wrapOn(canvas, available_width, available_height)

        if height <= available_height:
            part.drawOn(canvas, x, page_height - y - height)
            y += height
            continue

        pieces = part.split(available_width, available_height)
        if not pieces:
            if y <= top:
                # A single row taller than the content area; draw it anyway
                logger.warning("Table row does not fit on an empty page, content will overflow")
                part.drawOn(canvas, x, page_height - y - height)
                y += height
                continue
            canvas.showPage()
            y = top
            pending.insert(0, part)
            continue

        first = pieces[0]
        _, height = first.wrapOn(canvas, available_width, available_height)
        first.drawOn(canvas, x, page_height - y - height)
        canvas.showPage()
        y = top
        pending = list(pieces[1:]) + pending
        logger.debug(f"Table continued on page {canvas.getPageNumber()}")

    return y / inch
