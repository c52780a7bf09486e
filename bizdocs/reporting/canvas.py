"""
Cursor Context

Drawing surface handed to templates on the vector path. Wraps a ReportLab
canvas and keeps a single vertical cursor ``y`` (inches from the top of the
page) that every primitive advances.
"""

import logging
from io import BytesIO
from typing import Optional, Sequence

from reportlab.lib import colors
from reportlab.lib.units import inch
from reportlab.lib.utils import ImageReader, simpleSplit

from bizdocs.geometry import ResolvedConfig
from .styles import (
    BODY_FONT_SIZE,
    HEADING_SIZES,
    SIGNATURE_LABEL_SIZE,
    TextStyle,
    body_style,
    resolve_font_name,
)
from .tables import draw_table


logger = logging.getLogger(__name__)

LINE_LEADING = 1.15
DEFAULT_RULE_WIDTH = 0.01
TABLE_PADDING = 0.2


class CursorContext:
    """
    Stateful drawing surface for one vector render.

    Page breaks are manual: a template must call page_break() before content
    would pass the bottom margin. Passing it only logs a warning.

    Styles are immutable snapshots applied per call; set_font(),
    set_font_size() and set_text_color() only shape the next text() call.
    """

    def __init__(self, canvas, config: ResolvedConfig):
        """
        Initialize the context.

        Args:
            canvas: ReportLab canvas sized to the configured page
            config: Resolved page configuration
        """
        self._canvas = canvas
        self.config = config
        self.margin_left = config.margins.left
        self.width = config.content_width
        self.height = config.content_height
        self._y = config.margins.top
        self._overrides = {}
        self._overflow_warned = 0

    @property
    def y(self) -> float:
        """Current vertical offset in inches from the top of the page"""
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = value
        self._check_overflow()

    @property
    def canvas(self):
        """Underlying ReportLab canvas"""
        return self._canvas

    # Coordinate helpers

    def _px(self, x: float) -> float:
        return x * inch

    def _py(self, y: float) -> float:
        return (self.config.page_height - y) * inch

    def _advance(self, amount: float) -> None:
        self._y += amount
        self._check_overflow()

    def _check_overflow(self) -> None:
        bottom = self.config.margins.top + self.height
        page = self.page_number()
        if self._y > bottom and self._overflow_warned < page:
            self._overflow_warned = page
            logger.warning(
                f"Content passed the bottom margin on page {page} "
                f"(y={self._y:.2f}in > {bottom:.2f}in); call page_break() to paginate"
            )

    def _take_overrides(self) -> dict:
        overrides, self._overrides = self._overrides, {}
        return overrides

    def _draw_lines(self, lines: Sequence[str], style: TextStyle, x: float, align: str) -> None:
        self._canvas.saveState()
        try:
            style.apply(self._canvas)
            baseline = self._py(self._y)
            for line in lines:
                if align == 'center':
                    self._canvas.drawCentredString(self._px(x), baseline, line)
                elif align == 'right':
                    self._canvas.drawRightString(self._px(x), baseline, line)
                else:
                    self._canvas.drawString(self._px(x), baseline, line)
                baseline -= style.font_size * LINE_LEADING
        finally:
            self._canvas.restoreState()

    # Primitives

    def text(
        self,
        content: str,
        *,
        x: Optional[float] = None,
        align: str = 'left',
        color: Optional[str] = None,
        font: Optional[str] = None,
        size: Optional[float] = None,
        bold: bool = False,
        max_width: Optional[float] = None,
    ) -> None:
        """
        Draw a line of text at the cursor and advance by size/72 + 0.05.

        Args:
            content: Text to draw (newlines start new lines)
            x: Absolute x in inches for left aligned text
            align: 'left', 'center' (middle of the content width) or
                'right' (right content edge)
            color: Hex text color
            font: Font family
            size: Font size in points (default 11)
            bold: Use the bold face
            max_width: Wrap the text to this width in inches
        """
        overrides = self._take_overrides()
        defaults = body_style(self.config)

        family = font or overrides.get('family') or self.config.fonts.body
        font_style = 'bold' if bold else overrides.get('style', 'normal')
        font_size = size or overrides.get('size') or defaults.font_size
        style = TextStyle(
            font_name=resolve_font_name(family, font_style),
            font_size=font_size,
            color=color or overrides.get('color') or defaults.color,
        )

        text_x = x if x is not None else self.margin_left
        if align == 'center':
            text_x = self.margin_left + self.width / 2
        elif align == 'right':
            text_x = self.margin_left + self.width

        if max_width:
            lines = simpleSplit(content, style.font_name, style.font_size, max_width * inch)
        else:
            lines = content.split('\n')

        self._draw_lines(lines, style, text_x, align)
        self._advance(font_size / 72 + 0.05)

    def heading(self, content: str, level: int = 1) -> None:
        """Draw a bold heading (level 1-3) and advance by size/72 + 0.1"""
        if level not in HEADING_SIZES:
            raise ValueError(f"Heading level must be 1, 2 or 3, got {level}")
        self._take_overrides()

        size = HEADING_SIZES[level]
        style = TextStyle(
            font_name=resolve_font_name(self.config.fonts.heading, 'bold'),
            font_size=size,
            color=self.config.colors.text,
        )
        self._draw_lines([content], style, self.margin_left, 'left')
        self._advance(size / 72 + 0.1)

    def table(
        self,
        headers: Sequence[str],
        rows: Sequence[Sequence],
        *,
        column_widths: Optional[Sequence] = None,
        header_style: Optional[dict] = None,
        body_style: Optional[dict] = None,
        show_grid: bool = False,
        striped: bool = False,
    ) -> None:
        """
        Draw a table at the cursor.

        Layout, cell wrapping and splitting across pages are delegated to
        draw_table(); the cursor ends 0.2in below the table.

        Args:
            headers: Header row
            rows: Body rows
            column_widths: Widths in inches or 'auto' per column
            header_style: fill_color / text_color / font_style overrides
                (defaults: palette primary, white, bold)
            body_style: fill_color (color or callable(row)) / text_color
            show_grid: Draw cell borders
            striped: Fill alternate rows with the palette background
        """
        final_y = draw_table(
            self._canvas,
            self.config,
            headers,
            rows,
            start_y=self._y,
            header_style=header_style,
            body_style=body_style,
            column_widths=column_widths,
            stripe_color=self.config.colors.background if striped else None,
            show_grid=show_grid,
        )
        self.y = final_y + TABLE_PADDING

    def line(self, *, color: Optional[str] = None, width: Optional[float] = None) -> None:
        """Draw a rule across the content width and advance by 0.1"""
        self._canvas.saveState()
        try:
            self._canvas.setStrokeColor(colors.HexColor(color or self.config.colors.border))
            self._canvas.setLineWidth((width or DEFAULT_RULE_WIDTH) * inch)
            self._canvas.line(
                self._px(self.margin_left), self._py(self._y),
                self._px(self.margin_left + self.width), self._py(self._y),
            )
        finally:
            self._canvas.restoreState()
        self._advance(0.1)

    def space(self, amount: float = 0.2) -> None:
        """Advance the cursor without drawing"""
        self._advance(amount)

    def page_break(self) -> None:
        """Start a new page and move the cursor to the top margin"""
        self._canvas.showPage()
        self._y = self.config.margins.top
        logger.debug(f"Page break, now on page {self.page_number()}")

    def image(
        self,
        src,
        *,
        x: Optional[float] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> None:
        """
        Place an image at the cursor and advance by its height + 0.1.

        Args:
            src: File path, data: URI, raw bytes, or a file-like object
            x: Absolute x in inches (default left margin)
            width: Width in inches (default 1)
            height: Height in inches (default 1)
        """
        image_width = width or 1
        image_height = height or 1
        left = x if x is not None else self.margin_left
        if isinstance(src, (bytes, bytearray)):
            src = BytesIO(src)

        self._canvas.drawImage(
            ImageReader(src),
            self._px(left),
            self._py(self._y + image_height),
            width=image_width * inch,
            height=image_height * inch,
            mask='auto',
        )
        self._advance(image_height + 0.1)

    def signature(self, label: str, *, width: Optional[float] = None) -> None:
        """Draw a signature rule with a small label below it and advance by 0.6"""
        self._take_overrides()
        line_width = width or 2.5
        rule_y = self._py(self._y + 0.3)

        self._canvas.saveState()
        try:
            self._canvas.setStrokeColor(colors.HexColor(self.config.colors.border))
            self._canvas.setLineWidth(DEFAULT_RULE_WIDTH * inch)
            self._canvas.line(
                self._px(self.margin_left), rule_y,
                self._px(self.margin_left + line_width), rule_y,
            )
            TextStyle(
                font_name=resolve_font_name(self.config.fonts.body),
                font_size=SIGNATURE_LABEL_SIZE,
                color=self.config.colors.text_light,
            ).apply(self._canvas)
            self._canvas.drawString(self._px(self.margin_left), self._py(self._y + 0.45), label)
        finally:
            self._canvas.restoreState()
        self._advance(0.6)

    def page_number(self) -> int:
        """Number of pages committed so far, including the current one"""
        return self._canvas.getPageNumber()

    # Style overrides for the next text() call

    def set_font(self, family: str, style: str = 'normal') -> None:
        self._overrides['family'] = family
        self._overrides['style'] = style

    def set_font_size(self, size: float) -> None:
        self._overrides['size'] = size

    def set_text_color(self, color: str) -> None:
        self._overrides['color'] = color

    def rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        *,
        fill: Optional[str] = None,
        stroke: Optional[str] = None,
    ) -> None:
        """
        Draw a rectangle; x/y is the top left corner in inches.

        Does not move the cursor. Nothing is drawn without fill or stroke.
        """
        if not fill and not stroke:
            return
        self._canvas.saveState()
        try:
            if fill:
                self._canvas.setFillColor(colors.HexColor(fill))
            if stroke:
                self._canvas.setStrokeColor(colors.HexColor(stroke))
            self._canvas.rect(
                self._px(x), self._py(y + h), w * inch, h * inch,
                fill=1 if fill else 0,
                stroke=1 if stroke else 0,
            )
        finally:
            self._canvas.restoreState()
