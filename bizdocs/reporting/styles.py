"""
PDF Styling

Provides style snapshots, font resolution and table styles for the vector
backend.
"""

from dataclasses import dataclass
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.fonts import tt2ps
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import TableStyle

from bizdocs.geometry import ResolvedConfig


BODY_FONT_SIZE = 11
HEADING_SIZES = {1: 24, 2: 18, 3: 14}
SIGNATURE_LABEL_SIZE = 9
TABLE_FONT_SIZE = 10
TABLE_CELL_PADDING = 5

# Common CSS family names mapped to the PDF standard families
FAMILY_ALIASES = {
    'arial': 'helvetica',
    'sans-serif': 'helvetica',
    'times new roman': 'times',
    'times-roman': 'times',
    'serif': 'times',
    'monospace': 'courier',
    'courier new': 'courier',
}

FONT_STYLES = {
    'normal': (0, 0),
    'bold': (1, 0),
    'italic': (0, 1),
    'bolditalic': (1, 1),
}


def resolve_font_name(family: str, style: str = 'normal') -> str:
    """
    Resolve a family name and style to a concrete ReportLab font name.

    Works for the standard PDF families and for families registered with
    reportlab.pdfbase.pdfmetrics.registerFontFamily.

    Args:
        family: Font family (e.g. 'Helvetica', 'Times New Roman')
        style: 'normal', 'bold', 'italic' or 'bolditalic'

    Returns:
        Font name usable with canvas.setFont()

    Raises:
        ValueError: If the style is unknown or ReportLab has no such font
    """
    if style not in FONT_STYLES:
        raise ValueError(f"Unknown font style '{style}'")
    bold, italic = FONT_STYLES[style]
    key = FAMILY_ALIASES.get(family.lower(), family)
    return tt2ps(key, bold, italic)


@dataclass(frozen=True)
class TextStyle:
    """
    Immutable style snapshot for a single drawing call.

    Applied inside canvas.saveState()/restoreState() so that nothing
    outlives the call that used it.
    """
    font_name: str
    font_size: float
    color: str

    def apply(self, canvas) -> None:
        canvas.setFont(self.font_name, self.font_size)
        canvas.setFillColor(colors.HexColor(self.color))


def body_style(config: ResolvedConfig) -> TextStyle:
    """Default body style for a configuration"""
    return TextStyle(
        font_name=resolve_font_name(config.fonts.body),
        font_size=BODY_FONT_SIZE,
        color=config.colors.text,
    )


def get_table_paragraph_styles(config: ResolvedConfig, header_color: str,
                               header_font_style: str, body_color: str):
    """
    Get cell paragraph styles for tables.

    Returns:
        Tuple of (header ParagraphStyle, body ParagraphStyle)
    """
    header = ParagraphStyle(
        'TableHeader',
        fontSize=TABLE_FONT_SIZE,
        leading=TABLE_FONT_SIZE * 1.2,
        textColor=colors.HexColor(header_color),
        alignment=TA_LEFT,
        fontName=resolve_font_name(config.fonts.body, header_font_style),
    )
    body = ParagraphStyle(
        'TableCell',
        fontSize=TABLE_FONT_SIZE,
        leading=TABLE_FONT_SIZE * 1.2,
        textColor=colors.HexColor(body_color),
        alignment=TA_LEFT,
        fontName=resolve_font_name(config.fonts.body),
    )
    return header, body


def get_table_style(header_fill: str, *, body_fill: Optional[str] = None,
                    row_fills: Optional[list] = None, grid_color: Optional[str] = None) -> TableStyle:
    """
    Get the table style for a delegated table layout.

    Args:
        header_fill: Header row background
        body_fill: Background for all body rows
        row_fills: Per body row backgrounds (overrides body_fill)
        grid_color: Draw a grid in this color when given

    Returns:
        TableStyle
    """
    commands = [
        # Header row styling
        ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor(header_fill)),

        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('LEFTPADDING', (0, 0), (-1, -1), TABLE_CELL_PADDING),
        ('RIGHTPADDING', (0, 0), (-1, -1), TABLE_CELL_PADDING),
        ('TOPPADDING', (0, 0), (-1, -1), TABLE_CELL_PADDING),
        ('BOTTOMPADDING', (0, 0), (-1, -1), TABLE_CELL_PADDING),
    ]

    if row_fills:
        for index, fill in enumerate(row_fills, start=1):
            if fill:
                commands.append(('BACKGROUND', (0, index), (-1, index), colors.HexColor(fill)))
    elif body_fill:
        commands.append(('BACKGROUND', (0, 1), (-1, -1), colors.HexColor(body_fill)))

    if grid_color:
        commands.append(('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor(grid_color)))

    return TableStyle(commands)
