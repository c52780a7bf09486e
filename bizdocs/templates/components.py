"""
Layout Components

Reusable blocks drawn through a cursor context: header, footer, table,
signature block and totals.
"""

from typing import Optional, Sequence

from bizdocs.utils.formatting import format_currency


MUTED = '#6b7280'
FAINT = '#9ca3af'


def render_header(ctx, title: str, subtitle: Optional[str] = None, color: Optional[str] = None) -> None:
    """
    Draw a level 1 heading with an optional subtitle.

    Args:
        ctx: CursorContext
        title: Main title text
        subtitle: Optional subtitle text
        color: Subtitle color (default muted gray)
    """
    ctx.heading(title, 1)
    if subtitle:
        ctx.text(subtitle, color=color or MUTED, size=12)
    ctx.space(0.3)


def render_footer(ctx, text: Optional[str] = None, show_page_number: bool = False) -> None:
    """
    Draw a rule followed by optional centered text and a page number.

    Args:
        ctx: CursorContext
        text: Optional footer text (centered)
        show_page_number: Add 'Page N' on the right
    """
    ctx.space(0.3)
    ctx.line()
    ctx.space(0.1)

    if text:
        ctx.text(text, align='center', size=9, color=FAINT)

    if show_page_number:
        ctx.text(f"Page {ctx.page_number()}", align='right', size=9, color=FAINT)


def render_table(ctx, headers: Sequence[str], rows: Sequence[Sequence], **options) -> None:
    """Draw a table; options are passed to CursorContext.table()"""
    ctx.table(headers, rows, **options)


def render_signature_block(ctx, labels: Sequence[str], include_date: bool = True,
                           spacing: float = 0.4) -> None:
    """
    Draw a 'Signatures' section with one signature line per label.

    Args:
        ctx: CursorContext
        labels: Label under each signature line
        include_date: Add a date line under each signature
        spacing: Space after each signature in inches
    """
    ctx.space(0.3)
    ctx.line()
    ctx.space(0.3)
    ctx.heading('Signatures', 2)
    ctx.space(0.3)

    for label in labels:
        ctx.signature(label)
        if include_date:
            ctx.text('Date: _______________', color=MUTED, size=9)
        ctx.space(spacing)


def render_totals(
    ctx,
    subtotal: float,
    total: float,
    tax_rate: Optional[float] = None,
    tax_amount: Optional[float] = None,
    amount_due_label: Optional[str] = None,
    show_amount_due_box: bool = False,
    total_label: str = 'Total',
) -> None:
    """
    Draw right aligned subtotal/tax/total lines and an optional amount due box.

    Args:
        ctx: CursorContext
        subtotal: Sum of line items
        total: Grand total
        tax_rate: Tax percentage (tax line drawn whenever a rate is set)
        tax_amount: Tax amount
        amount_due_label: Label for the amount due box (default 'Amount Due')
        show_amount_due_box: Draw the filled amount due box
        total_label: Label for the total line
    """
    ctx.space(0.2)
    ctx.text(f"Subtotal: {format_currency(subtotal)}", align='right')

    if tax_rate:
        ctx.text(f"Tax ({tax_rate:g}%): {format_currency(tax_amount or 0)}", align='right')

    ctx.line()
    ctx.text(f"{total_label}: {format_currency(total)}", align='right', bold=True, size=16)

    if show_amount_due_box:
        ctx.space(0.4)
        ctx.rect(ctx.margin_left, ctx.y, ctx.width, 0.7, fill=ctx.config.colors.primary)
        ctx.space(0.25)
        ctx.text(
            f"{amount_due_label or 'Amount Due'}: {format_currency(total)}",
            color='#ffffff', bold=True, size=18,
        )
        ctx.space(0.5)


def calculate_totals(items: Sequence[dict], tax_rate: Optional[float] = None):
    """
    Compute subtotal, tax and total for line items.

    Args:
        items: Line items with 'quantity' and 'rate'
        tax_rate: Tax percentage

    Returns:
        Tuple of (subtotal, tax_amount, total)
    """
    subtotal = sum(item['quantity'] * item['rate'] for item in items)
    tax_amount = subtotal * (tax_rate / 100) if tax_rate else 0
    return subtotal, tax_amount, subtotal + tax_amount
