"""
Estimate Template

Template for estimates. Vector backend only: there is no HTML composition,
so server-side rendering requests fall back to the vector backend.
"""

from bizdocs.geometry import PdfConfig
from bizdocs.reporting.registry import DocumentTemplate
from bizdocs.utils.formatting import format_currency, format_date, format_quantity
from .components import MUTED, calculate_totals, render_header, render_totals


class EstimateTemplate(DocumentTemplate):
    """Template for estimates"""

    id = 'estimate'
    name = 'Estimate'
    config = PdfConfig(page_size='letter', orientation='portrait')

    def draw(self, data: dict, ctx) -> None:
        """
        Draw the estimate.

        Expected data structure matches the invoice, with 'valid_until'
        (optional) instead of 'due_date' and an optional 'terms' string.
        """
        subtotal, tax_amount, total = calculate_totals(data['items'], data.get('tax_rate'))

        render_header(ctx, 'ESTIMATE', data['document_number'])

        ctx.text('FROM', size=9, color=MUTED, bold=True)
        ctx.space(0.1)
        ctx.text(data['business_name'], bold=True)
        for field in ('business_email', 'business_phone'):
            if data.get(field):
                ctx.text(data[field])
        ctx.space(0.3)

        ctx.text('PREPARED FOR', size=9, color=MUTED, bold=True)
        ctx.space(0.1)
        ctx.text(data['client_name'], bold=True)
        for field in ('client_email', 'client_phone', 'client_address'):
            if data.get(field):
                ctx.text(data[field])
        ctx.space(0.4)

        # Dates
        ctx.rect(ctx.margin_left, ctx.y, ctx.width, 0.6, fill=ctx.config.colors.background)
        ctx.space(0.15)
        dates = f"Estimate Date: {format_date(data['document_date'])}"
        if data.get('valid_until'):
            dates += f"    Valid Until: {format_date(data['valid_until'])}"
        ctx.text(dates)
        ctx.space(0.5)

        rows = [
            [
                item['description'],
                format_quantity(item['quantity']),
                format_currency(item['rate']),
                format_currency(item['quantity'] * item['rate']),
            ]
            for item in data['items']
        ]
        ctx.table(['Description', 'Qty', 'Rate', 'Amount'], rows, striped=True)

        render_totals(
            ctx, subtotal, total,
            tax_rate=data.get('tax_rate'),
            tax_amount=tax_amount,
            total_label='Estimated Total',
        )
        ctx.space(0.5)

        if data.get('notes'):
            ctx.text('NOTES', size=9, color=MUTED, bold=True)
            ctx.space(0.1)
            ctx.text(data['notes'], color=MUTED, max_width=ctx.width)
            ctx.space(0.3)

        if data.get('terms'):
            ctx.text('TERMS & CONDITIONS', size=9, color=MUTED, bold=True)
            ctx.space(0.1)
            ctx.text(data['terms'], color=MUTED, max_width=ctx.width)
