"""
Invoice Template

Template for invoices, drawable on the vector backend and composable as HTML
for the browser-print backend.
"""

from bizdocs.geometry import PdfConfig
from bizdocs.reporting.registry import DocumentTemplate
from bizdocs.utils.formatting import format_currency, format_date, format_quantity
from .base import render_html
from .components import MUTED, calculate_totals, render_header, render_totals


class InvoiceTemplate(DocumentTemplate):
    """Template for invoices"""

    id = 'invoice'
    name = 'Invoice'
    config = PdfConfig(page_size='letter', orientation='portrait')
    supports_html = True

    def draw(self, data: dict, ctx) -> None:
        """
        Draw the invoice.

        Expected data structure:
        {
            'document_number': str,
            'business_name': str,
            'business_email', 'business_phone', 'business_address': str (optional),
            'client_name': str,
            'client_email', 'client_phone', 'client_address': str (optional),
            'document_date': str (ISO) or date,
            'due_date': str (ISO) or date,
            'payment_terms': str (optional, default 'Net 30'),
            'items': list of dict with 'description', 'quantity', 'rate', 'unit' (optional),
            'tax_rate': float percentage (optional),
            'notes': str (optional)
        }
        """
        subtotal, tax_amount, total = calculate_totals(data['items'], data.get('tax_rate'))

        render_header(ctx, 'INVOICE', data['document_number'])
        ctx.text(data['business_name'], bold=True, size=14, align='right')
        ctx.space(0.5)

        # From / Bill To
        for label, prefix in (('FROM', 'business'), ('BILL TO', 'client')):
            ctx.text(label, size=9, color=MUTED, bold=True)
            ctx.space(0.1)
            ctx.text(data[f'{prefix}_name'], bold=True)
            for field in ('email', 'phone', 'address'):
                if data.get(f'{prefix}_{field}'):
                    ctx.text(data[f'{prefix}_{field}'])
            ctx.space(0.3 if prefix == 'business' else 0.4)

        # Dates bar
        ctx.rect(ctx.margin_left, ctx.y, ctx.width, 0.6, fill=ctx.config.colors.background)
        ctx.space(0.15)
        ctx.text(
            f"Invoice Date: {format_date(data['document_date'])}    "
            f"Due Date: {format_date(data['due_date'])}    "
            f"{data.get('payment_terms') or 'Net 30'}"
        )
        ctx.space(0.5)

        # Line items
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
            show_amount_due_box=True,
        )

        if data.get('notes'):
            ctx.text('NOTES', size=9, color=MUTED, bold=True)
            ctx.space(0.1)
            ctx.text(data['notes'], color=MUTED, max_width=ctx.width)

    def compose(self, data: dict) -> str:
        """Compose the invoice as an HTML fragment"""
        subtotal, tax_amount, total = calculate_totals(data['items'], data.get('tax_rate'))

        parties = []
        for label, prefix in (('From', 'business'), ('Bill To', 'client')):
            parties.append({
                'label': label,
                'name': data[f'{prefix}_name'],
                'lines': [
                    data[f'{prefix}_{field}']
                    for field in ('email', 'phone', 'address')
                    if data.get(f'{prefix}_{field}')
                ],
            })

        dates = [
            {'label': 'Invoice Date', 'value': format_date(data['document_date'])},
            {'label': 'Due Date', 'value': format_date(data['due_date'])},
        ]
        if data.get('payment_terms'):
            dates.append({'label': 'Payment Terms', 'value': data['payment_terms']})

        items = [
            {
                'description': item['description'],
                'quantity': format_quantity(item['quantity']),
                'rate': format_currency(item['rate']),
                'amount': format_currency(item['quantity'] * item['rate']),
            }
            for item in data['items']
        ]

        tax_rate = data.get('tax_rate')
        return render_html('invoice.html', {
            'document_number': data['document_number'],
            'parties': parties,
            'dates': dates,
            'items': items,
            'subtotal': format_currency(subtotal),
            'tax_label': f"Tax ({tax_rate:g}%)" if tax_rate else '',
            'tax_amount': format_currency(tax_amount),
            'total': format_currency(total),
            'notes': data.get('notes') or '',
        })
