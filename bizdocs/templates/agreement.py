"""
Agreement Template

Template for agreements between named parties, with numbered sections and
an optional signature block.
"""

from bizdocs.geometry import PdfConfig
from bizdocs.reporting.registry import DocumentTemplate
from bizdocs.utils.formatting import format_date
from .base import render_html
from .components import MUTED, render_signature_block


class AgreementTemplate(DocumentTemplate):
    """Template for agreements"""

    id = 'agreement'
    name = 'Agreement'
    config = PdfConfig(page_size='letter', orientation='portrait')
    supports_html = True

    def draw(self, data: dict, ctx) -> None:
        """
        Draw the agreement.

        Expected data structure:
        {
            'title': str,
            'effective_date': str (ISO) or date,
            'parties': list of dict with 'name', 'role', 'email' (optional),
            'sections': list of dict with 'title' and 'content',
            'signatures': bool (optional, default True)
        }
        """
        ctx.heading(data['title'], 1)
        ctx.space(0.2)
        ctx.text(f"Effective Date: {format_date(data['effective_date'])}", color=MUTED)
        ctx.space(0.4)

        ctx.heading('Parties', 2)
        ctx.space(0.1)
        for number, party in enumerate(data['parties'], start=1):
            ctx.text(f'{number}. {party["name"]} ("{party["role"]}")', bold=True)
            if party.get('email'):
                ctx.text(f"   Email: {party['email']}", color=MUTED)
            ctx.space(0.1)
        ctx.space(0.3)

        for number, section in enumerate(data['sections'], start=1):
            ctx.heading(f"{number}. {section['title']}", 3)
            ctx.space(0.1)
            ctx.text(section['content'], max_width=ctx.width)
            ctx.space(0.3)

        if data.get('signatures', True):
            ctx.space(0.2)
            render_signature_block(
                ctx, [f"{party['name']} ({party['role']})" for party in data['parties']]
            )

    def compose(self, data: dict) -> str:
        """Compose the agreement as an HTML fragment"""
        parties = [
            {
                'number': str(number),
                'name': party['name'],
                'role': party['role'],
                'email': party.get('email') or '',
            }
            for number, party in enumerate(data['parties'], start=1)
        ]
        sections = [
            {'number': str(number), 'title': section['title'], 'content': section['content']}
            for number, section in enumerate(data['sections'], start=1)
        ]

        return render_html('agreement.html', {
            'title': data['title'],
            'effective_date': format_date(data['effective_date']),
            'parties': parties,
            'sections': sections,
            'signatures': data.get('signatures', True),
        })
