#!/usr/bin/env python
"""
Demonstration of the bizdocs document generator

Renders the built-in invoice, estimate and agreement templates with the
vector backend, and the invoice with the browser-print backend when
Chromium is available (python -m playwright install chromium).
"""

import asyncio
import logging
import sys
from pathlib import Path

from bizdocs import BrowserRenderError, PdfGenerator, RenderOptions
from bizdocs.reporting.registry import get_default_registry, list_templates
from bizdocs.templates import register_all_templates


OUTPUT_DIR = Path('/tmp')

INVOICE = {
    'document_number': 'INV-2026-001',
    'business_name': 'Acme Flooring Co.',
    'business_email': 'billing@acme.test',
    'business_phone': '(555) 010-0100',
    'client_name': 'Jane Smith',
    'client_email': 'jane@example.test',
    'client_address': '1 Main St, Springfield',
    'document_date': '2026-01-15',
    'due_date': '2026-02-14',
    'payment_terms': 'Net 30',
    'items': [
        {'description': 'Hardwood flooring (sq ft)', 'quantity': 200, 'rate': 6},
        {'description': 'Installation labor (hours)', 'quantity': 8, 'rate': 50},
    ],
    'tax_rate': 5,
    'notes': 'Thank you for your business. Please include the invoice number with your payment.',
}

AGREEMENT = {
    'title': 'Lawn Care Service Agreement',
    'effective_date': '2026-03-01',
    'parties': [
        {'name': 'Green Yard LLC', 'role': 'Provider', 'email': 'contracts@greenyard.test'},
        {'name': 'Jane Smith', 'role': 'Client'},
    ],
    'sections': [
        {'title': 'Services', 'content': 'Weekly mowing, edging and seasonal cleanup of the client property.'},
        {'title': 'Payment', 'content': 'Client pays $750/month, due on the first day of each month.'},
        {'title': 'Term', 'content': 'Twelve months from the effective date, renewable by mutual agreement.'},
    ],
}


async def demo_vector_rendering(generator):
    """Render every built-in template with the vector backend"""
    print("\n=== Demo 1: Vector Rendering ===")

    estimate = dict(INVOICE, document_number='EST-2026-007', valid_until='2026-02-15',
                    terms='A 50% deposit is required to schedule the work.')

    for template_id, data in (('invoice', INVOICE), ('estimate', estimate), ('agreement', AGREEMENT)):
        path = OUTPUT_DIR / f'demo_{template_id}.pdf'
        result = await generator.render(template_id, data, RenderOptions(format='save', filename=str(path)))
        print(f"✓ {template_id}: {result.pages} page(s) saved to {result.filename}")


async def demo_browser_rendering(generator):
    """Render the invoice through headless Chromium"""
    print("\n=== Demo 2: Browser Rendering ===")

    try:
        result = await generator.render('invoice', INVOICE, RenderOptions(server=True))
    except BrowserRenderError as e:
        print(f"✗ Browser rendering unavailable: {e}")
        return

    path = OUTPUT_DIR / 'demo_invoice_browser.pdf'
    path.write_bytes(result.buffer)
    print(f"✓ Printed {len(result)} bytes (~{result.pages} page(s)) to {path}")


def demo_template_registry():
    """Show the templates registered on import"""
    print("\n=== Demo 3: Template Registry ===")
    print(f"✓ Registered templates: {list_templates()}")


async def main():
    """Run all demonstrations"""
    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("bizdocs - Demonstration")
    print("=" * 60)

    generator = PdfGenerator(registry=register_all_templates(get_default_registry()))

    await demo_vector_rendering(generator)
    await demo_browser_rendering(generator)
    demo_template_registry()

    print("\n" + "=" * 60)
    print("✓ All demonstrations completed")
    print("=" * 60)
    return 0


if __name__ == '__main__':
    sys.exit(asyncio.run(main()))
