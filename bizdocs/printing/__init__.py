"""
Printing Framework

Provides PDF generation from HTML fragments through a headless browser,
plus the render result types shared with the vector backend.
"""

from .service import PdfRenderService
from .dto import RenderOptions, RenderResult
from .interfaces import IPdfRenderer

__all__ = [
    'PdfRenderService',
    'RenderOptions',
    'RenderResult',
    'IPdfRenderer',
]
