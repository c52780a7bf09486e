"""
bizdocs

Business document (invoice, estimate, agreement) PDF generation with a
vector backend (ReportLab) and a browser-print backend (Playwright).
"""

from .exceptions import BrowserRenderError, RenderError, TemplateNotFound
from .generator import PdfGenerator
from .geometry import FontSet, Margins, Palette, PdfConfig, ResolvedConfig, resolve_config
from .printing import PdfRenderService, RenderOptions, RenderResult
from .reporting import CursorContext, DocumentTemplate, VectorRenderService

__version__ = '0.1.0'

__all__ = [
    'BrowserRenderError',
    'CursorContext',
    'DocumentTemplate',
    'FontSet',
    'Margins',
    'Palette',
    'PdfConfig',
    'PdfGenerator',
    'PdfRenderService',
    'RenderError',
    'RenderOptions',
    'RenderResult',
    'ResolvedConfig',
    'TemplateNotFound',
    'VectorRenderService',
    'resolve_config',
]
