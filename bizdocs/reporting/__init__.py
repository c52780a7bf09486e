"""
Vector Report Service

Provides PDF generation by drawing templates onto a ReportLab canvas.
"""

from .canvas import CursorContext
from .registry import DocumentTemplate, ReportRegistry
from .service import VectorRenderService

__all__ = ['CursorContext', 'DocumentTemplate', 'ReportRegistry', 'VectorRenderService']
