"""
Vector Render Service

Renders document templates by drawing directly onto a ReportLab canvas.
"""

import logging
from io import BytesIO
from typing import Any, Optional

from reportlab.lib.units import inch
from reportlab.pdfgen import canvas as pdf_canvas

from bizdocs.geometry import ConfigLike, resolve_config
from bizdocs.printing.dto import RenderOptions, RenderResult, build_result
from .canvas import CursorContext
from .registry import DocumentTemplate


logger = logging.getLogger(__name__)


class VectorRenderService:
    """
    Vector backend for PDF rendering.

    Responsibilities:
    1. Create a page canvas from the resolved configuration
    2. Run the template's draw() against a CursorContext bound to it
    3. Serialize the canvas and return a structured RenderResult

    Usage:
        service = VectorRenderService({'page_size': 'a4'})
        result = service.render(InvoiceTemplate(), data, RenderOptions(format='buffer'))
    """

    def __init__(self, config: ConfigLike = None):
        """
        Initialize the service.

        Args:
            config: Page configuration (partial or resolved)
        """
        self.config = resolve_config(config)

    def render(
        self,
        template: DocumentTemplate,
        data: Any,
        options: Optional[RenderOptions] = None,
    ) -> RenderResult:
        """
        Render a template to PDF.

        Args:
            template: Content producer
            data: Template data
            options: Output options (default format 'blob')

        Returns:
            RenderResult with an exact page count

        Raises:
            Exception: If drawing or serialization fails
        """
        buffer = BytesIO()
        pdf = pdf_canvas.Canvas(
            buffer,
            pagesize=(self.config.page_width * inch, self.config.page_height * inch),
        )
        if template.name:
            pdf.setTitle(template.name)

        try:
            ctx = CursorContext(pdf, self.config)
            logger.debug(f"Drawing template '{template.id}' on {self.config.page_size} {self.config.orientation}")
            template.draw(data, ctx)

            pages = ctx.page_number()
            pdf.showPage()
            pdf.save()
        except Exception as e:
            logger.error(f"Failed to render template '{template.id}': {e}", exc_info=True)
            raise

        pdf_bytes = buffer.getvalue()
        buffer.close()

        logger.info(f"Rendered '{template.id}' with vector backend ({len(pdf_bytes)} bytes, {pages} pages)")
        return build_result(pdf_bytes, pages, options, default_format='blob', allow_save=True)
