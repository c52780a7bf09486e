"""
Core PDF Render Service

Central service for printing HTML fragments to PDF through a browser engine.
"""

import logging
from typing import Optional

from bizdocs.geometry import ConfigLike, resolve_config
from .compositor import compose_document
from .dto import RenderOptions, RenderResult, build_result
from .interfaces import IPdfRenderer
from .pagecount import estimate_page_count
from .playwright_renderer import PlaywrightRenderer
from .sanitizer import sanitize_html


logger = logging.getLogger(__name__)


class PdfRenderService:
    """
    Browser-print backend for PDF rendering.

    Responsibilities:
    1. Compose the HTML fragment into a full print document
    2. Delegate printing to an IPdfRenderer implementation
    3. Estimate the page count and return a structured RenderResult

    Usage:
        service = PdfRenderService({'page_size': 'letter'})
        result = await service.render('<p>Hello</p>', options=RenderOptions(format='base64'))
    """

    def __init__(self, config: ConfigLike = None, renderer: Optional[IPdfRenderer] = None):
        """
        Initialize the service.

        Args:
            config: Page configuration (partial or resolved)
            renderer: Print engine. If None, uses the default Playwright renderer.
        """
        self.config = resolve_config(config)
        self.renderer = renderer or self._get_default_renderer()

    async def render(
        self,
        html: str,
        options: Optional[RenderOptions] = None,
        *,
        title: str = '',
    ) -> RenderResult:
        """
        Print an HTML fragment to PDF.

        Args:
            html: HTML fragment produced by a template's compose()
            options: Output options (default format 'buffer'; 'save' is not
                supported and falls back to 'buffer')
            title: Document title

        Returns:
            RenderResult with an estimated page count

        Raises:
            BrowserRenderError: If the print engine fails
        """
        if options and options.sanitize:
            html = sanitize_html(html)

        document = compose_document(html, self.config, title=title)
        logger.debug(f"Composed HTML document ({len(document)} chars)")

        pdf_bytes = await self.renderer.render_html_to_pdf(document, self.config)
        pages = estimate_page_count(pdf_bytes)

        logger.info(f"Rendered PDF with browser backend ({len(pdf_bytes)} bytes, ~{pages} pages)")
        return build_result(pdf_bytes, pages, options, default_format='buffer', allow_save=False)

    def _get_default_renderer(self) -> IPdfRenderer:
        """
        Get the default print engine.

        Returns:
            Default IPdfRenderer implementation (Playwright/Chromium)
        """
        return PlaywrightRenderer()
