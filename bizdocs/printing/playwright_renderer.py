"""
Playwright Renderer Implementation

Adapter for printing HTML to PDF with a headless Chromium driven by
Playwright. Every call launches its own browser and closes it before
returning, on success and on failure.

Setup (one-time):
    python -m playwright install chromium
"""

import asyncio
import logging
from typing import Optional

from playwright.async_api import async_playwright

from bizdocs.config import BrowserSettings, get_browser_settings
from bizdocs.exceptions import BrowserRenderError
from bizdocs.geometry import ResolvedConfig
from .interfaces import IPdfRenderer


logger = logging.getLogger(__name__)

PAPER_FORMATS = {
    'letter': 'Letter',
    'a4': 'A4',
    'legal': 'Legal',
}


def pdf_margins(config: ResolvedConfig) -> dict:
    """Margins as inch-suffixed dimension strings for page.pdf()"""
    margins = config.margins
    return {
        'top': f"{margins.top}in",
        'right': f"{margins.right}in",
        'bottom': f"{margins.bottom}in",
        'left': f"{margins.left}in",
    }


class PlaywrightRenderer(IPdfRenderer):
    """
    PDF renderer using headless Chromium.

    Supports:
    - Waiting for network idle and web fonts before printing
    - Page size, orientation and margins from the resolved configuration
    - Background printing (colors and fills)
    """

    def __init__(self, settings: Optional[BrowserSettings] = None):
        """
        Initialize the renderer.

        Args:
            settings: Browser settings. If None, read from the environment.
        """
        self.settings = settings or get_browser_settings()

    async def render_html_to_pdf(self, html: str, config: ResolvedConfig) -> bytes:
        """
        Print HTML to PDF using a fresh Chromium instance.

        Args:
            html: Full HTML document
            config: Resolved page configuration

        Returns:
            PDF content as bytes

        Raises:
            BrowserRenderError: If launching, loading or printing fails. The
                browser has been closed by then.
        """
        settings = self.settings
        timeout_seconds = settings.timeout_ms / 1000

        try:
            async with async_playwright() as playwright:
                browser = await playwright.chromium.launch(
                    headless=settings.headless,
                    args=list(settings.launch_args),
                    executable_path=settings.executable_path,
                )
                try:
                    page = await browser.new_page()
                    await page.set_content(html, wait_until='networkidle', timeout=settings.timeout_ms)

                    fonts_ready = await asyncio.wait_for(
                        page.evaluate_handle('document.fonts.ready'),
                        timeout=timeout_seconds,
                    )
                    await fonts_ready.dispose()

                    pdf_bytes = await page.pdf(
                        format=PAPER_FORMATS[config.page_size],
                        landscape=config.orientation == 'landscape',
                        margin=pdf_margins(config),
                        print_background=True,
                    )
                finally:
                    await browser.close()

        except Exception as e:
            logger.error(f"Failed to print PDF with Chromium: {e}", exc_info=True)
            raise BrowserRenderError(f"Browser print failed: {e}") from e

        logger.info(f"Successfully printed PDF: {len(pdf_bytes)} bytes")
        return pdf_bytes
