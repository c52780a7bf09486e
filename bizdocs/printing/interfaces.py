"""
Interfaces for the Printing Framework

Defines the interface implemented by HTML-to-PDF print engines.
"""

from abc import ABC, abstractmethod

from bizdocs.geometry import ResolvedConfig


class IPdfRenderer(ABC):
    """
    Interface for HTML-to-PDF print engines.

    Implementations own the whole lifecycle of their engine for a single
    call: acquire, print, release.
    """

    @abstractmethod
    async def render_html_to_pdf(self, html: str, config: ResolvedConfig) -> bytes:
        """
        Print a complete HTML document to PDF.

        Args:
            html: Full HTML document
            config: Resolved page configuration (size, orientation, margins)

        Returns:
            PDF content as bytes

        Raises:
            BrowserRenderError: If printing fails
        """
        pass
