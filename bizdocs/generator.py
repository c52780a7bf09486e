"""
PDF Generator

Facade that keeps a template registry and routes each render to the vector
or browser-print backend.
"""

import logging
from typing import Any, Optional

from .geometry import ConfigLike, merge_configs, resolve_config
from .printing.dto import RenderOptions, RenderResult
from .printing.interfaces import IPdfRenderer
from .printing.service import PdfRenderService
from .reporting.registry import DocumentTemplate, ReportRegistry
from .reporting.service import VectorRenderService


logger = logging.getLogger(__name__)


class PdfGenerator:
    """
    Entry point for rendering documents.

    Usage:
        generator = PdfGenerator({'page_size': 'a4'})
        generator.register(InvoiceTemplate())
        result = await generator.render('invoice', data, RenderOptions(format='buffer'))
    """

    def __init__(
        self,
        config: ConfigLike = None,
        registry: Optional[ReportRegistry] = None,
        renderer: Optional[IPdfRenderer] = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Base page configuration, overlaid by each template's own
            registry: Template registry (default: a new, empty registry)
            renderer: Print engine for the browser-print backend (default:
                Playwright, created on first server-side render)
        """
        self.config = merge_configs(config)
        self.registry = registry if registry is not None else ReportRegistry()
        self.renderer = renderer

    def register(self, template: DocumentTemplate) -> 'PdfGenerator':
        """Register a template under its id; returns self for chaining"""
        self.registry.register(template.id, template)
        return self

    async def render(
        self,
        template_id: str,
        data: Any,
        options: Optional[RenderOptions] = None,
    ) -> RenderResult:
        """
        Render a registered template.

        Raises:
            TemplateNotFound: If template_id is not registered
        """
        template = self.registry.get_template(template_id)
        return await self.generate(template, data, options)

    async def generate(
        self,
        template: DocumentTemplate,
        data: Any,
        options: Optional[RenderOptions] = None,
    ) -> RenderResult:
        """
        Render a template without registering it.

        The browser-print backend is used when options.server is set and the
        template supports HTML; otherwise the vector backend.

        Args:
            template: Content producer
            data: Template data
            options: Render options

        Returns:
            RenderResult
        """
        config = resolve_config(merge_configs(self.config, template.config))

        if options and options.server:
            if template.supports_html:
                service = PdfRenderService(config, renderer=self.renderer)
                return await service.render(template.compose(data), options, title=template.name)
            logger.debug(f"Template '{template.id}' has no HTML composition, using vector backend")

        return VectorRenderService(config).render(template, data, options)
