"""
Document Template Registry

Defines the content producer contract and a central registry resolving
template identifiers to template instances.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from bizdocs.exceptions import TemplateNotFound
from bizdocs.geometry import PdfConfig


class DocumentTemplate(ABC):
    """
    Base class for content producers.

    A template always draws through a CursorContext (vector backend). It may
    also compose an HTML fragment for the browser-print backend; declaring
    ``supports_html = True`` without overriding compose() is rejected when
    the subclass is defined.
    """

    id: str = ''
    name: str = ''
    config: Optional[PdfConfig] = None
    supports_html: bool = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.supports_html and cls.compose is DocumentTemplate.compose:
            raise TypeError(
                f"{cls.__name__} declares supports_html but does not implement compose()"
            )

    @abstractmethod
    def draw(self, data: Any, ctx) -> None:
        """
        Draw the document through a cursor context.

        Args:
            data: Template data
            ctx: CursorContext bound to the page canvas
        """
        pass

    def compose(self, data: Any) -> str:
        """
        Compose an HTML fragment for the browser-print backend.

        Args:
            data: Template data

        Returns:
            HTML fragment (body content only)
        """
        raise NotImplementedError(f"{type(self).__name__} does not support HTML rendering")


class ReportRegistry:
    """Registry for document templates"""

    def __init__(self):
        self._templates: dict[str, DocumentTemplate] = {}

    def register(self, template_key: str, template: DocumentTemplate) -> None:
        """
        Register a document template.

        Args:
            template_key: Unique identifier for the template (e.g., 'invoice')
            template: Template instance

        Raises:
            ValueError: If the key is already registered
        """
        if template_key in self._templates:
            raise ValueError(f"Template '{template_key}' is already registered")
        self._templates[template_key] = template

    def get_template(self, template_key: str) -> DocumentTemplate:
        """
        Get a template by its key.

        Raises:
            TemplateNotFound: If the key is not registered
        """
        if template_key not in self._templates:
            raise TemplateNotFound(f'Template "{template_key}" not found')
        return self._templates[template_key]

    def is_registered(self, template_key: str) -> bool:
        """Check if a template key is registered"""
        return template_key in self._templates

    def list_templates(self) -> list[str]:
        """List all registered template keys"""
        return list(self._templates.keys())


# Global registry instance
_registry = ReportRegistry()


def get_default_registry() -> ReportRegistry:
    """Return the global registry"""
    return _registry


def register_template(template_key: str, template: DocumentTemplate) -> None:
    """Register a template in the global registry"""
    _registry.register(template_key, template)


def get_template(template_key: str) -> DocumentTemplate:
    """Get a template from the global registry"""
    return _registry.get_template(template_key)


def is_registered(template_key: str) -> bool:
    """Check if a template key is registered in the global registry"""
    return _registry.is_registered(template_key)


def list_templates() -> list[str]:
    """List all template keys in the global registry"""
    return _registry.list_templates()
