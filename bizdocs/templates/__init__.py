"""
Built-in document templates

Contains the invoice, estimate and agreement templates plus reusable layout
components.
"""

from typing import Optional

from bizdocs.reporting.registry import ReportRegistry, get_default_registry
from .agreement import AgreementTemplate
from .estimate import EstimateTemplate
from .invoice import InvoiceTemplate


BUILTIN_TEMPLATES = (InvoiceTemplate, EstimateTemplate, AgreementTemplate)


def register_all_templates(registry: Optional[ReportRegistry] = None) -> ReportRegistry:
    """
    Register all built-in templates.

    Args:
        registry: Target registry (default: the global registry)

    Returns:
        The registry the templates were added to
    """
    registry = registry or get_default_registry()
    for template_cls in BUILTIN_TEMPLATES:
        if not registry.is_registered(template_cls.id):
            registry.register(template_cls.id, template_cls())
    return registry


# Auto-register templates when module is imported
register_all_templates()


__all__ = [
    'AgreementTemplate',
    'EstimateTemplate',
    'InvoiceTemplate',
    'register_all_templates',
]
