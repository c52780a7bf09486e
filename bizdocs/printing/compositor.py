"""
HTML Compositor

Wraps an HTML fragment in a full print document whose stylesheet is derived
from the resolved page configuration, so the browser-print output matches the
vector backend's palette and fonts.
"""

from functools import lru_cache
from pathlib import Path

from django.template import Context, Engine
from django.utils.safestring import mark_safe

from bizdocs.geometry import ResolvedConfig


TEMPLATE_DIR = Path(__file__).resolve().parent / 'templates'
DOCUMENT_TEMPLATE = 'document.html'


@lru_cache(maxsize=None)
def get_template_engine(*dirs: str) -> Engine:
    """
    Get a standalone Django template engine for the given directories.

    Autoescaping is on; everything passed to templates must be strings (or
    marked safe) because number localization needs configured settings.
    """
    return Engine(dirs=[str(TEMPLATE_DIR), *dirs], autoescape=True)


def render_template(template_name: str, context: dict, *dirs: str) -> str:
    """
    Render a template from the package (or extra) template directories.

    Args:
        template_name: Template file name
        context: Template context
        *dirs: Additional template directories

    Returns:
        Rendered text
    """
    engine = get_template_engine(*dirs)
    return engine.get_template(template_name).render(Context(context))


def page_size_directive(config: ResolvedConfig) -> str:
    """CSS @page size value, e.g. 'letter' or 'a4 landscape'"""
    if config.orientation == 'landscape':
        return f"{config.page_size} landscape"
    return config.page_size


def compose_document(fragment: str, config: ResolvedConfig, *, title: str = '') -> str:
    """
    Embed an HTML fragment in a complete print document.

    Margins are zero in the stylesheet; the print call applies the configured
    margins so they are not applied twice.

    Args:
        fragment: Body HTML produced by a template's compose()
        config: Resolved page configuration
        title: Document title (escaped)

    Returns:
        Full HTML document
    """
    return render_template(DOCUMENT_TEMPLATE, {
        'title': title,
        'colors': config.colors,
        'fonts': config.fonts,
        'page_size': page_size_directive(config),
        'fragment': mark_safe(fragment),
    })
