"""
HTML Sanitizer for Printing Framework

Provides an optional cleaning pass for HTML fragments before they are
composed and printed. Templates escape their own data; this is for fragments
that embed markup from elsewhere (rich text fields, notes).
"""

import logging

import bleach
from bleach.css_sanitizer import CSSSanitizer


logger = logging.getLogger(__name__)


# Allowlist covering the markup used by document templates
ALLOWED_TAGS = [
    'p', 'br', 'strong', 'b', 'em', 'i', 'u', 's', 'small', 'a',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'blockquote', 'ol', 'ul', 'li', 'pre', 'code',
    'span', 'div', 'section', 'header', 'footer',
    'table', 'thead', 'tbody', 'tfoot', 'tr', 'th', 'td',
    'img', 'hr',
]

ALLOWED_ATTRIBUTES = {
    '*': ['class', 'id', 'style'],
    'a': ['href', 'title', 'target'],
    'img': ['src', 'alt', 'title', 'width', 'height'],
    'table': ['border', 'cellpadding', 'cellspacing'],
    'td': ['colspan', 'rowspan'],
    'th': ['colspan', 'rowspan'],
}

ALLOWED_PROTOCOLS = ['http', 'https', 'mailto', 'data']

ALLOWED_CSS_PROPERTIES = [
    'color', 'background', 'background-color', 'font-family', 'font-size',
    'font-weight', 'font-style', 'line-height', 'letter-spacing',
    'text-align', 'text-decoration', 'text-transform',
    'margin', 'margin-top', 'margin-right', 'margin-bottom', 'margin-left',
    'padding', 'padding-top', 'padding-right', 'padding-bottom', 'padding-left',
    'border', 'border-top', 'border-bottom', 'border-collapse', 'border-radius',
    'width', 'display', 'justify-content', 'align-items', 'gap',
]


def sanitize_html(html: str, *, strict: bool = False) -> str:
    """
    Sanitize an HTML fragment before printing.

    Disallowed tags are stripped (their text is kept).

    Args:
        html: HTML fragment to sanitize
        strict: If True, drop all inline styles

    Returns:
        Sanitized HTML string
    """
    attrs = ALLOWED_ATTRIBUTES.copy()

    css_sanitizer = None
    if not strict:
        css_sanitizer = CSSSanitizer(allowed_css_properties=ALLOWED_CSS_PROPERTIES)
    else:
        # Remove style attribute in strict mode
        attrs['*'] = [a for a in attrs.get('*', []) if a != 'style']

    clean_html = bleach.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=attrs,
        protocols=ALLOWED_PROTOCOLS,
        css_sanitizer=css_sanitizer,
        strip=True,
    )

    if clean_html != html:
        logger.debug("Sanitizer modified HTML fragment")
    return clean_html
