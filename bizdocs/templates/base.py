"""
Shared helpers for the built-in document templates.
"""

from pathlib import Path

from bizdocs.printing.compositor import render_template


HTML_TEMPLATE_DIR = str(Path(__file__).resolve().parent / 'html')


def render_html(template_name: str, context: dict) -> str:
    """Render one of the built-in HTML fragment templates"""
    return render_template(template_name, context, HTML_TEMPLATE_DIR)
