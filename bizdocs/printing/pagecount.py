"""
Page count estimation for printed PDFs.

Counts page objects by scanning the raw bytes instead of parsing the PDF.
This is a best-effort estimate: compressed object streams can hide the
markers, in which case the count falls back to 1.
"""

import re


# "/Type /Page" not followed by "s" (which would be the /Pages tree node)
PAGE_MARKER = re.compile(r'/Type\s*/Page[^s]')


def estimate_page_count(pdf_bytes: bytes) -> int:
    """
    Estimate the number of pages in a PDF byte stream.

    Args:
        pdf_bytes: Raw PDF content

    Returns:
        Number of page object markers found, or 1 when there are none
    """
    content = pdf_bytes.decode('latin-1')
    matches = PAGE_MARKER.findall(content)
    return len(matches) if matches else 1
