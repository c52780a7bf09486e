"""
Data Transfer Objects for the Printing Framework
"""

import base64
import logging
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ('buffer', 'blob', 'base64', 'save')
DEFAULT_FILENAME = 'document.pdf'


@dataclass
class RenderOptions:
    """
    Caller options for a render call.

    Attributes:
        format: Output representation ('buffer', 'blob', 'base64' or 'save').
            None selects the backend default.
        filename: Target path for 'save'
        server: Prefer the browser-print backend when the template supports it
        sanitize: Sanitize the composed HTML fragment before printing
    """

    format: Optional[str] = None
    filename: Optional[str] = None
    server: bool = False
    sanitize: bool = False

    def __post_init__(self):
        if self.format is not None and self.format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format '{self.format}' "
                f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
            )


@dataclass
class RenderResult:
    """
    Result of a render operation.

    Exactly one of buffer, blob or base64 is populated, except for 'save'
    where the document was written to ``filename`` and no payload is kept.
    """

    pages: int
    buffer: Optional[bytes] = None
    blob: Optional[BytesIO] = None
    base64: Optional[str] = None
    filename: Optional[str] = None
    content_type: str = "application/pdf"

    @property
    def pdf_bytes(self) -> Optional[bytes]:
        """Return the PDF bytes regardless of representation (None after 'save')"""
        if self.buffer is not None:
            return self.buffer
        if self.blob is not None:
            return self.blob.getvalue()
        if self.base64 is not None:
            return base64.b64decode(self.base64)
        return None

    def __len__(self) -> int:
        """Return the size of PDF in bytes"""
        pdf_bytes = self.pdf_bytes
        return len(pdf_bytes) if pdf_bytes is not None else 0


def build_result(
    pdf_bytes: bytes,
    pages: int,
    options: Optional[RenderOptions],
    *,
    default_format: str,
    allow_save: bool,
) -> RenderResult:
    """
    Package rendered PDF bytes in the representation the caller asked for.

    Args:
        pdf_bytes: Serialized PDF
        pages: Page count to report
        options: Caller options (may be None)
        default_format: Format used when the caller did not pick one
        allow_save: Whether the backend supports writing to disk

    Returns:
        RenderResult with exactly one payload populated (none for 'save')
    """
    output_format = (options.format if options else None) or default_format

    if output_format == 'save' and not allow_save:
        logger.warning("Output format 'save' is not supported by this backend, returning a buffer")
        output_format = 'buffer'

    if output_format == 'save':
        filename = (options.filename if options else None) or DEFAULT_FILENAME
        Path(filename).write_bytes(pdf_bytes)
        logger.info(f"Saved PDF to {filename} ({len(pdf_bytes)} bytes, {pages} pages)")
        return RenderResult(pages=pages, filename=filename)

    if output_format == 'base64':
        encoded = base64.b64encode(pdf_bytes).decode('ascii')
        return RenderResult(pages=pages, base64=encoded)

    if output_format == 'blob':
        return RenderResult(pages=pages, blob=BytesIO(pdf_bytes))

    return RenderResult(pages=pages, buffer=pdf_bytes)
