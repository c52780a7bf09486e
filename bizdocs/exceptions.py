"""
Render-layer exceptions for consistent error handling across bizdocs.

These exceptions provide a consistent way to surface rendering and template
lookup failures to callers.
"""


class RenderError(Exception):
    """Base exception for all rendering errors."""
    pass


class BrowserRenderError(RenderError):
    """
    Raised when the browser-print backend fails.

    Covers browser launch, content loading, font waits and the print call.
    The browser session has already been closed when this is raised; the
    original exception is available as ``__cause__``.
    """
    pass


class TemplateNotFound(RenderError, KeyError):
    """
    Raised when a template identifier is not registered.

    Subclasses KeyError so registry lookups behave like mapping lookups.
    """

    def __str__(self):
        # KeyError.__str__ would wrap the message in quotes
        return str(self.args[0]) if self.args else ''
