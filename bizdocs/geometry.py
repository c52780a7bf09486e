"""
Page Geometry

Resolves partial page configuration (size, orientation, margins, palette,
fonts) into a fully populated configuration shared by both rendering backends.
All lengths are in inches.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Optional, Union


# Page dimensions in inches (portrait)
PAGE_SIZES = {
    'letter': (8.5, 11.0),
    'a4': (8.27, 11.69),
    'legal': (8.5, 14.0),
}

ORIENTATIONS = ('portrait', 'landscape')


@dataclass(frozen=True)
class Margins:
    """Page margins in inches."""
    top: float = 0.5
    right: float = 0.5
    bottom: float = 0.5
    left: float = 0.5


@dataclass(frozen=True)
class Palette:
    """Brand colors as hex strings."""
    primary: str = '#0066FF'
    text: str = '#1a1a1a'
    text_light: str = '#6b7280'
    border: str = '#e5e7eb'
    background: str = '#f9fafb'


@dataclass(frozen=True)
class FontSet:
    """Font family names for the three logical roles."""
    heading: str = 'Helvetica'
    body: str = 'Helvetica'
    mono: str = 'Courier'


@dataclass
class PdfConfig:
    """
    Partial page configuration.

    Every field is optional; unset fields are filled in by resolve_config().
    """
    page_size: Optional[str] = None
    orientation: Optional[str] = None
    margins: Optional[Margins] = None
    colors: Optional[Palette] = None
    fonts: Optional[FontSet] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'PdfConfig':
        """
        Build a partial configuration from a plain dict.

        Nested margins/colors/fonts may be given as dicts or as the
        corresponding dataclasses.
        """
        return cls(
            page_size=data.get('page_size'),
            orientation=data.get('orientation'),
            margins=_coerce(Margins, data.get('margins')),
            colors=_coerce(Palette, data.get('colors')),
            fonts=_coerce(FontSet, data.get('fonts')),
        )


@dataclass(frozen=True)
class ResolvedConfig:
    """Fully populated configuration with derived page and content area."""
    page_size: str = 'letter'
    orientation: str = 'portrait'
    margins: Margins = field(default_factory=Margins)
    colors: Palette = field(default_factory=Palette)
    fonts: FontSet = field(default_factory=FontSet)

    @property
    def page_width(self) -> float:
        width, height = PAGE_SIZES[self.page_size]
        return height if self.orientation == 'landscape' else width

    @property
    def page_height(self) -> float:
        width, height = PAGE_SIZES[self.page_size]
        return width if self.orientation == 'landscape' else height

    @property
    def content_width(self) -> float:
        return self.page_width - self.margins.left - self.margins.right

    @property
    def content_height(self) -> float:
        return self.page_height - self.margins.top - self.margins.bottom


ConfigLike = Union[None, dict, PdfConfig, ResolvedConfig]


def _coerce(cls, value):
    if value is None or isinstance(value, cls):
        return value
    return cls(**value)


def _as_partial(config: ConfigLike) -> PdfConfig:
    if config is None:
        return PdfConfig()
    if isinstance(config, PdfConfig):
        return config
    if isinstance(config, ResolvedConfig):
        return PdfConfig(**{f.name: getattr(config, f.name) for f in fields(PdfConfig)})
    return PdfConfig.from_dict(config)


def merge_configs(*configs: ConfigLike) -> PdfConfig:
    """
    Overlay partial configurations field by field.

    Later configurations win for every field they set.

    Args:
        *configs: Partial configurations (dicts, PdfConfig or ResolvedConfig)

    Returns:
        Merged PdfConfig (still partial)
    """
    merged = PdfConfig()
    for config in configs:
        partial = _as_partial(config)
        overrides = {
            f.name: getattr(partial, f.name)
            for f in fields(PdfConfig)
            if getattr(partial, f.name) is not None
        }
        merged = replace(merged, **overrides)
    return merged


def resolve_config(config: ConfigLike = None) -> ResolvedConfig:
    """
    Resolve a partial configuration against the defaults.

    Args:
        config: Partial configuration, dict, or an already resolved config

    Returns:
        ResolvedConfig with every field populated

    Raises:
        ValueError: If the page size or orientation is unknown, or the
            margins leave no content area
    """
    if isinstance(config, ResolvedConfig):
        return config

    partial = _as_partial(config)
    defaults = ResolvedConfig()
    resolved = ResolvedConfig(
        page_size=(partial.page_size or defaults.page_size).lower(),
        orientation=(partial.orientation or defaults.orientation).lower(),
        margins=partial.margins or defaults.margins,
        colors=partial.colors or defaults.colors,
        fonts=partial.fonts or defaults.fonts,
    )

    if resolved.page_size not in PAGE_SIZES:
        raise ValueError(
            f"Unknown page size '{resolved.page_size}' "
            f"(expected one of: {', '.join(PAGE_SIZES)})"
        )
    if resolved.orientation not in ORIENTATIONS:
        raise ValueError(f"Unknown orientation '{resolved.orientation}'")
    if resolved.content_width <= 0 or resolved.content_height <= 0:
        raise ValueError("Margins leave no content area on the page")

    return resolved
