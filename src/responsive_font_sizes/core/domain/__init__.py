"""
Domain models and value objects.

Contains CSS units, RfsConfig and the RfsResult variants.
"""

from responsive_font_sizes.core.domain.config import RfsConfig
from responsive_font_sizes.core.domain.result import (
    ResponsiveFontSizeError,
    RfsError,
    RfsErrorKind,
    RfsResult,
    RfsSizes,
    unwrap,
)
from responsive_font_sizes.core.domain.units import (
    DEFAULT_BREAKPOINT,
    DEFAULT_FACTOR,
    DEFAULT_MINIMUM_FONT_SIZE,
    IMPORTANT_SUFFIX,
    PX,
    REM,
    VARIABLE_WIDTH_PRECISION,
    ViewportUnit,
    as_css_text,
    important_suffix,
    px,
    strip_px,
    viewport_unit,
)

__all__ = [
    # Units module
    "PX",
    "REM",
    "IMPORTANT_SUFFIX",
    "DEFAULT_FACTOR",
    "DEFAULT_MINIMUM_FONT_SIZE",
    "DEFAULT_BREAKPOINT",
    "VARIABLE_WIDTH_PRECISION",
    "ViewportUnit",
    "as_css_text",
    "important_suffix",
    "px",
    "strip_px",
    "viewport_unit",
    # Config
    "RfsConfig",
    # Result
    "RfsResult",
    "RfsSizes",
    "RfsError",
    "RfsErrorKind",
    "ResponsiveFontSizeError",
    "unwrap",
]
