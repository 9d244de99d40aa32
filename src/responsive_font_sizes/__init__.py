"""
responsive-font-sizes

Расчёт fluid-размеров шрифта: статический default и calc()-выражение
для экранов уже breakpoint.

    >>> from responsive_font_sizes import compute_responsive_font_size
    >>> compute_responsive_font_size("20px").responsive
    'calc(13.6px + 0.83333vmin)'
"""

from responsive_font_sizes.calculator import (
    ResponsiveFontSizeCalculator,
    compute_responsive_font_size,
)
from responsive_font_sizes.core.contracts import validate_rfs_result
from responsive_font_sizes.core.domain import (
    ResponsiveFontSizeError,
    RfsConfig,
    RfsError,
    RfsErrorKind,
    RfsResult,
    RfsSizes,
    ViewportUnit,
    unwrap,
)

__version__ = "1.0.0"

__all__ = [
    # Calculator
    "ResponsiveFontSizeCalculator",
    "compute_responsive_font_size",
    # Config
    "RfsConfig",
    "ViewportUnit",
    # Result
    "RfsResult",
    "RfsSizes",
    "RfsError",
    "RfsErrorKind",
    "ResponsiveFontSizeError",
    "unwrap",
    # Contracts
    "validate_rfs_result",
]
