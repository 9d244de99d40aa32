"""Responsive Font Size Calculator

Вычисляет пару размеров шрифта:
- default: статический размер (``20px``)
- responsive: fluid-размер для экранов уже breakpoint
  (``calc(13.6px + 0.83333vmin)``)

Порядок проверок:
1. Непрозрачные значения (inherit, 1.5em, 2rem, 0) → возвращаются как есть
2. Размер <= минимального → статический размер без масштабирования
3. Валидация factor (>= 1)
4. factor == 1 → статический размер
5. Fluid-размер:
       fs_min = minimum + (font_size - minimum) / factor
       fs_diff = font_size - fs_min
       width = round(fs_diff * 100 / breakpoint, 5)
       responsive = calc(<fs_min>px + <width>vmin|vw)

Factor не проверяется, если сработал шаг 2: размер на минимуме или ниже
не масштабируется при любом factor.

Ошибки конфигурации возвращаются как RfsError, исключения не бросаются.
"""

import logging

from responsive_font_sizes.core.domain.config import RfsConfig
from responsive_font_sizes.core.domain.result import (
    RfsError,
    RfsErrorKind,
    RfsResult,
    RfsSizes,
)
from responsive_font_sizes.core.domain.units import (
    DEFAULT_BREAKPOINT,
    DEFAULT_FACTOR,
    DEFAULT_MINIMUM_FONT_SIZE,
    PX,
    REM,
    VARIABLE_WIDTH_PRECISION,
    as_css_text,
    important_suffix,
    px,
    strip_px,
    viewport_unit,
)
from responsive_font_sizes.core.math.numerical_safeguards import (
    format_number,
    is_numeric,
    is_valid_float,
    is_zero,
    parse_numeric,
    round_half_away_from_zero,
)

logger = logging.getLogger(__name__)


class ResponsiveFontSizeCalculator:
    """Калькулятор responsive font size.

    Stateless: конфигурация неизменяема, compute() не имеет побочных эффектов
    и может вызываться конкурентно.
    """

    def __init__(self, config: RfsConfig | None = None):
        """Инициализация калькулятора.

        Args:
            config: параметры масштабирования (опционально, используется default)
        """
        self.config = config or RfsConfig()

    def compute(self, font_size: str | int | float) -> RfsResult:
        """Расчёт пары default/responsive для одного размера шрифта.

        Args:
            font_size: размер шрифта (``"20px"``, ``20``, ``"inherit"``, ...)

        Returns:
            RfsSizes с парой размеров или RfsError при неверной конфигурации
        """
        config = self.config
        suffix = important_suffix(config.important)

        font_size_text = strip_px(font_size)
        minimum_text = strip_px(config.minimum_font_size)

        # 1. Непрозрачные значения: не число, другая единица или ноль
        if (
            not is_numeric(font_size_text)
            or PX in font_size_text
            or REM in font_size_text
            or is_zero(parse_numeric(font_size_text))
        ):
            logger.debug("Font size %r is opaque, passing through", font_size_text)
            value = f"{font_size_text}{suffix}"
            return RfsSizes(default=value, responsive=value)

        if not is_numeric(minimum_text):
            return self._error(
                RfsErrorKind.INVALID_MINIMUM_FONT_SIZE,
                minimum_text,
                f"{minimum_text} is not a valid minimum font size, "
                f"it must be a number or a px length.",
            )

        size = parse_numeric(font_size_text, "font_size")
        minimum = parse_numeric(minimum_text, "minimum_font_size")

        # 2. На минимуме или ниже: масштабировать некуда
        if size <= minimum:
            logger.debug("Font size %s <= minimum %s, no rescaling", size, minimum)
            value = f"{px(font_size_text)}{suffix}"
            return RfsSizes(default=value, responsive=value)

        # 3. Валидация factor
        if not is_numeric(config.factor) or parse_numeric(config.factor) < 1:
            factor_text = as_css_text(config.factor)
            return self._error(
                RfsErrorKind.INVALID_FACTOR,
                factor_text,
                f"{factor_text} is not a valid factor, it must be greater or equal to 1.",
            )

        factor = parse_numeric(config.factor, "factor")
        rfs_static = f"{px(font_size_text)}{suffix}"
        rfs_fluid: str | None = None

        # 4. factor == 1 отключает fluid-масштабирование
        if size > minimum and factor != 1:
            breakpoint_text = strip_px(config.breakpoint)
            if not is_numeric(breakpoint_text) or parse_numeric(breakpoint_text) <= 0:
                return self._error(
                    RfsErrorKind.INVALID_BREAKPOINT,
                    breakpoint_text,
                    f"{breakpoint_text} is not a valid breakpoint, "
                    f"it must be a positive number or px length.",
                )

            rfs_fluid = self._fluid_size(
                size=size,
                minimum=minimum,
                factor=factor,
                breakpoint=parse_numeric(breakpoint_text, "breakpoint"),
                suffix=suffix,
            )

        if rfs_fluid is None:
            return RfsSizes(default=rfs_static, responsive=rfs_static)
        return RfsSizes(default=rfs_static, responsive=rfs_fluid)

    def _fluid_size(
        self,
        size: float,
        minimum: float,
        factor: float,
        breakpoint: float,
        suffix: str,
    ) -> str | None:
        """Fluid-размер ``calc(<fs_min>px + <width><unit>)``.

        None, если fs_min или коэффициент не помещаются в float
        (переполнение до inf): тогда используется статический размер.
        """
        # Размер, до которого шрифт уменьшается на самом узком экране
        fs_min = minimum + (size - minimum) / factor

        # Диапазон, распределяемый по ширине 0..breakpoint
        fs_diff = size - fs_min

        unit = viewport_unit(self.config.two_dimensional)
        width = fs_diff * 100 / breakpoint
        if not (is_valid_float(fs_min) and is_valid_float(width)):
            logger.debug(
                "Fluid font size overflows float (fs_min=%s width=%s), using static size",
                fs_min,
                width,
            )
            return None

        variable_width = round_half_away_from_zero(width, VARIABLE_WIDTH_PRECISION)

        logger.debug(
            "Fluid font size: fs_min=%s fs_diff=%s width=%s%s",
            fs_min,
            fs_diff,
            variable_width,
            unit.value,
        )
        return f"calc({px(fs_min)} + {format_number(variable_width)}{unit.value}){suffix}"

    @staticmethod
    def _error(kind: RfsErrorKind, value: str, message: str) -> RfsError:
        logger.debug("Invalid configuration (%s): %s", kind.value, message)
        return RfsError(kind=kind, value=value, message=message)


def compute_responsive_font_size(
    font_size: str | int | float,
    factor: float | str = DEFAULT_FACTOR,
    important: bool = False,
    minimum_font_size: float | str = DEFAULT_MINIMUM_FONT_SIZE,
    breakpoint: float | str = DEFAULT_BREAKPOINT,
    two_dimensional: bool = True,
) -> RfsResult:
    """Расчёт responsive font size с параметрами по умолчанию.

    Args:
        font_size: размер шрифта (``"20px"``, ``20``, ``"inherit"``, ...)
        factor: сила масштабирования (>= 1, 1 отключает fluid-размер)
        important: добавлять ``!important``
        minimum_font_size: минимальный размер шрифта
        breakpoint: breakpoint ширины экрана
        two_dimensional: vmin вместо vw

    Returns:
        RfsSizes или RfsError

    Examples:
        >>> compute_responsive_font_size("20px")
        RfsSizes(default='20px', responsive='calc(13.6px + 0.83333vmin)')
        >>> compute_responsive_font_size("inherit")
        RfsSizes(default='inherit', responsive='inherit')
    """
    config = RfsConfig(
        factor=factor,
        important=important,
        minimum_font_size=minimum_font_size,
        breakpoint=breakpoint,
        two_dimensional=two_dimensional,
    )
    return ResponsiveFontSizeCalculator(config).compute(font_size)
