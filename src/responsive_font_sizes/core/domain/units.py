"""
CSS Units — единицы длины и параметры по умолчанию

Единственный допустимый способ:
- снять суффикс ``px`` со значения
- привести число/строку к тексту для вывода в CSS
- выбрать viewport-единицу для fluid-размера

Поддерживаются только ``px`` и "голые" числа. Остальные единицы
(em, rem, %, ключевые слова) считаются непрозрачными и не конвертируются.
"""

from enum import Enum
from typing import Final

from responsive_font_sizes.core.math.numerical_safeguards import (
    format_number,
    is_valid_float,
)


# =============================================================================
# ЕДИНИЦЫ
# =============================================================================

PX: Final[str] = "px"
REM: Final[str] = "rem"

# Суффикс для пометки декларации как !important
IMPORTANT_SUFFIX: Final[str] = " !important"


class ViewportUnit(str, Enum):
    """Viewport-единица для fluid-части размера"""

    VMIN = "vmin"  # меньшая сторона экрана (не меняется при повороте)
    VW = "vw"  # ширина экрана


# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Сила масштабирования: чем больше, тем меньше разница размеров на малых экранах
DEFAULT_FACTOR: Final[float] = 5

# Ниже этого размера fluid-масштабирование не применяется
DEFAULT_MINIMUM_FONT_SIZE: Final[str] = "12px"

# Ширина экрана, ниже которой размер начинает уменьшаться
DEFAULT_BREAKPOINT: Final[str] = "768px"

# Знаков после запятой в коэффициенте viewport-единицы
VARIABLE_WIDTH_PRECISION: Final[int] = 5


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def as_css_text(value: str | int | float) -> str:
    """
    Приведение значения к тексту в том виде, в котором оно уйдёт в CSS.

    Args:
        value: Строка или число

    Returns:
        Строка без окружающих пробелов; float без хвостового ``.0``

    Examples:
        >>> as_css_text(" 20px ")
        '20px'
        >>> as_css_text(20.0)
        '20'
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, int) or not is_valid_float(value):
        return str(value)
    return format_number(value)


def strip_px(value: str | int | float) -> str:
    """
    Удаление всех вхождений ``px`` из значения.

    Это простое удаление подстроки, а не разбор CSS-длины:
    ``20px`` → ``20``, ``1.5em`` → ``1.5em``, ``inherit`` → ``inherit``.

    Args:
        value: Исходное значение

    Returns:
        Текст без ``px``
    """
    return as_css_text(value).replace(PX, "")


def px(value: str | int | float) -> str:
    """
    Добавление суффикса ``px``.

    Args:
        value: Число или числовой текст

    Returns:
        Например ``13.6px``
    """
    if isinstance(value, str):
        return f"{value}{PX}"
    return f"{format_number(value)}{PX}"


def viewport_unit(two_dimensional: bool) -> ViewportUnit:
    """
    Выбор viewport-единицы.

    Args:
        two_dimensional: Учитывать меньшую сторону экрана (vmin) вместо ширины (vw)

    Returns:
        ViewportUnit.VMIN или ViewportUnit.VW
    """
    return ViewportUnit.VMIN if two_dimensional else ViewportUnit.VW


def important_suffix(important: bool) -> str:
    """Суффикс ``!important`` или пустая строка."""
    return IMPORTANT_SUFFIX if important else ""
