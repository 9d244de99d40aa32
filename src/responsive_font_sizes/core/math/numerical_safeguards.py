"""
Numerical Safeguards — числовые примитивы для CSS-значений

Модуль обеспечивает корректную работу с числами, приходящими в виде
строк из таблиц стилей:
- Детекция "числовых строк" (десятичная запись, знак, экспонента)
- Явный парсинг строк в float (никаких неявных строковых сравнений)
- Округление "half away from zero" до заданного числа знаков
- Форматирование float в CSS-совместимую запись (без экспоненты)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнения размеров выполняются только над float, не над строками
2. NaN/Inf никогда не считаются числом
3. Результат форматирования всегда валидное CSS-число (fixed-point)
4. Все операции детерминированы и воспроизводимы
"""

import math
import re
import sys
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Количество значащих цифр при выводе float (как у precision=14)
SIGNIFICANT_DIGITS: Final[int] = 14

# Абсолютная толерантность для проверки на ноль
EPS_ZERO: Final[float] = 0.0

# Наибольшее int, представимое как конечный float
_MAX_FLOAT_INT: Final[int] = int(sys.float_info.max)

# Десятичная запись: знак, целая/дробная часть, опциональная экспонента
_NUMERIC_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
)


# =============================================================================
# ДЕТЕКЦИЯ И ПАРСИНГ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_numeric(value: object) -> bool:
    """
    Проверка, является ли значение числом или числовой строкой.

    Строка считается числовой, если после обрезки пробелов она целиком
    совпадает с десятичной записью: ``12``, ``-1.5``, ``.5``, ``1e3``.
    bool не считается числом.

    Args:
        value: Проверяемое значение (str, int, float, ...)

    Returns:
        True если значение можно безопасно привести к конечному float

    Examples:
        >>> is_numeric("12")
        True
        >>> is_numeric(" 1.5 ")
        True
        >>> is_numeric("1.5em")
        False
        >>> is_numeric("inherit")
        False
        >>> is_numeric(float("nan"))
        False
    """
    if isinstance(value, bool):
        return False

    if isinstance(value, int):
        return abs(value) <= _MAX_FLOAT_INT

    if isinstance(value, float):
        return is_valid_float(value)

    if isinstance(value, str):
        if _NUMERIC_RE.fullmatch(value.strip()) is None:
            return False
        return is_valid_float(float(value))

    return False


def parse_numeric(value: object, name: str = "value") -> float:
    """
    Явное приведение числа или числовой строки к float.

    Args:
        value: Исходное значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Значение как float

    Raises:
        ValueError: Если значение не является числом

    Examples:
        >>> parse_numeric("768")
        768.0
        >>> parse_numeric(" -2.5 ")
        -2.5
    """
    if not is_numeric(value):
        raise ValueError(f"{name} must be numeric, got {value!r}")

    if isinstance(value, str):
        return float(value.strip())
    return float(value)


def is_zero(value: float, tol: float = EPS_ZERO) -> bool:
    """
    Проверка, равно ли значение нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: точное сравнение)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away_from_zero(value: float, digits: int) -> float:
    """
    Округление до ``digits`` знаков после запятой, половина от нуля.

    Округляется кратчайшее десятичное представление float (``repr``),
    поэтому 2.675 → 2.68, как записано, а не 2.67 как в built-in round().

    Args:
        value: Значение для округления
        digits: Количество знаков после запятой (>= 0)

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если digits < 0 или value NaN/Inf

    Examples:
        >>> round_half_away_from_zero(0.8333333333, 5)
        0.83333
        >>> round_half_away_from_zero(2.675, 2)
        2.68
        >>> round_half_away_from_zero(-0.000005, 5)
        -1e-05
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")

    if not is_valid_float(value):
        raise ValueError(f"Cannot round NaN/Inf: {value}")

    exact = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-digits)

    # Точность контекста должна вмещать все цифры результата quantize
    with localcontext() as ctx:
        ctx.prec = max(exact.adjusted(), 0) + digits + 2
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_number(value: float, significant_digits: int = SIGNIFICANT_DIGITS) -> str:
    """
    Форматирование числа для вставки в CSS.

    - Не более ``significant_digits`` значащих цифр
    - Всегда fixed-point (CSS не принимает ``1e-05``)
    - Без хвостовых нулей и точки: 20.0 → ``20``, 13.60 → ``13.6``
    - ``-0`` выводится как ``0``

    Args:
        value: Число для форматирования
        significant_digits: Максимум значащих цифр

    Returns:
        Строковое представление числа

    Raises:
        ValueError: Если value NaN/Inf

    Examples:
        >>> format_number(13.6)
        '13.6'
        >>> format_number(20.0)
        '20'
        >>> format_number(13.666666666666666)
        '13.666666666667'
        >>> format_number(1e-05)
        '0.00001'
    """
    if not is_valid_float(value):
        raise ValueError(f"Cannot format NaN/Inf: {value}")

    text = format(Decimal(f"{value:.{significant_digits}g}"), "f")

    if "." in text:
        text = text.rstrip("0").rstrip(".")

    if text == "-0":
        return "0"
    return text
