"""
RfsResult — результат расчёта responsive font size

Tagged variant: либо пара размеров (RfsSizes), либо ошибка (RfsError).
Варианты взаимоисключающие: вызывающий код обязан обработать оба.

Сериализация (to_dict) даёт форму контракта rfs_result:
- {"default": "...", "responsive": "..."}
- {"error": "..."}
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias


# =============================================================================
# ENUMS
# =============================================================================


class RfsErrorKind(str, Enum):
    """Вид ошибки конфигурации"""

    INVALID_FACTOR = "invalid_factor"
    INVALID_MINIMUM_FONT_SIZE = "invalid_minimum_font_size"
    INVALID_BREAKPOINT = "invalid_breakpoint"


# =============================================================================
# VARIANTS
# =============================================================================


@dataclass(frozen=True)
class RfsSizes:
    """Пара размеров: статический default и fluid responsive."""

    default: str
    responsive: str

    ok: ClassVar[bool] = True

    @property
    def is_fluid(self) -> bool:
        """True если responsive отличается от default (calc-выражение)."""
        return self.responsive != self.default

    def to_dict(self) -> dict[str, str]:
        return {"default": self.default, "responsive": self.responsive}


@dataclass(frozen=True)
class RfsError:
    """Ошибка конфигурации: вид, исходное значение и сообщение."""

    kind: RfsErrorKind
    value: str
    message: str

    ok: ClassVar[bool] = False

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}


RfsResult: TypeAlias = RfsSizes | RfsError


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ResponsiveFontSizeError(ValueError):
    """
    Ошибка расчёта для вызывающего кода, предпочитающего исключения.

    Оборачивает RfsError, возвращённый калькулятором.
    """

    def __init__(self, error: RfsError):
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> RfsErrorKind:
        return self.error.kind


def unwrap(result: RfsResult) -> RfsSizes:
    """
    Извлечение пары размеров из результата.

    Args:
        result: Результат compute_responsive_font_size

    Returns:
        RfsSizes

    Raises:
        ResponsiveFontSizeError: Если результат является RfsError
    """
    if isinstance(result, RfsError):
        raise ResponsiveFontSizeError(result)
    return result
