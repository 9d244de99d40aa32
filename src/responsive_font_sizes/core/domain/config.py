"""
RfsConfig — конфигурация расчёта responsive font size

Immutable Pydantic модель с параметрами масштабирования.

Числовые параметры принимают как числа, так и строки (``"12px"``, ``"768"``):
проверка значений выполняется калькулятором, который возвращает ошибку
как значение (RfsError), а не бросает ValidationError. ValidationError
возникает только при неверном типе (``factor=None``, ``factor=True``):
bool не считается числом.
"""

from pydantic import BaseModel, Field, StrictFloat, StrictInt

from responsive_font_sizes.core.domain.units import (
    DEFAULT_BREAKPOINT,
    DEFAULT_FACTOR,
    DEFAULT_MINIMUM_FONT_SIZE,
)


class RfsConfig(BaseModel):
    """
    Параметры fluid-масштабирования шрифта.

    - factor: сила масштабирования (>= 1, 1 отключает fluid-размер)
    - important: добавлять ``!important`` ко всем значениям
    - minimum_font_size: размер, ниже которого шрифт не уменьшается
    - breakpoint: ширина экрана, до которой действует fluid-размер
    - two_dimensional: vmin вместо vw
    """

    factor: StrictFloat | StrictInt | str = Field(
        DEFAULT_FACTOR,
        description="Сила масштабирования (>= 1). 1 отключает fluid-размер",
    )
    important: bool = Field(False, description="Помечать значения как !important")
    minimum_font_size: StrictFloat | StrictInt | str = Field(
        DEFAULT_MINIMUM_FONT_SIZE,
        description="Минимальный размер шрифта (px или число)",
    )
    breakpoint: StrictFloat | StrictInt | str = Field(
        DEFAULT_BREAKPOINT,
        description="Breakpoint ширины экрана (px или число)",
    )
    two_dimensional: bool = Field(
        True,
        description="Масштабировать по меньшей стороне экрана (vmin) вместо ширины (vw)",
    )

    model_config = {"frozen": True}
