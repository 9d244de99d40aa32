"""
Tests for RfsResult variants and JSON Schema contracts

Покрывает:
- RfsSizes / RfsError: immutability, ok-флаг, is_fluid
- unwrap и ResponsiveFontSizeError
- Сериализация to_dict
- Валидация rfs_result.json (корректные и некорректные данные)
- SchemaLoader: кэш, отсутствующие и невалидные схемы
"""

import dataclasses
import json

import pytest
from jsonschema import ValidationError

from responsive_font_sizes import (
    ResponsiveFontSizeError,
    RfsError,
    RfsErrorKind,
    RfsSizes,
    compute_responsive_font_size,
    unwrap,
    validate_rfs_result,
)
from responsive_font_sizes.core.contracts import SchemaLoader


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def fluid_sizes():
    return RfsSizes(default="20px", responsive="calc(13.6px + 0.83333vmin)")


@pytest.fixture
def factor_error():
    return RfsError(
        kind=RfsErrorKind.INVALID_FACTOR,
        value="0.5",
        message="0.5 is not a valid factor, it must be greater or equal to 1.",
    )


# =============================================================================
# RESULT VARIANTS
# =============================================================================


class TestRfsSizes:
    """Тесты для RfsSizes"""

    def test_ok_flag(self, fluid_sizes) -> None:
        assert fluid_sizes.ok is True

    def test_is_fluid(self, fluid_sizes) -> None:
        assert fluid_sizes.is_fluid is True
        assert RfsSizes(default="20px", responsive="20px").is_fluid is False

    def test_frozen(self, fluid_sizes) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            fluid_sizes.default = "10px"

    def test_to_dict(self, fluid_sizes) -> None:
        assert fluid_sizes.to_dict() == {
            "default": "20px",
            "responsive": "calc(13.6px + 0.83333vmin)",
        }


class TestRfsError:
    """Тесты для RfsError"""

    def test_ok_flag(self, factor_error) -> None:
        assert factor_error.ok is False

    def test_to_dict(self, factor_error) -> None:
        assert factor_error.to_dict() == {
            "error": "0.5 is not a valid factor, it must be greater or equal to 1."
        }

    def test_kind_is_string_enum(self, factor_error) -> None:
        assert factor_error.kind == "invalid_factor"


class TestUnwrap:
    """Тесты для unwrap"""

    def test_unwrap_sizes(self, fluid_sizes) -> None:
        assert unwrap(fluid_sizes) is fluid_sizes

    def test_unwrap_error_raises(self, factor_error) -> None:
        with pytest.raises(ResponsiveFontSizeError, match="is not a valid factor") as exc_info:
            unwrap(factor_error)

        assert exc_info.value.error is factor_error
        assert exc_info.value.kind == RfsErrorKind.INVALID_FACTOR

    def test_error_is_value_error(self, factor_error) -> None:
        """Вызывающий код может ловить ValueError"""
        with pytest.raises(ValueError):
            unwrap(factor_error)

    def test_unwrap_computed(self) -> None:
        sizes = unwrap(compute_responsive_font_size("20px", important=True))

        assert sizes.default == "20px !important"


# =============================================================================
# CONTRACT VALIDATION
# =============================================================================


class TestRfsResultContract:
    """Валидация rfs_result.json"""

    def test_sizes_valid(self, fluid_sizes) -> None:
        validate_rfs_result(fluid_sizes.to_dict())

    def test_error_valid(self, factor_error) -> None:
        validate_rfs_result(factor_error.to_dict())

    @pytest.mark.parametrize(
        "font_size, kwargs",
        [
            ("inherit", {}),
            ("0", {}),
            ("10px", {}),
            ("20px", {"important": True}),
            ("20px", {"factor": 0.5}),
            ("20px", {"breakpoint": "auto"}),
        ],
    )
    def test_computed_results_valid(self, font_size, kwargs) -> None:
        """Любой результат калькулятора соответствует контракту"""
        validate_rfs_result(compute_responsive_font_size(font_size, **kwargs).to_dict())

    def test_missing_responsive_invalid(self) -> None:
        with pytest.raises(ValidationError):
            validate_rfs_result({"default": "20px"})

    def test_sizes_and_error_together_invalid(self) -> None:
        """Варианты взаимоисключающие"""
        with pytest.raises(ValidationError):
            validate_rfs_result({"default": "20px", "responsive": "20px", "error": "x"})

    def test_empty_error_invalid(self) -> None:
        with pytest.raises(ValidationError):
            validate_rfs_result({"error": ""})

    def test_non_string_size_invalid(self) -> None:
        with pytest.raises(ValidationError):
            validate_rfs_result({"default": 20, "responsive": 20})


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()

        assert loader.load_schema("rfs_result") is loader.load_schema("rfs_result")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_missing_schema(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader(tmp_path).load_schema("rfs_result")

    def test_invalid_schema(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_custom_directory(self, tmp_path) -> None:
        (tmp_path / "size.json").write_text(json.dumps({"type": "string"}), encoding="utf-8")

        assert SchemaLoader(tmp_path).load_schema("size") == {"type": "string"}
