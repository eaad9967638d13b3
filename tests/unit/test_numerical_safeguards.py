"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf проверки
2. Сравнение с нулём с толерантностью
3. Валидацию параметров
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    is_valid_float,
    is_zero,
    validate_finite,
    validate_non_negative,
)

# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(1e308)

    def test_nan_and_inf_invalid(self) -> None:
        """NaN и ±Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


# =============================================================================
# ТЕСТЫ СРАВНЕНИЙ
# =============================================================================


class TestIsZero:
    """Тесты для is_zero"""

    def test_exact_by_default(self) -> None:
        """По умолчанию сравнение точное"""
        assert is_zero(0.0)
        assert is_zero(-0.0)
        assert not is_zero(1e-300)

    def test_with_tolerance(self) -> None:
        """С толерантностью малые значения считаются нулём"""
        assert is_zero(1e-13, tol=1e-12)
        assert is_zero(-1e-13, tol=1e-12)
        assert not is_zero(1e-11, tol=1e-12)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты для validate_finite / validate_non_negative"""

    def test_validate_finite(self) -> None:
        """NaN/Inf отклоняются"""
        validate_finite(1.0, "value")
        with pytest.raises(ValueError, match="must be a valid float"):
            validate_finite(math.nan, "value")

    def test_validate_non_negative_accepts(self) -> None:
        """0 и положительные значения проходят"""
        validate_non_negative(0.0, "value")
        validate_non_negative(10.0, "value")

    def test_validate_non_negative_rejects_negative(self) -> None:
        """Отрицательное значение → ValueError с именем параметра"""
        with pytest.raises(ValueError, match="tolerance must be non-negative"):
            validate_non_negative(-1e-9, "tolerance")

    def test_validate_non_negative_rejects_inf(self) -> None:
        """Inf → ValueError"""
        with pytest.raises(ValueError, match="must be a valid float"):
            validate_non_negative(math.inf, "value")
