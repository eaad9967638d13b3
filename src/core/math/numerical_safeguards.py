"""
Numerical Safeguards — проверки float для геометрических вычислений

Модуль содержит минимальный набор примитивов, на которые опираются
numeric_types, sqrt_strategies и geometry:
- Проверка валидности float (NaN/Inf)
- Сравнение с нулём с учётом толерантности
- Валидация аргументов (ValueError)

ИНВАРИАНТЫ:
1. NaN/Inf не проходят валидацию аргументов
2. Все сравнения детерминированы
"""

import math


# =============================================================================
# NaN/Inf
# =============================================================================


def is_valid_float(value: float) -> bool:
    """Проверка, что значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def is_zero(value: float, tol: float = 0.0) -> bool:
    """
    Проверка близости к нулю.

    По умолчанию tol=0.0, т.е. точное сравнение: вырожденный треугольник
    определяется строго по area == 0.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (>= 0)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
