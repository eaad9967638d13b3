"""
Numeric Types — числовые представления компонент координаты

Coordinate параметризуется числовым представлением T (целочисленным или
с плавающей точкой). В Python T задаётся значением NumericType, которое
определяет правила конверсии каждой компоненты:

- Целочисленные типы: float усекается к нулю, затем значение
  заворачивается по модулю 2**bits (two's complement для signed)
- FLOAT32: округление до ближайшего IEEE-754 single, за пределами
  диапазона → ±inf
- FLOAT64: float(value), целые за пределами диапазона double → ±inf

ВАЖНО: тип по умолчанию UINT16. Для беззнаковых типов отрицательная
ветвь absolute() недостижима, а разности координат в LEGACY-арифметике
заворачиваются (0 - 3 → 65533).
"""

import math
import struct
from enum import Enum
from typing import Final, Union

from src.core.math.numerical_safeguards import validate_finite

Number = Union[int, float]


# =============================================================================
# ENUMS
# =============================================================================


class NumericType(str, Enum):
    """Числовое представление компонент координаты"""

    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def bits(self) -> int:
        """Разрядность представления"""
        return _BITS[self]

    @property
    def is_integral(self) -> bool:
        return self not in (NumericType.FLOAT32, NumericType.FLOAT64)

    @property
    def is_signed(self) -> bool:
        return not self.value.startswith("uint")

    @property
    def min_value(self) -> Number:
        """Минимальное конечное значение представления"""
        if not self.is_integral:
            return -_FLOAT_MAX[self]
        if self.is_signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> Number:
        """Максимальное конечное значение представления"""
        if not self.is_integral:
            return _FLOAT_MAX[self]
        if self.is_signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def convert(self, value: Number) -> Number:
        """
        Конверсия значения в данное представление.

        Args:
            value: int или float

        Returns:
            int для целочисленных типов, float для FLOAT32/FLOAT64

        Raises:
            ValueError: NaN/Inf в целочисленный тип

        Examples:
            >>> NumericType.UINT16.convert(-3)
            65533
            >>> NumericType.INT8.convert(200)
            -56
            >>> NumericType.INT16.convert(-2.9)
            -2
        """
        if self is NumericType.FLOAT64:
            try:
                return float(value)
            except OverflowError:
                return math.inf if value > 0 else -math.inf
        if self is NumericType.FLOAT32:
            return to_float32(value)

        if isinstance(value, float):
            validate_finite(value, f"{self.value} component")
            value = math.trunc(value)

        return wrap_integral(int(value), self.bits, self.is_signed)


_BITS: Final[dict[NumericType, int]] = {
    NumericType.INT8: 8,
    NumericType.UINT8: 8,
    NumericType.INT16: 16,
    NumericType.UINT16: 16,
    NumericType.INT32: 32,
    NumericType.UINT32: 32,
    NumericType.INT64: 64,
    NumericType.UINT64: 64,
    NumericType.FLOAT32: 32,
    NumericType.FLOAT64: 64,
}

# Максимальное конечное значение IEEE-754 single / double
FLOAT32_MAX: Final[float] = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]
FLOAT64_MAX: Final[float] = 1.7976931348623157e308

_FLOAT_MAX: Final[dict[NumericType, float]] = {
    NumericType.FLOAT32: FLOAT32_MAX,
    NumericType.FLOAT64: FLOAT64_MAX,
}

# Представление по умолчанию
DEFAULT_NUMERIC_TYPE: Final[NumericType] = NumericType.UINT16


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def wrap_integral(value: int, bits: int, signed: bool) -> int:
    """
    Заворачивание целого по модулю 2**bits.

    Examples:
        >>> wrap_integral(65536, 16, False)
        0
        >>> wrap_integral(128, 8, True)
        -128
    """
    mask = (1 << bits) - 1
    wrapped = value & mask
    if signed and wrapped >= (1 << (bits - 1)):
        wrapped -= 1 << bits
    return wrapped


def to_float32(value: Number) -> float:
    """
    Округление до IEEE-754 single precision.

    Значения за пределами диапазона single превращаются в ±inf,
    NaN сохраняется.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", float(value)))[0]
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю (семантика C).

    Python // округляет к -inf, поэтому -7 // 2 == -4, а trunc_div(-7, 2) == -3.

    Raises:
        ZeroDivisionError: denominator == 0
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def absolute(value: Number, numeric_type: NumericType = DEFAULT_NUMERIC_TYPE) -> Number:
    """
    Абсолютное значение в представлении numeric_type.

    value if value >= 0 else -value, результат конвертируется в T.

    Для беззнаковых типов отрицательная ветвь недостижима (значения уже
    неотрицательны), т.е. absolute ничего не меняет. Для минимального signed
    значения отрицание заворачивается: absolute(-128, INT8) == -128.

    Args:
        value: Значение в представлении numeric_type
        numeric_type: Числовое представление

    Returns:
        |value| в представлении numeric_type
    """
    result = value if value >= 0 else -value
    return numeric_type.convert(result)
