"""
Coordinate — 2D координата с числовым представлением T

Pydantic модель с двумя компонентами x, y в представлении numeric_type
(по умолчанию UINT16). Каждая компонента при создании и при присваивании
конвертируется правилами NumericType.convert (усечение, заворачивание,
округление до float32).

Семантика значений:
- +, - и convert() создают новые координаты
- +=, -= (add_assign / subtract_assign) изменяют левый операнд и
  возвращают его для цепочек
- == сравнивает только x и y

Текстовое представление: "(x, y)".
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.errors import NumericTypeMismatchError
from src.core.math.numeric_types import DEFAULT_NUMERIC_TYPE, Number, NumericType


# =============================================================================
# COORDINATE MODEL
# =============================================================================


class Coordinate(BaseModel):
    """
    2D координата.

    numeric_type неизменяем после создания; x и y изменяются только
    через присваивание (с повторной конверсией) или +=, -=.
    """

    # Порядок важен: валидатор компонент читает numeric_type из info.data
    numeric_type: NumericType = Field(
        default=DEFAULT_NUMERIC_TYPE,
        frozen=True,
        description="Числовое представление компонент (T)",
    )
    x: Number = Field(default=0, description="Компонента x")
    y: Number = Field(default=0, description="Компонента y")

    model_config = {"validate_assignment": True}

    def __init__(
        self,
        x: Number = 0,
        y: Number = 0,
        numeric_type: NumericType = DEFAULT_NUMERIC_TYPE,
        **data: Any,
    ) -> None:
        super().__init__(numeric_type=numeric_type, x=x, y=y, **data)

    @field_validator("x", "y")
    @classmethod
    def convert_component(cls, v: Number, info: ValidationInfo) -> Number:
        """
        Конверсия компоненты в представление numeric_type.

        Если numeric_type не прошёл валидацию, компонента не конвертируется:
        ошибка модели относится только к numeric_type.
        """
        numeric_type = info.data.get("numeric_type")
        if numeric_type is None:
            return v
        return numeric_type.convert(v)

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    @classmethod
    def from_coordinate(
        cls,
        other: "Coordinate",
        numeric_type: NumericType = DEFAULT_NUMERIC_TYPE,
    ) -> "Coordinate":
        """
        Конверсия координаты другого представления.

        Каждая компонента конвертируется независимо правилами numeric_type.
        """
        return cls(other.x, other.y, numeric_type=numeric_type)

    def convert(self, numeric_type: NumericType) -> "Coordinate":
        return Coordinate.from_coordinate(self, numeric_type)

    def as_tuple(self) -> tuple[Number, Number]:
        return (self.x, self.y)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Coordinate":
        if not isinstance(other, Coordinate):
            return NotImplemented
        require_same_type(self, other)
        return Coordinate(self.x + other.x, self.y + other.y, numeric_type=self.numeric_type)

    def __sub__(self, other: object) -> "Coordinate":
        if not isinstance(other, Coordinate):
            return NotImplemented
        require_same_type(self, other)
        return Coordinate(self.x - other.x, self.y - other.y, numeric_type=self.numeric_type)

    def __iadd__(self, other: object) -> "Coordinate":
        if not isinstance(other, Coordinate):
            return NotImplemented
        require_same_type(self, other)
        self.x = self.x + other.x
        self.y = self.y + other.y
        return self

    def __isub__(self, other: object) -> "Coordinate":
        if not isinstance(other, Coordinate):
            return NotImplemented
        require_same_type(self, other)
        self.x = self.x - other.x
        self.y = self.y - other.y
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return (
            f"({format_component(self.x, self.numeric_type)}, "
            f"{format_component(self.y, self.numeric_type)})"
        )


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def require_same_type(a: Coordinate, b: Coordinate) -> None:
    """
    Проверка совпадения представлений операндов.

    Raises:
        NumericTypeMismatchError: numeric_type различаются
    """
    if a.numeric_type is not b.numeric_type:
        raise NumericTypeMismatchError(
            f"Cannot combine {a.numeric_type.value} and {b.numeric_type.value} coordinates; "
            f"convert one operand first"
        )


def format_component(value: Number, numeric_type: NumericType) -> str:
    """
    Текстовое представление компоненты.

    Целые печатаются как int, float в формате "g" (6 значащих цифр):
    2.5 → "2.5", 3.0 → "3".
    """
    if numeric_type.is_integral:
        return str(int(value))
    return format(value, "g")


def add(a: Coordinate, b: Coordinate) -> Coordinate:
    """Покомпонентная сумма (новая координата)"""
    return a + b


def subtract(a: Coordinate, b: Coordinate) -> Coordinate:
    """Покомпонентная разность (новая координата)"""
    return a - b


def add_assign(a: Coordinate, b: Coordinate) -> Coordinate:
    """
    a += b: изменяет a и возвращает его.

    Examples:
        >>> a = Coordinate(1, 2)
        >>> add_assign(add_assign(a, Coordinate(1, 1)), Coordinate(1, 1)) is a
        True
        >>> str(a)
        '(3, 4)'
    """
    a += b
    return a


def subtract_assign(a: Coordinate, b: Coordinate) -> Coordinate:
    """a -= b: изменяет a и возвращает его."""
    a -= b
    return a


def equals(a: Coordinate, b: Coordinate) -> bool:
    """True iff a.x == b.x и a.y == b.y"""
    return a.x == b.x and a.y == b.y
