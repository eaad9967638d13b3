"""
Тесты для модели Coordinate

Проверяет:
1. Создание (по умолчанию, два аргумента, конверсия представления)
2. Покомпонентную арифметику и in-place операции с цепочками
3. Равенство только по x, y
4. Текстовое представление "(x, y)"
5. Валидацию pydantic (frozen numeric_type, validate_assignment)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    Coordinate,
    add,
    add_assign,
    equals,
    subtract,
    subtract_assign,
)
from src.core.errors import GeometryError, NumericTypeMismatchError
from src.core.math.numeric_types import NumericType


# =============================================================================
# СОЗДАНИЕ
# =============================================================================


class TestConstruction:
    """Создание координат"""

    def test_default_is_origin_uint16(self) -> None:
        """По умолчанию (0, 0) в UINT16"""
        c = Coordinate()
        assert c.x == 0
        assert c.y == 0
        assert c.numeric_type is NumericType.UINT16

    def test_two_argument_construction(self) -> None:
        """Позиционные x, y"""
        c = Coordinate(3, 4)
        assert c.as_tuple() == (3, 4)

    def test_keyword_construction(self) -> None:
        """Именованные аргументы и строковый numeric_type"""
        c = Coordinate(x=-1, y=2, numeric_type="int16")
        assert c.numeric_type is NumericType.INT16
        assert c.as_tuple() == (-1, 2)

    def test_components_converted_to_representation(self) -> None:
        """Компоненты конвертируются правилами numeric_type"""
        assert Coordinate(-1, 70000).as_tuple() == (65535, 4464)
        assert Coordinate(2.9, -2.9, numeric_type=NumericType.INT32).as_tuple() == (2, -2)
        assert Coordinate(1, 2, numeric_type=NumericType.FLOAT64).as_tuple() == (1.0, 2.0)

    def test_from_coordinate(self) -> None:
        """Конверсия из другого представления покомпонентно"""
        source = Coordinate(-1.5, 300.7, numeric_type=NumericType.FLOAT64)
        converted = Coordinate.from_coordinate(source, NumericType.INT8)
        assert converted.numeric_type is NumericType.INT8
        assert converted.as_tuple() == (-1, 44)  # 300 → 300 - 256

    def test_convert_returns_new_instance(self) -> None:
        """convert() не изменяет исходную координату"""
        source = Coordinate(5, 6, numeric_type=NumericType.INT32)
        widened = source.convert(NumericType.FLOAT64)
        assert widened is not source
        assert widened.as_tuple() == (5.0, 6.0)
        assert source.numeric_type is NumericType.INT32

    def test_nan_into_integral_rejected(self) -> None:
        """NaN в целочисленную координату → ValidationError"""
        with pytest.raises(ValidationError):
            Coordinate(float("nan"), 0, numeric_type=NumericType.INT32)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    """Покомпонентная арифметика"""

    def test_add(self) -> None:
        """Сумма создаёт новую координату"""
        a = Coordinate(1, 2)
        b = Coordinate(3, 4)
        result = add(a, b)
        assert result == Coordinate(4, 6)
        assert a == Coordinate(1, 2)
        assert a + b == result

    def test_subtract(self) -> None:
        """Разность создаёт новую координату"""
        a = Coordinate(5, 7, numeric_type=NumericType.INT32)
        b = Coordinate(2, 9, numeric_type=NumericType.INT32)
        assert subtract(a, b) == Coordinate(3, -2, numeric_type=NumericType.INT32)
        assert (a - b).as_tuple() == (3, -2)

    def test_unsigned_subtract_wraps(self) -> None:
        """UINT16: 0 - 3 заворачивается"""
        assert (Coordinate(0, 0) - Coordinate(3, 4)).as_tuple() == (65533, 65532)

    def test_add_overflow_wraps(self) -> None:
        """Переполнение суммы заворачивается"""
        a = Coordinate(120, 0, numeric_type=NumericType.INT8)
        b = Coordinate(10, 0, numeric_type=NumericType.INT8)
        assert (a + b).x == -126

    def test_add_assign_mutates_and_chains(self) -> None:
        """+= изменяет левый операнд и возвращает его"""
        a = Coordinate(1, 1)
        step = Coordinate(2, 3)
        result = add_assign(add_assign(a, step), step)
        assert result is a
        assert a.as_tuple() == (5, 7)

    def test_subtract_assign_mutates(self) -> None:
        """-= изменяет левый операнд"""
        a = Coordinate(10, 10, numeric_type=NumericType.INT16)
        original_id = id(a)
        a -= Coordinate(4, 12, numeric_type=NumericType.INT16)
        assert id(a) == original_id
        assert a.as_tuple() == (6, -2)
        assert subtract_assign(a, Coordinate(1, 1, numeric_type=NumericType.INT16)) is a

    def test_inplace_does_not_affect_copies(self) -> None:
        """Копия не разделяет состояние с оригиналом"""
        a = Coordinate(1, 1)
        copy = a.model_copy()
        a += Coordinate(1, 1)
        assert copy.as_tuple() == (1, 1)

    @pytest.mark.parametrize(
        "ax, ay, bx, by",
        [(0, 0, 3, 4), (-10, 20, 7, -3), (12345, -54321, 1, 1)],
    )
    def test_subtract_then_add_round_trip(self, ax, ay, bx, by) -> None:
        """add(subtract(A, B), B) == A без переполнения"""
        a = Coordinate(ax, ay, numeric_type=NumericType.INT64)
        b = Coordinate(bx, by, numeric_type=NumericType.INT64)
        assert add(subtract(a, b), b) == a

    def test_mixed_types_rejected(self) -> None:
        """Разные представления → NumericTypeMismatchError (TypeError)"""
        a = Coordinate(1, 1, numeric_type=NumericType.INT32)
        b = Coordinate(1, 1, numeric_type=NumericType.FLOAT64)
        with pytest.raises(NumericTypeMismatchError, match="int32 and float64"):
            a + b
        with pytest.raises(TypeError):
            a -= b
        assert issubclass(NumericTypeMismatchError, GeometryError)

    def test_non_coordinate_operand(self) -> None:
        """Арифметика с не-координатой → TypeError"""
        with pytest.raises(TypeError):
            Coordinate(1, 1) + (1, 1)


# =============================================================================
# РАВЕНСТВО
# =============================================================================


class TestEquality:
    """equals(A, B) iff A.x == B.x и A.y == B.y"""

    def test_equal_components(self) -> None:
        """Одинаковые компоненты равны"""
        assert equals(Coordinate(1, 2), Coordinate(1, 2))
        assert Coordinate(1, 2) == Coordinate(1, 2)

    def test_different_components(self) -> None:
        """Различие в любой компоненте"""
        assert not equals(Coordinate(1, 2), Coordinate(2, 2))
        assert not equals(Coordinate(1, 2), Coordinate(1, 3))
        assert Coordinate(1, 2) != Coordinate(2, 1)

    def test_representation_not_compared(self) -> None:
        """numeric_type не участвует в сравнении"""
        a = Coordinate(1, 2, numeric_type=NumericType.INT32)
        b = Coordinate(1.0, 2.0, numeric_type=NumericType.FLOAT64)
        assert equals(a, b)
        assert a == b

    def test_not_equal_to_other_types(self) -> None:
        """Сравнение с кортежем не равно"""
        assert Coordinate(1, 2) != (1, 2)

    def test_unhashable(self) -> None:
        """Изменяемая координата не хэшируется"""
        with pytest.raises(TypeError):
            hash(Coordinate(1, 2))


# =============================================================================
# ПРЕДСТАВЛЕНИЕ
# =============================================================================


class TestRendering:
    """Текстовое представление "(x, y)" """

    def test_integral(self) -> None:
        """Целые компоненты"""
        assert str(Coordinate(3, 4)) == "(3, 4)"
        assert str(Coordinate(-3, 4, numeric_type=NumericType.INT32)) == "(-3, 4)"

    def test_floating(self) -> None:
        """Float компоненты в формате "g" (6 значащих цифр)"""
        c = Coordinate(2.5, 3.0, numeric_type=NumericType.FLOAT64)
        assert str(c) == "(2.5, 3)"
        assert str(Coordinate(1 / 3, 0, numeric_type=NumericType.FLOAT64)) == "(0.333333, 0)"

    def test_format_in_fstring(self) -> None:
        """f-строка использует тот же формат"""
        assert f"{Coordinate(0, 5)}" == "(0, 5)"


# =============================================================================
# PYDANTIC
# =============================================================================


class TestValidation:
    """Поведение pydantic модели"""

    def test_numeric_type_frozen(self) -> None:
        """numeric_type нельзя изменить после создания"""
        c = Coordinate(1, 2)
        with pytest.raises(ValidationError):
            c.numeric_type = NumericType.INT32

    def test_assignment_is_converted(self) -> None:
        """Присваивание компоненты проходит конверсию"""
        c = Coordinate(1, 2)
        c.x = -1
        assert c.x == 65535

    def test_invalid_numeric_type(self) -> None:
        """Неизвестное представление → ValidationError"""
        with pytest.raises(ValidationError):
            Coordinate(1, 2, numeric_type="int128")

    def test_invalid_numeric_type_skips_component_conversion(self) -> None:
        """При невалидном представлении ошибка только по numeric_type"""
        with pytest.raises(ValidationError) as exc_info:
            Coordinate(float("nan"), 0, numeric_type="int128")
        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == ("numeric_type",)

    def test_float64_overflow_is_inf(self) -> None:
        """Огромное целое в FLOAT64 → inf, а не OverflowError"""
        c = Coordinate(10**400, 0, numeric_type=NumericType.FLOAT64)
        assert c.x == float("inf")
