"""
Тесты для модуля Integer Ops

Проверяет:
1. gcd: базовые значения, рекурсивное свойство, предусловия
2. simplify: сокращение, знак, нулевой числитель
3. Валидацию аргументов (тип, нулевой знаменатель)
"""

import pytest

from src.core.math import (
    ZERO_DENOMINATOR,
    InvalidArgumentError,
    gcd,
    simplify,
    validate_denominator,
    validate_integer,
)

# =============================================================================
# ТЕСТЫ НОД
# =============================================================================


class TestGcd:
    """Тесты для gcd"""

    def test_known_values(self) -> None:
        """Известные значения НОД"""
        assert gcd(100, 10) == 10
        assert gcd(12, 18) == 6
        assert gcd(18, 12) == 6
        assert gcd(17, 5) == 1
        assert gcd(1, 1) == 1

    @pytest.mark.parametrize("a", [1, 2, 7, 100, 10**12])
    def test_zero_second_argument_returns_first(self, a: int) -> None:
        """gcd(a, 0) == a для любого a > 0"""
        assert gcd(a, 0) == a

    @pytest.mark.parametrize("a,b", [(10, 4), (4, 10), (81, 27), (35, 64), (1071, 462)])
    def test_euclidean_step_invariant(self, a: int, b: int) -> None:
        """Инвариант: gcd(a, b) == gcd(b, a % b)"""
        assert gcd(a, b) == gcd(b, a % b)

    def test_result_divides_both(self) -> None:
        """Результат делит оба аргумента"""
        result = gcd(1071, 462)
        assert result == 21
        assert 1071 % result == 0
        assert 462 % result == 0

    @pytest.mark.parametrize("a,b", [(0, 5), (-3, 5), (5, -1), (0, 0), (-1, -1)])
    def test_invalid_arguments_raise(self, a: int, b: int) -> None:
        """a <= 0 или b < 0 вызывает ошибку"""
        with pytest.raises(InvalidArgumentError, match="gcd requires a > 0 and b >= 0"):
            gcd(a, b)

    def test_non_integer_arguments_raise(self) -> None:
        """Нецелые аргументы отклоняются"""
        with pytest.raises(InvalidArgumentError, match="must be an integer"):
            gcd(2.0, 1)
        with pytest.raises(InvalidArgumentError, match="must be an integer"):
            gcd(2, True)

    def test_error_is_value_error(self) -> None:
        """InvalidArgumentError совместим с ValueError"""
        with pytest.raises(ValueError):
            gcd(0, 1)


# =============================================================================
# ТЕСТЫ СОКРАЩЕНИЯ
# =============================================================================


class TestSimplify:
    """Тесты для simplify"""

    def test_basic_reduction(self) -> None:
        """Базовое сокращение"""
        assert simplify(10, 100) == (1, 10)
        assert simplify(6, 8) == (3, 4)

    def test_already_reduced_unchanged(self) -> None:
        """Несократимая дробь остаётся без изменений"""
        assert simplify(3, 4) == (3, 4)

    def test_zero_numerator_normalized(self) -> None:
        """Нулевой числитель даёт 0/1"""
        assert simplify(0, 10) == (0, ZERO_DENOMINATOR)
        assert simplify(0, -10) == (0, 1)
        assert simplify(0, 1) == (0, 1)

    @pytest.mark.parametrize(
        "numerator,denominator,expected",
        [
            (-10, 100, (-1, 10)),
            (10, -100, (-1, 10)),
            (-10, -100, (1, 10)),
            (10, 100, (1, 10)),
        ],
    )
    def test_sign_convention(
        self, numerator: int, denominator: int, expected: tuple[int, int]
    ) -> None:
        """Знак переносится в числитель, знаменатель положительный"""
        assert simplify(numerator, denominator) == expected

    @pytest.mark.parametrize(
        "numerator,denominator",
        [(1, 2), (-4, 6), (9, -27), (-1071, -462), (123456, 7890), (5, 1)],
    )
    def test_result_is_lowest_terms(self, numerator: int, denominator: int) -> None:
        """Результат несократим и знаменатель положительный"""
        reduced_num, reduced_den = simplify(numerator, denominator)
        assert reduced_den > 0
        assert gcd(abs(reduced_num), reduced_den) == 1
        # Значение дроби сохраняется
        assert reduced_num * denominator == numerator * reduced_den

    @pytest.mark.parametrize("numerator", [0, 1, -1, 100])
    def test_zero_denominator_raises(self, numerator: int) -> None:
        """Нулевой знаменатель вызывает ошибку"""
        with pytest.raises(InvalidArgumentError, match="denominator must be non-zero"):
            simplify(numerator, 0)

    def test_non_integer_arguments_raise(self) -> None:
        """Нецелые аргументы отклоняются"""
        with pytest.raises(InvalidArgumentError, match="numerator must be an integer"):
            simplify(1.5, 2)
        with pytest.raises(InvalidArgumentError, match="denominator must be an integer"):
            simplify(1, "2")

    def test_returns_tuple(self) -> None:
        """Результат — кортеж из двух int"""
        result = simplify(4, 8)
        assert isinstance(result, tuple)
        assert all(type(v) is int for v in result)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты для validate_integer / validate_denominator"""

    def test_validate_integer_passthrough(self) -> None:
        """Целое значение возвращается без изменений"""
        assert validate_integer(5) == 5
        assert validate_integer(-5) == -5

    def test_validate_integer_rejects_bool(self) -> None:
        """bool не считается целым аргументом"""
        with pytest.raises(InvalidArgumentError, match="flag must be an integer"):
            validate_integer(False, "flag")

    def test_validate_denominator_passthrough(self) -> None:
        """Ненулевой знаменатель возвращается без изменений"""
        assert validate_denominator(-3) == -3

    def test_validate_denominator_rejects_zero(self) -> None:
        """Нулевой знаменатель отклоняется"""
        with pytest.raises(InvalidArgumentError):
            validate_denominator(0)
