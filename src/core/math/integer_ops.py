"""
Integer Ops — НОД и приведение дроби к несократимому виду

Модуль содержит два чистых примитива, на которых построены рациональные значения:
- gcd: наибольший общий делитель (алгоритм Евклида)
- simplify: сокращение дроби с каноническим знаком

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знаменатель результата simplify всегда положительный
2. Знак дроби переносится в числитель
3. gcd(|numerator|, denominator) == 1 для результата (кроме numerator == 0)
4. Нулевой числитель нормализуется в (0, 1)
5. Невалидные аргументы → InvalidArgumentError, без частичных результатов
"""

import logging
from typing import Final

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Знаменатель, к которому приводится дробь с нулевым числителем
ZERO_DENOMINATOR: Final[int] = 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgumentError(ValueError):
    """
    Невалидный аргумент для операции над целыми или рациональными значениями.

    Возникает синхронно, до создания какого-либо результата:
    - gcd с a <= 0 или b < 0
    - simplify / конструктор с нулевым знаменателем
    - арифметика с нерациональным операндом или делением на ноль
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _is_strict_int(value: object) -> bool:
    # bool является подклассом int, но как аргумент не допускается
    return isinstance(value, int) and not isinstance(value, bool)


def validate_integer(value: object, name: str = "value") -> int:
    """
    Проверка, что значение является целым числом (bool не допускается).

    Args:
        value: Проверяемое значение
        name: Имя параметра для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        InvalidArgumentError: Если value не int
    """
    if not _is_strict_int(value):
        logger.debug("Rejected non-integer %s=%r", name, value)
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        )
    return value


def validate_denominator(denominator: int) -> int:
    """
    Проверка, что знаменатель не равен нулю.

    Args:
        denominator: Знаменатель дроби

    Returns:
        denominator без изменений

    Raises:
        InvalidArgumentError: Если denominator == 0
    """
    if denominator == 0:
        logger.debug("Rejected zero denominator")
        raise InvalidArgumentError("denominator must be non-zero, got 0")
    return denominator


# =============================================================================
# НОД
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель по алгоритму Евклида.

    НОД двух чисел не меняется, если большее заменить остатком от деления
    на меньшее. Рекурсия завершается при b == 0. Сложность O(log min(a, b)).

    Args:
        a: Первое значение (строго положительное)
        b: Второе значение (неотрицательное)

    Returns:
        Наибольший общий делитель a и b

    Raises:
        InvalidArgumentError: Если a <= 0, b < 0 или аргумент не int

    Examples:
        >>> gcd(100, 10)
        10
        >>> gcd(7, 0)
        7
        >>> gcd(12, 18)
        6
    """
    validate_integer(a, "a")
    validate_integer(b, "b")

    if a <= 0 or b < 0:
        logger.debug("Rejected gcd arguments a=%d, b=%d", a, b)
        raise InvalidArgumentError(
            f"gcd requires a > 0 and b >= 0, got a={a}, b={b}"
        )

    if b == 0:
        return a

    return gcd(b, a % b)


# =============================================================================
# СОКРАЩЕНИЕ ДРОБИ
# =============================================================================


def simplify(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Сокращение дроби до несократимого вида с каноническим знаком.

    Знак результата положительный, если числитель и знаменатель одного знака,
    иначе отрицательный. Знак всегда переносится в числитель, знаменатель
    результата положительный.

    Нулевой числитель обрабатывается отдельно: gcd(0, |d|) нарушает
    предусловие gcd (a > 0), а результат однозначен — (0, 1).

    Args:
        numerator: Числитель
        denominator: Знаменатель (не ноль)

    Returns:
        Кортеж (numerator, denominator) в несократимом виде

    Raises:
        InvalidArgumentError: Если denominator == 0 или аргумент не int

    Examples:
        >>> simplify(10, 100)
        (1, 10)
        >>> simplify(0, 10)
        (0, 1)
        >>> simplify(10, -100)
        (-1, 10)
        >>> simplify(-10, -100)
        (1, 10)
    """
    validate_integer(numerator, "numerator")
    validate_integer(denominator, "denominator")
    validate_denominator(denominator)

    if numerator == 0:
        return 0, ZERO_DENOMINATOR

    divisor = gcd(abs(numerator), abs(denominator))
    sign = 1 if (numerator < 0) == (denominator < 0) else -1

    return sign * abs(numerator) // divisor, abs(denominator) // divisor
