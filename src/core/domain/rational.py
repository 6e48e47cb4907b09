"""
Rational — Рациональные значения (несокращённые и сокращённые)

Immutable Pydantic модели, представляющие дробь numerator / denominator.

Варианты:
- Rational: хранит пару ровно в том виде, в котором её передали
- SimplifiedRational: при создании сокращает дробь через simplify()

Общая арифметика (negate, invert, add, sub, mul, div) реализована один раз
в RationalBase поверх фабричного метода construct(), который возвращает
значение того же варианта, что и получатель. Поэтому результат операций
над SimplifiedRational всегда сокращён, а над Rational — нет.

Равенство структурное и в пределах одного варианта:
Rational(1, 2) != SimplifiedRational(1, 2), Rational(1, 2) != Rational(2, 4).
"""

import logging
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.integer_ops import (
    InvalidArgumentError,
    simplify,
    validate_denominator,
)

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ ФОРМАТИРОВАНИЯ
# =============================================================================

FRACTION_SEPARATOR: Final[str] = "/"
NEGATIVE_SIGN: Final[str] = "-"


# =============================================================================
# BASE MODEL
# =============================================================================


class RationalBase(BaseModel):
    """
    Общая часть всех вариантов рационального значения.

    Immutable модель (frozen=True). Поля numerator/denominator доступны
    только для чтения; любое "изменение" создаёт новый экземпляр через
    construct().

    Подклассы переопределяют только способ нормализации пары при создании.
    """

    numerator: int = Field(..., strict=True, description="Числитель")
    denominator: int = Field(..., strict=True, description="Знаменатель (не ноль)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, numerator: int, denominator: int) -> None:
        validate_denominator(denominator)
        super().__init__(numerator=numerator, denominator=denominator)

    @field_validator("denominator")
    @classmethod
    def validate_non_zero(cls, v: int) -> int:
        """Знаменатель не может быть нулевым (для model_validate и т.п.)"""
        if v == 0:
            raise ValueError("denominator must be non-zero, got 0")
        return v

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_numerator(self) -> int:
        return self.numerator

    def get_denominator(self) -> int:
        return self.denominator

    def construct(self, numerator: int, denominator: int) -> "RationalBase":
        """
        Фабрика значения того же варианта, что и self.

        Args:
            numerator: Числитель нового значения
            denominator: Знаменатель нового значения

        Returns:
            Новый экземпляр type(self)

        Raises:
            InvalidArgumentError: Если denominator == 0
        """
        validate_denominator(denominator)
        return type(self)(numerator, denominator)

    # -------------------------------------------------------------------------
    # Derived arithmetic
    # -------------------------------------------------------------------------

    def value(self) -> float:
        """Значение дроби как float"""
        return self.numerator / self.denominator

    def negate(self) -> "RationalBase":
        return self.construct(-self.numerator, self.denominator)

    def invert(self) -> "RationalBase":
        """
        Обратное значение denominator / numerator.

        Raises:
            ZeroDivisionError: Если numerator == 0
        """
        if self.numerator == 0:
            raise ZeroDivisionError(f"cannot invert zero rational value {self}")
        return self.construct(self.denominator, self.numerator)

    def add(self, that: "RationalBase") -> "RationalBase":
        """
        Сумма: n1/d1 + n2/d2 = (n1*d2 + n2*d1) / (d1*d2)

        Raises:
            InvalidArgumentError: Если that не рациональное значение
        """
        that = _require_rational(that, "add")
        return self.construct(
            self.numerator * that.denominator + that.numerator * self.denominator,
            self.denominator * that.denominator,
        )

    def sub(self, that: "RationalBase") -> "RationalBase":
        """
        Разность: n1/d1 - n2/d2 = (n1*d2 - n2*d1) / (d1*d2)

        Raises:
            InvalidArgumentError: Если that не рациональное значение
        """
        that = _require_rational(that, "sub")
        return self.construct(
            self.numerator * that.denominator - that.numerator * self.denominator,
            self.denominator * that.denominator,
        )

    def mul(self, that: "RationalBase") -> "RationalBase":
        """
        Произведение: (n1*n2) / (d1*d2)

        Raises:
            InvalidArgumentError: Если that не рациональное значение
        """
        that = _require_rational(that, "mul")
        return self.construct(
            self.numerator * that.numerator,
            self.denominator * that.denominator,
        )

    def div(self, that: "RationalBase") -> "RationalBase":
        """
        Частное: (n1*d2) / (d1*n2)

        Raises:
            InvalidArgumentError: Если that не рациональное значение или равно нулю
        """
        that = _require_rational(that, "div")
        if that.numerator == 0:
            logger.debug("Rejected division of %s by zero value %s", self, that)
            raise InvalidArgumentError(f"cannot divide {self} by zero value {that}")
        return self.construct(
            self.numerator * that.denominator,
            self.denominator * that.numerator,
        )

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "RationalBase":
        if not isinstance(other, RationalBase):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "RationalBase":
        if not isinstance(other, RationalBase):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Any) -> "RationalBase":
        if not isinstance(other, RationalBase):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: Any) -> "RationalBase":
        if not isinstance(other, RationalBase):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> "RationalBase":
        return self.negate()

    # -------------------------------------------------------------------------
    # Equality & formatting
    # -------------------------------------------------------------------------

    def equals(self, other: object) -> bool:
        """
        Структурное равенство в пределах одного варианта.

        True только если other того же класса и хранит те же
        numerator и denominator. Математическая эквивалентность
        (1/2 и 2/4) не учитывается.
        """
        if type(other) is not type(self):
            return False
        return (
            self.numerator == other.numerator
            and self.denominator == other.denominator
        )

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self), self.numerator, self.denominator))

    def to_string(self) -> str:
        """
        Строковое представление "numerator/denominator".

        Используются абсолютные значения; префикс "-" ставится, если
        отрицателен ровно один из numerator/denominator.
        """
        body = f"{abs(self.numerator)}{FRACTION_SEPARATOR}{abs(self.denominator)}"
        if (self.numerator < 0) != (self.denominator < 0) and self.numerator != 0:
            return NEGATIVE_SIGN + body
        return body

    def __str__(self) -> str:
        return self.to_string()


def _require_rational(that: Any, operation: str) -> RationalBase:
    if not isinstance(that, RationalBase):
        logger.debug("Rejected %s operand %r", operation, that)
        raise InvalidArgumentError(
            f"{operation} requires a rational value, got {type(that).__name__}"
        )
    return that


# =============================================================================
# VARIANTS
# =============================================================================


class Rational(RationalBase):
    """
    Несокращённое рациональное значение.

    Хранит numerator и denominator как есть, включая знаки:
    Rational(3, -4) хранит (3, -4) и форматируется как "-3/4".
    """


class SimplifiedRational(RationalBase):
    """
    Сокращённое рациональное значение.

    При создании пара приводится через simplify():
    - gcd(|numerator|, denominator) == 1
    - denominator > 0, знак переносится в numerator
    - нулевой числитель даёт 0/1
    """

    @model_validator(mode="before")
    @classmethod
    def reduce_fraction(cls, data: Any) -> Any:
        """Сокращение пары до валидации полей"""
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator")
        denominator = data.get("denominator")
        if not all(
            isinstance(v, int) and not isinstance(v, bool)
            for v in (numerator, denominator)
        ):
            # Типы проверит валидация полей
            return data
        if denominator == 0:
            return data

        numerator, denominator = simplify(numerator, denominator)
        return {**data, "numerator": numerator, "denominator": denominator}
