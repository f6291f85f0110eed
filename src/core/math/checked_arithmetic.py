"""
Checked Arithmetic — Generic Numeric Domains

Единая числовая абстракция для кривых с точной арифметикой (Linear, Quadratic).
Формулы кривых пишутся один раз и параметризуются доменом:

- IntegerDomain — беззнаковые/знаковые целые фиксированной разрядности
  (u32, u64, u128, i64). Проверка переполнения — сравнение с границами домена.
- FloatDomain — IEEE-754 double. "Переполнение" — нефинитный результат.

Каждая checked-операция либо возвращает значение внутри домена, либо
бросает BondingCurveError(OVERFLOW). Значение за пределами домена никогда
не возвращается (нет wrap-around, нет усечения).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. checked_* никогда не возвращают значение вне [min_value, max_value]
2. Целочисленный домен содержит только int: float результат → OVERFLOW
3. exact_div для целых — только точное деление (остаток != 0 → ValueError)
4. Все операции детерминированы и не имеют состояния
"""

import logging
import math
from dataclasses import dataclass
from typing import Final, Union

from src.core.errors import BondingCurveError

logger = logging.getLogger(__name__)

Number = Union[int, float]


# =============================================================================
# БАЗОВЫЙ ДОМЕН
# =============================================================================


class NumericDomain:
    """
    Абстрактный числовой домен.

    Операции zero/checked_add/checked_sub/checked_mul/exact_div — это ровно
    тот набор capabilities, который нужен формулам Linear/Quadratic.
    """

    name: str

    def zero(self) -> Number:
        raise NotImplementedError

    def contains(self, value: Number) -> bool:
        raise NotImplementedError

    def checked_add(self, a: Number, b: Number) -> Number:
        return self._ensure(a + b, "add")

    def checked_sub(self, a: Number, b: Number) -> Number:
        return self._ensure(a - b, "sub")

    def checked_mul(self, a: Number, b: Number) -> Number:
        return self._ensure(a * b, "mul")

    def exact_div(self, a: Number, b: Number) -> Number:
        raise NotImplementedError

    def _ensure(self, value: Number, op: str) -> Number:
        if not self.contains(value):
            logger.debug("checked %s left domain %s: %r", op, self.name, value)
            raise BondingCurveError.overflow()
        return value


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ДОМЕНЫ
# =============================================================================


@dataclass(frozen=True)
class IntegerDomain(NumericDomain):
    """
    Целые фиксированной разрядности.

    Python int не переполняется, поэтому разрядность моделируется явно:
    результат каждой checked-операции сравнивается с [min_value, max_value].

    Examples:
        >>> U64.max_value
        18446744073709551615
        >>> U64.checked_add(1, 2)
        3
        >>> U64.checked_sub(0, 1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        BondingCurveError: An overflow occurred during the operation.
    """

    name: str
    bits: int
    signed: bool = False

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def zero(self) -> int:
        return 0

    def contains(self, value: Number) -> bool:
        # float не представим в целочисленном домене, даже если он целый
        if not isinstance(value, int):
            return False
        return self.min_value <= value <= self.max_value

    def exact_div(self, a: Number, b: Number) -> int:
        """
        Точное целочисленное деление.

        Используется только там, где делимость гарантирована комбинаторным
        тождеством (n(n-1)/2, n(n-1)(2n-1)/6, сумма арифметической прогрессии).

        Raises:
            BondingCurveError: DIVISION_BY_ZERO при b == 0
            ValueError: если деление не точное (нарушен порядок умножение → деление)
        """
        if b == 0:
            raise BondingCurveError.division_by_zero()
        quotient, remainder = divmod(a, b)
        if remainder != 0:
            raise ValueError(f"{a} is not divisible by {b} in domain {self.name}")
        return quotient


U32: Final[IntegerDomain] = IntegerDomain("u32", 32)
U64: Final[IntegerDomain] = IntegerDomain("u64", 64)
U128: Final[IntegerDomain] = IntegerDomain("u128", 128)
I64: Final[IntegerDomain] = IntegerDomain("i64", 64, signed=True)

# Ценовой домен по умолчанию для Linear/Quadratic
DEFAULT_DOMAIN: Final[IntegerDomain] = U64

# Supply — всегда u64, независимо от ценового домена кривой
SUPPLY_DOMAIN: Final[IntegerDomain] = U64


# =============================================================================
# FLOAT ДОМЕН
# =============================================================================


@dataclass(frozen=True)
class FloatDomain(NumericDomain):
    """
    IEEE-754 double.

    Для float "переполнение" означает выход в inf/nan: такой результат
    трактуется как OVERFLOW, а не пропагируется дальше.
    """

    name: str = "f64"

    def zero(self) -> float:
        return 0.0

    def contains(self, value: Number) -> bool:
        return math.isfinite(value)

    def checked_mul(self, a: Number, b: Number) -> float:
        try:
            product = float(a) * float(b)
        except OverflowError:
            # int слишком большой для float
            raise BondingCurveError.overflow() from None
        return self._ensure(product, "mul")

    def exact_div(self, a: Number, b: Number) -> float:
        if b == 0:
            raise BondingCurveError.division_by_zero()
        return self._ensure(a / b, "div")


F64: Final[FloatDomain] = FloatDomain()


# =============================================================================
# IEEE-754 ПРИМИТИВЫ ДЛЯ LOSSY КРИВЫХ
# =============================================================================


def exp_ieee(x: float) -> float:
    """
    e^x с семантикой IEEE-754.

    math.exp бросает OverflowError там, где IEEE-754 даёт +inf.
    Lossy кривые не имеют error path, поэтому переполнение → inf.

    Examples:
        >>> exp_ieee(0.0)
        1.0
        >>> exp_ieee(1000.0)
        inf
    """
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def softplus(x: float) -> float:
    """
    ln(1 + e^x) в численно устойчивой форме.

    softplus(x) = max(x, 0) + log1p(e^(-|x|))

    Не переполняется при больших x и не теряет точность при x << 0.

    Examples:
        >>> softplus(0.0) == math.log(2.0)
        True
    """
    return max(x, 0.0) + math.log1p(math.exp(-abs(x)))

