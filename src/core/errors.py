"""
BondingCurveError — закрытая таксономия арифметических ошибок

Два вида отказа:
- OVERFLOW — шаг целочисленной арифметики вышел за границы домена
- DIVISION_BY_ZERO — делитель равен нулю (growth == 0 в интегралах кривых)

Ошибка бросается при первом небезопасном шаге и никогда не ретраится.
Частичные результаты не возвращаются.
"""

from enum import Enum


class BondingCurveErrorKind(str, Enum):
    """Причина арифметического отказа"""

    OVERFLOW = "OVERFLOW"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"


_MESSAGES = {
    BondingCurveErrorKind.OVERFLOW: "An overflow occurred during the operation.",
    BondingCurveErrorKind.DIVISION_BY_ZERO: "A division by zero occurred during the operation.",
}


class BondingCurveError(Exception):
    """
    Арифметическая ошибка кривой.

    Содержит только тег kind, без payload. Сравнение по kind:

        >>> BondingCurveError.overflow() == BondingCurveError.overflow()
        True
    """

    def __init__(self, kind: BondingCurveErrorKind):
        self.kind = BondingCurveErrorKind(kind)
        super().__init__(_MESSAGES[self.kind])

    @classmethod
    def overflow(cls) -> "BondingCurveError":
        return cls(BondingCurveErrorKind.OVERFLOW)

    @classmethod
    def division_by_zero(cls) -> "BondingCurveError":
        return cls(BondingCurveErrorKind.DIVISION_BY_ZERO)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BondingCurveError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"BondingCurveError({self.kind.value})"
