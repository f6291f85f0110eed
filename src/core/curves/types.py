"""
Curve Types — OperationSide и capability-контракты кривых

Два ортогональных контракта:
- BondingCurve — unchecked pricing, без error path
- CheckedBondingCurve — checked pricing, BondingCurveError(OVERFLOW) вместо
  неверного результата

Кривая реализует подмножество, соответствующее её числовому домену:
Linear/Quadratic — оба, Exponential/Logarithmic/Sigmoid — только unchecked.
"""

from enum import Enum
from typing import Any, Protocol, runtime_checkable


class OperationSide(str, Enum):
    """
    Направление batch-операции.

    ADD — supply растёт (buy), REMOVE — supply уменьшается (sell).
    Значения по умолчанию нет: вызывающий всегда указывает сторону явно.
    """

    ADD = "add"
    REMOVE = "remove"


@runtime_checkable
class BondingCurve(Protocol):
    """Unchecked pricing: цена в точке supply и цена batch из amount единиц."""

    def calculate_price(self, supply: int) -> Any:
        ...

    def calculate_price_many(
        self, starting_supply: int, amount: int, side: OperationSide
    ) -> Any:
        ...


@runtime_checkable
class CheckedBondingCurve(Protocol):
    """
    Checked pricing.

    Те же операции, что BondingCurve, но каждая либо возвращает цену,
    либо бросает BondingCurveError(OVERFLOW) на первом небезопасном шаге.
    """

    def calculate_price_checked(self, supply: int) -> Any:
        ...

    def calculate_price_many_checked(
        self, starting_supply: int, amount: int, side: OperationSide
    ) -> Any:
        ...
