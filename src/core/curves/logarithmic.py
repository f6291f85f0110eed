"""
LogarithmicCurve — f(x) = growth·ln(x) + base

Lossy кривая (float). supply = 0 — особая точка: ln(0) = -inf,
поэтому цена при нулевом supply равна base.

Batch price через первообразную:

    F(x) = growth·x·ln(x) - growth·x + base·x,   F(0) = 0

ADD: F(end) - F(start); при start = 0 дополнительно учитывается цена
первой единицы (base), которую интеграл от нуля не содержит.
REMOVE: F(start) - F(start - amount).
"""

import math
from dataclasses import dataclass

from src.core.curves.types import OperationSide


@dataclass(frozen=True)
class LogarithmicCurve:
    """
    Логарифмическая bonding curve.

    Args:
        base: Базовая цена (цена при supply = 0)
        growth: Темп роста

    Examples:
        >>> LogarithmicCurve(0.02, 0.01).calculate_price(100)
        0.06605170185988092
        >>> LogarithmicCurve(0.02, 0.01).calculate_price(0)
        0.02
    """

    base: float
    growth: float

    def calculate_price(self, supply: int) -> float:
        if supply == 0:
            return self.base
        return self.growth * math.log(supply) + self.base

    def calculate_price_many(
        self, starting_supply: int, amount: int, side: OperationSide
    ) -> float:
        if side == OperationSide.ADD:
            total = self._antiderivative(starting_supply + amount) - self._antiderivative(
                starting_supply
            )
            if starting_supply == 0:
                total += self.base
            return total

        return self._antiderivative(starting_supply) - self._antiderivative(
            starting_supply - amount
        )

    def _antiderivative(self, x: int) -> float:
        if x == 0:
            # lim x·ln(x) = 0 при x → 0
            return 0.0
        if x < 0:
            # ln вне области определения, IEEE-754 даёт NaN
            return math.nan
        return self.growth * x * math.log(x) - self.growth * x + self.base * x
