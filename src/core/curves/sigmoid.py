"""
SigmoidCurve — f(x) = max_price / (1 + e^(-growth·(x - mid_supply)))

Lossy кривая (float). Логистическая функция: цена ограничена интервалом
(0, max_price), в точке перегиба f(mid_supply) = max_price / 2.

Batch price через первообразную логистической функции:

    F(x) = (max_price/growth)·ln(1 + e^(growth·(x - mid_supply)))

ADD: F(start + amount) - F(start), REMOVE: F(start) - F(start - amount).
Интеграл конечен везде, особых точек нет.
"""

from dataclasses import dataclass

from src.core.curves.types import OperationSide
from src.core.errors import BondingCurveError
from src.core.math.checked_arithmetic import exp_ieee, softplus


@dataclass(frozen=True)
class SigmoidCurve:
    """
    Сигмоидная bonding curve.

    Args:
        max_price: Верхняя асимптота цены (L)
        growth: Крутизна (k)
        mid_supply: Точка перегиба (x0), например max_supply / 2
    """

    max_price: float
    growth: float
    mid_supply: int

    def calculate_price(self, supply: int) -> float:
        return self.max_price / (
            1.0 + exp_ieee(-self.growth * (supply - self.mid_supply))
        )

    def calculate_price_many(
        self, starting_supply: int, amount: int, side: OperationSide
    ) -> float:
        """
        Batch price как интеграл логистической функции.

        Raises:
            BondingCurveError: DIVISION_BY_ZERO при growth == 0
        """
        if self.growth == 0:
            raise BondingCurveError.division_by_zero()

        if side == OperationSide.ADD:
            lower, upper = starting_supply, starting_supply + amount
        else:
            lower, upper = starting_supply - amount, starting_supply

        return self._antiderivative(upper) - self._antiderivative(lower)

    def _antiderivative(self, x: int) -> float:
        # softplus: ln(1 + e^z) без переполнения при больших z
        z = self.growth * (x - self.mid_supply)
        return (self.max_price / self.growth) * softplus(z)
