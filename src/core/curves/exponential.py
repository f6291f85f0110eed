"""
ExponentialCurve — f(x) = base·e^(growth·x)

Lossy кривая (float). Точная fixed-point альтернатива через ряд Тейлора
возможна, но потери на конверсиях типов и больших степенях её обесценивают.

Batch price — определённый интеграл f от start до end:

    ∫ f = (base/growth)·(e^(growth·end) - e^(growth·start))

end = start + amount (ADD) или start - amount (REMOVE, знак развёрнут,
результат положительный).
"""

from dataclasses import dataclass

from src.core.curves.types import OperationSide
from src.core.errors import BondingCurveError
from src.core.math.checked_arithmetic import exp_ieee


@dataclass(frozen=True)
class ExponentialCurve:
    """
    Экспоненциальная bonding curve.

    Args:
        base: Масштаб цены (цена при supply = 0)
        growth: Темп роста

    Examples:
        >>> ExponentialCurve(0.01, 0.02).calculate_price(100)
        0.07389056098930649
    """

    base: float
    growth: float

    def calculate_price(self, supply: int) -> float:
        return self.base * exp_ieee(self.growth * supply)

    def calculate_price_many(
        self, starting_supply: int, amount: int, side: OperationSide
    ) -> float:
        """
        Batch price как интеграл f по [start, end].

        Raises:
            BondingCurveError: DIVISION_BY_ZERO при growth == 0
        """
        if self.growth == 0:
            raise BondingCurveError.division_by_zero()

        if side == OperationSide.ADD:
            lower, upper = starting_supply, starting_supply + amount
        else:
            lower, upper = starting_supply - amount, starting_supply

        scale = self.base / self.growth
        return scale * (exp_ieee(self.growth * upper) - exp_ieee(self.growth * lower))
