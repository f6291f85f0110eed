"""
LinearCurve — f(x) = linear·x + base

Точная целочисленная кривая: unchecked и checked пути.

Batch price — сумма арифметической прогрессии:

    Σ f(x_i) = amount · (a1 + aN) / 2

где a1 = f(start), aN = f(start + amount - 1) для ADD
и aN = f(start - amount + 1) для REMOVE. O(1) вместо O(amount).

amount·(a1 + aN) всегда чётно, поэтому деление на 2 точное.
"""

from dataclasses import dataclass
from typing import Any

from src.core.curves._series import exact_quotient
from src.core.curves.types import OperationSide
from src.core.math.checked_arithmetic import (
    DEFAULT_DOMAIN,
    SUPPLY_DOMAIN,
    NumericDomain,
)


@dataclass(frozen=True)
class LinearCurve:
    """
    Линейная bonding curve.

    Args:
        linear: Линейный коэффициент (наклон)
        base: Базовая цена (цена при supply = 0)
        domain: Числовой домен для checked пути (default: u64)

    Examples:
        >>> curve = LinearCurve(500_000_000, 1_000_000_000)
        >>> curve.calculate_price(800)
        401000000000
    """

    linear: Any
    base: Any
    domain: NumericDomain = DEFAULT_DOMAIN

    # -------------------------------------------------------------------------
    # Unchecked
    # -------------------------------------------------------------------------

    def calculate_price(self, supply: int) -> Any:
        return self.linear * supply + self.base

    def calculate_price_many(
        self, starting_supply: int, amount: int, side: OperationSide
    ) -> Any:
        if side == OperationSide.ADD:
            last_supply = starting_supply + amount - 1
        else:
            last_supply = starting_supply - amount + 1

        first_price = self.calculate_price(starting_supply)
        last_price = self.calculate_price(last_supply)
        return exact_quotient(amount * (first_price + last_price), 2)

    # -------------------------------------------------------------------------
    # Checked
    # -------------------------------------------------------------------------

    def calculate_price_checked(self, supply: int) -> Any:
        """
        Цена в точке supply с проверкой переполнения.

        Raises:
            BondingCurveError: OVERFLOW если linear·supply или сумма с base
                выходит за границы домена
        """
        d = self.domain
        return d.checked_add(d.checked_mul(self.linear, supply), self.base)

    def calculate_price_many_checked(
        self, starting_supply: int, amount: int, side: OperationSide
    ) -> Any:
        """
        Batch price с проверкой каждого промежуточного шага.

        a1, aN, a1 + aN, amount·(a1 + aN) и деление на 2 проверяются
        независимо. REMOVE за пределы supply = 0 → OVERFLOW.

        Raises:
            BondingCurveError: OVERFLOW на первом небезопасном шаге
        """
        d = self.domain
        if amount == 0:
            return d.zero()

        if side == OperationSide.ADD:
            last_supply = SUPPLY_DOMAIN.checked_add(starting_supply, amount - 1)
        else:
            last_supply = SUPPLY_DOMAIN.checked_sub(starting_supply, amount - 1)

        first_price = self.calculate_price_checked(starting_supply)
        last_price = self.calculate_price_checked(last_supply)
        total = d.checked_mul(amount, d.checked_add(first_price, last_price))
        return d.exact_div(total, 2)
