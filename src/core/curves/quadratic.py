"""
QuadraticCurve — f(x) = quadratic·x² + linear·x + base

Точная целочисленная кривая: unchecked и checked пути.

Batch price раскладывается на три независимые суммы по n = amount
последовательным supply, начиная с a = start (S1, S2 — см. _series):

    ADD:    q·(a²n + 2a·S1 + S2) + l·(a·n + S1) + b·n
    REMOVE: q·(a²n - 2a·S1 + S2) + l·(a·n - S1) + b·n

REMOVE проходит ту же прогрессию в обратном направлении, поэтому
меняется только знак перекрёстного члена.
"""

from dataclasses import dataclass
from typing import Any

from src.core.curves._series import (
    index_sum,
    index_sum_checked,
    square_index_sum,
    square_index_sum_checked,
)
from src.core.curves.types import OperationSide
from src.core.math.checked_arithmetic import (
    DEFAULT_DOMAIN,
    SUPPLY_DOMAIN,
    NumericDomain,
)


@dataclass(frozen=True)
class QuadraticCurve:
    """
    Квадратичная bonding curve.

    Args:
        quadratic: Квадратичный коэффициент
        linear: Линейный коэффициент
        base: Базовая цена
        domain: Числовой домен для checked пути (default: u64)

    Examples:
        >>> QuadraticCurve(10_000_000, 500_000_000, 1_000_000_000).calculate_price(800)
        6801000000000
    """

    quadratic: Any
    linear: Any
    base: Any
    domain: NumericDomain = DEFAULT_DOMAIN

    # -------------------------------------------------------------------------
    # Unchecked
    # -------------------------------------------------------------------------

    def calculate_price(self, supply: int) -> Any:
        return self.quadratic * supply * supply + self.linear * supply + self.base

    def calculate_price_many(
        self, starting_supply: int, amount: int, side: OperationSide
    ) -> Any:
        a = starting_supply
        n = amount
        s1 = index_sum(n)
        s2 = square_index_sum(n)

        if side == OperationSide.ADD:
            squares = a * a * n + 2 * a * s1 + s2
            linears = a * n + s1
        else:
            squares = a * a * n - 2 * a * s1 + s2
            linears = a * n - s1

        return self.quadratic * squares + self.linear * linears + self.base * n

    # -------------------------------------------------------------------------
    # Checked
    # -------------------------------------------------------------------------

    def calculate_price_checked(self, supply: int) -> Any:
        """
        Цена в точке supply: три checked умножения и два checked сложения.

        Raises:
            BondingCurveError: OVERFLOW на первом небезопасном шаге
        """
        d = self.domain
        squared = d.checked_mul(d.checked_mul(self.quadratic, supply), supply)
        linear = d.checked_mul(self.linear, supply)
        return d.checked_add(d.checked_add(squared, linear), self.base)

    def calculate_price_many_checked(
        self, starting_supply: int, amount: int, side: OperationSide
    ) -> Any:
        """
        Batch price: каждый член (квадратичный, линейный, константный)
        вычисляется и проверяется независимо, затем суммируется.

        REMOVE ниже supply = 0 (amount > starting_supply + 1) → OVERFLOW.
        Положительные слагаемые складываются до вычитания, поэтому
        промежуточный результат не уходит ниже нуля.

        Raises:
            BondingCurveError: OVERFLOW на первом небезопасном шаге
        """
        d = self.domain
        if amount == 0:
            return d.zero()
        # последний затронутый supply должен оставаться в u64
        if side == OperationSide.ADD:
            SUPPLY_DOMAIN.checked_add(starting_supply, amount - 1)
        else:
            SUPPLY_DOMAIN.checked_sub(starting_supply, amount - 1)

        a = starting_supply
        n = amount
        s1 = index_sum_checked(n, d)
        s2 = square_index_sum_checked(n, d)

        a_squared_n = d.checked_mul(d.checked_mul(a, a), n)
        cross = d.checked_mul(d.checked_mul(2, a), s1)
        a_n = d.checked_mul(a, n)

        if side == OperationSide.ADD:
            squares = d.checked_add(d.checked_add(a_squared_n, cross), s2)
            linears = d.checked_add(a_n, s1)
        else:
            squares = d.checked_sub(d.checked_add(a_squared_n, s2), cross)
            linears = d.checked_sub(a_n, s1)

        quadratic_term = d.checked_mul(self.quadratic, squares)
        linear_term = d.checked_mul(self.linear, linears)
        base_term = d.checked_mul(self.base, n)

        return d.checked_add(d.checked_add(quadratic_term, linear_term), base_term)
