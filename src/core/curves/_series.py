"""
Closed-form суммы по n последовательным целым.

    S1(n) = Σ i   = n(n-1)/2,         i ∈ [0, n)
    S2(n) = Σ i²  = n(n-1)(2n-1)/6,   i ∈ [0, n)

Порядок: сначала произведение, затем деление. Делимость на 2 и 6
гарантирована тождеством, поэтому деление всегда точное.
"""

from src.core.math.checked_arithmetic import NumericDomain


def exact_quotient(value, divisor: int):
    """Точное деление для unchecked пути: // для int, / для остальных типов."""
    if isinstance(value, int):
        return value // divisor
    return value / divisor


def index_sum(n: int) -> int:
    return n * (n - 1) // 2


def square_index_sum(n: int) -> int:
    return n * (n - 1) * (2 * n - 1) // 6


def index_sum_checked(n: int, domain: NumericDomain):
    # n >= 1: n == 0 отсекается вызывающим до этой точки
    product = domain.checked_mul(n, n - 1)
    return domain.exact_div(product, 2)


def square_index_sum_checked(n: int, domain: NumericDomain):
    product = domain.checked_mul(n, n - 1)
    product = domain.checked_mul(product, 2 * n - 1)
    return domain.exact_div(product, 6)
