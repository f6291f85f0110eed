"""
Fixed-Point — конверсия float ↔ целое с масштабом 10^decimals

Единственный допустимый способ выразить дробные параметры кривых целыми
числами (например, цена в lamports при decimals=9).

Конверсии lossy: round-trip восстанавливает значение с точностью до 10^-decimals.
Error path отсутствует: float_to_fixed насыщается в границах u64.
"""

import math

from src.core.math.checked_arithmetic import U64


def float_to_fixed(value: float, decimals: int) -> int:
    """
    Конверсия: float → fixed-point целое

    fixed = trunc(value * 10^decimals)  (усечение к нулю)

    Результат насыщается в [0, u64 max]:
    - NaN и отрицательные значения → 0
    - +inf и значения больше u64 max → u64 max

    Args:
        value: Исходное значение
        decimals: Количество десятичных знаков масштаба

    Returns:
        Целое, масштабированное на 10^decimals

    Examples:
        >>> float_to_fixed(3.14159, 2)
        314
        >>> float_to_fixed(0.123456789, 5)
        12345
        >>> float_to_fixed(float("nan"), 2)
        0
    """
    scaled = value * float(10**decimals)
    if math.isnan(scaled) or scaled <= 0:
        return 0
    if scaled >= U64.max_value:
        return U64.max_value
    return int(scaled)


def fixed_to_float(value: int, decimals: int) -> float:
    """
    Конверсия: fixed-point целое → float

    value_float = value / 10^decimals

    Examples:
        >>> fixed_to_float(314, 2)
        3.14
        >>> fixed_to_float(12345, 5)
        0.12345
    """
    scale = 10**decimals
    return value / float(scale)
