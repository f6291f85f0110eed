"""
Core math modules для bonding curves

Числовые домены с checked арифметикой и fixed-point конверсии.
"""

# Checked Arithmetic
from src.core.math.checked_arithmetic import (
    DEFAULT_DOMAIN,
    F64,
    I64,
    SUPPLY_DOMAIN,
    U32,
    U64,
    U128,
    FloatDomain,
    IntegerDomain,
    NumericDomain,
    exp_ieee,
    softplus,
)

# Fixed-Point
from src.core.math.fixed_point import fixed_to_float, float_to_fixed

__all__ = [
    # Checked Arithmetic — Domains
    "NumericDomain",
    "IntegerDomain",
    "FloatDomain",
    "U32",
    "U64",
    "U128",
    "I64",
    "F64",
    "DEFAULT_DOMAIN",
    "SUPPLY_DOMAIN",
    # Checked Arithmetic — IEEE-754 helpers
    "exp_ieee",
    "softplus",
    # Fixed-Point
    "fixed_to_float",
    "float_to_fixed",
]
