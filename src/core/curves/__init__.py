"""
Bonding curves — формулы цены как функции supply

Integer domain (exact, checked + unchecked): LinearCurve, QuadraticCurve
Float domain (lossy, unchecked only): ExponentialCurve, LogarithmicCurve, SigmoidCurve
"""

from src.core.curves.exponential import ExponentialCurve
from src.core.curves.linear import LinearCurve
from src.core.curves.logarithmic import LogarithmicCurve
from src.core.curves.quadratic import QuadraticCurve
from src.core.curves.sigmoid import SigmoidCurve
from src.core.curves.types import BondingCurve, CheckedBondingCurve, OperationSide

__all__ = [
    # Contracts
    "BondingCurve",
    "CheckedBondingCurve",
    "OperationSide",
    # Integer domain
    "LinearCurve",
    "QuadraticCurve",
    # Float domain
    "ExponentialCurve",
    "LogarithmicCurve",
    "SigmoidCurve",
]
