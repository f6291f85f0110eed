"""Pricing — quote facade над bonding curves."""

from src.pricing.quote import (
    CurveQuoter,
    QuoteOperation,
    QuoteResult,
    UnsupportedOperation,
    quote,
)

__all__ = [
    "CurveQuoter",
    "QuoteOperation",
    "QuoteResult",
    "UnsupportedOperation",
    "quote",
]
