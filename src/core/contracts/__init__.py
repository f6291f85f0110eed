"""
Contract Validation Module

Валидация JSON контрактов pricing-запросов.
"""

from .validators import (
    ContractValidator,
    CurveQuoteValidator,
    SchemaLoader,
    get_schema_loader,
    validate_curve_quote,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CurveQuoteValidator",
    # Functions
    "get_schema_loader",
    "validate_curve_quote",
]
