"""
Domain models and value objects.

Contains curve parameter specifications (CurveSpec tagged variant).
"""

from src.core.domain.curve_spec import (
    CHECKED_KINDS,
    DOMAINS,
    CurveKind,
    CurveSpec,
    ExponentialCurveSpec,
    LinearCurveSpec,
    LogarithmicCurveSpec,
    QuadraticCurveSpec,
    SigmoidCurveSpec,
    build_curve,
    parse_curve_spec,
)

__all__ = [
    # Curve spec — Enums
    "CurveKind",
    # Curve spec — Models
    "CurveSpec",
    "LinearCurveSpec",
    "QuadraticCurveSpec",
    "ExponentialCurveSpec",
    "LogarithmicCurveSpec",
    "SigmoidCurveSpec",
    # Curve spec — Constants
    "CHECKED_KINDS",
    "DOMAINS",
    # Curve spec — Functions
    "build_curve",
    "parse_curve_spec",
]
