"""Quote — построение кривой и выполнение одной pricing-операции.

Порядок:
1. Валидация запроса против curve_quote контракта (jsonschema)
2. Разбор параметров кривой в CurveSpec (pydantic) и построение кривой
3. Вызов ровно одной из четырёх операций
4. Цена возвращается без преобразований

Состояния нет: каждый вызов — чистая функция запроса.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from src.core.contracts import CurveQuoteValidator
from src.core.curves import OperationSide
from src.core.domain.curve_spec import CHECKED_KINDS, CurveKind, parse_curve_spec

logger = logging.getLogger(__name__)


class QuoteOperation(str, Enum):
    """Pricing-операция запроса"""

    PRICE = "price"
    PRICE_MANY = "price_many"


class UnsupportedOperation(Exception):
    """Checked путь запрошен для кривой с float доменом."""


@dataclass(frozen=True)
class QuoteResult:
    """Результат quote."""

    kind: CurveKind
    operation: QuoteOperation
    side: Optional[OperationSide]
    checked: bool
    price: Any


class CurveQuoter:
    """Quote facade: contract → CurveSpec → curve → одна операция.

    Ошибки пробрасываются как есть:
    - jsonschema.ValidationError — запрос не соответствует контракту
    - pydantic.ValidationError — параметры кривой не разбираются
    - UnsupportedOperation — checked для exponential/logarithmic/sigmoid
    - BondingCurveError — переполнение (checked) или growth == 0
    """

    def __init__(self, validator: Optional[CurveQuoteValidator] = None):
        self.validator = validator or CurveQuoteValidator()

    def quote(self, request: Dict[str, Any]) -> QuoteResult:
        self.validator.validate(request)

        spec = parse_curve_spec(request["curve"])
        kind = CurveKind(spec.kind)
        operation = QuoteOperation(request["operation"])
        checked = request.get("checked", False)
        side = OperationSide(request["side"]) if "side" in request else None

        if checked and kind not in CHECKED_KINDS:
            raise UnsupportedOperation(
                f"checked pricing is not defined for {kind.value} curves"
            )

        curve = spec.build()
        supply = request["supply"]

        logger.debug(
            "quote kind=%s operation=%s checked=%s supply=%s amount=%s side=%s",
            kind.value,
            operation.value,
            checked,
            supply,
            request.get("amount"),
            side.value if side else None,
        )

        if operation == QuoteOperation.PRICE:
            if checked:
                price = curve.calculate_price_checked(supply)
            else:
                price = curve.calculate_price(supply)
            # side для точечной цены не используется
            side = None
        else:
            amount = request["amount"]
            if checked:
                price = curve.calculate_price_many_checked(supply, amount, side)
            else:
                price = curve.calculate_price_many(supply, amount, side)

        return QuoteResult(
            kind=kind,
            operation=operation,
            side=side,
            checked=checked,
            price=price,
        )


def quote(request: Dict[str, Any]) -> QuoteResult:
    """
    Quote одного запроса.

    Examples:
        >>> quote({
        ...     "curve": {"kind": "linear", "linear": 500_000_000, "base": 1_000_000_000},
        ...     "operation": "price",
        ...     "supply": 800,
        ... }).price
        401000000000
    """
    return CurveQuoter().quote(request)
