"""
Тесты для lossy кривых: ExponentialCurve, LogarithmicCurve, SigmoidCurve

Проверяет:
1. Эталонные точечные цены
2. Batch price как определённый интеграл (ADD/REMOVE)
3. Особые точки: supply = 0 (log), growth = 0 (exp, sigmoid)
4. IEEE-754 семантику вместо исключений при переполнении
5. Работу с fixed-point параметрами
"""

import math

import pytest

from src.core.curves import (
    BondingCurve,
    CheckedBondingCurve,
    ExponentialCurve,
    LogarithmicCurve,
    OperationSide,
    SigmoidCurve,
)
from src.core.errors import BondingCurveError, BondingCurveErrorKind
from src.core.math.fixed_point import fixed_to_float, float_to_fixed


# =============================================================================
# EXPONENTIAL
# =============================================================================


class TestExponentialCurve:
    """Тесты ExponentialCurve: f(x) = base·e^(growth·x)"""

    def test_reference_price(self) -> None:
        curve = ExponentialCurve(0.01, 0.02)
        assert curve.calculate_price(100) == pytest.approx(0.07389056098930649, rel=1e-12)

    def test_price_at_zero_is_base(self) -> None:
        assert ExponentialCurve(0.01, 0.02).calculate_price(0) == 0.01

    def test_fixed_point_parameters(self) -> None:
        base = fixed_to_float(1, 2)
        growth = fixed_to_float(2, 2)
        price = ExponentialCurve(base, growth).calculate_price(100)
        assert float_to_fixed(price, 9) == 73_890_560

    def test_many_add_is_integral(self) -> None:
        """∫[0, 10] 0.01·e^(0.02x) dx = 0.5·(e^0.2 - 1)"""
        curve = ExponentialCurve(0.01, 0.02)
        expected = 0.5 * (math.exp(0.2) - 1.0)
        assert curve.calculate_price_many(0, 10, OperationSide.ADD) == pytest.approx(
            expected, rel=1e-12
        )

    def test_many_remove_positive_and_symmetric(self) -> None:
        """REMOVE с supply s+n по тому же интервалу даёт ту же положительную цену"""
        curve = ExponentialCurve(0.01, 0.02)
        added = curve.calculate_price_many(40, 25, OperationSide.ADD)
        removed = curve.calculate_price_many(65, 25, OperationSide.REMOVE)
        assert removed > 0
        assert removed == pytest.approx(added, rel=1e-12)

    def test_many_close_to_discrete_sum(self) -> None:
        """Интеграл близок к сумме цен по единицам при малом growth"""
        curve = ExponentialCurve(1.0, 0.001)
        discrete = sum(curve.calculate_price(100 + i) for i in range(50))
        integral = curve.calculate_price_many(100, 50, OperationSide.ADD)
        assert integral == pytest.approx(discrete, rel=1e-3)

    def test_zero_growth_division_by_zero(self) -> None:
        curve = ExponentialCurve(0.01, 0.0)
        assert curve.calculate_price(100) == 0.01
        with pytest.raises(BondingCurveError) as exc_info:
            curve.calculate_price_many(0, 10, OperationSide.ADD)
        assert exc_info.value.kind == BondingCurveErrorKind.DIVISION_BY_ZERO

    def test_overflow_is_inf(self) -> None:
        """Нет error path: переполнение → inf"""
        curve = ExponentialCurve(1.0, 1.0)
        assert curve.calculate_price(1000) == math.inf
        assert curve.calculate_price_many(600, 200, OperationSide.ADD) == math.inf

    def test_capabilities(self) -> None:
        curve = ExponentialCurve(0.01, 0.02)
        assert isinstance(curve, BondingCurve)
        assert not isinstance(curve, CheckedBondingCurve)


# =============================================================================
# LOGARITHMIC
# =============================================================================


class TestLogarithmicCurve:
    """Тесты LogarithmicCurve: f(x) = growth·ln(x) + base"""

    def test_reference_price(self) -> None:
        curve = LogarithmicCurve(0.02, 0.01)
        assert curve.calculate_price(100) == pytest.approx(0.06605170185988092, rel=1e-12)

    def test_price_at_zero_is_base_exactly(self) -> None:
        curve = LogarithmicCurve(0.02, 0.01)
        assert curve.calculate_price(0) == 0.02

    def test_fixed_point_parameters(self) -> None:
        base = fixed_to_float(1, 2)
        growth = fixed_to_float(2, 2)
        price = LogarithmicCurve(base, growth).calculate_price(100)
        assert float_to_fixed(price, 9) == 102_103_403

    def test_many_from_zero_includes_first_unit_base(self) -> None:
        """ADD с supply = 0: интеграл F(n) плюс ровно одна base"""
        base, growth = 0.02, 0.01
        curve = LogarithmicCurve(base, growth)
        n = 10
        raw_integral = growth * n * math.log(n) - growth * n + base * n
        assert curve.calculate_price_many(0, n, OperationSide.ADD) == pytest.approx(
            raw_integral + base, rel=1e-12
        )

    def test_many_add_nonzero_start(self) -> None:
        """F(end) - F(start) без добавки base"""
        base, growth = 0.02, 0.01
        curve = LogarithmicCurve(base, growth)

        def antiderivative(x: float) -> float:
            return growth * x * math.log(x) - growth * x + base * x

        expected = antiderivative(15) - antiderivative(5)
        assert curve.calculate_price_many(5, 10, OperationSide.ADD) == pytest.approx(
            expected, rel=1e-12
        )

    def test_many_remove_matches_add_over_same_interval(self) -> None:
        curve = LogarithmicCurve(0.02, 0.01)
        added = curve.calculate_price_many(2, 3, OperationSide.ADD)
        removed = curve.calculate_price_many(5, 3, OperationSide.REMOVE)
        assert removed == pytest.approx(added, rel=1e-12)

    def test_many_remove_down_to_zero(self) -> None:
        """REMOVE до supply = 0: F(0) = 0, без добавки base"""
        base, growth = 0.02, 0.01
        curve = LogarithmicCurve(base, growth)
        expected = growth * 4 * math.log(4) - growth * 4 + base * 4
        assert curve.calculate_price_many(4, 4, OperationSide.REMOVE) == pytest.approx(
            expected, rel=1e-12
        )

    def test_remove_below_zero_is_nan(self) -> None:
        """Вне области определения ln — NaN, без исключения"""
        curve = LogarithmicCurve(0.02, 0.01)
        assert math.isnan(curve.calculate_price_many(2, 5, OperationSide.REMOVE))

    def test_capabilities(self) -> None:
        curve = LogarithmicCurve(0.02, 0.01)
        assert isinstance(curve, BondingCurve)
        assert not isinstance(curve, CheckedBondingCurve)


# =============================================================================
# SIGMOID
# =============================================================================


class TestSigmoidCurve:
    """Тесты SigmoidCurve: f(x) = L / (1 + e^(-k(x - x0)))"""

    @pytest.fixture
    def curve(self) -> SigmoidCurve:
        return SigmoidCurve(100.0, 0.01, 500)

    def test_reference_price(self, curve: SigmoidCurve) -> None:
        assert curve.calculate_price(480) == pytest.approx(45.01660026875221, rel=1e-12)

    def test_midpoint_is_half_max(self, curve: SigmoidCurve) -> None:
        assert curve.calculate_price(500) == 50.0

    def test_symmetry_around_midpoint(self, curve: SigmoidCurve) -> None:
        for offset in [1, 20, 150, 499]:
            low = curve.calculate_price(500 - offset)
            high = curve.calculate_price(500 + offset)
            assert low + high == pytest.approx(100.0, rel=1e-12)

    def test_bounded_by_max_price(self, curve: SigmoidCurve) -> None:
        for supply in [0, 1, 250, 500, 750, 2_000]:
            price = curve.calculate_price(supply)
            assert 0.0 < price < 100.0

    def test_fixed_point_parameters(self) -> None:
        curve = SigmoidCurve(fixed_to_float(100, 0), fixed_to_float(1, 2), 500)
        price = curve.calculate_price(480)
        assert float_to_fixed(price, 9) == 45_016_600_268

    def test_many_add_reference(self, curve: SigmoidCurve) -> None:
        assert curve.calculate_price_many(480, 10, OperationSide.ADD) == pytest.approx(
            462.5779069197911, rel=1e-9
        )

    def test_many_remove_matches_add(self, curve: SigmoidCurve) -> None:
        """REMOVE: start = supply - amount, end = supply"""
        removed = curve.calculate_price_many(490, 10, OperationSide.REMOVE)
        assert removed == pytest.approx(462.5779069197911, rel=1e-9)

    def test_many_close_to_discrete_sum(self, curve: SigmoidCurve) -> None:
        # метод трапеций по единичным шагам
        discrete = sum(
            (curve.calculate_price(480 + i) + curve.calculate_price(481 + i)) / 2
            for i in range(10)
        )
        integral = curve.calculate_price_many(480, 10, OperationSide.ADD)
        assert integral == pytest.approx(discrete, rel=1e-4)

    def test_many_far_above_midpoint_no_overflow(self) -> None:
        """Далеко за точкой перегиба цена ≈ max_price, интеграл конечен"""
        curve = SigmoidCurve(100.0, 1.0, 0)
        assert curve.calculate_price_many(10_000, 1, OperationSide.ADD) == pytest.approx(
            100.0, rel=1e-9
        )

    def test_zero_growth_division_by_zero(self) -> None:
        curve = SigmoidCurve(100.0, 0.0, 500)
        assert curve.calculate_price(10) == 50.0
        with pytest.raises(BondingCurveError) as exc_info:
            curve.calculate_price_many(0, 10, OperationSide.ADD)
        assert exc_info.value.kind == BondingCurveErrorKind.DIVISION_BY_ZERO

    def test_capabilities(self, curve: SigmoidCurve) -> None:
        assert isinstance(curve, BondingCurve)
        assert not isinstance(curve, CheckedBondingCurve)
