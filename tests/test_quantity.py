import math
import operator
from fractions import Fraction

import pytest

from unit_algebra import Quantity, UnitError
from unit_algebra.units import NONE, Custom, Native, NativeUnit, Power, Product, Ratio
from unit_algebra.units.types import m_per_s, meter, second

m_unit = Native(NativeUnit.METER)
s_unit = Native(NativeUnit.SECOND)


def assert_quantity(quantity: Quantity, magnitude, unit):
    """Assert that a quantity has the expected magnitude and unit."""
    assert quantity.magnitude == magnitude
    assert quantity.unit == unit


def test_accessors():
    q = Quantity(3, m_unit)
    assert q.magnitude == 3
    assert q.unit == m_unit
    assert q.into_magnitude() == 3
    assert q.into_unit() == m_unit
    magnitude, unit = q
    assert (magnitude, unit) == (3, m_unit)


def test_setters():
    q = Quantity(3, m_unit)
    q.magnitude = 4
    q.unit = s_unit
    assert_quantity(q, 4, s_unit)


def test_unit_setter_rejects_non_expression():
    with pytest.raises(TypeError):
        Quantity(3, "m")  # type: ignore[arg-type]


def test_copy_is_independent():
    q = meter(3)
    c = q.copy()
    c.magnitude = 5
    assert c == meter(5)
    assert q == meter(3)


def test_str_and_repr():
    assert str(m_per_s(10.0)) == "10.0m/s"
    assert str(Quantity(2, NONE)) == "2"
    assert repr(meter(3)).startswith("Quantity(3, Native(")


def test_equality():
    assert meter(3) == meter(3)
    assert meter(3) != meter(4)
    assert meter(3) != second(3)
    assert meter(3) != 3


def test_quantities_are_unhashable():
    with pytest.raises(TypeError):
        hash(meter(3))


def test_ordering_same_unit():
    assert meter(1) < meter(2)
    assert meter(2) > meter(1)
    assert meter(2) <= meter(2)
    assert meter(2) >= meter(2)
    assert not meter(2) < meter(1)


@pytest.mark.parametrize(
    "op", (operator.lt, operator.le, operator.gt, operator.ge)
)
def test_ordering_different_units_is_incomparable(op):
    """Test that no relation holds between quantities with different units."""
    assert not op(meter(1), second(2))
    assert not op(meter(2), second(1))
    assert not op(meter(1), second(1))


def test_compare():
    assert meter(1).compare(meter(2)) == -1
    assert meter(2).compare(meter(1)) == 1
    assert meter(2).compare(meter(2)) == 0
    assert meter(2).compare(second(2)) is None
    assert meter(math.nan).compare(meter(1.0)) is None


def test_max_min():
    assert meter(1).max(meter(2)) == meter(2)
    assert meter(3).max(meter(2)) == meter(3)
    assert meter(1).min(meter(2)) == meter(1)
    assert meter(3).min(meter(2)) == meter(2)


def test_max_min_ties_keep_self():
    a = meter(2)
    assert a.max(meter(2)) is a
    assert a.min(meter(2)) is a


@pytest.mark.parametrize("method", ("max", "min"))
def test_max_min_different_units_raise(method: str):
    with pytest.raises(UnitError, match="cannot compare m with s") as excinfo:
        getattr(meter(1), method)(second(2))
    assert excinfo.value.code == "U003"


def test_addition():
    assert_quantity(meter(2) + meter(3), 5, m_unit)


def test_subtraction():
    assert_quantity(meter(2) - meter(3), -1, m_unit)


@pytest.mark.parametrize("a, b", ((2, 3), (2.5, -1.25), (Fraction(1, 3), 7)))
def test_add_then_subtract_round_trip(a, b):
    speed = Ratio(m_unit, s_unit)
    result = (Quantity(a, speed) + Quantity(b, speed)) - Quantity(b, speed)
    assert_quantity(result, a, speed)


def test_add_different_units_raises():
    with pytest.raises(UnitError, match="cannot add m with s") as excinfo:
        meter(1) + second(1)
    assert excinfo.value.code == "U001"


def test_subtract_different_units_raises():
    with pytest.raises(UnitError, match="cannot subtract m/s with m") as excinfo:
        m_per_s(1) - meter(1)
    assert excinfo.value.code == "U002"


def test_add_structurally_different_units_raises():
    with pytest.raises(UnitError, match=r"cannot add m\^2 with m\*m"):
        Quantity(1, Power(m_unit, 2)) + Quantity(1, Product(m_unit, m_unit))


def test_add_number_unsupported():
    with pytest.raises(TypeError):
        meter(1) + 1  # type: ignore[operator]


def test_multiplication_accumulates_exponent():
    result = meter(2) * meter(3) * meter(4)
    assert_quantity(result, 24, Power(m_unit, 3))


def test_multiplication_different_units():
    assert_quantity(meter(2) * second(3), 6, Product(m_unit, s_unit))


def test_division_same_unit_is_dimensionless():
    assert_quantity(meter(10) / meter(5), 2, NONE)


def test_speed_then_cancel():
    speed = meter(20.0) / second(2.0)
    assert speed == m_per_s(10.0)
    assert_quantity(speed * second(2.0), 20.0, m_unit)


def test_division_cancels_product_factor():
    work = meter(4) * Quantity(3, Custom("N"))
    assert_quantity(work / Quantity(3, Custom("N")), 4.0, m_unit)


@pytest.mark.parametrize("scalar", (2, 2.0))
def test_scalar_multiplication_keeps_unit(scalar):
    assert_quantity(meter(3) * scalar, 6, m_unit)
    assert_quantity(scalar * meter(3), 6, m_unit)


@pytest.mark.parametrize("scalar", (2, 2.0))
def test_scalar_division_keeps_unit(scalar):
    assert_quantity(m_per_s(3.0) / scalar, 1.5, Ratio(m_unit, s_unit))


def test_scalar_multiplication_uses_magnitude_type():
    result = Quantity(Fraction(1, 3), m_unit) * 3
    assert isinstance(result.magnitude, Fraction)
    assert_quantity(result, 1, m_unit)


def test_scalar_divided_by_quantity_unsupported():
    with pytest.raises(TypeError):
        2 / meter(1)  # type: ignore[operator]


def test_negation():
    assert_quantity(-meter(3), -3, m_unit)
    assert_quantity(+meter(3), 3, m_unit)


def test_powi_leaves_unit():
    assert_quantity(meter(3).powi(2), 9, m_unit)
    assert_quantity(meter(2.0).powi(-1), 0.5, m_unit)


def test_powi_requires_integer():
    with pytest.raises(TypeError):
        meter(3.0).powi(2.5)  # type: ignore[arg-type]


def test_powf_leaves_unit():
    assert_quantity(meter(9.0).powf(0.5), 3.0, m_unit)


def test_power_operator_unsupported():
    with pytest.raises(TypeError):
        meter(3) ** 2  # type: ignore[operator]


def test_operators_do_not_mutate_operands():
    a = meter(2)
    b = meter(3)
    a * b
    a + b
    -a
    assert a == meter(2)
    assert b == meter(3)


def test_area_and_volume():
    width = meter(20)
    height = meter(10)
    depth = meter(30)
    assert_quantity(width * height, 200, Power(m_unit, 2))
    assert_quantity(width * height * depth, 6000, Power(m_unit, 3))
