"""
Тесты для Comparator

Проверяет:
1. Специальные значения (Infinity, NaN)
2. Нули (без учёта знака и exponent)
3. Разные знаки
4. Одинаковый знак: adjusted exponent и цифры
5. Антисимметрию и тотальность на значениях без NaN
6. Операторы lt/gt/le/ge/eq и sort_key
"""

import itertools

import pytest

from src.exactdec.domain import NAN, NEG_INF, POS_INF, UndefinedComparison, ZERO
from src.exactdec.math import compare, eq, ge, gt, le, lt, sort_key
from src.exactdec.text import parse


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def ordered_values():
    """Значения без NaN в возрастающем порядке (равные — в одной группе)"""
    return [
        [NEG_INF],
        [parse("-1E3"), parse("-1000"), parse("-1000.00")],
        [parse("-2.5")],
        [parse("-2.49")],
        [parse("-0.001")],
        [ZERO, parse("-0"), parse("0.00"), parse("0E+5")],
        [parse("1E-9")],
        [parse("0.5"), parse(".50")],
        [parse("1"), parse("1.0"), parse("100E-2")],
        [parse("1.01")],
        [parse("9.99")],
        [parse("10")],
        [parse("1E2"), parse("100")],
        [POS_INF],
    ]


# =============================================================================
# СПЕЦИАЛЬНЫЕ ЗНАЧЕНИЯ
# =============================================================================


class TestSpecials:
    """Тесты сравнения Infinity и NaN"""

    def test_same_infinities_equal(self) -> None:
        assert compare(POS_INF, POS_INF) == 0
        assert compare(NEG_INF, NEG_INF) == 0

    def test_infinities_ordered(self) -> None:
        assert compare(NEG_INF, POS_INF) == -1
        assert compare(POS_INF, NEG_INF) == 1

    def test_infinity_vs_finite(self) -> None:
        big = parse("9.99E+999999")
        assert compare(POS_INF, big) == 1
        assert compare(big, POS_INF) == -1
        assert compare(NEG_INF, parse("-9.99E+999999")) == -1
        assert compare(parse("-1"), NEG_INF) == 1

    @pytest.mark.parametrize("other", [ZERO, parse("1.5"), POS_INF, NEG_INF, NAN])
    def test_nan_fails_on_left(self, other) -> None:
        with pytest.raises(UndefinedComparison):
            compare(NAN, other)

    @pytest.mark.parametrize("other", [ZERO, parse("-1.5"), POS_INF, NEG_INF])
    def test_nan_fails_on_right(self, other) -> None:
        with pytest.raises(UndefinedComparison):
            compare(other, NAN)

    @pytest.mark.parametrize("operator", [lt, gt, le, ge, eq])
    def test_operators_fail_on_nan(self, operator) -> None:
        with pytest.raises(UndefinedComparison):
            operator(parse("1"), NAN)

    def test_undefined_comparison_is_arithmetic_error(self) -> None:
        with pytest.raises(ArithmeticError, match="cannot compare NaN"):
            compare(NAN, ZERO)


# =============================================================================
# КОНЕЧНЫЕ ЗНАЧЕНИЯ
# =============================================================================


class TestFinite:
    """Тесты сравнения конечных значений"""

    def test_equal_value_different_representation(self) -> None:
        """1E2 == 100 по значению"""
        assert compare(parse("1E2"), parse("100")) == 0

    def test_zeros_equal_regardless_of_sign_and_exponent(self) -> None:
        assert compare(parse("-0"), parse("0.000")) == 0
        assert compare(parse("0E+10"), parse("-0E-10")) == 0

    def test_zero_vs_nonzero(self) -> None:
        assert compare(ZERO, parse("0.001")) == -1
        assert compare(ZERO, parse("-0.001")) == 1
        assert compare(parse("0.001"), ZERO) == 1
        assert compare(parse("-0.001"), parse("-0")) == -1

    def test_different_signs(self) -> None:
        assert compare(parse("-1E9"), parse("1E-9")) == -1
        assert compare(parse("1E-9"), parse("-1E9")) == 1

    def test_adjusted_exponent_decides(self) -> None:
        assert compare(parse("10"), parse("9.99999")) == 1
        assert compare(parse("-10"), parse("-9.99999")) == -1

    def test_digits_decide_on_equal_adjusted(self) -> None:
        assert compare(parse("1.25"), parse("1.3")) == -1
        assert compare(parse("-1.25"), parse("-1.3")) == 1
        assert compare(parse("1.30"), parse("1.3")) == 0

    def test_padding_across_scales(self) -> None:
        assert compare(parse("123E2"), parse("12300.0001")) == -1
        assert compare(parse("123E2"), parse("12299.9999")) == 1


# =============================================================================
# СВОЙСТВА ПОРЯДКА
# =============================================================================


class TestOrderProperties:
    """Антисимметрия и тотальность"""

    def test_matches_fixture_order(self, ordered_values) -> None:
        for (i, group_a), (j, group_b) in itertools.product(enumerate(ordered_values), repeat=2):
            expected = (i > j) - (i < j)
            for a in group_a:
                for b in group_b:
                    assert compare(a, b) == expected, f"{a} vs {b}"

    def test_antisymmetry_and_totality(self, ordered_values) -> None:
        values = [v for group in ordered_values for v in group]
        for a, b in itertools.product(values, repeat=2):
            assert compare(a, b) == -compare(b, a)
            assert [lt(a, b), eq(a, b), gt(a, b)].count(True) == 1

    def test_derived_operators(self) -> None:
        one, two = parse("1"), parse("2.0")
        assert lt(one, two) and le(one, two) and not gt(one, two) and not ge(one, two)
        assert le(one, parse("1.000")) and ge(one, parse("1.000")) and eq(one, parse("1.000"))

    def test_sort_key(self) -> None:
        values = [parse("10"), NEG_INF, parse("-0.5"), POS_INF, parse("2.5E-1"), ZERO]
        ordered = sorted(values, key=sort_key)
        assert [str(v) for v in ordered] == ["-Infinity", "-0.5", "0", "0.25", "10", "Infinity"]
