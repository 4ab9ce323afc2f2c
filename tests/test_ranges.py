from fractions import Fraction

from uppkit.ranges import upto


def test_empty():
    assert list(upto(0)) == []


def test_small():
    count = 100
    values = list(upto(count))
    assert len(values) == count
    assert values[0] == 0
    assert values[-1] == count - 1


def test_float():
    assert list(upto(2.5)) == [0.0, 1.0, 2.0]


def test_fraction():
    values = list(upto(Fraction(5, 2)))
    assert values == [Fraction(0), Fraction(1), Fraction(2)]