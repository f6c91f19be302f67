from fractions import Fraction

import pytest

from vectils.tools import Diapason


@pytest.mark.parametrize('first, second', [(1, 5), (5, 1)])
def test_diapason_sorts_bounds(first, second):
    diapason = Diapason(first, second)

    assert (diapason.start, diapason.end) == (1, 5)


@pytest.mark.parametrize(
    'number, is_end_inclusive, expected',
    [
        (1, False, True),
        (3, False, True),
        (5, False, False),
        (5, True, True),
        (0, True, False),
        (6, True, False),
    ]
)
def test_diapason_membership(number, is_end_inclusive, expected):
    assert (number in Diapason(5, 1, is_end_inclusive=is_end_inclusive)) is expected


def test_diapason_with_fractions():
    diapason = Diapason(Fraction(1, 3), Fraction(1, 2), is_end_inclusive=True)

    assert Fraction(2, 5) in diapason
    assert Fraction(1, 2) in diapason
    assert Fraction(1, 4) not in diapason


@pytest.mark.parametrize('is_end_inclusive', [True, False])
def test_diapason_keeps_nan_inside(is_end_inclusive):
    assert float('nan') in Diapason(0., 5., is_end_inclusive=is_end_inclusive)
