from abc import abstractmethod
from typing import Protocol

from beautiful_repr import StylizedMixin, Field


__all__ = ('Numeric', 'Diapason')


class Numeric(Protocol):
    """
    Protocol for annotating coordinate types.

    Anything ordered and closed over the four arithmetic operators qualifies:
    int, float, Fraction, Decimal and numpy scalars among others.
    """

    @abstractmethod
    def __lt__(self, other: any) -> bool:
        pass

    @abstractmethod
    def __gt__(self, other: any) -> bool:
        pass

    @abstractmethod
    def __add__(self, other: any) -> 'Numeric':
        pass

    @abstractmethod
    def __sub__(self, other: any) -> 'Numeric':
        pass

    @abstractmethod
    def __mul__(self, other: any) -> 'Numeric':
        pass

    @abstractmethod
    def __truediv__(self, other: any) -> 'Numeric':
        pass


class Diapason(StylizedMixin):
    """
    Range between two bounds given in any order.

    Membership is decided by ruling out the numbers lying outside, so a number
    incomparable with the bounds (NaN) counts as inside.
    """

    _repr_fields = Field(
        value_getter=lambda diapason, _: (diapason.start, diapason.end),
        formatter=lambda value, _: ' ~ '.join(map(str, value))
    ),

    def __init__(self, first: Numeric, second: Numeric, is_end_inclusive: bool = False):
        self.is_end_inclusive = is_end_inclusive
        self._start, self._end = (second, first) if first > second else (first, second)

    def __contains__(self, something: Numeric) -> bool:
        return self.is_having(something)

    @property
    def start(self) -> Numeric:
        return self._start

    @property
    def end(self) -> Numeric:
        return self._end

    def is_having(self, something: Numeric) -> bool:
        return not (
            something < self._start
            or (something > self._end if self.is_end_inclusive else something >= self._end)
        )
