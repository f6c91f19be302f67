import logging
from abc import ABC, abstractmethod
from functools import partial
from typing import Iterable, Iterator, Callable, NamedTuple, Optional, Self

import numpy as np
from beautiful_repr import StylizedMixin, Field

from vectils.interfaces import ISegment2D
from vectils.errors.geometry_errors import *
from vectils.tools import Numeric, Diapason


__all__ = (
    'Point',
    'Segment2D',
    'StrictSegment2D',
    'TupleSegment',
    'ArraySegment',
    'create_segment_from',
)


logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: Numeric
    y: Numeric


class Segment2D(ISegment2D, ABC):
    """
    Directed 2D segment from (xi, yi) to (xf, yf).

    Subclasses supply the four accessors and get every query below built on
    top of them. Nothing here guards the arithmetic: a zero height or a
    degenerate intersection denominator fails the way the coordinate type's
    own division does.
    """

    _diapason_factory: Callable[[Numeric, Numeric], Diapason] = staticmethod(partial(
        Diapason,
        is_end_inclusive=True
    ))
    _point_factory: Callable[[Numeric, Numeric], Point] = Point

    def __iter__(self) -> Iterator[Numeric]:
        return iter(self.coordinates)

    def __eq__(self, other: ISegment2D) -> bool:
        if not isinstance(other, ISegment2D):
            return NotImplemented

        return self.coordinates == self._get_coordinates_of(other)

    def __hash__(self) -> int:
        return hash(self.coordinates)

    @property
    def coordinates(self) -> tuple[Numeric, Numeric, Numeric, Numeric]:
        return self._get_coordinates_of(self)

    @property
    def start_point(self) -> Point:
        return self._point_factory(self.xi(), self.yi())

    @property
    def end_point(self) -> Point:
        return self._point_factory(self.xf(), self.yf())

    @property
    def points(self) -> tuple[Point, Point]:
        return (self.start_point, self.end_point)

    @property
    def domain(self) -> Diapason:
        return self._diapason_factory(self.xi(), self.xf())

    @classmethod
    def in_range(cls, first: Numeric, second: Numeric, number: Numeric) -> bool:
        """Checks whether the number lies between two bounds given in any order (inclusive)."""

        return number in cls._diapason_factory(first, second)

    def w(self) -> Numeric:
        return self.xf() - self.xi()

    def h(self) -> Numeric:
        return self.yf() - self.yi()

    def delta(self) -> Numeric:
        """Returns width divided by height, i.e. dx/dy rather than the usual dy/dx."""

        return self.w() / self.h()

    def in_dom(self, x: Numeric) -> bool:
        return self.in_range(self.xi(), self.xf(), x)

    def linear(self, x: Numeric) -> Numeric:
        return self.delta() * x + self.yi()

    def cross(self, other: ISegment2D | Iterable[Numeric]) -> Optional[Point]:
        """
        Returns the point where the lines through both segments meet, or None.

        Lines with exactly equal deltas count as parallel. Only the x coordinate
        of the found point is checked against the domains of both segments.
        """

        other = create_segment_from(other)

        if self.delta() == other.delta():
            logger.debug("%s and %s are parallel", self, other)
            return None

        intersection_x = (
            ((self.yi() - other.yi()) * self.w() * other.w())
            / (other.h() * self.w() - self.h() * other.w())
        )

        if not (self.in_dom(intersection_x) and other.in_dom(intersection_x)):
            logger.debug(
                "Lines of %s and %s meet at x=%s outside of their domains",
                self,
                other,
                intersection_x
            )
            return None

        return self._point_factory(intersection_x, self.linear(intersection_x))

    def is_crossing(self, other: ISegment2D | Iterable[Numeric]) -> bool:
        return self.cross(other) is not None

    @classmethod
    def create_by_points(cls, start_point: Iterable[Numeric], end_point: Iterable[Numeric]) -> Self:
        return cls((*start_point, *end_point))

    @staticmethod
    def _get_coordinates_of(segment: ISegment2D) -> tuple[Numeric, Numeric, Numeric, Numeric]:
        return (segment.xi(), segment.yi(), segment.xf(), segment.yf())


class StrictSegment2D(Segment2D, StylizedMixin, ABC):
    _repr_fields = (
        Field(
            value_getter=lambda segment, _: segment.points,
            formatter=lambda points, _: "from {} to {}".format(*map(tuple, points))
        ),
    )

    @property
    @abstractmethod
    def _shape(self) -> tuple[int, ]:
        pass

    def _check_state_errors(self) -> None:
        if self._shape != (4, ):
            raise CoordinateNumberError(
                f"{self.__class__.__name__} must be built from 4 coordinates, not shape {self._shape}"
            )


class TupleSegment(StrictSegment2D):
    def __init__(self, coordinates: Iterable[Numeric]):
        self._coordinates = tuple(coordinates)
        self._check_state_errors()

    @property
    def _shape(self) -> tuple[int, ]:
        return (len(self._coordinates), )

    def xi(self) -> Numeric:
        return self._coordinates[0]

    def yi(self) -> Numeric:
        return self._coordinates[1]

    def xf(self) -> Numeric:
        return self._coordinates[2]

    def yf(self) -> Numeric:
        return self._coordinates[3]


class ArraySegment(StrictSegment2D):
    """
    Segment stored in a read-only numpy array laid out as [xi, yi, xf, yf].

    The array holds the coordinate objects themselves, so arithmetic behaves
    exactly as it does for a TupleSegment with the same values.
    """

    _array_factory: Callable[[Iterable[Numeric]], np.ndarray] = staticmethod(partial(
        np.array,
        dtype=object
    ))

    def __init__(self, coordinates: Iterable[Numeric]):
        self._array = self._array_factory(coordinates)
        self._check_state_errors()

        self._array.flags.writeable = False

    @property
    def array(self) -> np.ndarray:
        return self._array

    @property
    def _shape(self) -> tuple[int, ]:
        return self._array.shape

    def xi(self) -> Numeric:
        return self._array[0]

    def yi(self) -> Numeric:
        return self._array[1]

    def xf(self) -> Numeric:
        return self._array[2]

    def yf(self) -> Numeric:
        return self._array[3]


def create_segment_from(coordinates: ISegment2D | Iterable[Numeric]) -> Segment2D:
    if isinstance(coordinates, Segment2D):
        return coordinates
    elif isinstance(coordinates, ISegment2D):
        return TupleSegment(Segment2D._get_coordinates_of(coordinates))
    elif isinstance(coordinates, np.ndarray | list):
        return ArraySegment(coordinates)
    else:
        return TupleSegment(coordinates)
