# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from typing import Any, Callable, Sequence
from numbers import Number
from dataclasses import dataclass
from types import NoneType

from .backend import ArrayNamespace, ArrayLike
from .errors import DimensionMismatchError
from .sequenceof import SequenceOf

@dataclass(frozen=True, init=False)
class Coordinate[T](SequenceOf[T]):
    """
    Fixed length tuple of scalars with componentwise arithmetic. The number of components
    is fixed at construction, and every binary operation requires both operands to have the
    same number of components. Coordinates are immutable values, all operations return new
    instances.
    """

    #: numpy defers binary operators with a scalar on the left to the coordinate
    __array_ufunc__ = None

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, values: Sequence[T], /, ndims: int | NoneType = None) -> None:
        if ndims is not None and len(values) != ndims:
            raise DimensionMismatchError(ndims, len(values))
        super().__init__(values)

    @classmethod
    def zeros(cls, ndims: int, scalar_type: Callable[[], T] = int) -> Coordinate[T]:
        """Coordinate with every component set to the default value of the scalar type."""
        if ndims < 0:
            raise ValueError(f"Number of dimensions must be non-negative, got {ndims}")
        return cls([scalar_type() for _ in range(ndims)])

    #-------------------------------------------------------------------------
    #methods

    @property
    def ndims(self) -> int:
        """Number of components."""
        return len(self)

    def to_array[A: ArrayLike](self, xp: ArrayNamespace[A], dtype: Any = None) -> A:
        """The components as a one dimensional array of the given namespace."""
        return xp.asarray(list(self._seq_data), dtype=dtype)

    #-------------------------------------------------------------------------
    #arithmetic

    def __add__(self, other: Any) -> Coordinate[T]:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Any) -> Coordinate[T]:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other: Any) -> Coordinate[T]:
        if not isinstance(other, Number):
            return NotImplemented
        return scale(self, other) # type: ignore

    __rmul__ = __mul__

    #-------------------------------------------------------------------------
    #some magic

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Coordinate)\
               and len(self) == len(other)\
               and all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(self._seq_data)

    def __repr__(self) -> str:
        return f"Coordinate({list(self._seq_data)})"

    __str__ = __repr__

def check_ndims(*coords: Coordinate) -> None:
    ref = coords[0]
    for coord in coords[1:]:
        if coord.ndims != ref.ndims:
            raise DimensionMismatchError(ref.ndims, coord.ndims)

def zeros[T](ndims: int, scalar_type: Callable[[], T] = int) -> Coordinate[T]:
    return Coordinate.zeros(ndims, scalar_type)

def coordinate[T](*values: T) -> Coordinate[T]:
    return Coordinate(values)

def add[T](a: Coordinate[T], b: Coordinate[T]) -> Coordinate[T]:
    """Componentwise sum."""
    check_ndims(a, b)
    return Coordinate([x + y for x, y in zip(a, b)]) # type: ignore

def subtract[T](a: Coordinate[T], b: Coordinate[T]) -> Coordinate[T]:
    """Componentwise difference."""
    check_ndims(a, b)
    return Coordinate([x - y for x, y in zip(a, b)]) # type: ignore

def scale[T](a: Coordinate[T], k: T) -> Coordinate[T]:
    """Componentwise product with a scalar."""
    return Coordinate([x * k for x in a]) # type: ignore
