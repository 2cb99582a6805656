# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Generator, Sequence
from itertools import product
from numbers import Integral

from .backend import ArrayNamespace, ArrayLike, namespace_of_arrays, get_index_dtype, device
from .coordinate import Coordinate
from .errors import DimensionMismatchError, CoordinateOutOfRangeError

def check_extents(extents: Sequence[int]) -> None:
    for axis, extent in enumerate(extents):
        if not isinstance(extent, Integral) or isinstance(extent, bool):
            raise ValueError(f"Extent of axis {axis} must be an integer, got {extent!r}")
        if extent < 0:
            raise ValueError(f"Extent of axis {axis} must be non-negative, got {extent}")

def compute_strides(extents: Sequence[int]) -> tuple[int, ...]:
    """
    Stride table of a grid. The last axis has stride one and each preceding stride is the
    running product of the extents taken from the first axis on, i.e.
    strides[n-1-i] = prod(extents[:i]).
    """
    ndims = len(extents)
    strides = [0] * ndims
    factor = 1
    for i in range(ndims):
        strides[ndims-i-1] = factor
        factor *= int(extents[i])
    return tuple(strides)

def linear_offset(strides: Sequence[int], coord: Sequence[int]) -> int:
    """Linear offset of a coordinate, without any range checking."""
    if len(coord) != len(strides):
        raise DimensionMismatchError(len(strides), len(coord))
    offset = 0
    for i in reversed(range(len(strides))):
        if not isinstance(coord[i], Integral):
            raise TypeError(f"Component of axis {i} must be an integer, got {coord[i]!r}")
        offset += strides[i] * int(coord[i])
    return offset

def linear_offsets[T: ArrayLike](strides: Sequence[int], coords: T) -> T:
    """
    Convert coordinates with shape (len(strides), ...) to linear offsets with shape (...).
    """
    xp = namespace_of_arrays(coords)
    int_type = get_index_dtype(xp)
    if len(coords.shape) == 0 or coords.shape[0] != len(strides):
        raise ValueError(f"Expect a tensor of shape ({len(strides)}, ...), got {coords.shape}")
    _check_dtype(xp, coords)
    trans = xp.asarray(list(strides),
                       dtype=int_type,
                       device=device(coords))
    coords = xp.asarray(coords, dtype=int_type)
    offsets = coords * xp.reshape(trans, (len(strides), *[1]*(len(coords.shape)-1)))
    return xp.sum(offsets, axis=0, dtype=int_type)

def _check_dtype(xp: ArrayNamespace, inp: ArrayLike) -> None:
    if not xp.isdtype(inp.dtype, "integral"):
        raise ValueError(f"Input should have an integer dtype, got {inp.dtype}")

def check_coordinate(extents: Sequence[int], coord: Coordinate) -> None:
    if coord.ndims != len(extents):
        raise DimensionMismatchError(len(extents), coord.ndims)
    for axis, (value, extent) in enumerate(zip(coord, extents)):
        if not isinstance(value, Integral):
            raise TypeError(f"Component of axis {axis} must be an integer, got {value!r}")
        if not 0 <= value < extent:
            raise CoordinateOutOfRangeError(axis, value, extent)

def sequence_product(seq: Sequence[int]) -> Generator[tuple[int, ...], None, None]:
    ranges = [range(s) for s in seq]
    for idxs in product(*ranges):
        yield idxs
