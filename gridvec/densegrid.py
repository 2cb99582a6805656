# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Generator, Sequence
from numbers import Integral
import logging

from .backend import ArrayNamespace, ArrayLike, DType, get_namespace, get_default_dtype, shape_size
from .coordinate import Coordinate
from .errors import DimensionMismatchError, OffsetOutOfRangeError
from .options import active_options
from .strides import check_extents, compute_strides, linear_offset, linear_offsets, check_coordinate, sequence_product

logger = logging.getLogger(__name__)

type GridKey = int | Coordinate[int] | tuple[int, ...]

class DenseGrid[T: ArrayLike]:
    """
    Dense N-dimensional grid stored in a single flat buffer. Elements are addressed either by
    a linear offset into the buffer or by a coordinate with one integer component per axis,
    which is mapped to an offset by the stride table of the grid. The buffer is allocated and
    zero filled on construction and never resized.
    """

    _namespace: ArrayNamespace[T]
    _extents: tuple[int, ...]
    _strides: tuple[int, ...]
    _storage: T

    @property
    def namespace(self) -> ArrayNamespace[T]:
        """Array namespace of the storage. Cannot be set."""
        return self._namespace

    @property
    def extents(self) -> tuple[int, ...]:
        """Number of valid positions along each axis. Cannot be set."""
        return self._extents

    @property
    def strides(self) -> tuple[int, ...]:
        """Offset increment per unit step along each axis. Cannot be set."""
        return self._strides

    @property
    def storage(self) -> T:
        """Flat buffer holding the elements. Writes into it are visible through the grid."""
        return self._storage

    @property
    def ndims(self) -> int:
        return len(self._extents)

    @property
    def size(self) -> int:
        return shape_size(self._extents)

    @property
    def dtype(self) -> DType:
        return self._storage.dtype

    def __init__(self, namespace: Any, extents: Sequence[int], dtype: DType = None) -> None:
        check_extents(extents)
        self._namespace = get_namespace(namespace)
        self._extents = tuple(int(e) for e in extents)
        self._strides = compute_strides(self._extents)
        if dtype is None:
            dtype = active_options(self._namespace).dtype
        if dtype is None:
            dtype = get_default_dtype(self._namespace)
        self._storage = self._namespace.zeros((self.size,), dtype=dtype)
        logger.debug("allocated grid with extents %s, strides %s and %d element(s)",
                     self._extents, self._strides, self.size)

    # ------------------------------------------------------------------------
    # index mapping

    def offset_of(self, coord: Coordinate[int]) -> int:
        """
        Linear offset of the coordinate. No range checking is performed, a component outside
        of its axis extent yields an offset that may lie outside of the storage or alias into
        another slice of the grid.
        """
        if coord.ndims != self.ndims:
            raise DimensionMismatchError(self.ndims, coord.ndims)
        return linear_offset(self._strides, coord)

    def offsets_of(self, coords: T) -> T:
        """Convert coordinates with shape (ndims, ...) to linear offsets with shape (...)."""
        return linear_offsets(self._strides, coords)

    def coordinates(self) -> Generator[Coordinate[int], None, None]:
        """
        All valid coordinates of the grid, the last axis varying fastest. Unless the extents read
        the same forwards and backwards, some of them map outside of the storage and some pairs
        map to the same offset.
        """
        for idxs in sequence_product(self._extents):
            yield Coordinate(idxs)

    # ------------------------------------------------------------------------
    # element access

    def get_by_offset(self, offset: int) -> Any:
        offset = self._check_offset(offset)
        return self._storage[offset]

    def set_by_offset(self, offset: int, value: Any) -> None:
        offset = self._check_offset(offset)
        self._storage[offset] = value

    def get_by_coordinate(self, coord: Coordinate[int]) -> Any:
        """
        Element at the offset of the coordinate. The stride table is built from the extents in
        axis order, so for extents that do not read the same forwards and backwards a coordinate
        within its axis extents may lie outside of the storage, which raises OffsetOutOfRangeError,
        or share its offset with another valid coordinate, e.g. (0, 2) and (1, 0) for extents (2, 3).
        """
        return self.get_by_offset(self._coordinate_offset(coord))

    def set_by_coordinate(self, coord: Coordinate[int], value: Any) -> None:
        """Write the element at the offset of the coordinate. Offsets may be shared, see get_by_coordinate."""
        self.set_by_offset(self._coordinate_offset(coord), value)

    def fill(self, value: Any) -> None:
        """Overwrite every element with the given value."""
        self._storage[...] = value

    # ------------------------------------------------------------------------
    # magic stuff

    def __getitem__(self, key: GridKey) -> Any:
        if isinstance(key, Integral):
            return self.get_by_offset(key) # type: ignore
        return self.get_by_coordinate(self._as_coordinate(key))

    def __setitem__(self, key: GridKey, value: Any) -> None:
        if isinstance(key, Integral):
            self.set_by_offset(key, value) # type: ignore
        else:
            self.set_by_coordinate(self._as_coordinate(key), value)

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"DenseGrid(extents={list(self._extents)}, strides={list(self._strides)}, dtype={self.dtype})"

    # ------------------------------------------------------------------------
    # helper

    def _check_offset(self, offset: int) -> int:
        if not isinstance(offset, Integral) or isinstance(offset, bool):
            raise TypeError(f"Offset must be an integer, got {offset!r}")
        offset = int(offset)
        if offset < 0 or offset >= self.size:
            raise OffsetOutOfRangeError(offset, self.size)
        return offset

    def _coordinate_offset(self, coord: Coordinate[int]) -> int:
        if active_options(self._namespace).check_coordinates:
            check_coordinate(self._extents, coord)
        return self.offset_of(coord)

    def _as_coordinate(self, key: Any) -> Coordinate[int]:
        if isinstance(key, Coordinate):
            return key
        if isinstance(key, tuple):
            return Coordinate(key)
        raise TypeError(f"Grid keys must be integers, tuples or coordinates, got {type(key).__name__}")
