# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Sequence

from .backend import ArrayNamespace, DType, get_namespace, get_index_dtype
from .coordinate import Coordinate
from .densegrid import DenseGrid
from .options import GridOptions, get_options as _get_options, set_options as _set_options

class GridVec[NDArray: Any]:

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    #: Integer type used for vectorised offsets.
    index_type: Any

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))
        object.__setattr__(self, "index_type", get_index_dtype(self.namespace))

        _set_options(self.options())

    #-------------------------------------------------------------------------------------------------
    # coordinates

    def coordinate[T](self, *values: T) -> Coordinate[T]:
        """
        Coordinate built from the given values, positionally.
        """
        return Coordinate(values)

    def zeros[T](self, ndims: int, scalar_type: Callable[[], T] = int) -> Coordinate[T]:
        """
        Coordinate with ndims components, each set to the default value of the scalar type.
        """
        return Coordinate.zeros(ndims, scalar_type)

    #-------------------------------------------------------------------------------------------------
    # grids

    def grid(self, extents: Sequence[int], dtype: DType = None) -> DenseGrid[NDArray]:
        """
        Dense grid with the given extents, zero filled. Without a dtype the dtype of the
        active options is used, falling back to the default floating dtype of the namespace.
        """
        return DenseGrid(self.namespace, extents, dtype)

    #-------------------------------------------------------------------------------------------------
    # options

    def options(self, dtype: DType = None, check_coordinates: bool = True) -> GridOptions:
        """
        Grid options for this namespace. Use them as a context manager or pass them to set_options.
        """
        return GridOptions(namespace=self.namespace, dtype=dtype, check_coordinates=check_coordinates)

    def get_options(self) -> GridOptions:
        """Options active in the current thread."""
        return _get_options(self.namespace)

    def set_options(self, opts: GridOptions) -> None:
        """Set options for the current thread."""
        _set_options(opts)
