# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from math import prod
from typing import Any, Sequence
import array_api_compat as api
from array_api_compat import device

from .array_namespace import ArrayNamespace, ArrayLike, Device, DType


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError:
            raise TypeError("Provided object is not a recognized array or namespace.")
    return api.array_namespace(obj) # type: ignore

def namespace_of_arrays[T: ArrayLike](*arrays: T) -> ArrayNamespace[T]:
    return api.array_namespace(*arrays) # type: ignore

def get_index_dtype(xp: ArrayNamespace) -> Any:
    # offsets of negative coordinates are negative, so only signed types qualify
    info = xp.__array_namespace_info__()
    dtypes = info.dtypes(kind=None)
    for name in ["int64", "int32", "int16"]:
        if name in dtypes:
            return dtypes[name]
    raise ValueError("No suitable index dtype found")

def get_default_dtype(xp: ArrayNamespace) -> Any:
    info = xp.__array_namespace_info__()
    return info.default_dtypes()["real floating"]

def shape_size(shape: Sequence[int | None]) -> int:
    if any(s is None for s in shape):
        raise ValueError("Shape contains None dimension(s), cannot compute size.")
    return prod(s for s in shape) # type: ignore

__all__ = ["ArrayNamespace", "ArrayLike", "Device", "DType", "device",
           "get_namespace", "namespace_of_arrays", "get_index_dtype",
           "get_default_dtype", "shape_size"]
