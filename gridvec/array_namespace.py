# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Structural types for array-api compatible namespaces and their arrays."""

from typing import Any, Protocol, Sequence

type Device = Any
type DType = Any

class ArrayLike(Protocol):

    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def ndim(self) -> int: ...
    @property
    def dtype(self) -> DType: ...
    @property
    def device(self) -> Device: ...

    def __getitem__(self, key: Any, /) -> Any: ...
    def __setitem__(self, key: Any, value: Any, /) -> None: ...
    def __mul__(self, other: Any, /) -> Any: ...
    def __eq__(self, other: Any, /) -> Any: ...  # type: ignore[override]

class ArrayNamespace[T: ArrayLike](Protocol):

    def __array_namespace_info__(self) -> Any: ...

    def zeros(self, shape: int | tuple[int, ...], *, dtype: DType = None, device: Device = None) -> T: ...
    def full(self, shape: int | tuple[int, ...], fill_value: Any, *, dtype: DType = None, device: Device = None) -> T: ...
    def asarray(self, obj: Any, /, *, dtype: DType = None, device: Device = None, copy: bool | None = None) -> T: ...
    def reshape(self, x: T, /, shape: Sequence[int], *, copy: bool | None = None) -> T: ...
    def sum(self, x: T, /, *, axis: int | tuple[int, ...] | None = None, dtype: DType = None) -> T: ...
    def isdtype(self, dtype: DType, kind: Any, /) -> bool: ...
