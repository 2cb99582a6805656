# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import sys
from typing import overload, SupportsIndex, Iterator, Sequence, Any
from dataclasses import dataclass

@dataclass(frozen=True, init=False)
class SequenceOf[T](Sequence):
    """Immutable sequence whose items are fixed at construction."""

    _seq_data: tuple[T, ...]

    def __init__(self, data: Sequence[T]) -> None:
        object.__setattr__(self, "_seq_data", tuple(data))

    #-------------------------------------------------------------------------
    #container behaviour

    def __len__(self) -> int:
        return len(self._seq_data)

    def __iter__(self) -> Iterator[T]:
        return self._seq_data.__iter__()

    def __reversed__(self) -> Iterator[T]:
        return self._seq_data.__reversed__()

    @overload
    def __getitem__(self, idx: SupportsIndex) -> T: ...
    @overload
    def __getitem__(self, idx: slice) -> Sequence[T]: ...
    #implementation
    def __getitem__(self, idx: SupportsIndex | slice) -> T | Sequence[T]:
        return self._seq_data[idx]

    def __contains__(self, item: Any) -> bool:
        return item in self._seq_data

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, type(self))\
               and self._seq_data == other._seq_data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._seq_data))

    def index(self, value: T, start: SupportsIndex = 0, stop: SupportsIndex = sys.maxsize) -> int:
        return self._seq_data.index(value, start, stop)

    def count(self, value: T) -> int:
        return self._seq_data.count(value)
