# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

class GridError(Exception):
    """Base class of all errors raised by gridvec."""

class DimensionMismatchError(GridError, ValueError):
    """Coordinates or a coordinate and a grid do not share the same number of dimensions."""

    def __init__(self, expected: int, got: int) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"Expected {expected} dimension(s), got {got}")

class OffsetOutOfRangeError(GridError, IndexError):
    """A raw linear offset lies outside the storage of a grid."""

    def __init__(self, offset: int, size: int) -> None:
        self.offset = offset
        self.size = size
        super().__init__(f"Offset {offset} out of range for storage of size {size}")

class CoordinateOutOfRangeError(GridError, IndexError):
    """A coordinate component lies outside the extent of its axis."""

    def __init__(self, axis: int, value: int, extent: int) -> None:
        self.axis = axis
        self.value = value
        self.extent = extent
        super().__init__(f"Component {value} of axis {axis} out of range [0, {extent})")
