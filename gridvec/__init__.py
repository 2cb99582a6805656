# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .gridvec import GridVec
from .coordinate import Coordinate, add, subtract, scale, zeros, coordinate
from .densegrid import DenseGrid
from .errors import GridError, DimensionMismatchError, OffsetOutOfRangeError, CoordinateOutOfRangeError

__all__ = ["GridVec", "Coordinate", "DenseGrid",
           "add", "subtract", "scale", "zeros", "coordinate",
           "GridError", "DimensionMismatchError", "OffsetOutOfRangeError", "CoordinateOutOfRangeError"]
