# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of gridvec."""

from .coordinate import Coordinate
from .densegrid import DenseGrid, GridKey
from .options import Options, GridOptions
from .errors import GridError, DimensionMismatchError, OffsetOutOfRangeError, CoordinateOutOfRangeError

from .gridvec import GridVec
