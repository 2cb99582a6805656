# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Any, Self
import logging
import threading

from .backend import ArrayNamespace

logger = logging.getLogger(__name__)

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace):
        self.key = (namespace, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        logger.debug("entered %r", self)
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]
        logger.debug("left %r", self)

class GridOptions(Options):
    """
    Context manager for grid options. Within the context every grid of the namespace
    allocated without an explicit dtype uses the given dtype, and coordinate access is
    checked against the extents of the grid if check_coordinates is set.
    """

    #: Element dtype of newly allocated grids. None selects the default floating dtype of the namespace.
    dtype: Any
    #: Validate each coordinate component against its axis extent before computing the offset.
    check_coordinates: bool

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            dtype: Any = None,
            check_coordinates: bool = True):
        self.dtype = dtype
        self.check_coordinates = check_coordinates
        super().__init__(namespace)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, GridOptions)\
               and self.key == other.key\
               and self.dtype == other.dtype\
               and self.check_coordinates == other.check_coordinates

    def __hash__(self) -> int:
        return hash((self.key, self.check_coordinates))

    def __repr__(self) -> str:
        return f"GridOptions(dtype={self.dtype}, check_coordinates={self.check_coordinates})"

_opts: dict[Any, Options] = {}

def get_options(namespace: ArrayNamespace) -> GridOptions:
    global _opts
    key = (namespace, threading.get_ident())
    if key in _opts:
        return _opts[key] # type: ignore
    else:
        raise KeyError("No options set for the current thread.")

def set_options(opts: GridOptions) -> None:
    global _opts
    _opts[opts.key] = opts
    logger.debug("set %r", opts)

def active_options(namespace: ArrayNamespace) -> GridOptions:
    """The options set for the namespace in the current thread, or the defaults if none are set."""
    try:
        return get_options(namespace)
    except KeyError:
        return GridOptions(namespace=namespace)
