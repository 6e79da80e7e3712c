"""Cell base classes

A cell knows its downstream cells only through weak references,
 while a derived cell owns its upstream cells through the closure of its function.
Invalidation flows downstream along the weak references;
 dead references are pruned when a downstream list is traversed.
"""

import weakref

from .. import config
from .box import Box
from .status import CellStatusEnum, TypeMismatch

import logging
logger = logging.getLogger("lazycell")

def print_debug(*args):
    msg = " ".join([str(arg) for arg in args])
    logger.debug(msg)

cell_counter = 0


class Cell:
    """Base class for all cells.

Holds ``downstream``, a list of weak references to dependent cells,
in insertion order and possibly with duplicates."""

    _celltype_name = "base"

    def __init__(self):
        global cell_counter
        cell_counter += 1
        self._counter = cell_counter
        self.downstream = []

    def add_downstream(self, cell):
        assert isinstance(cell, Cell), cell
        self.downstream.append(weakref.ref(cell))

    def release(self):
        """Clear the cached state of this cell only. Must be idempotent."""

    def unset(self, invalidate_self=True):
        """Invalidate this cell (optionally) and all cells downstream of it"""
        if config.deduplicate_invalidation:
            visited = set()
        else:
            visited = None
        print_debug("invalidate downstream of", self)
        self._unset(invalidate_self, visited)

    def _unset(self, invalidate_self, visited):
        if invalidate_self:
            if visited is not None:
                if id(self) in visited:
                    return
                visited.add(id(self))
            self.release()
        downstream = self.downstream
        pos = 0
        while pos < len(downstream):
            cell = downstream[pos]()
            if cell is None:
                print_debug("prune dead downstream reference of", self)
                downstream.pop(pos)
                continue
            cell._unset(True, visited)
            pos += 1

    def get(self):
        raise NotImplementedError

    def __str__(self):
        return "lazycell %s cell #%d" % (self._celltype_name, self._counter)

    def __repr__(self):
        return "<%s>" % str(self)


class DataCell(Cell):
    """A cell with a cached value that can be dumped and loaded.

The cache is either None (uncomputed) or a Box.
``dump()`` returns the current Box (or None) without copying;
``load(handle)`` installs a handle directly, without any invalidation."""

    _box = None

    def __init__(self, celltype=None):
        super().__init__()
        self._celltype = celltype

    @property
    def celltype(self):
        return self._celltype

    @property
    def cached(self):
        return self._box is not None

    @property
    def status(self):
        if self._box is None:
            return CellStatusEnum.UNCOMPUTED
        return CellStatusEnum.CACHED

    def release(self):
        self._box = None

    def _check_value(self, value):
        if self._celltype is not None and not isinstance(value, self._celltype):
            raise TypeMismatch(
                "%s expects %s, not %s" % (self, self._celltype.__name__, type(value).__name__)
            )

    def _install(self, value):
        self._check_value(value)
        self._box = Box(value)

    def load(self, handle):
        if handle is not None:
            if not isinstance(handle, Box):
                raise TypeMismatch("%s cannot load %s" % (self, type(handle).__name__))
            if self._celltype is not None and not issubclass(handle.celltype, self._celltype):
                raise TypeMismatch(
                    "%s expects %s, not %s" % (self, self._celltype.__name__, handle.celltype.__name__)
                )
        self._box = handle

    def dump(self):
        return self._box
