"""Immutable value handles.

A Box is what a data cell caches, and what it hands out in a snapshot.
Boxes are shared, never copied: every change of a cell value creates a new Box.
"""

import numpy as np

from .. import config


def _freeze(value):
    if not config.freeze_arrays or not isinstance(value, np.ndarray):
        return value
    # a read-only array that owns its data cannot change behind our back
    if value.flags.writeable or not value.flags.owndata:
        value = value.copy()
        value.flags.writeable = False
    return value


class Box:
    __slots__ = ("_value", "_celltype")

    def __init__(self, value, celltype=None):
        if celltype is None:
            celltype = type(value)
        object.__setattr__(self, "_value", _freeze(value))
        object.__setattr__(self, "_celltype", celltype)

    @property
    def value(self):
        return self._value

    @property
    def celltype(self):
        return self._celltype

    def __setattr__(self, attr, value):
        raise AttributeError("Box is immutable")

    def __delattr__(self, attr):
        raise AttributeError("Box is immutable")

    def __repr__(self):
        return "Box(%r, %s)" % (self._value, self._celltype.__name__)
