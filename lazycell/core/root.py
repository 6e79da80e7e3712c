from .cell import DataCell, print_debug
from .status import ValueAbsent


class RootCell(DataCell):
    """Leaf cell with an externally settable value.

Use ``cell.get()`` to read the value and ``cell.set(value)`` to change it.
Changing the value invalidates every cell downstream."""

    _celltype_name = "root"

    def __init__(self, value, celltype=None):
        super().__init__(celltype)
        self._install(value)

    def get(self):
        box = self._box
        if box is None:
            raise ValueAbsent(str(self))
        return box.value

    def set(self, value):
        self._check_value(value)
        print_debug("set", self)
        self.unset()
        self._install(value)
        return self
