from .cell import DataCell, print_debug


class MemoCell(DataCell):
    """Derived cell that caches the result of its function.

The function takes no arguments; it reads the upstream cells that it has captured.
The cached value is kept until an upstream cell is invalidated."""

    _celltype_name = "memo"

    def __init__(self, function, celltype=None):
        super().__init__(celltype)
        self._function = function

    def get(self):
        box = self._box
        if box is None:
            print_debug("compute", self)
            try:
                value = self._function()
            except Exception as exc:
                print_debug("compute failed", self, type(exc).__name__)
                raise
            self._install(value)
            box = self._box
        return box.value
