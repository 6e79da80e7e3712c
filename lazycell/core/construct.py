"""Construction of cells

``Root(value)`` creates an externally settable cell.
``Node(function, *upstream)`` and ``Path(function, *upstream)`` create derived cells;
 the function receives the values of the upstream cells, in the same order.
"""

from .cell import Cell
from .root import RootCell
from .node import MemoCell
from .path import PassCell
from . import graph as _graph


def function_wrapper(function, *args):
    """Bind ``function`` to upstream cells, giving a function without arguments"""
    if not callable(function):
        raise TypeError("function must be callable, not %s" % type(function).__name__)
    for arg in args:
        if not isinstance(arg, Cell):
            raise TypeError("upstream must be a cell, not %s" % type(arg).__name__)

    def wrapped():
        return function(*[arg.get() for arg in args])

    return wrapped


def _register(cell, graph):
    if graph is None:
        graph = _graph.current_graph()
    graph.add(cell)


def Root(value, *, celltype=None, graph=None):
    result = RootCell(value, celltype=celltype)
    _register(result, graph)
    return result


def Node(function, *args, celltype=None, graph=None):
    f = function_wrapper(function, *args)
    result = MemoCell(f, celltype=celltype)
    for arg in args:
        arg.add_downstream(result)
    _register(result, graph)
    return result


def Path(function, *args):
    f = function_wrapper(function, *args)
    result = PassCell(f)
    for arg in args:
        arg.add_downstream(result)
    return result
