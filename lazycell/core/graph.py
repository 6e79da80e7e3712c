"""Cell registries and snapshots

A Graph holds weak references to data cells.
``graph.dump()`` captures the cached value of every live cell at once,
``graph.load(snapshot)`` puts them all back, without triggering invalidation.
"""

import weakref
from contextlib import contextmanager

from .cell import DataCell, print_debug


class Snapshot:
    """Point-in-time capture of a Graph.
A list of (weak reference to a data cell, handle) pairs."""

    def __init__(self, entries=None):
        self.entries = list(entries) if entries is not None else []

    def append(self, ref, handle):
        self.entries.append((ref, handle))

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __repr__(self):
        return "<Snapshot of %d cells>" % len(self.entries)


class Graph:
    """Weak registry of data cells, for snapshot and restore"""

    def __init__(self):
        self.nodes = []

    def add(self, cell):
        if not isinstance(cell, DataCell):
            raise TypeError(type(cell))
        self.nodes.append(weakref.ref(cell))

    def __len__(self):
        return len(self.nodes)

    def cells(self):
        """Yield the live registered cells, pruning dead ones"""
        nodes = self.nodes
        pos = 0
        while pos < len(nodes):
            cell = nodes[pos]()
            if cell is None:
                nodes.pop(pos)
                continue
            yield cell
            pos += 1

    def dump(self):
        result = Snapshot()
        nodes = self.nodes
        pos = 0
        while pos < len(nodes):
            ref = nodes[pos]
            cell = ref()
            if cell is None:
                nodes.pop(pos)
                continue
            result.append(ref, cell.dump())
            pos += 1
        print_debug("dump", len(result), "cells")
        return result

    def load(self, snapshot):
        entries = snapshot.entries
        pos = 0
        while pos < len(entries):
            ref, handle = entries[pos]
            cell = ref()
            if cell is None:
                entries.pop(pos)
                continue
            cell.load(handle)
            pos += 1
        print_debug("load", len(entries), "cells")


default_graph = Graph()
_active_graph = default_graph


def current_graph():
    return _active_graph


def use_graph(graph):
    """Make ``graph`` the active graph for cells constructed from now on.
    Returns the previously active graph."""
    global _active_graph
    if not isinstance(graph, Graph):
        raise TypeError(type(graph))
    old_graph = _active_graph
    _active_graph = graph
    return old_graph


@contextmanager
def graph_context(graph):
    """Make ``graph`` the active graph within a with-block"""
    old_graph = use_graph(graph)
    try:
        yield graph
    finally:
        use_graph(old_graph)
