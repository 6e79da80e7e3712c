# pylint: disable=wrong-import-position
"""lazycell: demand-driven incremental computation with memoized cells

# Copyright (c) 2016-2024, INSERM, CNRS and project contributors

# The MIT License (MIT)

# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:

# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.

# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
"""

__version__ = "0.1"


import logging

logger = logging.getLogger(__name__)

from .core import (
    Cell,
    DataCell,
    RootCell,
    MemoCell,
    PassCell,
    Box,
    Graph,
    Snapshot,
    Root,
    Node,
    Path,
    default_graph,
    current_graph,
    use_graph,
    graph_context,
    CellStatusEnum,
    ValueAbsent,
    TypeMismatch,
    ConfigurationError,
)
from . import config

__all__ = [
    "config",
    "Cell",
    "DataCell",
    "RootCell",
    "MemoCell",
    "PassCell",
    "Box",
    "Graph",
    "Snapshot",
    "Root",
    "Node",
    "Path",
    "default_graph",
    "current_graph",
    "use_graph",
    "graph_context",
    "CellStatusEnum",
    "ValueAbsent",
    "TypeMismatch",
    "ConfigurationError",
]
