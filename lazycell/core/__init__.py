from .status import CellStatusEnum, ValueAbsent, TypeMismatch, ConfigurationError
from .box import Box
from .cell import Cell, DataCell
from .root import RootCell
from .node import MemoCell
from .path import PassCell
from .graph import Graph, Snapshot, default_graph, current_graph, use_graph, graph_context
from .construct import Root, Node, Path, function_wrapper
