"""
Depth-first traversals over in-memory directed graphs of labeled vertices.

**Vertices** (vertex.py)
    Caller-owned nodes compared by identity, and helpers building them.
    - Vertex(data, neighbors)
    - from_adjacency(parent_to_children) -> {value: Vertex}
    - from_adjacency_matrix(values, matrix) -> [Vertex]

**Recursive engine** (recursive.py)
    The traversals exported at package level.
    - print_vertex_vals, reachable, max_value, leaves, all_odd,
      has_strictly_increasing_path

**Explicit-stack engine** (iterative.py)
    The same traversals for graphs deeper than the recursion limit.
"""

from . import iterative, recursive
from .errors import MissingVertexError
from .recursive import (
    all_odd,
    has_strictly_increasing_path,
    leaves,
    max_value,
    print_vertex_vals,
    reachable,
)
from .types import Comparable
from .vertex import Vertex, from_adjacency, from_adjacency_matrix, successors

__version__ = "0.1.0"

__all__ = [
    # Vertices
    "Vertex",
    "successors",
    "from_adjacency",
    "from_adjacency_matrix",
    # Traversals
    "print_vertex_vals",
    "reachable",
    "max_value",
    "leaves",
    "all_odd",
    "has_strictly_increasing_path",
    # Engines
    "recursive",
    "iterative",
    # Types and errors
    "Comparable",
    "MissingVertexError",
]
