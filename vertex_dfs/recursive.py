"""
Recursive depth-first traversals over Vertex graphs.

Functions:
    print_vertex_vals(vertex, file)          - Print every reachable value once
    reachable(vertex)                        - Set of reachable vertices
    max_value(vertex, minimum)               - Largest reachable value
    leaves(vertex)                           - Reachable vertices without neighbors
    all_odd(vertex)                          - Whether every reachable value is odd
    has_strictly_increasing_path(start, end) - Whether end is found along increasing edges

Every public function allocates its own visited set. A vertex is marked
visited on entry, before any of its neighbors is explored, so cycles and
shared sub-paths are walked once.

Recursion depth equals the longest simple path explored. For very deep graphs
use vertex_dfs.iterative, which has the same observable behavior.
"""

import logging
import sys
from typing import TextIO, TypeVar

from vertex_dfs.constants import MINIMUM_SENTINEL, RECURSION_LIMIT
from vertex_dfs.errors import MissingVertexError
from vertex_dfs.types import C
from vertex_dfs.vertex import Vertex, successors

logger = logging.getLogger(__name__)

if sys.getrecursionlimit() < RECURSION_LIMIT:
    sys.setrecursionlimit(RECURSION_LIMIT)

T = TypeVar("T")


# =============================================================================
# Printing
# =============================================================================


def print_vertex_vals(vertex: Vertex[T] | None, file: TextIO | None = None) -> None:
    """
    Prints the value of every vertex reachable from vertex, one per line.

    Each value is printed once, in visit order, even when reachable through
    several paths. Prints nothing if vertex is None.

    Args:
        vertex: The starting vertex.
        file: Output stream, sys.stdout by default.
    """
    visited: set[Vertex[T]] = set()
    _print_vertex_vals(vertex, visited, sys.stdout if file is None else file)
    logger.debug("Printed %d values reachable from %r", len(visited), vertex)


def _print_vertex_vals(
    vertex: Vertex[T] | None, visited: set[Vertex[T]], file: TextIO
) -> None:
    if vertex is None or vertex in visited:
        return

    print(vertex.data, file=file)
    visited.add(vertex)

    for neighbor in successors(vertex):
        _print_vertex_vals(neighbor, visited, file)


# =============================================================================
# Reachability
# =============================================================================


def reachable(vertex: Vertex[T] | None) -> set[Vertex[T]]:
    """
    Returns all vertices reachable from vertex, vertex included.

    Returns an empty set if vertex is None.
    """
    result: set[Vertex[T]] = set()
    _reachable(vertex, result)
    logger.debug("%d vertices reachable from %r", len(result), vertex)
    return result


def _reachable(vertex: Vertex[T] | None, visited: set[Vertex[T]]) -> None:
    # The visited set doubles as the result
    if vertex is None or vertex in visited:
        return

    visited.add(vertex)

    for neighbor in successors(vertex):
        _reachable(neighbor, visited)


def leaves(vertex: Vertex[T] | None) -> set[Vertex[T]]:
    """
    Returns the reachable vertices that have no outgoing edges.

    The starting vertex is included if it is itself a leaf. A vertex whose
    only neighbor is itself is not a leaf. Returns an empty set if vertex is None.
    """
    result: set[Vertex[T]] = set()
    _leaves(vertex, set(), result)
    logger.debug("%d leaves reachable from %r", len(result), vertex)
    return result


def _leaves(
    vertex: Vertex[T] | None, visited: set[Vertex[T]], result: set[Vertex[T]]
) -> None:
    if vertex is None or vertex in visited:
        return

    visited.add(vertex)

    if not successors(vertex):
        result.add(vertex)

    for neighbor in successors(vertex):
        _leaves(neighbor, visited, result)


# =============================================================================
# Numeric
# =============================================================================


def max_value(
    vertex: Vertex[C] | None, minimum: C | float = MINIMUM_SENTINEL
) -> C | float:
    """
    Returns the largest value among the vertices reachable from vertex.

    Args:
        vertex: The starting vertex.
        minimum: Returned as is when vertex is None. Never compared against
            the values of the graph.

    Returns:
        The maximum reachable value, or minimum if vertex is None.
    """
    if vertex is None:
        return minimum

    largest = _max_value(vertex, set())
    logger.debug("Largest value reachable from %r: %r", vertex, largest)
    return largest


def _max_value(vertex: Vertex[C], visited: set[Vertex[C]]) -> C:
    largest = vertex.data
    visited.add(vertex)

    for neighbor in successors(vertex):
        if neighbor is None or neighbor in visited:
            continue
        largest = max(largest, _max_value(neighbor, visited))

    return largest


def all_odd(vertex: Vertex[int] | None) -> bool:
    """
    Returns whether every vertex reachable from vertex holds an odd value.

    Every reachable vertex is visited even once an even value has been seen.
    Returns True if vertex is None.
    """
    odd = _all_odd(vertex, set())
    logger.debug("All values reachable from %r odd: %s", vertex, odd)
    return odd


def _all_odd(vertex: Vertex[int] | None, visited: set[Vertex[int]]) -> bool:
    if vertex is None or vertex in visited:
        return True

    visited.add(vertex)
    odd = vertex.data % 2 != 0

    for neighbor in successors(vertex):
        # Recurse first: the running result must not skip visitation
        odd = _all_odd(neighbor, visited) and odd

    return odd


def has_strictly_increasing_path(start: Vertex[C] | None, end: Vertex[C] | None) -> bool:
    """
    Determines whether end can be reached from start along strictly increasing values.

    Vertices are marked visited on entry and a single visited set is shared by
    the whole search. Every neighbor is explored, but its result only counts
    when the edge leading to it is increasing. A vertex reached first through a
    non-increasing edge is therefore not explored again, and some increasing
    paths through it are not found.

    Args:
        start: The starting vertex.
        end: The target vertex, compared by identity.

    Returns:
        True if an increasing path was found. start is end counts as a path.

    Raises:
        MissingVertexError: If start or end is None.
    """
    if start is None or end is None:
        raise MissingVertexError(
            f"Both endpoints are required, got start={start!r} and end={end!r}"
        )

    found = _has_strictly_increasing_path(start, end, set())
    logger.debug("Increasing path from %r to %r: %s", start, end, found)
    return found


def _has_strictly_increasing_path(
    current: Vertex[C] | None, end: Vertex[C], visited: set[Vertex[C]]
) -> bool:
    if current is None or current in visited:
        return False

    visited.add(current)
    if current is end:
        return True

    for neighbor in successors(current):
        found = _has_strictly_increasing_path(neighbor, end, visited)
        if found and current.data < neighbor.data:
            return True

    return False


__all__ = [
    "print_vertex_vals",
    "reachable",
    "max_value",
    "leaves",
    "all_odd",
    "has_strictly_increasing_path",
]
