"""
Explicit-stack depth-first traversals over Vertex graphs.

Same functions, signatures and results as vertex_dfs.recursive, without
growing the interpreter stack. Each frame holds a vertex and an iterator over
its remaining neighbors, so vertices are entered in exactly the order the
recursive engine enters them, and marked visited on entry.

Functions:
    depth_first_preorder(vertex, visited)    - Yields unvisited reachable vertices, marking them
    print_vertex_vals(vertex, file)          - Print every reachable value once
    reachable(vertex)                        - Set of reachable vertices
    max_value(vertex, minimum)               - Largest reachable value
    leaves(vertex)                           - Reachable vertices without neighbors
    all_odd(vertex)                          - Whether every reachable value is odd
    has_strictly_increasing_path(start, end) - Whether end is found along increasing edges
"""

import logging
import sys
from collections.abc import Iterator
from typing import TextIO, TypeAlias, TypeVar

from vertex_dfs.constants import MINIMUM_SENTINEL
from vertex_dfs.errors import MissingVertexError
from vertex_dfs.types import C
from vertex_dfs.vertex import Vertex, successors

logger = logging.getLogger(__name__)

T = TypeVar("T")

Frame: TypeAlias = tuple[Vertex[T], Iterator[Vertex[T] | None]]


def depth_first_preorder(
    vertex: Vertex[T] | None, visited: set[Vertex[T]]
) -> Iterator[Vertex[T]]:
    """
    Yields every vertex reachable from vertex that is not yet in visited.

    Vertices are added to visited as they are yielded, parent before children,
    neighbors in list order.
    """
    if vertex is None or vertex in visited:
        return

    visited.add(vertex)
    yield vertex

    stack: list[Iterator[Vertex[T] | None]] = [iter(successors(vertex))]
    while stack:
        for neighbor in stack[-1]:
            if neighbor is None or neighbor in visited:
                continue
            visited.add(neighbor)
            yield neighbor
            stack.append(iter(successors(neighbor)))
            break
        else:
            stack.pop()


def print_vertex_vals(vertex: Vertex[T] | None, file: TextIO | None = None) -> None:
    """Prints the value of every vertex reachable from vertex, one per line."""
    out = sys.stdout if file is None else file
    visited: set[Vertex[T]] = set()
    for current in depth_first_preorder(vertex, visited):
        print(current.data, file=out)
    logger.debug("Printed %d values reachable from %r", len(visited), vertex)


def reachable(vertex: Vertex[T] | None) -> set[Vertex[T]]:
    """Returns all vertices reachable from vertex, vertex included."""
    result: set[Vertex[T]] = set()
    for _ in depth_first_preorder(vertex, result):
        pass
    logger.debug("%d vertices reachable from %r", len(result), vertex)
    return result


def leaves(vertex: Vertex[T] | None) -> set[Vertex[T]]:
    """Returns the reachable vertices that have no outgoing edges."""
    result = {
        current
        for current in depth_first_preorder(vertex, set())
        if not successors(current)
    }
    logger.debug("%d leaves reachable from %r", len(result), vertex)
    return result


def max_value(
    vertex: Vertex[C] | None, minimum: C | float = MINIMUM_SENTINEL
) -> C | float:
    """Returns the largest reachable value, or minimum if vertex is None."""
    if vertex is None:
        return minimum

    preorder = depth_first_preorder(vertex, set())
    largest = next(preorder).data
    for current in preorder:
        largest = max(largest, current.data)
    logger.debug("Largest value reachable from %r: %r", vertex, largest)
    return largest


def all_odd(vertex: Vertex[int] | None) -> bool:
    """Returns whether every reachable vertex holds an odd value."""
    odd = True
    for current in depth_first_preorder(vertex, set()):
        odd = odd and current.data % 2 != 0
    logger.debug("All values reachable from %r odd: %s", vertex, odd)
    return odd


def has_strictly_increasing_path(start: Vertex[C] | None, end: Vertex[C] | None) -> bool:
    """
    Determines whether end can be reached from start along strictly increasing values.

    Same search as vertex_dfs.recursive.has_strictly_increasing_path: every
    neighbor is explored with a single shared visited set, and a neighbor's
    result only counts when the edge leading to it is increasing.

    Raises:
        MissingVertexError: If start or end is None.
    """
    if start is None or end is None:
        raise MissingVertexError(
            f"Both endpoints are required, got start={start!r} and end={end!r}"
        )

    visited: set[Vertex[C]] = {start}
    if start is end:
        return True

    stack: list[Frame[C]] = [(start, iter(successors(start)))]
    # Result of the frame that just finished: (vertex, found)
    returned: tuple[Vertex[C], bool] | None = None

    while stack:
        current, neighbors = stack[-1]

        if returned is not None:
            child, child_found = returned
            returned = None
            if child_found and current.data < child.data:
                stack.pop()
                returned = (current, True)
                continue

        for neighbor in neighbors:
            if neighbor is None or neighbor in visited:
                continue
            visited.add(neighbor)
            if neighbor is end:
                returned = (neighbor, True)
            else:
                stack.append((neighbor, iter(successors(neighbor))))
            break
        else:
            stack.pop()
            returned = (current, False)

    assert returned is not None
    logger.debug("Increasing path from %r to %r: %s", start, end, returned[1])
    return returned[1]


__all__ = [
    "Frame",
    "depth_first_preorder",
    "print_vertex_vals",
    "reachable",
    "max_value",
    "leaves",
    "all_odd",
    "has_strictly_increasing_path",
]
