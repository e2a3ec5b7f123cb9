"""
Vertex entity and graph construction helpers.

A graph is just a collection of caller-owned Vertex objects pointing at each
other through their neighbor lists. Vertices compare and hash by identity, so
sets of vertices never merge two vertices holding equal data.

Functions:
    successors(vertex)                    - Neighbors of a vertex, () if absent
    from_adjacency(parent_to_children)    - Build vertices from an adjacency list
    from_adjacency_matrix(values, matrix) - Build vertices from an adjacency matrix
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

import numpy as np
from numpy.typing import ArrayLike

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(eq=False, slots=True)
class Vertex(Generic[T]):
    """
    A node holding a value and an ordered list of outgoing edges.

    Duplicate neighbors and self-references are allowed. A neighbor list of
    None is read as empty by every traversal.
    """

    data: T
    neighbors: list[Vertex[T]] | None = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Vertex({self.data!r})"


def successors(vertex: Vertex[T]) -> Sequence[Vertex[T]]:
    """Returns the outgoing neighbors of a vertex, treating None as empty."""
    return vertex.neighbors or ()


def from_adjacency(
    parent_to_children: Mapping[T, Sequence[T]],
) -> dict[T, Vertex[T]]:
    """
    Builds one vertex per distinct value of an adjacency list.

    Args:
        parent_to_children: Graph as adjacency list (value -> ordered neighbor values).
            Values that only appear as children still get a vertex.

    Returns:
        Mapping from each value to its freshly built vertex.

    Example:
        >>> vertices = from_adjacency({1: [2], 2: [3]})
        >>> vertices[1].neighbors
        [Vertex(2)]
    """
    vertices: dict[T, Vertex[T]] = {}

    def vertex_for(value: T) -> Vertex[T]:
        if value not in vertices:
            vertices[value] = Vertex(value)
        return vertices[value]

    for parent, children in parent_to_children.items():
        vertex = vertex_for(parent)
        vertex.neighbors = [vertex_for(child) for child in children]

    logger.debug("Built %d vertices from adjacency list", len(vertices))
    return vertices


def from_adjacency_matrix(values: Sequence[T], matrix: ArrayLike) -> list[Vertex[T]]:
    """
    Builds vertices from a square adjacency matrix.

    A non-zero entry matrix[i, j] is an edge from values[i] to values[j].
    Neighbors are ordered by column index.

    Args:
        values: Data of each vertex, in row order.
        matrix: Square array-like of shape (len(values), len(values)).

    Returns:
        The vertices, in the same order as values.

    Raises:
        ValueError: If the matrix is not square or does not match values.
    """
    adjacency = np.asarray(matrix)
    if adjacency.ndim != 2 or adjacency.shape[0] != adjacency.shape[1]:
        raise ValueError(f"Adjacency matrix must be square, got shape {adjacency.shape}")
    if adjacency.shape[0] != len(values):
        raise ValueError(
            f"Adjacency matrix has {adjacency.shape[0]} rows for {len(values)} values"
        )

    vertices = [Vertex(value) for value in values]
    for row, vertex in zip(adjacency, vertices):
        vertex.neighbors = [vertices[column] for column in np.flatnonzero(row)]

    logger.debug(
        "Built %d vertices and %d edges from adjacency matrix",
        len(vertices),
        int(np.count_nonzero(adjacency)),
    )
    return vertices


__all__ = [
    "Vertex",
    "successors",
    "from_adjacency",
    "from_adjacency_matrix",
]
