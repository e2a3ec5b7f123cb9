"""Tests for vertex_dfs/vertex.py"""

import numpy as np
import pytest

from vertex_dfs.vertex import Vertex, from_adjacency, from_adjacency_matrix, successors


class TestVertex:
    def test_default_neighbors_empty(self):
        assert Vertex(1).neighbors == []

    def test_identity_equality(self):
        """Two vertices holding the same data stay distinct."""
        a, b = Vertex(1), Vertex(1)
        assert a != b
        assert len({a, b}) == 2
        assert a == a

    def test_repr_does_not_follow_cycles(self):
        x = Vertex(5)
        x.neighbors = [x]
        assert repr(x) == "Vertex(5)"

    def test_successors_none_is_empty(self):
        assert tuple(successors(Vertex(1, None))) == ()

    def test_successors_keeps_order_and_duplicates(self):
        a, b = Vertex("a"), Vertex("b")
        v = Vertex("v", [b, a, b])
        assert list(successors(v)) == [b, a, b]


class TestFromAdjacency:
    def test_empty(self):
        assert from_adjacency({}) == {}

    def test_linear_chain(self):
        vertices = from_adjacency({1: [2], 2: [3]})
        assert set(vertices) == {1, 2, 3}
        assert vertices[1].neighbors == [vertices[2]]
        assert vertices[2].neighbors == [vertices[3]]
        assert vertices[3].neighbors == []

    def test_child_only_values_get_vertices(self):
        vertices = from_adjacency({"A": ["B", "C"]})
        assert [n.data for n in vertices["A"].neighbors] == ["B", "C"]
        assert vertices["B"].neighbors == []

    def test_shared_child_is_one_vertex(self):
        vertices = from_adjacency({"A": ["C"], "B": ["C"]})
        assert vertices["A"].neighbors[0] is vertices["B"].neighbors[0]

    def test_self_loop(self):
        vertices = from_adjacency({5: [5]})
        assert vertices[5].neighbors == [vertices[5]]


class TestFromAdjacencyMatrix:
    def test_diamond(self):
        matrix = np.array(
            [
                [0, 1, 1, 0],
                [0, 0, 0, 1],
                [0, 0, 0, 1],
                [0, 0, 0, 0],
            ]
        )
        a, b, c, d = from_adjacency_matrix("ABCD", matrix)
        assert a.neighbors == [b, c]
        assert b.neighbors == [d]
        assert c.neighbors == [d]
        assert d.neighbors == []

    def test_nested_lists_accepted(self):
        x, y = from_adjacency_matrix([1, 2], [[True, False], [True, False]])
        assert x.neighbors == [x]
        assert y.neighbors == [x]

    def test_non_square_rejected(self):
        with pytest.raises(ValueError, match="square"):
            from_adjacency_matrix([1, 2], np.zeros((2, 3)))

    def test_size_mismatch_rejected(self):
        with pytest.raises(ValueError, match="rows"):
            from_adjacency_matrix([1, 2, 3], np.zeros((2, 2)))
