from __future__ import annotations

from dataclasses import dataclass
from typing import (Any, Generic, Hashable, Iterable, Iterator, Protocol,
                    Sequence, TypeVar)

import numpy as np


class Comparable(Protocol):

    def __lt__(self, other: Any) -> bool:
        ...


T = TypeVar('T', bound=Hashable)
W = TypeVar('W', bound=Comparable)


class UnknownVertexError(KeyError):
    """An edge references a vertex that was never added to the graph."""

    def __init__(self, vertex, edge=None):
        super().__init__(vertex)
        self.vertex = vertex
        self.edge = edge

    def __str__(self):
        if self.edge is None:
            return f"vertex {self.vertex!r} is not in the graph"
        return (f"edge {tuple(self.edge)!r} references vertex "
                f"{self.vertex!r} which is not in the graph")


@dataclass(frozen=True)
class Edge(Generic[T, W]):
    source: T
    destination: T
    weight: W

    def __iter__(self):
        return iter((self.source, self.destination, self.weight))


class Graph(Generic[T, W]):
    """
    Weighted undirected graph

    Vertices are kept in insertion order, edges in a list. Edges may name
    vertices that were never added; such edges are rejected when the graph
    is consumed by ``compute_mst`` or ``components``.

    Example:
        >>> g = Graph().add_vertices(1, 2, 3).add_edge(1, 2, 5).add_edge(2, 3, 1)
        >>> [tuple(e) for e in g.kruskal()]
        [(2, 3, 1), (1, 2, 5)]
    """

    __slots__ = ('_vertices', '_edges')

    def __init__(self,
                 vertices: Iterable[T] = (),
                 edges: Iterable[Edge[T, W] | tuple[T, T, W]] = ()):
        self._vertices: dict[T, None] = {}
        self._edges: list[Edge[T, W]] = []
        self.add_vertices(*vertices)
        self.add_edges(edges)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple], weight=1) -> Graph:
        """
        build a graph from (u, v) or (u, v, w) tuples

        Every endpoint becomes a vertex. Pairs get the default weight.
        """
        g = cls()
        for e in edges:
            e = tuple(e)
            if len(e) == 2:
                u, v = e
                w = weight
            else:
                u, v, w = e
            g.add_vertices(u, v).add_edge(u, v, w)
        return g

    @classmethod
    def from_adjacency(cls,
                       matrix,
                       vertices: Sequence[T] | None = None) -> Graph:
        """
        build a graph from a symmetric weight matrix

        Args:
            matrix: square array, only the upper triangle is read. Zero and
                infinite entries mean no edge, the diagonal is ignored.
            vertices: labels for the rows, default ``range(n)``

        Returns:
            Graph
        """
        matrix = np.asarray(matrix)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError(
                f"adjacency matrix must be square, got shape {matrix.shape}.")
        n = matrix.shape[0]
        if vertices is None:
            vertices = list(range(n))
        elif len(vertices) != n:
            raise ValueError(
                f"got {len(vertices)} vertex labels for a {n}x{n} matrix.")

        g = cls(vertices)
        mask = np.triu(np.isfinite(matrix) & (matrix != 0), k=1)
        for i, j in zip(*np.nonzero(mask)):
            g.add_edge(vertices[i], vertices[j], matrix[i, j].item())
        return g

    def to_adjacency(self, vertices: Sequence[T] | None = None, fill=0):
        """
        dense symmetric weight matrix

        Rows follow ``vertices`` (default: insertion order). Self-loops are
        dropped and the last of several parallel edges wins.
        """
        if vertices is None:
            vertices = list(self._vertices)
        index = {v: i for i, v in enumerate(vertices)}
        ret = np.full((len(vertices), len(vertices)), fill, dtype=float)
        for e in self._edges:
            if e.source == e.destination:
                continue
            for v in (e.source, e.destination):
                if v not in index:
                    raise UnknownVertexError(v, e)
            i, j = index[e.source], index[e.destination]
            ret[i, j] = ret[j, i] = e.weight
        return ret

    @property
    def vertices(self) -> frozenset[T]:
        return frozenset(self._vertices)

    @property
    def edges(self) -> tuple[Edge[T, W], ...]:
        return tuple(self._edges)

    def add_vertex(self, vertex: T) -> Graph:
        self._vertices[vertex] = None
        return self

    def add_vertices(self, *vertices: T) -> Graph:
        for v in vertices:
            self.add_vertex(v)
        return self

    def add_edge(self, source: T, destination: T, weight: W) -> Graph:
        self._edges.append(Edge(source, destination, weight))
        return self

    def add_edges(self, edges: Iterable[Edge[T, W] | tuple[T, T, W]]) -> Graph:
        for u, v, w in edges:
            self.add_edge(u, v, w)
        return self

    def unknown_vertices(self) -> list[T]:
        ret = {}
        for e in self._edges:
            for v in (e.source, e.destination):
                if v not in self._vertices:
                    ret[v] = None
        return list(ret)

    def validate(self) -> None:
        """raise UnknownVertexError for the first edge with an unknown end"""
        for e in self._edges:
            for v in (e.source, e.destination):
                if v not in self._vertices:
                    raise UnknownVertexError(v, e)

    def components(self) -> list[set[T]]:
        """connected components, isolated vertices included"""
        from .disjoint_set import DisjointSet

        self.validate()
        ds = DisjointSet(self._vertices)
        for e in self._edges:
            ds.union(e.source, e.destination)
        return ds.groups()

    def kruskal(self, *, maximum: bool = False) -> list[Edge[T, W]]:
        from .kruskal import compute_mst

        return compute_mst(self, maximum=maximum)

    def copy(self) -> Graph:
        return type(self)(self._vertices, self._edges)

    def __or__(self, other: Graph) -> Graph:
        ret = self.copy()
        ret |= other
        return ret

    def __ior__(self, other: Graph) -> Graph:
        self.add_vertices(*other._vertices)
        self._edges.extend(other._edges)
        return self

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return (self._vertices.keys() == other._vertices.keys()
                and self._edges == other._edges)

    def __contains__(self, vertex) -> bool:
        return vertex in self._vertices

    def __iter__(self) -> Iterator[T]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self):
        return (f"Graph(vertices={list(self._vertices)!r}, "
                f"edges={[tuple(e) for e in self._edges]!r})")
