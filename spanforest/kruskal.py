from __future__ import annotations

import logging
import operator
from typing import Hashable, Iterable

from .disjoint_set import DisjointSet
from .graph import Edge, Graph

logger = logging.getLogger(__name__)


def compute_mst(graph: Graph, *, maximum: bool = False) -> list[Edge]:
    """
    minimum spanning forest by Kruskal's algorithm

    Edges are scanned in weight order, equal weights in insertion order, and
    kept when they join two different trees. The graph itself is left
    untouched.

    Args:
        graph: the graph, every edge endpoint must be one of its vertices
        maximum: build a maximum spanning forest instead

    Returns:
        accepted edges in acceptance order, one tree per connected
        component

    Raises:
        UnknownVertexError: an edge references an unknown vertex
    """
    graph.validate()

    edges = sorted(graph.edges,
                   key=operator.attrgetter('weight'),
                   reverse=maximum)
    forest = DisjointSet(graph.vertices)
    logger.debug("kruskal: %d vertices, %d edges", len(forest), len(edges))

    tree = []
    for i, edge in enumerate(edges):
        if len(tree) >= len(forest) - 1:
            logger.debug("kruskal: spanning tree complete, %d edges skipped",
                         len(edges) - i)
            break
        if not forest.connected(edge.source, edge.destination):
            forest.union(edge.source, edge.destination)
            tree.append(edge)

    logger.debug("kruskal: accepted %d edges, %d components", len(tree),
                 forest.count)
    return tree


def minimum_spanning_tree(
    edges: list[tuple[Hashable, Hashable]]
    | list[tuple[Hashable, Hashable, float]]
) -> list[tuple[Hashable, Hashable]]:
    """
    minimum spanning tree

    Args:
        edges: list of edges, (u, v) pairs weigh 1

    Returns:
        list of edges in minimum spanning tree
    """
    if not edges:
        return []
    return [(e.source, e.destination)
            for e in compute_mst(Graph.from_edges(edges))]


def total_weight(edges: Iterable[Edge], start=0):
    return sum((e.weight for e in edges), start)
