from .disjoint_set import DisjointSet
from .graph import Edge, Graph, UnknownVertexError
from .kruskal import compute_mst, minimum_spanning_tree, total_weight
from .version import __version__
