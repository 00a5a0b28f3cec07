from __future__ import annotations

from collections import defaultdict
from typing import Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar('T', bound=Hashable)


class DisjointSet(Generic[T]):
    """
    Disjoint-set forest (union-find)

    Every element points to a parent; the root of a tree is the
    representative of its group. ``find`` compresses the path it walks,
    ``union`` hangs the smaller tree under the larger one.

    Attributes:
        count: number of disjoint groups

    Methods:
        add(e): register e as a singleton group
        find(e): representative of the group containing e
        union(a, b): merge the groups containing a and b
        connected(a, b): whether a and b are in the same group
    """

    __slots__ = ('_parent', '_size', 'count')

    def __init__(self, elements: Iterable[T] = ()):
        self._parent: dict[T, T] = {}
        self._size: dict[T, int] = {}
        self.count = 0
        for e in elements:
            self.add(e)

    def add(self, e: T) -> None:
        if e in self._parent:
            return
        self._parent[e] = e
        self._size[e] = 1
        self.count += 1

    def find(self, e: T) -> T:
        parent = self._parent[e]
        if parent == e:
            return e
        root = self.find(parent)
        self._parent[e] = root
        return root

    def union(self, a: T, b: T) -> T:
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return a
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size.pop(b)
        self.count -= 1
        return a

    def connected(self, a: T, b: T) -> bool:
        return self.find(a) == self.find(b)

    def size(self, e: T) -> int:
        """number of elements in the group containing e"""
        return self._size[self.find(e)]

    def groups(self) -> list[set[T]]:
        ret = defaultdict(set)
        for e in self._parent:
            ret[self.find(e)].add(e)
        return list(ret.values())

    def __contains__(self, e) -> bool:
        return e in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def __iter__(self) -> Iterator[T]:
        return iter(self._parent)

    def __repr__(self):
        return f'DisjointSet({self.groups()!r})'
