"""
Disjoint-set forest (union-find) over hashable elements.

Used by Kruskal's algorithm for cycle detection and by the connected
components computer to group nodes.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21.3 (disjoint-set forests).
"""

from typing import Dict, Hashable, Iterator, Set


class ForestDisjointSets:
    """
    Disjoint-set forest with path compression and union by rank.

    Elements are registered dynamically with make_set. Besides the parent
    and rank maps, the members of every set are tracked under its current
    representative, so enumerating a set costs O(size of the set).

    Complexity:
        - make_set: O(1)
        - find_set: O(alpha(n)) amortized
        - union: O(alpha(n)) amortized plus O(size of the smaller set)
    """

    def __init__(self):
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}
        self.members: Dict[Hashable, Set[Hashable]] = {}

    def _check_present(self, x: Hashable) -> None:
        if x is None:
            raise TypeError("Element must not be None")
        if x not in self.parent:
            raise ValueError(f"Element {x!r} is not present in the disjoint sets")

    def is_present(self, x: Hashable) -> bool:
        """Return True if x has been registered with make_set."""
        if x is None:
            raise TypeError("Element must not be None")
        return x in self.parent

    def make_set(self, x: Hashable) -> None:
        """
        Register x as a new singleton set.

        Args:
            x: Element to register.

        Raises:
            TypeError: If x is None.
            ValueError: If x is already present.
        """
        if x is None:
            raise TypeError("Element must not be None")
        if x in self.parent:
            raise ValueError(f"Element {x!r} is already present in the disjoint sets")
        self.parent[x] = x
        self.rank[x] = 0
        self.members[x] = {x}

    def find_set(self, x: Hashable) -> Hashable:
        """
        Find the representative of the set containing x, compressing the path.

        Raises:
            ValueError: If x is not present.
        """
        self._check_present(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> Hashable:
        """
        Merge the sets represented by x and y using union by rank.

        Both arguments must be current representatives. Uniting a set with
        itself does nothing.

        Args:
            x: Representative of the first set.
            y: Representative of the second set.

        Returns:
            The representative of the merged set, either x or y.

        Raises:
            ValueError: If x or y is not present or is not a representative.
        """
        self._check_present(x)
        self._check_present(y)
        if self.parent[x] != x or self.parent[y] != y:
            raise ValueError("union expects the representatives of two sets")
        if x == y:
            return x

        if self.rank[x] < self.rank[y]:
            x, y = y, x
        self.parent[y] = x
        if self.rank[x] == self.rank[y]:
            self.rank[x] += 1
        self.members[x].update(self.members.pop(y))
        return x

    def get_current_representatives(self) -> Set[Hashable]:
        """Return the representatives of all current sets."""
        return set(self.members)

    def get_current_elements_of_set_containing(self, x: Hashable) -> Set[Hashable]:
        """
        Return a copy of the set containing x.

        Raises:
            ValueError: If x is not present.
        """
        return set(self.members[self.find_set(x)])

    def clear(self) -> None:
        """Remove every element, leaving an empty structure ready for reuse."""
        self.parent.clear()
        self.rank.clear()
        self.members.clear()

    def __contains__(self, x: object) -> bool:
        return x is not None and x in self.parent

    def __iter__(self) -> Iterator[Set[Hashable]]:
        return iter(self.members.values())

    def __len__(self) -> int:
        return len(self.parent)
