from __future__ import annotations

from typing import Dict, Iterator, List, Literal, Mapping, Set, Tuple

EdgeOrder = Literal["sorted", "insertion"]


class WordGraph:
    """Weighted directed graph of adjacent word tokens.

    Stored as an adjacency dict: adjacency[src][dst] = count.
    A token only becomes an outer key once it has an outgoing edge.
    """

    def __init__(self):
        self.adjacency: Dict[str, Dict[str, int]] = {}

    def add_edge(self, source: str, target: str, count: int = 1):
        """Increase the weight of source -> target, creating it if needed."""
        if count < 1:
            raise ValueError(f"Edge weight must be positive, got {count}")
        neighbors = self.adjacency.setdefault(source, {})
        neighbors[target] = neighbors.get(target, 0) + count

    def weight(self, source: str, target: str) -> int:
        """Return the weight of source -> target, 0 when absent."""
        return self.adjacency.get(source, {}).get(target, 0)

    def successors(self, source: str, order: EdgeOrder = "sorted") -> List[Tuple[str, int]]:
        neighbors = self.adjacency.get(source, {})
        items = list(neighbors.items())
        if order == "sorted":
            items.sort()
        return items

    def sources(self, order: EdgeOrder = "sorted") -> List[str]:
        keys = list(self.adjacency)
        if order == "sorted":
            keys.sort()
        return keys

    def edges(self, order: EdgeOrder = "sorted") -> Iterator[Tuple[str, str, int]]:
        """Yield (source, target, weight) in a stable order."""
        for source in self.sources(order):
            for target, count in self.successors(source, order):
                yield source, target, count

    def vertices(self) -> Set[str]:
        found: Set[str] = set(self.adjacency)
        for neighbors in self.adjacency.values():
            found.update(neighbors)
        return found

    @property
    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self.adjacency.values())

    @property
    def total_weight(self) -> int:
        return sum(sum(neighbors.values()) for neighbors in self.adjacency.values())

    def self_loops(self) -> List[Tuple[str, int]]:
        return [(s, c) for s, t, c in self.edges() if s == t]

    def as_dict(self) -> Dict[str, Dict[str, int]]:
        """Return a copy of the adjacency mapping."""
        return {source: dict(neighbors) for source, neighbors in self.adjacency.items()}

    @classmethod
    def from_dict(cls, adjacency: Mapping[str, Mapping[str, int]]) -> "WordGraph":
        graph = cls()
        for source, neighbors in adjacency.items():
            for target, count in neighbors.items():
                graph.add_edge(source, target, count)
        return graph

    def __len__(self) -> int:
        return self.edge_count

    def __bool__(self) -> bool:
        return bool(self.adjacency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordGraph):
            return NotImplemented
        return self.adjacency == other.adjacency

    def __repr__(self) -> str:
        return f"WordGraph(edges={self.edge_count}, weight={self.total_weight})"
