"""
Algorithm interfaces for point-to-point shortest paths.

Keeps the search algorithm separate from graph storage and from the
caller that renders results.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Tuple

from graph import Graph, NodeId


@dataclass(frozen=True)
class SearchStats:
    """
    Instrumentation counters for one search.
    """
    heap_pushes: int = 0
    heap_pops: int = 0
    stale_skipped: int = 0   # popped entries for already-settled nodes
    edges_examined: int = 0
    relaxed: int = 0
    settled: int = 0


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a single source -> target search.

    Either path holds the node keys from source to target (both included)
    and distance its total weight, or both are None and the target is
    unreachable from the source.
    """
    source: NodeId
    target: NodeId
    path: Optional[Tuple[NodeId, ...]]
    distance: Optional[float]
    stats: SearchStats = field(default_factory=SearchStats, compare=False)

    @classmethod
    def unreachable(
        cls, source: NodeId, target: NodeId, stats: Optional[SearchStats] = None
    ) -> "PathResult":
        return cls(source, target, None, None, stats or SearchStats())

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def hops(self) -> Optional[int]:
        """Number of edges on the path, None when unreachable."""
        if self.path is None:
            return None
        return len(self.path) - 1


class PathEngine(ABC):
    """
    Interface for single-pair shortest-path computation.
    """

    @abstractmethod
    def find_path(self, graph: Graph, source: NodeId, target: NodeId) -> PathResult:
        """
        Compute one shortest path from source to target.

        Returns:
            PathResult with the path, or PathResult.unreachable(...).

        Raises:
            UnknownNodeError: source or target is not in graph.
        """
        raise NotImplementedError
