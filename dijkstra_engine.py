"""
Heap-based DijkstraEngine implementation.

Uses Python's heapq to compute a shortest path between two nodes of any
Graph implementation that satisfies the Graph interface.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Set, Tuple
import heapq
import itertools
import logging

from algorithms import PathEngine, PathResult, SearchStats
from errors import NegativeWeightError, UnknownNodeError
from graph import Graph, NodeId

logger = logging.getLogger(__name__)


class TieBreak(Enum):
    """Order in which frontier entries with equal distance are popped."""

    FIFO = auto()  # earliest push first
    LIFO = auto()  # latest push first


@dataclass(frozen=True)
class EngineConfig:
    """
    Options for SimpleDijkstraEngine.

    Attributes
    ----------
    check_weights:
        Raise NegativeWeightError as soon as a negative edge is relaxed.
        Graphs that already validate on insertion never trigger it.
    tie_break:
        Pop order among equal-distance frontier entries. Either choice is
        deterministic for a given graph and edge order.
    """

    check_weights: bool = True
    tie_break: TieBreak = TieBreak.FIFO

    def validate(self) -> None:
        if not isinstance(self.tie_break, TieBreak):
            raise ValueError(f"tie_break must be a TieBreak, got {self.tie_break!r}.")


class SimpleDijkstraEngine(PathEngine):
    """
    Point-to-point Dijkstra with lazy deletion.

    There is no decrease-key: an improved node is pushed again and older
    entries are dropped when popped after the node is settled. The search
    stops as soon as the target is popped.

    Complexity:
        O(E log E) over the part of the graph closer to source than target.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self.config.validate()

    def find_path(self, graph: Graph, source: NodeId, target: NodeId) -> PathResult:
        for node in (source, target):
            if not graph.has_node(node):
                raise UnknownNodeError(node)

        order = itertools.count()
        sign = 1 if self.config.tie_break is TieBreak.FIFO else -1

        distance: Dict[NodeId, float] = {source: 0}
        parent: Dict[NodeId, NodeId] = {source: source}
        settled: Set[NodeId] = set()
        # (distance, push order, node): node keys never need to be comparable
        frontier: List[Tuple[float, int, NodeId]] = [(0, sign * next(order), source)]

        pushes, pops, stale, examined, relaxed = 1, 0, 0, 0, 0

        while frontier:
            _, _, u = heapq.heappop(frontier)
            pops += 1

            if u in settled:
                stale += 1
                continue

            if u == target:
                path = self._rebuild(parent, source, target)
                stats = SearchStats(pushes, pops, stale, examined, relaxed, len(settled))
                logger.debug(
                    "path %r -> %r: distance=%s hops=%d %s",
                    source, target, distance[u], len(path) - 1, stats,
                )
                return PathResult(source, target, path, distance[u], stats)

            settled.add(u)
            d_u = distance[u]

            for edge in graph.outgoing(u):
                examined += 1
                v, w = edge.target, edge.weight
                if self.config.check_weights and w < 0:
                    raise NegativeWeightError(u, v, w)
                if v in settled:
                    continue

                alt = d_u + w
                if v not in distance or alt < distance[v]:
                    distance[v] = alt
                    parent[v] = u
                    heapq.heappush(frontier, (alt, sign * next(order), v))
                    pushes += 1
                    relaxed += 1

        stats = SearchStats(pushes, pops, stale, examined, relaxed, len(settled))
        logger.debug("no path %r -> %r: %s", source, target, stats)
        return PathResult.unreachable(source, target, stats)

    @staticmethod
    def _rebuild(
        parent: Dict[NodeId, NodeId], source: NodeId, target: NodeId
    ) -> Tuple[NodeId, ...]:
        # Walk predecessors back to the source, which is its own parent.
        path = [target]
        node = target
        while node != source:
            node = parent[node]
            path.append(node)
        path.reverse()
        return tuple(path)
