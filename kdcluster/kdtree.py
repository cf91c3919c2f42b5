"""A k-d tree supporting nearest, radius and k-nearest-neighbour queries."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Sequence

from kdcluster.utility import DEFAULT_DIMENSION, ValueAt, at, distance

DistanceFunc = Callable[[Any, Any, ValueAt], float]


@dataclass(slots=True)
class _Node:
    index: int
    axis: int
    left: _Node | None = None
    right: _Node | None = None


class KDTree:
    """Spatial index over a sequence of points, queried by point index."""

    def __init__(
        self,
        points: Sequence[Any],
        dimension: int = DEFAULT_DIMENSION,
        dist_func: DistanceFunc | None = None,
        value_at: ValueAt | None = None,
    ) -> None:
        if dimension < 1:
            raise ValueError("dimension must be at least 1")
        self.points = points
        self.dimension = dimension
        self.value_at: ValueAt = (
            value_at if value_at is not None else partial(at, dimension=dimension)
        )
        self.dist_func: DistanceFunc = (
            dist_func if dist_func is not None else partial(distance, dimension=dimension)
        )
        self._root = self._build(list(range(len(points))), 0)

    def __len__(self) -> int:
        return len(self.points)

    def _build(self, indices: list[int], depth: int) -> _Node | None:
        if not indices:
            return None
        axis = depth % self.dimension
        indices.sort(key=lambda i: self.value_at(self.points[i], axis))
        median = len(indices) // 2
        node = _Node(indices[median], axis)
        node.left = self._build(indices[:median], depth + 1)
        node.right = self._build(indices[median + 1 :], depth + 1)
        return node

    def _distance_to(self, query_point: Any, index: int) -> float:
        return self.dist_func(query_point, self.points[index], self.value_at)

    def _split(self, query_point: Any, node: _Node) -> tuple[_Node | None, _Node | None, float]:
        """Return the near child, the far child and the distance to the split plane."""
        q = self.value_at(query_point, node.axis)
        c = self.value_at(self.points[node.index], node.axis)
        if q < c:
            return node.left, node.right, abs(q - c)
        return node.right, node.left, abs(q - c)

    def nearest_search(self, query_point: Any) -> int | None:
        """Return the index of the point nearest to ``query_point``, or None if empty."""
        best_index: int | None = None
        best_distance = math.inf

        def visit(node: _Node | None) -> None:
            nonlocal best_index, best_distance
            if node is None:
                return
            d = self._distance_to(query_point, node.index)
            if d < best_distance:
                best_index, best_distance = node.index, d
            near, far, plane = self._split(query_point, node)
            visit(near)
            if plane < best_distance:
                visit(far)

        visit(self._root)
        return best_index

    def radius_search(self, query_point: Any, radius: float) -> list[int]:
        """Return indices of points strictly closer than ``radius`` to ``query_point``."""
        found: list[int] = []

        def visit(node: _Node | None) -> None:
            if node is None:
                return
            if self._distance_to(query_point, node.index) < radius:
                found.append(node.index)
            near, far, plane = self._split(query_point, node)
            visit(near)
            if plane < radius:
                visit(far)

        visit(self._root)
        return found

    def knn_search(self, query_point: Any, k: int) -> list[int]:
        """Return indices of the ``k`` nearest points.

        When ``k`` exceeds the number of points, every index is returned nearest
        first; otherwise the result runs from the farthest of the ``k`` to the nearest.
        """
        if self._root is None or k <= 0:
            return []

        if k > len(self.points):
            return sorted(
                range(len(self.points)),
                key=lambda i: self._distance_to(query_point, i),
            )

        # Max-heap of (distance, index) kept as negated pairs.
        heap: list[tuple[float, int]] = []
        max_distance = math.inf

        def visit(node: _Node | None) -> None:
            nonlocal max_distance
            if node is None:
                return
            if len(heap) == k:
                max_distance = -heap[0][0]
            d = self._distance_to(query_point, node.index)
            if d < max_distance:
                while len(heap) >= k:
                    heapq.heappop(heap)
                heapq.heappush(heap, (-d, -node.index))
            near, far, plane = self._split(query_point, node)
            visit(near)
            if len(heap) < k or plane < max_distance:
                visit(far)

        visit(self._root)
        result: list[int] = []
        while heap:
            result.append(-heapq.heappop(heap)[1])
        return result