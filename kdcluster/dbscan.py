"""Density-based clustering (DBSCAN) backed by a k-d tree."""

from __future__ import annotations

from collections import deque
from typing import Any, Sequence

from kdcluster.kdtree import DistanceFunc, KDTree
from kdcluster.utility import DEFAULT_DIMENSION, ValueAt


class DBSCAN:
    """Groups points whose ``eps``-neighbourhoods hold at least ``min_points`` points."""

    def __init__(
        self,
        eps: float,
        min_points: int,
        dimension: int = DEFAULT_DIMENSION,
        dist_func: DistanceFunc | None = None,
        value_at: ValueAt | None = None,
    ) -> None:
        self.eps = eps
        self.min_points = min_points
        self.dimension = dimension
        self.dist_func = dist_func
        self.value_at = value_at
        self.kdtree: KDTree | None = None

    def estimate_cluster_indices(self, points: Sequence[Any]) -> list[list[int]]:
        """Return the point indices of each cluster found, in discovery order.

        A border point reached from several core points is listed once per visit.
        """
        self.kdtree = KDTree(points, self.dimension, self.dist_func, self.value_at)
        visited = [False] * len(points)
        is_noise = [False] * len(points)
        clusters: list[list[int]] = []

        for i, point in enumerate(points):
            if visited[i]:
                continue
            visited[i] = True
            neighbors = self.kdtree.radius_search(point, self.eps)
            if len(neighbors) < self.min_points:
                is_noise[i] = True
            else:
                clusters.append(self._expand_cluster(points, i, neighbors, visited, is_noise))

        return clusters

    def _expand_cluster(
        self,
        points: Sequence[Any],
        seed: int,
        neighbors: list[int],
        visited: list[bool],
        is_noise: list[bool],
    ) -> list[int]:
        assert self.kdtree is not None
        cluster = [seed]
        pending = deque(neighbors)
        while pending:
            idx = pending.popleft()
            if is_noise[idx]:
                cluster.append(idx)
                continue
            if visited[idx]:
                continue
            visited[idx] = True
            cluster.append(idx)
            found = self.kdtree.radius_search(points[idx], self.eps)
            if len(found) >= self.min_points:
                pending.extend(found)
        return cluster

    def estimate_clusters(self, points: Sequence[Any]) -> list[list[Any]]:
        """Return each cluster as the list of its points."""
        return [[points[i] for i in indices] for indices in self.estimate_cluster_indices(points)]