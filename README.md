# kdcluster

Density-based clustering (DBSCAN) over an in-memory k-d tree, in pure
Python with no dependencies. Both the tree and the clusterer work on any
point type. You can supply how to read a coordinate along an axis and how
to measure the distance between two points. If you do not, the defaults
index with `point[axis]` and use the Euclidean distance.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Clustering

```python
from kdcluster.dbscan import DBSCAN

points = [(0.0, 0.0), (0.1, 0.0), (0.0, 0.1), (5.0, 5.0), (5.1, 5.0), (5.0, 5.1), (20.0, 20.0)]

dbscan = DBSCAN(eps=0.5, min_points=3, dimension=2)
dbscan.estimate_cluster_indices(points)   # lists of point indices, one per cluster
dbscan.estimate_clusters(points)          # the same clusters, as lists of points
```

- A point is a core point when at least `min_points` points lie strictly
  closer than `eps`. That count includes the point itself.
- Clusters are returned in the order they are found while scanning the
  points from first to last.
- Points that belong to no cluster are noise and do not appear in the
  result.
- A border point that is reached from more than one core point may appear
  more than once in its cluster.
- After a call, the tree built for those points is available as
  `dbscan.kdtree`.

## The k-d tree

```python
from kdcluster.kdtree import KDTree

tree = KDTree(points, dimension=2)
tree.nearest_search((0.05, 0.05))      # index of the closest point, or None for an empty tree
tree.radius_search((0.0, 0.0), 1.0)    # indices of points strictly within the radius
tree.knn_search((0.0, 0.0), 3)         # indices of the 3 nearest points
```

`knn_search` works as follows:

- Normally it returns the `k` nearest indices ordered from the farthest to
  the nearest.
- If `k` is larger than the number of points, it returns every index,
  nearest first.
- It returns an empty list if `k` is zero or negative, or if the tree is
  empty.

A `dimension` below 1 raises `ValueError`.

## Custom metrics

`kdcluster.utility` holds the default helpers:

- `at(point, axis, dimension)` raises `IndexError` when `axis` is not
  below `dimension`.
- `distance(p1, p2, value_at, dimension)` returns the L2 distance.

To work with other point types or other metrics, pass your own functions to
`KDTree` or `DBSCAN`:

- `value_at(point, axis)` reads one coordinate.
- `dist_func(p1, p2, value_at)` returns the distance between two points.

## Demo

The demo command generates uniformly random 3-D points, clusters them and
prints the number of points, the number of clusters and the time taken:

```
kdcluster-demo --eps 10 --min-points 3 --num-points 24000
```

Options:

| Option | Meaning | Default |
| --- | --- | --- |
| `--eps` | clustering radius | 10.0 |
| `--min-points` | minimum points in a neighbourhood | 3 |
| `--num-points` | number of points to generate | 24000 |
| `--low` | lower bound of the coordinate range | 0.0 |
| `--high` | upper bound of the coordinate range | 2000.0 |
| `--seed` | random seed | 0 |

`kdcluster.demo.generate_points(count, low, high, seed)` returns the same
kind of random points for use in your own code.

## What it does not do

The package does not read point-cloud files, and it has no viewer for
showing the clusters. Points must already be in memory as Python
sequences or other objects that your `value_at` can read. Everything runs
on the CPU.