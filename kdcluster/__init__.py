"""DBSCAN clustering on top of a k-d tree with pluggable metrics."""

__version__ = "0.0.1"
__all__ = ["dbscan", "demo", "kdtree", "utility"]