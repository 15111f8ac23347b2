"""Runnable demos of algorithms, collections, slice helpers and concurrency patterns."""

__version__ = "0.1.0"
__all__ = ["algorithms", "fundamentals", "ownership", "catalog", "concurrency"]