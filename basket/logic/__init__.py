"""Core business logic layer.

Subpackages:
- shopping: shopping list service and establishment aggregation
- ranking: ordering, filtering and positional lookups

The ``system`` module is the facade over both.
"""
__all__ = ["shopping", "ranking", "system"]
