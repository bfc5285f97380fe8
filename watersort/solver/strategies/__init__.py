"""
Strategies Package - Concrete search strategy implementations.
"""

from .bfs import BreadthFirstStrategy, SearchNode

__all__ = [
    "BreadthFirstStrategy",
    "SearchNode",
]
