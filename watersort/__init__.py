"""
Water Sort Solver - shortest pour sequences for water sort puzzles.

Subpackages:
    solver: State model, move rules, goal checks, search and annotation
    api: Flask HTTP API
"""

__version__ = "0.1.0"
