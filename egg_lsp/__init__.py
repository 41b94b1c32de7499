"""Egg Language Server package.

This package provides:
- A pygls-based Language Server for Egg.
- An indexer that parses documents with the Egg reader to find definitions
  and syntax errors.

Note: The LSP does not evaluate user buffers.
"""

__all__ = [
    "server",
    "indexer",
]
