"""Domain types and models.

Why:
- Pure, strict data structures (Pydantic v2 and frozen dataclasses).
- The domain knows nothing about HTTP or the CLI, only libpod concepts.
"""
