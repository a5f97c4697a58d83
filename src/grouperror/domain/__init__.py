"""Domain layer — the group error type, flattening, and matching.

This layer depends only on stdlib.
It must never import from config or output, and it never logs.
"""
