"""Domain layer — pure algorithms over validated input.

This layer depends only on stdlib and pydantic.
It must never import from services or config.
"""
