"""Initialization strategies for clustering algorithms."""

from .first_k import FirstKInit

__all__ = [
    'FirstKInit'
]
