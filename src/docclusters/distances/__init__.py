"""Distance metrics for clustering algorithms."""

from .cosine import CosineDistance

__all__ = [
    'CosineDistance'
]
