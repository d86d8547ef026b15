"""Cluster representations."""

from .base_representation import BaseRepresentation
from .centroid import CentroidRepresentation

__all__ = [
    'BaseRepresentation',
    'CentroidRepresentation'
]
