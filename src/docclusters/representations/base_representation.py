"""
Base representation class with common functionality for cluster representations.
"""

import torch
from torch import Tensor

from ..base.interfaces import ClusterRepresentation
from ..errors import DimensionMismatchError


class BaseRepresentation(ClusterRepresentation):
    """Base class providing common functionality for cluster representations."""
    
    def __init__(self, dimension: int, device: torch.device):
        """
        Args:
            dimension: Ambient dimension d of the data
            device: Torch device for tensor allocation
        """
        self._dimension = dimension
        self._device = device
        self._mean = torch.zeros(dimension, dtype=torch.float64, device=device)
        
    @property
    def dimension(self) -> int:
        """Ambient dimension of the data."""
        return self._dimension
        
    @property
    def mean(self) -> Tensor:
        """Cluster mean/centroid."""
        return self._mean
        
    @mean.setter
    def mean(self, value: Tensor):
        """Set cluster mean."""
        assert value.shape == (self._dimension,)
        self._mean = value.to(dtype=torch.float64, device=self._device)
        
    def _check_points_shape(self, points: Tensor):
        """Validate shape of input points."""
        if points.dim() != 2:
            raise ValueError(f"Expected 2D tensor, got {points.dim()}D")
        if points.shape[1] != self._dimension:
            raise DimensionMismatchError(self._dimension, points.shape[1])
