"""
Centroid representation for cosine k-means.

A cluster is a single mean vector; only its direction matters for distance.
"""

from typing import Dict
from torch import Tensor

from .base_representation import BaseRepresentation


class CentroidRepresentation(BaseRepresentation):
    """Cluster represented by a single centroid vector."""
    
    def update_from_points(self, points: Tensor, **kwargs) -> None:
        """Update centroid as the elementwise mean of assigned points.
        
        Args:
            points: (n, d) tensor of assigned points
        """
        self._check_points_shape(points)
        
        if len(points) == 0:
            # No points assigned - keep current mean
            return
            
        self._mean = points.mean(dim=0)
                
    def get_parameters(self) -> Dict[str, Tensor]:
        """Return parameters defining this centroid."""
        return {'mean': self._mean.clone()}
        
    def __repr__(self) -> str:
        return f"CentroidRepresentation(dimension={self._dimension}, mean_norm={self._mean.norm():.3f})"
