"""
Deterministic initialization from the leading points.

Seeds one centroid per point from the first ``n_clusters`` points in input
order, so a fixed input order always gives the same run.
"""

from typing import List
from torch import Tensor

from ..base.interfaces import InitializationStrategy, ClusterRepresentation
from ..representations.centroid import CentroidRepresentation
from ..errors import InvalidParameterError


class FirstKInit(InitializationStrategy):
    """Use copies of the first n_clusters points as initial centroids."""
    
    def initialize(self, points: Tensor, n_clusters: int,
                  **kwargs) -> List[ClusterRepresentation]:
        """Initialize clusters from the leading points.
        
        Args:
            points: (n, d) data points
            n_clusters: Number of clusters, at most n
            
        Returns:
            List of initialized CentroidRepresentations
        """
        n_points, dimension = points.shape
        device = points.device
        
        if n_clusters > n_points:
            raise InvalidParameterError(f"Cannot create {n_clusters} clusters from {n_points} points")
            
        representations = []
        for idx in range(n_clusters):
            rep = CentroidRepresentation(dimension, device)
            rep.mean = points[idx].clone()
            representations.append(rep)
            
        return representations
