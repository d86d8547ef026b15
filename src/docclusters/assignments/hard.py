"""
Hard assignment strategy for clustering algorithms.

Assigns each point to its nearest cluster based on the distance metric.
"""

from typing import List
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, ClusterRepresentation, DistanceMetric


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest cluster.
    
    Each point is assigned to exactly one cluster based on minimum distance.
    When several clusters are equally near, the lowest cluster index wins.
    """
    
    def __init__(self, metric: DistanceMetric):
        """
        Args:
            metric: Distance metric between points and a cluster
        """
        super().__init__()
        self.metric = metric
        
    def distance_matrix(self, points: Tensor,
                        representations: List[ClusterRepresentation]) -> Tensor:
        """(n, K) distances from every point to every cluster."""
        n_points = points.shape[0]
        n_clusters = len(representations)
        
        distances = torch.zeros(n_points, n_clusters, dtype=points.dtype, device=points.device)
        
        for k, representation in enumerate(representations):
            distances[:, k] = self.metric.compute(points, representation)
                
        return distances
        
    def compute_assignments(self, points: Tensor, 
                          representations: List[ClusterRepresentation],
                          **kwargs) -> Tensor:
        """Assign each point to nearest cluster.
        
        Args:
            points: (n, d) data points
            representations: List of K cluster representations
            **kwargs: Ignored for basic hard assignment
            
        Returns:
            (n,) tensor of cluster indices
        """
        distances = self.distance_matrix(points, representations)
            
        # argmin returns the first minimal index, so ties go to the lowest cluster
        assignments = torch.argmin(distances, dim=1)
        
        return assignments
