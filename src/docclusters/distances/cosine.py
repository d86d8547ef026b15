"""
Cosine distance metric for clustering.

Direction-based dissimilarity, insensitive to vector magnitude, which is what
text embeddings call for.
"""

from torch import Tensor

from ..base.interfaces import DistanceMetric, ClusterRepresentation
from ..utils.vector_math import cosine_distances_to


class CosineDistance(DistanceMetric):
    """Cosine distance 1 - cos(x, μ) where μ is the cluster center."""
        
    def compute(self, points: Tensor, representation: ClusterRepresentation,
                **kwargs) -> Tensor:
        """Compute cosine distances from points to cluster center.
        
        Args:
            points: (n, d) tensor of points
            representation: Cluster representation with 'mean' parameter
            
        Returns:
            (n,) tensor of distances in [0, 2]
        """
        params = representation.get_parameters()
        if 'mean' not in params:
            raise ValueError("Cosine distance requires representation with 'mean' parameter")
            
        return cosine_distances_to(points, params['mean'])
