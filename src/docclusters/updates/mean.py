"""
Mean update strategy for centroid-based clustering.
"""

from torch import Tensor

from ..base.interfaces import ParameterUpdater, ClusterRepresentation


class MeanUpdater(ParameterUpdater):
    """Updates cluster representation by computing mean of assigned points."""
    
    def update(self, representation: ClusterRepresentation,
               points: Tensor,
               **kwargs) -> None:
        """Update cluster mean.
        
        Args:
            representation: Cluster representation to update
            points: Points assigned to this cluster (already filtered)
            **kwargs: Ignored
        """
        representation.update_from_points(points, **kwargs)
