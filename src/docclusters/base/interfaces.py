"""
Core interfaces for the clustering engine.

This module defines the abstract base classes the engine's components
implement: how a cluster is represented, how points are assigned, how
clusters are updated, how they are seeded and how a run is scored.
"""

from abc import ABC, abstractmethod
from typing import Dict, List
from torch import Tensor


class ClusterRepresentation(ABC):
    """Abstract base class for cluster representations."""
    
    @abstractmethod
    def update_from_points(self, points: Tensor, **kwargs) -> None:
        """Update cluster parameters given assigned points.
        
        Args:
            points: (n, d) tensor of assigned points
            **kwargs: Additional update-specific parameters
        """
        pass
    
    @abstractmethod
    def get_parameters(self) -> Dict[str, Tensor]:
        """Return all parameters defining this cluster representation."""
        pass
    
    @property
    @abstractmethod
    def dimension(self) -> int:
        """Ambient dimension of the data."""
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-cluster assignment strategies."""
    
    @abstractmethod
    def compute_assignments(self, points: Tensor, 
                          representations: List[ClusterRepresentation],
                          **kwargs) -> Tensor:
        """Compute cluster assignments for points.
        
        Args:
            points: (n, d) tensor of data points
            representations: List of K cluster representations
            
        Returns:
            (n,) tensor of cluster indices
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for cluster parameter update strategies."""
    
    @abstractmethod
    def update(self, representation: ClusterRepresentation,
               points: Tensor,
               **kwargs) -> None:
        """Update cluster parameters given the points assigned to it.
        
        Args:
            representation: Cluster representation to update
            points: (m, d) tensor of the points assigned to this cluster
        """
        pass


class DistanceMetric(ABC):
    """Abstract base class for distance computations."""
    
    @abstractmethod
    def compute(self, points: Tensor, representation: ClusterRepresentation,
                **kwargs) -> Tensor:
        """Compute distances from points to cluster.
        
        Args:
            points: (n, d) tensor of points
            representation: Cluster representation
            
        Returns:
            (n,) tensor of distances
        """
        pass


class InitializationStrategy(ABC):
    """Abstract base class for cluster initialization strategies."""
    
    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int, 
                  **kwargs) -> List[ClusterRepresentation]:
        """Initialize cluster representations.
        
        Args:
            points: (n, d) tensor of data points
            n_clusters: Number of clusters to initialize
            
        Returns:
            List of initialized cluster representations
        """
        pass


class ClusteringObjective(ABC):
    """Abstract base class for clustering objective functions."""
    
    @abstractmethod
    def compute(self, points: Tensor, 
                representations: List[ClusterRepresentation],
                assignments: Tensor) -> Tensor:
        """Compute objective function value.
        
        Args:
            points: (n, d) tensor of data points
            representations: List of cluster representations
            assignments: (n,) hard cluster assignments
            
        Returns:
            Scalar objective value
        """
        pass
    
    @property
    @abstractmethod
    def minimize(self) -> bool:
        """Whether to minimize (True) or maximize (False) this objective."""
        pass
