"""Base classes, interfaces and data structures for document clustering."""

from .interfaces import (
    ClusterRepresentation,
    AssignmentStrategy,
    ParameterUpdater,
    DistanceMetric,
    InitializationStrategy,
    ClusteringObjective
)

from .data_structures import (
    LabeledVector,
    ClusterResult,
    SimilarDocument,
    SimilarityEdge,
    ClusterState,
    AssignmentMatrix,
    AlgorithmState
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'ClusterRepresentation',
    'AssignmentStrategy', 
    'ParameterUpdater',
    'DistanceMetric',
    'InitializationStrategy',
    'ClusteringObjective',
    
    # Data structures
    'LabeledVector',
    'ClusterResult',
    'SimilarDocument',
    'SimilarityEdge',
    'ClusterState',
    'AssignmentMatrix',
    'AlgorithmState',
    
    # Base algorithm
    'BaseClusteringAlgorithm'
]
