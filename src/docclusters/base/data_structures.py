"""
Core data structures for document clustering.

This module provides the containers passed into and returned from the
clustering engine, plus the per-iteration state the engine tracks while
it runs.
"""

from typing import Optional, List, Dict, Sequence, Union
import torch
from torch import Tensor
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class LabeledVector:
    """A document identifier paired with its embedding vector."""
    id: str
    vector: Union[Tensor, np.ndarray, Sequence[float]]


@dataclass
class ClusterResult:
    """Final partition of document identifiers plus the centroids behind it.
    
    ``clusters[i]`` holds the identifiers assigned to cluster ``i`` in input
    order and ``centroids[i]`` is that cluster's mean vector. Every input
    identifier appears in exactly one cluster. Slots stay present when a
    cluster ends up empty.
    """
    clusters: List[List[str]]
    centroids: Tensor  # (K, d) float64

    @classmethod
    def empty(cls) -> 'ClusterResult':
        return cls(clusters=[], centroids=torch.empty(0, 0, dtype=torch.float64))

    @property
    def n_clusters(self) -> int:
        return len(self.clusters)

    def as_mapping(self) -> Dict[int, List[str]]:
        """Cluster index -> identifiers."""
        return {k: list(ids) for k, ids in enumerate(self.clusters)}

    def labels_by_id(self) -> Dict[str, int]:
        """Identifier -> cluster index."""
        return {doc_id: k for k, ids in enumerate(self.clusters) for doc_id in ids}


@dataclass(frozen=True)
class SimilarDocument:
    """A neighbour returned by a similarity lookup."""
    id: str
    similarity: float

    @property
    def percent(self) -> int:
        """Similarity as a rounded percentage."""
        return int(round(self.similarity * 100))


@dataclass(frozen=True)
class SimilarityEdge:
    """Directed edge of the related-documents graph."""
    source: str
    target: str
    strength: float


@dataclass
class ClusterState:
    """Container for the centroids of all clusters at a given iteration."""
    
    means: Tensor  # (K, d) cluster centroids
    n_clusters: int
    dimension: int
    
    def __post_init__(self):
        assert self.means.shape == (self.n_clusters, self.dimension)


class AssignmentMatrix:
    """Hard assignments of points to clusters with per-cluster aggregation."""
    
    def __init__(self, assignments: Tensor, n_clusters: int):
        """
        Args:
            assignments: (n,) cluster index per point
            n_clusters: Number of clusters K
        """
        self.n_clusters = n_clusters
        self._validate_and_store(assignments)
        
    def _validate_and_store(self, assignments: Tensor):
        assert assignments.dim() == 1
        if assignments.numel() > 0:
            assert assignments.max() < self.n_clusters
            assert assignments.min() >= 0
        self._assignments = assignments.long()
            
    @property
    def n_points(self) -> int:
        """Number of data points."""
        return self._assignments.shape[0]
            
    def get_hard(self) -> Tensor:
        """Get the (n,) assignment tensor."""
        return self._assignments
            
    def get_cluster_indices(self, cluster_idx: int) -> Tensor:
        """Get indices of points assigned to a specific cluster, in input order."""
        return torch.where(self._assignments == cluster_idx)[0]
            
    def count_per_cluster(self) -> Tensor:
        """Count points per cluster."""
        return torch.bincount(self._assignments, minlength=self.n_clusters)

    def n_changed(self, previous: Optional['AssignmentMatrix']) -> int:
        """Number of points whose cluster differs from ``previous``."""
        if previous is None:
            return self.n_points
        return int((self._assignments != previous.get_hard()).sum().item())

    def to_clusters(self, ids: List[str]) -> List[List[str]]:
        """Group identifiers by cluster index; all K slots are present."""
        clusters: List[List[str]] = [[] for _ in range(self.n_clusters)]
        for doc_id, k in zip(ids, self._assignments.tolist()):
            clusters[k].append(doc_id)
        return clusters


@dataclass 
class AlgorithmState:
    """State of the clustering run after one iteration.
    
    Kept for inspection and debugging; it never influences the run length.
    """
    iteration: int
    cluster_state: ClusterState
    assignments: AssignmentMatrix
    objective_value: float
    n_changed: int = 0
