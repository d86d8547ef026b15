"""
Cosine k-means clustering of document embeddings.

K-means with cosine distance, assembled from the modular framework: centroid
representations, nearest-centroid hard assignment, mean updates and
deterministic first-k seeding.
"""

from typing import Optional, List, Iterable
import torch
from torch import Tensor

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.data_structures import ClusterResult
from ..base.interfaces import ClusterRepresentation, ClusteringObjective
from ..assignments.hard import HardAssignment
from ..distances.cosine import CosineDistance
from ..initialization.first_k import FirstKInit
from ..updates.mean import MeanUpdater
from ..utils.metrics import total_cosine_distance
from ..utils.validation import LabeledInput


class CosineObjective(ClusteringObjective):
    """Sum of cosine distances from each point to its assigned centroid."""
    
    def compute(self, points: Tensor, representations: List[ClusterRepresentation],
                assignments: Tensor) -> Tensor:
        """Compute total within-cluster cosine distance."""
        if not representations:
            return torch.zeros((), dtype=points.dtype, device=points.device)
        centers = torch.stack([rep.get_parameters()['mean'] for rep in representations])
        total = total_cosine_distance(points, assignments, centers)
        return torch.tensor(total, dtype=points.dtype, device=points.device)
        
    @property
    def minimize(self) -> bool:
        return True


class CosineKMeans(BaseClusteringAlgorithm):
    """K-means clustering with cosine distance.
    
    Partitions labeled embedding vectors into K clusters by direction. The
    first K vectors in input order seed the centroids, every iteration assigns
    each vector to its nearest centroid (lowest index on ties) and then moves
    each centroid to the mean of its vectors. A cluster that receives no
    vectors keeps its previous centroid. Exactly ``max_iter`` iterations run.
    
    Parameters
    ----------
    n_clusters : int, default=3
        Number of clusters; clamped to the number of vectors
    max_iter : int, default=10
        Number of iterations
    verbose : int, default=0
        Verbosity level
    device : torch.device or str, optional
        Device for computation (CPU by default)
        
    Attributes
    ----------
    result_ : ClusterResult
        Identifier partition and final centroids
    cluster_centers_ : Tensor of shape (n_clusters_, n_features)
        Final centroids
    labels_ : Tensor of shape (n_samples,)
        Cluster index of each training vector, in input order
    ids_ : list of str
        Training identifiers, in input order
    n_clusters_ : int
        Effective number of clusters after clamping
    inertia_ : float
        Total cosine distance at the final assignment step
    n_iter_ : int
        Number of iterations run
    """
    
    def __init__(self,
                 n_clusters: int = 3,
                 max_iter: int = 10,
                 verbose: int = 0,
                 device: Optional[torch.device] = None):
        """Initialize cosine k-means."""
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            verbose=verbose,
            device=device
        )
        
    def _create_components(self) -> None:
        """Create cosine k-means components."""
        self.assignment_strategy = HardAssignment(metric=CosineDistance())
        self.update_strategy = MeanUpdater()
        self.initialization_strategy = FirstKInit()
        self.objective = CosineObjective()
        
    def _create_representations(self, data: Tensor, n_clusters: int) -> List[ClusterRepresentation]:
        """Seed centroid representations."""
        return self.initialization_strategy.initialize(data, n_clusters)


def cluster(vectors: Iterable[LabeledInput],
            k: int = 3,
            max_iterations: int = 10,
            device: Optional[torch.device] = None) -> ClusterResult:
    """Group labeled embedding vectors into ``k`` clusters by cosine distance.
    
    Args:
        vectors: LabeledVectors or (id, vector) pairs, ids unique
        k: Number of clusters; clamped to the number of vectors
        max_iterations: Number of refinement iterations, always run in full
        device: Optional torch device
        
    Returns:
        ClusterResult with ``k`` identifier lists and a (k, d) centroid tensor;
        empty when ``vectors`` is empty
        
    Raises:
        InvalidParameterError: k or max_iterations not positive, duplicate ids
        DimensionMismatchError: Vectors of differing lengths
        DegenerateVectorError: A zero vector in the input, or a centroid that
            collapses to zero
    """
    model = CosineKMeans(n_clusters=k, max_iter=max_iterations, device=device)
    return model.fit_predict(vectors)
