"""
Base class for clustering algorithms over labeled embedding sets.

Provides the common algorithmic skeleton for alternating between assignment
and update steps for a fixed number of iterations.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, List, Iterable
import torch
from torch import Tensor
import time
import warnings

from .interfaces import (
    ClusterRepresentation, AssignmentStrategy, ParameterUpdater,
    InitializationStrategy, ClusteringObjective
)
from .data_structures import (
    ClusterState, AssignmentMatrix, AlgorithmState, ClusterResult
)
from ..utils.device import parse_device
from ..utils.validation import (
    LabeledInput, validate_labeled_vectors, check_n_clusters, check_max_iter
)


class BaseClusteringAlgorithm:
    """Base class implementing the alternating optimization framework.
    
    Subclasses need to specify:
    - Cluster representation type
    - Assignment strategy  
    - Parameter update strategy
    - Initialization strategy
    - Objective function
    
    The loop always runs ``max_iter`` iterations. There is no convergence
    check, so the run length never depends on the data.
    """
    
    def __init__(self,
                 n_clusters: int,
                 max_iter: int = 10,
                 verbose: int = 0,
                 device: Optional[torch.device] = None):
        """
        Args:
            n_clusters: Number of clusters K (clamped to the number of vectors)
            max_iter: Number of iterations to run
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            device: Torch device (None for CPU)
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.verbose = verbose
        self.device = parse_device(device)
                
        # These will be set by subclasses
        self.representations: Optional[List[ClusterRepresentation]] = None
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.objective: Optional[ClusteringObjective] = None
        
        # Algorithm state
        self.fitted_ = False
        self.n_iter_ = 0
        self.n_clusters_ = 0
        self.history_: List[AlgorithmState] = []
        self.ids_: List[str] = []
        self.labels_: Optional[Tensor] = None
        self.result_: Optional[ClusterResult] = None
        
    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.
        
        Subclasses must implement this to instantiate:
        - self.assignment_strategy
        - self.update_strategy  
        - self.initialization_strategy
        - self.objective
        """
        pass
        
    @abstractmethod
    def _create_representations(self, data: Tensor, n_clusters: int) -> List[ClusterRepresentation]:
        """Create initial cluster representations.
        
        Args:
            data: (n, d) data tensor
            n_clusters: Effective number of clusters
            
        Returns:
            List of n_clusters cluster representations
        """
        pass
        
    def fit(self, vectors: Iterable[LabeledInput]) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.
        
        Args:
            vectors: LabeledVectors or (id, vector) pairs
            
        Returns:
            Self
        """
        return self._fit(vectors)
        
    def fit_predict(self, vectors: Iterable[LabeledInput]) -> ClusterResult:
        """Fit and return the cluster result."""
        self._fit(vectors)
        return self.result_
        
    def predict(self, vectors: Iterable[LabeledInput]) -> Tensor:
        """Assign new vectors to the fitted clusters.
        
        Args:
            vectors: LabeledVectors or (id, vector) pairs
            
        Returns:
            (n,) tensor of cluster indices, in input order
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")
        if not self.representations:
            raise RuntimeError("Model was fitted on an empty vector set")
            
        _, X = validate_labeled_vectors(
            vectors, device=self.device,
            expected_dimension=self.representations[0].dimension
        )
        if X.shape[0] == 0:
            return torch.empty(0, dtype=torch.long, device=self.device)
        
        return self.assignment_strategy.compute_assignments(X, self.representations)
        
    def _fit(self, vectors: Iterable[LabeledInput]) -> 'BaseClusteringAlgorithm':
        """Internal fit method implementing the alternating optimization.
        
        The run works on local state; fitted attributes are replaced together
        once every iteration has succeeded. A failed fit leaves the model
        unfitted.
        """
        self.fitted_ = False
        vectors = list(vectors)
        
        # An empty set has a defined, empty answer whatever the parameters
        if not vectors:
            self._store_fit(
                representations=[],
                history=[],
                ids=[],
                labels=torch.empty(0, dtype=torch.long, device=self.device),
                result=ClusterResult.empty()
            )
            return self
            
        check_n_clusters(self.n_clusters)
        check_max_iter(self.max_iter)
        ids, X = validate_labeled_vectors(vectors, device=self.device)
        n_points, dimension = X.shape
        
        n_clusters = self.n_clusters
        if n_clusters > n_points:
            if self.verbose:
                warnings.warn(f"n_clusters={n_clusters} exceeds the {n_points} vectors "
                              f"supplied; using {n_points}")
            n_clusters = n_points
        
        self._create_components()
        
        if self.verbose:
            print(f"Initializing {n_clusters} clusters from {n_points} vectors...")
            
        start_time = time.time()
        representations = self._create_representations(X, n_clusters)
        history: List[AlgorithmState] = []
        
        previous = None
        assignment_matrix = None
        
        for iteration in range(self.max_iter):
            iter_start_time = time.time()
            
            # Assignment step
            assignments = self.assignment_strategy.compute_assignments(
                X, representations
            )
            assignment_matrix = AssignmentMatrix(assignments, n_clusters)
            
            # Objective against the centroids the assignment used
            objective_value = self.objective.compute(
                X, representations, assignments
            )
            
            # Update step; empty clusters keep their centroid
            for k, representation in enumerate(representations):
                cluster_indices = assignment_matrix.get_cluster_indices(k)
                if len(cluster_indices) > 0:
                    self.update_strategy.update(representation, X[cluster_indices])
                        
            n_changed = assignment_matrix.n_changed(previous)
            previous = assignment_matrix
            
            history.append(AlgorithmState(
                iteration=iteration,
                cluster_state=self._extract_cluster_state(representations),
                assignments=assignment_matrix,
                objective_value=float(objective_value),
                n_changed=n_changed
            ))
            
            iter_time = time.time() - iter_start_time
            if self.verbose >= 2 or (self.verbose >= 1 and iteration % 10 == 0):
                obj_direction = "↓" if self.objective.minimize else "↑"
                print(f"Iteration {iteration:3d}: objective = {float(objective_value):.6f} "
                      f"{obj_direction} changed = {n_changed} ({iter_time:.3f}s)")
                      
        total_time = time.time() - start_time
        
        self._store_fit(
            representations=representations,
            history=history,
            ids=ids,
            labels=assignment_matrix.get_hard(),
            result=ClusterResult(
                clusters=assignment_matrix.to_clusters(ids),
                centroids=history[-1].cluster_state.means
            )
        )
        
        if self.verbose:
            n_empty = int((assignment_matrix.count_per_cluster() == 0).sum().item())
            if n_empty:
                warnings.warn(f"{n_empty} of {n_clusters} clusters are empty after "
                              f"{self.max_iter} iterations")
            print(f"Total fitting time: {total_time:.3f}s")
            
        return self
        
    def _store_fit(self, representations: List[ClusterRepresentation],
                   history: List[AlgorithmState], ids: List[str],
                   labels: Tensor, result: ClusterResult) -> None:
        """Replace all fitted attributes at once."""
        self.representations = representations
        self.history_ = history
        self.n_iter_ = len(history)
        self.n_clusters_ = len(representations)
        self.ids_ = ids
        self.labels_ = labels
        self.result_ = result
        self.fitted_ = True
        
    def _extract_cluster_state(self, representations: List[ClusterRepresentation]) -> ClusterState:
        """Extract centroids into a ClusterState object."""
        means = torch.stack([
            rep.get_parameters()['mean'] 
            for rep in representations
        ])
        
        return ClusterState(
            means=means,
            n_clusters=len(representations),
            dimension=means.shape[1]
        )
        
    @property
    def cluster_centers_(self) -> Tensor:
        """Get cluster centroids, (K, d)."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return self.result_.centroids
        
    @property 
    def inertia_(self) -> float:
        """Get objective value of the final iteration."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        if not self.history_:
            return 0.0
        return self.history_[-1].objective_value
        
    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'verbose': self.verbose,
            'device': self.device
        }
        
    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        for key, value in params.items():
            if key == 'device':
                value = parse_device(value)
            setattr(self, key, value)
        return self
