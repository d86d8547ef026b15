"""
Similarity and quality measures over whole embedding sets.
"""

from typing import Optional
import torch
from torch import Tensor

from .vector_math import cosine_distances_to
from ..errors import DimensionMismatchError, DegenerateVectorError


def pairwise_cosine_similarity(X: Tensor, Y: Optional[Tensor] = None) -> Tensor:
    """Compute cosine similarity between every row of X and every row of Y.
    
    Args:
        X: (n, d) first set of vectors
        Y: (m, d) second set of vectors (if None, uses X)
        
    Returns:
        (n, m) similarity matrix
    """
    if Y is None:
        Y = X
    if X.shape[1] != Y.shape[1]:
        raise DimensionMismatchError(X.shape[1], Y.shape[1])
        
    X_norm = torch.linalg.vector_norm(X, dim=1, keepdim=True)
    Y_norm = torch.linalg.vector_norm(Y, dim=1, keepdim=True)
    if (X_norm == 0).any() or (Y_norm == 0).any():
        raise DegenerateVectorError("Cosine similarity is undefined for a zero vector")
        
    return torch.matmul(X, Y.t()) / (X_norm * Y_norm.t())


def total_cosine_distance(X: Tensor, labels: Tensor, centers: Tensor) -> float:
    """Sum of cosine distances from each point to its assigned center.
    
    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        centers: (k, d) cluster centers
        
    Returns:
        Total distance (lower is tighter)
    """
    total = 0.0
    n_clusters = centers.shape[0]
    
    for k in range(n_clusters):
        mask = labels == k
        if mask.any():
            total += cosine_distances_to(X[mask], centers[k]).sum().item()
            
    return total
