"""
Vector primitives for direction-based similarity.

Scalar helpers take two 1D vectors (lists, numpy arrays or tensors) and return
Python floats. ``cosine_distances_to`` is the batched form used by the
clustering engine. All computation happens in float64.
"""

from typing import Union, Sequence
import numpy as np
import torch
from torch import Tensor

from ..errors import DimensionMismatchError, DegenerateVectorError, InvalidParameterError


VectorLike = Union[Tensor, np.ndarray, Sequence[float]]


def as_vector(v: VectorLike, device: torch.device = None) -> Tensor:
    """Convert a vector-like object to a 1D float64 tensor."""
    if isinstance(v, Tensor):
        v = v.to(dtype=torch.float64, device=device)
    elif isinstance(v, np.ndarray):
        v = torch.from_numpy(v).to(dtype=torch.float64, device=device)
    else:
        v = torch.tensor(list(v), dtype=torch.float64, device=device)

    if v.dim() != 1:
        raise InvalidParameterError(f"Expected 1D vector, got {v.dim()}D")
    return v


def _check_same_length(a: Tensor, b: Tensor) -> None:
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatchError(a.shape[0], b.shape[0])


def dot(a: VectorLike, b: VectorLike) -> float:
    """Sum of elementwise products of two equal-length vectors."""
    a = as_vector(a)
    b = as_vector(b)
    _check_same_length(a, b)
    return torch.dot(a, b).item()


def magnitude(a: VectorLike) -> float:
    """Euclidean norm, sqrt(dot(a, a))."""
    a = as_vector(a)
    return torch.sqrt(torch.dot(a, a)).item()


def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
    """Cosine of the angle between two vectors, in [-1, 1].

    Raises:
        DimensionMismatchError: If the vectors differ in length
        DegenerateVectorError: If either vector has zero magnitude
    """
    a = as_vector(a)
    b = as_vector(b)
    _check_same_length(a, b)

    mag_a = torch.sqrt(torch.dot(a, a))
    mag_b = torch.sqrt(torch.dot(b, b))
    if mag_a == 0 or mag_b == 0:
        raise DegenerateVectorError("Cosine similarity is undefined for a zero vector")

    return (torch.dot(a, b) / (mag_a * mag_b)).item()


def cosine_distance(a: VectorLike, b: VectorLike) -> float:
    """1 - cosine_similarity(a, b); 0 for identical direction, 2 for opposite."""
    return 1.0 - cosine_similarity(a, b)


def cosine_distances_to(points: Tensor, center: Tensor) -> Tensor:
    """Cosine distance from every row of ``points`` to ``center``.

    Args:
        points: (n, d) float64 tensor
        center: (d,) float64 tensor

    Returns:
        (n,) tensor of cosine distances
    """
    if points.shape[1] != center.shape[0]:
        raise DimensionMismatchError(center.shape[0], points.shape[1])

    center_norm = torch.linalg.vector_norm(center)
    if center_norm == 0:
        raise DegenerateVectorError("Cluster centroid collapsed to the zero vector")

    point_norms = torch.linalg.vector_norm(points, dim=1)
    if (point_norms == 0).any():
        raise DegenerateVectorError("Cosine distance is undefined for a zero vector")

    similarities = torch.mv(points, center) / (point_norms * center_norm)
    return 1.0 - similarities
