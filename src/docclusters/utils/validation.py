"""
Input validation for labeled embedding sets and call parameters.

Every public entry point validates its whole input once, up front, so that a
malformed set fails before any clustering work starts.
"""

from typing import Optional, Union, Tuple, List, Sequence, Iterable
import numbers
import torch
from torch import Tensor

from ..base.data_structures import LabeledVector
from ..errors import DimensionMismatchError, DegenerateVectorError, InvalidParameterError
from .vector_math import as_vector


LabeledInput = Union[LabeledVector, Tuple[str, Sequence[float]]]


def _unpack(item: LabeledInput) -> Tuple[str, object]:
    if isinstance(item, LabeledVector):
        return item.id, item.vector
    if isinstance(item, tuple) and len(item) == 2:
        return item[0], item[1]
    raise InvalidParameterError(
        f"Expected LabeledVector or (id, vector) pair, got {type(item).__name__}"
    )


def validate_labeled_vectors(vectors: Iterable[LabeledInput],
                             device: Optional[torch.device] = None,
                             expected_dimension: Optional[int] = None) -> Tuple[List[str], Tensor]:
    """Validate a labeled vector set and stack it into a matrix.
    
    Args:
        vectors: LabeledVectors or (id, vector) pairs
        device: Target device
        expected_dimension: Required dimension; defaults to the first vector's
        
    Returns:
        ids: Identifiers in input order
        X: (n, d) float64 tensor, row i belongs to ids[i]
        
    Raises:
        InvalidParameterError: Malformed items or duplicate identifiers
        DimensionMismatchError: Vectors of differing lengths
        DegenerateVectorError: Zero-magnitude or non-finite vectors
    """
    ids: List[str] = []
    rows: List[Tensor] = []
    seen = set()
    
    for item in vectors:
        doc_id, raw = _unpack(item)
        if doc_id in seen:
            raise InvalidParameterError(f"Duplicate identifier '{doc_id}'")
        seen.add(doc_id)
        
        v = as_vector(raw, device=device)
        if expected_dimension is None:
            expected_dimension = v.shape[0]
        elif v.shape[0] != expected_dimension:
            raise DimensionMismatchError(expected_dimension, v.shape[0], doc_id)
            
        ids.append(doc_id)
        rows.append(v)
        
    if not rows:
        return ids, torch.empty(0, expected_dimension or 0, dtype=torch.float64, device=device)
        
    X = torch.stack(rows)
    check_directions(X, ids)
    return ids, X


def check_directions(X: Tensor, ids: Optional[List[str]] = None) -> None:
    """Ensure every row is finite and has a non-zero magnitude."""
    if not torch.isfinite(X).all():
        row = int((~torch.isfinite(X)).any(dim=1).nonzero()[0].item())
        name = ids[row] if ids is not None else row
        raise DegenerateVectorError(f"Vector '{name}' contains NaN or infinite values")
        
    norms = torch.linalg.vector_norm(X, dim=1)
    zero_rows = (norms == 0).nonzero()
    if len(zero_rows) > 0:
        row = int(zero_rows[0].item())
        name = ids[row] if ids is not None else row
        raise DegenerateVectorError(f"Vector '{name}' has zero magnitude")


def _check_positive_int(value, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{name} must be int, got {type(value).__name__}")
    if value <= 0:
        raise InvalidParameterError(f"{name} must be positive, got {value}")


def check_n_clusters(n_clusters: int) -> None:
    """Validate the requested number of clusters."""
    _check_positive_int(n_clusters, 'n_clusters')


def check_max_iter(max_iter: int) -> None:
    """Validate the iteration count."""
    _check_positive_int(max_iter, 'max_iter')


def check_limit(limit: int, name: str = 'limit') -> None:
    """Validate a result-count limit."""
    _check_positive_int(limit, name)
