"""Utility functions for document clustering."""

from .vector_math import (
    as_vector,
    dot,
    magnitude,
    cosine_similarity,
    cosine_distance,
    cosine_distances_to
)

from .metrics import (
    pairwise_cosine_similarity,
    total_cosine_distance
)

from .validation import (
    validate_labeled_vectors,
    check_directions,
    check_n_clusters,
    check_max_iter,
    check_limit
)

from .device import (
    get_default_device,
    parse_device
)

__all__ = [
    # Vector math
    'as_vector',
    'dot',
    'magnitude',
    'cosine_similarity',
    'cosine_distance',
    'cosine_distances_to',
    
    # Metrics
    'pairwise_cosine_similarity',
    'total_cosine_distance',
    
    # Validation
    'validate_labeled_vectors',
    'check_directions',
    'check_n_clusters',
    'check_max_iter',
    'check_limit',
    
    # Device management
    'get_default_device',
    'parse_device'
]
