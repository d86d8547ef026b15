"""
docclusters: embedding-based document clustering.

Groups documents into similarity clusters with a cosine-distance k-means
and answers related-document queries over the same embeddings. Embeddings
come from an external text-embedding service; this package only consumes
them.

Example usage:
    >>> from docclusters import LabeledVector, cluster
    >>> 
    >>> vectors = [
    ...     LabeledVector('A', [1.0, 0.0]),
    ...     LabeledVector('B', [0.9, 0.1]),
    ...     LabeledVector('C', [0.0, 1.0]),
    ...     LabeledVector('D', [0.1, 0.9]),
    ... ]
    >>> result = cluster(vectors, k=2, max_iterations=5)
    >>> result.clusters
    [['A', 'B'], ['C', 'D']]
"""

__version__ = '0.1.0'

# Import main algorithms
from .algorithms.kmeans import CosineKMeans, cluster
from .algorithms.related import (
    suggest_n_clusters,
    find_similar,
    similarity_graph,
    group_documents
)

# Convenience imports
from .base import (
    LabeledVector,
    ClusterResult,
    SimilarDocument,
    SimilarityEdge
)

from .utils.vector_math import (
    dot,
    magnitude,
    cosine_similarity,
    cosine_distance
)

from .errors import (
    ClusteringError,
    DimensionMismatchError,
    DegenerateVectorError,
    InvalidParameterError,
    UnknownDocumentError
)

__all__ = [
    # Algorithms
    'CosineKMeans',
    'cluster',
    
    # Related documents
    'suggest_n_clusters',
    'find_similar',
    'similarity_graph',
    'group_documents',
    
    # Core data structures  
    'LabeledVector',
    'ClusterResult',
    'SimilarDocument',
    'SimilarityEdge',
    
    # Vector math
    'dot',
    'magnitude',
    'cosine_similarity',
    'cosine_distance',
    
    # Errors
    'ClusteringError',
    'DimensionMismatchError',
    'DegenerateVectorError',
    'InvalidParameterError',
    'UnknownDocumentError',
    
    # Version
    '__version__'
]
