"""
Related-document queries over an embedding set.

Exact (brute-force) cosine neighbour lookups: the documents most similar to
one document, and the related-documents graph linking every document to its
closest neighbours. Also the cluster-count heuristic used when grouping a
library whose size is not known in advance.
"""

from typing import Dict, List, Iterable, Optional
import torch

from ..base.data_structures import SimilarDocument, SimilarityEdge
from ..errors import InvalidParameterError, UnknownDocumentError
from ..utils.metrics import pairwise_cosine_similarity
from ..utils.validation import LabeledInput, validate_labeled_vectors, check_limit
from .kmeans import cluster


def suggest_n_clusters(n_documents: int, min_clusters: int = 2, max_clusters: int = 5) -> int:
    """Cluster count for a library of ``n_documents``: one per three documents,
    kept within [min_clusters, max_clusters]."""
    if n_documents < 0:
        raise InvalidParameterError(f"n_documents must be non-negative, got {n_documents}")
    return min(max_clusters, max(min_clusters, n_documents // 3))


def find_similar(target_id: str,
                 vectors: Iterable[LabeledInput],
                 limit: int = 5) -> List[SimilarDocument]:
    """Documents most similar to ``target_id``, best first.
    
    Args:
        target_id: Identifier of the reference document, must be in ``vectors``
        vectors: LabeledVectors or (id, vector) pairs
        limit: Maximum number of results
        
    Returns:
        Up to ``limit`` SimilarDocuments, excluding the target itself, sorted
        by descending similarity; equal similarities keep input order
    """
    check_limit(limit)
    ids, X = validate_labeled_vectors(vectors)
    
    index = {doc_id: row for row, doc_id in enumerate(ids)}
    if target_id not in index:
        raise UnknownDocumentError(f"Unknown document '{target_id}'")
    target = index[target_id]
    
    similarities = pairwise_cosine_similarity(X[target:target + 1], X)[0].tolist()
    candidates = [
        SimilarDocument(id=doc_id, similarity=similarities[row])
        for row, doc_id in enumerate(ids) if row != target
    ]
    candidates.sort(key=lambda doc: -doc.similarity)
    return candidates[:limit]


def similarity_graph(vectors: Iterable[LabeledInput],
                     top_n: int = 3,
                     threshold: float = 0.5) -> List[SimilarityEdge]:
    """Edges from each document to its closest neighbours.
    
    For every document (in input order) the ``top_n`` most similar other
    documents are considered, and an edge is kept when the similarity is
    strictly above ``threshold``.
    
    Returns:
        Directed SimilarityEdges; ``strength`` is the cosine similarity
    """
    check_limit(top_n, 'top_n')
    ids, X = validate_labeled_vectors(vectors)
    if not ids:
        return []
        
    S = pairwise_cosine_similarity(X).tolist()
    
    edges = []
    for i, source in enumerate(ids):
        neighbours = sorted(
            (j for j in range(len(ids)) if j != i),
            key=lambda j: -S[i][j]
        )
        for j in neighbours[:top_n]:
            if S[i][j] > threshold:
                edges.append(SimilarityEdge(source=source, target=ids[j], strength=S[i][j]))
                
    return edges


def group_documents(vectors: Iterable[LabeledInput],
                    k: Optional[int] = None,
                    max_iterations: int = 10,
                    device: Optional[torch.device] = None) -> Dict[str, int]:
    """Cluster index per document identifier.
    
    ``k`` defaults to ``suggest_n_clusters(len(vectors))``.
    """
    vectors = list(vectors)
    if k is None:
        k = suggest_n_clusters(len(vectors))
    return cluster(vectors, k=k, max_iterations=max_iterations, device=device).labels_by_id()
