"""Clustering algorithms and related-document queries."""

from .kmeans import CosineKMeans, CosineObjective, cluster
from .related import suggest_n_clusters, find_similar, similarity_graph, group_documents

__all__ = [
    'CosineKMeans',
    'CosineObjective',
    'cluster',
    'suggest_n_clusters',
    'find_similar',
    'similarity_graph',
    'group_documents'
]
