# tests/test_vector_math.py
"""
Vector primitives: dot, magnitude, cosine similarity/distance and the batched
row-wise form used by the clustering engine.
"""

from __future__ import annotations

import math

import numpy as np
import pytest
import torch

from docclusters.utils.vector_math import (
    as_vector,
    dot,
    magnitude,
    cosine_similarity,
    cosine_distance,
    cosine_distances_to,
)
from docclusters.utils.metrics import pairwise_cosine_similarity
from docclusters.errors import DimensionMismatchError, DegenerateVectorError, InvalidParameterError


def test_dot_and_magnitude():
    assert dot([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == pytest.approx(32.0)
    assert magnitude([3.0, 4.0]) == pytest.approx(5.0)
    assert magnitude([0.0, 0.0]) == 0.0


def test_accepts_numpy_and_torch_inputs():
    a = np.array([1.0, 2.0])
    b = torch.tensor([2.0, 1.0], dtype=torch.float32)
    assert dot(a, b) == pytest.approx(4.0)

    v = as_vector(b)
    assert v.dtype == torch.float64


def test_as_vector_rejects_matrices():
    with pytest.raises(InvalidParameterError):
        as_vector([[1.0, 2.0], [3.0, 4.0]])


def test_dot_rejects_mismatched_lengths():
    with pytest.raises(DimensionMismatchError):
        dot([1.0, 2.0], [1.0, 2.0, 3.0])


@pytest.mark.parametrize("v", [[1.0, 0.0], [0.3, -2.0, 7.5], [1e-3, 1e-3, 1e-3, 1e-3]])
def test_self_similarity_is_one(v):
    assert abs(cosine_similarity(v, v) - 1.0) < 1e-9


def test_distance_ignores_magnitude():
    assert cosine_distance([1.0, 0.0], [5.0, 0.0]) == 0.0


def test_orthogonal_and_opposite():
    assert cosine_similarity([1.0, 0.0], [0.0, 3.0]) == pytest.approx(0.0)
    assert cosine_distance([1.0, 0.0], [0.0, 3.0]) == pytest.approx(1.0)
    assert cosine_distance([1.0, 1.0], [-2.0, -2.0]) == pytest.approx(2.0)


def test_zero_vector_is_degenerate():
    with pytest.raises(DegenerateVectorError):
        cosine_similarity([0.0, 0.0], [1.0, 0.0])
    with pytest.raises(DegenerateVectorError):
        cosine_distance([1.0, 0.0], [0.0, 0.0])


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        cosine_similarity([0.0], [1.0])


def test_batched_distances_match_scalar():
    points = torch.tensor([[1.0, 0.0], [0.9, 0.1], [0.0, 1.0], [-1.0, 0.5]], dtype=torch.float64)
    center = torch.tensor([0.6, 0.4], dtype=torch.float64)

    batched = cosine_distances_to(points, center)

    assert batched.shape == (4,)
    for i in range(4):
        assert batched[i].item() == pytest.approx(cosine_distance(points[i], center), abs=1e-12)


def test_batched_distances_reject_zero_center_and_points():
    points = torch.tensor([[1.0, 0.0]], dtype=torch.float64)
    with pytest.raises(DegenerateVectorError):
        cosine_distances_to(points, torch.zeros(2, dtype=torch.float64))

    with pytest.raises(DegenerateVectorError):
        cosine_distances_to(torch.zeros(1, 2, dtype=torch.float64),
                            torch.tensor([1.0, 0.0], dtype=torch.float64))


def test_batched_distances_reject_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        cosine_distances_to(torch.ones(3, 4, dtype=torch.float64),
                            torch.ones(3, dtype=torch.float64))


def test_pairwise_similarity_matrix():
    X = torch.tensor([[1.0, 0.0], [0.0, 2.0], [1.0, 1.0]], dtype=torch.float64)
    S = pairwise_cosine_similarity(X)

    assert S.shape == (3, 3)
    assert torch.allclose(torch.diagonal(S), torch.ones(3, dtype=torch.float64))
    assert S[0, 1].item() == pytest.approx(0.0)
    assert S[0, 2].item() == pytest.approx(1.0 / math.sqrt(2.0))
    assert torch.allclose(S, S.t())
