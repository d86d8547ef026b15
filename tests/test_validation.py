# tests/test_validation.py
"""
Entry validation of labeled vector sets and call parameters.
"""

from __future__ import annotations

import math

import numpy as np
import pytest
import torch

from docclusters import LabeledVector
from docclusters.utils.validation import (
    validate_labeled_vectors,
    check_n_clusters,
    check_max_iter,
    check_limit,
)
from docclusters.errors import DimensionMismatchError, DegenerateVectorError, InvalidParameterError


def test_stacks_in_input_order():
    ids, X = validate_labeled_vectors([
        LabeledVector("b", [0.0, 1.0]),
        ("a", np.array([1.0, 0.0])),
        ("c", torch.tensor([1.0, 1.0])),
    ])
    assert ids == ["b", "a", "c"]
    assert X.dtype == torch.float64
    assert X.shape == (3, 2)
    assert torch.equal(X[1], torch.tensor([1.0, 0.0], dtype=torch.float64))


def test_empty_input():
    ids, X = validate_labeled_vectors([])
    assert ids == []
    assert X.shape[0] == 0


def test_dimension_mismatch_names_offender():
    vectors = [("a", [1.0, 0.0, 0.0, 0.0]), ("b", [0.0, 1.0, 0.0, 0.0]), ("c", [1.0, 1.0, 1.0])]
    with pytest.raises(DimensionMismatchError) as exc_info:
        validate_labeled_vectors(vectors)
    assert exc_info.value.expected == 4
    assert exc_info.value.got == 3
    assert exc_info.value.identifier == "c"


def test_expected_dimension_is_enforced():
    with pytest.raises(DimensionMismatchError):
        validate_labeled_vectors([("a", [1.0, 0.0])], expected_dimension=3)


def test_zero_vector_rejected():
    with pytest.raises(DegenerateVectorError, match="'z'"):
        validate_labeled_vectors([("a", [1.0, 0.0]), ("z", [0.0, 0.0])])


@pytest.mark.parametrize("bad", [math.nan, math.inf])
def test_non_finite_rejected(bad):
    with pytest.raises(DegenerateVectorError):
        validate_labeled_vectors([("a", [1.0, bad])])


def test_duplicate_ids_rejected():
    with pytest.raises(InvalidParameterError, match="Duplicate"):
        validate_labeled_vectors([("a", [1.0, 0.0]), ("a", [0.0, 1.0])])


def test_malformed_item_rejected():
    with pytest.raises(InvalidParameterError):
        validate_labeled_vectors([[1.0, 0.0]])


@pytest.mark.parametrize("check", [check_n_clusters, check_max_iter, check_limit])
@pytest.mark.parametrize("value", [0, -3, 2.5, True])
def test_positive_int_checks(check, value):
    with pytest.raises(InvalidParameterError):
        check(value)


def test_positive_int_checks_accept_numpy_ints():
    check_n_clusters(np.int64(3))
    check_max_iter(1)
