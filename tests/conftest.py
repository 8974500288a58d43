"""Shared fixtures for graph store tests."""

import pytest

from graph_schedule import DenseGraph, SparseGraph


@pytest.fixture(params=[DenseGraph, SparseGraph], ids=lambda store: store.__name__)
def store(request):
    """Each graph store class in turn."""
    return request.param
