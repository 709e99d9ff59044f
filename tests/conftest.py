"""Shared fixtures for the interpolation tests."""

import numpy as np
import pytest

from polyinterp.interpolation import Method


@pytest.fixture(params=list(Method), ids=lambda m: m.value)
def method(request):
    return request.param


@pytest.fixture
def quadratic_samples():
    # P(x) = x^2 + 1
    return [0.0, 1.0, 2.0], [1.0, 2.0, 5.0]


@pytest.fixture
def random_samples():
    rng = np.random.default_rng(0)
    x = np.linspace(-3.0, 3.0, 7) + rng.uniform(-0.2, 0.2, 7)
    y = rng.normal(size=7)
    return x, y
