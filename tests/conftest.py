"""Pytest configuration for raylite tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest

from raylite.core.ti_types import init_taichi


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    invalidate fields allocated by modules imported in earlier tests.
    """
    init_taichi(random_seed=42)
    yield


@pytest.fixture
def shapes():
    """A fresh ShapeFactory, so ids start at 0 in every test."""
    from raylite.geometry.shape import ShapeFactory

    return ShapeFactory()


@pytest.fixture
def default_world():
    """Two concentric spheres under a light at (-10, 10, -10)."""
    from raylite.scene.scenes import default_world as build_default_world

    return build_default_world()
