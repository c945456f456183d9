"""Shared fixtures for flow extrapolation tests."""
import numpy as np
import pytest

from flo_extrapolate.field import FlowVariant, MotionField


@pytest.fixture
def basic_2x2():
    """2x2 FLO field: (0,0)=(1,0), (1,0)=(2,0), (0,1)=(0,1), (1,1)=(0,2)."""
    return MotionField(2, 2, FlowVariant.BASIC, [1, 0, 2, 0, 0, 1, 0, 2])


@pytest.fixture
def random_basic():
    """Random 7x5 FLO field."""
    np.random.seed(42)
    return MotionField.from_array(np.random.randn(5, 7, 2).astype(np.float32))


@pytest.fixture
def random_extended():
    """Random 6x4 FLOW field with confidence in [0, 1]."""
    np.random.seed(7)
    flow = np.random.randn(4, 6, 3).astype(np.float32)
    flow[:, :, 2] = np.random.rand(4, 6)
    return MotionField.from_array(flow)


@pytest.fixture
def flo_bytes():
    """Build raw container bytes from a tag, dimensions and samples."""
    def build(tag, w, h, samples):
        return (tag + np.array([w, h], dtype=np.int32).tobytes()
                + np.asarray(samples, dtype=np.float32).tobytes())
    return build
