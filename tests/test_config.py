"""Tests for extrapolation parameters."""
import numpy as np
import pytest

from flo_extrapolate.config import ExtrapolationParams, resolve_scales
from flo_extrapolate.exceptions import InvalidDimensionsError


class TestExtrapolationParams:
    """Test parameter overrides and scale resolution."""

    def test_defaults_derive_scales(self):
        ope = ExtrapolationParams(512, 488)
        sx, sy = ope.resolve_scales(128, 122)
        assert sx == np.float32(4.0)
        assert sy == np.float32(4.0)
        assert isinstance(sx, np.float32)

    def test_explicit_scales_win(self):
        ope = ExtrapolationParams(512, 488, 5.0, 5.0)
        assert ope.resolve_scales(128, 122) == (np.float32(5.0), np.float32(5.0))

    def test_parse_dict(self):
        ope = ExtrapolationParams().parse_input_parameter(
            {'width': 10, 'h': 20, 'x': 2.5, 'unknown': 1})
        assert (ope.width, ope.height, ope.scale_x, ope.scale_y) == (10, 20, 2.5, -1.0)
        assert not hasattr(ope, 'unknown')

    def test_parse_list(self):
        ope = ExtrapolationParams(4, 4)
        ope.parse_input_parameter(['scale_y', 3.0, 'y', 4.0])
        assert ope.scale_y == 4.0

    def test_parse_does_not_replace_methods(self):
        ope = ExtrapolationParams(4, 4)
        ope.parse_input_parameter({'validate': None, 'resolve_scales': 1, 'width': 8})
        assert ope.width == 8
        assert callable(ope.validate)
        ope.validate()
        assert ope.resolve_scales(2, 2) == (np.float32(4.0), np.float32(2.0))

    def test_parse_bad_type(self):
        with pytest.raises(TypeError):
            ExtrapolationParams().parse_input_parameter('width=3')

    @pytest.mark.parametrize('w,h', [(0, 5), (5, 0), (None, 5)])
    def test_validate(self, w, h):
        with pytest.raises(InvalidDimensionsError):
            ExtrapolationParams(w, h).validate()


def test_resolve_scales_float32_division():
    sx, sy = resolve_scales(10, 7, 3, 3)
    assert sx == np.float32(10) / np.float32(3)
    assert sy == np.float32(7) / np.float32(3)


def test_resolve_scales_float32_underflow_uses_default():
    """Positive factors too small for float32 fall back to the derived scale."""
    sx, sy = resolve_scales(4, 6, 2, 2, 1e-50, 1e-50)
    assert sx == np.float32(2.0)
    assert sy == np.float32(3.0)
