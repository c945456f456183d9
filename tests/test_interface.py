"""Tests for the read-resample-write pipeline."""
import numpy as np
import pytest

from flo_extrapolate.exceptions import (
    InputUnavailableError, InvalidDimensionsError, InvalidHeaderError,
    OutputUnavailableError,
)
from flo_extrapolate.field import FlowVariant
from flo_extrapolate.interface import extrapolate_flow
from flo_extrapolate.io.flo_io import read_flo, write_flo


class TestExtrapolateFlow:
    """Test the end-to-end pipeline."""

    def test_basic_pipeline(self, tmp_path, basic_2x2):
        in_path = str(tmp_path / 'small.flo')
        out_path = str(tmp_path / 'large.flo')
        write_flo(basic_2x2, in_path)

        result = extrapolate_flow(in_path, out_path, 4, 4, 2.0, 2.0)
        field = read_flo(out_path)
        assert field == result
        assert (field.width, field.height) == (4, 4)
        np.testing.assert_allclose(field.as_array()[1, 1], [0.75, 0.75])

    def test_variant_preserved(self, tmp_path, random_extended):
        in_path = str(tmp_path / 'small.flow')
        out_path = str(tmp_path / 'large.flow')
        write_flo(random_extended, in_path)
        extrapolate_flow(in_path, out_path, 12, 8)
        with open(out_path, 'rb') as f:
            assert f.read(4) == b'PIEI'
        assert read_flo(out_path).variant is FlowVariant.EXTENDED

    def test_params_override(self, tmp_path, basic_2x2):
        in_path = str(tmp_path / 'small.flo')
        out_path = str(tmp_path / 'large.flo')
        write_flo(basic_2x2, in_path)
        result = extrapolate_flow(in_path, out_path, 4, 4, params={'width': 6})
        assert result.width == 6

    def test_missing_input(self, tmp_path):
        out_path = tmp_path / 'out.flo'
        with pytest.raises(InputUnavailableError):
            extrapolate_flow(str(tmp_path / 'nope.flo'), str(out_path), 4, 4)
        assert not out_path.exists()

    def test_bad_input_writes_nothing(self, tmp_path):
        in_path = tmp_path / 'bad.flo'
        in_path.write_bytes(b'JUNKJUNKJUNK')
        out_path = tmp_path / 'out.flo'
        with pytest.raises(InvalidHeaderError):
            extrapolate_flow(str(in_path), str(out_path), 4, 4)
        assert not out_path.exists()

    def test_invalid_target(self, tmp_path, basic_2x2):
        in_path = str(tmp_path / 'small.flo')
        write_flo(basic_2x2, in_path)
        with pytest.raises(InvalidDimensionsError):
            extrapolate_flow(in_path, str(tmp_path / 'out.flo'), 0, 4)

    def test_unwritable_output(self, tmp_path, basic_2x2):
        in_path = str(tmp_path / 'small.flo')
        write_flo(basic_2x2, in_path)
        with pytest.raises(OutputUnavailableError):
            extrapolate_flow(in_path, str(tmp_path / 'missing' / 'out.flo'), 4, 4)
