"""
High-level interface: read a flow file, resample it, write it back.

The output container uses the same variant (FLO or FLOW) as the input.
"""
import logging
import os

from flo_extrapolate.config import ExtrapolationParams
from flo_extrapolate.exceptions import InputUnavailableError
from flo_extrapolate.io.flo_io import read_flo, write_flo
from flo_extrapolate.utils.warping import resample_flow

logger = logging.getLogger(__name__)


def extrapolate_flow(in_file, out_file, width, height, scale_x=None, scale_y=None,
                     params=None):
    """Extrapolate a low resolution flow file to a (typically) higher resolution.

    Args:
        in_file: Source .flo / .flow path.
        out_file: Destination path.
        width, height: Target raster size.
        scale_x, scale_y: Optional scale factors; None or <= 0 derives them
            from target / source size.
        params: Optional dict of parameter overrides (see ExtrapolationParams).

    Returns:
        field: The resampled MotionField that was written.

    Raises:
        InputUnavailableError: in_file does not exist.
        FloFormatError: in_file is malformed; nothing is written.
        OutputUnavailableError: out_file cannot be written.
    """
    ope = ExtrapolationParams(width, height,
                              -1.0 if scale_x is None else scale_x,
                              -1.0 if scale_y is None else scale_y)
    if params is not None:
        ope.parse_input_parameter(params)
    ope.validate()

    if not os.path.exists(in_file):
        raise InputUnavailableError(f"Unavailable file '{in_file}'")

    src = read_flo(in_file)
    sx, sy = ope.resolve_scales(src.width, src.height)
    logger.info('Resampling %s field %dx%d -> %dx%d (scale %g, %g)',
                src.variant.name, src.width, src.height,
                ope.width, ope.height, sx, sy)

    out = resample_flow(src, ope.width, ope.height, sx, sy)
    write_flo(out, out_file)
    logger.info('Wrote %s', out_file)
    return out
