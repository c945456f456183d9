"""Bilinear flow field resampling to a new raster size."""
import numpy as np

from flo_extrapolate.config import resolve_scales
from flo_extrapolate.exceptions import InvalidDimensionsError
from flo_extrapolate.field import MotionField


def interpolation_weights(rx, ry):
    """Bilinear weights of the 2x2 neighborhood around (rx, ry).

    Args:
        rx, ry: Source coordinates (scalars or broadcastable float32 arrays).

    Returns:
        w: Nested [wx][wy] weights; w[0][0] top-left, w[1][0] top-right,
            w[0][1] bottom-left, w[1][1] bottom-right.
    """
    rx = np.asarray(rx, dtype=np.float32)
    ry = np.asarray(ry, dtype=np.float32)
    x = rx - np.floor(rx)
    y = ry - np.floor(ry)

    return [[(1 - x) * (1 - y), (1 - x) * y],
            [x * (1 - y), x * y]]


def resample_flow(field, width, height, scale_x=None, scale_y=None):
    """Resample a motion field to (height, width) with bilinear weights.

    Destination cell (x, y) reads source coordinate (x / scale_x, y / scale_y).
    Neighbors falling outside the source raster are skipped and the remaining
    weights are NOT renormalized, so cells next to the right and bottom edges
    come out attenuated. Flow values are interpolated, not rescaled.

    Args:
        field: Source MotionField.
        width, height: Target size.
        scale_x, scale_y: Coordinate scale factors. None or <= 0 means
            width / field.width (resp. height / field.height).

    Returns:
        out: New MotionField (height, width) with the source's variant.
    """
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(
            f'Invalid target width or height: {width}x{height}'
        )
    sx, sy = resolve_scales(width, height, field.width, field.height,
                            scale_x, scale_y)

    src = field.as_array()
    src_h, src_w = src.shape[:2]

    rx = np.arange(width, dtype=np.float32) / sx
    ry = np.arange(height, dtype=np.float32) / sy
    kx = np.floor(rx).astype(np.int64)
    ky = np.floor(ry).astype(np.int64)

    wx_wy = interpolation_weights(rx[np.newaxis, :], ry[:, np.newaxis])

    out = MotionField.zeros(width, height, field.variant)
    acc = out.as_array()
    # Same accumulation order as a scalar loop: row by row, left to right
    for dy in (0, 1):
        iy = ky + dy
        valid_y = (iy >= 0) & (iy < src_h)
        rows = np.clip(iy, 0, src_h - 1)
        for dx in (0, 1):
            ix = kx + dx
            valid_x = (ix >= 0) & (ix < src_w)
            cols = np.clip(ix, 0, src_w - 1)

            valid = valid_y[:, np.newaxis] & valid_x[np.newaxis, :]
            if not valid.any():
                continue
            weight = wx_wy[dx][dy]
            contrib = weight[:, :, np.newaxis] * src[rows[:, np.newaxis], cols[np.newaxis, :]]
            np.add(acc, contrib, out=acc, where=valid[:, :, np.newaxis])

    return out
