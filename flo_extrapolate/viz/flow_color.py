"""Middlebury color coding for previewing motion fields."""
import numpy as np
from PIL import Image

from flo_extrapolate.field import FlowVariant, MotionField

UNKNOWN_FLOW_THRESH = 1e9


def make_colorwheel():
    """Build the Middlebury 55-bin colorwheel.

    Returns:
        colorwheel: (55, 3) array of RGB values [0, 255].
    """
    RY, YG, GC, CB, BM, MR = 15, 6, 4, 11, 13, 6
    ncols = RY + YG + GC + CB + BM + MR
    colorwheel = np.zeros((ncols, 3))

    col = 0
    for length, fixed, ramp, rising in ((RY, 0, 1, True), (YG, 1, 0, False),
                                        (GC, 1, 2, True), (CB, 2, 1, False),
                                        (BM, 2, 0, True), (MR, 0, 2, False)):
        steps = np.floor(255 * np.arange(length) / length)
        colorwheel[col:col+length, fixed] = 255
        colorwheel[col:col+length, ramp] = steps if rising else 255 - steps
        col += length

    return colorwheel


def compute_color(u, v):
    """Compute color image from normalized flow components.

    Args:
        u, v: Flow components (H, W), should be normalized.

    Returns:
        img: Color image (H, W, 3), uint8.
    """
    colorwheel = make_colorwheel()
    ncols = colorwheel.shape[0]

    rad = np.sqrt(u ** 2 + v ** 2)
    a = np.arctan2(-v, -u) / np.pi

    fk = (a + 1) / 2.0 * (ncols - 1)
    k0 = np.floor(fk).astype(int)
    k1 = k0 + 1
    k1[k1 == ncols] = 0
    f = fk - k0

    img = np.zeros((*u.shape, 3), dtype=np.uint8)

    for i in range(3):
        tmp = colorwheel[k0, i] / 255.0 * (1 - f) + colorwheel[k1, i] / 255.0 * f
        tmp = 1 - rad * (1 - tmp)
        tmp[rad > 1] = tmp[rad > 1] * 0.75
        img[:, :, i] = np.floor(255 * np.clip(tmp, 0, 1)).astype(np.uint8)

    return img


def flow_to_color(flow, max_flow=None, use_confidence=False):
    """Convert a flow field to an RGB image using Middlebury color coding.

    Args:
        flow: MotionField or (H, W, C>=2) array.
        max_flow: Max flow magnitude for normalization. If None, auto-compute.
        use_confidence: For extended fields, scale brightness by the
            confidence channel clipped to [0, 1].

    Returns:
        img: (H, W, 3) uint8 RGB image.
    """
    confidence = None
    if isinstance(flow, MotionField):
        if use_confidence and flow.variant is FlowVariant.EXTENDED:
            confidence = flow.as_array()[:, :, 2]
        flow = flow.as_array()

    u = flow[:, :, 0].astype(float)
    v = flow[:, :, 1].astype(float)

    unknown = (np.abs(u) > UNKNOWN_FLOW_THRESH) | (np.abs(v) > UNKNOWN_FLOW_THRESH)

    if max_flow is not None:
        max_rad = max_flow
    elif np.any(~unknown):
        max_rad = np.sqrt(u[~unknown] ** 2 + v[~unknown] ** 2).max()
    else:
        max_rad = 1.0

    max_rad = max(max_rad, 1e-8)
    img = compute_color(u / max_rad, v / max_rad)
    if confidence is not None:
        scale = np.clip(confidence, 0, 1)[:, :, np.newaxis]
        img = np.floor(img * scale).astype(np.uint8)
    img[unknown] = 0

    return img


def save_flow_preview(field, filename, max_flow=None):
    """Write a color-coded PNG preview of a field."""
    img = flow_to_color(field, max_flow=max_flow,
                        use_confidence=field.variant is FlowVariant.EXTENDED)
    Image.fromarray(img).save(filename)
