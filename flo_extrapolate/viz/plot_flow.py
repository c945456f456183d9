"""Flow field plotting."""
import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from flo_extrapolate.field import FlowVariant, MotionField
from flo_extrapolate.viz.flow_color import UNKNOWN_FLOW_THRESH, flow_to_color


def plot_flow(flow, style='color', ax=None, max_flow=None, step=1):
    """Plot a motion field.

    Args:
        flow: MotionField or (H, W, C>=2) array.
        style: 'color' (Middlebury), 'quiver', 'magnitude', 'confidence'.
        ax: matplotlib axes. If None, creates new figure.
        max_flow: Max flow for normalization.
        step: Step size for quiver plots.

    Returns:
        ax: The matplotlib axes used.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 6))

    field = flow if isinstance(flow, MotionField) else None
    uv = field.as_array() if field is not None else np.asarray(flow)

    u = uv[:, :, 0].astype(float)
    v = uv[:, :, 1].astype(float)
    unknown = (np.abs(u) > UNKNOWN_FLOW_THRESH) | (np.abs(v) > UNKNOWN_FLOW_THRESH)
    u[unknown] = 0
    v[unknown] = 0

    if style == 'color':
        ax.imshow(flow_to_color(flow, max_flow=max_flow))
        ax.set_title('Motion Field (Color)')
    elif style == 'quiver':
        H, W = u.shape
        Y, X = np.mgrid[0:H:step, 0:W:step]
        ax.quiver(X, Y, u[::step, ::step], v[::step, ::step], angles='xy')
        ax.set_ylim(H, 0)
        ax.set_xlim(0, W)
        ax.set_aspect('equal')
        ax.set_title('Motion Field (Quiver)')
    elif style == 'magnitude':
        ax.imshow(np.sqrt(u ** 2 + v ** 2), cmap='jet')
        ax.set_title('Flow Magnitude')
    elif style == 'confidence':
        if field is not None and field.variant is not FlowVariant.EXTENDED:
            raise ValueError('Confidence plot needs an extended (PIEI) field')
        if uv.shape[2] < 3:
            raise ValueError('Confidence plot needs a third channel')
        ax.imshow(uv[:, :, 2], cmap='gray')
        ax.set_title('Confidence')
    else:
        raise ValueError(f"Unknown style: {style}")

    ax.axis('off')
    return ax
