"""
FLO(W) Motion Field Extrapolation Package

Reads optical flow containers in the FLO (u, v) and FLOW (u, v, confidence)
layouts, resamples them to a new raster size with bilinear weights, and
writes the result back in the same layout.
"""

from flo_extrapolate.field import FlowVariant, MotionField
from flo_extrapolate.interface import extrapolate_flow
from flo_extrapolate.io.flo_io import read_flo, write_flo
from flo_extrapolate.utils.warping import resample_flow
from flo_extrapolate.viz.flow_color import flow_to_color
from flo_extrapolate.viz.plot_flow import plot_flow

__all__ = [
    'FlowVariant',
    'MotionField',
    'extrapolate_flow',
    'read_flo',
    'write_flo',
    'resample_flow',
    'flow_to_color',
    'plot_flow',
]
