"""In-memory motion field representation.

A field is a raster of cells, each holding ``channels`` consecutive float32
values (u, v and, for the extended variant, a confidence). Samples are kept
as a flat row-major buffer exactly as they appear in the container:

    cell (x, y) -> samples[(y * width + x) * channels : ... + channels]
"""
from enum import Enum

import numpy as np

from flo_extrapolate.exceptions import InvalidDimensionsError, InvalidHeaderError


class FlowVariant(Enum):
    """Container variant: header tag and number of channels per cell."""

    BASIC = (b'PIEH', 2)
    EXTENDED = (b'PIEI', 3)

    def __init__(self, tag, channels):
        self.tag = tag
        self.channels = channels

    @classmethod
    def from_tag(cls, tag):
        """Look up the variant for a 4-byte header tag.

        Raises:
            InvalidHeaderError: If the tag matches neither variant.
        """
        for variant in cls:
            if variant.tag == tag:
                return variant
        raise InvalidHeaderError(f'Invalid file type tag: {tag!r}')

    @classmethod
    def from_channels(cls, channels):
        for variant in cls:
            if variant.channels == channels:
                return variant
        raise ValueError(f'No flow variant with {channels} channels')


class MotionField:
    """Decoded flow raster.

    Args:
        width: Number of columns (> 0).
        height: Number of rows (> 0).
        variant: FlowVariant of the field.
        samples: Flat sequence of width * height * channels values.
    """

    __hash__ = None

    def __init__(self, width, height, variant, samples):
        width = int(width)
        height = int(height)
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(
                f'Invalid width or height: {width}x{height}'
            )
        samples = np.ascontiguousarray(samples, dtype=np.float32).ravel()
        expected = width * height * variant.channels
        if samples.size != expected:
            raise ValueError(
                f'Expected {expected} samples for a {width}x{height} '
                f'{variant.name} field, got {samples.size}'
            )
        self.width = width
        self.height = height
        self.variant = variant
        self.samples = samples

    @property
    def channels(self):
        return self.variant.channels

    @property
    def shape(self):
        return (self.height, self.width, self.channels)

    def as_array(self):
        """Return a (H, W, C) view onto the sample buffer."""
        return self.samples.reshape(self.shape)

    @classmethod
    def zeros(cls, width, height, variant):
        """Allocate a zero-initialized field."""
        return cls(width, height, variant,
                   np.zeros(int(width) * int(height) * variant.channels,
                            dtype=np.float32))

    @classmethod
    def from_array(cls, flow, variant=None):
        """Build a field from a (H, W, 2) or (H, W, 3) array."""
        flow = np.asarray(flow, dtype=np.float32)
        if flow.ndim != 3 or flow.shape[2] not in (2, 3):
            raise ValueError(
                f'Flow must be (H, W, 2) or (H, W, 3) array, got shape {flow.shape}'
            )
        if variant is None:
            variant = FlowVariant.from_channels(flow.shape[2])
        elif variant.channels != flow.shape[2]:
            raise ValueError(
                f'{variant.name} fields have {variant.channels} channels, '
                f'array has {flow.shape[2]}'
            )
        h, w = flow.shape[:2]
        return cls(w, h, variant, flow)

    def __eq__(self, other):
        # Bitwise comparison so that NaN payloads round-trip as equal
        if not isinstance(other, MotionField):
            return NotImplemented
        return (self.width == other.width
                and self.height == other.height
                and self.variant is other.variant
                and self.samples.tobytes() == other.samples.tobytes())

    def __repr__(self):
        return (f'MotionField(width={self.width}, height={self.height}, '
                f'variant={self.variant.name})')
