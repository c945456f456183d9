"""
Extrapolation parameters.

Holds target geometry and scale factors and resolves the effective
scales the resampler uses.
"""
import numpy as np

from flo_extrapolate.exceptions import InvalidDimensionsError

_PARAM_NAMES = ('width', 'height', 'scale_x', 'scale_y')
# Short command-line spellings
_PARAM_ALIASES = {'w': 'width', 'h': 'height', 'x': 'scale_x', 'y': 'scale_y'}


class ExtrapolationParams:
    """Target geometry for one extrapolation run.

    A scale factor <= 0 (the default) means "derive from dimensions":
    scale_x = width / source_width, scale_y = height / source_height.
    """

    def __init__(self, width=0, height=0, scale_x=-1.0, scale_y=-1.0):
        self.width = width
        self.height = height
        self.scale_x = scale_x
        self.scale_y = scale_y

    def parse_input_parameter(self, params):
        """Set parameters from a dictionary or list of key-value pairs.

        Args:
            params: dict or list of [key, value, key, value, ...].
        """
        if isinstance(params, dict):
            items = params.items()
        elif isinstance(params, (list, tuple)):
            items = zip(params[0::2], params[1::2])
        else:
            raise TypeError(f"params must be dict or list, got {type(params).__name__}")

        for key, val in items:
            attr = _PARAM_ALIASES.get(key, key)
            if attr in _PARAM_NAMES:
                setattr(self, attr, val)
        return self

    def validate(self):
        if self.width is None or self.height is None or self.width <= 0 or self.height <= 0:
            raise InvalidDimensionsError(
                f'Invalid target width or height: {self.width}x{self.height}'
            )

    def resolve_scales(self, source_width, source_height):
        """Return the effective (scale_x, scale_y) as float32.

        Args:
            source_width, source_height: Dimensions of the input field.
        """
        return resolve_scales(self.width, self.height, source_width, source_height,
                              self.scale_x, self.scale_y)


def resolve_scales(width, height, source_width, source_height, scale_x=None, scale_y=None):
    """Effective per-axis scale factors, computed in float32.

    Missing or non-positive factors default to target / source size.
    """
    # Test after the float32 cast: factors that underflow to 0 fall back too
    sx = np.float32(-1.0 if scale_x is None else scale_x)
    if sx <= 0:
        sx = np.float32(width) / np.float32(source_width)
    sy = np.float32(-1.0 if scale_y is None else scale_y)
    if sy <= 0:
        sy = np.float32(height) / np.float32(source_height)
    return sx, sy
