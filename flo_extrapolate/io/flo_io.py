"""Read and write FLO / FLOW motion field containers.

Both variants share one layout (native byte order):
    - 4 bytes: tag, b'PIEH' (FLO, u/v) or b'PIEI' (FLOW, u/v/confidence)
    - 4 bytes: width (int32)
    - 4 bytes: height (int32)
    - width * height * channels * 4 bytes: samples (float32, row-major,
      channel-interleaved)

Bytes following the payload are ignored.
"""
import logging
import os

import numpy as np

from flo_extrapolate.exceptions import (
    InputUnavailableError, InvalidDimensionsError, InvalidHeaderError,
    OutputUnavailableError, TruncatedDataError, TruncatedHeaderError, WriteFailureError,
)
from flo_extrapolate.field import FlowVariant, MotionField

logger = logging.getLogger(__name__)

TAG_SIZE = 4
_INT = np.dtype(np.int32)
_FLOAT = np.dtype(np.float32)


def decode_flo(stream):
    """Decode a container from a binary file-like object.

    Args:
        stream: Object with a ``read(n)`` method returning bytes.

    Returns:
        field: Decoded MotionField.

    Raises:
        InvalidHeaderError: Tag is short or unknown.
        TruncatedHeaderError: Width or height missing.
        InvalidDimensionsError: Width or height not positive.
        TruncatedDataError: Fewer samples than the header announces.
    """
    tag = stream.read(TAG_SIZE)
    if len(tag) < TAG_SIZE:
        raise InvalidHeaderError('Could not read file header')
    variant = FlowVariant.from_tag(bytes(tag))

    dims = stream.read(2 * _INT.itemsize)
    if len(dims) < _INT.itemsize:
        raise TruncatedHeaderError('Could not read width')
    if len(dims) < 2 * _INT.itemsize:
        raise TruncatedHeaderError('Could not read height')
    w, h = (int(d) for d in np.frombuffer(dims, dtype=_INT, count=2))

    if w <= 0 or h <= 0:
        raise InvalidDimensionsError(f'Invalid width or height: {w}x{h}')

    n = w * h * variant.channels
    payload = stream.read(n * _FLOAT.itemsize)
    if len(payload) < n * _FLOAT.itemsize:
        raise TruncatedDataError(
            f'Incomplete data: expected {n} samples, got '
            f'{len(payload) // _FLOAT.itemsize}'
        )
    data = np.frombuffer(payload, dtype=_FLOAT, count=n).copy()
    return MotionField(w, h, variant, data)


def encode_flo(field, stream):
    """Encode a MotionField into a binary file-like object.

    The whole container is assembled first and handed to ``stream.write``
    in one call.

    Raises:
        WriteFailureError: If the stream fails or accepts fewer bytes.
    """
    payload = b''.join([
        field.variant.tag,
        np.array([field.width, field.height], dtype=_INT).tobytes(),
        field.samples.astype(_FLOAT, copy=False).tobytes(),
    ])
    try:
        written = stream.write(payload)
    except OSError as e:
        raise WriteFailureError(f'Could not write flow data: {e}') from e
    if written is not None and written < len(payload):
        raise WriteFailureError(
            f'Short write: {written} of {len(payload)} bytes'
        )
    return len(payload)


def read_flo(filename):
    """Read a .flo / .flow file.

    Args:
        filename: Path to the container.

    Returns:
        field: MotionField with the file's variant.

    Raises:
        InputUnavailableError: File does not exist or cannot be opened.
        FloFormatError: Malformed content (see decode_flo).
    """
    try:
        f = open(filename, 'rb')
    except OSError as e:
        raise InputUnavailableError(f"Could not open file '{filename}'") from e
    with f:
        field = decode_flo(f)
    logger.debug('Read %s %dx%d from %s', field.variant.name,
                 field.width, field.height, filename)
    return field


def write_flo(field, filename):
    """Write a .flo / .flow file.

    Args:
        field: MotionField, or a (H, W, 2) / (H, W, 3) array.
        filename: Output path.

    Raises:
        OutputUnavailableError: Destination cannot be opened.
        WriteFailureError: Writing failed; the partial file is removed.
    """
    if not isinstance(field, MotionField):
        field = MotionField.from_array(field)

    try:
        f = open(filename, 'wb')
    except OSError as e:
        raise OutputUnavailableError(
            f"Could not open '{filename}' for writing"
        ) from e
    try:
        with f:
            encode_flo(field, f)
    except OSError as e:
        if os.path.exists(filename):
            os.remove(filename)
        if isinstance(e, WriteFailureError):
            raise
        raise WriteFailureError(f"Could not write '{filename}': {e}") from e
    logger.debug('Wrote %s %dx%d to %s', field.variant.name,
                 field.width, field.height, filename)
