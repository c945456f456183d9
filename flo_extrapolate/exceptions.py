"""Exceptions raised while reading, resampling and writing flow files."""


class FloError(Exception):
    """Base class for all flo_extrapolate errors."""
    pass


class InputUnavailableError(FloError, OSError):
    """Source file is missing or cannot be opened for reading."""
    pass


class OutputUnavailableError(FloError, OSError):
    """Destination file cannot be opened for writing."""
    pass


class WriteFailureError(OutputUnavailableError):
    """Destination accepted fewer bytes than the encoded container."""
    pass


class FloFormatError(FloError, ValueError):
    """Container content does not follow the FLO/FLOW layout."""
    pass


class InvalidHeaderError(FloFormatError):
    """The 4-byte tag is missing or matches no known variant."""
    pass


class TruncatedHeaderError(FloFormatError):
    """Width or height could not be read."""
    pass


class TruncatedDataError(FloFormatError):
    """Payload holds fewer samples than width * height * channels."""
    pass


class InvalidDimensionsError(FloFormatError):
    """Width or height is not strictly positive."""
    pass
