"""FLO / FLOW container codec."""
from flo_extrapolate.io.flo_io import decode_flo, encode_flo, read_flo, write_flo

__all__ = ['decode_flo', 'encode_flo', 'read_flo', 'write_flo']
