"""Mazefile Codec - header framing, body codecs and the decode/encode entry points."""
from .circular import decode_ring_body, encode_ring_body
from .header import parse_header, write_header
from .mazefile import decode, encode
from .rectangular import decode_grid_body, encode_grid_body

__all__ = [
    "decode",
    "encode",
    "parse_header",
    "write_header",
    "decode_grid_body",
    "encode_grid_body",
    "decode_ring_body",
    "encode_ring_body",
]
