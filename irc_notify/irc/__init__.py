"""IRC framing and delivery."""

from .delivery import build_ssl_context, deliver  # noqa: F401
from .frame import encode_frame, encode_lines, frame_lines, split_body  # noqa: F401

__all__ = [
    "build_ssl_context",
    "deliver",
    "encode_frame",
    "encode_lines",
    "frame_lines",
    "split_body",
]
