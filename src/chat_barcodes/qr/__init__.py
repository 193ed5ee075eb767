"""QR encoding helpers."""

from .codec import QR_ERROR_LEVEL, make_qr, render_qr_image, scale_qr

__all__ = [
    "QR_ERROR_LEVEL",
    "make_qr",
    "render_qr_image",
    "scale_qr",
]
