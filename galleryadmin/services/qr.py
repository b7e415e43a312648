# galleryadmin/services/qr.py
"""
QR code generation.

Codes are returned as PNG data URLs so they can be stored in the art_piece
row and embedded straight into the certificate HTML (no file, no fetch).
"""

import base64
import io
import logging
from dataclasses import dataclass

import qrcode
from qrcode.exceptions import DataOverflowError
from PIL import Image

from ..errors import EncodingError
from ..result import Err, Ok, Result

logger = logging.getLogger(__name__)

ERROR_CORRECTION_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


@dataclass(frozen=True)
class QROptions:
    error_correction: str = "M"
    margin: int = 1  # quiet zone, in modules
    width: int = 300  # output size in pixels


def qr_png(text: str, options: QROptions) -> bytes:
    """
    Render `text` as a width x width PNG.

    Raises DataOverflowError when the text does not fit the largest QR version
    at the requested error correction level.
    """
    qr = qrcode.QRCode(
        version=None,  # smallest version that fits
        error_correction=ERROR_CORRECTION_LEVELS[options.error_correction],
        box_size=1,
        border=options.margin,
    )
    qr.add_data(text)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    img = img.resize((options.width, options.width), Image.Resampling.NEAREST)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def png_data_url(png: bytes) -> str:
    b64 = base64.b64encode(png).decode("ascii")
    return f"data:image/png;base64,{b64}"


def encode_data_url(text: str, options: QROptions = QROptions()) -> Result[str, EncodingError]:
    """Encode `text` as a QR code PNG data URL."""
    if options.error_correction not in ERROR_CORRECTION_LEVELS:
        logger.error("Unknown QR error correction level %r", options.error_correction)
        return Err(EncodingError("Failed to generate QR code"))
    if options.width <= 0 or options.margin < 0:
        logger.error("Invalid QR size: width=%s margin=%s", options.width, options.margin)
        return Err(EncodingError("Failed to generate QR code"))

    try:
        png = qr_png(text, options)
    except (DataOverflowError, ValueError):
        logger.exception("Error generating QR code for %d characters of text", len(text))
        return Err(EncodingError("Failed to generate QR code"))

    return Ok(png_data_url(png))
