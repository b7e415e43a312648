# galleryadmin/routes/__init__.py
"""
HTTP blueprints. Each feature lives in its own module; this module holds the
helpers they share for reading config and turning service errors into JSON.
"""

from flask import current_app, jsonify

from ..errors import GalleryError
from ..services.qr import QROptions


def error_response(error: GalleryError):
    """JSON body with the user-safe message, status from the error kind."""
    return jsonify({"error": error.message}), error.status_code


def qr_options_from_config() -> QROptions:
    return QROptions(
        error_correction=current_app.config["QR_ERROR_CORRECTION"],
        margin=current_app.config["QR_MARGIN"],
        width=current_app.config["QR_WIDTH"],
    )
