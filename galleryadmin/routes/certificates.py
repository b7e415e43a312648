# galleryadmin/routes/certificates.py
"""
Certificate downloads:
- museum label as a standalone HTML file
- the same label as PDF
"""

import io

from flask import Blueprint, current_app, send_file

from ..result import Err
from ..services.art_pieces import get_art_piece
from ..services.certificates import (
    certificate_filename,
    generate_art_piece_document,
    generate_art_piece_pdf,
)
from . import error_response

bp = Blueprint("certificates", __name__)


def _download_name(art_piece_id: str, extension: str) -> str:
    loaded = get_art_piece(art_piece_id)
    name = loaded.value.name if not isinstance(loaded, Err) else ""
    return certificate_filename(name, extension)


@bp.route("/art-pieces/<art_piece_id>/certificate")
def certificate_html(art_piece_id):
    result = generate_art_piece_document(art_piece_id)
    if isinstance(result, Err):
        current_app.logger.warning("Certificate for %s not generated: %s", art_piece_id, result.error.message)
        return error_response(result.error)

    return send_file(
        io.BytesIO(result.value.encode("utf-8")),
        mimetype="text/html",
        as_attachment=True,
        download_name=_download_name(art_piece_id, "html"),
    )


@bp.route("/art-pieces/<art_piece_id>/certificate.pdf")
def certificate_pdf(art_piece_id):
    result = generate_art_piece_pdf(art_piece_id)
    if isinstance(result, Err):
        current_app.logger.warning("Certificate PDF for %s not generated: %s", art_piece_id, result.error.message)
        return error_response(result.error)

    return send_file(
        io.BytesIO(result.value),
        mimetype="application/pdf",
        as_attachment=True,
        download_name=_download_name(art_piece_id, "pdf"),
    )
