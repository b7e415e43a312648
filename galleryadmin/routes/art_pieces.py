# galleryadmin/routes/art_pieces.py
"""
Art piece CRUD. Creation also generates and stores the checkout QR code.
"""

from flask import Blueprint, current_app, jsonify, request

from ..result import Err
from ..schema import art_piece_to_dict
from ..services.art_pieces import create_art_piece, delete_art_piece, get_art_piece
from . import error_response, qr_options_from_config

bp = Blueprint("art_pieces", __name__)


@bp.route("/art-pieces", methods=["POST"])
def add_art_piece():
    result = create_art_piece(
        request.get_json(silent=True),
        base_url=current_app.config["PUBLIC_BASE_URL"],
        qr_options=qr_options_from_config(),
    )
    if isinstance(result, Err):
        return error_response(result.error)
    return jsonify(art_piece_to_dict(result.value)), 201


@bp.route("/art-pieces/<art_piece_id>", methods=["GET"])
def art_piece_detail(art_piece_id):
    result = get_art_piece(art_piece_id)
    if isinstance(result, Err):
        return error_response(result.error)
    return jsonify(art_piece_to_dict(result.value))


@bp.route("/art-pieces/<art_piece_id>", methods=["DELETE"])
def remove_art_piece(art_piece_id):
    result = delete_art_piece(art_piece_id)
    if isinstance(result, Err):
        return error_response(result.error)
    return "", 204
