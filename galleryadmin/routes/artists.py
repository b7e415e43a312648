# galleryadmin/routes/artists.py
"""
Artist listing, creation and deletion.
"""

from flask import Blueprint, current_app, jsonify, request

from ..result import Err
from ..schema import art_piece_to_dict, artist_to_dict
from ..services.art_pieces import list_art_pieces_by_artist
from ..services.artists import create_artist, delete_artist, list_artists
from . import error_response

bp = Blueprint("artists", __name__)


@bp.route("/artists", methods=["GET"])
def artist_list():
    """Artists newest first, with their art piece count."""
    result = list_artists()
    if isinstance(result, Err):
        return error_response(result.error)
    return jsonify([artist_to_dict(artist, count) for artist, count in result.value])


@bp.route("/artists", methods=["POST"])
def add_artist():
    result = create_artist(request.get_json(silent=True))
    if isinstance(result, Err):
        return error_response(result.error)
    return jsonify(artist_to_dict(result.value)), 201


@bp.route("/artists/<artist_id>", methods=["DELETE"])
def remove_artist(artist_id):
    result = delete_artist(artist_id)
    if isinstance(result, Err):
        current_app.logger.warning("Delete of artist %s refused: %s", artist_id, result.error.message)
        return error_response(result.error)
    return "", 204


@bp.route("/artists/<artist_id>/art-pieces", methods=["GET"])
def artist_art_pieces(artist_id):
    result = list_art_pieces_by_artist(artist_id)
    if isinstance(result, Err):
        return error_response(result.error)
    return jsonify([art_piece_to_dict(a) for a in result.value])
