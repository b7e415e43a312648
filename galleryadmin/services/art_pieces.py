# galleryadmin/services/art_pieces.py
"""
Art piece CRUD and the QR step of creation.

Creating a piece is two writes: insert the row (qr_code NULL), then derive the
checkout link from the new id, encode it and update the row. If the second
half fails the inserted row is removed again. A crash between the two commits
leaves a row without QR code; backfill_qr_codes() repairs those.
"""

import logging
from typing import Any, List, Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from ..errors import GalleryError, NotFoundError, PersistenceError, ValidationError
from ..extensions import db
from ..models import Artist, ArtPiece
from ..result import Err, Ok, Result
from ..schema import CreateArtPieceInput
from .links import checkout_url
from .qr import QROptions, encode_data_url
from .validation import parse_input

logger = logging.getLogger(__name__)


def list_art_pieces_by_artist(artist_id: str) -> Result[List[ArtPiece], PersistenceError]:
    try:
        art_pieces = (
            ArtPiece.query.filter_by(artist_id=artist_id)
            .order_by(ArtPiece.created_at.desc())
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Error fetching art pieces for artist %s", artist_id)
        return Err(PersistenceError("Failed to fetch art pieces"))
    return Ok(art_pieces)


def get_art_piece(art_piece_id: str) -> Result[ArtPiece, GalleryError]:
    """Load one art piece with its artist already joined in."""
    try:
        art_piece = db.session.get(ArtPiece, art_piece_id, options=[joinedload(ArtPiece.artist)])
    except SQLAlchemyError:
        logger.exception("Error fetching art piece %s", art_piece_id)
        return Err(PersistenceError("Failed to fetch art piece"))

    if art_piece is None:
        return Err(NotFoundError("Art piece not found"))
    return Ok(art_piece)


def attach_qr_code(
    art_piece: ArtPiece, base_url: str | None, qr_options: QROptions
) -> Result[ArtPiece, GalleryError]:
    """Encode the checkout link for `art_piece` and store it in its qr_code column."""
    encoded = encode_data_url(checkout_url(art_piece.id, base_url), qr_options)
    if isinstance(encoded, Err):
        return encoded

    try:
        art_piece.qr_code = encoded.value
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error saving QR code for art piece %s", art_piece.id)
        return Err(PersistenceError("Failed to save QR code"))
    return Ok(art_piece)


def _discard(art_piece: ArtPiece) -> None:
    art_piece_id = art_piece.id
    try:
        db.session.delete(art_piece)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Art piece %s was left without QR code; run backfill-qr", art_piece_id)


def create_art_piece(
    payload: Mapping[str, Any] | None,
    *,
    base_url: str | None,
    qr_options: QROptions = QROptions(),
) -> Result[ArtPiece, GalleryError]:
    parsed = parse_input(CreateArtPieceInput, payload)
    if isinstance(parsed, Err):
        return parsed
    data = parsed.value
    artist_id = str(data.artist_id)

    try:
        if db.session.get(Artist, artist_id) is None:
            return Err(ValidationError("artist_id: Please select an existing artist"))

        art_piece = ArtPiece(
            name=data.name,
            description=data.description or None,
            price=data.price,
            qr_code=None,
            artist_id=artist_id,
            image=data.image or None,
            year=data.year,
            type=data.type or None,
        )
        db.session.add(art_piece)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error creating art piece")
        return Err(PersistenceError("Failed to create art piece"))

    attached = attach_qr_code(art_piece, base_url, qr_options)
    if isinstance(attached, Err):
        _discard(art_piece)
        return attached

    logger.info("Created art piece %s for artist %s", art_piece.id, artist_id)
    return Ok(art_piece)


def delete_art_piece(art_piece_id: str) -> Result[None, GalleryError]:
    try:
        art_piece = db.session.get(ArtPiece, art_piece_id)
        if art_piece is None:
            return Err(NotFoundError("Art piece not found"))
        db.session.delete(art_piece)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error deleting art piece %s", art_piece_id)
        return Err(PersistenceError("Failed to delete art piece"))

    logger.info("Deleted art piece %s", art_piece_id)
    return Ok(None)


def backfill_qr_codes(base_url: str | None, qr_options: QROptions = QROptions()) -> Result[int, GalleryError]:
    """Give every art piece still missing a QR code one. Returns how many were fixed."""
    try:
        missing = ArtPiece.query.filter(ArtPiece.qr_code.is_(None)).all()
    except SQLAlchemyError:
        logger.exception("Error looking up art pieces without QR code")
        return Err(PersistenceError("Failed to fetch art pieces"))

    for art_piece in missing:
        attached = attach_qr_code(art_piece, base_url, qr_options)
        if isinstance(attached, Err):
            return attached
        logger.info("Backfilled QR code for art piece %s", art_piece.id)

    return Ok(len(missing))
