# galleryadmin/services/artists.py
"""
Artist listing, creation and guarded deletion.
"""

import logging
from typing import Any, List, Mapping, Tuple

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from ..errors import ArtistHasArtPiecesError, GalleryError, NotFoundError, PersistenceError
from ..extensions import db
from ..models import Artist, ArtPiece
from ..result import Err, Ok, Result
from ..schema import CreateArtistInput
from .validation import parse_input

logger = logging.getLogger(__name__)


def list_artists() -> Result[List[Tuple[Artist, int]], PersistenceError]:
    """All artists, newest first, each paired with how many art pieces it owns."""
    counts = (
        db.session.query(ArtPiece.artist_id, func.count(ArtPiece.id).label("n"))
        .group_by(ArtPiece.artist_id)
        .subquery()
    )
    try:
        rows = (
            db.session.query(Artist, func.coalesce(counts.c.n, 0))
            .outerjoin(counts, counts.c.artist_id == Artist.id)
            .order_by(Artist.created_at.desc())
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Error fetching artists")
        return Err(PersistenceError("Failed to fetch artists"))

    return Ok([(artist, int(n)) for artist, n in rows])


def create_artist(payload: Mapping[str, Any] | None) -> Result[Artist, GalleryError]:
    parsed = parse_input(CreateArtistInput, payload)
    if isinstance(parsed, Err):
        return parsed

    artist = Artist(name=parsed.value.name)
    try:
        db.session.add(artist)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error creating artist")
        return Err(PersistenceError("Failed to create artist"))

    logger.info("Created artist %s", artist.id)
    return Ok(artist)


def delete_artist(artist_id: str) -> Result[None, GalleryError]:
    """
    Delete an artist that owns no art pieces.

    While pieces remain, nothing is deleted and the Err names the count.
    """
    try:
        artist = db.session.get(Artist, artist_id)
        if artist is None:
            return Err(NotFoundError("Artist not found"))

        art_piece_count = ArtPiece.query.filter_by(artist_id=artist_id).count()
        if art_piece_count > 0:
            logger.info("Refusing to delete artist %s with %d art piece(s)", artist_id, art_piece_count)
            return Err(ArtistHasArtPiecesError(art_piece_count))

        db.session.delete(artist)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error deleting artist %s", artist_id)
        return Err(PersistenceError("Failed to delete artist"))

    logger.info("Deleted artist %s", artist_id)
    return Ok(None)
