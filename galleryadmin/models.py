# galleryadmin/models.py
"""
Database models (tables).

Ids are UUID strings generated when the row is inserted.
models.py just defines data structure + relationships.
"""

import uuid
from datetime import datetime, timezone

from .extensions import db


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Artist(db.Model):
    __tablename__ = "artist"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)
    name = db.Column(db.String(255), nullable=False)

    # artist.art_pieces gives the owned pieces; no cascade, deletion is guarded instead
    art_pieces = db.relationship("ArtPiece", back_populates="artist")


class ArtPiece(db.Model):
    __tablename__ = "art_piece"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)

    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.String(1000))
    price = db.Column(db.Numeric(10, 2))
    qr_code = db.Column(db.Text)  # data:image/png;base64,... once the QR step ran

    artist_id = db.Column(db.String(36), db.ForeignKey("artist.id"), nullable=False, index=True)
    image = db.Column(db.String(2048))  # URL of the externally stored image
    year = db.Column(db.Integer)
    type = db.Column(db.String(255))  # medium

    artist = db.relationship("Artist", back_populates="art_pieces")


class Transaction(db.Model):
    """A sale recorded by the payment processor for one art piece."""

    __tablename__ = "transactions"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)
    amount = db.Column(db.Numeric(10, 2))
    blumon_id = db.Column(db.String(255))  # payment processor reference
    art_piece_id = db.Column(db.String(36), db.ForeignKey("art_piece.id"), nullable=False)

    art_piece = db.relationship("ArtPiece")
