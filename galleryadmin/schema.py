# galleryadmin/schema.py
"""
Request payload contracts and JSON serializers.

Create payloads are checked with pydantic. The *_to_dict helpers turn ORM rows
into plain JSON-safe dicts (ISO timestamps, floats instead of Decimals).
"""

import uuid
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .models import Artist, ArtPiece, Transaction


class CreateArtistInput(BaseModel):
    name: str = Field(min_length=2, max_length=255)


class CreateArtPieceInput(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    price: Optional[Decimal] = Field(default=None, ge=Decimal("0.01"), le=Decimal("999999.99"))
    artist_id: uuid.UUID
    image: Optional[str] = None
    year: Optional[int] = None
    type: Optional[str] = Field(default=None, max_length=255)


def _money(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


def artist_to_dict(artist: Artist, art_piece_count: Optional[int] = None) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": artist.id,
        "created_at": artist.created_at.isoformat(),
        "name": artist.name or "",
    }
    if art_piece_count is not None:
        data["art_piece_count"] = art_piece_count
    return data


def art_piece_to_dict(art_piece: ArtPiece) -> Dict[str, Any]:
    return {
        "id": art_piece.id,
        "created_at": art_piece.created_at.isoformat(),
        "name": art_piece.name,
        "description": art_piece.description,
        "price": _money(art_piece.price),
        "qr_code": art_piece.qr_code or None,
        "artist_id": art_piece.artist_id,
        "image": art_piece.image,
        "year": art_piece.year,
        "type": art_piece.type or "",
    }


def transaction_to_dict(transaction: Transaction) -> Dict[str, Any]:
    return {
        "id": transaction.id,
        "created_at": transaction.created_at.isoformat(),
        "amount": _money(transaction.amount),
        "blumon_id": transaction.blumon_id,
        "art_piece_id": transaction.art_piece_id,
    }
