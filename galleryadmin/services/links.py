# galleryadmin/services/links.py
"""Checkout links encoded into art piece QR codes."""

DEFAULT_BASE_URL = "http://localhost:3000"


def checkout_url(art_piece_id: str, base_url: str | None = None) -> str:
    """
    Link a scanner follows to buy the piece.

    The id is appended as-is (no percent-encoding). Ids are server generated
    UUIDs so they never contain reserved URL characters.
    """
    return f"{base_url or DEFAULT_BASE_URL}/checkout?artPieceId={art_piece_id}"
