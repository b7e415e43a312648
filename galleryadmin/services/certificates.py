# galleryadmin/services/certificates.py
"""
Certificate logic:
- assembling the museum label HTML for one art piece
- rendering that HTML to PDF using Playwright (no network)

The label is a single self-contained document: the only image is the QR code,
already stored on the row as a data URL.
"""

import logging
from decimal import Decimal
from typing import Optional, Union

from markupsafe import escape as html_escape

from ..errors import GalleryError, RenderError
from ..models import ArtPiece
from ..result import Err, Ok, Result
from .art_pieces import get_art_piece

logger = logging.getLogger(__name__)

UNKNOWN_ARTIST = "Unknown Artist"
NO_DESCRIPTION = "No description available."
QR_INSTRUCTION = "Scan to view online and purchase"
COLLECTION_LABEL = "Gallery Collection"

LABEL_CSS = """
    * { margin: 0; padding: 0; box-sizing: border-box; }

    @page { size: A5 landscape; margin: 0; }

    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Helvetica Neue', Arial, sans-serif;
      background: #f5f5f5;
      padding: 20px;
      display: flex;
      align-items: center;
      justify-content: center;
      min-height: 100vh;
    }

    .museum-label {
      background: white;
      width: 210mm;
      height: 148mm;
      padding: 40px;
      box-shadow: 0 2px 10px rgba(0,0,0,0.1);
      display: flex;
      flex-direction: column;
      justify-content: space-between;
      border: 1px solid #e0e0e0;
    }

    .label-header { border-bottom: 2px solid #1a1a1a; padding-bottom: 20px; margin-bottom: 25px; }
    .artwork-title { font-size: 28px; font-weight: 600; color: #1a1a1a; margin-bottom: 8px; line-height: 1.2; }
    .artist-name { font-size: 20px; color: #555; font-style: italic; margin-bottom: 12px; }
    .metadata { display: flex; gap: 20px; font-size: 14px; color: #666; flex-wrap: wrap; }
    .metadata-item { display: flex; gap: 6px; }
    .metadata-label { font-weight: 600; color: #333; }

    .label-body { flex: 1; display: flex; gap: 30px; }
    .description-section { flex: 1; }
    .description-text { font-size: 15px; line-height: 1.6; color: #333; text-align: justify; }
    .description-empty { color: #999; font-style: italic; }

    .price-info { margin-top: 20px; padding-top: 15px; border-top: 1px solid #e0e0e0; }
    .price-label { font-size: 13px; color: #666; margin-bottom: 4px; }
    .price-value { font-size: 22px; font-weight: 700; color: #1a1a1a; }

    .qr-section {
      display: flex;
      flex-direction: column;
      align-items: center;
      justify-content: center;
      min-width: 180px;
      padding: 20px;
      background: #fafafa;
      border-radius: 8px;
      border: 1px solid #e0e0e0;
    }
    .qr-code { width: 140px; height: 140px; margin-bottom: 12px; border: 2px solid #1a1a1a; border-radius: 4px; }
    .qr-instruction { font-size: 11px; color: #666; text-align: center; line-height: 1.4; max-width: 160px; }

    .label-footer {
      display: flex;
      justify-content: space-between;
      align-items: center;
      padding-top: 15px;
      border-top: 1px solid #e0e0e0;
      font-size: 11px;
      color: #999;
    }
    .gallery-info { font-weight: 500; }
    .certificate-id { font-family: 'Courier New', monospace; color: #666; }

    @media print {
      body { background: white; padding: 0; }
      .museum-label { box-shadow: none; border: none; width: 100%; height: 100%; }
    }
"""


def certificate_code(art_piece_id: str) -> str:
    """Short, human readable id for the label. Display only: not unique."""
    return art_piece_id[:8].upper()


def certificate_filename(art_piece_name: str, extension: str = "html") -> str:
    return f"{art_piece_name or 'art-piece'}-certificate.{extension}"


def format_price(price: Union[Decimal, float, int]) -> str:
    """en-US currency, always two decimals: 19.5 -> $19.50, 1234.5 -> $1,234.50"""
    return f"${Decimal(str(price)):,.2f}"


def _metadata_item(label: str, value: object) -> str:
    return (
        '<div class="metadata-item">'
        f'<span class="metadata-label">{label}:</span>'
        f"<span>{html_escape(value)}</span>"
        "</div>"
    )


def _description(description: Optional[str]) -> str:
    if description:
        return f'<div class="description-text">{html_escape(description)}</div>'
    return f'<div class="description-text description-empty">{NO_DESCRIPTION}</div>'


def _price(price: Optional[Decimal]) -> str:
    if not price:
        return ""
    return (
        '<div class="price-info">'
        '<div class="price-label">Price</div>'
        f'<div class="price-value">{format_price(price)}</div>'
        "</div>"
    )


def _qr_section(qr_code: Optional[str]) -> str:
    if not qr_code:
        return ""
    return (
        '<div class="qr-section">'
        f'<img src="{html_escape(qr_code)}" alt="QR Code" class="qr-code" />'
        f'<div class="qr-instruction">{QR_INSTRUCTION}</div>'
        "</div>"
    )


def render_certificate(art_piece: ArtPiece, artist_name: Optional[str]) -> str:
    """
    Build the printable museum label for `art_piece`.

    Year, medium, price and the QR block only appear when the piece has them;
    a missing description is replaced by a placeholder line.
    """
    metadata = ""
    if art_piece.year:
        metadata += _metadata_item("Year", art_piece.year)
    if art_piece.type:
        metadata += _metadata_item("Medium", art_piece.type)

    title = html_escape(art_piece.name)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title} - Museum Label</title>
  <style>{LABEL_CSS}</style>
</head>
<body>
  <div class="museum-label">
    <div class="label-header">
      <div class="artwork-title">{title}</div>
      <div class="artist-name">{html_escape(artist_name or UNKNOWN_ARTIST)}</div>
      <div class="metadata">{metadata}</div>
    </div>
    <div class="label-body">
      <div class="description-section">
        {_description(art_piece.description)}
        {_price(art_piece.price)}
      </div>
      {_qr_section(art_piece.qr_code)}
    </div>
    <div class="label-footer">
      <div class="gallery-info">{COLLECTION_LABEL}</div>
      <div class="certificate-id">ID: {html_escape(certificate_code(art_piece.id))}</div>
    </div>
  </div>
</body>
</html>
"""


def generate_art_piece_document(art_piece_id: str) -> Result[str, GalleryError]:
    """Fetch the piece with its artist and render its label. Nothing is written."""
    loaded = get_art_piece(art_piece_id)
    if isinstance(loaded, Err):
        logger.info("No certificate for art piece %s: %s", art_piece_id, loaded.error.message)
        return loaded

    art_piece = loaded.value
    return Ok(render_certificate(art_piece, art_piece.artist.name))


def pdf_from_html_with_playwright(html: str) -> bytes:
    """
    Render HTML to PDF using Playwright without navigating anywhere.
    The page size comes from the label's @page rule (A5 landscape).
    """
    from playwright.sync_api import sync_playwright

    with sync_playwright() as p:
        browser = p.chromium.launch(
            args=[
                "--no-sandbox",
                "--disable-setuid-sandbox",
                "--disable-dev-shm-usage",
            ]
        )
        page = browser.new_page()
        page.set_content(html, wait_until="load", timeout=60_000)

        pdf_bytes = page.pdf(
            format="A5",
            landscape=True,
            print_background=True,
            prefer_css_page_size=True,
        )
        browser.close()
        return pdf_bytes


def generate_art_piece_pdf(art_piece_id: str) -> Result[bytes, GalleryError]:
    document = generate_art_piece_document(art_piece_id)
    if isinstance(document, Err):
        return document

    try:
        return Ok(pdf_from_html_with_playwright(document.value))
    except Exception:
        logger.exception("Certificate PDF generation failed for art piece %s", art_piece_id)
        return Err(RenderError("Failed to generate art piece document"))
