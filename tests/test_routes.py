from decimal import Decimal

import pytest

from galleryadmin.extensions import db
from galleryadmin.models import ArtPiece, Transaction
from galleryadmin.services import certificates


def _create_piece(client, artist, **fields):
    payload = {"name": "Sunset", "artist_id": artist.id, **fields}
    resp = client.post("/art-pieces", json=payload)
    assert resp.status_code == 201
    return resp.get_json()


class TestArtistRoutes:
    def test_create_and_list(self, client) -> None:
        resp = client.post("/artists", json={"name": "Agnes Martin"})
        assert resp.status_code == 201
        created = resp.get_json()
        assert created["name"] == "Agnes Martin"

        listed = client.get("/artists").get_json()
        assert listed == [{**created, "art_piece_count": 0}]

    def test_create_invalid(self, client) -> None:
        resp = client.post("/artists", json={"name": ""})
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_create_without_body(self, client) -> None:
        assert client.post("/artists").status_code == 400

    def test_delete(self, client, artist) -> None:
        assert client.delete(f"/artists/{artist.id}").status_code == 204
        assert client.get("/artists").get_json() == []

    def test_delete_blocked(self, client, artist) -> None:
        _create_piece(client, artist, name="One")
        _create_piece(client, artist, name="Two")

        resp = client.delete(f"/artists/{artist.id}")

        assert resp.status_code == 409
        assert resp.get_json() == {
            "error": "Cannot delete artist with 2 art piece(s). Please delete the art pieces first."
        }

    def test_delete_missing(self, client) -> None:
        assert client.delete("/artists/missing").status_code == 404

    def test_art_pieces_of_artist(self, client, artist) -> None:
        created = _create_piece(client, artist)

        listed = client.get(f"/artists/{artist.id}/art-pieces").get_json()

        assert listed == [created]


class TestArtPieceRoutes:
    def test_create_serializes_row(self, client, artist) -> None:
        body = _create_piece(client, artist, price=19.5, year=1907, type="Oil")

        assert body["name"] == "Sunset"
        assert body["price"] == 19.5
        assert body["year"] == 1907
        assert body["type"] == "Oil"
        assert body["description"] is None
        assert body["artist_id"] == artist.id
        assert body["qr_code"].startswith("data:image/png;base64,")

    def test_create_invalid(self, client, artist) -> None:
        resp = client.post("/art-pieces", json={"artist_id": artist.id})
        assert resp.status_code == 400
        assert resp.get_json()["error"].startswith("name")

    def test_get(self, client, artist) -> None:
        created = _create_piece(client, artist)
        assert client.get(f"/art-pieces/{created['id']}").get_json() == created

    def test_get_missing(self, client) -> None:
        resp = client.get("/art-pieces/missing")
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Art piece not found"}

    def test_delete(self, client, artist) -> None:
        created = _create_piece(client, artist)
        assert client.delete(f"/art-pieces/{created['id']}").status_code == 204
        assert client.get(f"/art-pieces/{created['id']}").status_code == 404


class TestCertificateRoutes:
    def test_html_download(self, client, artist) -> None:
        created = _create_piece(client, artist, price=19.5)

        resp = client.get(f"/art-pieces/{created['id']}/certificate")

        assert resp.status_code == 200
        assert resp.mimetype == "text/html"
        assert "attachment" in resp.headers["Content-Disposition"]
        assert "Sunset-certificate.html" in resp.headers["Content-Disposition"]
        html = resp.get_data(as_text=True)
        assert created["qr_code"] in html
        assert "$19.50" in html
        assert f"ID: {created['id'][:8].upper()}" in html

    def test_html_missing(self, client) -> None:
        resp = client.get("/art-pieces/missing/certificate")
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Art piece not found"}

    def test_pdf_download(self, client, artist, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(certificates, "pdf_from_html_with_playwright", lambda html: b"%PDF-1.4 fake")
        created = _create_piece(client, artist)

        resp = client.get(f"/art-pieces/{created['id']}/certificate.pdf")

        assert resp.status_code == 200
        assert resp.mimetype == "application/pdf"
        assert "Sunset-certificate.pdf" in resp.headers["Content-Disposition"]
        assert resp.data == b"%PDF-1.4 fake"

    def test_pdf_render_failure(self, client, artist, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken(html):
            raise RuntimeError("no browser")

        monkeypatch.setattr(certificates, "pdf_from_html_with_playwright", broken)
        created = _create_piece(client, artist)

        resp = client.get(f"/art-pieces/{created['id']}/certificate.pdf")

        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Failed to generate art piece document"}


class TestTransactionRoutes:
    def test_list(self, client, artist) -> None:
        piece = ArtPiece(name="Sunset", artist_id=artist.id)
        db.session.add(piece)
        db.session.commit()
        db.session.add(Transaction(amount=Decimal("19.50"), blumon_id="bl-1", art_piece_id=piece.id))
        db.session.commit()

        listed = client.get("/transactions").get_json()

        assert len(listed) == 1
        assert listed[0]["amount"] == 19.5
        assert listed[0]["blumon_id"] == "bl-1"
        assert listed[0]["art_piece_id"] == piece.id

    def test_empty(self, client) -> None:
        assert client.get("/transactions").get_json() == []
