import pytest

from galleryadmin import create_app
from galleryadmin.config import TestConfig
from galleryadmin.extensions import db
from galleryadmin.models import Artist


@pytest.fixture()
def app():
    """App on a fresh in-memory SQLite database, with an app context pushed."""
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def artist(app) -> Artist:
    artist = Artist(name="Hilma af Klint")
    db.session.add(artist)
    db.session.commit()
    return artist
