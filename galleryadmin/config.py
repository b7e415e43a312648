# galleryadmin/config.py
"""
Central configuration.

Everything here comes from environment variables with local-dev defaults.
Services never read this directly: routes and CLI commands pass the values
they need as arguments.
"""

import os


class Config:
    BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

    # Render persistent disk often is /var/data
    DATA_DIR = os.environ.get("DATA_DIR") or ("/var/data" if os.path.isdir("/var/data") else BASE_DIR)

    os.makedirs(DATA_DIR, exist_ok=True)

    MAIN_DB_PATH = os.path.join(DATA_DIR, "gallery.db")

    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-change-me")

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL") or "sqlite:///" + MAIN_DB_PATH
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Origin the checkout links inside QR codes point to (no trailing slash).
    # Empty or unset falls back to http://localhost:3000 in services/links.py
    PUBLIC_BASE_URL = os.environ.get("PUBLIC_BASE_URL", "")

    QR_ERROR_CORRECTION = os.environ.get("QR_ERROR_CORRECTION", "M")
    QR_MARGIN = int(os.environ.get("QR_MARGIN", "1"))
    QR_WIDTH = int(os.environ.get("QR_WIDTH", "300"))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    PUBLIC_BASE_URL = "https://gallery.test"
    LOG_LEVEL = "DEBUG"
