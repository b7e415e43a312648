# galleryadmin/errors.py
"""
Error kinds returned (inside Err) by the service layer.

Every message is safe to show to a dashboard user; internal error text is
logged, never put in here.
"""


class GalleryError(Exception):
    """Base class for all gallery errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(GalleryError):
    """Input does not satisfy the create contract (missing name, unknown artist...)."""

    status_code = 400


class NotFoundError(GalleryError):
    """The requested artist or art piece does not exist."""

    status_code = 404


class ArtistHasArtPiecesError(GalleryError):
    """Deleting an artist that still owns art pieces."""

    status_code = 409

    def __init__(self, count: int) -> None:
        super().__init__(
            f"Cannot delete artist with {count} art piece(s). Please delete the art pieces first."
        )
        self.count = count


class EncodingError(GalleryError):
    """The QR code could not be generated."""


class PersistenceError(GalleryError):
    """A database create/read/update/delete failed."""


class RenderError(GalleryError):
    """The certificate could not be turned into a PDF."""
