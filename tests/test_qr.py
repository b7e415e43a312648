import base64
import io

import qrcode
from PIL import Image

from galleryadmin.errors import EncodingError
from galleryadmin.result import Err, Ok
from galleryadmin.services.qr import ERROR_CORRECTION_LEVELS, QROptions, encode_data_url

PREFIX = "data:image/png;base64,"
URL = "https://gallery.test/checkout?artPieceId=a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c5d"


def _image(data_url: str) -> Image.Image:
    assert data_url.startswith(PREFIX)
    return Image.open(io.BytesIO(base64.b64decode(data_url[len(PREFIX):])))


class TestEncodeDataUrl:
    def test_returns_png_data_url(self) -> None:
        result = encode_data_url(URL)
        assert isinstance(result, Ok)
        img = _image(result.value)
        assert img.format == "PNG"
        assert img.size == (300, 300)

    def test_custom_width(self) -> None:
        result = encode_data_url(URL, QROptions(width=120))
        assert isinstance(result, Ok)
        assert _image(result.value).size == (120, 120)

    def test_is_deterministic(self) -> None:
        first = encode_data_url(URL)
        second = encode_data_url(URL)
        assert isinstance(first, Ok) and isinstance(second, Ok)
        assert first.value == second.value

    def test_different_text_gives_different_image(self) -> None:
        first = encode_data_url(URL)
        second = encode_data_url(URL + "0")
        assert first.value != second.value

    def test_image_carries_the_encoded_modules(self) -> None:
        options = QROptions()
        result = encode_data_url(URL, options)
        img = _image(result.value).convert("L")

        reference = qrcode.QRCode(
            error_correction=ERROR_CORRECTION_LEVELS["M"], box_size=1, border=options.margin
        )
        reference.add_data(URL)
        reference.make(fit=True)
        matrix = reference.get_matrix()
        n = len(matrix)

        for row in range(n):
            for col in range(n):
                x = int((col + 0.5) * options.width / n)
                y = int((row + 0.5) * options.width / n)
                assert (img.getpixel((x, y)) < 128) == matrix[row][col]


class TestEncodeDataUrlFailures:
    def test_payload_too_long(self) -> None:
        result = encode_data_url("x" * 5000, QROptions(error_correction="H"))
        assert isinstance(result, Err)
        assert isinstance(result.error, EncodingError)
        assert result.error.message == "Failed to generate QR code"

    def test_unknown_error_correction_level(self) -> None:
        result = encode_data_url(URL, QROptions(error_correction="Z"))
        assert isinstance(result, Err)
        assert isinstance(result.error, EncodingError)

    def test_non_positive_width(self) -> None:
        result = encode_data_url(URL, QROptions(width=0))
        assert isinstance(result, Err)

    def test_negative_margin(self) -> None:
        result = encode_data_url(URL, QROptions(margin=-1))
        assert isinstance(result, Err)
