from galleryadmin import config
from galleryadmin.routes import qr_options_from_config
from galleryadmin.services.qr import QROptions


class TestConfigDefaults:
    def test_qr_defaults(self) -> None:
        assert config.Config.QR_ERROR_CORRECTION == "M"
        assert config.Config.QR_MARGIN == 1
        assert config.Config.QR_WIDTH == 300

    def test_test_config_uses_memory_db(self) -> None:
        assert config.TestConfig.SQLALCHEMY_DATABASE_URI == "sqlite://"


def test_qr_options_come_from_app_config(app) -> None:
    app.config.update(QR_ERROR_CORRECTION="H", QR_MARGIN=4, QR_WIDTH=200)
    assert qr_options_from_config() == QROptions(error_correction="H", margin=4, width=200)
