import pytest
from flask.testing import FlaskClient

from savings_gap.app import create_app
from savings_gap.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        cors_origins=("http://localhost:5173",),
        report_filename="plan-test.pdf",
        report_title="Test & Plan",
    )


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    app = create_app(settings)
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
