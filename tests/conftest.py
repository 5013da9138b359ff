import pytest

from express_carrier import create_app


@pytest.fixture(scope="function")
def app():
    test_config = {
        "TESTING": True,
        "SECRET_KEY": "testing",
    }
    app = create_app(test_config)
    with app.app_context():
        yield app


@pytest.fixture(scope="function")
def test_client(app):
    with app.test_client() as testing_client:
        yield testing_client
