import pytest

from abjad_api.factory import create_app


@pytest.fixture(scope="session")
def app():
    """One app per session: the flask-smorest `Api` is a module-level singleton."""
    return create_app({"TESTING": True})


@pytest.fixture()
def client(app):
    return app.test_client()
