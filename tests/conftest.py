import pytest
from newsletter import create_app
from newsletter.config import Environments


@pytest.fixture
def make_app(tmp_path):
    """Build an app for a given environment, backed by a throwaway database."""
    def _make(env_name=Environments.TEST, **overrides):
        config = {
            "ENV_NAME": env_name,
            "DATABASE_PATH": str(tmp_path / "database.json"),
            "TESTING": True,
        }
        config.update(overrides)
        return create_app(config)
    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()
