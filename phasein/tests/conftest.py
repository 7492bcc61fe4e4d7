import numpy as np
import pytest
from flask.testing import FlaskClient

from phasein.app import create_app
from phasein.config import AppConfig


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(AppConfig())
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
