"""Shared fixtures: a fresh app per test and a TestClient bound to it."""

import pytest
from fastapi.testclient import TestClient

from pulsekeys_mock.server import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
