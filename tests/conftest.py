"""Shared fixtures: an in-memory database recreated for every test."""

import os
from datetime import date

import pytest

# Must be set before the app module reads its config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"

from taskmanager import app as flask_app  # noqa: E402
from taskmanager.models import db  # noqa: E402

TODAY = date(2024, 1, 2)


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True, CLOCK=lambda: TODAY)
    with flask_app.app_context():
        db.drop_all()
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def clock():
    return lambda: TODAY


@pytest.fixture
def user(app):
    from taskmanager.services import users
    return users.register("Ana", "ana@x.com", "secret123", date(1990, 5, 17))


@pytest.fixture
def activity(user):
    from taskmanager.services import activities
    return activities.create(user.id, "Run", "Morning run", "DAILY", date(2024, 1, 1))
