"""
Shared pytest fixtures — in-memory SQLite + FastAPI TestClient.
"""
import pathlib

import pytest
from fastapi.testclient import TestClient

from app.billing import models  # noqa: F401  — register model
from app.billing.database import Base, create_db_engine, create_session_factory
from app.billing.store import TransactionStore
from app.config import Settings
from app.main import create_app

PUBLIC_DIR = pathlib.Path(__file__).resolve().parent.parent / "public"


class RecordingNotifier:
    """Keeps every message instead of sending it."""

    def __init__(self, delivered=True):
        self.delivered = delivered
        self.sent = []

    def send(self, destination, message):
        self.sent.append((destination, message))
        return self.delivered


@pytest.fixture()
def settings():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        PUBLIC_DIR=str(PUBLIC_DIR),
    )


@pytest.fixture()
def make_notifier():
    return RecordingNotifier


@pytest.fixture()
def notifier(make_notifier):
    return make_notifier()


# ── store-level fixtures ─────────────────────────────────────────────────
@pytest.fixture()
def engine():
    # StaticPool (set for sqlite://) keeps one shared in-memory database
    eng = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture()
def db(engine):
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def store(db):
    return TransactionStore(db)


# ── HTTP fixtures ────────────────────────────────────────────────────────
@pytest.fixture()
def app(settings, notifier):
    return create_app(settings=settings, notifier=notifier)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c
