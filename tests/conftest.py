import pytest
from fastapi.testclient import TestClient
from taskboard.dependencies import get_mailer, get_store
from taskboard.main import app
from taskboard.store.memory import MemoryStore
from taskboard.utils.mailer import Mailer


class FakeMailer(Mailer):
    """Records invitations instead of sending them; optionally fails like a dead relay."""

    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def send_invitation(self, to, board_name):
        self.sent.append((to, board_name))
        if self.error is not None:
            raise self.error


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def mailer():
    return FakeMailer()


# Every test gets its own in-memory document and mailer
@pytest.fixture
def client(store, mailer):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_mailer] = lambda: mailer
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
