import json
import threading
import time

import pytest
import taskboard.config
from taskboard import dependencies
from taskboard.dependencies import build_store
from taskboard.models.user import User
from taskboard.services import boards
from taskboard.store.json_file import JsonFileStore
from taskboard.store.memory import MemoryStore
from taskboard.store.sql import SqlDocumentStore

EMPTY = {"users": [], "boards": [], "tasks": [], "invites": []}


def test_missing_file_loads_empty_document(tmp_path):
    store = JsonFileStore(tmp_path / "data.json")
    assert store.load().to_json() == EMPTY


@pytest.mark.parametrize("content", ["{not json", "[]", '{"users": [{"id": 1}]}'])
def test_unreadable_file_loads_empty_document(tmp_path, content):
    path = tmp_path / "data.json"
    path.write_text(content, encoding="utf-8")
    assert JsonFileStore(path).load().to_json() == EMPTY


def test_json_file_uses_camel_case_keys(tmp_path):
    path = tmp_path / "nested" / "data.json"
    store = JsonFileStore(path)
    board = boards.create_board(store, "Sprint", "user-1")

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert set(raw) == {"users", "boards", "tasks", "invites"}
    assert raw["boards"] == [
        {"id": board.id, "name": "Sprint", "color": "#4A90E2", "ownerId": "user-1", "members": ["user-1"]}
    ]
    assert list(tmp_path.joinpath("nested").iterdir()) == [path]


def test_json_file_reads_legacy_document(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({
        "users": [{"id": "user-1", "name": "A", "email": "a@x.com", "passwordHash": "$2a$10$x"}],
        "boards": [{"id": "board-1", "name": "B", "color": "#4A90E2", "ownerId": "user-1", "members": ["user-1"]}],
        "tasks": [{"id": "task-1", "title": "t", "description": "", "dueDate": "", "boardId": "board-1",
                   "userId": "user-1", "items": [{"id": "item-1", "content": "c", "completed": True}]}],
        "invites": [{"id": "invite-1", "boardId": "board-1", "email": "b@x.com", "inviterId": "user-1",
                     "created": "2025-01-02T03:04:05.000Z"}],
    }), encoding="utf-8")

    store = JsonFileStore(path)
    doc = store.load()
    assert doc.users[0].password_hash == "$2a$10$x"
    assert [b.id for b in doc.boards] == ["board-1"]
    assert doc.tasks[0].assigned_user_id == "user-1"
    assert doc.tasks[0].items[0].completed is True
    assert doc.invites[0].created_at == "2025-01-02T03:04:05.000Z"

    # the next write keeps everything and normalizes the invite key
    boards.create_board(store, "New", "user-1")
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert [u["id"] for u in raw["users"]] == ["user-1"]
    assert [b["id"] for b in raw["boards"]][0] == "board-1"
    assert len(raw["boards"]) == 2
    assert raw["invites"][0]["createdAt"] == "2025-01-02T03:04:05.000Z"
    assert "created" not in raw["invites"][0]


def test_sql_store_round_trip(tmp_path):
    url = f"sqlite:///{tmp_path / 'taskboard.db'}"
    store = SqlDocumentStore(url)
    assert store.load().to_json() == EMPTY

    board = boards.create_board(store, "Sprint", "user-1")
    store.dispose()

    reopened = SqlDocumentStore(url)
    assert [b.id for b in reopened.load().boards] == [board.id]
    reopened.dispose()


def test_failed_transaction_saves_nothing():
    store = MemoryStore()
    with pytest.raises(RuntimeError):
        with store.transaction() as doc:
            doc.boards.append(boards.create_board(MemoryStore(), "B", "user-1"))
            raise RuntimeError("boom")
    assert store.load().boards == []


def test_memory_store_hands_out_copies():
    store = MemoryStore()
    doc = store.load()
    doc.users.append(User(id="user-1", name="A", email="a@x.com", password_hash="h"))
    assert store.load().users == []


def test_serialized_transactions_do_not_lose_updates(tmp_path):
    store = JsonFileStore(tmp_path / "data.json")

    def create(i):
        boards.create_board(store, f"B{i}", "user-1")

    threads = [threading.Thread(target=create, args=(i,)) for i in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store.load().boards) == 20


@pytest.mark.parametrize("backend,cls", [("json", JsonFileStore), ("sql", SqlDocumentStore), ("memory", MemoryStore)])
def test_build_store_from_config(monkeypatch, tmp_path, backend, cls):
    monkeypatch.setattr(taskboard.config, "STORE_BACKEND", backend)
    monkeypatch.setattr(taskboard.config, "DATA_FILE", str(tmp_path / "data.json"))
    monkeypatch.setattr(taskboard.config, "DATABASE_URL", f"sqlite:///{tmp_path / 'taskboard.db'}")
    assert isinstance(build_store(), cls)


def test_build_store_rejects_unknown_backend(monkeypatch):
    monkeypatch.setattr(taskboard.config, "STORE_BACKEND", "redis")
    with pytest.raises(RuntimeError):
        build_store()


def test_get_store_builds_one_store_under_concurrent_first_use(monkeypatch):
    built = []

    def slow_build():
        time.sleep(0.05)
        store = MemoryStore()
        built.append(store)
        return store

    monkeypatch.setattr(dependencies, "_store", None)
    monkeypatch.setattr(dependencies, "build_store", slow_build)

    barrier = threading.Barrier(8)
    results = []

    def first_request():
        barrier.wait()
        results.append(dependencies.get_store())

    threads = [threading.Thread(target=first_request) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(built) == 1
    assert all(r is built[0] for r in results)
