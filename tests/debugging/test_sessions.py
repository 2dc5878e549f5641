import re
import threading

from qbdev.core.classes import DebugModeConfig, ExecutionMode, SessionStatus
from qbdev.debugging.sessions import SessionStore, new_session_id

SESSION_ID_REGEX = re.compile(r"^debug_\d+_[0-9a-z]{9}$")


def test_session_id_format():
    assert SESSION_ID_REGEX.match(new_session_id())
    assert new_session_id() != new_session_id()


def test_create_and_get():
    store = SessionStore()
    session = store.create("PRINT 1", "/tmp/project", DebugModeConfig(timeout_seconds=5), ExecutionMode.MIXED)
    assert SESSION_ID_REGEX.match(session.id)
    assert store.get(session.id) is session
    assert session.execution_mode == ExecutionMode.MIXED
    assert session.config.timeout_seconds == 5
    assert session.issues == [] and session.solutions == []
    assert len(store) == 1


def test_unknown_sessions():
    store = SessionStore()
    assert store.get("debug_1_aaaaaaaaa") is None
    assert not store.touch("debug_1_aaaaaaaaa")
    assert not store.close("debug_1_aaaaaaaaa")


def test_touch_and_close_update_activity():
    store = SessionStore()
    session = store.create("PRINT 1")
    before = session.last_activity
    assert store.touch(session.id)
    assert session.last_activity >= before

    assert store.close(session.id)
    assert session.status == SessionStatus.COMPLETED
    assert store.list_active() == []
    # Closed sessions stay retrievable.
    assert store.get(session.id) is session


def test_concurrent_creation():
    store = SessionStore()
    created = []
    lock = threading.Lock()

    def worker():
        for _ in range(25):
            session = store.create("PRINT 1")
            with lock:
                created.append(session.id)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store) == 200
    assert len(set(created)) == 200
    assert len(store.list_active()) == 200
