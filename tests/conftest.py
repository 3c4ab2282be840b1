"""
Shared fixtures: a database snapshot and fake writers for the editor.
"""

import pytest

from adminDashboard.editor import CredentialEditor


class RecordingWriter:
    """Stands in for api.update_data and records every call"""

    def __init__(self):
        self.calls = []

    def __call__(self, path, value):
        self.calls.append((path, value))


class FailingWriter(RecordingWriter):
    """Records the call, then rejects it like an unreachable database"""

    def __call__(self, path, value):
        super().__call__(path, value)
        raise ConnectionError("database unreachable")


@pytest.fixture
def snapshot():
    return {
        "cred1": {
            "belongs_to_slot": "slot1",
            "email": "one@example.com",
            "password": "pw-one",
            "expiry_date": "2024-05-01",
            "locked": 0,
            "max_usage": 10,
            "usage_count": 3,
        },
        "cred2": {
            "belongs_to_slot": "slot2",
            "email": "two@example.com",
            "password": "pw-two",
            "expiry_date": "2024-13-45",
            "locked": 1,
            "max_usage": 5,
            "usage_count": 5,
        },
        "cred3": {
            "belongs_to_slot": "slot1",
            "email": "three@example.com",
            "password": "pw-three",
            "expiry_date": "2025-01-31",
            "locked": 0,
            "max_usage": 2,
            "usage_count": 7,
        },
        "cred4": {
            "belongs_to_slot": "slot9",
            "email": "four@example.com",
            "password": "pw-four",
            "expiry_date": "",
            "locked": 0,
            "max_usage": 0,
            "usage_count": 0,
        },
    }


@pytest.fixture
def slots():
    return {"slot1": {"name": "first"}, "slot2": {"name": "second"}, "slot3": {}}


@pytest.fixture
def writer():
    return RecordingWriter()


@pytest.fixture
def failing_writer():
    return FailingWriter()


@pytest.fixture
def editor(snapshot, slots, writer):
    return CredentialEditor(snapshot, slots, write=writer)


@pytest.fixture
def failing_editor(snapshot, slots, failing_writer):
    return CredentialEditor(snapshot, slots, write=failing_writer)
