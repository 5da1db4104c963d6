import logging

import pytest

ANNOUNCE = b"http://tracker.example/announce"
CREATION_DATE = 1700000000


def make_info(**overrides) -> dict:
    info = {
        b"name": b"a.txt",
        b"length": 100,
        b"piece length": 16384,
        b"private": 0,
        b"pieces": bytes(20),
    }
    info.update({key.replace("_", " ").encode(): val for key, val in overrides.items()})
    return {k: v for k, v in info.items() if v is not None}


def make_multi_info(**overrides) -> dict:
    info = make_info(length=None)
    info[b"name"] = b"album"
    info[b"files"] = [
        {b"length": 60, b"path": [b"disc1", b"track1.flac"]},
        {b"length": 40, b"path": [b"cover.jpg"]},
    ]
    info.update({key.replace("_", " ").encode(): val for key, val in overrides.items()})
    return {k: v for k, v in info.items() if v is not None}


def make_document(info_node, **overrides) -> dict:
    document = {
        b"announce": ANNOUNCE,
        b"creation date": CREATION_DATE,
        b"info": info_node,
    }
    document.update(
        {key.replace("_", " ").encode(): val for key, val in overrides.items()}
    )
    return {k: v for k, v in document.items() if v is not None}


@pytest.fixture
def single_file_tree() -> dict:
    return make_document(make_info())


@pytest.fixture
def multi_file_tree() -> dict:
    return make_document(make_multi_info())


@pytest.fixture
def restore_logging():
    """Undo config_logging so later tests see a clean root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        listener = getattr(handler, "listener", None)
        if listener is not None and listener._thread is not None:
            listener.stop()
    root.handlers[:] = handlers
    root.setLevel(level)
