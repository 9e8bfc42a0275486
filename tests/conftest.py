import os
import sys
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


class StorageError(Exception):
    code = 42


def _raise_chain():
    try:
        raise StorageError('disk <full>')
    except StorageError as inner:
        raise RuntimeError('could not save report') from inner


@pytest.fixture
def chained_error():
    """RuntimeError caused by a StorageError, both raised."""
    try:
        _raise_chain()
    except RuntimeError as e:
        return e


@pytest.fixture
def simple_error():
    try:
        raise ValueError('bad value')
    except ValueError as e:
        return e


class RecordingLogger:
    def __init__(self):
        self.messages = []

    def error(self, message):
        self.messages.append(message)


@pytest.fixture
def recording_logger():
    return RecordingLogger()
