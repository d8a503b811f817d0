import pytest

from object_manager.shared import cdi
from object_manager.shared.cdi import ObjectManager
from object_manager.shared.logger.base import Logger


class RecordingLogger(Logger):
    def __init__(self):
        self.lines = []
        self.exceptions = []

    def log(self, message: str) -> None:
        self.lines.append(message)

    def log_exception(self, message: str, error: BaseException) -> None:
        self.exceptions.append((message, error))


# -----------------------------
# Fixtures
# -----------------------------
@pytest.fixture(autouse=True)
def reset_default_container(monkeypatch):
    """Every test starts without a process-wide container."""
    monkeypatch.setattr(cdi, "_container", None)
    yield


@pytest.fixture
def container():
    return ObjectManager()


@pytest.fixture
def recording_logger(container):
    logger = RecordingLogger()
    container.bind_instance(Logger, logger)
    return logger
