import sys

import dotenv
import pytest
from loguru import logger

_imported_before_env = pytest.StashKey[bool]()


def pytest_configure(config):
    # Settings are injected when squircle is first imported
    config.stash[_imported_before_env] = "squircle" in sys.modules
    dotenv.load_dotenv(".env.dev")


@pytest.fixture
def imported_before_env(pytestconfig) -> bool:
    return pytestconfig.stash[_imported_before_env]


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted by the library during a test."""
    from squircle import log

    messages: list[str] = []
    log.enable(True)
    sink_id = logger.add(lambda m: messages.append(m.record["message"]),
                         level="TRACE",
                         colorize=False)
    yield messages
    logger.remove(sink_id)
    log.enable(False)
