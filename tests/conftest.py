import os
from pathlib import Path

import pytest

# Test layer by directory; integration tests are also marked slow unless marked fast
_LAYER_MARKERS = {
    "domain": pytest.mark.domain,
    "application": pytest.mark.application,
    "integration": pytest.mark.integration,
}


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config overlay from ratings/domain.toml to run the tests against",
    )


def pytest_sessionstart(session):
    """Initialise the Ratings domain once and leave its context pushed.

    Tests then reach the domain through ``current_domain``. Worker threads
    started by a test push their own context.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from ratings.domain import ratings

    ratings.init()
    ratings.domain_context().push()


def pytest_collection_modifyitems(config, items):
    for item in items:
        parts = Path(item.fspath).parts
        for layer, marker in _LAYER_MARKERS.items():
            if layer in parts:
                item.add_marker(marker)
                break

        if "integration" in parts and not any(m.name == "fast" for m in item.iter_markers()):
            item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session", autouse=True)
def setup_db():
    from ratings.domain import ratings
    from ratings.utils.db import drop_db, setup_db

    setup_db(ratings)
    yield
    drop_db(ratings)


@pytest.fixture(autouse=True)
def reset_stores():
    """Empty every provider and the event store after each test."""
    yield

    from protean import current_domain

    for provider in current_domain.providers.values():
        provider._data_reset()
    current_domain.event_store.store._data_reset()
