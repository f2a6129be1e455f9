from pathlib import Path

import pytest
import structlog

from timecard.storage import Dataset, load_dataset

DATA_PATH = Path(__file__).resolve().parent / "data" / "timecards.json"


@pytest.fixture
def dataset() -> Dataset:
    return load_dataset(DATA_PATH)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    # the CLI binds log output to the stderr captured for that test
    structlog.reset_defaults()
