import sys
from pathlib import Path

# Ensure the top-level modules are importable from the tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from init_logger import reset_logging


@pytest.hookimpl(wrapper=True, trylast=True)
def pytest_runtest_call(item):
    # pytest closes the capsys stream when the call phase ends, so detach any
    # handler bound to it before that happens rather than at fixture teardown.
    try:
        return (yield)
    finally:
        reset_logging()


@pytest.fixture(autouse=True)
def _reset_mst_logger() -> None:
    """Detach handlers a CLI run may have installed on the project logger."""

    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def graph_file(tmp_path):
    def write(text: str, name: str = "mst_data.in") -> str:
        path = tmp_path / name
        path.write_text(text)
        return str(path)

    return write
