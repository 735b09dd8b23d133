import logging
from pathlib import Path

import pytest

mock_data_path = Path(__file__).parent / "mockdata"

logging.getLogger("shareholding_tool").setLevel(logging.DEBUG)


@pytest.fixture(scope="session")
def mock_file_path():
    def _mock_file_path(file_name):
        return mock_data_path / file_name

    return _mock_file_path
