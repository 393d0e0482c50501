import sys
from unittest.mock import MagicMock

import pytest

# Mock pyodbc so tests can run without ODBC drivers installed
if "pyodbc" not in sys.modules:
    sys.modules["pyodbc"] = MagicMock()

from app.rates.seed_data import MAX_COMPENSATION_RATES  # noqa: E402


@pytest.fixture
def rate_table() -> dict[int, float]:
    return dict(MAX_COMPENSATION_RATES)
