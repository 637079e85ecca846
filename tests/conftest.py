"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from list_table.nodes import table_from_rows

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def revenue_table():
    """Five-row table with a header colspan, a body rowspan and a total row."""
    return table_from_rows(
        [
            ["Month", "[c2] Revenue", "_"],
            ["January", "Sales", "Services"],
            ["[r2] Q1", "$5000", "$3000"],
            ["_", "$6000", "$4000"],
            ["Total", "$11000", "$7000"],
        ]
    )
