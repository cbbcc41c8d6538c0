import pytest
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Holds skills/: two valid skills, one with array fields, one misnamed file."""
    return FIXTURES_DIR
