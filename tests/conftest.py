from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def forecast_body() -> str:
    return (FIXTURES / "forecast_response.json").read_text(encoding="utf-8")
