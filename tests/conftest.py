"""Keep config cache and overrides from leaking between tests."""

import pytest

from desikata import config


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    monkeypatch.delenv("DESIKATA_CONFIG", raising=False)
    config.reset()
    yield
    config.reset()


@pytest.fixture
def upi_log():
    return [
        {"id": "T1", "type": "credit", "amount": 5000, "to": "Salary",
         "category": "income", "date": "2025-01-01"},
        {"id": "T2", "type": "debit", "amount": 200, "to": "Swiggy",
         "category": "food", "date": "2025-01-02"},
        {"id": "T3", "type": "debit", "amount": 100, "to": "Swiggy",
         "category": "food", "date": "2025-01-03"},
    ]
