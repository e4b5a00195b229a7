"""Shared fixtures for decoder tests."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_transactions(fixtures_dir: Path) -> list[dict]:
    """
    Load sample transactions from fixture file.

    Order: Ether transfer, USDT transfer, DAI transferFrom, contract
    creation, unknown call, transfer with a malformed address word.
    """
    with open(fixtures_dir / "sample_transactions.json", "r") as f:
        return json.load(f)
