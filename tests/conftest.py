"""Pytest configuration and shared fixtures."""

from typing import Any, Dict

import pytest

from lcz_app.logging.config import configure_logging


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Configure structlog before any module logger is first used."""
    configure_logging(level="WARNING")


@pytest.fixture
def inductor_measurement() -> Dict[str, Any]:
    """1 mH inductor at 1 kHz against a 327.8 Ohm reference."""
    return {
        "reference_resistance": 327.8,
        "frequency": 1e3,
        "delta_t": 217e-6,
        "v_in": 8.81,
        "v_dut": 0.17827,
    }


@pytest.fixture
def capacitor_measurement() -> Dict[str, Any]:
    """1 uF capacitor with 10 Ohm ESR at 1 kHz against a 1 kOhm reference."""
    return {
        "reference_resistance": 1000.0,
        "frequency": 1e3,
        "delta_t": -215.138e-6,
        "v_in": 1.0,
        "v_dut": 0.155966,
    }
