"""Test configuration and shared fixtures."""

import pytest

from config.config import CATEGORY_CODES
from tests.helpers import make_document


@pytest.fixture
def delays_document():
    """Delays for every category; area 42 is above the 9.5% threshold."""
    delayed = {"cm": 190, "41": 19, "42": 30, "43": 5, "44": 12345}
    total = {"cm": 2000, "41": 200, "42": 200, "43": 100, "44": 200000}
    return make_document({
        code: {
            "delayed_for_more_than_five_minutes": delayed[code],
            "total_until_now": total[code],
        }
        for code in CATEGORY_CODES
    })


@pytest.fixture
def validations_document():
    """Validations for every category; area 43 is below last week."""
    today = {"cm": 123456, "41": 1000, "42": 2500, "43": 900, "44": 1234}
    last_week = {"cm": 120000, "41": 1000, "42": 2000, "43": 1000, "44": 1000}
    return make_document({
        code: {"today_valid": today[code], "last_week_valid": last_week[code]}
        for code in CATEGORY_CODES
    })
