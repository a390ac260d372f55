from datetime import date

import pytest

from rsaid.util.beartype import maybe_setup_beartype

# Has to happen before any test module imports rsaid.service
maybe_setup_beartype()

pytest_plugins = ["rsaid.util.test.expected"]


@pytest.fixture
def reference_date() -> date:
    return date(2024, 6, 15)
