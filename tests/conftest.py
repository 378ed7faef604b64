"""Fixtures for the test suite."""

import pytest

from contactrelay import crm, crm_handler


@pytest.fixture(autouse=True)
def reset_crm_backend():
    """Build the CRM backend from the settings in every test."""
    crm_handler.reset()
    crm.reset()
    yield
    crm_handler.reset()
    crm.reset()
