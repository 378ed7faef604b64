"""Test the CRM lazy handler."""

from contactrelay import crm
from contactrelay.backends.dummy import DummyBackend


def test_crm_lazy_handler(settings):
    """Test the CRM lazy handler."""
    settings.CONTACT_RELAY_CRM = {
        "BACKEND": "contactrelay.backends.dummy.DummyBackend",
    }
    assert isinstance(crm, DummyBackend)
