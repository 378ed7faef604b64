"""Test the CRM handler."""

import pytest
from django.core.exceptions import ImproperlyConfigured

from contactrelay.backends.dummy import DummyBackend
from contactrelay.backends.hubspot import HubSpotBackend
from contactrelay.exceptions import CRMInvalidBackendError
from contactrelay.handler import CRMHandler


def test_crm_handler_from_settings(settings):
    """Test the CRM handler from the settings."""
    settings.CONTACT_RELAY_CRM = {
        "BACKEND": "contactrelay.backends.dummy.DummyBackend",
    }
    handler = CRMHandler()
    assert isinstance(handler(), DummyBackend)


def test_crm_handler_from_backend():
    """Test the CRM handler from the backend."""
    handler = CRMHandler(
        backend={
            "BACKEND": "contactrelay.backends.hubspot.HubSpotBackend",
            "PARAMETERS": {"api_key": "other-key", "timeout": 5},
        }
    )
    backend = handler()
    assert isinstance(backend, HubSpotBackend)
    assert backend.timeout == 5
    assert handler() is backend


def test_crm_handler_default_test_settings():
    """The test settings use the HubSpot backend with the test key."""
    backend = CRMHandler()()
    assert isinstance(backend, HubSpotBackend)
    assert backend.base_url == "https://api.hubapi.com"


def test_crm_backend_no_config(settings):
    """Test the CRM handler when no config set should raise an error."""
    del settings.CONTACT_RELAY_CRM
    handler = CRMHandler()
    with pytest.raises(ImproperlyConfigured):
        handler()


def test_crm_backend_invalid_backend():
    """An unknown backend class is reported."""
    handler = CRMHandler(backend={"BACKEND": "contactrelay.backends.unknown.UnknownBackend"})
    with pytest.raises(CRMInvalidBackendError, match="Could not find backend"):
        handler()


def test_crm_handler_reset(settings):
    """The backend is built again after a reset."""
    settings.CONTACT_RELAY_CRM = {"BACKEND": "contactrelay.backends.dummy.DummyBackend"}
    handler = CRMHandler()
    first = handler()

    handler.reset()

    assert handler() is not first
