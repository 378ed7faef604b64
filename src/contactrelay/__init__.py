"""Relay contact form submissions to the CRM."""

from django.utils.functional import LazyObject, empty

from .handler import CRMHandler


class DefaultCRM(LazyObject):
    """The configured CRM backend, built when the relay first talks to the CRM."""

    def _setup(self):
        """Build the backend from the settings."""
        self._wrapped = crm_handler()

    def reset(self):
        """Drop the wrapped backend, the next access builds it again."""
        self._wrapped = empty


crm_handler = CRMHandler()
crm = DefaultCRM()
