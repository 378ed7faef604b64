"""Load the CRM backend the relay upserts contacts into."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from contactrelay.exceptions import CRMInvalidBackendError


class CRMHandler:
    """
    Build the CRM backend from its definition.

    The definition is `{"BACKEND": <dotted path>, "PARAMETERS": {...}}`, taken
    from settings.CONTACT_RELAY_CRM unless given explicitly. The backend is
    built once and shared by every request until `reset()`.
    """

    def __init__(self, backend=None):
        """Optionally use this backend definition instead of the settings."""
        self._backend = backend
        self._crm = None

    @cached_property
    def backend(self):
        """Backend definition, read once from the settings."""
        if self._backend is None:
            try:
                self._backend = settings.CONTACT_RELAY_CRM.copy()
            except AttributeError as e:
                raise ImproperlyConfigured("settings.CONTACT_RELAY_CRM is not configured") from e
        return self._backend

    def __call__(self):
        """Return the shared backend instance, building it on first use."""
        if self._crm is None:
            self._crm = self.create_crm(self.backend)
        return self._crm

    def reset(self):
        """Forget the backend, it is built again from the settings on next call."""
        self.__dict__.pop("backend", None)
        self._backend = None
        self._crm = None

    def create_crm(self, params):
        """Import the backend class and instantiate it with its parameters."""
        params = params.copy()
        backend = params.pop("BACKEND")
        parameters = params.pop("PARAMETERS", {})
        try:
            klass = import_string(backend)
        except ImportError as e:
            raise CRMInvalidBackendError(f"Could not find backend {backend!r}: {e}") from e
        return klass(**parameters)
