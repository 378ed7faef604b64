"""Contact relay application."""

from django.apps import AppConfig
from django.core.signals import setting_changed


def reset_crm(*, setting, **kwargs):
    """Build the CRM backend again when its settings change."""
    if setting == "CONTACT_RELAY_CRM":
        from contactrelay import crm, crm_handler  # noqa: PLC0415

        crm_handler.reset()
        crm.reset()


class ContactRelayConfig(AppConfig):
    """Configuration class for the contact relay app."""

    name = "contactrelay"
    verbose_name = "Contact relay"

    def ready(self):
        """Listen to setting changes, overridden settings come from the test suite."""
        setting_changed.connect(reset_crm)
