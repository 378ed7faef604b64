"""Run the contact relay server."""

import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Start the relay on the configured port."""

    help = "Run the contact relay on 0.0.0.0:<PORT>."

    def add_arguments(self, parser):
        """Allow overriding the configured port."""
        parser.add_argument("--port", type=int, default=None, help="Port to listen on, defaults to settings.PORT")

    def handle(self, *args, **options):
        """Log the configuration then hand over to runserver."""
        port = options["port"] or settings.PORT
        logger.info("Server is running on port %s", port)
        if settings.HUBSPOT_API_KEY:
            logger.info("HubSpot API Key configured: Yes")
        else:
            logger.warning("HubSpot API Key configured: No")
        call_command("runserver", f"0.0.0.0:{port}", use_reloader=False)
