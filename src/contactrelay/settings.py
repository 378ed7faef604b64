"""
Django settings for the contact relay.

Configuration classes are selected with the DJANGO_CONFIGURATION environment
variable; values are read from the process environment at startup.
"""

from pathlib import Path

from configurations import Configuration, values

from contactrelay.configuration import CredentialValue
from contactrelay.mapping import INTEREST_MAPPING

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Base(Configuration):
    """Settings shared by every environment."""

    SECRET_KEY = values.Value("django-insecure-contact-relay-development-key")  # noqa: S105
    DEBUG = False
    ALLOWED_HOSTS = values.ListValue(["*"])

    INSTALLED_APPS = [
        "django.contrib.contenttypes",
        "django.contrib.auth",
        "rest_framework",
        "contactrelay",
    ]

    MIDDLEWARE = [
        "django.middleware.security.SecurityMiddleware",
        "django.middleware.common.CommonMiddleware",
    ]

    ROOT_URLCONF = "contactrelay.urls"
    WSGI_APPLICATION = "contactrelay.wsgi.application"

    # No database: contacts live in the CRM only
    DATABASES = {}

    # Forms may carry long messages
    DATA_UPLOAD_MAX_MEMORY_SIZE = 50 * 1024 * 1024

    APPEND_SLASH = False

    USE_TZ = True
    TIME_ZONE = "UTC"

    REST_FRAMEWORK = {
        "DEFAULT_AUTHENTICATION_CLASSES": [],
        "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
        "DEFAULT_PARSER_CLASSES": [
            "rest_framework.parsers.JSONParser",
            "rest_framework.parsers.FormParser",
        ],
        "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
        "UNAUTHENTICATED_USER": None,
    }

    PORT = values.IntegerValue(3000, environ_name="PORT", environ_prefix=None)

    # HubSpot
    HUBSPOT_API_KEY = CredentialValue(None, environ_name="HUBSPOT_API_KEY", environ_prefix=None)
    HUBSPOT_API_URL = values.Value("https://api.hubapi.com", environ_name="HUBSPOT_API_URL", environ_prefix=None)
    HUBSPOT_TIMEOUT = values.IntegerValue(10, environ_name="HUBSPOT_TIMEOUT", environ_prefix=None)

    CONTACT_RELAY_INTEREST_MAPPING = INTEREST_MAPPING

    LOG_LEVEL = values.Value("INFO", environ_name="LOG_LEVEL", environ_prefix=None)

    @property
    def CONTACT_RELAY_CRM(self):
        """CRM backend definition, loaded by the CRM handler."""
        return {
            "BACKEND": "contactrelay.backends.hubspot.HubSpotBackend",
            "PARAMETERS": {
                "api_key": self.HUBSPOT_API_KEY,
                "base_url": self.HUBSPOT_API_URL,
                "timeout": self.HUBSPOT_TIMEOUT,
            },
        }

    @property
    def LOGGING(self):
        """Log to the console."""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "verbose": {
                    "format": "{levelname} {asctime} {module} {message}",
                    "style": "{",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "verbose",
                },
            },
            "root": {
                "handlers": ["console"],
                "level": self.LOG_LEVEL,
            },
        }


class Development(Base):
    """Local development, contacts are kept in memory without a HubSpot key."""

    DEBUG = True

    @property
    def CONTACT_RELAY_CRM(self):
        """Fall back to the in-memory backend when HubSpot is not configured."""
        if not self.HUBSPOT_API_KEY:
            return {"BACKEND": "contactrelay.backends.dummy.DummyBackend"}
        return super().CONTACT_RELAY_CRM


class Test(Base):
    """Test suite settings."""

    HUBSPOT_API_KEY = "test-api-key"
    HUBSPOT_API_URL = "https://api.hubapi.com"
    HUBSPOT_TIMEOUT = 10
    LOG_LEVEL = "DEBUG"


class Production(Base):
    """Production settings."""

    SECRET_KEY = values.SecretValue()
    ALLOWED_HOSTS = values.ListValue([], environ_required=True)
