"""HubSpot CRM integration."""

import logging

import requests

from contactrelay.exceptions import ContactCreationError, ContactLookupError, ContactUpdateError

from .base import BaseBackend

logger = logging.getLogger(__name__)


class HubSpotBackend(BaseBackend):
    """
    HubSpot CRM integration.

    Works on the contacts object of the CRM v3 API:
    - search contacts by email
    - create contacts
    - patch contact properties
    """

    def __init__(self, api_key: str, base_url: str = "https://api.hubapi.com", timeout: int = 10):
        """Configure the HubSpot backend."""
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def contacts_url(self):
        """Return the url of the contacts object."""
        return f"{self.base_url}/crm/v3/objects/contacts"

    @property
    def _headers(self):
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def _request(self, method, url, payload, timeout, error_class, error_message):
        """Send a request to HubSpot and return the decoded JSON body."""
        try:
            response = requests.request(
                method,
                url,
                json=payload,
                headers=self._headers,
                timeout=timeout or self.timeout,
            )
        except requests.RequestException as err:
            raise error_class(f"{error_message}: {err}") from err

        try:
            response.raise_for_status()
        except requests.HTTPError as err:
            raise error_class(f"{error_message}: {err}", response=response) from err

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as err:
            raise error_class(f"{error_message}: malformed response", response=response) from err

    def find_by_email(self, email: str, timeout: int = None) -> str | None:
        """Search a HubSpot contact by email."""
        payload = {
            "filterGroups": [
                {
                    "filters": [
                        {
                            "propertyName": "email",
                            "operator": "EQ",
                            "value": email,
                        }
                    ]
                }
            ]
        }
        data = self._request(
            "POST",
            f"{self.contacts_url}/search",
            payload,
            timeout,
            ContactLookupError,
            "Failed to search contact in HubSpot",
        )

        try:
            if data.get("total", 0) > 0:
                return str(data["results"][0]["id"])
        except (AttributeError, IndexError, KeyError, TypeError) as err:
            raise ContactLookupError("Failed to search contact in HubSpot: malformed response") from err
        return None

    def create(self, properties: dict, timeout: int = None) -> str:
        """Create a HubSpot contact."""
        data = self._request(
            "POST",
            self.contacts_url,
            {"properties": properties},
            timeout,
            ContactCreationError,
            "Failed to create contact in HubSpot",
        )

        try:
            return str(data["id"])
        except (KeyError, TypeError) as err:
            raise ContactCreationError("Failed to create contact in HubSpot: malformed response") from err

    def patch(self, contact_id: str, properties: dict, timeout: int = None) -> dict:
        """Update the properties of a HubSpot contact."""
        return self._request(
            "PATCH",
            f"{self.contacts_url}/{contact_id}",
            {"properties": properties},
            timeout,
            ContactUpdateError,
            "Failed to update contact in HubSpot",
        )
