"""CRM backend base module."""

from abc import ABC, abstractmethod


class BaseBackend(ABC):
    """Base class for all CRM backends."""

    @abstractmethod
    def find_by_email(self, email: str, timeout: int = None) -> str | None:
        """
        Search a contact by exact email match.

        Args:
            email: Email address of the contact
            timeout: API request timeout in seconds

        Returns:
            str | None: Id of the first matching contact, None if there is no match

        Raises:
            ContactLookupError: If the search fails

        """

    @abstractmethod
    def create(self, properties: dict, timeout: int = None) -> str:
        """
        Create a contact.

        Args:
            properties: Contact properties
            timeout: API request timeout in seconds

        Returns:
            str: Id of the created contact

        Raises:
            ContactCreationError: If the contact creation fails

        """

    @abstractmethod
    def patch(self, contact_id: str, properties: dict, timeout: int = None) -> dict:
        """
        Update the properties of an existing contact.

        Args:
            contact_id: Id of the contact
            properties: Properties to set on the contact
            timeout: API request timeout in seconds

        Returns:
            dict: Service response

        Raises:
            ContactUpdateError: If the contact update fails

        """
