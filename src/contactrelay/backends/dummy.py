"""Dummy CRM backend."""

import itertools
from collections import deque

from contactrelay.exceptions import ContactUpdateError

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """
    Dummy CRM backend keeping contacts in memory.

    Only the latest `max_calls` calls are recorded.
    """

    def __init__(self, contacts: dict[str, dict] | None = None, max_calls: int = 1000):
        """Start with the given contacts, keyed by id."""
        self.contacts = {key: dict(value) for key, value in (contacts or {}).items()}
        self.calls = deque(maxlen=max_calls)
        self._ids = itertools.count(len(self.contacts) + 1)

    def find_by_email(self, email: str, timeout: int = None) -> str | None:
        """Return the id of the first contact having this email."""
        self.calls.append(("find_by_email", (email,)))
        for contact_id, properties in self.contacts.items():
            if properties.get("email") == email:
                return contact_id
        return None

    def create(self, properties: dict, timeout: int = None) -> str:
        """Store a new contact."""
        self.calls.append(("create", (properties,)))
        contact_id = str(next(self._ids))
        while contact_id in self.contacts:
            contact_id = str(next(self._ids))
        self.contacts[contact_id] = dict(properties)
        return contact_id

    def patch(self, contact_id: str, properties: dict, timeout: int = None) -> dict:
        """Update a stored contact."""
        self.calls.append(("patch", (contact_id, properties)))
        if contact_id not in self.contacts:
            raise ContactUpdateError(f"Contact {contact_id} does not exist")
        self.contacts[contact_id].update(properties)
        return {"id": contact_id, "properties": dict(self.contacts[contact_id])}

    def count_calls(self, operation):
        """Count the recorded calls of an operation."""
        return sum(1 for name, _ in self.calls if name == operation)
