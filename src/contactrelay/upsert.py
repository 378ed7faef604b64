"""Find-or-create-then-update of CRM contacts."""

import logging

from contactrelay.backends import Submission
from contactrelay.backends.base import BaseBackend

from .mapping import INTEREST_MAPPING, build_create_properties, build_update_properties

logger = logging.getLogger(__name__)


class ContactUpserter:
    """
    Upsert a submission as a CRM contact.

    The contact is searched by email and only created when the search is
    empty. This is not atomic: two concurrent submissions for the same new
    email can both create a contact. A contact created before a failed
    update is left as is.
    """

    def __init__(self, backend: BaseBackend, interest_mapping: dict[str, str] | None = None, timeout: int = None):
        """Configure the upserter with a CRM backend."""
        self.backend = backend
        self.interest_mapping = INTEREST_MAPPING if interest_mapping is None else interest_mapping
        self.timeout = timeout

    def get_or_create_contact(self, submission: Submission) -> str:
        """Return the id of the contact matching the submission email, creating it if needed."""
        contact_id = self.backend.find_by_email(submission.email, timeout=self.timeout)
        if contact_id is not None:
            logger.info("Found existing contact: %s", contact_id)
            return contact_id

        contact_id = self.backend.create(build_create_properties(submission), timeout=self.timeout)
        logger.info("Created new contact: %s", contact_id)
        return contact_id

    def upsert(self, submission: Submission) -> str:
        """Upsert the contact and return its id."""
        contact_id = self.get_or_create_contact(submission)

        properties = build_update_properties(submission, self.interest_mapping)
        logger.debug("Newsletter value being sent to the CRM: %s", properties["nieuwsbrief"])

        self.backend.patch(contact_id, properties, timeout=self.timeout)
        logger.info("Updated contact: %s", contact_id)
        return contact_id
