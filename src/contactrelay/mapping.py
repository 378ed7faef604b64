"""Map submission fields to CRM contact properties."""

from contactrelay.backends import Submission

INTEREST_MAPPING = {
    "appartement": "Appartement",
    "penthouse": "Penthouse",
    "kangoeroewoning": "Kangoeroewoning",
    "assistentiewoning": "Assistentiewoning",
    "commerciele_ruimte": "Commerciële ruimte",
}


def map_interests(interests: list | None, mapping: dict[str, str] = INTEREST_MAPPING) -> str:
    """Translate interest tags to CRM labels, dropping unknown tags."""
    labels = [mapping[interest] for interest in interests or [] if isinstance(interest, str) and interest in mapping]
    return ";".join(labels)


def normalize_newsletter(value) -> str:
    """Return the CRM boolean string for the newsletter opt-in."""
    return "true" if value is True or value == "true" else "false"


def build_create_properties(submission: Submission) -> dict:
    """Properties of a contact created from a submission."""
    return {
        "firstname": submission.firstname,
        "lastname": submission.lastname,
        "email": submission.email,
        "phone": submission.phone or "",
    }


def build_update_properties(submission: Submission, mapping: dict[str, str] = INTEREST_MAPPING) -> dict:
    """
    Properties patched on the contact after lookup or creation.

    Pass-through fields are merged last and win over the mapped values.
    """
    return {
        "firstname": submission.firstname,
        "lastname": submission.lastname,
        "phone": submission.phone or "",
        "interesses": map_interests(submission.interest, mapping),
        "message": submission.message or "",
        "nieuwsbrief": normalize_newsletter(submission.newsletter),
        **submission.extra,
    }
