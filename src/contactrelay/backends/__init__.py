"""CRM backends module."""

from dataclasses import dataclass, field
from typing import Any

SUBMISSION_FIELDS = ("firstname", "lastname", "email", "phone", "interest", "message", "newsletter")


@dataclass
class Submission:
    """Contact form submission relayed to the CRM."""

    firstname: str
    lastname: str
    email: str
    phone: str | None = None
    interest: list[str] = field(default_factory=list)
    message: str | None = None
    newsletter: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict) -> "Submission":
        """
        Build a submission from a validated request payload.

        Keys that are not submission fields are kept, in payload order,
        as pass-through fields.
        """
        return cls(
            firstname=payload["firstname"],
            lastname=payload["lastname"],
            email=payload["email"],
            phone=payload.get("phone"),
            interest=list(payload.get("interest") or []),
            message=payload.get("message"),
            newsletter=payload.get("newsletter"),
            extra={key: value for key, value in payload.items() if key not in SUBMISSION_FIELDS},
        )
