"""
Client side of the contact form.

Posts a contact form to the relay the way the hosted form handler does:
the submit control is disabled while the request runs, the user is notified
of the outcome, and the control is always restored afterwards.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

import requests

logger = logging.getLogger(__name__)

BUSY_LABEL = "Bezig met verzenden..."
SUCCESS_MESSAGE = "Bedankt voor uw interesse!"
FAILURE_MESSAGE = "Er is een fout opgetreden: {error}"
GENERIC_ERROR = "Er is iets misgegaan"


class SubmissionError(Exception):
    """Exception raised when the relay rejects or cannot process a submission."""


@dataclass
class SubmitterConfig:
    """Configuration read from the element hosting the form handler."""

    form_id: str
    api_url: str

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> "SubmitterConfig | None":
        """Read the form id and the endpoint url, None when one of them is missing."""
        form_id = attributes.get("data-form-id")
        api_url = attributes.get("data-api-url")
        if not form_id or not api_url:
            logger.error("Missing required attributes: data-form-id and data-api-url")
            return None
        return cls(form_id=form_id, api_url=api_url)


@dataclass
class SubmitControl:
    """State of the submit button."""

    label: str
    disabled: bool = False


def build_submission(form_data) -> dict:
    """Serialize a multi-valued form (QueryDict, MultiValueDict) to the relay payload."""
    return {
        "firstname": form_data.get("firstname"),
        "lastname": form_data.get("lastname"),
        "email": form_data.get("email"),
        "phone": form_data.get("phone"),
        "interest": form_data.getlist("interest[]"),
        "message": form_data.get("message"),
        "newsletter": form_data.get("newsletter") == "true",
    }


class FormSubmitter:
    """Submit contact forms to the relay endpoint."""

    def __init__(
        self,
        api_url: str,
        control: SubmitControl,
        notify: Callable[[str], None],
        reset_form: Callable[[], None] | None = None,
        session: requests.Session | None = None,
        timeout: int | None = None,
    ):
        """Bind the submitter to an endpoint and to the user interface callbacks."""
        self.api_url = api_url
        self.control = control
        self.notify = notify
        self.reset_form = reset_form
        self.session = session or requests.Session()
        self.timeout = timeout

    def post(self, payload: dict) -> dict:
        """Send the payload and return the decoded relay answer."""
        response = self.session.post(
            self.api_url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )

        content_type = response.headers.get("Content-Type")
        if not content_type or "application/json" not in content_type:
            raise SubmissionError(f"Server returned non-JSON response: {content_type}")

        try:
            result = response.json()
        except ValueError as err:
            raise SubmissionError(f"Server returned an invalid JSON response: {err}") from err

        if not response.ok:
            error = None
            if isinstance(result, dict):
                error = result.get("error") or result.get("details")
            raise SubmissionError(error or GENERIC_ERROR)

        return result

    def submit(self, form_data) -> bool:
        """Submit the form, notify the user, and tell if it succeeded."""
        original_label = self.control.label
        # Disabled before any network work, a second click cannot send the form twice
        self.control.disabled = True
        self.control.label = BUSY_LABEL

        try:
            self.post(build_submission(form_data))
        except (requests.RequestException, SubmissionError) as err:
            logger.error("Form submission error: %s", err)
            self.notify(FAILURE_MESSAGE.format(error=err))
            return False
        else:
            self.notify(SUCCESS_MESSAGE)
            if self.reset_form is not None:
                self.reset_form()
            return True
        finally:
            self.control.disabled = False
            self.control.label = original_label
