"""Contact relay exceptions module."""


class CRMError(Exception):
    """
    Base exception for all CRM exceptions.

    When the CRM answered, the response details are kept on the exception
    so they can be logged and reported to the caller.
    """

    def __init__(self, message, response=None):
        """Keep the CRM response details, if any."""
        super().__init__(message)
        self.status_code = None
        self.response_body = None
        self.response_headers = None
        self.crm_message = None

        if response is not None:
            self.status_code = response.status_code
            self.response_body = response.text
            self.response_headers = dict(response.headers)
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                self.crm_message = body.get("message")


class CRMInvalidBackendError(CRMError):
    """Exception raised when the backend is invalid."""


class ContactLookupError(CRMError):
    """Exception raised when searching a contact fails."""


class ContactCreationError(CRMError):
    """Exception raised when the contact creation fails."""


class ContactUpdateError(CRMError):
    """Exception raised when the contact update fails."""
