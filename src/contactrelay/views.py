"""Views of the contact relay API."""

import logging
import sys

from django.conf import settings
from django.http import JsonResponse, QueryDict
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from contactrelay import crm
from contactrelay.backends import Submission
from contactrelay.exceptions import CRMError
from contactrelay.serializers import SubmissionSerializer
from contactrelay.upsert import ContactUpserter

logger = logging.getLogger(__name__)

NOT_FOUND = {"error": "Not found", "message": "The requested endpoint does not exist"}
FORM_INTEREST_FIELDS = ("interest[]", "interest")


def get_upserter():
    """Return the contact upserter bound to the configured CRM backend."""
    return ContactUpserter(crm, settings.CONTACT_RELAY_INTEREST_MAPPING)


def form_to_payload(data: QueryDict) -> dict:
    """Flatten a form-encoded submission, interest fields become the interest list."""
    payload = {}
    for key in data:
        if key in FORM_INTEREST_FIELDS:
            payload.setdefault("interest", []).extend(data.getlist(key))
        else:
            payload[key] = data.get(key)
    return payload


class RelayView(APIView):
    """Base view answering unsupported methods like unknown routes."""

    def http_method_not_allowed(self, request, *args, **kwargs):
        """Routes match on method and path, a wrong method is an unknown endpoint."""
        return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)


class RootView(RelayView):
    """Describe the service."""

    def get(self, request):
        """Return the available endpoints."""
        return Response(
            {
                "message": "Buurenberg Contact API is running",
                "endpoints": {
                    "health": "/health",
                    "hubspotProxy": "/api/hubspot-proxy",
                },
            }
        )


class HealthView(RelayView):
    """Liveness probe."""

    def get(self, request):
        """Return a static ok status."""
        return Response({"status": "ok"})


class HubSpotProxyView(RelayView):
    """
    Upsert a contact form submission into the CRM.

    The contact is searched by email, created when missing, then patched
    with the mapped form fields and the pass-through fields of the payload.
    """

    def post(self, request):
        """Validate the submission and upsert the contact."""
        payload = request.data
        if isinstance(payload, QueryDict):
            payload = form_to_payload(payload)
        if not isinstance(payload, dict):
            return Response(
                {"error": "First name, last name, and email are required", "received": payload},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = SubmissionSerializer(data=payload)
        if not serializer.is_valid():
            if serializer.has_missing_required_fields():
                return Response(
                    {"error": "First name, last name, and email are required", "received": payload},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            return Response(
                {"error": "Invalid submission", "details": serializer.errors, "received": payload},
                status=status.HTTP_400_BAD_REQUEST,
            )

        submission = Submission.from_payload({**payload, **serializer.validated_data})
        logger.info("Received contact submission for %s", submission.email)

        upserter = get_upserter()
        try:
            contact_id = upserter.upsert(submission)
        except CRMError as err:
            logger.exception("Error creating/updating CRM contact: %s", err)
            logger.error(
                "Error details: status=%s body=%s headers=%s",
                err.status_code,
                err.response_body,
                err.response_headers,
            )
            return Response(
                {"error": "Failed to create/update contact", "details": err.crm_message or str(err)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        except Exception as err:
            logger.exception("Error creating/updating CRM contact: %s", err)
            return Response(
                {"error": "Failed to create/update contact", "details": str(err)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {
                "success": True,
                "message": "Contact updated successfully",
                "contactId": contact_id,
            }
        )


def not_found(request, exception=None):
    """Render unknown routes as JSON."""
    return JsonResponse(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)


def server_error(request):
    """Render uncaught exceptions as JSON."""
    # Django calls this handler while the exception is being handled
    exception = sys.exc_info()[1]
    return JsonResponse(
        {"error": "Internal server error", "message": str(exception) if exception else ""},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
