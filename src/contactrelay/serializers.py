"""Serializers for the contact relay API."""

from rest_framework import serializers

REQUIRED_FIELDS = ("firstname", "lastname", "email")


class SubmissionSerializer(serializers.Serializer):
    """
    Validate a contact form submission.

    Only the submission fields are declared; pass-through fields are read
    from the raw payload by the view. Interest entries are not checked, the
    ones missing from the interest mapping are dropped later.
    """

    firstname = serializers.CharField(trim_whitespace=False)
    lastname = serializers.CharField(trim_whitespace=False)
    email = serializers.CharField(trim_whitespace=False)
    phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    interest = serializers.ListField(
        child=serializers.JSONField(allow_null=True),
        required=False,
        allow_null=True,
    )
    message = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    newsletter = serializers.JSONField(required=False, allow_null=True)

    def has_missing_required_fields(self):
        """Tell if the validation failed on one of the required fields."""
        return any(name in self.errors for name in REQUIRED_FIELDS)
