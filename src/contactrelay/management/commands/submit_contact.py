"""Submit a contact form to a running relay."""

from django.core.management.base import BaseCommand, CommandError
from django.utils.datastructures import MultiValueDict

from contactrelay.submitter import FormSubmitter, SubmitControl, SubmitterConfig


class Command(BaseCommand):
    """Post a contact form to the relay endpoint, like the hosted form handler does."""

    help = "Submit a contact form to the relay endpoint."

    def add_arguments(self, parser):
        """Form fields and handler configuration."""
        parser.add_argument("--api-url", required=True, help="Relay endpoint url")
        parser.add_argument("--form-id", default="contact-form")
        parser.add_argument("--firstname", default="")
        parser.add_argument("--lastname", default="")
        parser.add_argument("--email", default="")
        parser.add_argument("--phone", default="")
        parser.add_argument("--interest", action="append", default=[], help="Interest tag, may be repeated")
        parser.add_argument("--message", default="")
        parser.add_argument("--newsletter", action="store_true")
        parser.add_argument("--timeout", type=int, default=None)

    def handle(self, *args, **options):
        """Build the form data and submit it."""
        config = SubmitterConfig.from_attributes(
            {"data-form-id": options["form_id"], "data-api-url": options["api_url"]}
        )
        if config is None:
            raise CommandError("Missing required attributes: data-form-id and data-api-url")

        form_data = MultiValueDict(
            {
                "firstname": [options["firstname"]],
                "lastname": [options["lastname"]],
                "email": [options["email"]],
                "phone": [options["phone"]],
                "interest[]": options["interest"],
                "message": [options["message"]],
                "newsletter": ["true" if options["newsletter"] else "false"],
            }
        )

        submitter = FormSubmitter(
            config.api_url,
            SubmitControl(label="Verzenden"),
            notify=self.stdout.write,
            timeout=options["timeout"],
        )
        if not submitter.submit(form_data):
            raise CommandError(f"Submission of form {config.form_id!r} failed")
