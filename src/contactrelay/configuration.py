"""Custom value classes for django-configurations."""

import os

from configurations import values


class CredentialValue(values.Value):
    """
    Optional secret read from the environment.

    The secret is looked up in the file named by `{name}_{file_suffix}`, then
    in the environment variable `{name}`. Surrounding whitespace is stripped
    and an empty secret is the same as no secret at all.
    """

    file_suffix = "FILE"

    def __init__(self, *args, file_suffix=None, **kwargs):
        """Initialize the value."""
        super().__init__(*args, **kwargs)
        if file_suffix is not None:
            self.file_suffix = file_suffix

    def read_file(self, filename):
        """Return the content of the secret file."""
        try:
            with open(filename, encoding="utf-8") as file:
                return file.read()
        except OSError as err:
            raise ValueError(f"Credential file {filename!r} cannot be read: {err!r}") from err

    def to_python(self, value):
        """Strip the secret, an empty one becomes None."""
        value = (value or "").strip()
        return value or None

    def setup(self, name):
        """Get the value from the secret file or the environment."""
        value = self.default
        if self.environ:
            environ_name = self.full_environ_name(name)
            file_environ_name = f"{environ_name}_{self.file_suffix}"
            if os.environ.get(file_environ_name):
                value = self.to_python(self.read_file(os.environ[file_environ_name]))
            elif environ_name in os.environ:
                value = self.to_python(os.environ[environ_name])
        self.value = value
        return value
