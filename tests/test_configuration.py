"""Tests for CredentialValue."""

import pytest

from contactrelay.configuration import CredentialValue


@pytest.fixture(autouse=True)
def _mock_clear_env(monkeypatch):
    """Reset environment variables."""
    monkeypatch.delenv("TEST_API_KEY", raising=False)
    monkeypatch.delenv("TEST_API_KEY_FILE", raising=False)
    monkeypatch.delenv("TEST_API_KEY_PATH", raising=False)


@pytest.fixture(name="secret_file")
def fixture_secret_file(tmp_path):
    """Write a secret file."""
    path = tmp_path / "api_key"
    path.write_text("key-in-file\n", encoding="utf-8")
    return path


def test_credential_default():
    """Test call with no environment variable."""
    value = CredentialValue(None, environ_prefix=None)
    assert value.setup("TEST_API_KEY") is None


def test_credential_in_env(monkeypatch):
    """The environment variable is used and stripped."""
    monkeypatch.setenv("TEST_API_KEY", " key-in-env ")
    value = CredentialValue(None, environ_prefix=None)
    assert value.setup("TEST_API_KEY") == "key-in-env"


def test_credential_empty_in_env(monkeypatch):
    """An empty environment variable means no credential."""
    monkeypatch.setenv("TEST_API_KEY", "")
    value = CredentialValue("default", environ_prefix=None)
    assert value.setup("TEST_API_KEY") is None


def test_credential_in_file(monkeypatch, secret_file):
    """The file has priority over the environment variable."""
    monkeypatch.setenv("TEST_API_KEY", "key-in-env")
    monkeypatch.setenv("TEST_API_KEY_FILE", str(secret_file))
    value = CredentialValue(None, environ_prefix=None)
    assert value.setup("TEST_API_KEY") == "key-in-file"


def test_credential_in_file_suffix(monkeypatch, secret_file):
    """Another file suffix can be used."""
    monkeypatch.setenv("TEST_API_KEY_PATH", str(secret_file))
    value = CredentialValue(None, environ_prefix=None, file_suffix="PATH")
    assert value.setup("TEST_API_KEY") == "key-in-file"


def test_credential_missing_file(monkeypatch, tmp_path):
    """A missing file is an error."""
    monkeypatch.setenv("TEST_API_KEY_FILE", str(tmp_path / "missing"))
    value = CredentialValue(None, environ_prefix=None)
    with pytest.raises(ValueError, match="cannot be read"):
        value.setup("TEST_API_KEY")
