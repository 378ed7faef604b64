"""Tests for the mapping of submissions to contact properties."""

import pytest

from contactrelay.backends import Submission
from contactrelay.mapping import (
    build_create_properties,
    build_update_properties,
    map_interests,
    normalize_newsletter,
)


@pytest.mark.parametrize(
    ("interests", "expected"),
    [
        (["appartement", "unknown_tag"], "Appartement"),
        (["penthouse", "appartement"], "Penthouse;Appartement"),
        (["commerciele_ruimte"], "Commerciële ruimte"),
        (["kangoeroewoning", "assistentiewoning"], "Kangoeroewoning;Assistentiewoning"),
        (["unknown_tag"], ""),
        ([], ""),
        (None, ""),
    ],
)
def test_map_interests(interests, expected):
    """Unknown tags are dropped and the order is kept."""
    assert map_interests(interests) == expected


def test_map_interests_custom_mapping():
    """Another mapping table can be used."""
    assert map_interests(["a", "b", "c"], {"a": "A", "c": "C"}) == "A;C"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        ("true", "true"),
        (None, "false"),
        (False, "false"),
        ("false", "false"),
        ("yes", "false"),
        ("True", "false"),
        (1, "false"),
        ("", "false"),
    ],
)
def test_normalize_newsletter(value, expected):
    """Only boolean true and the string "true" opt in."""
    assert normalize_newsletter(value) == expected


def test_build_create_properties_without_phone():
    """A missing phone is sent as an empty string."""
    submission = Submission(firstname="A", lastname="B", email="a@b.com")

    assert build_create_properties(submission) == {
        "firstname": "A",
        "lastname": "B",
        "email": "a@b.com",
        "phone": "",
    }


def test_build_update_properties():
    """Update properties carry the mapped fields and the pass-through fields."""
    submission = Submission.from_payload(
        {
            "firstname": "A",
            "lastname": "B",
            "email": "a@b.com",
            "phone": "0612345678",
            "interest": ["penthouse", "garage"],
            "message": None,
            "newsletter": True,
            "company": "Acme",
        }
    )

    assert build_update_properties(submission) == {
        "firstname": "A",
        "lastname": "B",
        "phone": "0612345678",
        "interesses": "Penthouse",
        "message": "",
        "nieuwsbrief": "true",
        "company": "Acme",
    }


def test_build_update_properties_pass_through_wins():
    """A pass-through field named like a mapped property overrides it."""
    submission = Submission.from_payload(
        {"firstname": "A", "lastname": "B", "email": "a@b.com", "nieuwsbrief": "manual"}
    )

    assert build_update_properties(submission)["nieuwsbrief"] == "manual"


def test_submission_from_payload_keeps_extra_fields_in_order():
    """Extra fields are collected in payload order, email is never one of them."""
    submission = Submission.from_payload(
        {"zeta": 1, "firstname": "A", "lastname": "B", "email": "a@b.com", "alpha": 2}
    )

    assert list(submission.extra) == ["zeta", "alpha"]
    assert submission.interest == []


def test_map_interests_ignores_non_string_entries():
    """Null and non-string entries are dropped like unknown tags."""
    assert map_interests(["penthouse", None, 3, ["appartement"], {"a": 1}]) == "Penthouse"
