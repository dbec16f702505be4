from dataclasses import dataclass

import pytest

from awsfuzzy import assumers
from awsfuzzy.assumers import (
    Assumer,
    AwsIamAssumer,
    CredentialProcessAssumer,
    assumer_from_type,
    register_assumer,
    registered_assumers,
)


@dataclass
class Parsed:
    sso_account_id: str = ""


class CustomAssumer(Assumer):
    type_name = "CUSTOM"

    def profile_matches_type(self, raw, parsed):
        return "custom_key" in raw


@pytest.fixture
def fresh_registry(monkeypatch):
    monkeypatch.setattr(assumers, "_ASSUMERS", list(registered_assumers()))


def _types():
    return [a.type_name for a in registered_assumers()]


def test_default_order():
    assert _types()[:2] == ["AWS_CREDENTIAL_PROCESS", "AWS_IAM"]


def test_credential_process_matches_key():
    a = CredentialProcessAssumer()
    assert a.profile_matches_type({"credential_process": "cmd", "region": "x"}, Parsed())
    assert not a.profile_matches_type({"region": "x"}, Parsed())
    assert a.profile_matches_type(["credential_process"], Parsed("1"))


def test_iam_matches_non_sso():
    a = AwsIamAssumer()
    assert a.profile_matches_type({}, Parsed(""))
    assert not a.profile_matches_type({}, Parsed("123"))


def test_assumer_from_type():
    found = assumer_from_type("AWS_IAM")
    assert isinstance(found, AwsIamAssumer)
    assert isinstance(assumer_from_type("AWS_CREDENTIAL_PROCESS"), CredentialProcessAssumer)
    assert assumer_from_type("NOPE") is None


def test_register_negative_appends(fresh_registry):
    custom = CustomAssumer()
    register_assumer(custom, -1)
    assert registered_assumers()[-1] is custom
    assert assumer_from_type("CUSTOM") is custom


def test_register_out_of_range_appends(fresh_registry):
    custom = CustomAssumer()
    before = len(registered_assumers())
    register_assumer(custom, before)
    assert registered_assumers()[-1] is custom
    assert len(registered_assumers()) == before + 1


def test_register_at_front(fresh_registry):
    custom = CustomAssumer()
    register_assumer(custom, 0)
    assert _types()[:3] == ["CUSTOM", "AWS_CREDENTIAL_PROCESS", "AWS_IAM"]


def test_register_before_last(fresh_registry):
    custom = CustomAssumer()
    last = len(registered_assumers()) - 1
    register_assumer(custom, last)
    assert _types()[-2:] == ["CUSTOM", "AWS_IAM"]


def test_registered_assumers_is_a_copy(fresh_registry):
    snapshot = registered_assumers()
    register_assumer(CustomAssumer(), -1)
    assert len(registered_assumers()) == len(snapshot) + 1


def test_abstract_assumer_cannot_be_created():
    with pytest.raises(TypeError):
        Assumer()


def test_first_match_wins_order():
    raw = {"credential_process": "cmd"}
    matched = next(a for a in registered_assumers() if a.profile_matches_type(raw, Parsed()))
    assert matched.type_name == "AWS_CREDENTIAL_PROCESS"