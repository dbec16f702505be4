import base64
import json
from datetime import datetime, timedelta, timezone

import pytest

from awsfuzzy.ekstoken import (
    TokenError,
    encode_token,
    exec_credential,
    format_exec_credential,
    parse_presigned_url_expiration,
)

URL = (
    "https://sts.us-east-1.amazonaws.com/?Action=GetCallerIdentity"
    "&Version=2011-06-15&X-Amz-Date=20240102T030405Z&X-Amz-Expires=60"
)


def test_expiration_is_sign_time_plus_ttl():
    expiration = parse_presigned_url_expiration(URL)
    signed = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert expiration - signed == timedelta(minutes=15)


def test_missing_date_raises():
    with pytest.raises(TokenError, match="missing X-Amz-Date"):
        parse_presigned_url_expiration("https://sts.amazonaws.com/?Action=GetCallerIdentity")


def test_bad_date_raises():
    with pytest.raises(TokenError, match="parsing X-Amz-Date"):
        parse_presigned_url_expiration("https://sts.amazonaws.com/?X-Amz-Date=yesterday")


def test_encode_token_round_trip():
    token = encode_token(URL)
    assert token.startswith("k8s-aws-v1.")
    body = token[len("k8s-aws-v1."):]
    assert "=" not in body
    padded = body + "=" * (-len(body) % 4)
    assert base64.urlsafe_b64decode(padded).decode() == URL


def test_exec_credential_document():
    expiration = datetime(2024, 1, 2, 3, 19, 5, tzinfo=timezone.utc)
    cred = exec_credential("token", expiration)
    assert cred["kind"] == "ExecCredential"
    assert cred["apiVersion"] == "client.authentication.k8s.io/v1beta1"
    assert cred["spec"] == {}
    assert cred["status"] == {
        "expirationTimestamp": "2024-01-02T03:19:05Z",
        "token": "token",
    }


def test_exec_credential_converts_to_utc():
    offset = timezone(timedelta(hours=2))
    local = datetime(2024, 1, 2, 5, 19, 5, tzinfo=offset)
    naive = datetime(2024, 1, 2, 3, 19, 5)
    assert (
        exec_credential("token", local)["status"]["expirationTimestamp"]
        == exec_credential("token", naive)["status"]["expirationTimestamp"]
    )


def test_format_exec_credential_is_indented_json():
    expiration = parse_presigned_url_expiration(URL)
    text = format_exec_credential("token", expiration)
    assert json.loads(text) == exec_credential("token", expiration)
    assert text.splitlines()[1].startswith('    "kind"')
    assert list(json.loads(text)) == ["kind", "apiVersion", "spec", "status"]