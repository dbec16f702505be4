"""EKS authentication tokens and the Kubernetes ExecCredential output."""

from __future__ import annotations

import base64
import json
from datetime import datetime, timedelta, timezone
from typing import Any
from urllib.parse import parse_qs, urlsplit

TOKEN_PREFIX = "k8s-aws-v1."
TOKEN_TTL = timedelta(minutes=15)
PRESIGNED_URL_TTL = 60
CLUSTER_ID_HEADER = "x-k8s-aws-id"
_AMZ_DATE_FORMAT = "%Y%m%dT%H%M%SZ"


class TokenError(ValueError):
    """A token could not be built from the presigned URL."""


def parse_presigned_url_expiration(presigned_url: str) -> datetime:
    """Return the signing time from X-Amz-Date plus the token lifetime."""
    try:
        query = parse_qs(urlsplit(presigned_url).query, keep_blank_values=True)
    except ValueError as exc:
        raise TokenError(f"parsing URL: {exc}") from exc
    amz_date = query.get("X-Amz-Date", [""])[0]
    if not amz_date:
        raise TokenError("missing X-Amz-Date in presigned URL")
    try:
        signed = datetime.strptime(amz_date, _AMZ_DATE_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError as exc:
        raise TokenError(f"parsing X-Amz-Date: {exc}") from exc
    return signed + TOKEN_TTL


def encode_token(presigned_url: str) -> str:
    """Return the EKS token: prefix plus unpadded base64url of the URL."""
    encoded = base64.urlsafe_b64encode(presigned_url.encode("utf-8")).rstrip(b"=")
    return TOKEN_PREFIX + encoded.decode("ascii")


def _rfc3339_utc(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def exec_credential(token: str, expiration: datetime) -> dict[str, Any]:
    """Build a client.authentication.k8s.io/v1beta1 ExecCredential document."""
    return {
        "kind": "ExecCredential",
        "apiVersion": "client.authentication.k8s.io/v1beta1",
        "spec": {},
        "status": {
            "expirationTimestamp": _rfc3339_utc(expiration),
            "token": token,
        },
    }


def format_exec_credential(token: str, expiration: datetime) -> str:
    """Return the ExecCredential as indented JSON."""
    return json.dumps(exec_credential(token, expiration), indent=4)