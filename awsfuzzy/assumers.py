"""Strategies that decide how credentials for a profile are obtained."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Container
from typing import ClassVar, Protocol


class ParsedProfile(Protocol):
    """The parsed shared-config values an assumer inspects."""

    sso_account_id: str


class Assumer(ABC):
    """A way of obtaining credentials, identified by a unique type name."""

    type_name: ClassVar[str]

    @abstractmethod
    def profile_matches_type(self, raw: Container[str], parsed: ParsedProfile) -> bool:
        """Return True if the profile should be handled by this assumer.

        ``raw`` holds the profile's key names as written in the file and
        ``parsed`` its interpreted shared-config values.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CredentialProcessAssumer(Assumer):
    """Profiles whose credentials come from an external credential_process."""

    type_name = "AWS_CREDENTIAL_PROCESS"

    def profile_matches_type(self, raw: Container[str], parsed: ParsedProfile) -> bool:
        return "credential_process" in raw


class AwsIamAssumer(Assumer):
    """Plain IAM profiles; matches anything that is not an SSO profile.

    Being this generic, it must be consulted last.
    """

    type_name = "AWS_IAM"

    def profile_matches_type(self, raw: Container[str], parsed: ParsedProfile) -> bool:
        return not parsed.sso_account_id


# Specific types first, generic ones such as IAM last.
_ASSUMERS: list[Assumer] = [CredentialProcessAssumer(), AwsIamAssumer()]


def register_assumer(assumer: Assumer, position: int = -1) -> None:
    """Add an assumer at position; a negative or out-of-range position appends it."""
    if position < 0 or position > len(_ASSUMERS) - 1:
        _ASSUMERS.append(assumer)
    else:
        _ASSUMERS.insert(position, assumer)


def assumer_from_type(type_name: str) -> Assumer | None:
    """Return the first registered assumer with the given type name, if any."""
    return next((a for a in _ASSUMERS if a.type_name == type_name), None)


def registered_assumers() -> tuple[Assumer, ...]:
    """Return the registered assumers in matching order."""
    return tuple(_ASSUMERS)