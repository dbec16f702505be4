import pytest

from awsfuzzy.session_name import (
    KSUID_EPOCH,
    ksuid_from_parts,
    new_ksuid,
    session_name,
)

ALPHABET = set("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")


def test_nil_ksuid():
    assert ksuid_from_parts(KSUID_EPOCH, bytes(16)) == "000000000000000000000000000"


def test_max_ksuid():
    value = ksuid_from_parts(KSUID_EPOCH + 2**32 - 1, b"\xff" * 16)
    assert value == "aWgEPTl1tmebfsQzFP4bxwgy80V"


def test_later_timestamp_sorts_after():
    payload = bytes(range(16))
    earlier = ksuid_from_parts(1_700_000_000, payload)
    later = ksuid_from_parts(1_700_000_001, payload)
    assert len(earlier) == len(later) == 27
    assert earlier < later


def test_payload_length_checked():
    with pytest.raises(ValueError):
        ksuid_from_parts(1_700_000_000, b"short")


def test_timestamp_range_checked():
    with pytest.raises(ValueError):
        ksuid_from_parts(KSUID_EPOCH - 1, bytes(16))
    with pytest.raises(ValueError):
        ksuid_from_parts(KSUID_EPOCH + 2**32, bytes(16))


def test_new_ksuid_shape():
    value = new_ksuid()
    assert len(value) == 27
    assert set(value) <= ALPHABET


def test_new_ksuids_differ():
    assert len({new_ksuid() for _ in range(20)}) == 20


def test_session_name_shape():
    name = session_name()
    assert name.startswith("gntd-")
    assert len(name) == 32
    assert set(name[5:]) <= ALPHABET