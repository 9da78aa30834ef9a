"""Tests for visitor identity resolution."""

import re

from ga_beacon.application.services import IdentityResolver

CLIENT_ID_PATTERN = re.compile(r"^GA\.1-2\.\d+\.\d+$")


def test_when_cookie_present_then_returns_it_unchanged() -> None:
    """Given an existing cid cookie, when resolving, then the value is kept verbatim."""
    resolver = IdentityResolver()

    identity = resolver.resolve("GA.1-2.123.456")

    assert identity.client_id == "GA.1-2.123.456"
    assert identity.minted is False


def test_when_cookie_absent_then_mints_new_id() -> None:
    """Given no cookie, when resolving, then a new id in GA format is minted."""
    resolver = IdentityResolver()

    identity = resolver.resolve(None)

    assert CLIENT_ID_PATTERN.match(identity.client_id)
    assert identity.minted is True


def test_when_cookie_empty_then_mints_new_id() -> None:
    """Given an empty cookie value, when resolving, then it is treated as absent."""
    resolver = IdentityResolver()

    identity = resolver.resolve("")

    assert identity.minted is True
    assert CLIENT_ID_PATTERN.match(identity.client_id)


def test_minted_id_uses_random_bits_and_whole_seconds() -> None:
    """Given fixed clock and randomness, when minting, then both appear in the id."""
    resolver = IdentityResolver(clock=lambda: 1700000000.75, random_bits=lambda bits: 4294967295)

    assert resolver.mint() == "GA.1-2.4294967295.1700000000"


def test_random_source_is_asked_for_32_bits() -> None:
    """Given a recording random source, when minting, then 32 bits are requested."""
    requested: list[int] = []

    def random_bits(bits: int) -> int:
        requested.append(bits)
        return 7

    IdentityResolver(random_bits=random_bits).mint()

    assert requested == [32]
