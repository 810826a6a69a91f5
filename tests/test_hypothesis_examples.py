# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Property-based tests using Hypothesis.

Assumptions:
- Hypothesis generates bytes, hash fields and passwords
- Properties hold for every generated input
- bcrypt work is kept at cost 4 and example counts low
"""
import pytest
from hypothesis import given, settings, strategies as st

from bcrypt_password.codec import ALPHABET

VERSIONS = ["2", "2a", "2b", "2y"]


def _canonical(chars, unused_bits):
    # The last character of an encoding leaves its low bits unset
    mask = (1 << unused_bits) - 1
    return st.builds(
        lambda head, tail: head + tail,
        st.text(alphabet=ALPHABET, min_size=chars - 1, max_size=chars - 1),
        st.sampled_from([char for index, char in enumerate(ALPHABET) if index & mask == 0]),
    )


@st.composite
def hash_string_strategy(draw):
    """Generate syntactically valid bcrypt hash strings."""
    version = draw(st.sampled_from(VERSIONS))
    cost = draw(st.integers(min_value=4, max_value=31))
    salt = draw(st.text(alphabet=ALPHABET, min_size=22, max_size=22))
    digest = draw(_canonical(31, 2))
    return f"${version}${cost:02d}${salt}{digest}"


@pytest.mark.unit
@pytest.mark.hypothesis
@given(data=st.binary(max_size=64), extra=st.integers(min_value=0, max_value=64))
def test_encode_is_deterministic_and_in_alphabet(data, extra):
    """Test encode output is stable and uses only alphabet characters.

    Assumptions:
    - No padding characters are ever produced
    """
    from bcrypt_password.codec import encode

    length = min(extra, len(data))
    first = encode(data, length)

    assert first == encode(data, length)
    assert set(first) <= set(ALPHABET)
    assert "=" not in first
    assert len(first) == (length * 4 + 2) // 3


@pytest.mark.unit
@pytest.mark.hypothesis
@given(data=st.binary(max_size=64))
def test_decode_inverts_encode(data):
    from bcrypt_password.codec import decode, encode

    assert decode(encode(data, len(data)), len(data)) == data


@pytest.mark.unit
@pytest.mark.hypothesis
@given(raw=hash_string_strategy())
def test_parse_round_trips_verbatim(raw):
    """Test parsing keeps the raw string and slices fields at fixed offsets."""
    from bcrypt_password.password import Password

    password = Password(raw)
    version, cost, rest = raw[1:].split("$")

    assert str(password) == raw
    assert password.raw == raw
    assert password.version == version
    assert password.cost == int(cost)
    assert password.salt == rest[:22].encode("ascii")
    assert password.digest == rest[22:].encode("ascii")
    assert Password(raw) == password


@pytest.mark.unit
@pytest.mark.hypothesis
@given(first=hash_string_strategy(), second=hash_string_strategy())
def test_equality_follows_raw_string(first, second):
    from bcrypt_password.password import Password

    assert (Password(first) == Password(second)) == (first == second)


@pytest.mark.unit
@pytest.mark.hypothesis
@given(text=st.text(max_size=80).filter(lambda value: value.count("$") != 3))
def test_wrong_delimiter_count_rejected(text):
    from bcrypt_password.errors import FormatError
    from bcrypt_password.password import Password

    with pytest.raises(FormatError, match="Invalid hash string"):
        Password(text)


@pytest.mark.unit
@pytest.mark.hypothesis
@settings(max_examples=10, deadline=None)
@given(
    password=st.text(min_size=0, max_size=18).filter(lambda value: "\x00" not in value),
    other=st.text(min_size=1, max_size=18).filter(lambda value: "\x00" not in value),
)
def test_create_then_verify(password, other):
    """Test a created hash verifies its password and rejects others.

    Assumptions:
    - Passwords shorter than 72 bytes are not truncated
    """
    from bcrypt_password.password import Password

    hashed = Password.create(password, 4)

    assert hashed.verify(password) is True
    if other != password:
        assert hashed.verify(other) is False


@pytest.mark.unit
@pytest.mark.hypothesis
@settings(max_examples=10, deadline=None)
@given(salt=st.text(alphabet=ALPHABET, min_size=22, max_size=22))
def test_verify_never_raises_for_any_salt(salt):
    """Test any parsed salt, canonical or not, gives a boolean result.

    Assumptions:
    - Unused low bits of the last salt character are ignored
    """
    from bcrypt_password.password import Password

    password = Password(f"$2a$04${salt}E/21nYRC0vB5LPjG7ySBfi6lRaO/P22")

    assert password.verify("wrong") in (True, False)
