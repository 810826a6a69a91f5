# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
bcrypt's base64 variant.

bcrypt encodes salts and digests with its own alphabet ("./A-Za-z0-9")
and never emits "=" padding, so the standard library base64 module
cannot be used for it.

Assumptions:
- Bit packing is the same as standard base64, only the alphabet differs
- A tail of one byte encodes to two characters, two bytes to three
- Missing low bits of the last character are zero
"""
from typing import Optional, Union

from bcrypt_password.errors import FormatError

ALPHABET = "./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

# Reverse lookup: character ordinal -> 6-bit value, -1 outside the alphabet
TABLE = tuple(ALPHABET.find(chr(code)) for code in range(128))


def char64(char: str) -> int:
    """Return the 6-bit value of an alphabet character, or -1."""
    code = ord(char)
    if code >= len(TABLE):
        return -1
    return TABLE[code]


def encode(data: bytes, length: Optional[int] = None) -> str:
    """Encode bytes with the bcrypt alphabet.

    Args:
        data: Raw bytes
        length: Number of bytes to encode, defaults to len(data) - 1

    Returns:
        str: Encoded text, without padding

    Raises:
        ValueError: If length is negative or larger than data

    Assumptions:
    - The default length drops the last byte, which in a bcrypt digest
      buffer is never part of the stored hash
    """
    if length is None:
        length = len(data) - 1
    if length < 0 or length > len(data):
        raise ValueError(f"Invalid length: {length}")

    chars = []
    off = 0
    while off < length:
        c1 = data[off] & 0xff
        off += 1
        chars.append(ALPHABET[(c1 >> 2) & 0x3f])
        c1 = (c1 & 0x03) << 4

        if off >= length:
            chars.append(ALPHABET[c1 & 0x3f])
            break

        c2 = data[off] & 0xff
        off += 1
        c1 |= (c2 >> 4) & 0x0f
        chars.append(ALPHABET[c1 & 0x3f])
        c1 = (c2 & 0x0f) << 2

        if off >= length:
            chars.append(ALPHABET[c1 & 0x3f])
            break

        c2 = data[off] & 0xff
        off += 1
        c1 |= (c2 >> 6) & 0x03
        chars.append(ALPHABET[c1 & 0x3f])
        chars.append(ALPHABET[c2 & 0x3f])

    return "".join(chars)


def decode(text: Union[str, bytes], length: Optional[int] = None) -> bytes:
    """Decode bcrypt-alphabet text back to bytes.

    Args:
        text: Encoded text (str or ASCII bytes)
        length: Number of bytes to produce, defaults to every whole byte
            the text carries

    Returns:
        bytes: Decoded bytes

    Raises:
        FormatError: If text contains a character outside the alphabet
        ValueError: If length is negative or larger than the text carries

    Assumptions:
    - Inverse of encode: decode(encode(data, n), n) == data[:n]
    - A single dangling character carries no whole byte and is ignored
    """
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("latin-1")

    values = [char64(char) for char in text]
    if -1 in values:
        raise FormatError("Invalid base64 character")

    available = len(values) * 3 // 4
    if length is None:
        length = available
    if length < 0 or length > available:
        raise ValueError(f"Invalid length: {length}")

    out = bytearray()
    off = 0
    while len(out) < length:
        c1 = values[off]
        c2 = values[off + 1]
        off += 2
        out.append(((c1 << 2) | ((c2 & 0x30) >> 4)) & 0xff)
        if len(out) >= length:
            break

        c3 = values[off]
        off += 1
        out.append((((c2 & 0x0f) << 4) | ((c3 & 0x3c) >> 2)) & 0xff)
        if len(out) >= length:
            break

        c4 = values[off]
        off += 1
        out.append((((c3 & 0x03) << 6) | c4) & 0xff)

    return bytes(out)
