"""Byte-pair hex codec for device identifiers.

Beacons advertise an employee's display name as upper-case hex, two
characters per UTF-8 byte ("Ana" -> "416E61"). The provisioning flow uses
``encode`` when it assigns identifiers; the resolver uses ``decode`` as its
fallback lookup.
"""

from __future__ import annotations

import re

from ..core.exceptions import DecodeError

_HEX_PAIRS = re.compile(r"(?:[0-9A-Fa-f]{2})+")


def encode(text: str) -> str:
    return text.encode("utf-8").hex().upper()


def decode(identifier: str) -> str:
    value = (identifier or "").strip()
    if not value:
        raise DecodeError("Identifier is empty")
    if not _HEX_PAIRS.fullmatch(value):
        raise DecodeError(f"Identifier {identifier!r} is not a sequence of hex byte pairs")

    try:
        text = bytes.fromhex(value).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Identifier {identifier!r} does not decode to UTF-8 text") from e

    if not text.strip():
        raise DecodeError(f"Identifier {identifier!r} decodes to blank text")
    return text
