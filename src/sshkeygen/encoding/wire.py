# SSH public-key blob: each field is uint32 length (big-endian) + content.
# Integer fields follow the mpint rule (leading 0x00 when the top bit is set);
# the leading algorithm name is ASCII so the same rule leaves it untouched.
from __future__ import annotations

import struct
from typing import Iterable

from ..errors import FormatError
from .der import pad_sign

_MAX_FIELD = 0xFFFFFFFF


def encode_string(field: bytes) -> bytes:
    content = pad_sign(field)
    if len(content) > _MAX_FIELD:
        raise FormatError(f"SSH wire field too long: {len(content)} bytes")
    return struct.pack(">I", len(content)) + content


def encode_fields(fields: Iterable[bytes]) -> bytes:
    return b"".join(encode_string(f) for f in fields)
