"""Minimal DER writer for private-key structures.

Only what PKCS#1 RSAPrivateKey and the OpenSSL DSA private key need:
a SEQUENCE (0x30) of unsigned INTEGERs (0x02).

Length forms:
  < 0x80            -> single byte
  0x80 .. 0x7FFF    -> 0x82 + 2 bytes big-endian
  > 0x7FFF          -> 0x84 + 4 bytes big-endian

The 0x81 and 0x83 forms are never produced. Decoders accept the wider form,
and key-sized integers stay well inside these bounds.
"""
from __future__ import annotations

import struct
from typing import Iterable, List

from ..errors import FormatError

TAG_INTEGER = 0x02
TAG_SEQUENCE = 0x30

_MAX_LENGTH = 0xFFFFFFFF


def _as_bytes(field) -> bytes:
    if not isinstance(field, (bytes, bytearray, memoryview)):
        raise FormatError(f"integer field must be bytes, got {type(field).__name__}")
    return bytes(field)


def pad_sign(data: bytes) -> bytes:
    """Prefix 0x00 when the top bit is set so the value reads as non-negative."""
    data = _as_bytes(data)
    if data and data[0] & 0x80:
        return b"\x00" + data
    return data


def encode_length(length: int) -> bytes:
    if length < 0 or length > _MAX_LENGTH:
        raise FormatError(f"DER length out of range: {length}")
    if length < 0x80:
        return bytes([length])
    if length <= 0x7FFF:
        return b"\x82" + struct.pack(">H", length)
    return b"\x84" + struct.pack(">I", length)


def encode_integer(field: bytes) -> bytes:
    content = pad_sign(field)
    return bytes([TAG_INTEGER]) + encode_length(len(content)) + content


def encode_sequence(fields: Iterable[bytes]) -> bytes:
    parts: List[bytes] = [encode_integer(f) for f in fields]
    payload = b"".join(parts)
    return bytes([TAG_SEQUENCE]) + encode_length(len(payload)) + payload


__all__ = ["pad_sign", "encode_length", "encode_integer", "encode_sequence", "TAG_INTEGER", "TAG_SEQUENCE"]
