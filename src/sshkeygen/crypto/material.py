"""Key material variants produced by the generator.

Each variant knows the field order of its private-key DER structure and of
its SSH public-key blob, plus the identifiers used when rendering them:

  RSA: DER  [0, n, e, d, p, q, d mod (p-1), d mod (q-1), q^-1 mod p]
       SSH  ["ssh-rsa", e, n]
  DSA: DER  [0, p, q, g, y, x]
       SSH  ["ssh-dss", p, q, g, y]

All integer fields are unsigned, minimal big-endian byte strings. A field may
be empty (integer zero). Supporting another algorithm means adding a variant
here; the encoders stay as they are.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Union

VERSION_MARKER = b"\x00"


def int_to_bytes(value: int) -> bytes:
    if value < 0:
        raise ValueError("key integers are unsigned")
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


@dataclass(frozen=True)
class RsaKeyMaterial:
    ssh_name: ClassVar[str] = "ssh-rsa"
    pem_label: ClassVar[str] = "RSA"

    modulus: bytes = b""
    public_exponent: bytes = b""
    private_exponent: bytes = b""
    p: bytes = b""
    q: bytes = b""
    d_exp_p: bytes = b""
    d_exp_q: bytes = b""
    q_inverse: bytes = b""

    def private_fields(self) -> List[bytes]:
        return [
            VERSION_MARKER,
            self.modulus,
            self.public_exponent,
            self.private_exponent,
            self.p,
            self.q,
            self.d_exp_p,
            self.d_exp_q,
            self.q_inverse,
        ]

    def public_fields(self) -> List[bytes]:
        return [self.ssh_name.encode("ascii"), self.public_exponent, self.modulus]


@dataclass(frozen=True)
class DsaKeyMaterial:
    ssh_name: ClassVar[str] = "ssh-dss"
    pem_label: ClassVar[str] = "DSA"

    p: bytes = b""
    q: bytes = b""
    g: bytes = b""
    y: bytes = b""
    x: bytes = b""

    def private_fields(self) -> List[bytes]:
        return [VERSION_MARKER, self.p, self.q, self.g, self.y, self.x]

    def public_fields(self) -> List[bytes]:
        return [self.ssh_name.encode("ascii"), self.p, self.q, self.g, self.y]


KeyMaterial = Union[RsaKeyMaterial, DsaKeyMaterial]

__all__ = ["RsaKeyMaterial", "DsaKeyMaterial", "KeyMaterial", "int_to_bytes", "VERSION_MARKER"]
