"""Exception types raised by the key generator.

UnsupportedKeyType and GenerationFailure are user-facing and recoverable;
FormatError signals a broken encoder invariant and is never caught inside
the package.
"""
from __future__ import annotations


class KeyGenError(Exception):
    """Base class for sshkeygen errors."""


class UnsupportedKeyType(KeyGenError, ValueError):
    help_id = "SSHUnsupportedKey"

    def __init__(self, key_type: object):
        self.key_type = key_type
        super().__init__(f"Unsupported key type: {key_type}")


class GenerationFailure(KeyGenError, RuntimeError):
    def __init__(self, algorithm: str, bits: int, reason: str):
        self.algorithm = algorithm
        self.bits = bits
        super().__init__(f"{algorithm} key generation failed for {bits} bits: {reason}")


class FormatError(KeyGenError):
    """Encoder received field data it cannot represent."""


__all__ = ["KeyGenError", "UnsupportedKeyType", "GenerationFailure", "FormatError"]
