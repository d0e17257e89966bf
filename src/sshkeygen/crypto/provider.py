from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from cryptography.hazmat.primitives.asymmetric import dsa, rsa


@runtime_checkable
class KeyProvider(Protocol):
    def rsa_private_numbers(self, bits: int) -> rsa.RSAPrivateNumbers: ...
    def dsa_private_numbers(self, bits: int) -> dsa.DSAPrivateNumbers: ...


@dataclass
class PycaKeyProvider:
    """Fresh keys from pyca/cryptography (OS CSPRNG on every call).

    Size validation is left to the backend: RSA needs at least 1024 bits,
    DSA accepts 1024/2048/3072/4096.
    """

    public_exponent: int = 65537

    def rsa_private_numbers(self, bits: int) -> rsa.RSAPrivateNumbers:
        key = rsa.generate_private_key(public_exponent=self.public_exponent, key_size=bits)
        return key.private_numbers()

    def dsa_private_numbers(self, bits: int) -> dsa.DSAPrivateNumbers:
        key = dsa.generate_private_key(key_size=bits)
        return key.private_numbers()


DEFAULT_PROVIDER = PycaKeyProvider()
