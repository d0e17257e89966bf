from dataclasses import dataclass, field
from typing import List, Tuple

import pytest
from cryptography.hazmat.primitives.asymmetric import dsa, rsa


# Textbook-sized numbers: small enough to write the expected encodings by hand.
# n = 61 * 53, e = 17, d = 2753
TOY_RSA = rsa.RSAPrivateNumbers(
    p=61,
    q=53,
    d=2753,
    dmp1=53,
    dmq1=49,
    iqmp=38,
    public_numbers=rsa.RSAPublicNumbers(e=17, n=3233),
)
# subgroup of order 11 in Z_23*, x = 3, y = 4^3 mod 23
TOY_DSA = dsa.DSAPrivateNumbers(
    x=3,
    public_numbers=dsa.DSAPublicNumbers(
        y=18,
        parameter_numbers=dsa.DSAParameterNumbers(p=23, q=11, g=4),
    ),
)


@dataclass
class FixedKeyProvider:
    """Returns the same numbers every call and records the requested sizes."""

    rsa_numbers: rsa.RSAPrivateNumbers = field(default_factory=lambda: TOY_RSA)
    dsa_numbers: dsa.DSAPrivateNumbers = field(default_factory=lambda: TOY_DSA)
    calls: List[Tuple[str, int]] = field(default_factory=list)

    def rsa_private_numbers(self, bits: int) -> rsa.RSAPrivateNumbers:
        self.calls.append(("rsa", bits))
        return self.rsa_numbers

    def dsa_private_numbers(self, bits: int) -> dsa.DSAPrivateNumbers:
        self.calls.append(("dsa", bits))
        return self.dsa_numbers


@pytest.fixture
def fixed_provider():
    return FixedKeyProvider()


@pytest.fixture(scope="session")
def rsa_1024_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=1024)


@pytest.fixture
def rsa_1024_provider(rsa_1024_key):
    return FixedKeyProvider(rsa_numbers=rsa_1024_key.private_numbers())


def split_wire_fields(blob: bytes) -> List[bytes]:
    out = []
    i = 0
    while i < len(blob):
        n = int.from_bytes(blob[i:i + 4], "big")
        out.append(blob[i + 4:i + 4 + n])
        i += 4 + n
    assert i == len(blob)
    return out


@pytest.fixture(scope="session")
def wire_fields():
    return split_wire_fields
