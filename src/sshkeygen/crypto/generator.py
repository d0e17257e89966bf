from __future__ import annotations

from typing import Optional

from cryptography.exceptions import UnsupportedAlgorithm

from ..config import DEFAULT_KEY_BITS
from ..errors import GenerationFailure
from ..models import KeyAlgorithm
from .material import DsaKeyMaterial, KeyMaterial, RsaKeyMaterial, int_to_bytes
from .provider import DEFAULT_PROVIDER, KeyProvider


def effective_bits(bits: int) -> int:
    return bits if bits > 0 else DEFAULT_KEY_BITS


def _rsa_material(provider: KeyProvider, bits: int) -> RsaKeyMaterial:
    n = provider.rsa_private_numbers(bits)
    pub = n.public_numbers
    return RsaKeyMaterial(
        modulus=int_to_bytes(pub.n),
        public_exponent=int_to_bytes(pub.e),
        private_exponent=int_to_bytes(n.d),
        p=int_to_bytes(n.p),
        q=int_to_bytes(n.q),
        d_exp_p=int_to_bytes(n.dmp1),
        d_exp_q=int_to_bytes(n.dmq1),
        q_inverse=int_to_bytes(n.iqmp),
    )


def _dsa_material(provider: KeyProvider, bits: int) -> DsaKeyMaterial:
    n = provider.dsa_private_numbers(bits)
    pub = n.public_numbers
    params = pub.parameter_numbers
    return DsaKeyMaterial(
        p=int_to_bytes(params.p),
        q=int_to_bytes(params.q),
        g=int_to_bytes(params.g),
        y=int_to_bytes(pub.y),
        x=int_to_bytes(n.x),
    )


_BUILDERS = {
    KeyAlgorithm.RSA: _rsa_material,
    KeyAlgorithm.DSA: _dsa_material,
}


def generate(algorithm: KeyAlgorithm, bits: int, provider: Optional[KeyProvider] = None) -> KeyMaterial:
    """Generate fresh key material for ``algorithm``.

    ``bits <= 0`` selects the default size. Sizes the backend refuses are
    reported as GenerationFailure so callers can retry with other parameters.
    """
    algorithm = KeyAlgorithm.parse(algorithm)
    build = _BUILDERS[algorithm]
    size = effective_bits(bits)
    try:
        return build(provider or DEFAULT_PROVIDER, size)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise GenerationFailure(algorithm.value, size, str(e)) from e


__all__ = ["generate", "effective_bits"]
