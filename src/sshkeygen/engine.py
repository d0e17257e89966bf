"""Key-generator engine: one request in, one encoded bundle out.

Pipeline:
  generate()        -> KeyMaterial (RSA or DSA variant)
  encode_sequence() -> DER private key
  encode_fields()   -> SSH public-key blob
  assemble()        -> EncodedBundle (privkey, privkeyfile, privkeyuri, pubkey)

Nothing is cached between calls; concurrent callers need no locking.
"""
from __future__ import annotations

import time
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Mapping, Optional

from .bundle import EncodedBundle, assemble
from .config import DEFAULT_KEY_BITS, DEFAULT_KEY_TYPE, DEFAULT_USERNAME
from .crypto.generator import effective_bits, generate
from .crypto.provider import KeyProvider
from .encoding.der import encode_sequence
from .encoding.pem import pem_template
from .encoding.wire import encode_fields
from .errors import GenerationFailure, UnsupportedKeyType
from .models import KEY_KEYLEN, KEY_TYPE_NAME, KEY_USERNAME, KeyAlgorithm, KeyRequest
from .obs.prom import observe_generated, observe_rejected
from .utils.logging import get_logger

log = get_logger()

MODULE_KEY = "ssh-keygen"
DISPLAY_NAME = "SSH Key Generator"
DESCRIPTION = "Generates a new SSH key pair for use with the SSH backend"


@dataclass(frozen=True)
class CommandArgument:
    name: str
    type: str
    short: str
    long: str
    default: str
    valid_values: List[str] = field(default_factory=list)


def supported_commands() -> List[CommandArgument]:
    return [
        CommandArgument(
            KEY_KEYLEN, "integer",
            "The key length",
            "The length of the key in bits",
            str(DEFAULT_KEY_BITS),
            ["1024", "2048"],
        ),
        CommandArgument(
            KEY_TYPE_NAME, "enumeration",
            "The key type",
            "Determines the type of key to generate",
            DEFAULT_KEY_TYPE,
            [a.value for a in KeyAlgorithm],
        ),
        CommandArgument(
            KEY_USERNAME, "string",
            "The key username",
            "The username written as the comment of the public key",
            DEFAULT_USERNAME,
        ),
    ]


def module_info() -> Dict[str, object]:
    return {
        "key": MODULE_KEY,
        "display_name": DISPLAY_NAME,
        "description": DESCRIPTION,
        "supported_commands": [asdict(c) for c in supported_commands()],
    }


def generate_bundle(request: KeyRequest, provider: Optional[KeyProvider] = None) -> EncodedBundle:
    bits = effective_bits(request.bits)
    start = time.perf_counter()
    try:
        material = generate(request.algorithm, bits, provider)
    except GenerationFailure as e:
        observe_rejected("generation_failure")
        log.warning(f"key generation rejected: {e}")
        raise
    elapsed = time.perf_counter() - start

    der = encode_sequence(material.private_fields())
    blob = encode_fields(material.public_fields())
    bundle = assemble(der, blob, pem_template(material.pem_label), material.ssh_name, request.comment)

    observe_generated(algorithm=request.algorithm.value, seconds=elapsed)
    log.info(f"generated {request.algorithm.value} key bits={bits} elapsed={elapsed:.3f}s")
    return bundle


def execute(options: Optional[Mapping[str, str]] = None, provider: Optional[KeyProvider] = None) -> Dict[str, str]:
    """Web-module entry point: string options in, response dictionary out."""
    try:
        request = KeyRequest.from_options(options)
    except UnsupportedKeyType as e:
        observe_rejected("unsupported_key_type")
        log.warning(str(e))
        raise
    except GenerationFailure as e:
        observe_rejected("generation_failure")
        log.warning(f"key generation rejected: {e}")
        raise
    return generate_bundle(request, provider).as_dict()


__all__ = [
    "MODULE_KEY",
    "CommandArgument",
    "supported_commands",
    "module_info",
    "generate_bundle",
    "execute",
]
