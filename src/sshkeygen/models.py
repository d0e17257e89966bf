from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import DEFAULT_KEY_BITS, DEFAULT_KEY_TYPE, DEFAULT_USERNAME, MAX_KEY_BITS
from .errors import GenerationFailure, UnsupportedKeyType

# Option names used by the web-module interface
KEY_TYPE_NAME = "key-type"
KEY_USERNAME = "key-username"
KEY_KEYLEN = "key-bits"


class KeyAlgorithm(str, Enum):
    RSA = "rsa"
    DSA = "dsa"

    @classmethod
    def parse(cls, value: object) -> "KeyAlgorithm":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedKeyType(value)


class KeyRequest(BaseModel):
    """Validated key-generation request.

    Constructing the model with an unknown algorithm raises pydantic's
    ValidationError wrapping the UnsupportedKeyType message; use
    from_options() or KeyAlgorithm.parse() to get UnsupportedKeyType itself.
    """

    model_config = ConfigDict(frozen=True)

    algorithm: KeyAlgorithm = KeyAlgorithm.parse(DEFAULT_KEY_TYPE)
    # <= 0 selects the algorithm default
    bits: int = Field(default=DEFAULT_KEY_BITS, le=MAX_KEY_BITS)
    comment: str = DEFAULT_USERNAME

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v):
        return KeyAlgorithm.parse(v)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, str]] = None) -> "KeyRequest":
        """Build a request from the string option map of the web module.

        Missing entries fall back to defaults; entries that are present are used
        as given, so an empty key type is rejected. A key length that does not parse
        as an integer also falls back. Unknown key types raise
        UnsupportedKeyType before any key material is produced.
        """
        options = options or {}
        algorithm = KeyAlgorithm.parse(options.get(KEY_TYPE_NAME, DEFAULT_KEY_TYPE))
        comment = options.get(KEY_USERNAME, DEFAULT_USERNAME)
        try:
            bits = int(str(options.get(KEY_KEYLEN, "0")).strip())
        except ValueError:
            bits = DEFAULT_KEY_BITS
        if bits > MAX_KEY_BITS:
            raise GenerationFailure(algorithm.value, bits, f"exceeds the maximum of {MAX_KEY_BITS} bits")
        return cls(algorithm=algorithm, bits=bits, comment=comment)


__all__ = ["KeyAlgorithm", "KeyRequest", "KEY_TYPE_NAME", "KEY_USERNAME", "KEY_KEYLEN"]
