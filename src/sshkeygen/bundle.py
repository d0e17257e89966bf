"""Assembly of the four response values from the encoded key parts."""
from __future__ import annotations

import base64
from typing import Dict
from urllib.parse import quote_plus

from pydantic import BaseModel, ConfigDict

from .config import KEYFILE_URI
from .encoding.pem import format_pem


class EncodedBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    privkey: str
    privkeyfile: str
    privkeyuri: str
    pubkey: str

    def as_dict(self) -> Dict[str, str]:
        return self.model_dump()


def assemble(der: bytes, ssh_blob: bytes, pem_template: str, algorithm_label: str, comment: str) -> EncodedBundle:
    b64_raw = base64.b64encode(der).decode("ascii")
    pem = format_pem(der, pem_template)
    return EncodedBundle(
        privkey=b64_raw,
        privkeyfile=pem,
        # form-style encoding: spaces become '+'
        privkeyuri=KEYFILE_URI + quote_plus(pem),
        pubkey=" ".join([algorithm_label, base64.b64encode(ssh_blob).decode("ascii"), comment]),
    )


__all__ = ["EncodedBundle", "assemble"]
