from __future__ import annotations

import base64

PEM_LINE_WIDTH = 64

_TEMPLATE = "-----BEGIN {label} PRIVATE KEY-----\n{{0}}\n-----END {label} PRIVATE KEY----- \n"


def pem_template(label: str) -> str:
    """Header/footer template for a traditional ``<label> PRIVATE KEY`` block.

    The returned string has a single ``{0}`` slot for the base64 body.
    """
    return _TEMPLATE.format(label=label.upper())


def wrap_base64(data: bytes, width: int = PEM_LINE_WIDTH) -> str:
    b64 = base64.b64encode(data).decode("ascii")
    lines = [b64[i:i + width] for i in range(0, len(b64), width)]
    return "\n".join(lines)


def format_pem(der: bytes, template: str) -> str:
    return template.format(wrap_base64(der))
