from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import DEFAULT_KEY_BITS, DEFAULT_KEY_TYPE, DEFAULT_USERNAME
from .engine import generate_bundle
from .errors import GenerationFailure, UnsupportedKeyType
from .models import KeyAlgorithm, KeyRequest


def _write_key_files(out: Path, privkeyfile: str, pubkey: str) -> None:
    out.parent.mkdir(parents=True, exist_ok=True)
    # private key readable by owner only
    fd = os.open(out, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    if hasattr(os, "fchmod"):
        # O_CREAT mode is ignored when the file already exists
        os.fchmod(fd, 0o600)
    with os.fdopen(fd, "w", newline="\n") as f:
        f.write(privkeyfile)
    pub = out.with_name(out.name + ".pub")
    pub.write_text(pubkey + "\n")


def cmd_generate(args: argparse.Namespace) -> int:
    try:
        req = KeyRequest(
            algorithm=KeyAlgorithm.parse(args.type),
            bits=args.bits,
            comment=args.comment,
        )
        bundle = generate_bundle(req)
    except (UnsupportedKeyType, GenerationFailure, ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if args.output:
        out = Path(args.output)
        _write_key_files(out, bundle.privkeyfile, bundle.pubkey)
        print(f"wrote {out} and {out}.pub")
    else:
        print(json.dumps(bundle.as_dict(), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser("sshkeygen", description="Generate an SSH key pair")
    p.add_argument("--type", default=DEFAULT_KEY_TYPE, help="rsa or dsa (case-insensitive)")
    p.add_argument("--bits", type=int, default=DEFAULT_KEY_BITS, help="key length; <= 0 uses the default")
    p.add_argument("--comment", default=DEFAULT_USERNAME)
    p.add_argument("--output", help="write PEM to this path and the public key to PATH.pub")
    p.set_defaults(func=cmd_generate)

    args = p.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
