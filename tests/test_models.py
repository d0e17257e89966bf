import socket

import pytest
from pydantic import ValidationError

from sshkeygen.errors import GenerationFailure, UnsupportedKeyType
from sshkeygen.models import KeyAlgorithm, KeyRequest


@pytest.mark.parametrize("raw, expected", [
    ("rsa", KeyAlgorithm.RSA),
    ("RSA", KeyAlgorithm.RSA),
    (" Dsa ", KeyAlgorithm.DSA),
    (KeyAlgorithm.DSA, KeyAlgorithm.DSA),
])
def test_parse_algorithm(raw, expected):
    assert KeyAlgorithm.parse(raw) is expected


@pytest.mark.parametrize("raw", ["ed25519", "ecdsa", "", None, 1])
def test_parse_rejects_unknown(raw):
    with pytest.raises(UnsupportedKeyType) as ei:
        KeyAlgorithm.parse(raw)
    assert ei.value.key_type == raw
    assert str(raw) in str(ei.value)
    assert ei.value.help_id == "SSHUnsupportedKey"


def test_defaults():
    req = KeyRequest()
    assert req.algorithm is KeyAlgorithm.DSA
    assert req.bits == 1024
    assert req.comment == "backup-user@" + socket.gethostname()


def test_request_is_frozen():
    req = KeyRequest()
    with pytest.raises(ValidationError):
        req.bits = 2048  # type: ignore[misc]


def test_constructor_normalizes_case():
    assert KeyRequest(algorithm="RSA").algorithm is KeyAlgorithm.RSA


def test_bits_upper_bound():
    with pytest.raises(ValidationError):
        KeyRequest(bits=1 << 20)


def test_from_options_defaults():
    req = KeyRequest.from_options({})
    assert req == KeyRequest(algorithm=KeyAlgorithm.DSA, bits=0, comment="backup-user@" + socket.gethostname())


@pytest.mark.parametrize("bits_opt, expected", [("2048", 2048), (" 4096 ", 4096), ("abc", 1024), ("-3", -3)])
def test_from_options_bits(bits_opt, expected):
    assert KeyRequest.from_options({"key-bits": bits_opt}).bits == expected


def test_from_options_values():
    req = KeyRequest.from_options({"key-type": "RSA", "key-username": "alice", "key-bits": "1024"})
    assert req == KeyRequest(algorithm=KeyAlgorithm.RSA, bits=1024, comment="alice")


def test_from_options_unsupported():
    with pytest.raises(UnsupportedKeyType, match="ed25519"):
        KeyRequest.from_options({"key-type": "ed25519"})


def test_from_options_too_many_bits():
    with pytest.raises(GenerationFailure):
        KeyRequest.from_options({"key-type": "rsa", "key-bits": "20000"})


def test_from_options_empty_type_rejected():
    with pytest.raises(UnsupportedKeyType):
        KeyRequest.from_options({"key-type": ""})


def test_from_options_empty_username_kept():
    assert KeyRequest.from_options({"key-type": "rsa", "key-username": ""}).comment == ""


def test_constructor_reports_unsupported_type():
    with pytest.raises(ValidationError, match="Unsupported key type: ed25519"):
        KeyRequest(algorithm="ed25519")
