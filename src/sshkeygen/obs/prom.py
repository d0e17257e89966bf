"""Prometheus instrumentation for the key generator.

A private registry keeps these series separate from anything the embedding
process registers globally. Labels stay low-cardinality: algorithm and a
collapsed rejection reason.
"""
from __future__ import annotations
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    CONTENT_TYPE_LATEST,
)

REGISTRY = CollectorRegistry()

KEYS_GENERATED = Counter(
    "sshkeygen_keys_generated_total",
    "Key pairs generated and encoded.",
    ["algorithm"],
    registry=REGISTRY,
)
REQUESTS_REJECTED = Counter(
    "sshkeygen_requests_rejected_total",
    "Requests refused before a bundle was produced.",
    ["reason"],
    registry=REGISTRY,
)
GEN_SECONDS = Histogram(
    "sshkeygen_generation_seconds",
    "Wall time spent generating key material.",
    ["algorithm"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10, 30, 60),
    registry=REGISTRY,
)


def observe_generated(*, algorithm: str, seconds: float):
    KEYS_GENERATED.labels(algorithm=algorithm).inc()
    GEN_SECONDS.labels(algorithm=algorithm).observe(seconds)


def observe_rejected(reason: str):
    REQUESTS_REJECTED.labels(reason=reason).inc()


def prometheus_latest() -> tuple[bytes, str]:
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST
