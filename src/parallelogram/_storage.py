"""Saving and loading alignment results with version and SHA-256 checks."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Any

import msgpack

from ._errors import (
    ParallelogramChecksumError,
    ParallelogramError,
    ParallelogramVersionError,
)
from ._types import AlignmentResult, Coordinates

_FORMAT_VERSION = "1.0"


def _sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def _unpack(data: bytes, what: str) -> Any:
    try:
        return msgpack.unpackb(data, raw=False)
    except (TypeError, ValueError, msgpack.exceptions.UnpackException) as e:
        raise ParallelogramError(f"Malformed {what}: {e}") from e


def dumps(result: AlignmentResult) -> bytes:
    """Serialize `result` into a checksummed msgpack envelope."""
    body = msgpack.packb({
        "n_a": result.n_a,
        "n_b": result.n_b,
        "anchors": [[c.x, c.y] for c in result.anchors],
        "coverage": list(result.coverage),
    })
    return msgpack.packb({
        "version": _FORMAT_VERSION,
        "sha256": _sha256(body),
        "body": body,
    })


def loads(data: bytes) -> AlignmentResult:
    """Rebuild an AlignmentResult from bytes produced by `dumps`."""
    envelope = _unpack(data, "alignment envelope")
    if not isinstance(envelope, dict):
        raise ParallelogramError("Malformed alignment envelope: not a map")

    version = envelope.get("version")
    if version != _FORMAT_VERSION:
        raise ParallelogramVersionError(
            f"Expected format version {_FORMAT_VERSION!r}, got {version!r}"
        )

    body = envelope.get("body")
    expected = envelope.get("sha256")
    if not isinstance(body, bytes) or not isinstance(expected, str):
        raise ParallelogramError(
            "Malformed alignment envelope: missing body or digest"
        )
    actual = _sha256(body)
    if actual != expected:
        raise ParallelogramChecksumError(
            f"Checksum mismatch: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )

    raw = _unpack(body, "alignment body")
    try:
        return AlignmentResult.from_anchors(
            n_a=raw["n_a"],
            n_b=raw["n_b"],
            anchors=(Coordinates(x, y) for x, y in raw["anchors"]),
            coverage=raw["coverage"],
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ParallelogramError(f"Malformed alignment body: {e}") from e


def save(result: AlignmentResult, path: Path | str) -> None:
    """Write `result` to `path`."""
    with open(path, "wb") as f:
        f.write(dumps(result))


def load(path: Path | str) -> AlignmentResult:
    """Read an AlignmentResult written by `save`."""
    path = Path(path)
    if not path.exists():
        raise ParallelogramError(f"Alignment file not found: {path}")
    with open(path, "rb") as f:
        return loads(f.read())
