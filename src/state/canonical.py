"""
Deterministic canonical encoding of bucket snapshots.

Used to compare stored buckets byte-for-byte (e.g. "a rejected claim leaves
state unchanged") and to key snapshots by digest in an external store.

Encoding: UTF-8 JSON, sorted keys, no whitespace, wrapped as
``{"bucket": {...}, "v": 1}``. Bucket fields are ints only.
"""

from __future__ import annotations

import hashlib
import json

from ..core.vesting.state import bucket_to_dict
from ..core.vesting.types import VestingBucket


CANONICAL_ENCODING_VERSION = 1


def bucket_bytes(bucket: VestingBucket) -> bytes:
    payload = {"v": CANONICAL_ENCODING_VERSION, "bucket": bucket_to_dict(bucket)}
    return json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")


def bucket_digest(bucket: VestingBucket) -> str:
    """``0x``-prefixed sha256 of ``bucket_bytes``."""
    return "0x" + hashlib.sha256(bucket_bytes(bucket)).hexdigest()
