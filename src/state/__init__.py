"""
Snapshot encoding for stored vesting buckets
"""

from .canonical import bucket_bytes, bucket_digest

__all__ = [
    "bucket_bytes",
    "bucket_digest",
]
