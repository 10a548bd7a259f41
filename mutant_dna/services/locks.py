# mutant_dna/services/locks.py
"""
Sharded per-fingerprint locks.

A fixed pool of locks indexed by the leading hex digits of the DNA hash.
The same hash always maps to the same lock, so concurrent analyses of
one DNA sample serialize. Different hashes may share a shard and then
serialize too; with the default 64 shards that contention is rare and
memory stays constant no matter how many samples are seen.

The locks are plain threading.Lock objects and are not fair: a waiting
thread is not guaranteed to acquire before a newer one.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Generator

# Hex digits of the hash used to pick a shard (32 bits)
SHARD_KEY_DIGITS = 8


class FingerprintLocks:
    """Fixed-size lock table keyed by DNA hash."""

    def __init__(self, shards: int = 64):
        if shards < 1:
            raise ValueError("shards must be >= 1")
        self._locks = [threading.Lock() for _ in range(shards)]

    def __len__(self) -> int:
        return len(self._locks)

    def shard_for(self, dna_hash: str) -> int:
        return int(dna_hash[:SHARD_KEY_DIGITS], 16) % len(self._locks)

    @contextmanager
    def hold(self, dna_hash: str) -> Generator[None, None, None]:
        """Hold the lock for `dna_hash` for the duration of the block."""
        with self._locks[self.shard_for(dna_hash)]:
            yield


__all__ = ["FingerprintLocks"]
