"""Pytest configuration and shared fixtures."""

from collections.abc import Callable

import pytest

from oracle_grader.difficulty import HashFunction
from oracle_grader.records import AssetRegistry, Record


def prefix_hash(data: bytes) -> bytes:
    """
    Fabricated hash primitive for hand-computable tests.

    Returns the first 8 bytes of the input. Difficulty is computed over
    record_hash + nonce, so a record whose record_hash is the 8-byte
    big-endian encoding of N has a verified difficulty of exactly N.
    """
    return data[:8].ljust(8, b"\x00")


@pytest.fixture
def fake_hash() -> HashFunction:
    """Hash primitive returning the first 8 bytes of its input."""
    return prefix_hash


@pytest.fixture
def registry() -> AssetRegistry:
    """Two-asset registry used throughout the tests."""
    return AssetRegistry(assets=("PEG", "USD"))


@pytest.fixture
def make_record() -> Callable[..., Record]:
    """
    Factory for records that are honest under prefix_hash.

    Usage in tests:
        def test_something(make_record):
            honest = make_record(1000, (100.0, 5.0))
            liar = make_record(1000, (100.0, 5.0), claimed=2**60)
    """

    def _make(
        difficulty: int,
        prices: tuple[float, ...] = (100.0, 5.0),
        *,
        claimed: int | None = None,
        nonce: bytes = b"nonce",
        refs: tuple[str, ...] = (),
        entry_id: bytes | None = None,
    ) -> Record:
        record_hash = difficulty.to_bytes(8, "big")
        return Record(
            nonce=nonce,
            record_hash=record_hash,
            claimed_difficulty=difficulty if claimed is None else claimed,
            prices=prices,
            prior_winner_refs=refs,
            entry_id=entry_id if entry_id is not None else record_hash + b"entry",
        )

    return _make
