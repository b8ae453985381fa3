"""Tests for difficulty computation and verification."""

import hashlib
from unittest.mock import MagicMock

import pytest

from oracle_grader.difficulty import (
    DifficultyVerifier,
    VerifiedRecord,
    compute_difficulty,
    sha256_hash,
    sort_by_claimed_difficulty,
)
from oracle_grader.records import Record


class TestComputeDifficulty:
    """Tests for compute_difficulty."""

    def test_hashes_record_hash_then_nonce(self) -> None:
        """The primitive receives record_hash followed by nonce."""
        hash_fn = MagicMock(return_value=b"\x00" * 8)
        record = Record(nonce=b"NN", record_hash=b"HH", claimed_difficulty=0, prices=(1.0,))

        compute_difficulty(record, hash_fn)

        hash_fn.assert_called_once_with(b"HHNN")

    def test_first_8_bytes_big_endian(self) -> None:
        """Difficulty is the big-endian uint64 of the first 8 digest bytes."""
        digest = bytes([0, 0, 0, 0, 0, 0, 1, 2]) + b"\xff" * 24
        record = Record(nonce=b"n", record_hash=b"h", claimed_difficulty=0, prices=(1.0,))

        assert compute_difficulty(record, lambda _: digest) == 258

    def test_max_value(self) -> None:
        """All-ones digest gives the maximum uint64."""
        record = Record(nonce=b"n", record_hash=b"h", claimed_difficulty=0, prices=(1.0,))

        assert compute_difficulty(record, lambda _: b"\xff" * 8) == 2**64 - 1

    def test_short_digest_rejected(self) -> None:
        """A primitive returning fewer than 8 bytes is an error."""
        record = Record(nonce=b"n", record_hash=b"h", claimed_difficulty=0, prices=(1.0,))

        with pytest.raises(ValueError, match="at least 8"):
            compute_difficulty(record, lambda _: b"\x01" * 7)

    def test_default_primitive_is_sha256(self) -> None:
        """Default primitive is SHA-256."""
        record = Record(nonce=b"n", record_hash=b"h", claimed_difficulty=0, prices=(1.0,))
        expected = int.from_bytes(hashlib.sha256(b"hn").digest()[:8], "big")

        assert sha256_hash(b"hn") == hashlib.sha256(b"hn").digest()
        assert compute_difficulty(record) == expected


class TestSortByClaimedDifficulty:
    """Tests for sort_by_claimed_difficulty."""

    def test_descending(self, make_record) -> None:
        """Highest claimed difficulty first."""
        records = [make_record(5), make_record(50), make_record(20)]

        result = sort_by_claimed_difficulty(records)

        assert [r.claimed_difficulty for r in result] == [50, 20, 5]

    def test_equal_claims_ordered_by_identity_key(self, make_record) -> None:
        """Ties are broken by identity key, independent of input order."""
        a = make_record(1, nonce=b"a", claimed=100)
        b = make_record(2, nonce=b"b", claimed=100)

        assert sort_by_claimed_difficulty([b, a]) == [a, b]
        assert sort_by_claimed_difficulty([a, b]) == [a, b]


class TestDifficultyVerifier:
    """Tests for DifficultyVerifier."""

    def test_all_honest_below_limit(self, fake_hash, make_record) -> None:
        """All honest records are kept when fewer than limit exist."""
        records = [make_record(d) for d in (300, 200, 100)]
        verifier = DifficultyVerifier(hash_fn=fake_hash, limit=50)

        result = verifier.verify(records)

        assert [v.verified_difficulty for v in result.honest] == [300, 200, 100]
        assert result.hashes_computed == 3
        assert result.dishonest_count == 0
        assert not result.reached_limit

    def test_dishonest_skipped(self, fake_hash, make_record) -> None:
        """Records whose claim doesn't match are dropped."""
        liar = make_record(10, claimed=10**12)
        honest = make_record(500)
        verifier = DifficultyVerifier(hash_fn=fake_hash, limit=50)

        result = verifier.verify(sort_by_claimed_difficulty([honest, liar]))

        assert [v.record for v in result.honest] == [honest]
        assert result.dishonest_count == 1

    def test_stops_at_limit(self, fake_hash, make_record) -> None:
        """Scanning stops once limit honest records are found."""
        records = sort_by_claimed_difficulty([make_record(d) for d in range(1, 21)])
        hash_fn = MagicMock(side_effect=fake_hash)
        verifier = DifficultyVerifier(hash_fn=hash_fn, limit=5)

        result = verifier.verify(records)

        assert [v.verified_difficulty for v in result.honest] == [20, 19, 18, 17, 16]
        assert result.reached_limit
        assert hash_fn.call_count == 5

    def test_hash_cost_bounded_by_limit_plus_misreported(
        self, fake_hash, make_record
    ) -> None:
        """Hashes = limit + misreported records seen before limit is reached."""
        liars = [make_record(d, claimed=10**9 + d) for d in range(1, 4)]
        honest = [make_record(d) for d in range(100, 130)]
        hash_fn = MagicMock(side_effect=fake_hash)
        verifier = DifficultyVerifier(hash_fn=hash_fn, limit=10)

        result = verifier.verify(sort_by_claimed_difficulty(liars + honest))

        assert result.honest_count == 10
        assert result.dishonest_count == 3
        assert hash_fn.call_count == 13
        assert result.hashes_computed == 13

    def test_verified_record_is_honest(self, make_record) -> None:
        """VerifiedRecord.is_honest compares against the claim."""
        record = make_record(42)

        assert VerifiedRecord(record=record, verified_difficulty=42).is_honest
        assert not VerifiedRecord(record=record, verified_difficulty=41).is_honest

    def test_invalid_limit(self, fake_hash) -> None:
        """Limit must be positive."""
        with pytest.raises(ValueError, match="positive"):
            DifficultyVerifier(hash_fn=fake_hash, limit=0)

    def test_to_dict(self, fake_hash, make_record) -> None:
        """to_dict summarises the scan."""
        verifier = DifficultyVerifier(hash_fn=fake_hash, limit=1)

        result = verifier.verify([make_record(9, claimed=10), make_record(8)])

        assert result.to_dict() == {
            "honest_count": 1,
            "dishonest_count": 1,
            "hashes_computed": 2,
            "limit": 1,
            "reached_limit": True,
        }
