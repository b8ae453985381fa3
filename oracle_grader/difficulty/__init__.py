"""
Difficulty verification module.

Submitters self-report a proof-of-work difficulty. Instead of hashing every
submission, records are sorted by their claim and hashed in that order until
enough honest ones are found. Misreported claims are skipped silently.

Usage:
    from oracle_grader.difficulty import DifficultyVerifier, sort_by_claimed_difficulty

    verifier = DifficultyVerifier(hash_fn=my_hash, limit=50)
    result = verifier.verify(sort_by_claimed_difficulty(records))
"""

from .hashing import DIFFICULTY_BYTES, HashFunction, compute_difficulty, sha256_hash
from .models import VerificationResult, VerifiedRecord
from .verifier import DifficultyVerifier, sort_by_claimed_difficulty

__all__ = [
    # Main components
    "DifficultyVerifier",
    "sort_by_claimed_difficulty",
    # Hashing
    "HashFunction",
    "compute_difficulty",
    "sha256_hash",
    "DIFFICULTY_BYTES",
    # Result models
    "VerifiedRecord",
    "VerificationResult",
]
