"""
Duplicate detection module for repeated submissions.

This module provides:
- Deduplication by identity key (nonce + record hash), first occurrence wins
- Duplicate group listing for logging and diagnostics

Usage:
    from oracle_grader.duplicate_detection import remove_duplicate_submissions

    unique = remove_duplicate_submissions(records)
"""

from .deduplicator import find_duplicate_groups, remove_duplicate_submissions
from .models import DuplicateGroup

__all__ = [
    "remove_duplicate_submissions",
    "find_duplicate_groups",
    "DuplicateGroup",
]
