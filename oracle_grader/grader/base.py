"""Block grader: the full grading pipeline for one block height."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from ..difficulty import DifficultyVerifier, sort_by_claimed_difficulty
from ..duplicate_detection import find_duplicate_groups, remove_duplicate_submissions
from ..grading import GradingEngine
from ..incentives import RewardSchedule, WinnerSelectionConfig, WinnerSelector
from ..records import filter_malformed
from ..references import WinnerReferenceVerifier
from .errors import GraderStateError
from .models import BlockGradingResult

if TYPE_CHECKING:
    from ..difficulty import HashFunction
    from ..grading import GradedRecord
    from ..records import AssetRegistry, Record
    from .versions import GraderVersion, GradingParams

logger = logging.getLogger(__name__)


class BlockGrader:
    """
    Grades the submission set of a single block height.

    Height and previous winners are fixed at construction. Records are
    added before grading; grade() runs the pipeline once and caches the
    result, so later calls return the same result without recomputing.

    Pipeline steps:
    1. Remove duplicate submissions (same nonce + record hash)
    2. Exclude records whose price vector doesn't match the registry
    3. Sort by claimed difficulty, verify claims until `limit` honest found
    4. Grade iteratively down to `minimum` records
    5. Select winners and compute payouts

    Prefer create_grader() over constructing directly.
    """

    def __init__(
        self,
        version: GraderVersion,
        params: GradingParams,
        height: int,
        previous_winners: Sequence[str],
        registry: AssetRegistry,
        hash_fn: HashFunction,
        schedule: RewardSchedule | None = None,
    ):
        """
        Initialize grader with all dependencies.

        Args:
            version: Protocol version this grader implements
            params: Grading rule set for the version
            height: Block height being graded
            previous_winners: Short hashes of the previous height's winners
            registry: Asset registry price vectors must match
            hash_fn: Hash primitive for difficulty verification
            schedule: Reward schedule. Uses defaults if None.
        """
        self._version = version
        self._params = params
        self._height = height
        self._previous_winners = tuple(previous_winners)
        self._registry = registry

        self._verifier = DifficultyVerifier(hash_fn=hash_fn, limit=params.limit)
        self._engine = GradingEngine(
            registry, minimum=params.minimum, band=params.band
        )
        self._selector = WinnerSelector(
            WinnerSelectionConfig(winner_count=params.winner_count)
        )
        self._schedule = schedule or RewardSchedule()
        self._references = WinnerReferenceVerifier(
            self._previous_winners, winner_count=params.winner_count
        )

        self._records: list[Record] = []
        self._result: BlockGradingResult | None = None

    @property
    def version(self) -> GraderVersion:
        """Protocol version of this grader."""
        return self._version

    @property
    def params(self) -> GradingParams:
        """Grading rule set in use."""
        return self._params

    @property
    def height(self) -> int:
        """Block height the grader is set to."""
        return self._height

    @property
    def previous_winners(self) -> tuple[str, ...]:
        """Short hashes of the previous height's winners."""
        return self._previous_winners

    @property
    def count(self) -> int:
        """
        Number of records currently held.

        Once graded, this may be less than the number added because of
        duplicate, malformed and difficulty checks.
        """
        return len(self._records)

    @property
    def is_graded(self) -> bool:
        """True once grade() has run."""
        return self._result is not None

    @property
    def winners(self) -> tuple[GradedRecord, ...]:
        """Winners in rank order. Empty before grading or when there are none."""
        if self._result is None:
            return ()
        return self._result.winners

    @property
    def graded(self) -> tuple[GradedRecord, ...]:
        """Full graded ranking. Empty before grading."""
        if self._result is None:
            return ()
        return self._result.graded

    def add_record(self, record: Record) -> None:
        """
        Add a candidate record.

        Raises:
            GraderStateError: If the block was already graded
        """
        if self._result is not None:
            raise GraderStateError(
                f"Cannot add records to height {self._height} after grading"
            )
        self._records.append(record)

    def add_records(self, records: Iterable[Record]) -> None:
        """Add a batch of candidate records. See add_record()."""
        for record in records:
            self.add_record(record)

    def verify_references(self, record: Record) -> bool:
        """Check a record's references against this height's previous winners."""
        return self._references.verify(record)

    def grade(self) -> BlockGradingResult:
        """
        Run the grading pipeline.

        Only the first call computes; subsequent calls return the cached
        result unchanged.

        Returns:
            BlockGradingResult. Empty winners if fewer than `minimum`
            honest unique records exist.
        """
        if self._result is not None:
            logger.debug(f"Height {self._height} already graded, returning cached result")
            return self._result

        submitted = len(self._records)
        for group in find_duplicate_groups(self._records):
            logger.debug(
                f"Height {self._height}: identity key {group.identity_key.hex()[:16]} "
                f"submitted {group.occurrences} times, keeping index {group.first_index}"
            )
        unique = remove_duplicate_submissions(self._records)
        well_formed, _ = filter_malformed(unique, self._registry)
        ordered = sort_by_claimed_difficulty(well_formed)

        verification = self._verifier.verify(ordered)
        grading = self._engine.grade(verification.honest)
        selection = self._selector.select_winners(grading.ranked)
        payouts = self._schedule.payouts(selection.winners)

        self._records = [v.record for v in verification.honest]

        self._result = BlockGradingResult(
            height=self._height,
            version=self._version,
            records=tuple(ordered),
            graded=grading.ranked,
            winners=selection.winners,
            payouts=payouts,
            verification=verification,
            grading=grading,
        )

        if self._result.is_empty:
            logger.info(
                f"Height {self._height}: no winners "
                f"({verification.honest_count} honest of {submitted} submitted)"
            )
        else:
            logger.info(
                f"Height {self._height}: graded {verification.honest_count} honest "
                f"of {submitted} submitted, {len(selection.winners)} winners"
            )

        return self._result
