"""Factory functions for creating block graders."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..difficulty import sha256_hash
from .base import BlockGrader
from .versions import VERSION_PARAMS, resolve_version

if TYPE_CHECKING:
    from ..difficulty import HashFunction
    from ..incentives import RewardSchedule
    from ..records import AssetRegistry

logger = logging.getLogger(__name__)


def create_grader(
    version: int,
    height: int,
    previous_winners: Sequence[str],
    registry: AssetRegistry,
    hash_fn: HashFunction = sha256_hash,
    schedule: RewardSchedule | None = None,
) -> BlockGrader:
    """
    Create a block grader for a specific protocol version.

    This is the main entry point for the grader module.
    Once created, the height and list of previous winners can't be changed.

    Args:
        version: Protocol version number (see GraderVersion)
        height: Block height being graded
        previous_winners: Short hashes of the previous height's winners,
            empty if it had none
        registry: Asset registry price vectors must match
        hash_fn: Hash primitive for difficulty verification
        schedule: Optional custom reward schedule

    Returns:
        Ready-to-use BlockGrader

    Raises:
        UnsupportedVersionError: If the version is unknown

    Example:
        grader = create_grader(2, height=210_000, previous_winners=prev, registry=registry)
        grader.add_records(records)
        result = grader.grade()
    """
    grader_version = resolve_version(version)
    params = VERSION_PARAMS[grader_version]

    logger.debug(
        f"Creating V{int(grader_version)} grader for height {height} ({params.to_dict()})"
    )

    return BlockGrader(
        version=grader_version,
        params=params,
        height=height,
        previous_winners=previous_winners,
        registry=registry,
        hash_fn=hash_fn,
        schedule=schedule,
    )
