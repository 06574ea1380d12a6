"""subsetgen: lazy power-set enumeration.

Walks every subset of an ordered collection one at a time with O(N) working
memory, for brute-force and fixed-parameter-tractable searches that cannot
afford to materialize all 2^N subsets.

Primary API:
    SubsetGenerator - Configuration over a borrowed sequence
    SubsetIterator - One independent enumeration session
    subset_count() - Number of subsets a full session yields

Example:
    from subsetgen import SubsetGenerator

    for subset in SubsetGenerator([3, 34, 4, 12, 5, 2]):
        if sum(subset) == 9:
            break
"""

from __future__ import annotations

from subsetgen import cli, logging
from subsetgen._version import __version__
from subsetgen.config import ENUMERATION_CONFIG, EnumerationConfig
from subsetgen.generator import SubsetGenerator, SubsetIterator, subset_count
from subsetgen.problems import (
    SetCoverProblem,
    SetCoverResult,
    SubsetSumProblem,
    SubsetSumResult,
    solve_set_cover,
    solve_subset_sum,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "SubsetGenerator",
    "SubsetIterator",
    "subset_count",
    # Configuration
    "EnumerationConfig",
    "ENUMERATION_CONFIG",
    # Example problems
    "SetCoverProblem",
    "SetCoverResult",
    "solve_set_cover",
    "SubsetSumProblem",
    "SubsetSumResult",
    "solve_subset_sum",
    # Utilities
    "cli",
    "logging",
]
