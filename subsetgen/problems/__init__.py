"""Brute-force problem solvers built on :class:`subsetgen.SubsetGenerator`."""

from subsetgen.problems.set_cover import (
    SetCoverProblem,
    SetCoverResult,
    solve_set_cover,
)
from subsetgen.problems.subset_sum import (
    SubsetSumProblem,
    SubsetSumResult,
    solve_subset_sum,
)

__all__ = [
    "SetCoverProblem",
    "SetCoverResult",
    "solve_set_cover",
    "SubsetSumProblem",
    "SubsetSumResult",
    "solve_subset_sum",
]
