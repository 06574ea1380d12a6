"""Subset-sum decision by exhaustive subset enumeration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from subsetgen.config import ENUMERATION_CONFIG, EnumerationConfig
from subsetgen.generator import SubsetGenerator
from subsetgen.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SubsetSumProblem:
    """Integer values and the sum a non-empty selection of them must reach.

    Attributes:
        values: Candidate values; duplicates are distinct items.
        target: Sum to reach.
    """

    values: List[int] = field(default_factory=list)
    target: int = 0


@dataclass(frozen=True)
class SubsetSumResult:
    """Outcome of :func:`solve_subset_sum`.

    Attributes:
        found: Whether a non-empty subset sums to the target.
        subset: Values of the first matching subset (empty if none).
        indices: Positions of those values in the problem's value list.
        examined: Number of subsets inspected before stopping.
    """

    found: bool
    subset: Tuple[int, ...] = ()
    indices: Tuple[int, ...] = ()
    examined: int = 0

    def to_dict(self) -> dict:
        return {
            "kind": "subset_sum",
            "found": self.found,
            "subset": list(self.subset),
            "indices": list(self.indices),
            "examined": self.examined,
        }


def solve_subset_sum(
    problem: SubsetSumProblem, config: Optional[EnumerationConfig] = None
) -> SubsetSumResult:
    """Search for a non-empty subset of ``problem.values`` summing to the target.

    Stops at the first match. The empty subset is never considered, so a
    target of 0 is only reachable through values that cancel out.
    """
    config = config or ENUMERATION_CONFIG
    n = len(problem.values)
    if config.check_items(n):
        logger.warning(f"Subset sum over {n} values examines up to 2^{n} subsets")

    session = SubsetGenerator(problem.values).iter()
    for subset in session:
        if sum(subset) == problem.target:
            logger.info(
                f"Subset sum: found {subset} = {problem.target} "
                f"after {session.emitted} subsets"
            )
            return SubsetSumResult(
                found=True,
                subset=tuple(subset),
                indices=session.indices,
                examined=session.emitted,
            )
        if config.should_report(session.emitted):
            logger.debug(f"Examined {session.emitted} subsets")

    logger.info(
        f"Subset sum: no subset reaches {problem.target} "
        f"({session.emitted} subsets examined)"
    )
    return SubsetSumResult(found=False, examined=session.emitted)
