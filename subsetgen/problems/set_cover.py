"""Exact minimum set cover by exhaustive subset enumeration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from subsetgen.config import ENUMERATION_CONFIG, EnumerationConfig
from subsetgen.generator import SubsetGenerator
from subsetgen.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SetCoverProblem:
    """A universe ``{0..universe-1}`` and candidate families covering it.

    Attributes:
        universe: Number of elements to cover.
        families: Candidate families, each a list of element ids.
    """

    universe: int
    families: List[List[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.universe < 0:
            raise ValueError(f"universe must be non-negative, got {self.universe}")
        for idx, family in enumerate(self.families):
            for element in family:
                if not 0 <= element < self.universe:
                    raise ValueError(
                        f"Family {idx} contains element {element} outside "
                        f"universe [0, {self.universe})"
                    )


@dataclass(frozen=True)
class SetCoverResult:
    """Outcome of :func:`solve_set_cover`.

    Attributes:
        optimum: Size of the smallest covering selection, or None if no
            selection of families covers the universe.
        selection: Family indices of one optimal selection.
        examined: Number of candidate selections inspected.
    """

    optimum: Optional[int]
    selection: Tuple[int, ...]
    examined: int

    def to_dict(self) -> dict:
        return {
            "kind": "set_cover",
            "optimum": self.optimum,
            "selection": list(self.selection),
            "examined": self.examined,
        }


def solve_set_cover(
    problem: SetCoverProblem, config: Optional[EnumerationConfig] = None
) -> SetCoverResult:
    """Find the fewest families whose union is the whole universe.

    Every non-empty selection of families is examined. Among selections of
    equal size the one enumerated last is kept.

    Args:
        problem: Problem instance.
        config: Enumeration limits; defaults to ``ENUMERATION_CONFIG``.

    Returns:
        SetCoverResult describing the optimum.

    Raises:
        ValueError: If the number of families exceeds ``config.max_items``.
    """
    config = config or ENUMERATION_CONFIG
    n = len(problem.families)
    if config.check_items(n):
        logger.warning(f"Set cover over {n} families examines 2^{n} selections")

    target: Set[int] = set(range(problem.universe))
    optimum: Optional[int] = None
    selection: Tuple[int, ...] = ()

    session = SubsetGenerator(problem.families).iter()
    for chosen in session:
        covered: Set[int] = set()
        for family in chosen:
            covered.update(family)

        if covered == target and (optimum is None or len(chosen) <= optimum):
            optimum = len(chosen)
            selection = session.indices

        if config.should_report(session.emitted):
            logger.debug(f"Examined {session.emitted} selections, best={optimum}")

    logger.info(
        f"Set cover: optimum={optimum} after examining {session.emitted} selections"
    )
    return SetCoverResult(
        optimum=optimum, selection=selection, examined=session.emitted
    )
